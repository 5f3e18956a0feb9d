#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# exceptions.py

"""typedmap exceptions.

Every error derives from |TypedMapError| and from the builtin exception that
best describes it, so callers may catch either.
"""


class TypedMapError(Exception):
    """Base class for all typedmap errors."""


class ConfigurationError(TypedMapError, ValueError):
    """The permitted types of a map, or a configuration option, are invalid."""


class ReinitializationError(TypedMapError, RuntimeError):
    """A map was initialized more than once."""

    def __init__(self, cls):
        self.cls = cls
        super().__init__("Cannot reinitialize map '{}'.".format(cls.__name__))


class UninitializedError(TypedMapError, RuntimeError):
    """A map was used before it was initialized."""

    def __init__(self, cls):
        self.cls = cls
        super().__init__("Map '{}' is not initialized.".format(cls.__name__))


class InvalidKeyError(TypedMapError, ValueError):
    """A key is not a non-empty string."""


class InvalidTypeError(TypedMapError, TypeError):
    """A value is not an instance of any of the permitted types."""


class KeyNotFoundError(TypedMapError, KeyError):
    """A key is absent and no default was provided."""

    def __init__(self, key, message=None):
        self.key = key
        super().__init__(message or "Key '{}' not found.".format(key))

    def __str__(self):
        # Avoid the quoting that ``KeyError.__str__`` applies
        return str(self.args[0])


class TypeMismatchBetweenMapsError(TypedMapError, TypeError):
    """A binary map operation was given a map of another configuration."""


class EmptyMapError(TypedMapError, IndexError):
    """An element was requested from an empty map."""
