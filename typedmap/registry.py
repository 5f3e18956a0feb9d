#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# registry.py

"""
A registry of named types used to resolve the permitted types of a map.

Permitted types are declared as opaque strings. Most classes can be named
directly (by ``__qualname__`` or ``module.qualname``), but abstract base
classes used as interfaces must be registered so that ``isinstance`` can take
virtual subclasses into account::

    from typedmap.registry import types

    @types.register('PointLike')
    class PointLike(abc.ABC):
        ...
"""

import collections.abc
import importlib
import inspect
import logging

log = logging.getLogger(__name__)


def type_names(cls):
    """Return the names under which ``cls`` can be referred to."""
    return {cls.__name__, cls.__qualname__,
            '{}.{}'.format(cls.__module__, cls.__qualname__)}


def import_type(name):
    """Import the class at the dotted path ``name``.

    Returns ``None`` if ``name`` is not an importable class.
    """
    module_name, _, attr = name.rpartition('.')
    if not module_name or module_name.startswith('.'):
        return None
    try:
        module = importlib.import_module(module_name)
    except (ImportError, TypeError, ValueError):
        return None
    obj = getattr(module, attr, None)
    return obj if inspect.isclass(obj) else None


class TypeRegistry(collections.abc.Mapping):
    """Registry of classes under user-chosen names."""
    desc = 'types'

    def __init__(self):
        self.store = {}

    def register(self, name=None):
        """Decorator for registering a class under a type name.

        Args:
            name (string): The name of the type. Defaults to the class'
                ``__qualname__``.
        """
        def register_type(cls):
            if not inspect.isclass(cls):
                raise TypeError('Only classes can be registered; '
                                'got {!r}'.format(cls))
            self.store[name or cls.__qualname__] = cls
            log.debug('Registered type %s as "%s"', cls, name or cls.__qualname__)
            return cls
        return register_type

    def all(self):
        """Return a list of all registered type names."""
        return list(self)

    def __iter__(self):
        return iter(self.store)

    def __len__(self):
        return len(self.store)

    def __getitem__(self, name):
        try:
            return self.store[name]
        except KeyError:
            raise KeyError(
                '"{}" not found. Try using one of the installed {} {} or '
                'register your own.'.format(name, self.desc, self.all()))

    def resolve(self, name):
        """Return the class registered or importable as ``name``, if any."""
        if name in self.store:
            return self.store[name]
        return import_type(name)

    def is_member(self, value, names):
        """Return whether ``value`` is an instance of any of the named types.

        A name matches if it is registered and ``value`` is an instance of the
        registered class, if it names a class in the MRO of ``value``, or if
        it is the dotted path of an importable class of which ``value`` is an
        instance.
        """
        mro_names = set().union(*map(type_names, type(value).__mro__))
        for name in names:
            if name in self.store:
                if isinstance(value, self.store[name]):
                    return True
            elif name in mro_names:
                return True
            else:
                cls = import_type(name)
                if cls is not None and isinstance(value, cls):
                    return True
        return False


#: The default registry consulted by typed maps.
types = TypeRegistry()
