# -*- coding: utf-8 -*-
# __init__.py

"""
========
typedmap
========

typedmap provides immutable, type-constrained maps for building domain
objects such as collections of events, aggregates, or value objects.


Usage
~~~~~

Subclass |TypedMap| and declare the names of the permitted types:

    >>> from typedmap import TypedMap
    >>> class Tags(TypedMap):
    ...     VALID_TYPES = ('str',)
    >>> tags = Tags({'color': 'red'})
    >>> tags.with_('size', 'large').keys()
    ['color', 'size']

Every transform (``with_``, ``without``, ``merge``, ``intersect``, ``diff``,
``filter``, ``map``, ``empty``) returns a new map; the receiver is never
altered. Values are copied whenever they enter or leave a map.

Abstract base classes used as interfaces are registered under a name with
``typedmap.types.register``.


Configuration (optional)
~~~~~~~~~~~~~~~~~~~~~~~~

Package-level options are loaded from a YAML configuration file,
``typedmap_config.yml``, in the directory where typedmap is run. If there is
no such file, the default configuration is used. See the documentation for
the |conf| module for a description of the options and their defaults.
"""

from .__about__ import *
from .conf import config
from .data_structures import FrozenMap, HashableOrderedSet, OrderedMap
from .exceptions import (
    ConfigurationError,
    EmptyMapError,
    InvalidKeyError,
    InvalidTypeError,
    KeyNotFoundError,
    ReinitializationError,
    TypedMapError,
    TypeMismatchBetweenMapsError,
    UninitializedError,
)
from .registry import TypeRegistry, types
from .typed_map import SingleTypeMap, TypedMap
from .variants import PlainMap, typed_map_class

__all__ = [
    "config",
    "ConfigurationError",
    "EmptyMapError",
    "FrozenMap",
    "HashableOrderedSet",
    "InvalidKeyError",
    "InvalidTypeError",
    "KeyNotFoundError",
    "OrderedMap",
    "PlainMap",
    "ReinitializationError",
    "SingleTypeMap",
    "TypedMap",
    "TypedMapError",
    "TypeMismatchBetweenMapsError",
    "TypeRegistry",
    "UninitializedError",
    "typed_map_class",
    "types",
]
