# -*- coding: utf-8 -*-
# typed_map.py

"""
Immutable, type-constrained maps.

A |TypedMap| maps non-empty string keys to objects that are instances of at
least one of a declared set of permitted types. Maps are never mutated once
initialized: every operation that looks like a mutation returns a new map,
and values are copied whenever they enter or leave a map, so that callers can
never alias the objects a map holds.

Concrete maps fix the permitted types, either by setting ``VALID_TYPES``::

    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class Point:
    ...     x: int
    ...     y: int
    >>> class Points(TypedMap):
    ...     VALID_TYPES = ('Point',)
    >>> points = Points({'a': Point(1, 1)})
    >>> points.with_('b', Point(2, 2)).keys()
    ['a', 'b']
    >>> points.keys()
    ['a']

or by calling ``_init()`` from their own constructor.
"""

import collections.abc
import copy
import logging

from . import validate
from .data_structures import FrozenMap, HashableOrderedSet, OrderedMap
from .exceptions import (
    EmptyMapError,
    InvalidKeyError,
    KeyNotFoundError,
    ReinitializationError,
)
from .utils import copy_value, truncated_repr

log = logging.getLogger(__name__)

_MISSING = object()


def _entries(entries):
    """Return the ``(key, value)`` pairs of a mapping or iterable of pairs."""
    if isinstance(entries, collections.abc.Mapping):
        return entries.items()
    return entries


class TypedMap(collections.abc.Mapping):
    """Base class for immutable maps constrained to a set of permitted types.

    Values are copied on the way in and on the way out (see
    ``config.COPY_STRATEGY``), so reading from or iterating over a map always
    yields objects the caller owns. Use :meth:`unwrap` for read-only access to
    the stored objects themselves.

    Subclasses either set ``VALID_TYPES`` to a sequence of type names, in
    which case the inherited constructor initializes the map, or call
    :meth:`_init` exactly once from their own constructor.

    Keyword Args:
        entries (Mapping | Iterable[tuple[str, object]]): The initial entries.
    """

    #: The names of the permitted types of instances of this class.
    VALID_TYPES = None

    _store = None
    _valid_types = None

    def __init__(self, entries=()):
        if self.VALID_TYPES is not None:
            self._init(entries, self.VALID_TYPES)

    def _init(self, entries, valid_types):
        """Initialize the map. This may only be called once per instance.

        Raises:
            ReinitializationError: If the map was already initialized.
            ConfigurationError: If ``valid_types`` is empty or contains
                anything but non-empty strings.
            InvalidKeyError: If a key is not a non-empty string.
            InvalidTypeError: If a value is not of a permitted type.
        """
        if self._store is not None:
            raise ReinitializationError(type(self))
        if isinstance(valid_types, collections.abc.Iterator):
            valid_types = list(valid_types)
        validate.valid_types(valid_types, owner=type(self).__name__)
        valid_types = HashableOrderedSet(valid_types)

        store = OrderedMap()
        for key, value in _entries(entries):
            validate.key(key)
            validate.member(value, valid_types, owner=type(self).__name__)
            store.put(key, copy_value(value))

        self._valid_types = valid_types
        self._store = store
        log.debug(
            "Initialized %s with %d entries of types %s",
            type(self).__name__, len(store), list(valid_types),
        )

    # Clone protocol
    # =========================================================================

    def _shell(self, store):
        """Return a shallow copy of this map holding ``store``."""
        cls = self.__class__
        clone = cls.__new__(cls)
        clone.__dict__.update(self.__dict__)
        clone._store = store
        return clone

    def __copy__(self):
        validate.initialized(self)
        return self._shell(self._store.map(copy_value))

    def _clone(self):
        return copy.copy(self)

    def _assert_member(self, value):
        validate.member(value, self._valid_types, owner=type(self).__name__)

    # Queries
    # =========================================================================

    @property
    def valid_types(self):
        """HashableOrderedSet[str]: The names of the permitted types."""
        validate.initialized(self)
        return self._valid_types

    def get_valid_types(self):
        return self.valid_types

    def keys(self):
        """Return the keys, in insertion order."""
        validate.initialized(self)
        return self._store.keys()

    def has(self, key):
        """Return whether ``key`` is in the map.

        Raises:
            InvalidKeyError: If ``key`` is not a non-empty string.
        """
        validate.initialized(self)
        validate.key(key)
        return self._store.has_key(key)

    __contains__ = has

    def get(self, key, default=_MISSING):
        """Return a copy of the value stored under ``key``.

        If ``key`` is absent, return a copy of ``default`` if it was given
        (``None`` is returned as is); otherwise raise ``KeyNotFoundError``.

        Raises:
            InvalidKeyError: If ``key`` is not a non-empty string.
            InvalidTypeError: If ``default`` is not ``None`` and not of a
                permitted type.
            KeyNotFoundError: If ``key`` is absent and no default was given.
        """
        validate.initialized(self)
        validate.key(key)
        if default is _MISSING:
            if not self._store.has_key(key):
                raise KeyNotFoundError(
                    key, "Key '{}' not found and no default provided.".format(key)
                )
            return copy_value(self._store.get(key))
        if default is not None:
            self._assert_member(default)
        value = self._store.get(key, default)
        return None if value is None else copy_value(value)

    def __getitem__(self, key):
        return self.get(key)

    def first(self):
        """Return a copy of the first value, in insertion order."""
        validate.initialized(self)
        try:
            return copy_value(self._store.first()[1])
        except IndexError:
            raise EmptyMapError(
                "Cannot get the first value of empty map '{}'.".format(
                    type(self).__name__))

    def last(self):
        """Return a copy of the last value, in insertion order."""
        validate.initialized(self)
        try:
            return copy_value(self._store.last()[1])
        except IndexError:
            raise EmptyMapError(
                "Cannot get the last value of empty map '{}'.".format(
                    type(self).__name__))

    def is_empty(self):
        validate.initialized(self)
        return self._store.is_empty()

    def count(self):
        validate.initialized(self)
        return self._store.count()

    def __len__(self):
        return self.count()

    def __iter__(self):
        validate.initialized(self)
        return iter(self._store.keys())

    def find(self, value):
        """Return the key of the first stored value equal to ``value``.

        Values are compared with ``==`` rather than by identity, since the map
        only ever holds copies of the objects it was given. Returns ``None``
        if no value matches.

        Raises:
            InvalidTypeError: If ``value`` is not of a permitted type.
        """
        validate.initialized(self)
        self._assert_member(value)
        for key, stored in self._store.items():
            if stored == value:
                return key
        return None

    def search(self, predicate):
        """Return the first key whose value satisfies ``predicate(value)``,
        or ``None``. The predicate is given copies of the stored values."""
        validate.initialized(self)
        for key, value in self.items():
            if predicate(value):
                return key
        return None

    def unwrap(self):
        """Return a read-only snapshot of the stored objects.

        Unlike every other accessor, the values of the snapshot are the
        objects held by the map, not copies. Callers must not mutate them.

        Returns:
            FrozenMap: The entries of the map, in insertion order.
        """
        validate.initialized(self)
        return FrozenMap(self._store.to_dict())

    def reduce(self, func, initial=None):
        """Fold ``func(carry, key, value)`` over copies of the entries, in
        insertion order, starting from ``initial``."""
        validate.initialized(self)
        return self._store.reduce(
            lambda carry, key, value: func(carry, key, copy_value(value)), initial
        )

    # Transforms
    # =========================================================================

    def empty(self):
        """Return an empty map with the same permitted types."""
        validate.initialized(self)
        return self._shell(OrderedMap())

    def with_(self, key, value):
        """Return a new map with a copy of ``value`` stored under ``key``.

        Raises:
            InvalidKeyError: If ``key`` is not a non-empty string.
            InvalidTypeError: If ``value`` is not of a permitted type.
        """
        validate.initialized(self)
        validate.key(key)
        self._assert_member(value)
        clone = self._clone()
        clone._store.put(key, copy_value(value))
        return clone

    def without(self, key):
        """Return a new map without ``key``.

        Raises:
            KeyNotFoundError: If ``key`` is absent.
        """
        if not self.has(key):
            raise KeyNotFoundError(key)
        clone = self._clone()
        clone._store.remove(key)
        return clone

    def merge(self, other):
        """Return the union of this map and ``other``.

        On collision the value of ``other`` wins; keys of this map keep their
        position and new keys are appended in ``other``'s order.

        Raises:
            TypeMismatchBetweenMapsError: If ``other`` is not a map of the
                same class and permitted types.
        """
        validate.initialized(self)
        validate.same_configuration(self, other)
        clone = self._clone()
        clone._store = clone._store.merge(other._store.map(copy_value))
        log.debug(
            "Merged %d entries into %s of %d entries",
            len(other._store), type(self).__name__, len(self._store),
        )
        return clone

    def intersect(self, other):
        """Return the entries of this map whose keys are also in ``other``."""
        validate.initialized(self)
        validate.same_configuration(self, other)
        return self.filter(lambda key, value: other.has(key))

    def diff(self, other):
        """Return the entries of this map whose keys are not in ``other``."""
        validate.initialized(self)
        validate.same_configuration(self, other)
        return self.filter(lambda key, value: not other.has(key))

    def filter(self, predicate):
        """Return the entries for which ``predicate(key, value)`` is truthy.

        The predicate is given copies of the stored values.
        """
        validate.initialized(self)
        kept = self._store.filter(
            lambda key, value: predicate(key, copy_value(value)))
        return self._shell(kept.map(copy_value))

    def map(self, func):
        """Return a new map with every value replaced by ``func(value)``.

        ``func`` is given copies of the stored values, and its results are
        copied into the new map.

        Raises:
            InvalidTypeError: If ``func`` returns a value that is not of a
                permitted type.
        """
        validate.initialized(self)

        def checked(value):
            result = func(value)
            self._assert_member(result)
            return copy_value(result)

        clone = self._clone()
        clone._store.apply(checked)
        return clone

    # Misc
    # =========================================================================

    def __repr__(self):
        if self._store is None:
            return "<{} (uninitialized)>".format(type(self).__name__)
        return "{}({})".format(type(self).__name__, truncated_repr(self._store))


class SingleTypeMap(collections.abc.Mapping):
    """A lightweight map constrained to a single permitted type.

    Unlike |TypedMap| it neither copies values nor offers set-like transforms;
    :meth:`with_` still returns a new map.
    """

    _store = None
    _item_type = None

    def _init(self, entries, item_type):
        if self._store is not None:
            raise ReinitializationError(type(self))
        validate.valid_types([item_type], owner=type(self).__name__)
        store = OrderedMap()
        for key, item in _entries(entries):
            self._assert_key(key)
            validate.member(item, [item_type], owner=type(self).__name__)
            store.put(key, item)
        self._item_type = item_type
        self._store = store

    def _assert_key(self, key):
        validate.that(
            key,
            "Invalid item key given to {}. Expected str but was given {}.".format(
                type(self).__name__, type(key).__qualname__),
            InvalidKeyError,
        ).satisfies(validate.is_string)

    @property
    def item_type(self):
        return self._item_type

    def has(self, key):
        validate.initialized(self)
        return self._store.has_key(key)

    def get(self, key, default=_MISSING):
        validate.initialized(self)
        if default is not _MISSING:
            return self._store.get(key, default)
        try:
            return self._store.get(key)
        except KeyError:
            raise KeyNotFoundError(key)

    def __getitem__(self, key):
        return self.get(key)

    def with_(self, key, item):
        """Return a new map with ``item`` stored under ``key``."""
        validate.initialized(self)
        self._assert_key(key)
        validate.member(item, [self._item_type], owner=type(self).__name__)
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._store = self._store.copy()
        clone._store.put(key, item)
        return clone

    def is_empty(self):
        validate.initialized(self)
        return self._store.is_empty()

    def count(self):
        validate.initialized(self)
        return self._store.count()

    def __len__(self):
        return self.count()

    def __iter__(self):
        validate.initialized(self)
        return iter(self._store.keys())

    def to_dict(self):
        validate.initialized(self)
        return self._store.to_dict()

    def __repr__(self):
        if self._store is None:
            return "<{} (uninitialized)>".format(type(self).__name__)
        return "{}({})".format(type(self).__name__, truncated_repr(self._store))
