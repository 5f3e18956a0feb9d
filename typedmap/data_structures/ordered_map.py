# -*- coding: utf-8 -*-
# data_structures/ordered_map.py

"""
An insertion-ordered, mutable key-value store with native bulk operations.

``OrderedMap`` is the storage engine behind |TypedMap|. It performs no
validation and no copying of its own; single-key operations are O(1) on
average and every bulk operation preserves insertion order.
"""

import collections.abc
import functools

from toolz import dicttoolz

_MISSING = object()


class OrderedMap(collections.abc.MutableMapping):
    """An ordered mapping from keys to object references.

    Examples:
        >>> m = OrderedMap({'a': 1, 'b': 2})
        >>> m.put('c', 3)
        >>> m.keys()
        ['a', 'b', 'c']
        >>> m.merge({'b': 20}).to_dict()
        {'a': 1, 'b': 20, 'c': 3}
        >>> m.reduce(lambda carry, key, value: carry + value, 0)
        6
    """

    __slots__ = ("_dict",)

    def __init__(self, items=()):
        self._dict = dict(items)

    # MutableMapping interface
    # =========================================================================

    def __getitem__(self, key):
        return self._dict[key]

    def __setitem__(self, key, value):
        self._dict[key] = value

    def __delitem__(self, key):
        del self._dict[key]

    def __iter__(self):
        return iter(self._dict)

    def __len__(self):
        return len(self._dict)

    def __contains__(self, key):
        return key in self._dict

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self._dict)

    # Single-key operations
    # =========================================================================

    def get(self, key, default=_MISSING):
        """Return the value for ``key``.

        Raises ``KeyError`` if the key is absent and no default is given.
        """
        if default is _MISSING:
            return self._dict[key]
        return self._dict.get(key, default)

    def put(self, key, value):
        self._dict[key] = value

    def remove(self, key):
        """Remove ``key`` and return its value."""
        return self._dict.pop(key)

    def has_key(self, key):
        return key in self._dict

    # Queries
    # =========================================================================

    def keys(self):
        return list(self._dict)

    def count(self):
        return len(self._dict)

    def is_empty(self):
        return not self._dict

    def first(self):
        """Return the first ``(key, value)`` pair.

        Raises ``IndexError`` if the map is empty.
        """
        try:
            key = next(iter(self._dict))
        except StopIteration:
            raise IndexError("Unexpected empty state")
        return key, self._dict[key]

    def last(self):
        """Return the last ``(key, value)`` pair.

        Raises ``IndexError`` if the map is empty.
        """
        try:
            key = next(reversed(self._dict))
        except StopIteration:
            raise IndexError("Unexpected empty state")
        return key, self._dict[key]

    def to_dict(self):
        return dict(self._dict)

    # Bulk operations
    # =========================================================================

    def clear(self):
        self._dict.clear()

    def merge(self, other):
        """Return a new map with the entries of ``other`` merged in.

        Values from ``other`` win on collision; keys already present keep
        their position.
        """
        return self.__class__(dicttoolz.merge(self._dict, dict(other.items())))

    def filter(self, predicate):
        """Return a new map of the entries for which ``predicate(key, value)``
        is truthy."""
        return self.__class__(
            dicttoolz.itemfilter(lambda item: predicate(*item), self._dict)
        )

    def map(self, func):
        """Return a new map with every value replaced by ``func(value)``."""
        return self.__class__(dicttoolz.valmap(func, self._dict))

    def apply(self, func):
        """Replace every value by ``func(value)`` in place."""
        self._dict = dicttoolz.valmap(func, self._dict)

    def reduce(self, func, initial=None):
        """Fold ``func(carry, key, value)`` over the entries in order."""
        return functools.reduce(
            lambda carry, item: func(carry, *item), self._dict.items(), initial
        )

    def copy(self):
        return self.__class__(self._dict)
