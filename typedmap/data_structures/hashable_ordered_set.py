# -*- coding: utf-8 -*-
# data_structures/hashable_ordered_set.py

from ordered_set import OrderedSet


class HashableOrderedSet(OrderedSet):
    """An OrderedSet that is frozen after construction and implements the
    hash method.

    For efficiency the hash is computed only once, when first called. Since
    the set cannot be mutated once built, the hash value remains valid.

    Example:
        >>> types = HashableOrderedSet(['Point', 'Line'])
        >>> types == ['Point', 'Line']
        True
        >>> types == ['Line', 'Point']
        False
        >>> types.add('Circle')
        Traceback (most recent call last):
            ...
        TypeError: 'HashableOrderedSet' object is immutable
    """

    def __init__(self, iterable=None):
        self._frozen = False
        super().__init__(iterable)
        self._frozen = True

    def _raise_if_frozen(self):
        if self._frozen:
            raise TypeError(
                "'{}' object is immutable".format(self.__class__.__name__))

    def add(self, key):
        self._raise_if_frozen()
        return super().add(key)

    append = add

    def update(self, sequence):
        self._raise_if_frozen()
        return super().update(sequence)

    def discard(self, key):
        self._raise_if_frozen()
        return super().discard(key)

    def pop(self, *args, **kwargs):
        self._raise_if_frozen()
        return super().pop(*args, **kwargs)

    def clear(self):
        self._raise_if_frozen()
        return super().clear()

    def difference_update(self, *sets):
        self._raise_if_frozen()
        return super().difference_update(*sets)

    def intersection_update(self, other):
        self._raise_if_frozen()
        return super().intersection_update(other)

    def symmetric_difference_update(self, other):
        self._raise_if_frozen()
        return super().symmetric_difference_update(other)

    def __hash__(self):
        try:
            return self._precomputed_hash
        except AttributeError:
            self._precomputed_hash = hash(tuple(self))
            return self._precomputed_hash

    def __getstate__(self):
        # In pickle, the state can't be an empty list.
        # We need to return a truthy value, or else __setstate__ won't be run.
        # This ensures a truthy value even if the set is empty.
        return (list(self),)

    def __setstate__(self, state):
        self.__init__(state[0])
