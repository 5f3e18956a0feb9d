# -*- coding: utf-8 -*-
# data_structures/frozen_map.py

import typing

K = typing.TypeVar("K")
V = typing.TypeVar("V")


class FrozenMap(typing.Mapping[K, V]):
    """A read-only, insertion-ordered view of a snapshot of a mapping.

    The snapshot holds the same value objects as the source mapping; only the
    mapping itself is frozen.
    """

    __slots__ = ("_dict", "_hash")

    def __init__(self, *args, **kwargs):
        self._dict: typing.Dict[K, V] = dict(*args, **kwargs)
        self._hash: typing.Optional[int] = None

    def __getitem__(self, key: K) -> V:
        return self._dict[key]

    def __contains__(self, key: K) -> bool:
        return key in self._dict

    def __iter__(self) -> typing.Iterator[K]:
        return iter(self._dict)

    def __len__(self) -> int:
        return len(self._dict)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({repr(self._dict)})"

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(tuple(self._dict.items()))
        return self._hash

    def to_dict(self) -> typing.Dict[K, V]:
        """Return a shallow ``dict`` copy of the snapshot."""
        return dict(self._dict)
