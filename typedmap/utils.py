# utils.py

"""
Functions used by more than one typedmap module or class, or that might be of
external use.
"""

import copy
from itertools import islice

from .conf import config

_COPY_FUNCTIONS = {
    "shallow": copy.copy,
    "deep": copy.deepcopy,
}


def copy_value(value, strategy=None):
    """Return a defensive copy of ``value``.

    Args:
        value: The object to copy.

    Keyword Args:
        strategy (str): Either ``'shallow'`` or ``'deep'``. Defaults to
            ``config.COPY_STRATEGY``.
    """
    if strategy is None:
        strategy = config.COPY_STRATEGY
    return _COPY_FUNCTIONS[strategy](value)


def truncated_repr(mapping, max_items=None):
    """Return a ``dict``-style repr of ``mapping``, in iteration order,
    showing at most ``max_items`` entries.

    Examples:
        >>> truncated_repr({'b': 1, 'a': 2, 'c': 3}, max_items=2)
        "{'b': 1, 'a': 2, ...}"
    """
    if max_items is None:
        max_items = config.REPR_MAX_ITEMS
    body = ", ".join(
        "{!r}: {!r}".format(k, v) for k, v in islice(mapping.items(), max_items)
    )
    if len(mapping) > max_items:
        body = body + ", ..." if body else "..."
    return "{" + body + "}"
