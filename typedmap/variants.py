# -*- coding: utf-8 -*-
# variants.py

"""
Concrete maps that fix the permitted types of a |TypedMap|.
"""

from .typed_map import TypedMap


class PlainMap(TypedMap):
    """A map that accepts any object."""

    VALID_TYPES = ('object',)


def typed_map_class(name, *valid_types, module=None):
    """Create a concrete |TypedMap| subclass permitting ``valid_types``.

    Example:
        >>> Strings = typed_map_class('Strings', 'str')
        >>> Strings({'greeting': 'hello'}).get('greeting')
        'hello'

    Args:
        name (str): The name of the new class.
        *valid_types (str): The names of the permitted types.

    Keyword Args:
        module (str): The ``__module__`` of the new class, so that instances
            can be pickled when the class is bound to a module attribute.
    """
    namespace = {'VALID_TYPES': tuple(valid_types)}
    if module is not None:
        namespace['__module__'] = module
    return type(name, (TypedMap,), namespace)
