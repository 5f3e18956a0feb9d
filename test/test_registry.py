#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# test/test_registry.py

import collections
import numbers

import pytest
from example_maps import Point, PointLike, Polygon, Vector

from typedmap import registry


def test_registry():
    types = registry.TypeRegistry()

    assert 'Shape' not in types
    assert len(types) == 0

    @types.register('Shape')
    class Square:
        pass

    assert 'Shape' in types
    assert len(types) == 1
    assert types['Shape'] is Square
    assert types.all() == ['Shape']

    with pytest.raises(KeyError):
        types['Circle']


def test_register_defaults_to_qualname():
    types = registry.TypeRegistry()

    @types.register()
    class Circle:
        pass

    assert types.all() == ['test_register_defaults_to_qualname.<locals>.Circle']


def test_only_classes_can_be_registered():
    types = registry.TypeRegistry()
    with pytest.raises(TypeError):
        types.register('answer')(42)


def test_type_names():
    assert registry.type_names(Point) == {
        'Point', 'example_maps.Point'}
    assert 'builtins.int' in registry.type_names(int)


def test_import_type():
    assert registry.import_type('collections.OrderedDict') is collections.OrderedDict
    assert registry.import_type('OrderedDict') is None
    assert registry.import_type('collections.NotAClass') is None
    assert registry.import_type('no_such_module.Thing') is None
    assert registry.import_type('collections.namedtuple') is None
    assert registry.import_type('..nowhere.Thing') is None
    assert registry.import_type('.Thing') is None


def test_resolve():
    assert registry.types.resolve('PointLike') is PointLike
    assert registry.types.resolve('numbers.Number') is numbers.Number
    assert registry.types.resolve('Nothing') is None


@pytest.mark.parametrize('value,names,expected', [
    (Point(1, 1), ['Point'], True),
    (Point(1, 1), ['example_maps.Point'], True),
    (Point(1, 1), ['PointLike'], True),
    (Point(1, 1), ['object'], True),
    (Point(1, 1), ['Polygon'], False),
    (Point(1, 1), ['Polygon', 'Point'], True),
    (Vector(1, 1), ['PointLike'], True),
    (Vector(1, 1), ['Point'], False),
    (Polygon('square'), ['PointLike'], False),
    (1, ['int'], True),
    (True, ['int'], True),
    (1, ['builtins.int'], True),
    (1, ['numbers.Number'], True),
    ('1', ['numbers.Number'], False),
    (1, [], False),
])
def test_is_member(value, names, expected):
    assert registry.types.is_member(value, names) is expected


def test_unregistered_abstract_base_classes_are_not_resolved_by_name():
    # ``Vector`` is only a virtual subclass, so its MRO does not name PointLike
    types = registry.TypeRegistry()
    assert not types.is_member(Vector(1, 1), ['PointLike'])
    assert types.is_member(Vector(1, 1), ['example_maps.PointLike'])
