#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# test/test_variants.py

import pickle

import pytest
from example_maps import Point

from typedmap import (ConfigurationError, InvalidTypeError, PlainMap, TypedMap,
                      typed_map_class)

Strings = typed_map_class('Strings', 'str', module=__name__)


def test_plain_map_accepts_anything():
    m = PlainMap({'n': 1, 's': 'x', 'p': Point(1, 1), 'none': None})
    assert m.keys() == ['n', 's', 'p', 'none']
    assert m.get('none', Point(0, 0)) is None


def test_plain_map_default_is_empty():
    assert PlainMap().is_empty()


def test_typed_map_class():
    assert issubclass(Strings, TypedMap)
    assert Strings.__name__ == 'Strings'
    assert Strings.VALID_TYPES == ('str',)
    m = Strings({'greeting': 'hello'})
    assert m.get('greeting') == 'hello'
    with pytest.raises(InvalidTypeError):
        Strings({'answer': 42})


def test_typed_map_class_with_several_types():
    Numbers = typed_map_class('Numbers', 'int', 'float')
    m = Numbers({'one': 1, 'half': 0.5})
    assert m.reduce(lambda total, key, value: total + value, 0) == 1.5
    with pytest.raises(InvalidTypeError):
        m.with_('third', '1/3')


def test_typed_map_class_instances_can_be_pickled():
    m = Strings({'a': 'b'})
    assert pickle.loads(pickle.dumps(m)) == m


def test_typed_map_class_rejects_relative_type_names():
    Weird = typed_map_class('Weird', '..nowhere.Thing')
    with pytest.raises(ConfigurationError):
        Weird()


def test_unimportable_type_names_fail_membership_cleanly():
    Missing = typed_map_class('Missing', 'no_such_module.Thing', 'str')
    m = Missing({'a': 'b'})
    with pytest.raises(InvalidTypeError):
        m.with_('c', 1)
