#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# test/test_validate.py

import pytest
from example_maps import OtherPoints, Point, Points, Uninitialized

from typedmap import (ConfigurationError, InvalidKeyError, InvalidTypeError,
                      TypeMismatchBetweenMapsError, UninitializedError,
                      validate)


def test_that_satisfies():
    assert validate.that('a', 'message').satisfies(validate.is_string,
                                                   validate.not_empty)
    with pytest.raises(ValueError) as e:
        validate.that('', 'Must not be empty.').satisfies(validate.is_string,
                                                          validate.not_empty)
    assert str(e.value) == 'Must not be empty.'


def test_that_raises_given_error():
    with pytest.raises(InvalidKeyError):
        validate.that(3, 'message', InvalidKeyError).satisfies(validate.is_string)


def test_that_stops_at_first_failure():
    calls = []

    def record(value):
        calls.append(value)
        return True

    with pytest.raises(ValueError):
        validate.that(None, 'message').satisfies(validate.is_string, record)
    assert calls == []


def test_all_of():
    assert validate.all_of(['a', 'b'], 'message').satisfies(validate.is_string)
    assert validate.all_of([], 'message').satisfies(validate.is_string)
    with pytest.raises(ValueError):
        validate.all_of(['a', 1], 'message').satisfies(validate.is_string)


def test_not_empty():
    assert validate.not_empty('a')
    assert validate.not_empty([0])
    assert not validate.not_empty('')
    assert not validate.not_empty(())
    assert not validate.not_empty(None)


def test_is_instance_of():
    predicate = validate.is_instance_of(['PointLike', 'str'])
    assert predicate.__name__ == 'is_instance_of(PointLike, str)'
    assert predicate(Point(0, 0))
    assert predicate('x')
    assert not predicate(1)


def test_validate_key():
    assert validate.key('a')
    for key in ['', None, 1, b'a']:
        with pytest.raises(InvalidKeyError):
            validate.key(key)


def test_validate_valid_types():
    assert validate.valid_types(['Point', 'Polygon'])
    for valid_types in [[], [''], [1], 'Point', None, ['..nowhere.Thing']]:
        with pytest.raises(ConfigurationError):
            validate.valid_types(valid_types)


def test_validate_member():
    assert validate.member(Point(0, 0), ['Point'])
    with pytest.raises(InvalidTypeError) as e:
        validate.member('x', ['Point', 'Polygon'], owner='Points')
    assert str(e.value) == (
        "Invalid object type given to 'Points', expected one of "
        "[Point, Polygon] but was given 'str'."
    )


def test_validate_same_configuration(points):
    assert validate.same_configuration(points, Points())
    with pytest.raises(TypeMismatchBetweenMapsError):
        validate.same_configuration(points, OtherPoints())


def test_validate_initialized(points):
    assert validate.initialized(points)
    with pytest.raises(UninitializedError):
        validate.initialized(Uninitialized())
