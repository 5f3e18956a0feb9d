# validate.py

"""
Methods for validating arguments.

Checks are either expressed fluently::

    validate.that(key, 'Key must be a valid string.', InvalidKeyError).satisfies(
        validate.is_string, validate.not_empty
    )

or through the named validators below, which raise the appropriate
|TypedMapError| and otherwise return ``True``.
"""

from .exceptions import (
    ConfigurationError,
    InvalidKeyError,
    InvalidTypeError,
    TypeMismatchBetweenMapsError,
    UninitializedError,
)
from .registry import types

# pylint: disable=redefined-outer-name


# Predicates
# =============================================================================


def is_string(value):
    return isinstance(value, str)


def not_empty(value):
    try:
        return len(value) > 0
    except TypeError:
        return False


def is_absolute_name(value):
    return not value.startswith('.')


def is_instance_of(names, registry=types):
    """Return a predicate testing membership in any of the named types."""
    def predicate(value):
        return registry.is_member(value, names)
    predicate.__name__ = 'is_instance_of({})'.format(', '.join(names))
    return predicate


# Fluent assertions
# =============================================================================


class Assertion:
    """Assert that a value satisfies a chain of predicates.

    Args:
        value: The value under test.
        message (str): The message of the error raised on failure.

    Keyword Args:
        error (type): The exception class to raise on failure.
    """

    def __init__(self, value, message, error=ValueError):
        self.value = value
        self.message = message
        self.error = error

    def satisfies(self, *predicates):
        """Raise ``error(message)`` unless every predicate holds.

        Predicates are evaluated in order and evaluation stops at the first
        failure.
        """
        for predicate in predicates:
            if not predicate(self.value):
                raise self.error(self.message)
        return True


class AllAssertion(Assertion):
    """Assert that every element of an iterable satisfies the predicates."""

    def satisfies(self, *predicates):
        for value in self.value:
            Assertion(value, self.message, self.error).satisfies(*predicates)
        return True


def that(value, message, error=ValueError):
    return Assertion(value, message, error)


def all_of(values, message, error=ValueError):
    return AllAssertion(values, message, error)


# Validators
# =============================================================================


def key(key):
    """Validate that a map key is a non-empty string."""
    return that(
        key, 'Key must be a valid string; got {!r}.'.format(key), InvalidKeyError
    ).satisfies(is_string, not_empty)


def valid_types(valid_types, owner='map'):
    """Validate the permitted types of a map."""
    that(
        valid_types, 'No valid types specified for {}.'.format(owner),
        ConfigurationError
    ).satisfies(lambda types: not is_string(types), not_empty)
    return all_of(
        valid_types,
        "Object types specified in '{}' must be valid class or interface "
        "names; got {!r}.".format(owner, list(valid_types)),
        ConfigurationError,
    ).satisfies(is_string, not_empty, is_absolute_name)


def member(value, valid_types, owner='map', registry=types):
    """Validate that ``value`` is an instance of one of ``valid_types``."""
    return that(
        value,
        "Invalid object type given to '{}', expected one of [{}] but was "
        "given '{}'.".format(
            owner, ', '.join(valid_types), type(value).__qualname__
        ),
        InvalidTypeError,
    ).satisfies(is_instance_of(valid_types, registry))


def same_configuration(a, b):
    """Validate that map ``b`` can take part in a binary operation with ``a``."""
    if not (isinstance(b, type(a)) and a.valid_types == b.valid_types):
        raise TypeMismatchBetweenMapsError(
            "Map operation must be on same type as '{}'; got '{}'.".format(
                type(a).__name__, type(b).__name__
            )
        )
    return True


def initialized(m):
    """Validate that a map has been initialized."""
    if m._store is None:  # pylint: disable=protected-access
        raise UninitializedError(type(m))
    return True
