"""Specify the basic (primitive) schemas.

Primitive schemas encode and decode with the identity function and validate
with a direct type or equality check. They are the leaves from which all
other schemas are composed.
"""

from __future__ import annotations

__all__ = ['absent', 'anything', 'boolean', 'literal', 'matching', 'null', 'number', 'primitive', 'string']

import logging
import re
import typing

from triplex._detail import ABSENT
from triplex._detail import identity
from triplex._detail import same_value
from triplex.interfaces import BasicSchema
from triplex.transform import constrain

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))

T = typing.TypeVar('T')


def primitive(validate: typing.Callable[[typing.Any], bool]) -> BasicSchema[T, T]:
    """Construct a trivial schema for a representable primitive type."""
    return BasicSchema(identity, identity, validate)


def literal(value: T) -> BasicSchema[T, T]:
    """Get a schema that only validates *value* itself.

    Equality is strict: no coercion between types, so ``literal(1)`` rejects
    ``True`` and ``1.0``, and ``literal(float('nan'))`` accepts NaN.
    If looser equality is needed, use :py:func:`primitive`.

    Literals are typically used for the discriminant field of the variants
    of a discriminated union.
    """
    return BasicSchema(identity, identity, lambda data: same_value(data, value))


def _is_number(data) -> bool:
    # bool is a subclass of int, but not a number representation.
    return isinstance(data, (int, float)) and not isinstance(data, bool)


anything: BasicSchema[typing.Any, typing.Any] = primitive(lambda data: True)
"""The most basic schema, which accepts and validates everything."""

string: BasicSchema[str, str] = primitive(lambda data: isinstance(data, str))

number: BasicSchema[typing.Union[int, float], typing.Union[int, float]] = primitive(_is_number)
"""Integers and floats (including NaN and infinities), but not booleans."""

boolean: BasicSchema[bool, bool] = primitive(lambda data: isinstance(data, bool))

null: BasicSchema[None, None] = primitive(lambda data: data is None)

absent = primitive(lambda data: data is ABSENT)
"""Trivial schema for the :py:data:`~triplex.ABSENT` marker.

Warning:
    Absence cannot be serialized as a top-level value or as an element of
    an array. It only makes sense as the value of a record field; see
    :py:func:`triplex.optional`.
"""


def matching(pattern: typing.Union[str, re.Pattern]) -> BasicSchema[str, str]:
    """Restrict a string schema to strings matching a regular expression.

    The match is conducted with :py:func:`re.search`, so the pattern may
    match anywhere in the string. To require the entire string to match,
    anchor the pattern (``r'^...$'``).
    """
    regex = re.compile(pattern)
    return constrain(string, lambda data: regex.search(data) is not None)
