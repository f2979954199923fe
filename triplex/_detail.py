"""Implement composable details.

Small helpers shared by the schema combinators: the absence marker,
identity and dispatch fallbacks, and the equality rule used for literals.

The types here are not part of the public interface beyond what the
package re-exports.
"""

from __future__ import annotations

__all__ = ['ABSENT', 'AbsentType', 'get_field', 'identity', 'impossible', 'same_value']

import collections.abc
import math
import typing

from triplex.exceptions import UnreachableError

T = typing.TypeVar('T')


class AbsentType:
    """Type of the :py:data:`ABSENT` marker.

    Python has a single "no value" object, ``None``, but ``None`` is also the
    JSON ``null``. Absence is a distinct state: a record field that is not
    present at all. There is only ever one instance.
    """
    _instance: typing.ClassVar[typing.Optional['AbsentType']] = None

    __slots__ = ()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'ABSENT'

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (AbsentType, ())


ABSENT = AbsentType()
"""Marker for a value that is not present, such as a missing record field."""


def identity(x: T) -> T:
    """The identity function, used for trivial schemas."""
    return x


def impossible(value) -> typing.NoReturn:
    """Fail a dispatch that found no branch for *value*.

    Raises:
        UnreachableError: always.
    """
    raise UnreachableError(f'This code should be unreachable (got {value!r}).')


def get_field(value, key):
    """Read a named field from a domain value.

    Mappings are indexed by *key*. Other objects (class instances,
    dataclasses, named tuples) are read by attribute.

    Returns:
        The field value, or :py:data:`ABSENT` if there is no such field.
    """
    if isinstance(value, collections.abc.Mapping):
        return value.get(key, ABSENT)
    return getattr(value, key, ABSENT)


def same_value(a, b) -> bool:
    """Compare two values without any coercion.

    The types must match exactly, so ``True`` is not ``1`` and ``1`` is not
    ``1.0``. Floats follow same-value rules: NaN is the same as NaN, and
    ``0.0`` is not the same as ``-0.0``.

    Never raises.
    """
    if type(a) is not type(b):
        return False
    if isinstance(a, float):
        if math.isnan(a):
            return math.isnan(b)
        return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)
    try:
        return bool(a == b)
    except Exception:
        return False
