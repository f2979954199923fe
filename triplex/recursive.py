"""Aggregate schemas for recursive types.

These mirror :py:func:`~triplex.aggregates.record_of`,
:py:func:`~triplex.aggregates.class_of`, :py:func:`~triplex.aggregates.tuple_of`,
:py:func:`~triplex.aggregates.array_of` and
:py:func:`~triplex.aggregates.non_empty_array_of`, but take zero-argument
callables that return the sub-schemas instead of the sub-schemas themselves.

A schema that refers to itself, or to a peer that refers back to it, cannot
be built eagerly: the name is not bound yet when the definition is
evaluated. Deferring each reference to a thunk breaks the cycle::

    import triplex
    from triplex import recursive

    tree = recursive.record_of({
        'value': lambda: triplex.number,
        'children': lambda: triplex.array_of(tree),
    })

Every thunk is called again on every operation and nothing is cached, so
there is no shared state. For schemas that are not recursive, or when only
one edge is recursive, the eager combinators (optionally with
:py:func:`~triplex.transform.lazy` on that edge) avoid the repeated calls.
"""

from __future__ import annotations

__all__ = ['array_of', 'class_of', 'non_empty_array_of', 'record_of', 'tuple_of']

import collections.abc
import typing

from triplex._detail import ABSENT
from triplex._detail import get_field
from triplex._detail import identity
from triplex.interfaces import BasicSchema
from triplex.interfaces import Schema
from triplex.transform import contra

T = typing.TypeVar('T')
S = typing.TypeVar('S')

Thunk = typing.Callable[[], Schema]


def array_of(elements: typing.Callable[[], Schema[T, S]]) -> BasicSchema[typing.List[T], typing.List[S]]:
    """Like :py:func:`triplex.array_of`, with a deferred element schema."""
    def encode(value: list) -> list:
        schema = elements()
        return [schema.encode(item) for item in value]

    def decode(data: list) -> list:
        schema = elements()
        return [schema.decode(item) for item in data]

    def validate(data) -> bool:
        if not isinstance(data, (list, tuple)):
            return False
        schema = elements()
        return all(schema.validate(item) for item in data)

    return BasicSchema(encode, decode, validate)


def non_empty_array_of(elements: typing.Callable[[], Schema[T, S]]) -> BasicSchema[typing.List[T], typing.List[S]]:
    """Like :py:func:`triplex.non_empty_array_of`, with a deferred element schema."""
    base = array_of(elements)
    return BasicSchema(
        base.encode,
        base.decode,
        lambda data: isinstance(data, (list, tuple)) and len(data) >= 1 and base.validate(data),
    )


def tuple_of(*elements: Thunk) -> BasicSchema[tuple, list]:
    """Like :py:func:`triplex.tuple_of`, with deferred element schemas."""
    thunks = tuple(elements)

    def encode(value: tuple) -> list:
        return [thunk().encode(item) for thunk, item in zip(thunks, value)]

    def decode(data: list) -> tuple:
        return tuple(thunk().decode(item) for thunk, item in zip(thunks, data))

    def validate(data) -> bool:
        if not isinstance(data, (list, tuple)) or len(data) != len(thunks):
            return False
        return all(thunk().validate(item) for thunk, item in zip(thunks, data))

    return BasicSchema(encode, decode, validate)


def record_of(fields: typing.Mapping[str, Thunk]) -> BasicSchema[dict, dict]:
    """Like :py:func:`triplex.record_of`, with deferred field schemas.

    This does not save any work over wrapping an eager record in
    :py:func:`~triplex.transform.lazy`, but it reads better in highly
    recursive definitions.
    """
    structure = dict(fields)

    def encode(value) -> dict:
        encoded = {}
        for key, thunk in structure.items():
            item = thunk().encode(get_field(value, key))
            if item is not ABSENT:
                encoded[key] = item
        return encoded

    def decode(data: dict) -> dict:
        decoded = {}
        for key, thunk in structure.items():
            item = thunk().decode(data.get(key, ABSENT))
            if item is not ABSENT:
                decoded[key] = item
        return decoded

    def validate(data) -> bool:
        if not isinstance(data, collections.abc.Mapping):
            return False
        return all(thunk().validate(data.get(key, ABSENT)) for key, thunk in structure.items())

    return BasicSchema(encode, decode, validate)


def class_of(fields: typing.Mapping[str, Thunk], reconstruct: typing.Callable[[dict], T]) -> BasicSchema[T, dict]:
    """Like :py:func:`triplex.class_of`, with deferred field schemas."""
    return contra(record_of(fields), identity, reconstruct)
