"""Transformation combinators.

Each function here takes one or more existing schemas and adapts the domain
type, the representation type, or the validation predicate of the result.
"""

from __future__ import annotations

__all__ = ['asserting', 'co', 'compose', 'constrain', 'contra', 'injecting', 'lazy']

import logging
import typing

from triplex.interfaces import BasicInjectSchema
from triplex.interfaces import BasicSchema
from triplex.interfaces import Schema

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))

T = typing.TypeVar('T')
S = typing.TypeVar('S')
U = typing.TypeVar('U')
D = typing.TypeVar('D')
B = typing.TypeVar('B')


def contra(schema: Schema[T, S],
           encode: typing.Callable[[U], T],
           decode: typing.Callable[[T], U]) -> BasicSchema[U, S]:
    """Transform a schema on the domain side.

    Given a way to convert a new domain type ``U`` to and from the old domain
    type ``T``, produce a schema with domain ``U``. The representation and
    the validator are unchanged.
    """
    return BasicSchema(
        lambda value: schema.encode(encode(value)),
        lambda data: decode(schema.decode(data)),
        schema.validate,
    )


def co(schema: Schema[T, S],
       encode: typing.Callable[[S], U],
       decode: typing.Callable[[U], S],
       validate: typing.Callable[[typing.Any], bool]) -> BasicSchema[T, U]:
    """Transform a schema on the representation side.

    Given a way to convert the old representation type ``S`` to and from a
    new representation type ``U``, and a validator for ``U``, produce a schema
    with representation ``U``. The old validator says nothing about ``U``, so
    *validate* is required.
    """
    return BasicSchema(
        lambda value: encode(schema.encode(value)),
        lambda data: schema.decode(decode(data)),
        validate,
    )


def compose(first: Schema[T, S], second: Schema[S, U]) -> BasicSchema[T, U]:
    """Chain two schemas end to end.

    The representation of *first* is the domain of *second*. Encoding applies
    *first* then *second*; decoding applies them in reverse.

    Only the validator of *second* is used. The validator of *first* checks
    the intermediate type, which is not reachable from the final
    representation, so it is discarded. If you only have an encoder and a
    decoder for the domain side, use :py:func:`contra` instead.
    """
    return contra(second, first.encode, first.decode)


def constrain(schema: Schema[T, S], predicate: typing.Callable[[S], bool]) -> BasicSchema[T, S]:
    """Narrow the validation of a schema with an additional predicate.

    *predicate* is only called on data that the base schema already
    validated. For example::

        positive = constrain(number, lambda x: x > 0)

    """
    return BasicSchema(
        schema.encode,
        schema.decode,
        lambda data: schema.validate(data) and bool(predicate(data)),
    )


def asserting(schema: Schema[T, S], predicate: typing.Callable[[S], bool]) -> BasicSchema[T, S]:
    """Like :py:func:`constrain`, for predicates that narrow the representation type.

    At run time the two are the same. Use ``asserting`` when *predicate* is a
    type guard, to document that the resulting schema accepts a narrower
    representation, e.g. a string that is one of the keys of a table.
    """
    return constrain(schema, predicate)


def lazy(thunk: typing.Callable[[], Schema[T, S]]) -> BasicSchema[T, S]:
    """Defer the construction of a schema until it is used.

    *thunk* is called again on every ``encode``, ``decode`` and ``validate``;
    its result is never cached. This allows a schema to refer to itself
    (directly or through other schemas) as long as the reference only
    appears inside the thunk::

        tree = record_of({
            'value': number,
            'children': array_of(lazy(lambda: tree)),
        })

    If the thunk is expensive and wraps an aggregate, prefer the schemas in
    :py:mod:`triplex.recursive`.
    """
    return BasicSchema(
        lambda value: thunk().encode(value),
        lambda data: thunk().decode(data),
        lambda data: thunk().validate(data),
    )


def injecting(base: Schema[B, S],
              project: typing.Callable[[T], B],
              inject: typing.Callable[[D], typing.Callable[[B], T]]) -> BasicInjectSchema[T, D, B, S]:
    """Construct an injection schema.

    Args:
        base: schema for the serialized part of the domain value.
        project: get the base value from a full domain value.
        inject: given a context, get a function that rebuilds a full domain
            value from a base value.

    ``encode``, ``decode`` and ``validate`` operate on the base value and
    delegate entirely to *base*. *project* and *inject* are exposed for the
    caller (usually another schema built with :py:func:`contra`) to bridge
    between the full domain value and its base value.

    Somewhat similar to :py:func:`contra`, but decoding is asymmetric, since
    reconstruction needs the context.
    """
    return BasicInjectSchema(base.encode, base.decode, base.validate, project, inject)
