"""Aggregate combinators.

Combine many schemas into one schema for a structured type: records, tuples,
arrays, dictionaries, maps, sets, unions, discriminated unions and lookup
table enumerations.

Traversal is in declaration order: field order for records, index order for
tuples and arrays. Validation short-circuits on the first failure.
"""

from __future__ import annotations

__all__ = ['EMPTY_ARRAY', 'EMPTY_OBJECT', 'array_of', 'class_of', 'dict_of', 'discriminating', 'indexing',
           'map_of', 'mapping', 'non_empty_array_of', 'optional', 'record_of', 'set_of', 'tuple_of', 'union',
           'union_of']

import collections.abc
import logging
import typing

from triplex._detail import ABSENT
from triplex._detail import AbsentType
from triplex._detail import get_field
from triplex._detail import identity
from triplex._detail import impossible
from triplex._detail import same_value
from triplex.basictypes import absent
from triplex.basictypes import number
from triplex.basictypes import string
from triplex.exceptions import EncodingError
from triplex.interfaces import BasicSchema
from triplex.interfaces import Schema
from triplex.transform import asserting
from triplex.transform import constrain
from triplex.transform import contra

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))

T = typing.TypeVar('T')
S = typing.TypeVar('S')
K = typing.TypeVar('K')
V = typing.TypeVar('V')
TL = typing.TypeVar('TL')
SL = typing.TypeVar('SL')
TR = typing.TypeVar('TR')
SR = typing.TypeVar('SR')

Fields = typing.Mapping[str, Schema]


def _is_sequence(data) -> bool:
    # Deserialized JSON arrays are lists. Tuples are accepted for data built in Python.
    return isinstance(data, (list, tuple))


def record_of(fields: Fields) -> BasicSchema[dict, dict]:
    """Construct a schema for a record, given a schema for each of its fields.

    Example::

        person = record_of({
            'name': string,
            'age': number,
        })
        person.validate({'name': 'Ann', 'age': 30})  # True
        person.validate({'name': 'Ann'})  # False

    ``encode`` builds a new dict by encoding each declared field of the value;
    ``decode`` is the mirror image. Undeclared keys are dropped.

    ``validate`` requires a mapping in which the value of every declared
    field satisfies its schema. A missing field is passed to the field's
    validator as :py:data:`~triplex.ABSENT`, so it is only accepted if the
    field schema accepts absence (see :py:func:`optional`). Fields that
    encode or decode to ``ABSENT`` are left out of the result.

    ``record_of({})`` is the schema for the empty record; see
    :py:data:`EMPTY_OBJECT`.
    """
    structure = dict(fields)

    def encode(value) -> dict:
        encoded = {}
        for key, field in structure.items():
            item = field.encode(get_field(value, key))
            if item is not ABSENT:
                encoded[key] = item
        return encoded

    def decode(data: dict) -> dict:
        decoded = {}
        for key, field in structure.items():
            item = field.decode(data.get(key, ABSENT))
            if item is not ABSENT:
                decoded[key] = item
        return decoded

    def validate(data) -> bool:
        if not isinstance(data, collections.abc.Mapping):
            return False
        return all(field.validate(data.get(key, ABSENT)) for key, field in structure.items())

    return BasicSchema(encode, decode, validate)


EMPTY_OBJECT: BasicSchema[dict, dict] = record_of({})
"""Trivial schema for the empty record, the identity under record unions."""


def class_of(fields: Fields, reconstruct: typing.Callable[[dict], T]) -> BasicSchema[T, dict]:
    """Encode class instances as records, like :py:func:`record_of`, with custom reconstruction.

    When decoding, the fields are first decoded as for :py:func:`record_of`,
    then *reconstruct* is applied to the resulting dict to make the new
    instance. Encoding reads the declared fields from the instance's
    attributes (or keys, for mappings). For example::

        @dataclasses.dataclass
        class Person:
            name: str
            age: int

        person = class_of({'name': string, 'age': number}, lambda fields: Person(**fields))

    """
    return contra(record_of(fields), identity, reconstruct)


def tuple_of(*schemas: Schema) -> BasicSchema[tuple, list]:
    """Construct a schema for fixed-length tuples, given a schema per position.

    Tuples encode to lists. ``validate`` requires exactly as many elements as
    there are schemas; both too few and too many are rejected.
    """
    elements = tuple(schemas)

    def encode(value: tuple) -> list:
        return [schema.encode(item) for schema, item in zip(elements, value)]

    def decode(data: list) -> tuple:
        return tuple(schema.decode(item) for schema, item in zip(elements, data))

    def validate(data) -> bool:
        if not _is_sequence(data) or len(data) != len(elements):
            return False
        return all(schema.validate(item) for schema, item in zip(elements, data))

    return BasicSchema(encode, decode, validate)


EMPTY_ARRAY: BasicSchema[tuple, list] = tuple_of()
"""Trivial schema for the empty tuple, the identity under tuple concatenation."""


def array_of(elements: Schema[T, S]) -> BasicSchema[typing.List[T], typing.List[S]]:
    """Construct a schema for variable-length lists, given a schema for their elements.

    Warning:
        :py:data:`~triplex.ABSENT` cannot be serialized as an array element.
        For arrays of possibly missing values, use ``union(null, ...)``.
    """
    def validate(data) -> bool:
        return _is_sequence(data) and all(elements.validate(item) for item in data)

    return BasicSchema(
        lambda value: [elements.encode(item) for item in value],
        lambda data: [elements.decode(item) for item in data],
        validate,
    )


def non_empty_array_of(elements: Schema[T, S]) -> BasicSchema[typing.List[T], typing.List[S]]:
    """Like :py:func:`array_of`, but validation requires at least one element."""
    base = array_of(elements)
    return constrain(base, lambda data: len(data) >= 1)


def dict_of(values: Schema[T, S]) -> BasicSchema[typing.Dict[str, T], typing.Dict[str, S]]:
    """Construct a schema for string-keyed dicts with uniformly typed values.

    Keys are copied as they are; every value is encoded with *values*.
    Unlike :py:func:`record_of`, the set of keys is not fixed.
    """
    def validate(data) -> bool:
        if not isinstance(data, collections.abc.Mapping):
            return False
        return all(isinstance(key, str) and values.validate(item) for key, item in data.items())

    return BasicSchema(
        lambda value: {key: values.encode(item) for key, item in value.items()},
        lambda data: {key: values.decode(item) for key, item in data.items()},
        validate,
    )


def map_of(keys: Schema[K, typing.Any], values: Schema[V, typing.Any]) -> BasicSchema[typing.Dict[K, V], list]:
    """Construct a schema for a dict with arbitrary (hashable) keys.

    The representation is a list of ``[key, value]`` pairs rather than a
    JSON object, because a JSON object can only have string keys: ``0`` and
    ``'0'`` are different dict keys, but the same object key.

    When decoding, if the same key appears more than once, the value of the
    last occurrence is kept.
    """
    pairs = array_of(tuple_of(keys, values))

    def encode(value: typing.Mapping[K, V]) -> list:
        return [[keys.encode(key), values.encode(item)] for key, item in value.items()]

    def decode(data: list) -> typing.Dict[K, V]:
        decoded = {}
        for key, item in data:
            decoded[keys.decode(key)] = values.decode(item)
        return decoded

    return BasicSchema(encode, decode, pairs.validate)


def set_of(elements: Schema[T, S]) -> BasicSchema[typing.Set[T], typing.List[S]]:
    """Construct a schema for a set, represented as a list of its elements.

    The order of the list is the iteration order of the set and carries no
    meaning. Decoding de-duplicates like the ``set`` constructor, so the
    decoded elements must be hashable.
    """
    return BasicSchema(
        lambda value: [elements.encode(item) for item in value],
        lambda data: {elements.decode(item) for item in data},
        array_of(elements).validate,
    )


def union_of(is_left: typing.Callable[[typing.Any], bool],
             is_right: typing.Callable[[typing.Any], bool],
             left: Schema[TL, SL],
             right: Schema[TR, SR]) -> BasicSchema[typing.Union[TL, TR], typing.Union[SL, SR]]:
    """Construct a schema for the union of two types.

    Encoding needs to know which branch a domain value belongs to, so the
    *is_left* and *is_right* predicates are required. A value satisfying
    neither is outside of the schema's domain, and encoding it raises
    :py:class:`~triplex.exceptions.UnreachableError`.

    Decoding and validation are left-biased: the left schema is tried first,
    so if both schemas accept a representation, the left one decodes it.

    If the left type is trivially encodable (its schema is a
    ``Schema[T, T]``), :py:func:`union` is simpler.
    """
    def encode(value):
        if is_left(value):
            return left.encode(value)
        elif is_right(value):
            return right.encode(value)
        else:
            impossible(value)

    def decode(data):
        if left.validate(data):
            return left.decode(data)
        elif right.validate(data):
            return right.decode(data)
        else:
            impossible(data)

    return BasicSchema(encode, decode, lambda data: left.validate(data) or right.validate(data))


def union(left: Schema[TL, TL], right: Schema[TR, SR]) -> BasicSchema[typing.Union[TL, TR], typing.Union[TL, SR]]:
    """Like :py:func:`union_of`, when the left schema is trivial.

    A trivial schema encodes a value to itself, so its validator doubles as
    the predicate for the left branch. If only one of the schemas is trivial,
    it must go on the left. For example::

        number_or_string = union(number, string)

    Like :py:func:`union_of`, this is left-biased.
    """
    return union_of(left.validate, lambda value: not left.validate(value), left, right)


def optional(schema: Schema[T, S]) -> BasicSchema[typing.Union[T, AbsentType], typing.Union[S, AbsentType]]:
    """Allow a value to be absent. In :py:func:`record_of`, this makes a field optional::

        point = record_of({'x': optional(number)})
        point.validate({'x': 1})  # True
        point.validate({'x': 'hello'})  # False
        point.validate({})  # True

    Warning:
        Only use this for the fields of a record. Absence cannot be
        serialized as a top-level value or as an array element.
    """
    return union(absent, schema)


def discriminating(field: str, variants: typing.Mapping[typing.Hashable, Schema]) -> BasicSchema:
    """Construct a schema for a discriminated (tagged) union of records.

    Args:
        field: name of the discriminant field.
        variants: mapping from each discriminant value to the schema of the
            corresponding variant.

    Each variant schema must itself validate *field* as the matching
    literal, typically with :py:func:`~triplex.literal`::

        shape = discriminating('kind', {
            'circle': record_of({'kind': literal('circle'), 'radius': number}),
            'square': record_of({'kind': literal('square'), 'side': number}),
        })

    The discriminant is read first and selects the variant that handles the
    whole value. Data with a discriminant that names no variant is invalid;
    it does not fall through to another variant.
    """
    table = dict(variants)

    def select(key) -> typing.Optional[Schema]:
        try:
            return table.get(key)
        except TypeError:
            # Unhashable discriminant.
            return None

    def encode(value):
        variant = select(get_field(value, field))
        if variant is None:
            impossible(value)
        return variant.encode(value)

    def decode(data):
        variant = select(data.get(field, ABSENT))
        if variant is None:
            impossible(data)
        return variant.decode(data)

    def validate(data) -> bool:
        if not isinstance(data, collections.abc.Mapping):
            return False
        variant = select(data.get(field, ABSENT))
        return variant is not None and variant.validate(data)

    return BasicSchema(encode, decode, validate)


def indexing(values: typing.Sequence[T]) -> BasicSchema[T, int]:
    """Encode a value by its index in a sequence of possible values.

    Use with care:

    * encoding a value that is not in *values* raises
      :py:class:`~triplex.exceptions.EncodingError`;
    * encoding searches the sequence, which is O(n);
    * reordering *values* silently changes the meaning of persisted data.

    Only use this for small, stable enumerations. Values are matched with the
    same strict equality as :py:func:`~triplex.literal`, so ``True``, ``1``
    and ``1.0`` are distinct entries.
    """
    table = tuple(values)

    def to_index(value: T) -> int:
        for index, item in enumerate(table):
            if item is value or same_value(item, value):
                return index
        logger.debug(f'Lookup miss for {value!r} in an indexing table of {len(table)} values.')
        raise EncodingError(f'Attempted to encode {value!r} by index in {table!r}.')

    in_range = constrain(number, lambda data: isinstance(data, int) and 0 <= data < len(table))
    return contra(in_range, to_index, table.__getitem__)


def mapping(values: typing.Mapping[str, T]) -> BasicSchema[T, str]:
    """Like :py:func:`indexing`, but encode a value by its key in a mapping.

    All of the restrictions and warnings of :py:func:`indexing` apply.
    If several keys map to equal values, the first key is used for encoding.
    """
    table = dict(values)

    def to_key(value: T) -> str:
        for key, item in table.items():
            if item is value or same_value(item, value):
                return key
        logger.debug(f'Lookup miss for {value!r} in a mapping table of {len(table)} keys.')
        raise EncodingError(f'Attempted to encode {value!r} by key in {table!r}.')

    key = asserting(string, lambda data: data in table)
    return contra(key, to_key, table.__getitem__)
