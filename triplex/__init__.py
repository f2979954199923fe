"""Composable schemas for encoding, decoding, and validating data.

A schema bundles three operations over a domain type and a serializable
representation type: ``encode``, ``decode``, and ``validate``. Small schemas
for primitive values are combined into schemas for records, tuples, arrays,
maps, sets, unions, and recursive structures.

Example::

    import triplex

    person = triplex.record_of({
        'name': triplex.string,
        'age': triplex.number,
        'email': triplex.optional(triplex.string),
    })
    text = triplex.json_encode_with({'name': 'Ann', 'age': 30}, person)
    outcome = triplex.json_decode_with(text, person)
    if outcome.result_type == 'success':
        ann = outcome.result

Package structure:
    * :py:mod:`triplex.interfaces`: the schema protocols and reference implementation.
    * :py:mod:`triplex.basictypes`: primitive schemas.
    * :py:mod:`triplex.transform`: schemas adapted from other schemas.
    * :py:mod:`triplex.aggregates`: schemas for structured types.
    * :py:mod:`triplex.recursive`: aggregate schemas for self-referential types.
    * :py:mod:`triplex.serialization`: JSON text encoding and decoding.
"""

__all__ = [
    'ABSENT',
    'AbsentType',
    'BasicInjectSchema',
    'BasicSchema',
    'DecodeResult',
    'EMPTY_ARRAY',
    'EMPTY_OBJECT',
    'InjectSchema',
    'InvalidStructure',
    'Schema',
    'Success',
    'SyntaxFailure',
    'absent',
    'anything',
    'array_of',
    'asserting',
    'boolean',
    'class_of',
    'co',
    'compose',
    'constrain',
    'contra',
    'dict_of',
    'discriminating',
    'indexing',
    'injecting',
    'json_decode_with',
    'json_encode_with',
    'lazy',
    'literal',
    'map_of',
    'mapping',
    'matching',
    'non_empty_array_of',
    'null',
    'number',
    'optional',
    'primitive',
    'record_of',
    'schema',
    'set_of',
    'string',
    'tuple_of',
    'union',
    'union_of',
    'unsafe_json_decode_with',
]

from triplex._detail import ABSENT
from triplex._detail import AbsentType
from triplex.aggregates import EMPTY_ARRAY
from triplex.aggregates import EMPTY_OBJECT
from triplex.aggregates import array_of
from triplex.aggregates import class_of
from triplex.aggregates import dict_of
from triplex.aggregates import discriminating
from triplex.aggregates import indexing
from triplex.aggregates import map_of
from triplex.aggregates import mapping
from triplex.aggregates import non_empty_array_of
from triplex.aggregates import optional
from triplex.aggregates import record_of
from triplex.aggregates import set_of
from triplex.aggregates import tuple_of
from triplex.aggregates import union
from triplex.aggregates import union_of
from triplex.basictypes import absent
from triplex.basictypes import anything
from triplex.basictypes import boolean
from triplex.basictypes import literal
from triplex.basictypes import matching
from triplex.basictypes import null
from triplex.basictypes import number
from triplex.basictypes import primitive
from triplex.basictypes import string
from triplex.interfaces import BasicInjectSchema
from triplex.interfaces import BasicSchema
from triplex.interfaces import InjectSchema
from triplex.interfaces import Schema
from triplex.interfaces import schema
from triplex.serialization import DecodeResult
from triplex.serialization import InvalidStructure
from triplex.serialization import Success
from triplex.serialization import SyntaxFailure
from triplex.serialization import json_decode_with
from triplex.serialization import json_encode_with
from triplex.serialization import unsafe_json_decode_with
from triplex.transform import asserting
from triplex.transform import co
from triplex.transform import compose
from triplex.transform import constrain
from triplex.transform import contra
from triplex.transform import injecting
from triplex.transform import lazy
