"""Provide JSON encoding and decoding through a schema.

This is the boundary at which untrusted text enters the program. Encoding
runs ``schema.encode`` and then :py:func:`json.dumps`. Decoding runs
:py:func:`json.loads`, then ``schema.validate`` and ``schema.decode``, and
reports one of three outcomes instead of raising:

* :py:class:`Success`: the text parsed and had the expected structure;
* :py:class:`SyntaxFailure`: the text was not valid JSON;
* :py:class:`InvalidStructure`: the text parsed, but the schema rejected it.

Extra keyword arguments are passed through to :py:mod:`json`, e.g.
``json_encode_with(value, schema, sort_keys=True)``.

Reference https://docs.python.org/3/library/json.html#py-to-json-table for the
conversions between JSON and basic Python objects.
"""

from __future__ import annotations

__all__ = ['DecodeResult', 'InvalidStructure', 'Success', 'SyntaxFailure', 'json_decode_with', 'json_encode_with',
           'unsafe_json_decode_with']

import json
import logging
import typing
from dataclasses import dataclass

from triplex.exceptions import DecodeError
from triplex.interfaces import Schema

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))

T = typing.TypeVar('T')

JsonValue = typing.Union[str, int, float, bool, None, typing.Dict[str, typing.Any], typing.List[typing.Any]]
"""Values that :py:func:`json.dumps` accepts and :py:func:`json.loads` produces."""

Text = typing.Union[str, bytes, bytearray]


@dataclass(frozen=True)
class Success(typing.Generic[T]):
    """The text parsed and validated. *result* holds the decoded domain value."""
    result: T
    result_type: typing.ClassVar[str] = 'success'


@dataclass(frozen=True)
class SyntaxFailure:
    """The input could not be parsed as JSON. *error* holds the parser's exception."""
    error: typing.Union[ValueError, RecursionError]
    result_type: typing.ClassVar[str] = 'syntax_error'


@dataclass(frozen=True)
class InvalidStructure:
    """The input was valid JSON, but not a valid representation for the schema."""
    result_type: typing.ClassVar[str] = 'invalid_structure'


DecodeResult = typing.Union[Success[T], SyntaxFailure, InvalidStructure]


def json_encode_with(value: T, schema: Schema[T, JsonValue], **json_args) -> str:
    """Encode *value* with *schema* and serialize the result as JSON text."""
    return json.dumps(schema.encode(value), **json_args)


def json_decode_with(text: Text, schema: Schema[T, JsonValue], **json_args) -> DecodeResult:
    """Parse JSON *text*, then validate and decode it with *schema*.

    Never raises for malformed or unexpected input.

    Returns:
        :py:class:`Success`, :py:class:`SyntaxFailure`, or :py:class:`InvalidStructure`.
    """
    try:
        parsed = json.loads(text, **json_args)
    except (ValueError, RecursionError) as e:
        # json.JSONDecodeError, UnicodeDecodeError for undecodable bytes,
        # or RecursionError for nesting too deep for the parser.
        logger.debug(f'Rejecting input that is not valid JSON: {e}')
        return SyntaxFailure(error=e)
    if not schema.validate(parsed):
        logger.debug('Parsed JSON does not have the structure required by the schema.')
        return InvalidStructure()
    return Success(result=schema.decode(parsed))


def unsafe_json_decode_with(text: Text, schema: Schema[T, JsonValue], **json_args) -> T:
    """Like :py:func:`json_decode_with`, but raise on failure.

    Raises:
        json.JSONDecodeError: if *text* is not valid JSON.
        RecursionError: if *text* is nested too deeply to parse.
        DecodeError: if the parsed data is rejected by *schema*.
    """
    parsed = json.loads(text, **json_args)
    if not schema.validate(parsed):
        raise DecodeError('Failed to parse JSON: the data does not have the structure required by the schema.')
    return schema.decode(parsed)
