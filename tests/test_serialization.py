"""Test JSON encoding and decoding through schemas."""
from __future__ import annotations

import json
import logging

import pytest

from triplex import InvalidStructure
from triplex import Success
from triplex import SyntaxFailure
from triplex import array_of
from triplex import json_decode_with
from triplex import json_encode_with
from triplex import lazy
from triplex import map_of
from triplex import number
from triplex import optional
from triplex import record_of
from triplex import string
from triplex import union
from triplex import unsafe_json_decode_with
from triplex.exceptions import DecodeError

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))

scores = map_of(string, number)


def test_round_trip():
    text = json_encode_with({'a': 1, 'b': 2}, scores)
    assert json.loads(text) == [['a', 1], ['b', 2]]

    outcome = json_decode_with(text, scores)
    assert isinstance(outcome, Success)
    assert outcome.result_type == 'success'
    assert outcome.result == {'a': 1, 'b': 2}


def test_optional_field_omitted():
    person = record_of({'name': string, 'email': optional(string)})
    text = json_encode_with({'name': 'Ann'}, person)
    assert json.loads(text) == {'name': 'Ann'}
    assert json_decode_with(text, person).result == {'name': 'Ann'}


def test_json_args():
    point = record_of({'y': number, 'x': number})
    assert json_encode_with({'x': 1, 'y': 2}, point) == '{"y": 2, "x": 1}'
    assert json_encode_with({'x': 1, 'y': 2}, point, sort_keys=True) == '{"x": 1, "y": 2}'
    assert json_encode_with({'x': 1, 'y': 2}, point, separators=(',', ':')) == '{"y":2,"x":1}'


@pytest.mark.parametrize('text', ['', '{', 'nul', '[1,]', "{'a': 1}", '[["a", 1]'])
def test_syntax_failure(text):
    outcome = json_decode_with(text, scores)
    assert isinstance(outcome, SyntaxFailure)
    assert outcome.result_type == 'syntax_error'
    assert isinstance(outcome.error, json.JSONDecodeError)


@pytest.mark.parametrize('text', ['{"a": 1}', '[["a", "1"]]', '[["a"]]', 'null', '"a"'])
def test_invalid_structure(text):
    outcome = json_decode_with(text, scores)
    assert isinstance(outcome, InvalidStructure)
    assert outcome.result_type == 'invalid_structure'


def test_bytes():
    outcome = json_decode_with(b'[["a", 1]]', scores)
    assert isinstance(outcome, Success)
    assert outcome.result == {'a': 1}


def test_unsafe_decode():
    assert unsafe_json_decode_with('[["a", 1]]', scores) == {'a': 1}
    with pytest.raises(DecodeError):
        unsafe_json_decode_with('{"a": 1}', scores)
    with pytest.raises(ValueError):
        unsafe_json_decode_with('[["a", "1"]]', scores)
    with pytest.raises(json.JSONDecodeError):
        unsafe_json_decode_with('{', scores)


nested = union(number, lazy(lambda: array_of(nested)))


def test_nesting_within_limits():
    outcome = json_decode_with('[' * 20 + ']' * 20, nested)
    assert isinstance(outcome, Success)
    assert json_encode_with(outcome.result, nested) == '[' * 20 + ']' * 20


def test_nesting_too_deep_to_parse():
    outcome = json_decode_with('[' * 100000, nested)
    assert isinstance(outcome, SyntaxFailure)
    assert outcome.result_type == 'syntax_error'


def test_nesting_too_deep_to_validate():
    # Parses, but each level costs several frames in validation.
    outcome = json_decode_with('[' * 300 + ']' * 300, nested)
    assert isinstance(outcome, InvalidStructure)
    assert outcome.result_type == 'invalid_structure'
