"""Test the primitive schemas."""

import logging
import math
import re

import pytest

from triplex import ABSENT
from triplex import absent
from triplex import anything
from triplex import boolean
from triplex import literal
from triplex import matching
from triplex import null
from triplex import number
from triplex import primitive
from triplex import string

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))


@pytest.mark.parametrize('schema,value', [
    (string, 'asdf'),
    (string, ''),
    (number, 42),
    (number, -1.5),
    (number, float('inf')),
    (number, -0.0),
    (number, 2 ** 64),
    (string, 'caf\u00e9 \U0001f600'),
    (boolean, True),
    (boolean, False),
    (null, None),
    (absent, ABSENT),
    (anything, {'spam': ['eggs', 1]}),
    (anything, []),
    (anything, {'a': {'b': [None, [True]]}}),
    (literal(-0.0), -0.0),
    (literal(''), ''),
])
def test_round_trip(schema, value):
    encoded = schema.encode(value)
    assert encoded == value
    assert schema.validate(encoded)
    assert schema.decode(encoded) == value


def test_number_nan():
    nan = float('nan')
    assert number.validate(nan)
    assert math.isnan(number.decode(number.encode(nan)))


@pytest.mark.parametrize('schema,accepted,rejected', [
    (string, ['', 'x'], [b'x', 5, None, ['x'], ABSENT]),
    (number, [0, 1.0, -3, float('-inf')], [True, False, '5', None, [1], ABSENT]),
    (boolean, [True, False], [0, 1, 'true', None]),
    (null, [None], [0, '', False, ABSENT, []]),
    (absent, [ABSENT], [None, 0, '']),
    (anything, [None, ABSENT, object(), [1, 'x']], []),
])
def test_validate(schema, accepted, rejected):
    for data in accepted:
        assert schema.validate(data) is True
    for data in rejected:
        assert schema.validate(data) is False


def test_literal():
    foo = literal('foo')
    assert foo.validate('foo')
    assert not foo.validate('bar')
    assert not foo.validate(None)
    assert foo.decode(foo.encode('foo')) == 'foo'

    # No coercion between types.
    one = literal(1)
    assert one.validate(1)
    assert not one.validate(True)
    assert not one.validate(1.0)
    assert not one.validate('1')

    assert literal(float('nan')).validate(float('nan'))
    assert literal(0.0).validate(0.0)
    assert not literal(0.0).validate(-0.0)

    assert literal(None).validate(None)
    assert not literal(None).validate(ABSENT)


def test_matching():
    word = matching(r'^[a-z]+$')
    assert word.validate('spam')
    assert not word.validate('spam1')
    assert not word.validate('')
    assert not word.validate(5)

    # Unanchored patterns match anywhere.
    assert matching('b').validate('abc')

    compiled = matching(re.compile(r'\d{3}', re.ASCII))
    assert compiled.validate('call 555')
    assert compiled.decode(compiled.encode('555')) == '555'


def test_primitive():
    even = primitive(lambda data: isinstance(data, int) and data % 2 == 0)
    assert even.validate(2)
    assert not even.validate(3)
    assert even.encode(4) == 4
    assert even.decode(4) == 4


def test_negative_zero_keeps_sign():
    assert math.copysign(1.0, number.decode(number.encode(-0.0))) == -1.0
    assert literal(-0.0).validate(-0.0)
    assert not literal(-0.0).validate(0.0)
