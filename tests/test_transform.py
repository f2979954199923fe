"""Test the transformation combinators."""
from __future__ import annotations

import dataclasses
import datetime
import logging

import pytest

from triplex import InjectSchema
from triplex import array_of
from triplex import asserting
from triplex import co
from triplex import compose
from triplex import constrain
from triplex import contra
from triplex import indexing
from triplex import injecting
from triplex import lazy
from triplex import number
from triplex import record_of
from triplex import string
from triplex import union
from triplex.exceptions import EncodingError

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))


def _digits(data) -> bool:
    return isinstance(data, str) and data.isdigit()


def test_contra():
    date = contra(string, lambda d: d.isoformat(), datetime.date.fromisoformat)
    day = datetime.date(2020, 1, 2)
    assert date.encode(day) == '2020-01-02'
    assert date.decode('2020-01-02') == day
    # The validator is the one of the original schema.
    assert date.validate('not a date')
    assert not date.validate(5)


def test_co():
    numeral = co(number, str, int, _digits)
    assert numeral.encode(42) == '42'
    assert numeral.decode('42') == 42
    assert numeral.validate('42')
    assert not numeral.validate(42)
    assert not numeral.validate('4x')


def test_compose():
    colors = indexing(['red', 'green', 'blue'])
    numeral = co(number, str, int, _digits)
    color = compose(colors, numeral)
    assert color.encode('green') == '1'
    assert color.decode('2') == 'blue'
    with pytest.raises(EncodingError):
        color.encode('purple')

    # Only the second validator is kept, so the range check of `colors` is lost.
    assert color.validate('7')
    assert not color.validate(1)


def test_constrain():
    # The predicate would raise TypeError for str, so it must not be reached.
    positive = constrain(number, lambda x: x > 0)
    assert positive.validate(1)
    assert not positive.validate(0)
    assert not positive.validate(-1.5)
    assert not positive.validate('1')
    assert positive.encode(3) == 3
    assert positive.decode(3) == 3


def test_asserting():
    table = {'s': 1, 'm': 2}
    size = asserting(string, lambda data: data in table)
    assert size.validate('s')
    assert not size.validate('xl')
    assert not size.validate(['s'])


def test_lazy_calls_thunk_per_operation():
    calls = []

    def thunk():
        calls.append(None)
        return number

    deferred = lazy(thunk)
    assert not calls
    assert deferred.validate(1)
    assert deferred.encode(2) == 2
    assert deferred.decode(3) == 3
    assert len(calls) == 3


def test_lazy_self_reference():
    nested = union(number, lazy(lambda: array_of(nested)))
    value = [1, [2, [3, []]]]
    assert nested.validate(value)
    assert nested.encode(value) == value
    assert nested.decode(value) == value
    assert nested.validate(7)
    assert not nested.validate([1, ['x']])
    assert not nested.validate({'a': 1})


@dataclasses.dataclass
class Bank:
    name: str


@dataclasses.dataclass
class Account:
    bank: Bank
    number: str


def test_injecting():
    account = injecting(
        record_of({'number': string}),
        lambda acct: {'number': acct.number},
        lambda bank: lambda base: Account(bank, base['number']),
    )
    assert isinstance(account, InjectSchema)

    bank = Bank('First Bank')
    original = Account(bank, '123')
    data = account.encode(account.project(original))
    assert data == {'number': '123'}
    assert account.validate(data)
    assert not account.validate({'number': 123})
    assert account.inject(bank)(account.decode(data)) == original
