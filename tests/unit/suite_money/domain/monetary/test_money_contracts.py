"""Equality, ordering, hashing and copy contracts of Money."""

from __future__ import annotations

import copy
import itertools

import pytest

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_registry import EUR, USD
from suite_money.domain.monetary.money import Money


def _equal_instance() -> Money:
    return Money.dollars(22.34)


def _less_instance() -> Money:
    return Money.dollars(12.99)


def _greater_instance() -> Money:
    return Money.dollars(7812.99)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# region Equality


def test_equality_is_reflexive():
    money = _equal_instance()
    assert money == money


def test_equality_is_symmetric():
    a, b = _equal_instance(), _equal_instance()
    assert a is not b
    assert a == b
    assert b == a


def test_equality_is_transitive():
    a, b, c = _equal_instance(), Money(2234, USD), Money.from_str("22.34 USD")
    assert a == b
    assert b == c
    assert a == c


def test_not_equal_to_none_or_other_types():
    money = _equal_instance()
    assert money != None  # noqa: E711
    assert not money.__eq__(None)
    assert money != 2234
    assert money != "22.34 USD"


def test_not_equal_for_different_amount_or_currency():
    assert Money(2234, USD) != Money(2235, USD)
    assert Money(2234, USD) != Money(2234, EUR)


def test_currency_compared_by_code():
    usd_lookalike = Currency("USD", 2, "Another US Dollar")
    assert Money(100, usd_lookalike) == Money(100, USD)


def test_equal_values_have_equal_hashes():
    assert hash(_equal_instance()) == hash(_equal_instance())
    assert len({_equal_instance(), _equal_instance(), _less_instance()}) == 2


def test_hash_is_stable():
    money = _equal_instance()
    first = hash(money)
    for _ in range(10):
        assert hash(money) == first


# endregion

# region Ordering


def test_compare_to_returns_sign():
    assert _less_instance().compare_to(_equal_instance()) == -1
    assert _equal_instance().compare_to(_equal_instance()) == 0
    assert _greater_instance().compare_to(_equal_instance()) == 1


def test_ordering_is_antisymmetric():
    monies = [_less_instance(), _equal_instance(), _greater_instance(), Money.dollars(-5.00), Money.zero(USD)]
    for a, b in itertools.product(monies, repeat=2):
        assert _sign(a.compare_to(b)) == -_sign(b.compare_to(a))


def test_ordering_is_consistent_with_equals():
    monies = [_less_instance(), _equal_instance(), _greater_instance(), _equal_instance()]
    for a, b in itertools.product(monies, repeat=2):
        assert (a.compare_to(b) == 0) == (a == b)


def test_ordering_is_transitive():
    less, equal, greater = _less_instance(), _equal_instance(), _greater_instance()
    assert less < equal
    assert equal < greater
    assert less < greater


def test_sorting():
    monies = [_greater_instance(), _less_instance(), _equal_instance()]
    assert sorted(monies) == [_less_instance(), _equal_instance(), _greater_instance()]


# endregion

# region Copy


@pytest.mark.parametrize("copy_function", [copy.copy, copy.deepcopy, Money.copy])
def test_copy_is_equal_but_not_same(copy_function):
    original = _equal_instance()
    copied = copy_function(original)

    assert copied is not original
    assert copied == original
    assert copied.currency is original.currency


def test_copy_is_independent():
    original = _equal_instance()
    copied = copy.deepcopy(original)
    changed = copied + Money.dollars(1.00)

    assert original == _equal_instance()
    assert copied == _equal_instance()
    assert changed != original


# endregion
