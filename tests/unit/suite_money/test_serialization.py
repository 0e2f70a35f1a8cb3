from __future__ import annotations

import json
import pickle
from decimal import Decimal

import pytest

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_registry import EUR, JPY, KWD, USD
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rounding import RoundingMode
from suite_money.serialization import from_bytes, from_dict, from_json, from_text, to_bytes, to_dict, to_json, to_text
from tests.helpers.helper_money import create_mixed_currency_monies


# region Text


@pytest.mark.parametrize(
    "money, expected",
    [
        (Money.dollars(1234.5), "1234.50 USD"),
        (Money(-5, USD), "-0.05 USD"),
        (Money.from_major_units(1000, JPY), "1000 JPY"),
        (Money(1234, KWD), "1.234 KWD"),
        (Money.zero(EUR), "0.00 EUR"),
    ],
)
def test_to_text(money, expected):
    assert to_text(money) == expected
    assert from_text(expected) == money


def test_text_round_trip_for_mixed_currencies():
    for money in create_mixed_currency_monies():
        assert from_text(to_text(money)) == money


def test_from_text_accepts_fewer_fraction_digits():
    assert from_text("12.3 USD") == Money(1230, USD)
    assert from_text("12 usd") == Money(1200, USD)


@pytest.mark.parametrize(
    "value_str, message",
    [
        ("", "cannot be empty"),
        ("12.34", "must be in format 'value currency_code'"),
        ("12.34 USD extra", "must be in format 'value currency_code'"),
        ("12.34 XYZ", "Invalid currency part 'XYZ'"),
        ("abc USD", "Invalid value part 'abc'"),
        ("1.005 USD", "has more than 2 fraction digits for USD"),
        ("1.5 JPY", "has more than 0 fraction digits for JPY"),
    ],
)
def test_from_text_invalid(value_str, message):
    with pytest.raises(ValueError, match=message):
        from_text(value_str)


def test_from_text_rejects_long_fraction_with_trailing_digit():
    with pytest.raises(ValueError, match="has more than 2 fraction digits for USD"):
        from_text("1." + "0" * 70 + "1 USD")


def test_from_text_requires_string():
    with pytest.raises(TypeError):
        from_text(12.34)


# endregion

# region JSON


def test_to_dict_writes_amount_as_string():
    assert to_dict(Money.dollars(22.34)) == {"amount": "22.34", "currency": "USD"}


def test_json_round_trip():
    for money in create_mixed_currency_monies():
        encoded = to_json(money)
        assert isinstance(json.loads(encoded)["amount"], str)
        assert from_json(encoded) == money


def test_from_dict_accepts_int_amount():
    assert from_dict({"amount": 12, "currency": "EUR"}) == Money(1200, EUR)


def test_from_dict_rejects_float_amount():
    with pytest.raises(ValueError, match=r"\$amount must be a decimal string"):
        from_dict({"amount": 22.34, "currency": "USD"})


def test_from_dict_missing_keys():
    with pytest.raises(ValueError, match=r"missing keys: \['currency'\]"):
        from_dict({"amount": "1.00"})


def test_from_dict_unknown_currency():
    with pytest.raises(ValueError, match="is not a known currency"):
        from_dict({"amount": "1.00", "currency": "XYZ"})


@pytest.mark.parametrize("text", ["not json", "[1, 2]", '"1.00 USD"'])
def test_from_json_invalid(text):
    with pytest.raises(ValueError, match="Cannot call `from_json`"):
        from_json(text)


# endregion

# region Bytes


def test_bytes_round_trip():
    money = Money.dollars(22.34)
    restored = from_bytes(to_bytes(money))

    assert restored == money
    assert restored is not money
    assert restored.currency is USD


def test_pickle_round_trip_with_unregistered_currency():
    kes = Currency("KES", 2, "Kenyan Shilling", "KSh", 404)
    money = Money.from_decimal(Decimal("1500.25"), kes, RoundingMode.UNNECESSARY)
    restored = pickle.loads(pickle.dumps(money))

    assert restored == money
    assert restored.currency.symbol == "KSh"


def test_from_bytes_rejects_other_objects():
    with pytest.raises(ValueError, match="decoded object is not Money"):
        from_bytes(pickle.dumps({"amount": "1.00"}))


# endregion
