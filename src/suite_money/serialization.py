"""Round-trippable encodings of Money.

Three encodings are offered, all of which decode to a value equal to the one
encoded:

- text: ``"1234.50 USD"`` (`to_text` / `from_text`)
- JSON: ``{"amount": "1234.50", "currency": "USD"}`` (`to_dict`, `to_json` and their inverses)
- bytes: pickle (`to_bytes` / `from_bytes`)

Amounts are always written as decimal strings, never as floats.
"""

from __future__ import annotations

import json
import pickle
from decimal import Decimal, InvalidOperation
from typing import Any

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import RoundingNecessaryError
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rounding import RoundingMode

# Importing the registry registers the predefined currencies used for lookups
import suite_money.domain.monetary.currency_registry  # noqa: F401


def to_text(money: Money) -> str:
    """Return text like '1234.50 USD' (no grouping, '.' as decimal separator)."""
    return f"{format(money.amount, 'f')} {money.currency.code}"


def from_text(value_str: str) -> Money:
    """Parse Money from text like '1234.50 USD'.

    Args:
        value_str (str): Amount and currency code separated by whitespace.

    Returns:
        Money: Money object.

    Raises:
        ValueError: If the format is invalid, the currency is unknown, or the amount
            has more fraction digits than the currency allows.
    """
    if not isinstance(value_str, str):
        raise TypeError(f"$value_str must be a string, but provided value is: {value_str!r}")

    value_str = value_str.strip()
    if not value_str:
        raise ValueError("Value string with $value_str = '' cannot be empty")

    # Split by whitespace
    parts = value_str.split()
    if len(parts) != 2:
        raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'value currency_code'")

    value_part, currency_part = parts

    try:
        currency = Currency.from_str(currency_part)
    except ValueError as e:
        raise ValueError(f"Invalid currency part '{currency_part}' in string '{value_str}'") from e

    return _money_from_amount(value_part, currency, value_str)


def to_dict(money: Money) -> dict[str, str]:
    """Return a JSON-ready mapping: {"amount": "1234.50", "currency": "USD"}."""
    return {"amount": format(money.amount, "f"), "currency": money.currency.code}


def from_dict(data: dict[str, Any]) -> Money:
    """Build Money from a mapping produced by `to_dict`.

    Raises:
        ValueError: If keys are missing, the currency is unknown or the amount is invalid.
    """
    # Raise: both fields are required
    missing = [key for key in ("amount", "currency") if key not in data]
    if missing:
        raise ValueError(f"Cannot call `from_dict` because $data is missing keys: {missing}")

    amount = data["amount"]
    # Raise: floats would reintroduce binary rounding noise into a stored amount
    if isinstance(amount, float):
        raise ValueError(f"Cannot call `from_dict` because $amount must be a decimal string, but provided value is: {amount!r}")

    try:
        currency = Currency.from_str(data["currency"])
    except (ValueError, TypeError) as e:
        raise ValueError(f"Cannot call `from_dict` because $currency ({data['currency']!r}) is not a known currency") from e

    return _money_from_amount(str(amount), currency, data)


def to_json(money: Money) -> str:
    return json.dumps(to_dict(money))


def from_json(text: str) -> Money:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Cannot call `from_json` because $text is not valid JSON: {text!r}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Cannot call `from_json` because $text must hold a JSON object, but provided value is: {text!r}")
    return from_dict(data)


def to_bytes(money: Money) -> bytes:
    return pickle.dumps(money, protocol=pickle.HIGHEST_PROTOCOL)


def from_bytes(data: bytes) -> Money:
    """Decode Money from `to_bytes` output.

    Only decode bytes from a trusted source: this uses pickle.
    """
    money = pickle.loads(data)
    if not isinstance(money, Money):
        raise ValueError(f"Cannot call `from_bytes` because decoded object is not Money: {money!r}")
    return money


def _money_from_amount(value_part: str, currency: Currency, source: Any) -> Money:
    try:
        amount = Decimal(value_part)
    except (ValueError, TypeError, InvalidOperation) as e:
        raise ValueError(f"Invalid value part '{value_part}' in {source!r}") from e

    try:
        return Money.from_decimal(amount, currency, RoundingMode.UNNECESSARY)
    except RoundingNecessaryError as e:
        raise ValueError(f"Value part '{value_part}' in {source!r} has more than {currency.precision} fraction digits for {currency.code}") from e
