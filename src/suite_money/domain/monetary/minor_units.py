"""Fixed-point conversions between decimal amounts and integer minor units.

A monetary quantity is stored as an integer count of minor units (cents for
USD, fils for KWD, whole yen for JPY). The functions here own the only places
where a decimal, float or whole-unit integer becomes such a count, and where
the count becomes an exact decimal again.
"""

from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import UnsupportedCurrencyScaleError
from suite_money.domain.monetary.rounding import RoundingMode, round_to_integer
from suite_money.utils.decimal_tools import DecimalLike, WORKING_PRECISION, as_decimal

# Minor units per major unit, indexed by currency precision
SCALE_FACTORS: tuple[int, ...] = (1, 10, 100, 1000)


def scale_factor(currency: Currency) -> int:
    """Return the number of minor units in one major unit of $currency.

    Raises:
        UnsupportedCurrencyScaleError: If $currency.precision is outside the scale table.
    """
    precision = currency.precision
    if not 0 <= precision < len(SCALE_FACTORS):
        raise UnsupportedCurrencyScaleError(currency.code, precision, len(SCALE_FACTORS) - 1)
    return SCALE_FACTORS[precision]


def from_decimal(amount: DecimalLike, currency: Currency, rounding: RoundingMode) -> int:
    """Convert a decimal amount in major units into minor units.

    The decimal point is shifted right by the currency precision and the result
    rounded to an integer with $rounding.

    Args:
        amount: Amount in major units (e.g., Decimal("12.345") dollars).
        currency: Currency that fixes the scale.
        rounding: Rounding strategy applied to the shifted value.

    Returns:
        int: Amount in minor units.

    Raises:
        UnsupportedCurrencyScaleError: If the currency scale is not supported.
        RoundingNecessaryError: If $rounding is UNNECESSARY and digits would be lost.
    """
    scale_factor(currency)
    decimal_amount = as_decimal(amount)
    with localcontext() as ctx:
        # Exact shift: precision covers every coefficient digit
        ctx.prec = max(WORKING_PRECISION, len(decimal_amount.as_tuple().digits) + currency.precision + 2)
        shifted = decimal_amount.scaleb(currency.precision)
    return round_to_integer(shifted, rounding)


def from_float(amount: float, currency: Currency) -> int:
    """Convert a float amount in major units into minor units.

    This is the convenience path: the float product `amount * factor` is rounded
    to the nearest integer, ties away from zero. No rounding mode can be chosen
    and the binary imprecision of $amount is carried into the product as is, so
    `1.005` becomes 100 cents. Use `from_decimal` when that matters.

    Raises:
        TypeError: If $amount is not a float or int.
        ValueError: If $amount is NaN or infinite.
        UnsupportedCurrencyScaleError: If the currency scale is not supported.
    """
    # Raise: only real numbers take this path
    if isinstance(amount, bool) or not isinstance(amount, (float, int)):
        raise TypeError(f"$amount must be a float, but provided value is: {amount!r}")

    factor = scale_factor(currency)
    product = float(amount) * factor

    # Raise: NaN and infinities have no minor-unit representation
    if not math.isfinite(product):
        raise ValueError(f"$amount must be a finite number, but provided value is: {amount!r}")

    return int(Decimal(product).to_integral_value(rounding=ROUND_HALF_UP))


def from_major_units(amount: int, currency: Currency) -> int:
    """Convert a whole number of major units into minor units."""
    # Raise: whole units must be a plain int
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"$amount must be an int, but provided value is: {amount!r}")
    return amount * scale_factor(currency)


def to_decimal(minor_units: int, currency: Currency) -> Decimal:
    """Return the exact decimal amount in major units, with the currency's scale.

    Example:
        >>> to_decimal(2345, USD)
        Decimal('23.45')
    """
    value = Decimal(minor_units)
    with localcontext() as ctx:
        ctx.prec = max(WORKING_PRECISION, value.adjusted() + 2)
        return value.scaleb(-currency.precision)
