from __future__ import annotations

from decimal import (
    Decimal,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    localcontext,
)
from enum import Enum

from suite_money.domain.monetary.errors import RoundingNecessaryError
from suite_money.utils.decimal_tools import WORKING_PRECISION


class RoundingMode(Enum):
    """
    Rounding strategy used when a decimal amount is reduced to whole minor units.

    - UP: away from zero.
    - DOWN: towards zero (truncation).
    - CEILING: towards positive infinity.
    - FLOOR: towards negative infinity.
    - HALF_UP: to nearest, ties away from zero.
    - HALF_DOWN: to nearest, ties towards zero.
    - HALF_EVEN: to nearest, ties to the even neighbour (banker's rounding).
    - UNNECESSARY: no rounding allowed; fails if a nonzero digit would be discarded.
    """

    UP = ROUND_UP
    DOWN = ROUND_DOWN
    CEILING = ROUND_CEILING
    FLOOR = ROUND_FLOOR
    HALF_UP = ROUND_HALF_UP
    HALF_DOWN = ROUND_HALF_DOWN
    HALF_EVEN = ROUND_HALF_EVEN
    UNNECESSARY = "UNNECESSARY"


def round_to_integer(value: Decimal, mode: RoundingMode) -> int:
    """Round $value to an integer using $mode.

    Args:
        value: Finite decimal to round.
        mode: Rounding strategy.

    Returns:
        The rounded value as int.

    Raises:
        TypeError: If $mode is not a RoundingMode.
        RoundingNecessaryError: If $mode is UNNECESSARY and $value has a nonzero fraction.
    """
    # Raise: plain strings like "ROUND_HALF_UP" are not accepted
    if not isinstance(mode, RoundingMode):
        raise TypeError(f"$mode must be a RoundingMode, but provided value is: {mode!r}")

    with localcontext() as ctx:
        ctx.prec = max(WORKING_PRECISION, value.adjusted() + 2)
        if mode is RoundingMode.UNNECESSARY:
            integral = value.to_integral_value(rounding=ROUND_DOWN)
            if integral != value:
                raise RoundingNecessaryError(value)
        else:
            integral = value.to_integral_value(rounding=mode.value)

    return int(integral)
