from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TypeAlias


# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Enough significant digits for any amount we scale, multiply and quantize
WORKING_PRECISION = 60


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to a finite `Decimal`.

    Floats are converted via `str` to avoid binary noise, so `2.2` becomes
    `Decimal("2.2")` and not `Decimal("2.20000000000000017763568394002504646778106689453125")`.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is a bool or an unsupported type.
        ValueError: If $value is not a finite number.
    """
    # Raise: bool is an int subclass, but never a meaningful amount
    if isinstance(value, bool):
        raise TypeError(f"$value must be Decimal, int, str or float, but provided value is: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"$value cannot be converted to Decimal, provided value is: {value!r}") from e
    else:
        raise TypeError(f"$value must be Decimal, int, str or float, but provided value is: {value!r}")

    # Raise: NaN and infinities have no monetary meaning
    if not result.is_finite():
        raise ValueError(f"$value must be a finite number, but provided value is: {value!r}")

    return result
