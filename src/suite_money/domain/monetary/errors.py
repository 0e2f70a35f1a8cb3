"""Exceptions raised by monetary operations."""

from __future__ import annotations

from typing import Any


class CurrencyMismatchError(ValueError):
    """Raised when two Money values of different currencies meet in one operation."""

    def __init__(self, left_code: str, right_code: str):
        self.left_code = left_code
        self.right_code = right_code
        super().__init__("Cannot compare different currencies.")


class MissingMoneyError(ValueError):
    """Raised when a cross-value operation receives None instead of Money."""

    def __init__(self):
        super().__init__("Cannot compare money to null.")


class InvalidAllocationError(ValueError):
    """Raised when an allocation target (share count or ratio vector) is unusable."""

    def __init__(self, target: Any, reason: str):
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot allocate money to $target ({target}) because {reason}")


class RoundingNecessaryError(ArithmeticError):
    """Raised when exact rounding was requested but a nonzero digit would be discarded."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Rounding necessary: $value ({value}) is not an integral number of minor units")


class UnsupportedCurrencyScaleError(ValueError):
    """Raised when a currency has more fraction digits than the minor-unit scale table supports."""

    def __init__(self, code: str, precision: int, max_precision: int):
        self.code = code
        self.precision = precision
        self.max_precision = max_precision
        super().__init__(
            f"Currency '{code}' has $precision {precision}, which is out of the supported range 0..{max_precision}"
        )
