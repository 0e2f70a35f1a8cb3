from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal, localcontext

from suite_money.domain.monetary import allocation
from suite_money.domain.monetary import minor_units as fixed_point
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import CurrencyMismatchError, InvalidAllocationError, MissingMoneyError
from suite_money.domain.monetary.rounding import RoundingMode
from suite_money.presentation.formatter import CurrencyDisplay, MoneyFormatter
from suite_money.presentation.locale import EN_US, Locale
from suite_money.utils.decimal_tools import DecimalLike, WORKING_PRECISION, as_decimal


class Money:
    """Represents a monetary amount as an integer count of minor units in one currency.

    Money is immutable: every arithmetic operation returns a new instance. Values of
    different currencies never mix; adding, subtracting or ordering them raises
    `CurrencyMismatchError`, and passing None raises `MissingMoneyError`.

    Construct Money through the named factories, which make the scaling explicit:

    - `from_decimal(amount, currency, rounding)`: major units, rounded with $rounding.
    - `from_float(amount, currency)`: major units, rounded to nearest (ties away from zero).
    - `from_major_units(amount, currency)`: whole major units, scaled.
    - `from_minor_units(amount, currency)`: minor units, not scaled. Same as `Money(amount, currency)`.
    - `dollars(amount)`: `from_float` in USD.

    Example:
        >>> a = Money.dollars(12.98)
        >>> b = Money.dollars(-11.98)
        >>> a + b == Money.dollars(1.00)
        True
        >>> [str(share) for share in Money.dollars(0.05).allocate(2)]
        ['0.03 USD', '0.02 USD']
    """

    __slots__ = ("_minor_units", "_currency")

    def __init__(self, minor_units: int, currency: Currency):
        """Initialize Money from a raw count of minor units.

        Args:
            minor_units (int): Amount in minor units (e.g., cents). Not scaled.
            currency (Currency): Currency object.

        Raises:
            TypeError: If $minor_units is not an int or $currency is not a Currency.
            UnsupportedCurrencyScaleError: If the currency has more than 3 fraction digits.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: minor units must be a plain int
        if isinstance(minor_units, bool) or not isinstance(minor_units, int):
            raise TypeError(f"$minor_units must be an int, but provided value is: {minor_units!r}")

        # Raise: currency scale must be covered by the minor-unit table
        fixed_point.scale_factor(currency)

        self._minor_units = minor_units
        self._currency = currency

    # region Factories

    @classmethod
    def from_decimal(cls, amount: DecimalLike, currency: Currency, rounding: RoundingMode) -> Money:
        """Create Money from an amount in major units, rounded with $rounding.

        Raises:
            RoundingNecessaryError: If $rounding is UNNECESSARY and $amount has too many fraction digits.
        """
        _check_currency(currency)
        return cls(fixed_point.from_decimal(amount, currency, rounding), currency)

    @classmethod
    def from_float(cls, amount: float, currency: Currency) -> Money:
        """Create Money from a float amount in major units.

        The scaled float is rounded to the nearest minor unit. There is no rounding
        mode parameter and float imprecision is accepted as is; prefer
        `from_decimal` for exact input.
        """
        _check_currency(currency)
        return cls(fixed_point.from_float(amount, currency), currency)

    @classmethod
    def from_major_units(cls, amount: int, currency: Currency) -> Money:
        """Create Money from a whole number of major units (12 USD -> 1200 cents)."""
        _check_currency(currency)
        return cls(fixed_point.from_major_units(amount, currency), currency)

    @classmethod
    def from_minor_units(cls, amount: int, currency: Currency) -> Money:
        """Create Money from minor units without scaling (1200 USD cents -> 12.00 USD)."""
        return cls(amount, currency)

    @classmethod
    def dollars(cls, amount: float) -> Money:
        """Convenience factory for US dollars, using `from_float`."""
        from suite_money.domain.monetary.currency_registry import USD

        return cls.from_float(amount, USD)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(0, currency)

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from text like '1000.50 USD'.

        The amount must not have more fraction digits than the currency allows.

        Raises:
            ValueError: If the text is not in 'amount CODE' form or the currency is unknown.
        """
        from suite_money.serialization import from_text

        return from_text(value_str)

    # endregion

    # region Properties

    @property
    def minor_units(self) -> int:
        """Get the amount in minor units (e.g., cents)."""
        return self._minor_units

    @property
    def amount(self) -> Decimal:
        """Get the exact amount in major units, with the currency's number of fraction digits."""
        return fixed_point.to_decimal(self._minor_units, self._currency)

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def is_zero(self) -> bool:
        return self._minor_units == 0

    @property
    def is_positive(self) -> bool:
        return self._minor_units > 0

    @property
    def is_negative(self) -> bool:
        return self._minor_units < 0

    # endregion

    # region Arithmetic

    def add(self, other: Money) -> Money:
        """Add Money of the same currency."""
        self._assert_same_currency_as(other)
        return self._new_money(self._minor_units + other._minor_units)

    def subtract(self, other: Money) -> Money:
        """Subtract Money of the same currency."""
        self._assert_same_currency_as(other)
        return self._new_money(self._minor_units - other._minor_units)

    def multiply(self, multiplier: DecimalLike, rounding: RoundingMode = RoundingMode.HALF_EVEN) -> Money:
        """Multiply by a number and round the product back to whole minor units.

        The product is computed in full decimal precision from the exact amount.
        Float multipliers are converted to Decimal via their `str` form first.

        Args:
            multiplier: Factor as Decimal, int, str or float.
            rounding: Rounding strategy for the product. Defaults to HALF_EVEN,
                which keeps repeated roundings free of systematic bias.

        Returns:
            Money: New instance in the same currency.
        """
        try:
            factor = as_decimal(multiplier)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Cannot call `multiply` because $multiplier ({multiplier!r}) cannot be converted to Decimal") from e

        amount = self.amount
        with localcontext() as ctx:
            # Exact product: its coefficient never has more digits than both coefficients together
            ctx.prec = max(WORKING_PRECISION, len(amount.as_tuple().digits) + len(factor.as_tuple().digits) + 2)
            product = amount * factor
        return self.__class__.from_decimal(product, self._currency, rounding)

    def negate(self) -> Money:
        return self._new_money(-self._minor_units)

    def allocate(self, target: int | Sequence[int]) -> list[Money]:
        """Allocate this amount into shares without losing or gaining minor units.

        Args:
            target: Either the number of equal shares, or a sequence of
                non-negative int ratios. In both cases the indivisible remainder
                goes to the earliest shares, one minor unit each.

        Returns:
            list[Money]: Shares in the same currency, summing to this amount.

        Raises:
            InvalidAllocationError: If the share count is <= 0, the ratios are unusable,
                or $target is neither an int nor a sequence.

        Examples:
            >>> [share.minor_units for share in Money.dollars(0.08).allocate(3)]
            [3, 3, 2]
            >>> [share.minor_units for share in Money.dollars(0.05).allocate([3, 7])]
            [2, 3]
        """
        if isinstance(target, int) and not isinstance(target, bool):
            shares = allocation.allocate_evenly(self._minor_units, target)
        elif isinstance(target, Sequence) and not isinstance(target, str):
            shares = allocation.allocate_by_ratios(self._minor_units, target)
        else:
            # Raise: target must be a share count or a ratio sequence
            raise InvalidAllocationError(target, "it must be an int count or a sequence of int ratios")
        return [self._new_money(share) for share in shares]

    # endregion

    # region Comparison

    def compare_to(self, other: Money) -> int:
        """Return -1, 0 or 1 as this Money is less than, equal to or greater than $other."""
        self._assert_same_currency_as(other)
        return (self._minor_units > other._minor_units) - (self._minor_units < other._minor_units)

    def greater_than(self, other: Money) -> bool:
        return self.compare_to(other) > 0

    def less_than(self, other: Money) -> bool:
        return self.compare_to(other) < 0

    def _assert_same_currency_as(self, other: Money | None) -> None:
        """Check that $other is Money of the same currency.

        Raises:
            MissingMoneyError: If $other is None.
            TypeError: If $other is not Money.
            CurrencyMismatchError: If currencies don't match.
        """
        if other is None:
            raise MissingMoneyError()
        if not isinstance(other, Money):
            raise TypeError(f"$other must be a Money instance, but provided value is: {other!r}")
        if self._currency != other._currency:
            raise CurrencyMismatchError(self._currency.code, other._currency.code)

    def __eq__(self, other) -> bool:
        """Money values are equal when both minor units and currency are equal."""
        if self is other:
            return True
        if not isinstance(other, Money):
            return False
        return self._minor_units == other._minor_units and self._currency == other._currency

    def __hash__(self) -> int:
        """Hash based on minor units and currency code."""
        return hash((self._minor_units, self._currency.code))

    def __lt__(self, other) -> bool:
        if other is not None and not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if other is not None and not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if other is not None and not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if other is not None and not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) >= 0

    # endregion

    # region Operators

    def __add__(self, other):
        """Add two Money objects of the same currency."""
        if other is not None and not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        """Support `sum()`, which starts from int 0."""
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other):
        """Subtract two Money objects of the same currency."""
        if other is not None and not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply Money by a number with HALF_EVEN rounding (Money * Money is not supported)."""
        if isinstance(other, Money) or isinstance(other, bool) or not isinstance(other, (Decimal, int, float)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self if self._minor_units >= 0 else self.negate()

    # endregion

    # region Copy & serialization

    def copy(self) -> Money:
        """Return an equal but distinct Money instance."""
        return self.__class__(self._minor_units, self._currency)

    def __copy__(self) -> Money:
        return self.copy()

    def __deepcopy__(self, memo) -> Money:
        # Currency is immutable reference data, so it is shared
        return self.copy()

    def __reduce__(self):
        return self.__class__, (self._minor_units, self._currency)

    # endregion

    # region Presentation

    def formatter(self, locale: Locale = EN_US, display: CurrencyDisplay = CurrencyDisplay.CODE) -> MoneyFormatter:
        """Return a new formatter scoped to this Money's currency."""
        return MoneyFormatter(self._currency, locale, display)

    def format(self, locale: Locale = EN_US, display: CurrencyDisplay = CurrencyDisplay.CODE) -> str:
        """Return display text like '1,234.56 USD' (or '$1,234.56' for CurrencyDisplay.SYMBOL)."""
        return self.formatter(locale, display).format(self)

    def __str__(self) -> str:
        """Return string like '1,000.50 USD'."""
        return self.format()

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, USD)'."""
        return f"{self.__class__.__name__}({self.amount}, {self._currency.code})"

    # endregion

    def _new_money(self, minor_units: int) -> Money:
        return self.__class__(minor_units, self._currency)


def _check_currency(currency: Currency) -> None:
    # Raise: currency must be an instance of Currency
    if not isinstance(currency, Currency):
        raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")
