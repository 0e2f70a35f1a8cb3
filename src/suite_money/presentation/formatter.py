from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import CurrencyMismatchError
from suite_money.domain.monetary.minor_units import from_decimal, scale_factor
from suite_money.domain.monetary.rounding import RoundingMode
from suite_money.presentation.locale import EN_US, Locale
from suite_money.utils.decimal_tools import DecimalLike

if TYPE_CHECKING:
    from suite_money.domain.monetary.money import Money

logger = logging.getLogger(__name__)


class CurrencyDisplay(Enum):
    """How the currency is shown next to the number."""

    CODE = "CODE"  # 1,234.56 USD
    SYMBOL = "SYMBOL"  # $1,234.56


class MoneyFormatter:
    """Renders amounts of one currency as text for one locale.

    A formatter holds only immutable configuration; `format` keeps its working
    state in local variables, so one instance may be shared between threads.
    `Money.formatter()` still builds a new instance on every call.

    Example:
        >>> formatter = MoneyFormatter(USD)
        >>> formatter.format(Decimal("1234.5"))
        '1,234.50 USD'
        >>> MoneyFormatter(EUR, DE_DE, CurrencyDisplay.SYMBOL).format(Decimal("-1234.5"))
        '-1.234,50 €'
    """

    def __init__(self, currency: Currency, locale: Locale = EN_US, display: CurrencyDisplay = CurrencyDisplay.CODE):
        # Raise: argument types
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")
        if not isinstance(locale, Locale):
            raise TypeError(f"$locale must be a Locale instance, but provided value is: {locale}")
        if not isinstance(display, CurrencyDisplay):
            raise TypeError(f"$display must be a CurrencyDisplay, but provided value is: {display}")

        scale_factor(currency)
        self._currency = currency
        self._locale = locale
        self._display = display
        logger.debug(f"MoneyFormatter set up for {currency.code} in locale '{locale.name}' ({display.name})")

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def display(self) -> CurrencyDisplay:
        return self._display

    @property
    def symbol(self) -> str:
        """Symbol for the currency in this locale, falling back to the registry symbol."""
        return self._locale.symbols.get(self._currency.code, self._currency.symbol)

    def format(self, value: Money | DecimalLike) -> str:
        """Format $value with the currency's fraction digits.

        Args:
            value: Money in this formatter's currency, or an amount in major
                units. Plain amounts are rounded HALF_EVEN to the currency scale.

        Returns:
            str: Formatted text.

        Raises:
            CurrencyMismatchError: If $value is Money in another currency.
        """
        from suite_money.domain.monetary.money import Money

        if isinstance(value, Money):
            if value.currency != self._currency:
                raise CurrencyMismatchError(self._currency.code, value.currency.code)
            minor_units = value.minor_units
        else:
            minor_units = from_decimal(value, self._currency, RoundingMode.HALF_EVEN)

        return self.format_minor_units(minor_units)

    def format_minor_units(self, minor_units: int) -> str:
        """Format an integer count of minor units of this formatter's currency."""
        number = self._format_number(abs(minor_units))
        sign = "-" if minor_units < 0 else ""

        if self._display is CurrencyDisplay.CODE:
            return f"{sign}{number} {self._currency.code}"

        symbol = self.symbol
        space = " " if self._locale.symbol_space else ""
        if self._locale.symbol_first:
            return f"{sign}{symbol}{space}{number}"
        return f"{sign}{number}{space}{symbol}"

    def _format_number(self, minor_units: int) -> str:
        precision = self._currency.precision
        whole, fraction = divmod(minor_units, scale_factor(self._currency))

        digits = str(whole)
        size = self._locale.grouping_size
        if size > 0 and len(digits) > size:
            groups = []
            while digits:
                groups.insert(0, digits[-size:])
                digits = digits[:-size]
            digits = self._locale.group_separator.join(groups)

        if precision == 0:
            return digits
        return f"{digits}{self._locale.decimal_separator}{fraction:0{precision}d}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._currency.code}, {self._locale.name}, {self._display.name})"


def format_money(money: Money, locale: Locale = EN_US, display: CurrencyDisplay = CurrencyDisplay.CODE) -> str:
    """Format $money for $locale using a fresh MoneyFormatter."""
    return MoneyFormatter(money.currency, locale, display).format(money)
