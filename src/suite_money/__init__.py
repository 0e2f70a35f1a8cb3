__version__ = "0.1.0"

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_registry import USD, EUR, GBP, JPY
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rounding import RoundingMode
from suite_money.presentation.formatter import CurrencyDisplay, MoneyFormatter
from suite_money.presentation.locale import Locale

__all__ = ["Currency", "Money", "RoundingMode", "CurrencyDisplay", "MoneyFormatter", "Locale", "USD", "EUR", "GBP", "JPY"]
