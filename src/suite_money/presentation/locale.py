from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar, Mapping


@dataclass(frozen=True)
class Locale:
    """Number and currency conventions used to render money as text.

    Locales are passed explicitly to every formatting call; there is no
    process-wide default that formatting reads implicitly.

    Example:
        >>> DE_DE.decimal_separator
        ','

    Attributes:
        name: Locale tag, e.g. "en_US".
        decimal_separator: Separator between whole and fractional digits.
        group_separator: Separator between digit groups of the whole part.
        grouping_size: Number of digits per group; 0 disables grouping.
        symbol_first: If True, the currency symbol precedes the number ("$1.00").
        symbol_space: If True, a space separates symbol and number ("1,00 €").
        symbols: Per-locale symbol overrides keyed by currency code. Currencies
            without an override use `Currency.symbol` from the registry.
    """

    name: str
    decimal_separator: str = "."
    group_separator: str = ","
    grouping_size: int = 3
    symbol_first: bool = True
    symbol_space: bool = False
    symbols: Mapping[str, str] = field(default_factory=dict)

    NO_BREAK_SPACE: ClassVar[str] = "\u00a0"

    def __post_init__(self) -> None:
        """Validate the locale and freeze $symbols.

        Raises:
            ValueError: if some data are invalid.
        """
        # Raise: name must be non-empty
        if not self.name or not self.name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{self.name}'")

        # Raise: separators must be distinguishable
        if not self.decimal_separator:
            raise ValueError("$decimal_separator must not be empty")
        if self.decimal_separator == self.group_separator:
            raise ValueError(f"$decimal_separator and $group_separator must differ, but both are: '{self.decimal_separator}'")

        # Raise: grouping size cannot be negative
        if self.grouping_size < 0:
            raise ValueError(f"$grouping_size must be >= 0, but provided value is: {self.grouping_size}")

        object.__setattr__(self, "symbols", MappingProxyType({code.upper(): symbol for code, symbol in self.symbols.items()}))

    def __hash__(self) -> int:
        return hash((self.name, self.decimal_separator, self.group_separator, self.grouping_size, self.symbol_first, self.symbol_space, tuple(sorted(self.symbols.items()))))

    def __str__(self) -> str:
        return self.name


EN_US = Locale("en_US")
EN_GB = Locale("en_GB", symbols={"GBP": "£"})
EN_CA = Locale("en_CA", symbols={"CAD": "$"})
DE_DE = Locale(
    "de_DE",
    decimal_separator=",",
    group_separator=".",
    symbol_first=False,
    symbol_space=True,
)
FR_FR = Locale(
    "fr_FR",
    decimal_separator=",",
    group_separator=Locale.NO_BREAK_SPACE,
    symbol_first=False,
    symbol_space=True,
)
SV_SE = Locale(
    "sv_SE",
    decimal_separator=",",
    group_separator=Locale.NO_BREAK_SPACE,
    symbol_first=False,
    symbol_space=True,
    symbols={"SEK": "kr"},
)

PREDEFINED_LOCALES: dict[str, Locale] = {locale.name: locale for locale in (EN_US, EN_GB, EN_CA, DE_DE, FR_FR, SV_SE)}


def locale_from_str(name: str) -> Locale:
    """Return the predefined locale named $name (e.g. "de_DE" or "de-DE").

    Raises:
        ValueError: If no predefined locale has that name.
    """
    normalized = name.strip().replace("-", "_")
    for locale_name, locale in PREDEFINED_LOCALES.items():
        if locale_name.lower() == normalized.lower():
            return locale
    raise ValueError(f"Locale with $name '{name}' not found. Available locales: {list(PREDEFINED_LOCALES.keys())}")
