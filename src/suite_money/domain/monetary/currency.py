from __future__ import annotations

import logging
from typing import Dict

from bidict import bidict

logger = logging.getLogger(__name__)


class Currency:
    """Represents an ISO-4217 style currency.

    Attributes:
        code (str): Alphabetic currency code (e.g., "USD", "JPY").
        precision (int): Number of minor-unit decimal places (0-18).
        name (str): Full currency name.
        symbol (str): Display symbol (e.g., "$", "£"). Defaults to $code.
        numeric_code (int | None): ISO-4217 numeric code (e.g., 840 for USD).
    """

    # Class-level registries for predefined currencies
    _registry: Dict[str, "Currency"] = {}
    _numeric_codes: bidict[str, int] = bidict()

    def __init__(self, code: str, precision: int, name: str, symbol: str | None = None, numeric_code: int | None = None):
        """Initialize a Currency instance.

        Args:
            code (str): Alphabetic currency code (e.g., "USD").
            precision (int): Number of minor-unit decimal places (0-18).
            name (str): Full currency name.
            symbol (str | None): Display symbol. If None, $code is used.
            numeric_code (int | None): ISO-4217 numeric code.

        Raises:
            ValueError: If parameters are invalid.
        """
        # Raise: code must be a non-empty string
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        # Raise: precision must be a plain int within supported bounds
        if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0 or precision > 18:
            raise ValueError(f"$precision must be an integer between 0 and 18, but provided value is: {precision}")

        # Raise: name must be a non-empty string
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        # Raise: symbol, when given, must be a non-empty string
        if symbol is not None and (not isinstance(symbol, str) or not symbol.strip()):
            raise ValueError(f"$symbol must be a non-empty string or None, but provided value is: '{symbol}'")

        # Raise: numeric code, when given, must be a positive int
        if numeric_code is not None and (not isinstance(numeric_code, int) or isinstance(numeric_code, bool) or numeric_code <= 0):
            raise ValueError(f"$numeric_code must be a positive integer or None, but provided value is: {numeric_code}")

        self._code = code.upper().strip()
        self._precision = precision
        self._name = name.strip()
        self._symbol = symbol.strip() if symbol is not None else self._code
        self._numeric_code = numeric_code

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def precision(self) -> int:
        """Get the number of minor-unit decimal places."""
        return self._precision

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def symbol(self) -> str:
        """Get the display symbol."""
        return self._symbol

    @property
    def numeric_code(self) -> int | None:
        """Get the ISO-4217 numeric code, if known."""
        return self._numeric_code

    @classmethod
    def register(cls, currency: "Currency", overwrite: bool = False) -> None:
        """Register a currency in the global registry.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite existing currency.

        Raises:
            ValueError: If currency (or its numeric code) already exists and overwrite is False.
            TypeError: If currency is not Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.code in cls._registry and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        numeric_code = currency.numeric_code
        if numeric_code is not None:
            owner = cls._numeric_codes.inverse.get(numeric_code)
            if owner is not None and owner != currency.code and not overwrite:
                raise ValueError(f"Numeric code {numeric_code} is already used by currency '{owner}'. Use overwrite=True to replace it.")
            cls._numeric_codes.forceput(currency.code, numeric_code)
        else:
            cls._numeric_codes.pop(currency.code, None)

        cls._registry[currency.code] = currency
        logger.debug(f"Registered currency {currency!r}")

    @classmethod
    def from_str(cls, code: str) -> "Currency":
        """Get currency from registry by code.

        Args:
            code (str): Currency code to look up.

        Returns:
            Currency: The currency instance.

        Raises:
            TypeError: If $code is not a string.
            ValueError: If currency code is not found in registry.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        code = code.upper().strip()
        if code not in cls._registry:
            raise ValueError(f"Currency with code '{code}' not found in registry. Available currencies: {list(cls._registry.keys())}")

        return cls._registry[code]

    @classmethod
    def from_numeric(cls, numeric_code: int) -> "Currency":
        """Get currency from registry by its ISO-4217 numeric code.

        Args:
            numeric_code (int): Numeric code to look up (e.g., 978 for EUR).

        Returns:
            Currency: The currency instance.

        Raises:
            ValueError: If no registered currency uses $numeric_code.
        """
        code = cls._numeric_codes.inverse.get(numeric_code)
        if code is None:
            raise ValueError(f"Currency with numeric code {numeric_code} not found in registry")
        return cls._registry[code]

    @classmethod
    def is_registered(cls, code: str) -> bool:
        return isinstance(code, str) and code.upper().strip() in cls._registry

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __reduce__(self):
        return _restore_currency, (self.code, self.precision, self.name, self.symbol, self.numeric_code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.precision}, '{self.name}', '{self.symbol}', {self.numeric_code})"


def _restore_currency(code: str, precision: int, name: str, symbol: str, numeric_code: int | None) -> Currency:
    # Unpickle to the registered instance when it describes the same currency
    registered = Currency._registry.get(code)
    if registered is not None and registered.precision == precision:
        return registered
    return Currency(code, precision, name, symbol, numeric_code)
