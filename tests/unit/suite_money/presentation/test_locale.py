from __future__ import annotations

import pytest

from suite_money.presentation.locale import DE_DE, EN_US, PREDEFINED_LOCALES, SV_SE, Locale, locale_from_str


def test_predefined_locales():
    assert EN_US.decimal_separator == "."
    assert EN_US.group_separator == ","
    assert DE_DE.decimal_separator == ","
    assert DE_DE.group_separator == "."
    assert not DE_DE.symbol_first
    assert set(PREDEFINED_LOCALES) == {"en_US", "en_GB", "en_CA", "de_DE", "fr_FR", "sv_SE"}


@pytest.mark.parametrize("name", ["de_DE", "de-DE", "DE_de", " de_DE "])
def test_locale_from_str(name):
    assert locale_from_str(name) is DE_DE


def test_locale_from_str_unknown():
    with pytest.raises(ValueError, match="Locale with \\$name 'xx_XX' not found"):
        locale_from_str("xx_XX")


def test_symbols_are_read_only():
    with pytest.raises(TypeError):
        SV_SE.symbols["SEK"] = "SEK"


def test_locale_is_frozen():
    with pytest.raises(AttributeError):
        EN_US.decimal_separator = ","


def test_symbol_codes_are_normalized():
    locale = Locale("xx_XX", symbols={"usd": "US$"})
    assert locale.symbols == {"USD": "US$"}


def test_equal_locales_hash_equal():
    a = Locale("xx_XX", symbols={"USD": "US$"})
    b = Locale("xx_XX", symbols={"USD": "US$"})
    assert a == b
    assert hash(a) == hash(b)


@pytest.mark.parametrize(
    "kwargs, message",
    [
        (dict(name=""), r"\$name must be a non-empty string"),
        (dict(name="xx", decimal_separator=""), r"\$decimal_separator must not be empty"),
        (dict(name="xx", decimal_separator=",", group_separator=","), r"must differ"),
        (dict(name="xx", grouping_size=-1), r"\$grouping_size must be >= 0"),
    ],
)
def test_invalid_locale(kwargs, message):
    with pytest.raises(ValueError, match=message):
        Locale(**kwargs)


def test_grouping_can_be_disabled():
    from suite_money.domain.monetary.currency_registry import USD
    from suite_money.domain.monetary.money import Money

    no_grouping = Locale("xx_XX", grouping_size=0)
    assert Money.from_major_units(1234567, USD).format(no_grouping) == "1234567.00 USD"
