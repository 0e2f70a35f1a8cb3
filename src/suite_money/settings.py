"""Environment-driven settings for applications and scripts using suite_money.

Settings are read from the process environment, after loading an optional
`.env` file. Money operations never read them implicitly: callers pass
`settings.default_locale` to formatting calls themselves.

Variables:
    SUITE_MONEY_LOG_LEVEL: Logging level name for the `suite_money` logger (default "WARNING").
    SUITE_MONEY_DEFAULT_LOCALE: Predefined locale name such as "en_US" or "de_DE" (default "en_US").
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from suite_money.presentation.locale import EN_US, Locale, locale_from_str

LOG_LEVEL_VAR = "SUITE_MONEY_LOG_LEVEL"
DEFAULT_LOCALE_VAR = "SUITE_MONEY_DEFAULT_LOCALE"


@dataclass(frozen=True)
class Settings:
    """Resolved settings.

    Attributes:
        log_level: Numeric logging level.
        default_locale: Locale to pass to formatting calls.
    """

    log_level: int = logging.WARNING
    default_locale: Locale = EN_US


def load_settings(dotenv_path: str | None = None) -> Settings:
    """Load settings from the environment and an optional `.env` file.

    Values already present in the environment win over the `.env` file.

    Args:
        dotenv_path: Path to a `.env` file. If None, python-dotenv searches for one.

    Returns:
        Settings: Resolved settings.

    Raises:
        ValueError: If a variable holds an unknown log level or locale name.
    """
    load_dotenv(dotenv_path=dotenv_path, override=False)

    level_name = os.environ.get(LOG_LEVEL_VAR, "WARNING").strip().upper()
    log_level = logging.getLevelName(level_name)
    # Raise: getLevelName returns a string for unknown names
    if not isinstance(log_level, int):
        raise ValueError(f"${LOG_LEVEL_VAR} must be a logging level name, but provided value is: '{level_name}'")

    locale_name = os.environ.get(DEFAULT_LOCALE_VAR, "en_US")
    try:
        default_locale = locale_from_str(locale_name)
    except ValueError as e:
        raise ValueError(f"${DEFAULT_LOCALE_VAR} must name a predefined locale, but provided value is: '{locale_name}'") from e

    return Settings(log_level=log_level, default_locale=default_locale)


def configure_logging(settings: Settings) -> None:
    """Apply $settings.log_level to the `suite_money` logger hierarchy."""
    logging.getLogger("suite_money").setLevel(settings.log_level)
