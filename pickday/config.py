"""Configuration file management for pickday."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from pickday.dates import parse_weekday
from pickday.domain.models import CalendarLocale, LocaleName
from pickday.domain.selection import DEFAULT_INCLUDES_TIME_LABEL, DEFAULT_RANGE_MODE_LABEL


@dataclass(frozen=True)
class PickerSettings:
    """Settings used to build a picker, after merging the config file over defaults."""

    calendar_locale: CalendarLocale
    includes_time: bool
    range_mode_label: str
    includes_time_label: str


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "pickday" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "locale": "",
        "first_weekday": "sunday",
        "includes_time": False,
        "range_mode_label": DEFAULT_RANGE_MODE_LABEL,
        "includes_time_label": DEFAULT_INCLUDES_TIME_LABEL,
    }

    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def settings_from_config(config: dict[str, Any]) -> PickerSettings:
    """Build picker settings from a configuration dictionary, defaulting missing keys.

    Raises:
        ValueError: If locale is not a string or first_weekday is neither a
            weekday name nor a whole number from 0 to 6.
    """
    locale_name = config.get("locale", "")
    if not isinstance(locale_name, str):
        raise ValueError(f"locale must be a string, got {locale_name!r}")

    first_weekday = config.get("first_weekday", "sunday")
    if isinstance(first_weekday, str):
        first_weekday = parse_weekday(first_weekday)
    elif isinstance(first_weekday, bool) or not isinstance(first_weekday, int):
        raise ValueError(f"first_weekday must be a weekday name or 0-6, got {first_weekday!r}")

    return PickerSettings(
        calendar_locale=CalendarLocale(LocaleName(locale_name) if locale_name else None, first_weekday),
        includes_time=bool(config.get("includes_time", False)),
        range_mode_label=str(config.get("range_mode_label", DEFAULT_RANGE_MODE_LABEL)),
        includes_time_label=str(config.get("includes_time_label", DEFAULT_INCLUDES_TIME_LABEL)),
    )


def load_settings(config_path: Path | None = None) -> PickerSettings:
    """Load picker settings, using defaults when no config file exists.

    Args:
        config_path: Path to config file. If None, uses default location.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        ValueError: If a setting has an invalid value.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = {}
    return settings_from_config(config)
