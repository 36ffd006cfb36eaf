"""Tests for pickday.config."""

import stat
from pathlib import Path

import pytest

from pickday.config import (
    create_default_config,
    get_config_path,
    load_config,
    load_settings,
    save_config,
    settings_from_config,
)
from pickday.domain.models import CalendarLocale


class TestConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should place the config under XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "pickday" / "config.toml"

    def test_falls_back_to_dot_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should use ~/.config when XDG_CONFIG_HOME is unset."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

        assert get_config_path() == Path.home() / ".config" / "pickday" / "config.toml"


class TestConfigFile:
    """Tests for creating, saving and loading the config file."""

    def test_create_default_config(self, tmp_path: Path) -> None:
        """Should write the defaults with owner-only permissions."""
        config_path = tmp_path / "nested" / "config.toml"

        create_default_config(config_path)

        assert load_config(config_path) == {
            "locale": "",
            "first_weekday": "sunday",
            "includes_time": False,
            "range_mode_label": "Range Mode",
            "includes_time_label": "Include Time",
        }
        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Should round trip user settings."""
        config_path = tmp_path / "config.toml"

        save_config({"first_weekday": "monday", "includes_time": True}, config_path)

        assert load_config(config_path) == {"first_weekday": "monday", "includes_time": True}

    def test_load_missing_raises(self, tmp_path: Path) -> None:
        """Should raise FileNotFoundError for a missing file."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")


class TestSettings:
    """Tests for settings_from_config and load_settings."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Should fall back to defaults without a config file."""
        settings = load_settings(tmp_path / "missing.toml")

        assert settings.calendar_locale == CalendarLocale(None, 6)
        assert settings.includes_time is False
        assert settings.range_mode_label == "Range Mode"
        assert settings.includes_time_label == "Include Time"

    def test_file_values_override_defaults(self, tmp_path: Path) -> None:
        """Should apply values from the file."""
        config_path = tmp_path / "config.toml"
        save_config({"locale": "de_DE", "first_weekday": "monday", "range_mode_label": "Zeitraum"}, config_path)

        settings = load_settings(config_path)

        assert settings.calendar_locale == CalendarLocale("de_DE", 0)
        assert settings.range_mode_label == "Zeitraum"
        assert settings.includes_time_label == "Include Time"

    def test_numeric_weekday(self) -> None:
        """Should accept a weekday number."""
        assert settings_from_config({"first_weekday": 2}).calendar_locale.first_weekday == 2

    def test_invalid_weekday(self) -> None:
        """Should raise ValueError for an unknown weekday name."""
        with pytest.raises(ValueError):
            settings_from_config({"first_weekday": "someday"})

    def test_non_string_locale(self) -> None:
        """Should raise ValueError for a locale that is not a string."""
        with pytest.raises(ValueError, match="locale must be a string"):
            settings_from_config({"locale": 5})

    def test_non_integer_weekday(self) -> None:
        """Should raise ValueError for a fractional or boolean weekday."""
        for first_weekday in (1.5, True):
            with pytest.raises(ValueError, match="first_weekday"):
                settings_from_config({"first_weekday": first_weekday})

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Should raise ValueError for a broken file."""
        config_path = tmp_path / "config.toml"
        config_path.write_text("first_weekday = ")

        with pytest.raises(ValueError):
            load_settings(config_path)
