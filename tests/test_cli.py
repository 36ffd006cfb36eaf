"""Tests for the pickday command line."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from pickday.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path / "pickday" / "config.toml"


class TestGrid:
    """Tests for the grid command."""

    def test_grid_for_month(self) -> None:
        """Should print the requested month."""
        result = runner.invoke(app, ["grid", "--month", "2024-03", "--first-weekday", "sunday"])

        assert result.exit_code == 0
        assert "March 2024" in result.output
        assert "Sun" in result.output

    def test_invalid_month(self) -> None:
        """Should fail for a malformed month."""
        result = runner.invoke(app, ["grid", "--month", "March"])

        assert result.exit_code == 1


class TestDescribe:
    """Tests for the describe command."""

    def test_single(self) -> None:
        """Should describe a single date."""
        result = runner.invoke(app, ["describe", "2024-05-10"])

        assert result.exit_code == 0
        assert "May 10" in result.output

    def test_range(self) -> None:
        """Should describe a range."""
        result = runner.invoke(app, ["describe", "2024-05-05..2024-05-10"])

        assert result.exit_code == 0
        assert "May 05 - May 10" in result.output

    def test_bad_locale_in_config(self, isolated_config: Path) -> None:
        """Should report a non-string locale instead of crashing."""
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("locale = 5\n")

        result = runner.invoke(app, ["describe", "2024-05-10"])

        assert result.exit_code == 1
        assert "locale must be a string" in result.output

    def test_invalid(self) -> None:
        """Should fail for an unparseable value."""
        result = runner.invoke(app, ["describe", "tomorrow"])

        assert result.exit_code == 1


class TestPick:
    """Tests for the interactive pick command."""

    def test_pick_single(self) -> None:
        """Should print the selected day."""
        result = runner.invoke(app, ["pick", "--month", "2024-05"], input="10\nq\n")

        assert result.exit_code == 0
        assert "2024-05-10T00:00" in result.output

    def test_pick_range_with_time(self) -> None:
        """Should build an ordered range and apply the start time."""
        result = runner.invoke(app, ["pick", "--month", "2024-05", "--time"], input="r\n10\n5\ns 14:30\nq\n")

        assert result.exit_code == 0
        assert "May 05 - May 10" in result.output
        assert "2024-05-05T14:30..2024-05-10T00:00" in result.output

    def test_pick_keeps_going_after_bad_input(self) -> None:
        """Should report bad input and keep prompting."""
        result = runner.invoke(app, ["pick", "--value", "2024-05-10"], input="banana\nq\n")

        assert result.exit_code == 0
        assert "Unknown action" in result.output
        assert "2024-05-10T00:00" in result.output

    def test_pick_invalid_value(self) -> None:
        """Should fail for a malformed initial value."""
        result = runner.invoke(app, ["pick", "--value", "2024-05-10..2024-05-01"])

        assert result.exit_code == 1


class TestInit:
    """Tests for the init command."""

    def test_creates_config(self, isolated_config: Path) -> None:
        """Should write the config file."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert isolated_config.exists()

    def test_refuses_overwrite(self, isolated_config: Path) -> None:
        """Should refuse to overwrite without --force."""
        runner.invoke(app, ["init"])

        assert runner.invoke(app, ["init"]).exit_code == 1
        assert runner.invoke(app, ["init", "--force"]).exit_code == 0
