"""Mini README: Tests for the offline ``calculate`` CLI command."""

from __future__ import annotations

from typer.testing import CliRunner

from main_service import cli

runner = CliRunner()


def test_calculate_adds_by_default() -> None:
    result = runner.invoke(cli, ["calculate", "0g 99s 99c", "1s 1c"])
    assert result.exit_code == 0
    assert result.output.strip() == "1g 1s 0c"


def test_calculate_subtracts() -> None:
    result = runner.invoke(cli, ["calculate", "1g", "1c", "--action", "subtract"])
    assert result.exit_code == 0
    assert result.output.strip() == "0g 99s 99c"


def test_calculate_reports_failures() -> None:
    short = runner.invoke(cli, ["calculate", "5c", "10c", "--action", "subtract"])
    assert short.exit_code == 1
    assert "Not enough currency" in short.output

    unknown = runner.invoke(cli, ["calculate", "5c", "10c", "--action", "divide"])
    assert unknown.exit_code == 2

    malformed = runner.invoke(cli, ["calculate", "5x", "10c"])
    assert malformed.exit_code == 2
