"""Unit tests for SuggestingGroup, exercised through the real CLI."""

from __future__ import annotations

from typer.testing import CliRunner

from taskpad_cli.main import app

runner = CliRunner()


def test_typo_suggests_command():
    result = runner.invoke(app, ["lst"])
    assert result.exit_code == 1
    assert 'unknown command "lst"' in result.output
    assert "Did you mean this?" in result.output
    assert "list" in result.output


def test_prefix_typo_suggests_closest():
    result = runner.invoke(app, ["clear"])
    assert result.exit_code == 1
    assert "Did you mean" in result.output
    assert "clear-all" in result.output


def test_nonsense_falls_back_to_usage_error():
    result = runner.invoke(app, ["zzzzzz"])
    assert result.exit_code == 2
    assert "Did you mean" not in result.output
