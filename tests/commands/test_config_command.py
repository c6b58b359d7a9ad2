"""Tests for the 'config' command group and 'version'."""

import json

from taskpad_cli import __version__


def test_view(invoke):
    result = invoke("config", "view")
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["ui"]["default_filter"] == "all"
    assert data["storage"]["path"] is None


def test_get(invoke):
    result = invoke("config", "get", "ui.default_sort")
    assert result.exit_code == 0
    assert "newest" in result.output


def test_get_unknown(invoke):
    result = invoke("config", "get", "ui.nope")
    assert result.exit_code == 5


def test_set_and_get(invoke):
    result = invoke("config", "set", "ui.default_filter", "active")
    assert result.exit_code == 0, result.output
    assert "active" in invoke("config", "get", "ui.default_filter").output


def test_set_boolean(invoke):
    invoke("config", "set", "output.color", "false")
    assert json.loads(invoke("config", "view").output)["output"]["color"] is False


def test_set_unknown_key(invoke):
    result = invoke("config", "set", "ui.nope", "x")
    assert result.exit_code == 5
    assert "Unknown configuration key" in result.output


def test_set_invalid_value(invoke):
    result = invoke("config", "set", "ui.default_sort", "random")
    assert result.exit_code == 2
    assert "Invalid value" in result.output


def test_reset_key(invoke):
    invoke("config", "set", "ui.default_sort", "oldest")
    result = invoke("config", "reset", "ui.default_sort", "--yes")
    assert result.exit_code == 0, result.output
    assert "newest" in invoke("config", "get", "ui.default_sort").output


def test_reset_declined(invoke):
    invoke("config", "set", "ui.default_sort", "oldest")
    result = invoke("config", "reset", input="n\n")
    assert "Cancelled" in result.output
    assert "oldest" in invoke("config", "get", "ui.default_sort").output


def test_storage_path_setting(invoke, tmp_path):
    target = tmp_path / "elsewhere.json"
    invoke("config", "set", "storage.path", str(target))
    invoke("theme")
    assert json.loads(target.read_text()) == {"todo.theme": "dark"}


def test_version(invoke):
    result = invoke("version")
    assert result.exit_code == 0
    assert __version__ in result.output
    assert "Storage:" in result.output
    assert "Log file:" in result.output
