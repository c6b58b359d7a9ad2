"""Fixtures for driving the CLI end to end.

Every invocation goes through ``taskpad_cli.main.app`` and the JSON storage
file under the isolated data directory, so state carries over between
invocations within one test.
"""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from taskpad_cli.main import app


@pytest.fixture()
def invoke():
    runner = CliRunner()

    def _invoke(*args: str, input: str | None = None):
        return runner.invoke(app, list(args), input=input)

    return _invoke


@pytest.fixture()
def session(invoke):
    """A demo session is active."""
    result = invoke("login", "--provider", "demo")
    assert result.exit_code == 0, result.output
    return invoke


@pytest.fixture()
def listed(invoke):
    """Return the current tasks as dicts, newest first."""

    def _listed() -> list[dict]:
        result = invoke("list", "--json")
        assert result.exit_code == 0, result.output
        return json.loads(result.output)["tasks"]

    return _listed
