"""Tests for the 'add' command."""

import json


def test_add_requires_session(invoke):
    result = invoke("add", "Buy milk")
    assert result.exit_code == 3
    assert "Not logged in" in result.output


def test_add(session, listed):
    result = session("add", "Buy milk")
    assert result.exit_code == 0, result.output
    assert "Task added" in result.output
    assert "Buy milk" in result.output

    tasks = listed()
    assert [t["text"] for t in tasks] == ["Buy milk"]
    assert tasks[0]["done"] is False


def test_add_prepends(session, listed):
    session("add", "Walk the dog")
    session("add", "Buy milk")
    assert [t["text"] for t in listed()] == ["Buy milk", "Walk the dog"]


def test_add_trims_text(session, listed):
    session("add", "   Buy milk   ")
    assert listed()[0]["text"] == "Buy milk"


def test_add_blank_does_nothing(session, listed):
    result = session("add", "   ")
    assert result.exit_code == 0
    assert "Nothing to add." in result.output
    assert listed() == []


def test_add_reads_stdin(session, listed):
    result = session("add", input="Call the plumber\n")
    assert result.exit_code == 0, result.output
    assert listed()[0]["text"] == "Call the plumber"


def test_add_json_output(session):
    result = session("add", "Buy milk", "--json")
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["text"] == "Buy milk"
    assert data["done"] is False
    assert isinstance(data["id"], int)
    assert data["date"]
