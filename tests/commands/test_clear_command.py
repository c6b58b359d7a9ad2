"""Tests for 'clear-completed' and 'clear-all'."""

import pytest


@pytest.fixture()
def three(session, listed):
    session("add", "a")
    session("add", "b")
    session("add", "c")
    session("toggle", str(listed()[1]["id"]))
    return session


def test_clear_completed(three, listed):
    result = three("clear-completed")
    assert result.exit_code == 0, result.output
    assert "Removed 1 completed task(s)" in result.output
    assert [t["text"] for t in listed()] == ["c", "a"]


def test_clear_completed_nothing_done(session, listed):
    session("add", "a")
    result = session("clear-completed")
    assert "Removed 0 completed task(s)" in result.output
    assert len(listed()) == 1


def test_clear_all_confirmed(three, listed):
    result = three("clear-all", input="y\n")
    assert result.exit_code == 0, result.output
    assert "Clear all tasks?" in result.output
    assert "Removed 3 task(s)" in result.output
    assert listed() == []


def test_clear_all_declined(three, listed):
    result = three("clear-all", input="n\n")
    assert result.exit_code == 0, result.output
    assert "Cancelled" in result.output
    assert [t["text"] for t in listed()] == ["c", "b", "a"]


def test_clear_all_yes_flag(three, listed):
    result = three("clear-all", "--yes")
    assert result.exit_code == 0, result.output
    assert "Clear all tasks?" not in result.output
    assert listed() == []


def test_clear_all_requires_session(invoke):
    result = invoke("clear-all", "--yes")
    assert result.exit_code == 3
