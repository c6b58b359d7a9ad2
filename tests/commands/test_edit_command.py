"""Tests for the 'edit' and 'date' commands."""

import pytest


@pytest.fixture()
def task_id(session, listed):
    session("add", "Buy milk")
    return str(listed()[0]["id"])


class TestEdit:
    def test_edit_with_option(self, session, listed, task_id):
        result = session("edit", task_id, "--text", "Buy oat milk")
        assert result.exit_code == 0, result.output
        assert "Task updated: Buy oat milk" in result.output
        assert listed()[0]["text"] == "Buy oat milk"

    def test_edit_by_suffix(self, session, listed, task_id):
        result = session("edit", task_id[-4:], "-t", "Buy oat milk")
        assert result.exit_code == 0, result.output
        assert listed()[0]["text"] == "Buy oat milk"

    def test_edit_prompts_with_current_text(self, session, listed, task_id):
        result = session("edit", task_id, input="Buy bread\n")
        assert result.exit_code == 0, result.output
        assert "Edit Task" in result.output
        assert "Buy milk" in result.output
        assert listed()[0]["text"] == "Buy bread"

    def test_edit_prompt_accepting_default_keeps_text(self, session, listed, task_id):
        result = session("edit", task_id, input="\n")
        assert result.exit_code == 0, result.output
        assert listed()[0]["text"] == "Buy milk"

    def test_empty_text_deletes(self, session, listed, task_id):
        result = session("edit", task_id, "--text", "")
        assert result.exit_code == 0, result.output
        assert f"Task deleted: {task_id}" in result.output
        assert listed() == []

    def test_aborted_prompt_cancels(self, session, listed, task_id):
        result = session("edit", task_id, input="")
        assert "Cancelled" in result.output
        assert listed()[0]["text"] == "Buy milk"

    def test_unknown_id(self, session):
        result = session("edit", "999999", "--text", "x")
        assert result.exit_code == 5
        assert "No task found" in result.output

    def test_requires_session(self, invoke):
        result = invoke("edit", "1", "--text", "x")
        assert result.exit_code == 3


class TestDate:
    def test_date_with_option(self, session, listed, task_id):
        result = session("date", task_id, "--value", "2026-10-20 09:00")
        assert result.exit_code == 0, result.output
        assert "Date set to 2026-10-20 09:00" in result.output
        assert listed()[0]["date"] == "2026-10-20 09:00"

    def test_free_form_value(self, session, listed, task_id):
        session("date", task_id, "-v", "next Tuesday-ish")
        assert listed()[0]["date"] == "next Tuesday-ish"

    def test_empty_value_keeps_date(self, session, listed, task_id):
        before = listed()[0]["date"]
        result = session("date", task_id, "--value", "  ")
        assert result.exit_code == 0, result.output
        assert listed()[0]["date"] == before

    def test_prompt(self, session, listed, task_id):
        result = session("date", task_id, input="tomorrow\n")
        assert result.exit_code == 0, result.output
        assert "Edit Date (YYYY-MM-DD HH:MM)" in result.output
        assert listed()[0]["date"] == "tomorrow"
