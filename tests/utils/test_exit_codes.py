"""Unit tests for taskpad_cli.utils.exit_codes."""

from __future__ import annotations

import pytest

from taskpad_cli.utils.exit_codes import (
    ERROR_AUTH_FAILURE,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    SUCCESS,
    get_exit_code_name,
)


def test_values():
    assert (SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_AUTH_FAILURE, ERROR_NOT_FOUND) == (
        0,
        1,
        2,
        3,
        5,
    )


@pytest.mark.parametrize(
    ("code", "name"),
    [
        (SUCCESS, "SUCCESS"),
        (ERROR_GENERAL, "ERROR_GENERAL"),
        (ERROR_INVALID_ARGS, "ERROR_INVALID_ARGS"),
        (ERROR_AUTH_FAILURE, "ERROR_AUTH_FAILURE"),
        (ERROR_NOT_FOUND, "ERROR_NOT_FOUND"),
    ],
)
def test_names(code, name):
    assert get_exit_code_name(code) == name


def test_unknown_code():
    assert get_exit_code_name(42) == "UNKNOWN(42)"
