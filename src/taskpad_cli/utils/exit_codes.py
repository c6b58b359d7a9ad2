"""Process exit codes of the taskpad command.

Scripts can tell a rejected command (bad input, no session, unknown task)
from a crash by the code alone.
"""

SUCCESS = 0
ERROR_GENERAL = 1
ERROR_INVALID_ARGS = 2  # bad option value, unknown provider, ambiguous id suffix
ERROR_AUTH_FAILURE = 3  # no session
ERROR_NOT_FOUND = 5  # unknown task id or config key

_NAMES = {
    SUCCESS: "SUCCESS",
    ERROR_GENERAL: "ERROR_GENERAL",
    ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
    ERROR_AUTH_FAILURE: "ERROR_AUTH_FAILURE",
    ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
}


def get_exit_code_name(code: int) -> str:
    """Symbolic name of an exit code, for log lines."""
    return _NAMES.get(code, f"UNKNOWN({code})")
