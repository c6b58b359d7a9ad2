"""Domain exceptions.

Every error a command can report carries the exit code the CLI should use.
"""

from taskpad_cli.utils.exit_codes import (
    ERROR_AUTH_FAILURE,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
)


class AppError(Exception):
    """Application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


class TaskNotFoundError(AppError):
    def __init__(self, task_id: int | str):
        super().__init__(f"No task found with ID or suffix '{task_id}'", ERROR_NOT_FOUND)
        self.task_id = task_id


class AmbiguousTaskIdError(AppError):
    def __init__(self, suffix: str, matches: list[int]):
        listed = ", ".join(str(m) for m in matches)
        super().__init__(
            f"Task suffix '{suffix}' is ambiguous, matches: {listed}",
            ERROR_INVALID_ARGS,
        )
        self.matches = matches


class NotAuthenticatedError(AppError):
    def __init__(self) -> None:
        super().__init__(
            "Not logged in. Use 'taskpad login' to start a session.",
            ERROR_AUTH_FAILURE,
        )


class UnknownProviderError(AppError):
    def __init__(self, provider: str):
        super().__init__(
            f"Unknown login provider '{provider}'. "
            "Choose one of: facebook, google, demo.",
            ERROR_INVALID_ARGS,
        )
        self.provider = provider
