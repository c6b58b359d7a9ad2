"""File logging for the taskpad_cli package.

Only the package root logger gets a handler. Modules log through
``logging.getLogger(__name__)`` and their records reach the rotating file via
the root, never the terminal.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

PACKAGE = "taskpad_cli"
LOG_FILENAME = "taskpad.log"
ROTATE_AT_BYTES = 5 * 1024 * 1024
KEEP_ROTATED = 3

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Where the current log file lives."""
    return Path(user_log_dir(PACKAGE)) / LOG_FILENAME


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=ROTATE_AT_BYTES, backupCount=KEEP_ROTATED, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def get_logger() -> logging.Logger:
    """The package root logger, given its file handler on first use."""
    global _logger
    if _logger is None:
        root = logging.getLogger(PACKAGE)
        root.setLevel(logging.DEBUG)
        root.propagate = False
        if not root.handlers:
            root.addHandler(_file_handler(log_file_path()))
        _logger = root
    return _logger
