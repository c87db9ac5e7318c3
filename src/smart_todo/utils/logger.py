"""Application-wide logger for Smart To-Do.

Every module logs through ``logging.getLogger(__name__)``. Records from the
``smart_todo`` namespace end up in one rotating file under the platform log
directory; nothing reaches the terminal, which belongs to rich output.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "smart_todo"
_LOG_FILE = "smart_todo.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

LOG_LEVEL_ENV = "SMART_TODO_LOG_LEVEL"
DEFAULT_LEVEL = logging.DEBUG

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Return the path of the active log file."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def resolve_level(value: str | None = None) -> int:
    """Turn a level name such as ``info`` into a logging level.

    Falls back to ``SMART_TODO_LOG_LEVEL`` and then to DEBUG. Unknown names
    also mean DEBUG.
    """
    name = (value or os.getenv(LOG_LEVEL_ENV) or "").strip().upper()
    level = logging.getLevelName(name) if name else DEFAULT_LEVEL
    return level if isinstance(level, int) else DEFAULT_LEVEL


def _file_handler(logger: logging.Logger, path: Path) -> logging.Handler | None:
    for handler in logger.handlers:
        if isinstance(handler, logging.handlers.RotatingFileHandler) and (
            handler.baseFilename == os.path.abspath(path)
        ):
            return handler
    return None


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    Other handlers on the ``smart_todo`` logger, such as ones installed by a
    test runner, are left alone; the file handler is added unless that same
    file is already attached.
    """
    global _logger
    if _logger is not None:
        return _logger

    path = log_file_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(resolve_level())

    if _file_handler(logger, path) is None:
        handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
