"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "pomodoro_cli"
_LOG_FILE = "pomodoro.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

DEFAULT_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_logger: logging.Logger | None = None


def _create_logger(log_dir: Path) -> logging.Logger:
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
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

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(DEFAULT_LEVEL)
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(level: str | None = None) -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    The timer owns the terminal while it runs, so records only ever go to the
    rotating log file in ``user_log_dir``.

    Args:
        level: One of ``LOG_LEVELS``. When given, replaces the current level;
            otherwise the logger keeps whatever level it already has
            (``DEFAULT_LEVEL`` on first use).
    """
    global _logger
    if _logger is None:
        _logger = _create_logger(Path(user_log_dir(_APP_NAME)))
    if level is not None:
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{level}', expected one of {', '.join(LOG_LEVELS)}")
        _logger.setLevel(level)
    return _logger
