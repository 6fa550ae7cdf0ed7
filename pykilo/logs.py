"""Logging setup.

The terminal belongs to the frame renderer while the editor runs, so log
records only ever go to a file. Without a configured file the package logger
gets a ``NullHandler`` and records are dropped.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path

LOGGER_NAME = "pykilo"
LOG_FILE_ENV = "PYKILO_LOG_FILE"
LOG_LEVEL_ENV = "PYKILO_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
MAX_LOG_BYTES = 1_000_000
LOG_BACKUPS = 2


def resolve_log_file(cli_value: Path | None, config_value: Path | None) -> Path | None:
    """Pick the log file: CLI flag, then environment, then config."""
    if cli_value is not None:
        return cli_value
    env_value = os.environ.get(LOG_FILE_ENV, "").strip()
    if env_value:
        return Path(env_value).expanduser()
    return config_value


def resolve_log_level() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(log_file: Path | None, level: int = logging.INFO) -> logging.Logger:
    """Attach exactly one handler to the package logger and return it.

    An unusable ``log_file`` disables logging instead of aborting startup.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False
    logger.setLevel(level)

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
    except OSError as exc:
        # Still before raw mode, so stderr is readable.
        sys.stderr.write(f"pykilo: cannot open log file {log_file}: {exc}; logging disabled\n")
        logger.addHandler(logging.NullHandler())
        return logger
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
