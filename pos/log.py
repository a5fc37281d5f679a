"""structlog setup for the terminal app."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TextIO

import structlog

from pos.config import LOG_LEVEL, LOG_LEVEL_ENV, LOG_PATH, LOG_PATH_ENV

# File currently receiving log lines; replaced and closed on reconfigure.
_log_file: TextIO | None = None


def resolve_log_path() -> Path:
    """POS_LOG_PATH if set, otherwise the configured default."""
    override = os.environ.get(LOG_PATH_ENV, "").strip()
    return Path(override or LOG_PATH)


def resolve_log_level() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper() or LOG_LEVEL
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.INFO
    return level


def configure_logging(path: Path | None = None, level: int | None = None) -> Path:
    """
    Route structlog output to a key/value log file.

    The terminal belongs to the Textual UI, so nothing is written to stdout.
    Returns the path in use.
    """
    global _log_file

    log_path = path or resolve_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    log_file = log_path.open("a", encoding="utf-8")
    close_logging()
    _log_file = log_file

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level if level is not None else resolve_log_level()),
        logger_factory=structlog.WriteLoggerFactory(file=log_file),
        # Not cached: module-level loggers must follow a reconfigure to a new file.
        cache_logger_on_first_use=False,
    )
    return log_path


def close_logging() -> None:
    """Close the current log file and fall back to structlog's defaults."""
    global _log_file

    if _log_file is None:
        return
    structlog.reset_defaults()
    _log_file.close()
    _log_file = None
