"""
Logging configuration — central setup for the CLI and the web API.

Called once per process. Every module that does
``logger = logging.getLogger(__name__)`` inherits this config.

Level precedence:
    explicit level (CLI flag)  >  LINITE_LOG_LEVEL  >  WARNING

Optional file output via LINITE_LOG_FILE / LINITE_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "LINITE_LOG_LEVEL"
LOG_FILE_ENV = "LINITE_LOG_FILE"
LOG_FILE_LEVEL_ENV = "LINITE_LOG_FILE_LEVEL"

# Console format per verbosity tier: (format, datefmt)
_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d  %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
    logging.WARNING: ("%(message)s", None),
}

# File output always carries full detail
_FILE_FORMAT = ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d  %(message)s", "%Y-%m-%d %H:%M:%S")

# Third-party loggers kept at WARNING unless debugging
_NOISY_LOGGERS = ("werkzeug", "urllib3")


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> int:
    """Configure the root logger for the whole process.

    Args:
        level: Level name. Falls back to LINITE_LOG_LEVEL, then WARNING.
        log_file: Optional log file path. Falls back to LINITE_LOG_FILE.
        log_file_level: Level for the file handler. Falls back to
            LINITE_LOG_FILE_LEVEL, then the console level.
        quiet_third_party: Keep noisy library loggers at WARNING unless
            the console level is DEBUG.

    Returns:
        The effective numeric console level.
    """
    console_level = parse_level(level or os.environ.get(LOG_LEVEL_ENV))
    log_file = log_file or os.environ.get(LOG_FILE_ENV)
    log_file_level = log_file_level or os.environ.get(LOG_FILE_LEVEL_ENV)

    root = logging.getLogger()
    root.handlers.clear()

    tier = max(t for t in _CONSOLE_FORMATS if t <= max(console_level, logging.DEBUG))
    fmt, datefmt = _CONSOLE_FORMATS[tier]
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    root.addHandler(console)

    root_level = console_level
    if log_file:
        file_level = parse_level(log_file_level) if log_file_level else console_level
        root_level = min(root_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(*_FILE_FORMAT))
        root.addHandler(fh)

    root.setLevel(root_level)

    if quiet_third_party and console_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.raiseExceptions = False
    return console_level


def parse_level(level: str | None) -> int:
    """Level name to its numeric constant; unknown names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
