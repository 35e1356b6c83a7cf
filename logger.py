"""Logging configuration for the ccusage Slack status updater.

One dated log file per day under LOG_DIR, plus console output when run from a
terminal. Every tick logs the fetched month/cost and one line per account.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from config import LOG_DIR, LOG_LEVEL

LOGGER_NAME = "ccusage_slack"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(log_dir: Path = LOG_DIR, level: str = LOG_LEVEL) -> logging.Logger:
    """Attach the file and console handlers to the service logger.

    Args:
        log_dir: Directory for the dated log files
        level: Level name such as "INFO" or "DEBUG"; unknown names fall back to INFO
    """
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(_resolve_level(level))
    log.handlers.clear()

    file_handler = logging.FileHandler(log_dir / f"{datetime.now():%Y-%m-%d}.log", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    log.addHandler(file_handler)

    # Scheduled/background runs have no terminal; they only get the file
    if sys.stdout is not None and sys.stdout.isatty():
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        log.addHandler(console_handler)

    return log


logger = setup_logging()
