"""
Logging setup shared by all modules.
Console output goes to stderr so the report on stdout stays clean; optional rotating file under logs/.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from config import (
    DEFAULT_LOG_DIR,
    DEFAULT_LOG_FILE,
    LOG_BACKUP_COUNT,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_MAX_BYTES,
)

# Attribute set on handlers we install, so repeated setup_logging calls replace them
_HANDLER_TAG = "_stock_reporter_handler"


def setup_logging(
    log_level: str = "INFO",
    log_to_file: bool = True,
    log_dir: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR)
        log_to_file: Also write to a rotating log file
        log_dir: Directory for the log file (default: config.DEFAULT_LOG_DIR)
        log_file: Log file name (default: config.DEFAULT_LOG_FILE)

    Returns:
        The configured root logger
    """
    level = getattr(logging, str(log_level).upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    setattr(console, _HANDLER_TAG, True)
    root.addHandler(console)

    if log_to_file:
        directory = Path(log_dir or DEFAULT_LOG_DIR)
        directory.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            directory / (log_file or DEFAULT_LOG_FILE),
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_TAG, True)
        root.addHandler(file_handler)

    logging.getLogger("urllib3").setLevel(logging.ERROR)  # Suppress HTTP warnings
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
