"""
Configure logging for the SDK command line tools.

Library modules only fetch the package logger. The CLI calls configure_logging,
which writes log lines to stderr (stdout carries command output such as voice
listings) and optionally to a rotating file.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from hume_voice.config.constants import LOGGER_NAME

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5

# Transport libraries log every frame and connection at DEBUG
QUIET_LOGGERS = ("urllib3", "websockets")


def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Level name; defaults to the LOG_LEVEL environment variable
        log_file: Also write to this rotating file when given

    Returns:
        logging.Logger: The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        path = Path(log_file)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                path, maxBytes=MAX_LOG_SIZE, backupCount=BACKUP_COUNT
            )
        except OSError as e:
            logger.warning(f"Could not log to {path}: {e}")
        else:
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(logger.level, logging.WARNING))

    logger.propagate = False
    return logger
