"""
Logging utilities.

WHAT: One place that wires the mandi console and file log handlers
WHY: Engine decisions go to a full debug file while the console stays at the configured level
HOW: Named handlers on the root logger, replaced (never duplicated) on every call
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ..core.config import settings

CONSOLE_HANDLER_NAME = "mandi.console"
FILE_HANDLER_NAME = "mandi.file"

_CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure application logging.

    Handlers installed by earlier calls are swapped out, and handlers owned
    by anyone else (pytest capture, uvicorn) are left in place.

    Args:
        level: Console level name (defaults to settings.LOG_LEVEL)
        log_file: Log file path (defaults to settings.LOG_FILE)
    """
    console_level = _level(level or settings.LOG_LEVEL)
    path = Path(log_file or settings.LOG_FILE)
    path.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() in (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT))
    root_logger.addHandler(console_handler)

    # File keeps everything; the root must pass DEBUG records through to it
    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.set_name(FILE_HANDLER_NAME)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))
    root_logger.addHandler(file_handler)

    root_logger.setLevel(logging.DEBUG)
    root_logger.info(f"Logging initialized (console={logging.getLevelName(console_level)}, file={path})")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
