"""Logging setup for todolist.

Records go either to a size-rotated file under ~/.todolist/logs or, in dev
mode, to the Textual devtools console. Modules take their logger from
get_logger(__name__).
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Tuple


LOG_DIR = Path.home() / ".todolist" / "logs"
LOG_FILE = LOG_DIR / "todolist.log"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5

LOG_LEVEL_ENV = "TODOLIST_LOG_LEVEL"


def _resolve_level(log_level: Optional[str]) -> Tuple[str, int]:
    """Pick the level name and number; unknown names become INFO."""
    name = (log_level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    number = getattr(logging, name, None)
    if not isinstance(number, int):
        return "INFO", logging.INFO
    return name, number


def _build_handler(use_textual_handler: bool) -> logging.Handler:
    if use_textual_handler:
        from textual.logging import TextualHandler

        return TextualHandler()
    return RotatingFileHandler(
        LOG_FILE,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8"
    )


def setup_logging(
    log_level: Optional[str] = None,
    use_textual_handler: bool = False
) -> None:
    """Configure the root logger with a single handler.

    Calling it again replaces the previous handler.

    Args:
        log_level: Level name; when None, TODOLIST_LOG_LEVEL or INFO is used
        use_textual_handler: Log to the Textual console instead of the file
    """
    level_name, level = _resolve_level(log_level)

    LOG_DIR.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = _build_handler(use_textual_handler)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)

    logging.getLogger(__name__).info(
        f"Logging initialized: level={level_name}, "
        f"file={LOG_FILE}, "
        f"textual_handler={use_textual_handler}"
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module name."""
    return logging.getLogger(name)
