"""
Logging setup for the editor.

The screen belongs to curses while the editor runs, so records only go to a
rotating log file.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Union

__all__ = ["setup_logging"]

_DEFAULT_LOG_DIR = Path.home() / ".slime" / "logs"


def setup_logging(
    level: int = logging.INFO,
    *,
    log_dir: Union[Path, str, None] = None,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> Path:
    """Configure root logging with a rotating file handler and return the log path."""

    target_dir = Path(log_dir or _DEFAULT_LOG_DIR).expanduser()
    target_dir.mkdir(parents=True, exist_ok=True)
    log_path = target_dir / "slime.log"

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=[file_handler], force=True)
    logging.captureWarnings(True)

    return log_path
