"""
Editor settings: fixed constants plus values taken from the command line and
the environment.
"""

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Final, Optional

VERSION: Final[str] = "0.1.0"

ENV_PREFIX: Final[str] = "SLIME_"

STATUS_MESSAGE_DURATION: Final[int] = 5  # seconds
QUIT_TIMES: Final[int] = 3
POLL_TIMEOUT_MS: Final[int] = 100

# Status bar and message bar sit below the text area.
RESERVED_ROWS: Final[int] = 2

STATUS_BAR_COLOR_PAIR: Final[int] = 1

HELP_MESSAGE: Final[str] = "HELP: Ctrl-S = save | Ctrl-F = find | Ctrl-Q = quit"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(f"{ENV_PREFIX}{name}", default)


@dataclass
class EditorConfig:
    """Settings for one editor session."""
    filename: Optional[str] = None
    log_level: int = logging.INFO
    log_dir: Optional[str] = None
    poll_timeout_ms: int = POLL_TIMEOUT_MS

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'EditorConfig':
        """Build the config from parsed arguments, falling back to SLIME_* variables."""

        level_name = (args.log_level or _env("LOG_LEVEL") or "INFO").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level_name}")

        timeout = _env("POLL_TIMEOUT_MS")
        try:
            poll_timeout_ms = int(timeout) if timeout else POLL_TIMEOUT_MS
        except ValueError as e:
            raise ValueError(f"{ENV_PREFIX}POLL_TIMEOUT_MS must be an integer, got {timeout!r}") from e

        return cls(
            filename=args.file,
            log_level=level,
            log_dir=args.log_dir or _env("LOG_DIR"),
            poll_timeout_ms=max(1, poll_timeout_ms),
        )
