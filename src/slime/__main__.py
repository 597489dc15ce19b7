"""
Entry point for Slime.
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .config import HELP_MESSAGE, EditorConfig
from .core.buffer import Buffer
from .ui.input_handler import InputHandler
from .ui.terminal import Terminal, TerminalError
from .ui.window import WindowManager
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog="slime",
        description="Slime - Terminal Text Editor"
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=str,
        help="File to open"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: INFO, or SLIME_LOG_LEVEL)"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for slime.log (default: ~/.slime/logs, or SLIME_LOG_DIR)"
    )
    return parser.parse_args(argv)


def open_buffer(filename: Optional[str]) -> Tuple[Buffer, Optional[str]]:
    """
    Load the file named on the command line.

    Returns:
        Tuple[Buffer, Optional[str]]: The buffer and a status message to
            show, if any. Failing to open never aborts the editor.
    """

    if not filename:
        return Buffer(), None

    try:
        return Buffer.open(filename), None
    except FileNotFoundError:
        logger.info("%s does not exist yet, starting an empty buffer", filename)
        return Buffer(path=filename), f"New file: {filename}"
    except IOError as e:
        logger.warning("Could not open %s: %s", filename, e)
        return Buffer(), f"ERR: Could not open file {filename}"


def run(config: EditorConfig) -> None:
    """Run the editor until the user quits."""

    buffer, message = open_buffer(config.filename)

    with Terminal(config.poll_timeout_ms) as terminal:
        window_manager = WindowManager(terminal, buffer)
        input_handler = InputHandler(window_manager)
        window_manager.set_status_message(message or HELP_MESSAGE)
        window_manager.refresh_screen()

        while True:
            event = terminal.read_event()
            if event is None:
                # Redraw so expired status messages disappear.
                if window_manager.status_message:
                    window_manager.refresh_screen()
                continue

            if not input_handler.handle_event(event):
                break

            window_manager.refresh_screen()

        window_manager.refresh_screen(should_quit=True)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)
    try:
        config = EditorConfig.from_args(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    log_path = setup_logging(config.log_level, log_dir=config.log_dir)
    logger.info("Starting slime, logging to %s", log_path)

    try:
        run(config)
    except TerminalError as e:
        logger.error("Terminal failure: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
