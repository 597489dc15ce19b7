"""
Window management module: draws the text area, status bar and message bar.
"""

import logging
import time
from typing import Optional, TYPE_CHECKING

from ..config import (
    RESERVED_ROWS,
    STATUS_BAR_COLOR_PAIR,
    STATUS_MESSAGE_DURATION,
    VERSION,
)
from ..core.buffer import Buffer
from ..core.filetype import detect_file_type
from ..core.viewport import CursorController

if TYPE_CHECKING:
    from .input_handler import InputHandler
    from .terminal import Terminal

logger = logging.getLogger(__name__)


class WindowManager:
    """Owns the buffer on screen and draws it through the terminal."""

    FILE_NAME_WIDTH = 20

    def __init__(self, terminal: 'Terminal', buffer: Optional[Buffer] = None) -> None:
        self.terminal = terminal
        self.width, self.height = terminal.size()

        self.buffer = buffer if buffer is not None else Buffer()
        self.controller = CursorController(self.width, self.text_height())
        self.input_handler: Optional['InputHandler'] = None
        self.status_message: Optional[str] = None
        self.status_message_time = 0.0

        self._file_type_path: Optional[str] = None
        self._file_type = detect_file_type(None)

    def text_height(self) -> int:
        """Rows available for buffer text."""

        return max(1, self.height - RESERVED_ROWS)

    def set_status_message(self, message: str) -> None:
        """Show a message in the message bar for a few seconds."""

        self.status_message = message
        self.status_message_time = time.time()

    def resize(self, width: int, height: int) -> None:
        """Handle terminal resize events."""

        self.width, self.height = width, height
        self.terminal.resize(width, height)
        self.controller.resize(width, self.text_height())
        logger.debug("Resized to %dx%d", width, height)

    def refresh_screen(self, should_quit: bool = False) -> None:
        """Redraw everything and leave the terminal cursor on the edit cursor."""

        self.terminal.hide_cursor()
        self.terminal.move_cursor(0, 0)

        if should_quit:
            self.terminal.clear_screen()
            self.terminal.flush()
            return

        self.draw_rows()
        self.draw_status_bar()
        self.draw_message_bar()

        if self.buffer.is_empty():
            self.draw_welcome_message()

        cursor, offset = self.controller.cursor, self.controller.offset
        self.terminal.move_cursor(cursor.x - offset.x, cursor.y - offset.y)

        self.terminal.show_cursor()
        self.terminal.flush()

    def draw_rows(self) -> None:
        """Draw the visible part of every line, '~' past the end of the buffer."""

        offset = self.controller.offset
        for row in range(self.text_height()):
            self.terminal.move_cursor(0, row)
            self.terminal.clear_current_line()

            line = self.buffer.line(row + offset.y)
            if line is None:
                self.terminal.print_string("~")
                continue

            self.terminal.print_string(line.render(offset.x, offset.x + self.width))

    def draw_status_bar(self) -> None:
        """Draw file name, size, modified flag, file type and cursor position."""

        name = self.buffer.path[:self.FILE_NAME_WIDTH] if self.buffer.path else '[No Name]'
        status = f"{name} -- {self.buffer.line_count()} lines"
        if self.buffer.is_dirty():
            status += " (modified)"

        cursor = self.controller.cursor
        pos_info = f"{self.file_type()} | Line: {cursor.y + 1} Col: {cursor.x + 1}"

        padding = self.width - len(status) - len(pos_info)
        if padding > 0:
            status += " " * padding
        status = (status + pos_info)[:self.width]

        self.terminal.move_cursor(0, self.height - 2)
        self.terminal.set_colors(STATUS_BAR_COLOR_PAIR)
        self.terminal.print_string(status)
        self.terminal.reset_colors()

    def draw_message_bar(self) -> None:
        """Draw the active prompt, or the status message while it is fresh."""

        self.terminal.move_cursor(0, self.height - 1)
        self.terminal.clear_current_line()

        prompt = self.input_handler.prompt if self.input_handler else None
        if prompt is not None:
            self.terminal.print_string(prompt.message[:self.width])
            return

        if not self.status_message:
            return

        if time.time() - self.status_message_time > STATUS_MESSAGE_DURATION:
            self.status_message = None
            return

        self.terminal.print_string(self.status_message[:self.width])

    def draw_welcome_message(self) -> None:
        message = f"Slime editor -- version {VERSION}"[:self.width]
        x = max(0, (self.width - len(message)) // 2)
        self.terminal.move_cursor(x, self.height // 3)
        self.terminal.print_string(message)

    def file_type(self) -> str:
        """Get the file type of the buffer, detecting it again when the path changes."""

        if self.buffer.path != self._file_type_path:
            first = self.buffer.line(0)
            self._file_type = detect_file_type(self.buffer.path, first.text if first else '')
            self._file_type_path = self.buffer.path

        return self._file_type
