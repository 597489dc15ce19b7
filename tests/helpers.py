"""Shared test helpers.

FakeTerminal offers the drawing and event calls of slime.ui.terminal.Terminal
backed by an in-memory grid, so the window and input handler can be tested
without a real curses screen.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from slime.core.buffer import Buffer
from slime.ui.events import Event, KeyEvent
from slime.ui.input_handler import InputHandler
from slime.ui.window import WindowManager


class FakeTerminal:
    def __init__(self, width: int = 40, height: int = 10) -> None:
        self.width = width
        self.height = height
        self.x = 0
        self.y = 0
        self.colors: Optional[int] = None
        self.colored_rows: set[int] = set()
        self.cursor_visible = True
        self.flushes = 0
        self.events: Deque[Event] = deque()
        self._rows: List[str] = [" " * width for _ in range(height)]

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._rows = [" " * width for _ in range(height)]

    def read_event(self) -> Optional[Event]:
        return self.events.popleft() if self.events else None

    def move_cursor(self, x: int, y: int) -> None:
        self.x = max(0, min(x, self.width - 1))
        self.y = max(0, min(y, self.height - 1))

    def print_string(self, string: str) -> None:
        text = string[: self.width - self.x]
        row = self._rows[self.y]
        self._rows[self.y] = row[: self.x] + text + row[self.x + len(text):]
        if self.colors is not None:
            self.colored_rows.add(self.y)
        self.x += len(text)

    def clear_current_line(self) -> None:
        row = self._rows[self.y]
        self._rows[self.y] = row[: self.x] + " " * (self.width - self.x)

    def clear_screen(self) -> None:
        self._rows = [" " * self.width for _ in range(self.height)]

    def hide_cursor(self) -> None:
        self.cursor_visible = False

    def show_cursor(self) -> None:
        self.cursor_visible = True

    def set_colors(self, pair: int) -> None:
        self.colors = pair

    def reset_colors(self) -> None:
        self.colors = None

    def flush(self) -> None:
        self.flushes += 1

    def row(self, y: int) -> str:
        return self._rows[y].rstrip()


def make_editor(
    text: str = "",
    *,
    path: Optional[str] = None,
    width: int = 40,
    height: int = 10,
) -> tuple[FakeTerminal, WindowManager, InputHandler]:
    terminal = FakeTerminal(width, height)
    window_manager = WindowManager(terminal, Buffer.from_text(text, path))  # type: ignore[arg-type]
    input_handler = InputHandler(window_manager)
    return terminal, window_manager, input_handler


def type_text(input_handler: InputHandler, text: str) -> None:
    for char in text:
        input_handler.handle_event(KeyEvent.of(char))
