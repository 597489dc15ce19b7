"""
Terminal module wrapping curses for the editor.

Raw mode is process-wide state, so Terminal is used as a context manager:
entering it switches the terminal to raw mode and leaving it, by any path,
restores cooked mode.
"""

import curses
import logging
import os
from typing import Dict, Final, Optional, Tuple, Union

from ..config import POLL_TIMEOUT_MS, STATUS_BAR_COLOR_PAIR
from .events import Event, Key, KeyEvent, ResizeEvent

logger = logging.getLogger(__name__)

KEY_CODES: Final[Dict[int, Key]] = {
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_HOME: Key.HOME,
    curses.KEY_END: Key.END,
    curses.KEY_PPAGE: Key.PAGE_UP,
    curses.KEY_NPAGE: Key.PAGE_DOWN,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    curses.KEY_DC: Key.DELETE,
    curses.KEY_ENTER: Key.ENTER,
}

# xterm names for Ctrl+Home / Ctrl+End; curses has no constants for them.
CTRL_KEY_NAMES: Final[Dict[bytes, Key]] = {
    b'kHOM5': Key.HOME,
    b'kEND5': Key.END,
}

CHAR_KEYS: Final[Dict[str, Key]] = {
    '\n': Key.ENTER,
    '\r': Key.ENTER,
    '\x1b': Key.ESCAPE,
    '\x7f': Key.BACKSPACE,
    '\x08': Key.BACKSPACE,
}


class TerminalError(Exception):
    """The terminal could not be set up or driven."""


def decode_key(ch: Union[int, str], name: Optional[bytes] = None) -> Optional[KeyEvent]:
    """
    Turn a value returned by get_wch into a key event.

    Args:
        ch: A character string or a curses key code.
        name: The curses key name for codes without a constant.

    Returns:
        Optional[KeyEvent]: The event, or None for keys the editor ignores.
    """

    if isinstance(ch, int):
        if ch in KEY_CODES:
            return KeyEvent(KEY_CODES[ch])

        if name in CTRL_KEY_NAMES:
            return KeyEvent(CTRL_KEY_NAMES[name], ctrl=True)

        return None

    if ch in CHAR_KEYS:
        return KeyEvent(CHAR_KEYS[ch])

    if ch == '\t':
        return KeyEvent.of(ch)

    code = ord(ch)
    if code == 0:
        return None

    if code < 32:
        return KeyEvent.of(chr(code + 96), ctrl=True)

    return KeyEvent.of(ch)


def safe_addstr(window: 'curses.window', y: int, x: int, string: str, attr: int = 0) -> None:
    """Safely add a string to a window, truncating if necessary."""

    height, width = window.getmaxyx()
    if y >= height or x >= width:
        return

    available = width - x
    if available <= 0:
        return

    if len(string) > available:
        string = string[:available]

    try:
        window.addstr(y, x, string, attr)
    except curses.error:
        pass


class Terminal:
    """Curses screen in raw mode plus the drawing calls the editor needs."""

    def __init__(self, poll_timeout_ms: int = POLL_TIMEOUT_MS) -> None:
        self.poll_timeout_ms = poll_timeout_ms
        self.stdscr: Optional['curses.window'] = None
        self.width = 0
        self.height = 0
        self._attr = curses.A_NORMAL
        self._has_colors = False

    def __enter__(self) -> 'Terminal':
        os.environ.setdefault('ESCDELAY', '25')

        try:
            self.stdscr = curses.initscr()
            curses.raw()
            curses.noecho()
            self.stdscr.keypad(True)
            self.stdscr.timeout(self.poll_timeout_ms)

            if curses.has_colors():
                curses.start_color()
                curses.use_default_colors()
                curses.init_pair(STATUS_BAR_COLOR_PAIR, curses.COLOR_BLACK, curses.COLOR_WHITE)
                self._has_colors = True
        except curses.error as e:
            self._restore()
            raise TerminalError(f"Failed to initialize terminal: {e}") from e

        self.height, self.width = self.stdscr.getmaxyx()
        logger.debug("Terminal ready: %dx%d", self.width, self.height)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._restore()
        return False

    def _restore(self) -> None:
        if self.stdscr is None:
            return

        try:
            self.stdscr.keypad(False)
            curses.noraw()
            curses.echo()
        finally:
            curses.endwin()
            self.stdscr = None

    def _screen(self) -> 'curses.window':
        if self.stdscr is None:
            raise TerminalError("Terminal is not active")

        return self.stdscr

    def size(self) -> Tuple[int, int]:
        """Get the terminal size as (width, height) in cells."""

        return self.width, self.height

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def read_event(self) -> Optional[Event]:
        """Wait up to the poll timeout for a key or resize event."""

        screen = self._screen()
        try:
            ch = screen.get_wch()
        except curses.error:
            return None

        if ch == curses.KEY_RESIZE:
            curses.update_lines_cols()
            height, width = screen.getmaxyx()
            return ResizeEvent(width, height)

        name = None
        if isinstance(ch, int) and ch not in KEY_CODES:
            name = curses.keyname(ch)

        return decode_key(ch, name)

    def move_cursor(self, x: int, y: int) -> None:
        screen = self._screen()
        x = max(0, min(x, self.width - 1))
        y = max(0, min(y, self.height - 1))

        try:
            screen.move(y, x)
        except curses.error as e:
            raise TerminalError(f"Cannot move cursor to {x},{y}: {e}") from e

    def print_string(self, string: str) -> None:
        """Print at the cursor, cut off at the right edge of the screen."""

        screen = self._screen()
        y, x = screen.getyx()
        safe_addstr(screen, y, x, string, self._attr)

    def clear_current_line(self) -> None:
        self._screen().clrtoeol()

    def clear_screen(self) -> None:
        self._screen().erase()

    def hide_cursor(self) -> None:
        self._set_cursor_visibility(0)

    def show_cursor(self) -> None:
        self._set_cursor_visibility(1)

    def _set_cursor_visibility(self, visibility: int) -> None:
        try:
            curses.curs_set(visibility)
        except curses.error:
            # Some terminals cannot hide the cursor; that is only cosmetic.
            pass

    def set_colors(self, pair: int) -> None:
        """Draw following strings with the given color pair."""

        if self._has_colors:
            self._attr = curses.color_pair(pair)
        else:
            self._attr = curses.A_REVERSE

    def reset_colors(self) -> None:
        self._attr = curses.A_NORMAL

    def flush(self) -> None:
        """Push pending drawing to the screen."""

        self._screen().noutrefresh()
        curses.doupdate()
