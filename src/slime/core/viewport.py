"""
Cursor movement and viewport tracking for the code view.

Nothing in this module touches the terminal: the controller only needs the
buffer it moves over and the size of the visible text area.
"""

from enum import Enum, auto

from .buffer import Buffer
from .position import Position


class Movement(Enum):
    """Cursor movements understood by CursorController.move."""
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    BUFFER_START = auto()
    BUFFER_END = auto()


def scroll(cursor: Position, offset: Position, width: int, height: int) -> Position:
    """
    Get the viewport offset that keeps `cursor` visible.

    On each axis a cursor at or past the trailing edge pulls the offset
    forward so the cursor sits on the last visible cell; a cursor before the
    offset pulls it back onto the cursor. Otherwise the offset is kept.
    """

    offset_x, offset_y = offset.x, offset.y

    if cursor.x >= offset_x + width:
        offset_x = max(0, cursor.x - width + 1)
    elif cursor.x < offset_x:
        offset_x = cursor.x

    if cursor.y >= offset_y + height:
        offset_y = max(0, cursor.y - height + 1)
    elif cursor.y < offset_y:
        offset_y = cursor.y

    return Position(offset_x, offset_y)


class CursorController:
    """Owns the cursor position and the viewport offset derived from it."""

    def __init__(self, width: int = 80, height: int = 22) -> None:
        self.cursor = Position()
        self.offset = Position()
        self.width = width
        self.height = height

    def resize(self, width: int, height: int) -> None:
        """Set the size of the visible text area and keep the cursor in it."""

        self.width = max(1, width)
        self.height = max(1, height)
        self.scroll()

    def scroll(self) -> None:
        self.offset = scroll(self.cursor, self.offset, self.width, self.height)

    def place(self, position: Position) -> None:
        """Put the cursor at `position` and scroll to it."""

        self.cursor = Position(position.x, position.y)
        self.scroll()

    def move(self, movement: Movement, buffer: Buffer, visible_height: int) -> None:
        """
        Move the cursor over `buffer`.

        Left at the start of a line goes to the end of the previous line and
        Right at the end of a line goes to the start of the next one. Vertical
        moves stop at the first line; the final position is clamped to the
        buffer and to the length of its line.
        """

        x, y = self.cursor.x, self.cursor.y
        page = max(1, visible_height - 1)

        if movement is Movement.LEFT:
            if x > 0:
                x -= 1
            elif y > 0:
                y -= 1
                line = buffer.line(y)
                x = len(line) if line else 0

        elif movement is Movement.RIGHT:
            line = buffer.line(y)
            if line is None:
                x = 0
            elif x < len(line):
                x += 1
            elif y < buffer.line_count() - 1:
                y += 1
                x = 0

        elif movement is Movement.UP:
            y = max(0, y - 1)
        elif movement is Movement.DOWN:
            y += 1
        elif movement is Movement.HOME:
            x = 0
        elif movement is Movement.END:
            line = buffer.line(y)
            x = len(line) if line else 0
        elif movement is Movement.PAGE_UP:
            y = max(0, y - page)
        elif movement is Movement.PAGE_DOWN:
            y += page
        elif movement is Movement.BUFFER_START:
            x, y = 0, 0
        elif movement is Movement.BUFFER_END:
            y = max(0, buffer.line_count() - 1)
            line = buffer.line(y)
            x = len(line) if line else 0

        line = buffer.line(y)
        x = min(max(x, 0), len(line)) if line else 0
        y = min(y, max(0, buffer.line_count() - 1))

        self.cursor = Position(x, y)
