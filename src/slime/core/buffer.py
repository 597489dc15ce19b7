"""
Buffer module holding the lines of the file being edited.
"""

import logging
from typing import List, Optional

from .line import Line
from .position import Position, SearchDirection

logger = logging.getLogger(__name__)


def split_lines(text: str) -> List[str]:
    """
    Split file content into lines.

    Lines end with '\\n' (a preceding '\\r' is dropped). A terminator at the
    very end of the text does not start another, empty line.
    """

    if not text:
        return []

    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()

    return [line[:-1] if line.endswith('\r') else line for line in lines]


class Buffer:
    """Main buffer class: an ordered list of lines plus the file they belong to."""

    def __init__(self, lines: Optional[List[Line]] = None, path: Optional[str] = None) -> None:
        self._lines: List[Line] = list(lines or [])
        self.path = path
        self._dirty = False

    @classmethod
    def from_text(cls, text: str, path: Optional[str] = None) -> 'Buffer':
        """Create a clean buffer from a string."""

        return cls([Line(value) for value in split_lines(text)], path)

    @classmethod
    def open(cls, path: str) -> 'Buffer':
        """
        Load a buffer from a UTF-8 text file.

        Raises:
            IOError: If the file cannot be read or is not valid UTF-8.
        """

        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                contents = f.read()
        except UnicodeDecodeError as e:
            raise IOError(f"Failed to open file: {path} is not valid UTF-8 ({e.reason})") from e

        buf = cls.from_text(contents, path)
        logger.info("Opened %s (%d lines)", path, buf.line_count())
        return buf

    def line_count(self) -> int:
        """Get the number of lines."""

        return len(self._lines)

    def line(self, index: int) -> Optional[Line]:
        """Get the line at `index`, if there is one."""

        if not 0 <= index < len(self._lines):
            return None

        return self._lines[index]

    def lines(self) -> List[str]:
        """Get the text of every line."""

        return [line.text for line in self._lines]

    def is_empty(self) -> bool:
        return not self._lines

    def is_dirty(self) -> bool:
        return self._dirty

    def insert(self, at: Position, char: str) -> None:
        """
        Insert a character at a position.

        A newline splits the addressed line. Inserting on the line just past
        the last one appends a new line first. Positions further down are
        ignored.
        """

        if not 0 <= at.y <= self.line_count():
            return

        if char == '\n':
            self.split_line(at)
            return

        if at.y == self.line_count():
            line = Line()
            line.insert(0, char)
            self._lines.append(line)
        else:
            self._lines[at.y].insert(at.x, char)

        self._dirty = True

    def insert_text(self, at: Position, text: str) -> None:
        """Insert a run of characters that contains no newline at a position."""

        if '\n' in text:
            raise ValueError("insert_text does not accept newlines; use insert('\\n')")

        if not 0 <= at.y <= self.line_count() or not text:
            return

        if at.y == self.line_count():
            self._lines.append(Line(text))
        else:
            self._lines[at.y].insert_text(at.x, text)

        self._dirty = True

    def split_line(self, at: Position) -> None:
        """Move the clusters from `at.x` to the end of the line onto a new line below."""

        if not 0 <= at.y < self.line_count():
            return

        tail = self._lines[at.y].delete_slice(at.x, len(self._lines[at.y]))
        self._lines.insert(at.y + 1, Line(tail or ''))
        self._dirty = True

    def delete(self, at: Position) -> None:
        """
        Delete the cluster at a position.

        At the end of any line but the last, the next line is joined onto
        this one instead.
        """

        if not 0 <= at.y < self.line_count():
            return

        line = self._lines[at.y]

        if at.y < self.line_count() - 1 and at.x == len(line):
            next_line = self._lines.pop(at.y + 1)
            line.insert_text(len(line), next_line.text)
            self._dirty = True
            return

        if 0 <= at.x < len(line):
            line.delete(at.x)
            self._dirty = True

    def find(self, query: str, at: Position,
             direction: SearchDirection = SearchDirection.FORWARD) -> Optional[Position]:
        """
        Find the next occurrence of `query` from a position.

        Forward searches run to the end of the buffer and backward searches
        to its start; neither wraps around.

        Args:
            query (str): Text to look for.
            at (Position): Where the search starts. Only the first line
                scanned starts at `at.x`.
            direction (SearchDirection): Scan direction.

        Returns:
            Optional[Position]: Start of the first match along the scan.
        """

        if not query or self.is_empty():
            return None

        if direction is SearchDirection.FORWARD:
            x = at.x
            for y in range(max(at.y, 0), self.line_count()):
                match = self._lines[y].find(query, x, direction)
                if match is not None:
                    return Position(match, y)
                x = 0

            return None

        y = min(at.y, self.line_count() - 1)
        x = at.x if y == at.y else len(self._lines[y])
        while y >= 0:
            match = self._lines[y].find(query, x, direction)
            if match is not None:
                return Position(match, y)

            y -= 1
            if y >= 0:
                x = len(self._lines[y])

        return None

    def save_to_disk(self, path: Optional[str] = None) -> None:
        """
        Write every line followed by a newline to disk.

        Args:
            path: Optional file to save to. If None, uses the buffer's path.

        Raises:
            IOError: If there is no path to save to or writing fails. The
                buffer stays dirty in both cases.
        """

        save_path = path or self.path
        if not save_path:
            raise IOError("No file name to save to")

        try:
            with open(save_path, 'wb') as f:
                for line in self._lines:
                    f.write(line.as_bytes())
                    f.write(b'\n')
        except OSError as e:
            logger.error("Failed to save %s: %s", save_path, e)
            raise IOError(f"Failed to save file: {str(e)}") from e

        self.path = save_path
        self._dirty = False
        logger.info("Saved %s (%d lines)", save_path, self.line_count())
