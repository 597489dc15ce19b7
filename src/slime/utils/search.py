"""
Search functionality for the editor.
"""

import logging
from typing import TYPE_CHECKING, Optional, Tuple

from ..core.buffer import Buffer
from ..core.position import Position, SearchDirection
from ..core.viewport import CursorController, Movement

if TYPE_CHECKING:
    from ..ui.prompt import Prompt

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Incremental search over a buffer, moving the cursor to each match.

    The engine is the callback of the search prompt: every keystroke re-runs
    the query from the cursor, and aborting the prompt puts the cursor back
    where the search began. The last query is kept for find next/previous.
    """

    def __init__(self, buffer: Buffer, controller: CursorController) -> None:
        self.buffer = buffer
        self.controller = controller
        self.last_search: Optional[Tuple[str, SearchDirection]] = None
        self.origin: Optional[Position] = None

    def begin(self) -> None:
        """Remember where the cursor is before the prompt opens."""

        self.origin = self._cursor()

    def on_change(self, prompt: 'Prompt') -> None:
        before = self._cursor()
        if prompt.advance:
            self._step(Movement.RIGHT)

        result = self.buffer.find(prompt.text, self.controller.cursor, prompt.direction)
        if result is not None:
            self.controller.place(result)
        elif prompt.advance:
            self.controller.place(before)

        if prompt.text:
            self.last_search = (prompt.text, prompt.direction)

    def on_submit(self, text: str) -> None:
        direction = self.last_search[1] if self.last_search else SearchDirection.FORWARD
        self.last_search = (text, direction)
        self.origin = None
        logger.debug("Search for %r ended at %s", text, self.controller.cursor)

    def on_cancel(self) -> None:
        if self.origin is not None:
            self.controller.place(self.origin)

        self.origin = None

    def find_next(self) -> Optional[Position]:
        """Move to the next match of the last query after the cursor."""

        if not self.last_search:
            return None

        query = self.last_search[0]
        self.last_search = (query, SearchDirection.FORWARD)

        before = self._cursor()
        self._step(Movement.RIGHT)
        result = self.buffer.find(query, self.controller.cursor, SearchDirection.FORWARD)
        if result is None:
            self.controller.place(before)
            return None

        self.controller.place(result)
        return result

    def find_previous(self) -> Optional[Position]:
        """Move to the closest match of the last query before the cursor."""

        if not self.last_search:
            return None

        query = self.last_search[0]
        self.last_search = (query, SearchDirection.BACKWARD)

        result = self.buffer.find(query, self.controller.cursor, SearchDirection.BACKWARD)
        if result is not None:
            self.controller.place(result)

        return result

    def _cursor(self) -> Position:
        cursor = self.controller.cursor
        return Position(cursor.x, cursor.y)

    def _step(self, movement: Movement) -> None:
        self.controller.move(movement, self.buffer, self.controller.height)
        self.controller.scroll()
