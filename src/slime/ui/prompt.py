"""
Modal prompt shown in the message bar (search, save as).

A Prompt is a small state machine. Each key event updates the typed text,
the mode specific state and the status, then notifies a PromptCallback so
the owner can react (move the cursor to a match, save the file, restore the
cursor on abort).
"""

from enum import Enum, auto
from typing import Protocol

import grapheme

from ..core.position import SearchDirection
from .events import Key, KeyEvent


class PromptMode(Enum):
    """PLAIN just collects text; SEARCH also tracks the search direction."""
    PLAIN = auto()
    SEARCH = auto()


class PromptStatus(Enum):
    ACTIVE = auto()
    SUBMITTED = auto()
    CANCELLED = auto()


class PromptCallback(Protocol):
    """Receives the transitions of a Prompt."""

    def on_change(self, prompt: 'Prompt') -> None:
        """Called after every key handled while the prompt stays active."""

    def on_submit(self, text: str) -> None:
        """Called once when the prompt is confirmed with non-empty text."""

    def on_cancel(self) -> None:
        """Called once when the prompt is aborted or confirmed empty."""


class Prompt:
    """Text input in the message bar driven one key event at a time."""

    def __init__(self, label: str, callback: PromptCallback,
                 mode: PromptMode = PromptMode.PLAIN) -> None:
        self.label = label
        self.callback = callback
        self.mode = mode
        self.text = ""
        self.status = PromptStatus.ACTIVE
        self.direction = SearchDirection.FORWARD
        # Set when the last key asked to step past the current match.
        self.advance = False

    @property
    def message(self) -> str:
        return f"{self.label}{self.text}"

    def handle(self, event: KeyEvent) -> PromptStatus:
        """Apply one key event and return the resulting status."""

        if self.status is not PromptStatus.ACTIVE:
            return self.status

        if event.key is Key.ENTER:
            if self.text:
                self.status = PromptStatus.SUBMITTED
                self.callback.on_submit(self.text)
            else:
                self.status = PromptStatus.CANCELLED
                self.callback.on_cancel()
            return self.status

        if event.key is Key.ESCAPE:
            self.text = ""
            self.status = PromptStatus.CANCELLED
            self.callback.on_cancel()
            return self.status

        if event.key is Key.BACKSPACE:
            length = grapheme.length(self.text)
            self.text = grapheme.slice(self.text, 0, max(0, length - 1))
        elif event.key is Key.CHAR and not event.ctrl and event.char:
            self.text += event.char

        if self.mode is PromptMode.SEARCH:
            self._update_search_state(event)

        self.callback.on_change(self)
        return self.status

    def _update_search_state(self, event: KeyEvent) -> None:
        self.advance = event.key in (Key.RIGHT, Key.DOWN)

        if event.key in (Key.UP, Key.LEFT):
            self.direction = SearchDirection.BACKWARD
        else:
            self.direction = SearchDirection.FORWARD
