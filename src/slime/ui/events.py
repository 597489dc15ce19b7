"""
Input events produced by the terminal.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


class Key(Enum):
    """Keys the editor distinguishes. CHAR carries the typed character."""
    CHAR = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    BACKSPACE = auto()
    DELETE = auto()
    ENTER = auto()
    ESCAPE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press, optionally with Ctrl held."""
    key: Key
    char: Optional[str] = None
    ctrl: bool = False

    @classmethod
    def of(cls, char: str, ctrl: bool = False) -> 'KeyEvent':
        """Shorthand for a character key."""

        return cls(Key.CHAR, char, ctrl)

    def is_ctrl(self, char: str) -> bool:
        """Check whether this is Ctrl plus the given letter."""

        return self.ctrl and self.key is Key.CHAR and self.char == char


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal changed size."""
    width: int
    height: int


Event = Union[KeyEvent, ResizeEvent]
