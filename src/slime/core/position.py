"""
Value types shared by the buffer, the cursor controller and search.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass
class Position:
    """A cursor location: grapheme-cluster offset `x` within line `y`."""
    x: int = 0
    y: int = 0


class SearchDirection(Enum):
    """Direction in which a search scans from its start position."""
    FORWARD = "forward"
    BACKWARD = "backward"
