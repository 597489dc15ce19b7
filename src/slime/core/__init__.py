"""
Core package for the text buffer engine.

This package implements the editing core: the Line class for cluster-addressed
edits of a single line, the Buffer class holding a file's lines, and the
CursorController deriving the visible window from the cursor position.
"""

from .position import Position, SearchDirection
from .line import Line
from .buffer import Buffer
from .viewport import CursorController, Movement, scroll
from .filetype import detect_file_type

__all__ = [
    'Position',
    'SearchDirection',
    'Line',
    'Buffer',
    'CursorController',
    'Movement',
    'scroll',
    'detect_file_type'
]
