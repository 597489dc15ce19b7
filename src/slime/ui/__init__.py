"""
UI package for the editor's terminal interface.

This package implements the user interface components: the Terminal wrapper
around curses, the WindowManager drawing the buffer, the InputHandler turning
key events into edits, and the modal Prompt used by search and save as.
"""

from .events import Key, KeyEvent, ResizeEvent
from .prompt import Prompt, PromptMode, PromptStatus
from .window import WindowManager
from .input_handler import InputHandler
from .terminal import Terminal, TerminalError

__all__ = [
    'Key',
    'KeyEvent',
    'ResizeEvent',
    'Prompt',
    'PromptMode',
    'PromptStatus',
    'WindowManager',
    'InputHandler',
    'Terminal',
    'TerminalError'
]
