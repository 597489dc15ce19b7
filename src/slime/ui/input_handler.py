"""
Input handler module for processing keyboard events.
"""

import logging
import os
from typing import Callable, Dict, Final, Optional

from ..config import QUIT_TIMES
from ..core.position import Position
from ..core.viewport import Movement
from ..utils.search import SearchEngine
from .events import Event, Key, KeyEvent, ResizeEvent
from .prompt import Prompt, PromptCallback, PromptMode, PromptStatus
from .window import WindowManager

logger = logging.getLogger(__name__)

SEARCH_PROMPT: Final[str] = "Search (ESC to cancel, Arrows to navigate): "
SAVE_AS_PROMPT: Final[str] = "Save as: "
FIND_ABORTED_STATUS_MESSAGE: Final[str] = "Find aborted"
SAVE_ABORTED_STATUS_MESSAGE: Final[str] = "Save aborted"
SAVED_STATUS_MESSAGE: Final[str] = "File saved"
SAVE_FAILED_STATUS_MESSAGE: Final[str] = "Failed to save file!"
NO_SEARCH_STATUS_MESSAGE: Final[str] = "Nothing to repeat. Press Ctrl-F to search."
UNSAVED_CHANGES_STATUS_MESSAGE: Final[str] = (
    "WARNING! File has unsaved changes. Press Ctrl-Q {times} more times to quit."
)

MOVEMENT_KEYS: Final[Dict[Key, Movement]] = {
    Key.LEFT: Movement.LEFT,
    Key.RIGHT: Movement.RIGHT,
    Key.UP: Movement.UP,
    Key.DOWN: Movement.DOWN,
    Key.HOME: Movement.HOME,
    Key.END: Movement.END,
    Key.PAGE_UP: Movement.PAGE_UP,
    Key.PAGE_DOWN: Movement.PAGE_DOWN,
}


class SaveAsPrompt:
    """Prompt callback asking for a file name before saving."""

    def __init__(self, input_handler: 'InputHandler') -> None:
        self.input_handler = input_handler

    def on_change(self, prompt: Prompt) -> None:
        pass

    def on_submit(self, text: str) -> None:
        self.input_handler.write_buffer(os.path.expanduser(text))

    def on_cancel(self) -> None:
        self.input_handler.window_manager.set_status_message(SAVE_ABORTED_STATUS_MESSAGE)


class InputHandler:
    """Handles keyboard input and executes corresponding actions."""

    def __init__(self, window_manager: WindowManager) -> None:
        self.window_manager = window_manager
        self.window_manager.input_handler = self
        self.prompt: Optional[Prompt] = None
        self.quit_times = QUIT_TIMES
        self.should_quit = False
        self.search_engine = SearchEngine(window_manager.buffer, window_manager.controller)
        self.command_handlers: Dict[str, Callable[[], None]] = self._setup_handlers()

    def _setup_handlers(self) -> Dict[str, Callable[[], None]]:
        """Set up the Ctrl + letter command handlers."""

        return {
            's': self._save,  # Ctrl + S (save key)
            'f': self._start_search,  # Ctrl + F (find key)
            'n': self._find_next,  # Ctrl + N (find next key)
            'p': self._find_previous,  # Ctrl + P (find previous key)
        }

    def handle_event(self, event: Event) -> bool:
        """Handle a single input event. Returns False if the editor should quit."""

        if isinstance(event, ResizeEvent):
            self.window_manager.resize(event.width, event.height)
            return True

        if self.prompt is not None:
            self._handle_prompt_input(event)
            return True

        self._handle_key(event)
        return not self.should_quit

    def _handle_key(self, event: KeyEvent) -> None:
        buf = self.window_manager.buffer
        controller = self.window_manager.controller

        if event.is_ctrl('q') or event.is_ctrl('c'):
            self._quit()
            return

        if event.ctrl and event.key is Key.CHAR:
            handler = self.command_handlers.get(event.char or '')
            if handler:
                handler()
        elif event.ctrl and event.key is Key.HOME:
            self._move(Movement.BUFFER_START)
        elif event.ctrl and event.key is Key.END:
            self._move(Movement.BUFFER_END)
        elif event.key is Key.ENTER:
            buf.insert(controller.cursor, '\n')
            self._move(Movement.RIGHT)
        elif event.key is Key.CHAR and event.char:
            buf.insert(controller.cursor, event.char)
            self._move(Movement.RIGHT)
        elif event.key is Key.BACKSPACE:
            self._backspace()
        elif event.key is Key.DELETE:
            buf.delete(controller.cursor)
        elif event.key in MOVEMENT_KEYS:
            self._move(MOVEMENT_KEYS[event.key])

        if self.quit_times < QUIT_TIMES:
            self.quit_times = QUIT_TIMES
            self.window_manager.status_message = None

        controller.scroll()

    def _move(self, movement: Movement) -> None:
        self.window_manager.controller.move(
            movement,
            self.window_manager.buffer,
            self.window_manager.text_height()
        )

    def _backspace(self) -> None:
        """Delete the cluster before the cursor, joining lines at a line start."""

        controller = self.window_manager.controller
        if controller.cursor == Position(0, 0):
            return

        self._move(Movement.LEFT)
        self.window_manager.buffer.delete(controller.cursor)

    def _quit(self) -> None:
        """Quit, asking for confirmation while the buffer has unsaved changes."""

        buf = self.window_manager.buffer
        if self.quit_times > 0 and buf.is_dirty():
            self.window_manager.set_status_message(
                UNSAVED_CHANGES_STATUS_MESSAGE.format(times=self.quit_times)
            )
            self.quit_times -= 1
            return

        self.should_quit = True

    def _open_prompt(self, label: str, callback: PromptCallback,
                     mode: PromptMode = PromptMode.PLAIN) -> None:
        self.prompt = Prompt(label, callback, mode)

    def _handle_prompt_input(self, event: KeyEvent) -> None:
        """Feed a key to the active prompt and close it once it is done."""

        prompt = self.prompt
        if prompt is None:
            return

        status = prompt.handle(event)
        if status is PromptStatus.ACTIVE:
            return

        self.prompt = None
        if prompt.mode is not PromptMode.SEARCH:
            return

        if status is PromptStatus.CANCELLED:
            self.window_manager.set_status_message(FIND_ABORTED_STATUS_MESSAGE)
        else:
            self.window_manager.status_message = None

    def _save(self) -> None:
        """Save the current buffer, asking for a name if it has none."""

        buf = self.window_manager.buffer
        if not buf.path:
            self._open_prompt(SAVE_AS_PROMPT, SaveAsPrompt(self))
            return

        self.write_buffer()

    def write_buffer(self, path: Optional[str] = None) -> bool:
        """Write the buffer to `path` or its own path and report the outcome."""

        buf = self.window_manager.buffer
        try:
            buf.save_to_disk(path)
        except IOError as e:
            logger.warning("Save failed: %s", e)
            self.window_manager.set_status_message(SAVE_FAILED_STATUS_MESSAGE)
            return False

        self.window_manager.set_status_message(SAVED_STATUS_MESSAGE)
        return True

    def _start_search(self) -> None:
        """Start incremental search mode."""

        self.search_engine.begin()
        self._open_prompt(SEARCH_PROMPT, self.search_engine, PromptMode.SEARCH)

    def _find_next(self) -> None:
        """Jump to the next match of the last search."""

        if not self.search_engine.last_search:
            self.window_manager.set_status_message(NO_SEARCH_STATUS_MESSAGE)
            return

        if self.search_engine.find_next() is None:
            query = self.search_engine.last_search[0]
            self.window_manager.set_status_message(f"No more matches for '{query}'")

    def _find_previous(self) -> None:
        """Jump to the previous match of the last search."""

        if not self.search_engine.last_search:
            self.window_manager.set_status_message(NO_SEARCH_STATUS_MESSAGE)
            return

        if self.search_engine.find_previous() is None:
            query = self.search_engine.last_search[0]
            self.window_manager.set_status_message(f"No earlier matches for '{query}'")
