"""Terminal interface using Blessed for display and Curtsies for input."""

from collections import deque
from typing import Deque, Optional, Tuple

import blessed
from curtsies import Input
from curtsies.events import PasteEvent


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    Drawing calls are buffered by stdout; ``move_cursor_to`` is the last
    call of a frame and flushes it.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        # Keys from a paste burst not yet handed out
        self._pending_keys: Deque[str] = deque()

    def setup(self):
        """Enter raw keyboard input and fullscreen mode."""
        # Raw mode first: if stdin is not a terminal this raises before the
        # screen has been touched
        curtsies_input = Input(keynames='curtsies')
        curtsies_input.__enter__()
        self._curtsies_input = curtsies_input
        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True

    def cleanup(self):
        """Leave raw input and fullscreen mode, restoring the terminal."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            print(self.term.normal + self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False

    def get_key(self) -> Optional[str]:
        """Block until a key is pressed and return its curtsies name.

        A paste burst arrives from curtsies as a single event; its keys are
        handed out one per call.
        """
        if self._pending_keys:
            return self._pending_keys.popleft()
        if self._curtsies_input is None:
            return None
        while True:
            evt = next(self._curtsies_input)
            if isinstance(evt, PasteEvent):
                self._pending_keys.extend(str(key) for key in evt.events)
                if self._pending_keys:
                    return self._pending_keys.popleft()
                continue
            return str(evt)

    def clear_screen(self):
        """Clear the entire screen."""
        print(self.term.home + self.term.clear, end='')

    def draw_text_at(self, row: int, col: int, text: str):
        """Write text starting at a screen cell."""
        print(self.term.move(row, col) + text, end='')

    def set_reverse_video(self, enabled: bool):
        """Switch reverse video on or off for subsequent text."""
        print(self.term.reverse if enabled else self.term.normal, end='')

    def move_cursor_to(self, row: int, col: int):
        """Place the hardware cursor and flush the frame."""
        print(self.term.move(row, col) + self.term.normal_cursor, end='', flush=True)

    def get_dimensions(self) -> Tuple[int, int]:
        """Return the full terminal size as (height, width)."""
        return self.term.height, self.term.width
