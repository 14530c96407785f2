"""Main editor controller: owns the session state and runs the key loop."""

import logging
from typing import Optional

from .buffer import LineBuffer
from .clipboard import ClipboardSlot
from .commands import CommandRegistry
from .cursor import Cursor
from .fileio import read_lines, write_lines
from .keyboard import KeyboardHandler, KeyEvent
from .modes import Mode
from .terminal import TerminalInterface
from .view import Frame, ScreenRenderer, project_frame

logger = logging.getLogger(__name__)


class Editor:
    """Modal editing session for a single file."""

    def __init__(self, filename: str, terminal: Optional[TerminalInterface] = None):
        """Initialize the editor components.

        Args:
            filename: Path of the file to edit and save back to
            terminal: Terminal interface; a blessed/curtsies one by default
        """
        self.filename = filename
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.renderer = ScreenRenderer(self.terminal)
        self.buffer = LineBuffer()
        self.cursor = Cursor(self.buffer)
        self.clipboard = ClipboardSlot()
        self.mode = Mode.COMMAND
        self.command_registry = CommandRegistry()
        self.running = False

    def load_file(self):
        """Load the file into the buffer; a missing file gives one empty line."""
        self.buffer.load(read_lines(self.filename))
        self.cursor.clamp_to_line()

    def save_file(self) -> bool:
        """Write the buffer back to the file.

        Returns:
            True if save succeeded, False otherwise
        """
        try:
            write_lines(self.filename, self.buffer.lines)
        except OSError as e:
            logger.error("Cannot save to %s: %s", self.filename, e)
            return False
        return True

    def handle_key_event(self, key_event: KeyEvent) -> bool:
        """Apply one key event in the current mode.

        Returns:
            True if the document was modified
        """
        return self.command_registry.execute(self, key_event)

    def render_frame(self, height: int, width: int) -> Frame:
        """Recompute the viewport and project the visible part of the buffer."""
        offset = self.cursor.compute_viewport(height, width)
        return project_frame(self.buffer, self.cursor.state, offset,
                             height, width, self.filename, self.mode)

    def _draw(self):
        """Draw the current editor state to terminal."""
        height, width = self.terminal.get_dimensions()
        self.renderer.draw(self.render_frame(height, width), height, width)

    def run(self) -> bool:
        """Run the main editor loop, then save.

        Returns:
            True if the buffer was saved after quitting
        """
        self.running = True
        try:
            self.terminal.setup()
            self._draw()
            while self.running:
                key_event = self.keyboard.get_key_event()
                if key_event is None:
                    logger.debug("Input closed")
                    break
                self.handle_key_event(key_event)
                self._draw()
        finally:
            self.terminal.cleanup()
        logger.debug("Session ended, saving %s", self.filename)
        return self.save_file()
