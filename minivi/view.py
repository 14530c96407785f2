"""Projection of the buffer onto the terminal screen."""

from dataclasses import dataclass, field
from typing import List

from .buffer import LineBuffer
from .constants import EditorConstants
from .cursor import CursorState, ViewportOffset
from .modes import Mode


@dataclass
class Frame:
    """Everything needed to paint one screen."""
    lines: List[str] = field(default_factory=list)
    cursor_y: int = 0
    cursor_x: int = 0
    status: str = ""


def displayable(text: str) -> str:
    """Replace characters the terminal would interpret rather than show.

    Control characters and undecodable bytes become a placeholder of the
    same width, so screen columns still match buffer columns.
    """
    if text.isprintable():
        return text
    placeholder = EditorConstants.UNPRINTABLE_PLACEHOLDER
    return "".join(ch if ch.isprintable() else placeholder for ch in text)


def format_status(filename: str, cursor: CursorState, mode: Mode) -> str:
    """Status bar text with 1-based row and column."""
    return EditorConstants.STATUS_FORMAT.format(
        filename=displayable(filename),
        row=cursor.row + 1,
        col=cursor.col + 1,
        mode=mode.display_name,
    )


def project_frame(buffer: LineBuffer, cursor: CursorState, offset: ViewportOffset,
                  height: int, width: int, filename: str, mode: Mode) -> Frame:
    """Compute the visible slices, the on-screen cursor cell and the status line.

    Rows ``offset.row`` up to the status row are shown; each is clipped to
    columns ``[offset.col, offset.col + width)``.
    """
    text_rows = max(0, height - EditorConstants.STATUS_ROWS)
    last_row = min(buffer.line_count(), offset.row + text_rows)
    lines = [
        displayable(buffer.line_at(row)[offset.col:offset.col + width])
        for row in range(offset.row, last_row)
    ]
    return Frame(
        lines=lines,
        cursor_y=cursor.row - offset.row,
        cursor_x=cursor.col - offset.col,
        status=format_status(filename, cursor, mode),
    )


class ScreenRenderer:
    """Paints frames through the terminal interface."""

    def __init__(self, terminal):
        self.terminal = terminal

    def draw(self, frame: Frame, height: int, width: int):
        """Full redraw: text rows, reverse-video status bar, then the cursor."""
        self.terminal.clear_screen()
        for y, line in enumerate(frame.lines):
            self.terminal.draw_text_at(y, 0, line)

        # Status bar on the last row; the bottom-right cell stays empty so
        # the terminal does not scroll
        status_width = max(0, width - 1)
        self.terminal.set_reverse_video(True)
        self.terminal.draw_text_at(height - 1, 0, frame.status[:status_width].ljust(status_width))
        self.terminal.set_reverse_video(False)

        self.terminal.move_cursor_to(frame.cursor_y, frame.cursor_x)
