"""Cursor position and viewport scrolling."""

from dataclasses import dataclass

from .buffer import LineBuffer


@dataclass
class CursorState:
    row: int = 0
    col: int = 0


@dataclass(frozen=True)
class ViewportOffset:
    """Top-left visible cell in document coordinates."""
    row: int = 0
    col: int = 0


def _scroll_axis(pos: int, offset: int, extent: int) -> int:
    """Apply the minimal scroll that keeps ``pos`` visible along one axis.

    The last cell of ``extent`` is reserved (status bar for rows), so
    ``extent - 1`` cells are usable. At least one cell is always usable.
    """
    usable = max(1, extent - 1)
    if pos < offset:
        return pos
    if pos >= offset + usable:
        return pos - usable + 1
    return offset


def compute_viewport(cursor: CursorState, offset: ViewportOffset,
                     height: int, width: int) -> ViewportOffset:
    """Return the offset that keeps ``cursor`` inside a ``height`` x ``width`` screen."""
    return ViewportOffset(
        row=_scroll_axis(cursor.row, offset.row, height),
        col=_scroll_axis(cursor.col, offset.col, width),
    )


class Cursor:
    """Logical cursor bound to a line buffer, plus the current scroll offset."""

    def __init__(self, buffer: LineBuffer):
        self.buffer = buffer
        self.state = CursorState()
        self.offset = ViewportOffset()

    @property
    def row(self) -> int:
        return self.state.row

    @row.setter
    def row(self, value: int):
        self.state.row = value

    @property
    def col(self) -> int:
        return self.state.col

    @col.setter
    def col(self, value: int):
        self.state.col = value

    def move_up(self):
        if self.state.row > 0:
            self.state.row -= 1
        self.clamp_to_line()

    def move_down(self):
        if self.state.row < self.buffer.line_count() - 1:
            self.state.row += 1
        self.clamp_to_line()

    def move_left(self):
        if self.state.col > 0:
            self.state.col -= 1

    def move_right(self):
        # Column may sit one past the last character for appending
        if self.state.col < len(self.buffer.line_at(self.state.row)):
            self.state.col += 1

    def clamp_to_line(self):
        """Pull row and column back inside the buffer after an edit."""
        last_row = self.buffer.line_count() - 1
        self.state.row = max(0, min(self.state.row, last_row))
        line_length = len(self.buffer.line_at(self.state.row))
        self.state.col = max(0, min(self.state.col, line_length))

    def compute_viewport(self, height: int, width: int) -> ViewportOffset:
        """Scroll just enough to keep the cursor visible and return the offset."""
        self.offset = compute_viewport(self.state, self.offset, height, width)
        return self.offset
