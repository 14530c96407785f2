"""Test viewport scrolling."""

from minivi.buffer import LineBuffer
from minivi.cursor import Cursor, CursorState, ViewportOffset, compute_viewport


def test_scroll_down_to_far_row():
    """Height 10 leaves 9 text rows: row 20 from offset 0 scrolls to 12."""
    offset = compute_viewport(CursorState(20, 0), ViewportOffset(0, 0), 10, 80)
    assert offset.row == 12


def test_cursor_inside_view_does_not_scroll():
    offset = compute_viewport(CursorState(5, 3), ViewportOffset(2, 0), 10, 80)
    assert offset == ViewportOffset(2, 0)


def test_cursor_on_status_row_scrolls_by_one():
    """Reaching the reserved status row scrolls minimally."""
    offset = compute_viewport(CursorState(9, 0), ViewportOffset(0, 0), 10, 80)
    assert offset.row == 1


def test_last_text_row_does_not_scroll():
    offset = compute_viewport(CursorState(8, 0), ViewportOffset(0, 0), 10, 80)
    assert offset.row == 0


def test_scroll_up_to_cursor():
    offset = compute_viewport(CursorState(3, 0), ViewportOffset(10, 0), 10, 80)
    assert offset.row == 3


def test_horizontal_scroll_right():
    offset = compute_viewport(CursorState(0, 30), ViewportOffset(0, 0), 10, 20)
    assert offset.col == 30 - 20 + 2


def test_horizontal_scroll_left():
    offset = compute_viewport(CursorState(0, 4), ViewportOffset(0, 12), 10, 20)
    assert offset.col == 4


def test_tiny_terminal_keeps_cursor_visible():
    offset = compute_viewport(CursorState(5, 5), ViewportOffset(0, 0), 1, 1)
    assert offset == ViewportOffset(5, 5)


def test_cursor_compute_viewport_keeps_previous_offset():
    """Scrolling is relative to the previous offset, not recentred each frame."""
    lines = [f"Line {i}" for i in range(50)]
    cursor = Cursor(LineBuffer(lines))
    for _ in range(20):
        cursor.move_down()
    assert cursor.compute_viewport(10, 80).row == 12
    # Moving up within the window leaves the offset alone
    for _ in range(3):
        cursor.move_up()
    assert cursor.compute_viewport(10, 80).row == 12
    assert cursor.offset.row == 12


def test_cursor_always_visible_while_scrolling():
    lines = [f"Line {i}" for i in range(40)]
    cursor = Cursor(LineBuffer(lines))
    height = 6
    for step in range(80):
        if step < 40:
            cursor.move_down()
        else:
            cursor.move_up()
        offset = cursor.compute_viewport(height, 80)
        assert offset.row <= cursor.row < offset.row + height - 1
