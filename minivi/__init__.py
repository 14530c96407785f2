"""minivi - A minimal modal text editor."""

from .buffer import LineBuffer, OutOfRangeError
from .cursor import Cursor, CursorState, ViewportOffset, compute_viewport
from .editor import Editor
from .modes import Mode

__all__ = [
    'LineBuffer',
    'OutOfRangeError',
    'Cursor',
    'CursorState',
    'ViewportOffset',
    'compute_viewport',
    'Editor',
    'Mode',
]
