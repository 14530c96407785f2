"""Line buffer holding the document being edited."""

from typing import Iterable, List


class OutOfRangeError(IndexError):
    """Raised when a row or column lies outside the current buffer bounds."""


class LineBuffer:
    """Ordered sequence of text lines.

    The buffer is never empty: it always holds at least one line, which
    may be the empty string. Callers must revalidate any row index they
    kept across a mutation against the current ``line_count()``.
    """

    def __init__(self, lines: Iterable[str] = ()):
        self._lines: List[str] = [""]
        self.load(lines)

    def load(self, lines: Iterable[str]) -> None:
        """Replace the content with the given lines.

        An empty sequence yields a single empty line.
        """
        self._lines = list(lines) or [""]

    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, row: int) -> str:
        """Return the line at ``row``.

        Raises:
            OutOfRangeError: if ``row`` is not in ``[0, line_count())``
        """
        self._check_row(row)
        return self._lines[row]

    @property
    def lines(self) -> List[str]:
        """A copy of the current content."""
        return list(self._lines)

    def delete_line(self, row: int) -> int:
        """Remove the line at ``row`` and return a valid row for the cursor.

        Deleting the only line replaces it with an empty line instead.
        """
        self._check_row(row)
        if len(self._lines) == 1:
            self._lines[0] = ""
            return 0
        del self._lines[row]
        return min(row, len(self._lines) - 1)

    def insert_line(self, row: int, text: str) -> None:
        """Insert ``text`` as a new line at ``row``, shifting later lines down.

        ``row`` may equal ``line_count()`` to append at the end.
        """
        if not 0 <= row <= len(self._lines):
            raise OutOfRangeError(f"cannot insert at row {row} (line count {len(self._lines)})")
        self._lines.insert(row, text)

    def split_line(self, row: int, col: int) -> None:
        """Split the line at ``row`` so that ``[col, end)`` becomes line ``row + 1``."""
        line = self.line_at(row)
        self._check_col(row, col, line)
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])

    def replace_line(self, row: int, text: str) -> None:
        """Overwrite the content of the line at ``row``."""
        self._check_row(row)
        self._lines[row] = text

    def _check_row(self, row: int) -> None:
        if not 0 <= row < len(self._lines):
            raise OutOfRangeError(f"row {row} out of range (line count {len(self._lines)})")

    @staticmethod
    def _check_col(row: int, col: int, line: str) -> None:
        if not 0 <= col <= len(line):
            raise OutOfRangeError(f"column {col} out of range for row {row} (length {len(line)})")

    def __repr__(self) -> str:
        return f"LineBuffer({self._lines!r})"
