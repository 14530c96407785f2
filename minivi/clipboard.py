"""Single-line clipboard used by the copy and paste commands."""


class ClipboardSlot:
    """Holds at most one copied line for the lifetime of a session.

    Before the first copy the slot holds the empty string, so pasting
    inserts an empty line.
    """

    def __init__(self):
        self._text = ""

    def copy(self, text: str) -> None:
        """Overwrite the slot with a copy of the given line."""
        self._text = str(text)

    @property
    def text(self) -> str:
        return self._text
