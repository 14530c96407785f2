"""Editor modes."""

from enum import Enum


class Mode(Enum):
    """Which command table the interpreter consults."""
    COMMAND = "command"
    INSERTION = "insertion"

    @property
    def display_name(self) -> str:
        """Name shown in the status line."""
        return "INSERT" if self is Mode.INSERTION else "NORMAL"
