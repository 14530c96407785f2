"""Constants and configuration for the minivi editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Command mode keys
    ENTER_INSERTION_KEY = 'i'
    DELETE_LINE_KEY = 'd'
    COPY_LINE_KEY = 'y'
    PASTE_KEY = 'p'
    OPEN_LINE_KEY = 'o'
    QUIT_KEY = 'q'

    # Printable characters accepted in insertion mode (inclusive ASCII range)
    PRINTABLE_MIN = 0x20
    PRINTABLE_MAX = 0x7E

    # Status bar
    STATUS_FORMAT = "{filename} - Line {row}, Col {col}  -- {mode}"
    STATUS_ROWS = 1  # Rows reserved at the bottom of the screen
    UNPRINTABLE_PLACEHOLDER = "?"  # Shown in place of control characters

    # File operations
    FILE_ENCODING = "utf-8"
    FILE_ERRORS = "surrogateescape"  # Undecodable bytes survive a load/save cycle
    ATOMIC_SAVE_PREFIX = "."  # Prefix for temporary save files
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files

    # CLI
    USAGE_MESSAGE = "Usage: {prog} <filename>"
