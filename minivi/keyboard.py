"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The raw token from the terminal


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down', 'insert',
}


class KeyboardHandler:
    """Turns terminal key tokens into symbolic key events."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self) -> Optional[KeyEvent]:
        """Block for the next key and parse it into a KeyEvent."""
        key = self.terminal.get_key()
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token into a KeyEvent.

        Args:
            key: curtsies key name such as '<UP>', '<Ctrl-j>' or 'a'

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        # Named tokens like '<LEFT>', '<Ctrl-x>', '<Esc+u>'
        if key_str.startswith('<') and key_str.endswith('>') and len(key_str) > 2:
            return self._parse_named(key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if key_str in ('\n', '\r'):
                return KeyEvent(KeyType.SPECIAL, 'enter', key_str)
            if key_str in ('\x7f', '\x08'):
                return KeyEvent(KeyType.SPECIAL, 'backspace', key_str)
            if key_str == '\x1b':
                return KeyEvent(KeyType.SPECIAL, 'escape', key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z
                return KeyEvent(KeyType.CTRL, chr(ord('a') + o - 1), key_str)

        return KeyEvent(KeyType.REGULAR, key_str, key_str)

    def _parse_named(self, key_str: str) -> KeyEvent:
        lower = key_str[1:-1].lower().replace('+', '-')
        parts = lower.split('-')
        base = parts[-1] or '-'
        mods = set(parts[:-1])
        if 'meta' in mods or 'esc' in mods:
            mods.add('alt')

        if base in ('pageup', 'page_up'):
            base = 'page_up'
        elif base in ('pagedown', 'page_down'):
            base = 'page_down'

        if base in ('space', 'spacebar', 'spc') and not mods:
            return KeyEvent(KeyType.REGULAR, ' ', ' ')
        if base == 'tab' and not mods:
            return KeyEvent(KeyType.REGULAR, '\t', '\t')
        if 'ctrl' in mods and len(base) == 1:
            # Terminals send Ctrl-J / Ctrl-M for Enter and Ctrl-H for Backspace
            if base in ('j', 'm'):
                return KeyEvent(KeyType.SPECIAL, 'enter', key_str)
            if base == 'h':
                return KeyEvent(KeyType.SPECIAL, 'backspace', key_str)
            return KeyEvent(KeyType.CTRL, base, key_str)
        if 'alt' in mods and (base in SPECIAL_KEYS or len(base) == 1):
            return KeyEvent(KeyType.ALT, base, key_str)
        if base in ('esc', 'escape'):
            return KeyEvent(KeyType.SPECIAL, 'escape', key_str)
        # Unknown tokens (function keys, resize notifications) stay special
        return KeyEvent(KeyType.SPECIAL, base, key_str)
