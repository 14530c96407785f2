#!/usr/bin/env python3
"""minivi - A minimal modal text editor.

Usage:
    python main.py <filename>

Controls (command mode):
    Arrow keys: Move cursor
    i: Enter insertion mode
    d: Delete line
    y: Copy line
    p: Paste copied line below
    o: Open a new line below
    q: Quit and save

Controls (insertion mode):
    Esc: Back to command mode
    Backspace: Delete character before cursor
    Enter: Split line
"""

import sys
from minivi.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
