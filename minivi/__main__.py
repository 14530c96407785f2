"""minivi CLI entry point.

Allows running via `python -m minivi` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import os
import sys

from .constants import EditorConstants
from .editor import Editor


def main(argv: list[str] | None = None) -> int:
    """Edit the file named by the single positional argument.

    Returns the process exit status.
    """
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "minivi"
        if prog == "__main__.py":
            prog = "minivi"
        print(EditorConstants.USAGE_MESSAGE.format(prog=prog))
        return 1

    editor = Editor(args[0])
    editor.load_file()
    if not editor.run():
        print(f"Error: cannot save to {args[0]}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
