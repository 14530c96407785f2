"""Line-oriented file reading and atomic writing."""

import logging
import os
import stat
import tempfile
from typing import Iterable, List

from .constants import EditorConstants

logger = logging.getLogger(__name__)


def read_lines(path: str) -> List[str]:
    """Read a text file into a list of lines without terminators.

    Only ``'\\n'`` separates lines; any other byte, including ``'\\r'`` and
    bytes that are not valid in the file encoding, is kept in the line so
    that writing the lines back reproduces the file.

    A missing file is not an error: it yields an empty list so the editor
    starts with a blank document.
    """
    try:
        with open(path, 'r', encoding=EditorConstants.FILE_ENCODING,
                  errors=EditorConstants.FILE_ERRORS, newline='') as f:
            content = f.read()
    except FileNotFoundError:
        logger.debug("%s does not exist, starting with an empty document", path)
        return []
    lines = content.split('\n')
    if lines[-1] == '':
        # Trailing terminator (or empty file) doesn't start another line
        lines.pop()
    logger.debug("Read %d lines from %s", len(lines), path)
    return lines


def write_lines(path: str, lines: Iterable[str]) -> None:
    """Write lines to ``path``, each followed by a newline.

    The content goes to a temporary file in the same directory which then
    replaces the target, so a failed write leaves the original untouched.
    An existing target keeps its permission bits.

    Raises:
        OSError: if the file cannot be written
    """
    dir_name = os.path.dirname(path) or '.'
    base_name = os.path.basename(path)
    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            encoding=EditorConstants.FILE_ENCODING,
            errors=EditorConstants.FILE_ERRORS,
            newline='',
            dir=dir_name,
            prefix=EditorConstants.ATOMIC_SAVE_PREFIX + base_name,
            suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
            delete=False,
        ) as temp_file:
            temp_filename = temp_file.name
            count = 0
            for line in lines:
                temp_file.write(line + '\n')
                count += 1
            temp_file.flush()
            os.fsync(temp_file.fileno())
        if os.path.exists(path):
            os.chmod(temp_filename, stat.S_IMODE(os.stat(path).st_mode))
        os.replace(temp_filename, path)
    except OSError:
        if temp_filename is not None and os.path.exists(temp_filename):
            os.remove(temp_filename)
        raise
    logger.debug("Wrote %d lines to %s", count, path)
