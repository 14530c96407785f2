"""Command pattern implementation for the modal key tables."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING

from .constants import EditorConstants
from .keyboard import KeyType
from .modes import Mode

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent

logger = logging.getLogger(__name__)


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the document
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Movement commands don't modify the document."""
        self._move(editor, key_event)
        return False

    @abstractmethod
    def _move(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the movement."""
        pass


class UpCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.cursor.move_up()


class DownCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.cursor.move_down()


class LeftCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.cursor.move_left()


class RightCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.cursor.move_right()


class EditCommand(EditorCommand):
    """Base class for editing commands.

    The cursor is re-clamped once after every edit, so subclasses only
    set the position they intend and never bounds-check it themselves.
    """

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Editing commands modify the document."""
        self._edit(editor, key_event)
        editor.cursor.clamp_to_line()
        return True

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the edit."""
        pass


class DeleteLineCommand(EditCommand):
    def _edit(self, editor, key_event):
        cursor = editor.cursor
        cursor.row = editor.buffer.delete_line(cursor.row)
        cursor.col = 0


class PasteLineCommand(EditCommand):
    def _edit(self, editor, key_event):
        cursor = editor.cursor
        editor.buffer.insert_line(cursor.row + 1, editor.clipboard.text)
        cursor.row += 1


class OpenLineCommand(EditCommand):
    def _edit(self, editor, key_event):
        cursor = editor.cursor
        editor.buffer.insert_line(cursor.row + 1, "")
        cursor.row += 1
        cursor.col = 0


class BackspaceCommand(EditCommand):
    def _edit(self, editor, key_event):
        # Column 0 does not join with the previous line
        cursor = editor.cursor
        if cursor.col > 0:
            line = editor.buffer.line_at(cursor.row)
            editor.buffer.replace_line(cursor.row, line[:cursor.col - 1] + line[cursor.col:])
            cursor.col -= 1


class NewlineCommand(EditCommand):
    def _edit(self, editor, key_event):
        cursor = editor.cursor
        editor.buffer.split_line(cursor.row, cursor.col)
        cursor.row += 1
        cursor.col = 0


class InsertCharCommand(EditCommand):
    def _edit(self, editor, key_event):
        cursor = editor.cursor
        line = editor.buffer.line_at(cursor.row)
        editor.buffer.replace_line(cursor.row, line[:cursor.col] + key_event.value + line[cursor.col:])
        cursor.col += 1


class SystemCommand(EditorCommand):
    """Base class for commands that don't modify document content."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        self._execute_system(editor, key_event)
        return False

    @abstractmethod
    def _execute_system(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the system action."""
        pass


class CopyLineCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.clipboard.copy(editor.buffer.line_at(editor.cursor.row))


class SwitchModeCommand(SystemCommand):
    def __init__(self, mode: Mode):
        self.mode = mode

    def _execute_system(self, editor, key_event):
        logger.debug("Mode %s -> %s", editor.mode.name, self.mode.name)
        editor.mode = self.mode


class QuitCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        logger.debug("Quit requested")
        editor.running = False


def is_printable(key_event: 'KeyEvent') -> bool:
    """True for a single printable ASCII character."""
    value = key_event.value
    return (key_event.key_type == KeyType.REGULAR and len(value) == 1
            and EditorConstants.PRINTABLE_MIN <= ord(value) <= EditorConstants.PRINTABLE_MAX)


class CommandRegistry:
    """Registry mapping key combinations to commands, one table per mode."""

    def __init__(self):
        self._commands: Dict[Mode, Dict[Tuple[KeyType, str], EditorCommand]] = {
            mode: {} for mode in Mode
        }
        self._insert_char = InsertCharCommand()
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        command = Mode.COMMAND
        # Movement commands
        self.register(command, (KeyType.SPECIAL, 'up'), UpCommand())
        self.register(command, (KeyType.SPECIAL, 'down'), DownCommand())
        self.register(command, (KeyType.SPECIAL, 'left'), LeftCommand())
        self.register(command, (KeyType.SPECIAL, 'right'), RightCommand())

        # Line commands
        self.register(command, (KeyType.REGULAR, EditorConstants.ENTER_INSERTION_KEY),
                      SwitchModeCommand(Mode.INSERTION))
        self.register(command, (KeyType.REGULAR, EditorConstants.DELETE_LINE_KEY), DeleteLineCommand())
        self.register(command, (KeyType.REGULAR, EditorConstants.COPY_LINE_KEY), CopyLineCommand())
        self.register(command, (KeyType.REGULAR, EditorConstants.PASTE_KEY), PasteLineCommand())
        self.register(command, (KeyType.REGULAR, EditorConstants.OPEN_LINE_KEY), OpenLineCommand())
        self.register(command, (KeyType.REGULAR, EditorConstants.QUIT_KEY), QuitCommand())

        insertion = Mode.INSERTION
        self.register(insertion, (KeyType.SPECIAL, 'escape'), SwitchModeCommand(Mode.COMMAND))
        self.register(insertion, (KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register(insertion, (KeyType.SPECIAL, 'enter'), NewlineCommand())

    def register(self, mode: Mode, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination in one mode."""
        self._commands[mode][key] = command

    def get_command(self, mode: Mode, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination in the given mode."""
        return self._commands[mode].get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event in the editor's mode.

        Keys with no command are ignored.

        Returns:
            True if the document was modified
        """
        command = self.get_command(editor.mode, key_event.key_type, key_event.value)
        if command:
            return command.execute(editor, key_event)

        # Printable characters are literal text in insertion mode
        if editor.mode == Mode.INSERTION and is_printable(key_event):
            return self._insert_char.execute(editor, key_event)

        return False
