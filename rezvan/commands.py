"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType
from .view import Direction

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class Mode(Enum):
    """Input modes: NORMAL moves with h/j/k/l, INSERT types text."""
    NORMAL = "NORMAL"
    INSERT = "INSERT"


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


class MoveCommand(EditorCommand):
    """Cursor movement in a fixed direction."""

    def __init__(self, direction: Direction):
        self.direction = direction

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        editor.move_cursor(self.direction)
        return False


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        return self._edit(editor, key_event) is not False

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent') -> Optional[bool]:
        """Perform the edit; return False if nothing changed."""


class BackspaceCommand(EditCommand):
    def _edit(self, editor, key_event):
        return editor.delete_char()


class DeleteForwardCommand(EditCommand):
    def _edit(self, editor, key_event):
        return editor.delete_forward()


class InsertNewlineCommand(EditCommand):
    def _edit(self, editor, key_event):
        if not editor.in_insert_mode:
            return False
        editor.insert_newline()


class InsertTextCommand(EditCommand):
    def _edit(self, editor, key_event):
        if not key_event.is_printable:
            return False
        editor.insert_char(key_event.value)


class SystemCommand(EditorCommand):
    """Base class for commands that don't modify document content."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        self._execute_system(editor, key_event)
        return False

    @abstractmethod
    def _execute_system(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the system action."""


class SetModeCommand(SystemCommand):
    def __init__(self, mode: Mode):
        self.mode = mode

    def _execute_system(self, editor, key_event):
        editor.set_mode(self.mode)


class QuitCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.request_quit()


class SaveCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.save()


class FindCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.find()


class CommandRegistry:
    """Registry for mapping key combinations to commands.

    Plain characters are looked up in the normal-mode table while the
    editor is in normal mode and inserted into the document otherwise.
    """

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._normal_mode: Dict[str, EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        for name, direction in (
            ('up', Direction.UP),
            ('down', Direction.DOWN),
            ('left', Direction.LEFT),
            ('right', Direction.RIGHT),
            ('home', Direction.HOME),
            ('end', Direction.END),
            ('page_up', Direction.PAGE_UP),
            ('page_down', Direction.PAGE_DOWN),
        ):
            self.register((KeyType.SPECIAL, name), MoveCommand(direction))

        # Normal mode keys
        self.register_normal('h', MoveCommand(Direction.LEFT))
        self.register_normal('j', MoveCommand(Direction.DOWN))
        self.register_normal('k', MoveCommand(Direction.UP))
        self.register_normal('l', MoveCommand(Direction.RIGHT))
        self.register_normal('i', SetModeCommand(Mode.INSERT))
        self.register_normal('a', SetModeCommand(Mode.INSERT))

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'delete'), DeleteForwardCommand())
        self.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())
        self.register((KeyType.SPECIAL, 'escape'), SetModeCommand(Mode.NORMAL))

        # System commands
        self.register((KeyType.CTRL, 'w'), QuitCommand())
        self.register((KeyType.CTRL, 's'), SaveCommand())
        self.register((KeyType.CTRL, 'f'), FindCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def register_normal(self, char: str, command: EditorCommand):
        """Register a command for a plain character in normal mode."""
        self._normal_mode[char] = command

    def get_command(self, key_type: KeyType, value: str,
                    normal_mode: bool = False) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        if key_type == KeyType.REGULAR:
            if normal_mode:
                return self._normal_mode.get(value)
            return None
        return self._commands.get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if the document was modified
        """
        command = self.get_command(key_event.key_type, key_event.value,
                                   normal_mode=not editor.in_insert_mode)
        if command:
            return command.execute(editor, key_event)

        # Handle regular text input
        if key_event.key_type == KeyType.REGULAR and editor.in_insert_mode:
            return InsertTextCommand().execute(editor, key_event)

        return False
