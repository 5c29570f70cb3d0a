"""Single-line input in the message bar."""

from typing import TYPE_CHECKING, Callable, Optional

from .keyboard import KeyEvent, KeyType

if TYPE_CHECKING:
    from .editor import Editor

PromptCallback = Callable[['Editor', str, KeyEvent], None]


def prompt(editor: 'Editor', template: str,
           callback: Optional[PromptCallback] = None) -> Optional[str]:
    """Read a line of input from the user.

    ``template`` is formatted with the current input and shown in the
    message bar; the screen is refreshed before every key read. After each
    keystroke ``callback`` receives the editor, the current input and the
    key, including the final Enter or Escape.

    Returns:
        The entered text, or None if the user cancelled with Escape.
    """
    text = ""
    while True:
        editor.status_message.set_message(template.format(text))
        editor.refresh_screen()
        key = editor.keyboard.read_key()

        if key.key_type == KeyType.SPECIAL and key.value == 'enter':
            if not text:
                continue
            editor.status_message.clear()
            if callback:
                callback(editor, text, key)
            return text
        if key.key_type == KeyType.SPECIAL and key.value == 'escape':
            editor.status_message.clear()
            if callback:
                callback(editor, "", key)
            return None

        if key.key_type == KeyType.SPECIAL and key.value in ('backspace', 'delete'):
            text = text[:-1]
        elif key.is_printable:
            text += key.value
        if callback:
            callback(editor, text, key)
