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


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down', 'insert',
}


@dataclass(frozen=True)
class KeyEvent:
    """A logical key: a character, a control chord or a named key."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str = ""  # The raw key string from curtsies

    @property
    def is_printable(self) -> bool:
        """True for characters that go into the document or a prompt."""
        return self.key_type == KeyType.REGULAR and (self.value == '\t' or ord(self.value[0]) >= 32)


class KeyboardHandler:
    """Turns curtsies key names into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event, or None if nothing arrived before ``timeout``."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def read_key(self) -> KeyEvent:
        """Block until a key event is available.

        Raises:
            EOFError: If the terminal has no input to read from.
        """
        event = self.get_key_event(timeout=None)
        if event is None:
            raise EOFError("no keyboard input")
        return event

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key name into a KeyEvent.

        Args:
            key: Key name such as ``'a'``, ``'<UP>'`` or ``'<Ctrl-s>'``

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        if key_str.startswith('<') and key_str.endswith('>') and len(key_str) > 2:
            name = key_str[1:-1]
            # Support both '-' and '+' as modifier separators (e.g., '<Esc+u>')
            lower = name.lower().replace('+', '-')
            parts = lower.split('-') if '-' in lower else [lower]
            base = parts[-1]
            mods = set(parts[:-1])
            if 'meta' in mods or 'esc' in mods:
                mods.add('alt')
            if base in ('pageup', 'page_up'):
                base = 'page_up'
            elif base in ('pagedown', 'page_down'):
                base = 'page_down'

            if base in ('space', 'spacebar', 'spc') and not mods:
                return KeyEvent(KeyType.REGULAR, ' ', key_str)
            if base == 'tab' and not mods:
                return KeyEvent(KeyType.REGULAR, '\t', key_str)
            if 'ctrl' in mods and len(base) == 1:
                # Ctrl-J / Ctrl-M are Enter on terminals
                if base in ('j', 'm'):
                    return KeyEvent(KeyType.SPECIAL, 'enter', key_str)
                return KeyEvent(KeyType.CTRL, base, key_str)
            if 'alt' in mods and (base in SPECIAL_KEYS or len(base) == 1):
                return KeyEvent(KeyType.ALT, base, key_str)
            if base in SPECIAL_KEYS:
                return KeyEvent(KeyType.SPECIAL, base, key_str)
            if base in ('esc', 'escape'):
                return KeyEvent(KeyType.SPECIAL, 'escape', key_str)
            return KeyEvent(KeyType.SPECIAL, base, key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if o == 9:
                return KeyEvent(KeyType.REGULAR, '\t', key_str)
            if o in (10, 13):
                return KeyEvent(KeyType.SPECIAL, 'enter', key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z (exclude ESC=27)
                return KeyEvent(KeyType.CTRL, chr(ord('a') + o - 1), key_str)
            if o == 127:
                return KeyEvent(KeyType.SPECIAL, 'backspace', key_str)

        if key_str == '\x1b':
            return KeyEvent(KeyType.SPECIAL, 'escape', key_str)

        return KeyEvent(KeyType.REGULAR, key_str, key_str)
