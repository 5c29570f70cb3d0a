"""Test doubles and key constructors shared by the tests."""

from unittest.mock import MagicMock

from rezvan.keyboard import KeyEvent, KeyType


class FakeTerminal:
    """Stand-in for TerminalInterface that records frames."""

    def __init__(self, width=40, height=12):
        self.width = width
        self.height = height
        self.has_input = True
        self.keys = []
        self.draw_frame = MagicMock()

    def get_key(self, timeout=None):
        if self.keys:
            return self.keys.pop(0)
        return None

    def setup(self):
        pass

    def cleanup(self):
        pass


def special(name):
    return KeyEvent(KeyType.SPECIAL, name, f"<{name.upper()}>")


def char(ch):
    return KeyEvent(KeyType.REGULAR, ch, ch)


def ctrl(ch):
    return KeyEvent(KeyType.CTRL, ch, f"<Ctrl-{ch}>")
