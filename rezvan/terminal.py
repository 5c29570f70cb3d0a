"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import select
import sys
from typing import Optional

import blessed

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None

    def setup(self):
        """Enter fullscreen mode and prepare terminal."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            try:
                from curtsies import Input  # type: ignore
                # Enter raw mode immediately so reads work
                self._curtsies_input = Input(keynames='curtsies')  # type: ignore
                self._curtsies_input.__enter__()
            except Exception as e:
                # curtsies cannot take over stdin when it is not a tty (CI,
                # pipes); the editor then runs without input.
                logger.warning("Keyboard input unavailable: %s", e)
                self._curtsies_input = None

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            print(self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)  # type: ignore
            except Exception as e:
                logger.warning("Could not leave raw mode cleanly: %s", e)
            finally:
                self._curtsies_input = None

    def clear_screen(self):
        """Clear the entire screen and home the cursor."""
        print(self.term.home + self.term.clear, end='', flush=True)

    def draw_frame(self, lines: list[str], status_bar: str, message: str,
                   cursor_x: int, cursor_y: int):
        """Draw the text rows, status bar and message bar, then place the cursor.

        Args:
            lines: Text for each screen row, already cut to the screen width
            status_bar: Status bar text, drawn in reverse video
            message: Message bar text (may be empty)
            cursor_x: Cursor column on screen (0-based)
            cursor_y: Cursor row on screen (0-based)
        """
        width = self.width
        out = [self.term.hide_cursor, self.term.home]
        for y, line in enumerate(lines):
            out.append(self.term.move_yx(y, 0) + line + self.term.clear_eol)
        out.append(self.term.move_yx(len(lines), 0))
        out.append(self.term.reverse + status_bar[:width].ljust(width) + self.term.normal)
        out.append(self.term.move_yx(len(lines) + 1, 0) + message[:width] + self.term.clear_eol)
        out.append(self.term.move_yx(cursor_y, cursor_x) + self.term.normal_cursor)
        print(''.join(out), end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None when nothing was read.
        """
        if self._curtsies_input is None:
            return None
        if timeout is None:
            return str(next(self._curtsies_input))  # blocks
        r, _, _ = select.select([sys.stdin], [], [], float(timeout))
        if not r:
            return None
        return str(next(self._curtsies_input))

    @property
    def has_input(self) -> bool:
        """True when keyboard input is being read."""
        return self._curtsies_input is not None

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows."""
        return self.term.height
