"""Main editor controller."""

import logging
import os
import select
import signal
import sys
import termios
from typing import Optional

from .commands import CommandRegistry, Mode
from .config import EditorConfig
from .constants import EditorConstants
from .errors import EditorError
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .model import LineStore
from .prompt import prompt
from .search import SearchEngine
from .status import StatusMessage
from . import storage
from .terminal import TerminalInterface
from .view import CursorController, Direction

logger = logging.getLogger(__name__)


class Editor:
    """Terminal text editor application controller."""

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 config: Optional[EditorConfig] = None):
        """Initialize the editor components."""
        self.config = config or EditorConfig()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        rows, cols = self._text_area_size()
        self.store = LineStore()
        self.cursor = CursorController(screen_rows=rows, screen_cols=cols)
        self.search = SearchEngine(self.store, self.cursor)
        self.status_message = StatusMessage(EditorConstants.HELP_MESSAGE,
                                            timeout=self.config.message_timeout)
        self.command_registry = CommandRegistry()
        self.mode = Mode.NORMAL
        self.dirty = 0
        self.quit_times = self.config.quit_times
        self.running = False
        self._resize_pipe_r: Optional[int] = None
        self._resize_pipe_w: Optional[int] = None

    def _text_area_size(self) -> tuple[int, int]:
        rows = max(self.terminal.height - EditorConstants.STATUS_BAR_ROWS, 1)
        cols = max(self.terminal.width, 1)
        return rows, cols

    @property
    def in_insert_mode(self) -> bool:
        return self.mode == Mode.INSERT

    # --- Files ---

    def load_file(self, filename: str):
        """Load a file into the editor.

        A missing file starts an empty document that will be saved there.

        Args:
            filename: Path to file to load
        """
        try:
            lines = storage.read_lines(filename)
        except FileNotFoundError:
            logger.info("%s does not exist yet, starting a new document", filename)
            lines = []
        except OSError:
            logger.exception("Could not load %s", filename)
            raise
        self._set_store(LineStore.from_lines(lines, source_name=filename))
        self.dirty = 0

    def _set_store(self, store: LineStore):
        self.store = store
        self.search.store = store
        self.cursor.cursor_row = 0
        self.cursor.cursor_col = 0
        self.cursor.row_offset = 0
        self.cursor.col_offset = 0

    def save(self) -> bool:
        """Save the document, asking for a file name if it has none.

        Returns:
            True if the document was written
        """
        if self.store.source_name is None:
            filename = prompt(self, EditorConstants.SAVE_PROMPT)
            if filename is None:
                self.status_message.set_message(EditorConstants.SAVE_ABORTED_MESSAGE)
                return False
            self.store.source_name = filename
        try:
            written = self.store.save()
        except (EditorError, OSError) as e:
            logger.warning("Save failed: %s", e)
            self.status_message.set_message(f"Can't save! I/O error: {e}")
            return False
        self.status_message.set_message(EditorConstants.BYTES_WRITTEN_MESSAGE.format(written))
        self.dirty = 0
        return True

    # --- Cursor and editing ---

    def move_cursor(self, direction: Direction):
        self.cursor.move_cursor(direction, self.store)

    def set_mode(self, mode: Mode):
        self.mode = mode
        self.status_message.set_message(mode.value)

    def insert_char(self, ch: str):
        """Insert ``ch`` at the cursor and move past it."""
        cursor = self.cursor
        if cursor.cursor_row == self.store.number_of_rows():
            self.store.insert_row(self.store.number_of_rows(), "")
        self.store.insert_char(cursor.cursor_row, cursor.cursor_col, ch)
        cursor.cursor_col += 1

    def insert_newline(self):
        """Break the line at the cursor and move to the start of the next line."""
        cursor = self.cursor
        if cursor.cursor_col == 0 or cursor.cursor_row == self.store.number_of_rows():
            self.store.insert_row(cursor.cursor_row, "")
        else:
            self.store.split_row(cursor.cursor_row, cursor.cursor_col)
        cursor.cursor_row += 1
        cursor.cursor_col = 0

    def delete_char(self) -> bool:
        """Delete the character before the cursor (Backspace).

        At the start of a line the line is joined onto the previous one.

        Returns:
            True if the document changed
        """
        cursor = self.cursor
        if cursor.cursor_row == self.store.number_of_rows():
            return False
        if cursor.cursor_row == 0 and cursor.cursor_col == 0:
            return False
        if cursor.cursor_col > 0:
            self.store.delete_char(cursor.cursor_row, cursor.cursor_col - 1)
            cursor.cursor_col -= 1
        else:
            cursor.cursor_col = self.store.row_length(cursor.cursor_row - 1)
            self.store.join_with_previous(cursor.cursor_row)
            cursor.cursor_row -= 1
        return True

    def delete_forward(self) -> bool:
        """Delete the character under the cursor (Delete)."""
        before = (self.cursor.cursor_row, self.cursor.cursor_col)
        self.move_cursor(Direction.RIGHT)
        if (self.cursor.cursor_row, self.cursor.cursor_col) == before:
            return False
        return self.delete_char()

    # --- Search ---

    def find(self):
        """Run an incremental search from the message bar."""
        self.search.begin()
        prompt(self, EditorConstants.SEARCH_PROMPT, callback=self._find_callback)

    def _find_callback(self, editor: 'Editor', query: str, key_event: KeyEvent):
        self.search.callback(query, key_event)

    # --- Quitting ---

    def request_quit(self):
        """Quit, asking for confirmation first if there are unsaved changes."""
        if self.dirty > 0 and self.quit_times > 0:
            self.status_message.set_message(
                EditorConstants.QUIT_WARNING_MESSAGE.format(self.quit_times)
            )
            self.quit_times -= 1
            return
        self.running = False

    # --- Drawing ---

    def status_bar_text(self) -> str:
        """Status bar: file name, modified flag and line position."""
        name = EditorConstants.NO_NAME
        if self.store.source_name:
            name = os.path.basename(self.store.source_name) or self.store.source_name
        number_of_rows = self.store.number_of_rows()
        info = "{} {} -- {} lines".format(
            name, "(modified)" if self.dirty > 0 else "", number_of_rows
        )
        line_info = f"{self.cursor.cursor_row + 1}/{number_of_rows}"
        width = self.cursor.screen_cols
        info = info[:width]
        if len(info) + len(line_info) < width:
            return info + line_info.rjust(width - len(info))
        return info.ljust(width)

    def refresh_screen(self):
        """Re-derive the visible window and redraw the whole screen."""
        self.cursor.scroll(self.store)
        x, y = self.cursor.screen_cursor()
        self.terminal.draw_frame(
            self.cursor.visible_lines(self.store),
            self.status_bar_text(),
            self.status_message.message() or "",
            x,
            y,
        )

    def handle_resize(self):
        """Adopt the terminal's new size."""
        self.cursor.screen_rows, self.cursor.screen_cols = self._text_area_size()
        logger.debug("Resized text area to %dx%d",
                     self.cursor.screen_cols, self.cursor.screen_rows)

    # --- Event loop ---

    def process_keypress(self, key_event: KeyEvent):
        """Handle one key event.

        Document errors and I/O failures are logged and reported in the
        message bar instead of ending the session.
        """
        if not (key_event.key_type == KeyType.CTRL and key_event.value == 'w'):
            self.quit_times = self.config.quit_times
        try:
            if self.command_registry.execute(self, key_event):
                self.dirty += 1
        except EditorError as e:
            logger.exception("Document error handling %r", key_event)
            self.status_message.set_message(f"Error: {e}")
        except OSError as e:
            logger.warning("I/O error handling %r: %s", key_event, e)
            self.status_message.set_message(f"I/O error: {e}")

    def _handle_resize_signal(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        # Write to pipe to wake up select()
        if self._resize_pipe_w is not None:
            os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    def run(self):
        """Run the main editor loop."""
        self.terminal.setup()
        if not self.terminal.has_input:
            self.terminal.cleanup()
            logger.error("No keyboard input available, not starting")
            raise RuntimeError("rezvan needs an interactive terminal")
        self.running = True
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize_signal)
        old_settings = None
        try:
            try:
                old_settings = termios.tcgetattr(sys.stdin)
                new_settings = list(old_settings)
                # Disable IXON/IXOFF so Ctrl-S and Ctrl-Q reach the editor
                new_settings[0] &= ~(termios.IXON | termios.IXOFF)
                termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
            except (termios.error, AttributeError, OSError) as e:
                logger.debug("Leaving terminal flow control as is: %s", e)

            while self.running:
                self.refresh_screen()
                # Wait for input on stdin or resize pipe
                ready, _, _ = select.select([0, self._resize_pipe_r], [], [])
                if self._resize_pipe_r in ready:
                    os.read(self._resize_pipe_r, 1024)
                    self.handle_resize()
                if 0 in ready:
                    key_event = self.keyboard.get_key_event(timeout=0)
                    if key_event:
                        self.process_keypress(key_event)
        except (KeyboardInterrupt, EOFError):
            logger.info("Interrupted")
        finally:
            if old_settings is not None:
                try:
                    termios.tcsetattr(sys.stdin, termios.TCSANOW, old_settings)
                except (termios.error, OSError):
                    pass
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self._resize_pipe_r = self._resize_pipe_w = None
            self.terminal.cleanup()
