"""Incremental, directional search over the rendered document."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .keyboard import KeyEvent, KeyType
from .model import LineStore
from .view import CursorController

logger = logging.getLogger(__name__)


class SearchDirection(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass
class SearchState:
    """Where the last match was and which way the user is stepping.

    Columns are display columns in the row's rendering.
    """
    last_match_row: int = 0
    last_match_col: int = 0
    row_direction: Optional[SearchDirection] = None
    col_direction: Optional[SearchDirection] = None
    matched: bool = False

    def reset(self):
        self.last_match_row = 0
        self.last_match_col = 0
        self.row_direction = None
        self.col_direction = None
        self.matched = False


class SearchEngine:
    """Search state machine driven once per prompt keystroke.

    ``begin`` moves from idle to active and remembers the cursor so that a
    cancelled search can put it back. While active, ``callback`` is
    handed every keystroke together with the current query. Escape and
    Enter end the search.
    """

    def __init__(self, store: LineStore, cursor: CursorController):
        self.store = store
        self.cursor = cursor
        self.state = SearchState()
        self.active = False
        self._origin: Optional[CursorController] = None

    def begin(self):
        self.state.reset()
        self._origin = self.cursor.snapshot()
        self.active = True

    def cancel(self):
        """End the search and return the cursor to where it started."""
        if self._origin is not None:
            self.cursor.restore(self._origin)
        self._finish()

    def confirm(self):
        """End the search, leaving the cursor on the last match."""
        self._finish()

    def _finish(self):
        self.state.reset()
        self._origin = None
        self.active = False

    def callback(self, query: str, key: Optional[KeyEvent]):
        """Handle one prompt keystroke."""
        if key is not None and key.key_type == KeyType.SPECIAL:
            if key.value == 'escape':
                self.cancel()
                return
            if key.value == 'enter':
                self.confirm()
                return
        self.step(query, key)

    def step(self, query: str, key: Optional[KeyEvent] = None) -> bool:
        """Run the match procedure for the current query.

        Down and Up step to the next or previous occurrence; any other key
        searches again from the top of the document.

        Returns:
            True if a match was found and the cursor moved to it.
        """
        state = self.state
        state.row_direction = None
        if key is not None and key.key_type == KeyType.SPECIAL:
            if key.value == 'down':
                state.row_direction = SearchDirection.FORWARD
            elif key.value == 'up':
                state.row_direction = SearchDirection.BACKWARD

        if not query:
            return False

        if state.row_direction is None or not state.matched:
            hit = self._scan_from_top(query)
            direction = SearchDirection.FORWARD
        elif state.row_direction == SearchDirection.FORWARD:
            hit = self._scan_forward(query)
            direction = SearchDirection.FORWARD
        else:
            hit = self._scan_backward(query)
            direction = SearchDirection.BACKWARD

        if hit is None:
            logger.debug("No match for %r", query)
            return False

        row_index, render_col = hit
        state.last_match_row = row_index
        state.last_match_col = render_col
        state.col_direction = direction
        state.matched = True

        row = self.store.get_row(row_index)
        self.cursor.cursor_row = row_index
        self.cursor.cursor_col = row.content_col(render_col)
        # Past any real row, so the next scroll() re-positions the window
        self.cursor.row_offset = self.store.number_of_rows()
        return True

    def _scan_from_top(self, query: str):
        for row_index in range(self.store.number_of_rows()):
            index = self.store.get_render(row_index).find(query)
            if index != -1:
                return (row_index, index)
        return None

    def _scan_forward(self, query: str):
        start_row = self.state.last_match_row
        render = self.store.get_render(start_row)
        index = render.find(query, self.state.last_match_col + 1)
        if index != -1:
            return (start_row, index)
        for row_index in range(start_row + 1, self.store.number_of_rows()):
            index = self.store.get_render(row_index).find(query)
            if index != -1:
                return (row_index, index)
        return None

    def _scan_backward(self, query: str):
        start_row = self.state.last_match_row
        render = self.store.get_render(start_row)
        # Any occurrence starting left of the last match
        index = render.rfind(query, 0, self.state.last_match_col + len(query) - 1)
        if index != -1:
            return (start_row, index)
        for row_index in range(start_row - 1, -1, -1):
            index = self.store.get_render(row_index).rfind(query)
            if index != -1:
                return (row_index, index)
        return None
