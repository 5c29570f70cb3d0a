from dataclasses import dataclass, replace
from enum import Enum

from .constants import EditorConstants
from .model import LineStore

FILLER = EditorConstants.FILLER_MARKER


class Direction(Enum):
    """Logical cursor movements."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


@dataclass
class CursorController:
    """Cursor position and the visible window over the document.

    ``cursor_col`` is a content column and ``render_col`` the matching
    display column. ``cursor_row`` may equal the row count, which is the
    virtual row used to append after the last line. ``row_offset`` and
    ``col_offset`` are the top-left corner of the window, in rows and
    display columns.
    """
    screen_rows: int
    screen_cols: int
    cursor_col: int = 0
    cursor_row: int = 0
    render_col: int = 0
    row_offset: int = 0
    col_offset: int = 0

    def snapshot(self) -> "CursorController":
        return replace(self)

    def restore(self, snapshot: "CursorController"):
        self.__dict__.update(snapshot.__dict__)

    def move_cursor(self, direction: Direction, store: LineStore):
        number_of_rows = store.number_of_rows()
        if direction == Direction.UP:
            self.cursor_row = max(self.cursor_row - 1, 0)
        elif direction == Direction.DOWN:
            self.cursor_row = min(self.cursor_row + 1, number_of_rows)
        elif direction == Direction.LEFT:
            if self.cursor_col > 0:
                self.cursor_col -= 1
            elif self.cursor_row > 0:
                self.cursor_row -= 1
                self.cursor_col = store.row_length(self.cursor_row)
        elif direction == Direction.RIGHT:
            if self.cursor_row < number_of_rows:
                if self.cursor_col < store.row_length(self.cursor_row):
                    self.cursor_col += 1
                elif self.cursor_row + 1 < number_of_rows:
                    self.cursor_row += 1
                    self.cursor_col = 0
        elif direction == Direction.HOME:
            self.cursor_col = 0
        elif direction == Direction.END:
            if self.cursor_row < number_of_rows:
                self.cursor_col = store.row_length(self.cursor_row)
        elif direction in (Direction.PAGE_UP, Direction.PAGE_DOWN):
            self.page(direction, store)
            return
        else:
            raise ValueError(f"unknown direction {direction!r}")
        self._clamp_col(store)

    def page(self, direction: Direction, store: LineStore):
        """Move a full screen up or down.

        The cursor first jumps to the top (or bottom) visible row, then
        moves one screen further so the window scrolls by a page.
        """
        if direction == Direction.PAGE_UP:
            self.cursor_row = self.row_offset
            step = Direction.UP
        else:
            self.cursor_row = min(self.row_offset + self.screen_rows - 1,
                                  store.number_of_rows())
            step = Direction.DOWN
        for _ in range(self.screen_rows):
            self.move_cursor(step, store)
        self._clamp_col(store)

    def _clamp_col(self, store: LineStore):
        self.cursor_col = min(self.cursor_col, store.row_length(self.cursor_row))

    def scroll(self, store: LineStore):
        """Bring the cursor into the window, moving it as little as possible."""
        self.render_col = 0
        if self.cursor_row < store.number_of_rows():
            self.render_col = store.get_row(self.cursor_row).render_col(self.cursor_col)

        self.row_offset = min(self.row_offset, self.cursor_row)
        if self.cursor_row >= self.row_offset + self.screen_rows:
            self.row_offset = self.cursor_row - self.screen_rows + 1

        self.col_offset = min(self.col_offset, self.render_col)
        if self.render_col >= self.col_offset + self.screen_cols:
            self.col_offset = self.render_col - self.screen_cols + 1

    def screen_cursor(self) -> tuple[int, int]:
        """Cursor position on screen as (x, y)."""
        return (self.render_col - self.col_offset, self.cursor_row - self.row_offset)

    def visible_lines(self, store: LineStore) -> list[str]:
        """Text for each screen row, starting at the window's top-left.

        Rows past the end of the document show the filler marker. An empty
        document shows a welcome banner a third of the way down.
        """
        lines = []
        number_of_rows = store.number_of_rows()
        for y in range(self.screen_rows):
            file_row = y + self.row_offset
            if file_row >= number_of_rows:
                if number_of_rows == 0 and y == self.screen_rows // 3:
                    lines.append(self._welcome_line())
                else:
                    lines.append(FILLER)
            else:
                render = store.get_render(file_row)
                lines.append(render[self.col_offset:self.col_offset + self.screen_cols])
        return lines

    def _welcome_line(self) -> str:
        welcome = EditorConstants.WELCOME_MESSAGE.format(EditorConstants.VERSION)
        welcome = welcome[:self.screen_cols]
        padding = (self.screen_cols - len(welcome)) // 2
        if padding:
            return FILLER + ' ' * (padding - 1) + welcome
        return welcome
