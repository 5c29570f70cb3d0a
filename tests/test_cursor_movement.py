"""Tests for cursor movement rules."""

import pytest

from rezvan.model import LineStore
from rezvan.view import CursorController, Direction


@pytest.fixture
def store():
    return LineStore.from_lines(["hello world", "hi", "", "last line"])


@pytest.fixture
def cursor():
    return CursorController(screen_rows=3, screen_cols=20)


def test_up_stops_at_first_row(store, cursor):
    cursor.move_cursor(Direction.UP, store)
    assert (cursor.cursor_row, cursor.cursor_col) == (0, 0)


def test_down_can_reach_virtual_row_but_no_further(store, cursor):
    for _ in range(10):
        cursor.move_cursor(Direction.DOWN, store)
    assert cursor.cursor_row == store.number_of_rows()
    assert cursor.cursor_col == 0


def test_vertical_move_clamps_column(store, cursor):
    cursor.move_cursor(Direction.END, store)
    assert cursor.cursor_col == 11
    cursor.move_cursor(Direction.DOWN, store)
    assert (cursor.cursor_row, cursor.cursor_col) == (1, 2)
    cursor.move_cursor(Direction.DOWN, store)
    assert (cursor.cursor_row, cursor.cursor_col) == (2, 0)


def test_left_at_line_start_wraps_to_previous_line_end(store, cursor):
    cursor.cursor_row = 1
    cursor.move_cursor(Direction.LEFT, store)
    assert (cursor.cursor_row, cursor.cursor_col) == (0, 11)


def test_left_at_document_start_does_nothing(store, cursor):
    cursor.move_cursor(Direction.LEFT, store)
    assert (cursor.cursor_row, cursor.cursor_col) == (0, 0)


def test_right_at_line_end_wraps_to_next_line_start(store, cursor):
    cursor.cursor_row = 1
    cursor.cursor_col = 2
    cursor.move_cursor(Direction.RIGHT, store)
    assert (cursor.cursor_row, cursor.cursor_col) == (2, 0)


def test_right_at_end_of_last_line_stays(store, cursor):
    cursor.cursor_row = 3
    cursor.cursor_col = 9
    cursor.move_cursor(Direction.RIGHT, store)
    assert (cursor.cursor_row, cursor.cursor_col) == (3, 9)


def test_right_on_virtual_row_does_nothing(store, cursor):
    cursor.cursor_row = store.number_of_rows()
    cursor.move_cursor(Direction.RIGHT, store)
    assert (cursor.cursor_row, cursor.cursor_col) == (4, 0)


def test_home_and_end(store, cursor):
    cursor.cursor_col = 4
    cursor.move_cursor(Direction.END, store)
    assert cursor.cursor_col == 11
    cursor.move_cursor(Direction.HOME, store)
    assert cursor.cursor_col == 0


def test_end_on_virtual_row_keeps_column_zero(store, cursor):
    cursor.cursor_row = store.number_of_rows()
    cursor.move_cursor(Direction.END, store)
    assert cursor.cursor_col == 0


def test_column_moves_in_content_space_over_tabs(cursor):
    store = LineStore.from_lines(["\tx"])
    cursor.move_cursor(Direction.RIGHT, store)
    assert cursor.cursor_col == 1
    cursor.scroll(store)
    assert cursor.render_col == 4


def test_moves_on_empty_document(cursor):
    store = LineStore()
    for direction in Direction:
        cursor.move_cursor(direction, store)
        assert (cursor.cursor_row, cursor.cursor_col) == (0, 0)


def test_page_down_moves_a_screen():
    store = LineStore.from_lines([f"line {i}" for i in range(20)])
    cursor = CursorController(screen_rows=5, screen_cols=20)
    cursor.move_cursor(Direction.PAGE_DOWN, store)
    # Jump to the bottom of the window (row 4) then one screen further
    assert cursor.cursor_row == 9


def test_page_down_stops_at_virtual_row():
    store = LineStore.from_lines(["a", "b", "c"])
    cursor = CursorController(screen_rows=5, screen_cols=20)
    cursor.move_cursor(Direction.PAGE_DOWN, store)
    assert cursor.cursor_row == 3


def test_page_up_from_scrolled_window():
    store = LineStore.from_lines([f"line {i}" for i in range(20)])
    cursor = CursorController(screen_rows=5, screen_cols=20, cursor_row=12, row_offset=10)
    cursor.move_cursor(Direction.PAGE_UP, store)
    assert cursor.cursor_row == 5


def test_page_clamps_column():
    store = LineStore.from_lines(["a long first line"] + ["x"] * 10)
    cursor = CursorController(screen_rows=3, screen_cols=40, cursor_col=10)
    cursor.move_cursor(Direction.PAGE_DOWN, store)
    assert cursor.cursor_row == 5
    assert cursor.cursor_col == 1


def test_snapshot_and_restore():
    cursor = CursorController(screen_rows=3, screen_cols=20, cursor_row=2, cursor_col=5,
                              row_offset=1, col_offset=3)
    saved = cursor.snapshot()
    cursor.cursor_row = 0
    cursor.col_offset = 0
    cursor.restore(saved)
    assert cursor == saved
    assert cursor is not saved
