"""Rezvan - a small terminal text editor."""

from .model import LineStore
from .row import Row, render_row, content_col_to_render_col, render_col_to_content_col
from .search import SearchEngine, SearchDirection, SearchState
from .view import CursorController, Direction

__all__ = [
    'LineStore',
    'Row',
    'render_row',
    'content_col_to_render_col',
    'render_col_to_content_col',
    'SearchEngine',
    'SearchDirection',
    'SearchState',
    'CursorController',
    'Direction',
]
