from typing import Iterable, Optional

from . import storage
from .errors import InvalidOffset, NoDestination, OutOfRange
from .row import Row


class LineStore:
    """The document: an ordered list of rows.

    Row indices are valid in ``[0, number_of_rows())``. Every structural
    edit keeps each row's rendering in step with its content.
    """

    rows: list[Row]
    source_name: Optional[str]

    def __init__(self, rows: Optional[list[Row]] = None, source_name: Optional[str] = None):
        self.rows = rows if rows is not None else []
        self.source_name = source_name

    @classmethod
    def from_lines(cls, lines: Iterable[str], source_name: Optional[str] = None) -> "LineStore":
        return cls([Row(line) for line in lines], source_name=source_name)

    def load(self, text: str, source_name: Optional[str] = None):
        """Replace the document with ``text`` split on line terminators."""
        self.rows = [Row(line) for line in storage.split_lines(text)]
        if source_name is not None:
            self.source_name = source_name

    def number_of_rows(self) -> int:
        return len(self.rows)

    def __len__(self):
        return len(self.rows)

    def _check_row(self, at: int):
        if not 0 <= at < len(self.rows):
            raise OutOfRange(f"row {at} outside document of {len(self.rows)} rows")

    def get_row(self, at: int) -> Row:
        self._check_row(at)
        return self.rows[at]

    def get_content(self, at: int) -> str:
        return self.get_row(at).content

    def get_render(self, at: int) -> str:
        return self.get_row(at).render

    def row_length(self, at: int) -> int:
        """Content length of row ``at``, or 0 for the virtual append row."""
        if at == len(self.rows):
            return 0
        return len(self.get_row(at))

    def insert_row(self, at: int, content: str = ""):
        if not 0 <= at <= len(self.rows):
            raise OutOfRange(f"cannot insert row at {at} in document of {len(self.rows)} rows")
        self.rows.insert(at, Row(content))

    def insert_char(self, at_row: int, at_col: int, ch: str):
        row = self.get_row(at_row)
        if len(ch) != 1:
            raise InvalidOffset(f"expected a single character, got {ch!r}")
        if not 0 <= at_col <= len(row):
            raise InvalidOffset(f"column {at_col} outside row {at_row} of length {len(row)}")
        row.insert_char(at_col, ch)

    def delete_char(self, at_row: int, at_col: int):
        row = self.get_row(at_row)
        if not 0 <= at_col < len(row):
            raise InvalidOffset(f"no character at column {at_col} of row {at_row}")
        row.delete_char(at_col)

    def split_row(self, at_row: int, at_col: int):
        """Move the text after ``at_col`` onto a new row below ``at_row``."""
        row = self.get_row(at_row)
        if not 0 <= at_col <= len(row):
            raise InvalidOffset(f"column {at_col} outside row {at_row} of length {len(row)}")
        tail = row.truncate(at_col)
        self.rows.insert(at_row + 1, Row(tail))

    def join_with_previous(self, at_row: int):
        """Append row ``at_row`` onto the row above it and remove it."""
        if at_row == 0:
            raise OutOfRange("the first row has no previous row to join with")
        self._check_row(at_row)
        current = self.rows.pop(at_row)
        self.rows[at_row - 1].append(current.content)

    def serialize(self) -> str:
        if self.source_name is None:
            raise NoDestination()
        return '\n'.join(row.content for row in self.rows)

    def save(self) -> int:
        """Write the document to ``source_name``.

        Returns:
            Number of bytes written.
        """
        content = self.serialize()
        return storage.write_text(self.source_name, content)
