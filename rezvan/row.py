"""A single document line and its tab-expanded rendering."""

from dataclasses import dataclass, field

from .constants import EditorConstants

TAB_STOP = EditorConstants.TAB_STOP


def render_row(content: str) -> str:
    """Expand tabs in ``content`` to spaces.

    Display positions are counted from 1. A tab emits one space and then
    keeps emitting spaces until the position is a multiple of the tab
    stop, so every tab becomes 1 to TAB_STOP spaces.
    """
    out: list[str] = []
    index = 0
    for ch in content:
        index += 1
        if ch == '\t':
            out.append(' ')
            while index % TAB_STOP != 0:
                out.append(' ')
                index += 1
        else:
            out.append(ch)
    return ''.join(out)


@dataclass
class Row:
    content: str = ""
    render: str = field(default="", compare=False)

    def __post_init__(self):
        self.update()

    def update(self):
        """Recompute the rendering after a content change."""
        self.render = render_row(self.content)

    def __len__(self):
        return len(self.content)

    def insert_char(self, at: int, ch: str):
        self.content = self.content[:at] + ch + self.content[at:]
        self.update()

    def delete_char(self, at: int):
        self.content = self.content[:at] + self.content[at + 1:]
        self.update()

    def append(self, text: str):
        self.content += text
        self.update()

    def truncate(self, at: int) -> str:
        """Cut the row at ``at`` and return the removed tail."""
        tail = self.content[at:]
        self.content = self.content[:at]
        self.update()
        return tail

    def render_col(self, content_col: int) -> int:
        return content_col_to_render_col(self, content_col)

    def content_col(self, render_col: int) -> int:
        return render_col_to_content_col(self, render_col)


def content_col_to_render_col(row: Row, content_col: int) -> int:
    """Return the display column of ``content_col`` within ``row``."""
    render_col = 0
    for ch in row.content[:content_col]:
        if ch == '\t':
            render_col += (TAB_STOP - 1) - (render_col % TAB_STOP)
        render_col += 1
    return render_col


def render_col_to_content_col(row: Row, render_col: int) -> int:
    """Return the content column that is displayed at ``render_col``.

    A display column inside a tab's expansion maps to the tab itself.
    Columns past the end of the rendered line map to the end of the row.
    """
    current = 0
    for content_col, ch in enumerate(row.content):
        if ch == '\t':
            current += (TAB_STOP - 1) - (current % TAB_STOP)
        current += 1
        if current > render_col:
            return content_col
    return len(row.content)
