"""
Plain-text table writer producing markdown-compatible tables.

The layout matches the bordered markdown tables GitHub renders:

    |  INPUT  |  TYPE  | REQUIRED |
    |---------|--------|----------|
    |  token  | string |   true   |

Left and right borders only, no top or bottom rule, cells center aligned
with one space of padding. Cells wider than the column cap are word-wrapped
onto continuation lines.
"""

import unicodedata
from collections.abc import Sequence

from ..constants import PIPE_SEPARATOR

_ROW_RULE = "-"
_SPACE = " "


def display_width(text: str) -> int:
    """
    Return the number of terminal cells a string occupies.

    Wide and fullwidth East Asian characters count as two cells, combining
    marks and other zero-width characters as none.
    """
    width = 0
    for ch in text:
        if unicodedata.combining(ch) or unicodedata.category(ch) in ("Cf", "Mn", "Me"):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width


def pad_center(text: str, width: int) -> str:
    """Center text in width cells; an odd gap puts the extra space on the right."""
    gap = width - display_width(text)
    if gap <= 0:
        return text
    left = gap // 2
    return _SPACE * left + text + _SPACE * (gap - left)


def wrap_line(paragraph: str, limit: int) -> list[str]:
    """
    Greedily wrap a paragraph into lines of at most limit cells.

    Words are never split; a word wider than the limit gets a line of its own.
    """
    words = paragraph.split(_SPACE)
    lines: list[str] = []
    current: list[str] = []
    current_width = 0
    for word in words:
        word_width = display_width(word)
        if current and current_width + 1 + word_width > limit:
            lines.append(_SPACE.join(current))
            current, current_width = [], 0
        if current:
            current_width += 1
        current.append(word)
        current_width += word_width
    lines.append(_SPACE.join(current))
    return lines


def format_header(name: str) -> str:
    """
    Format a header cell: underscores and word-separating dots become spaces
    and the result is upper-cased.
    """
    chars = list(name)
    for i, ch in enumerate(chars):
        if ch == "_":
            chars[i] = _SPACE
        elif ch == ".":
            before = chars[i - 1] if i > 0 else ""
            after = chars[i + 1] if i < len(chars) - 1 else ""
            if (before and not _is_num_or_space(before)) or (
                after and not _is_num_or_space(after)
            ):
                chars[i] = _SPACE
    formatted = "".join(chars).strip()
    if not formatted and name:
        return _SPACE
    return formatted.upper()


def _is_num_or_space(ch: str) -> bool:
    return ch.isdigit() or ch == _SPACE


class TableWriter:
    """
    Accumulate rows and render them as a bordered, center-aligned table.

    Example:
        table = TableWriter(["Input", "Required"], max_width=40)
        table.append(["token", "true"])
        text = table.render()
    """

    def __init__(
        self,
        header: Sequence[str],
        *,
        max_width: int,
        auto_format_headers: bool = True,
        separator: str = PIPE_SEPARATOR,
    ) -> None:
        """
        Initialize the table.

        Args:
            header: Column titles, in display order
            max_width: Maximum cell width before word wrapping kicks in
            auto_format_headers: Upper-case titles and replace underscores
            separator: Border, column and rule junction character
        """
        self.max_width = max_width
        self.auto_format_headers = auto_format_headers
        self.separator = separator
        self._widths: dict[int, int] = {}
        self._header = [
            self._parse_cell(col, title) for col, title in enumerate(header)
        ]
        self._rows: list[list[list[str]]] = []

    @property
    def num_columns(self) -> int:
        return len(self._header)

    def append(self, row: Sequence[str]) -> None:
        """Add a row; it must have one cell per header column."""
        if len(row) != self.num_columns:
            raise ValueError(
                f"row has {len(row)} cells, table has {self.num_columns} columns"
            )
        self._rows.append(
            [self._parse_cell(col, cell) for col, cell in enumerate(row)]
        )

    def _parse_cell(self, col: int, text: str) -> list[str]:
        """Split a cell into physical lines and track the column width."""
        paragraphs = text.split("\n")
        widest = max(display_width(p) for p in paragraphs)
        limit = min(widest, self.max_width)

        lines: list[str] = []
        for i, para in enumerate(paragraphs):
            if i > 0:
                lines.append(_SPACE)
            lines.extend(wrap_line(para, limit))

        # Wrapping never narrows a column below the wrap limit
        width = max([limit, *(display_width(line) for line in lines)])
        self._widths[col] = max(width, self._widths.get(col, 0))
        return lines

    def _render_lines(self, cells: list[list[str]], out: list[str]) -> None:
        height = max((len(lines) for lines in cells), default=1)
        for x in range(height):
            parts = [self.separator]
            for col, lines in enumerate(cells):
                text = lines[x] if x < len(lines) else ""
                parts.append(f" {pad_center(text, self._widths[col])} {self.separator}")
            out.append("".join(parts) + "\n")

    def render(self) -> str:
        """Render header, header rule and all rows; every line ends with a newline."""
        out: list[str] = []
        header = self._header
        if self.auto_format_headers:
            header = [[format_header(line) for line in lines] for lines in header]
        self._render_lines(header, out)

        rule = [self.separator]
        for col in range(self.num_columns):
            rule.append(_ROW_RULE * (self._widths[col] + 2) + self.separator)
        out.append("".join(rule) + "\n")

        for row in self._rows:
            self._render_lines(row, out)
        return "".join(out)
