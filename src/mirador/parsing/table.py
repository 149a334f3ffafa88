"""Table parsing for Mirador.

Handles pipe tables:

    | Header 1 | Header 2 |   <- header row
    |:---------|---------:|   <- separator row (required)
    | Cell 1   | Cell 2   |   <- data rows

Parsing is lenient on purpose: ragged rows are padded or truncated to the
header width, so a sloppy table still renders instead of erroring.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import NamedTuple

from mirador.nodes import EMPTY_INLINE, InlineContent, TableAlignment
from mirador.parsing.inline import parse_inline
from mirador.parsing.patterns import SEPARATOR_CHARS


class TableParse(NamedTuple):
    """Result of a successful table parse."""

    headers: tuple[InlineContent, ...]
    alignments: tuple[TableAlignment, ...]
    rows: tuple[tuple[InlineContent, ...], ...]
    end_index: int


def is_table_row(line: str) -> bool:
    """Check if a line looks like a table row (starts with ``|``)."""
    return line.strip(" \t").startswith("|")


def is_table_separator(line: str) -> bool:
    """Check if a line is an alignment-separator row.

    A separator starts with ``|``, holds only ``|``, ``-``, ``:`` and
    whitespace, and has at least one ``-``.
    """
    trimmed = line.strip(" \t")
    if not trimmed.startswith("|"):
        return False
    return "-" in trimmed and all(c in SEPARATOR_CHARS for c in trimmed)


def split_cells(line: str) -> list[str]:
    """Split a table row into trimmed cell strings.

    One leading and one trailing pipe are dropped. ``\\|`` is a literal
    pipe inside a cell.
    """
    line = line.strip(" \t")
    if line.startswith("|"):
        line = line[1:]
    if line.endswith("|") and not line.endswith("\\|"):
        line = line[:-1]

    cells: list[str] = []
    current_cell: list[str] = []
    i = 0
    while i < len(line):
        if line[i] == "\\" and i + 1 < len(line) and line[i + 1] == "|":
            current_cell.append("|")
            i += 2
        elif line[i] == "|":
            cells.append("".join(current_cell).strip(" \t"))
            current_cell = []
            i += 1
        else:
            current_cell.append(line[i])
            i += 1

    cells.append("".join(current_cell).strip(" \t"))
    return cells


def parse_alignments(separator: str, column_count: int) -> tuple[TableAlignment, ...]:
    """Read per-column alignment from a separator row.

    ``:-:`` is centered, ``--:`` is right-aligned, anything else is left.
    The result is padded with LEFT or truncated to ``column_count``.
    """
    alignments: list[TableAlignment] = []
    for cell in split_cells(separator):
        if cell.startswith(":") and cell.endswith(":"):
            alignments.append(TableAlignment.CENTER)
        elif cell.endswith(":"):
            alignments.append(TableAlignment.RIGHT)
        else:
            alignments.append(TableAlignment.LEFT)

    alignments.extend([TableAlignment.LEFT] * (column_count - len(alignments)))
    return tuple(alignments[:column_count])


def _fit_row(cells: list[InlineContent], width: int) -> tuple[InlineContent, ...]:
    """Pad with empty cells or truncate so the row is exactly ``width`` wide."""
    cells.extend([EMPTY_INLINE] * (width - len(cells)))
    return tuple(cells[:width])


def parse_table(
    lines: Sequence[str],
    start: int,
    *,
    resolve: Callable[[str], InlineContent] = parse_inline,
) -> TableParse | None:
    """Parse a table whose header row is ``lines[start]``.

    Args:
        lines: All document lines
        start: Index of the candidate header row
        resolve: Inline resolver for cell text

    Returns:
        TableParse if ``lines[start]`` is a ``|`` row followed by a valid
        separator row, None otherwise.
    """
    if start < 0 or start + 1 >= len(lines):
        return None
    if not is_table_row(lines[start]) or not is_table_separator(lines[start + 1]):
        return None

    headers = tuple(resolve(cell) for cell in split_cells(lines[start]))
    alignments = parse_alignments(lines[start + 1], len(headers))

    rows: list[tuple[InlineContent, ...]] = []
    i = start + 2
    while i < len(lines) and is_table_row(lines[i]) and not is_table_separator(lines[i]):
        cells = [resolve(cell) for cell in split_cells(lines[i])]
        rows.append(_fit_row(cells, len(headers)))
        i += 1

    return TableParse(headers, alignments, tuple(rows), i)


class TableParsingMixin:
    """Mixin for pipe table parsing.

    Required Host Methods:
        - _parse_inline(text) -> InlineContent

    """

    def _parse_inline(self, text: str) -> InlineContent:
        raise NotImplementedError

    def _try_parse_table(self, lines: Sequence[str], start: int) -> TableParse | None:
        """Try to parse a table at ``start``, resolving cells via the host."""
        return parse_table(lines, start, resolve=self._parse_inline)
