"""Block-level parsing for Mirador.

Line predicates decide which block starts on a line; BlockParsingMixin
consumes the lines of each block and emits it.

Every handler advances the host's cursor by at least one line, so the
block loop always terminates.
"""

from __future__ import annotations

from collections.abc import Sequence

from mirador.config import ParseConfig, get_parse_config
from mirador.nodes import (
    Block,
    Blockquote,
    Heading,
    InlineContent,
    OrderedList,
    Paragraph,
    TaskItem,
    TaskList,
    UnorderedList,
)
from mirador.parsing.patterns import BULLET_PREFIXES, FENCE, ORDERED_ITEM, TASK_ITEM
from mirador.parsing.table import is_table_row
from mirador.sanitize import contains_html_img, is_html_only_line, parse_image_line, strip_html_tags

_RULE_CHARS = frozenset("-*_")


# =============================================================================
# Line predicates
# =============================================================================


def is_fence(line: str) -> bool:
    """Check if a line opens or closes a fenced block."""
    return line.startswith(FENCE)


def heading_level(line: str) -> int:
    """Count leading ``#`` characters, capped at 6. Zero if not a heading."""
    level = 0
    while level < len(line) and line[level] == "#" and level < 6:
        level += 1
    return level


def is_blockquote(line: str) -> bool:
    return line.startswith(">")


def is_horizontal_rule(line: str) -> bool:
    """Check for ``---``, ``***`` or ``___`` (spaces between marks allowed)."""
    compact = line.strip().replace(" ", "").replace("\t", "")
    return len(compact) >= 3 and compact[0] in _RULE_CHARS and compact == compact[0] * len(compact)


def is_task_item(trimmed: str) -> bool:
    return TASK_ITEM.match(trimmed) is not None


def is_bullet_item(trimmed: str) -> bool:
    return trimmed.startswith(BULLET_PREFIXES)


def is_ordered_item(trimmed: str) -> bool:
    return ORDERED_ITEM.match(trimmed) is not None


def starts_block(line: str, config: ParseConfig) -> bool:
    """Check if a line would start a block other than a paragraph.

    Paragraph continuation stops at any such line.
    """
    trimmed = line.strip()
    return (
        is_fence(line)
        or heading_level(line) > 0
        or is_blockquote(line)
        or is_horizontal_rule(line)
        or (config.tables_enabled and is_table_row(line))
        or contains_html_img(line)
        or parse_image_line(line) is not None
        or is_bullet_item(trimmed)
        or is_ordered_item(trimmed)
    )


# =============================================================================
# Block handlers
# =============================================================================


class BlockParsingMixin:
    """Mixin for heading, quote, list and paragraph blocks.

    Required Host Attributes:
        - _lines: Sequence[str]
        - _pos: int (cursor, advanced by every handler)

    Required Host Methods:
        - _parse_inline(text) -> InlineContent
        - _emit(block) -> None

    """

    _lines: Sequence[str]
    _pos: int

    def _parse_inline(self, text: str) -> InlineContent:
        raise NotImplementedError

    def _emit(self, block: Block) -> None:
        raise NotImplementedError

    def _parse_heading(self, line: str, level: int) -> None:
        content = self._parse_inline(line[level:].strip())
        self._emit(Heading(level=level, content=content))  # type: ignore[arg-type]
        self._pos += 1

    def _parse_blockquote(self) -> None:
        """Consume contiguous ``>`` lines as one block."""
        quote_lines: list[str] = []
        while self._pos < len(self._lines) and is_blockquote(self._lines[self._pos]):
            quote_lines.append(self._lines[self._pos][1:].strip())
            self._pos += 1
        self._emit(Blockquote(content=self._parse_inline("\n".join(quote_lines))))

    def _parse_task_list(self) -> None:
        """Consume contiguous ``- [ ]`` / ``- [x]`` lines."""
        items: list[TaskItem] = []
        while self._pos < len(self._lines):
            trimmed = self._lines[self._pos].strip()
            match = TASK_ITEM.match(trimmed)
            if match is None:
                break
            checked = match.group(1).lower() == "x"
            items.append(TaskItem(checked=checked, content=self._parse_inline(trimmed[match.end():])))
            self._pos += 1
        self._emit(TaskList(items=tuple(items)))

    def _parse_unordered_list(self) -> None:
        """Consume contiguous ``-``, ``*`` and ``+`` items."""
        items: list[InlineContent] = []
        while self._pos < len(self._lines):
            trimmed = self._lines[self._pos].strip()
            if not is_bullet_item(trimmed):
                break
            items.append(self._parse_inline(trimmed[2:]))
            self._pos += 1
        self._emit(UnorderedList(items=tuple(items)))

    def _parse_ordered_list(self) -> None:
        """Consume contiguous ``N.`` items; the numerals themselves are dropped."""
        items: list[InlineContent] = []
        while self._pos < len(self._lines):
            trimmed = self._lines[self._pos].strip()
            match = ORDERED_ITEM.match(trimmed)
            if match is None:
                break
            items.append(self._parse_inline(trimmed[match.end():]))
            self._pos += 1
        self._emit(OrderedList(items=tuple(items)))

    def _parse_paragraph(self, line: str) -> None:
        """Accumulate lines until a blank line or another block start.

        HTML tags are stripped and HTML-only lines are dropped. A paragraph
        left with no text is not emitted.
        """
        config = get_parse_config()
        parts: list[str] = []

        first = self._clean_line(line, config)
        if first:
            parts.append(first)
        self._pos += 1

        while self._pos < len(self._lines):
            next_line = self._lines[self._pos]
            if not next_line.strip() or starts_block(next_line, config):
                break
            if not (config.strip_html and is_html_only_line(next_line)):
                cleaned = self._clean_line(next_line, config)
                if cleaned:
                    parts.append(cleaned)
            self._pos += 1

        text = " ".join(parts).strip()
        if text:
            self._emit(Paragraph(content=self._parse_inline(text)))

    @staticmethod
    def _clean_line(line: str, config: ParseConfig) -> str:
        if config.strip_html:
            return strip_html_tags(line)
        return line.strip()
