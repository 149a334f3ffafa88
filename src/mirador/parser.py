"""Line-oriented block parser producing typed blocks.

Walks the document line by line with bounded lookahead and emits an
ordered list of immutable blocks. Inline text inside each block is
resolved as the block is emitted.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `InlineParsingMixin`: inline spans (bold, italic, code, links)
- `TableParsingMixin`: pipe tables
- `BlockParsingMixin`: headings, quotes, lists, paragraphs

Parse order per line:
fence -> blank/HTML-only skip -> <img> line -> heading -> blockquote ->
horizontal rule -> table -> image line -> task list -> bullet list ->
ordered list -> paragraph

Thread Safety:
- Parser produces immutable blocks (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share results across threads

"""

from __future__ import annotations

from mirador.config import get_parse_config
from mirador.nodes import Block, CodeBlock, HorizontalRule, Image, MermaidDiagram, Paragraph, Table
from mirador.parsing import BlockParsingMixin, InlineParsingMixin, TableParsingMixin
from mirador.parsing.blocks import (
    heading_level,
    is_blockquote,
    is_bullet_item,
    is_fence,
    is_horizontal_rule,
    is_ordered_item,
    is_task_item,
)
from mirador.parsing.patterns import FENCE
from mirador.parsing.table import is_table_row
from mirador.sanitize import contains_html_img, is_html_only_line, parse_image_line
from mirador.utils.logger import get_logger

logger = get_logger(__name__)


def split_lines(source: str) -> list[str]:
    """Split source into lines.

    A final newline does not start an extra empty line, and a trailing
    ``\\r`` is dropped from each line.
    """
    if not source:
        return []
    lines = source.split("\n")
    if source.endswith("\n"):
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


class Parser(
    InlineParsingMixin,
    TableParsingMixin,
    BlockParsingMixin,
):
    """Block parser for Markdown.

    Usage:
        >>> parser = Parser("# Hello\\n\\nWorld")
        >>> parser.parse()
        [Heading(level=1, ...), Paragraph(...)]

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).

    """

    __slots__ = (
        "_lines",
        "_pos",
        "_blocks",
        # Fence state: language is only meaningful while _in_fence
        "_in_fence",
        "_fence_language",
        "_fence_lines",
        # Ordinal counters for position-equal blocks
        "_rule_count",
        "_table_count",
        "_image_count",
    )

    def __init__(self, source: str) -> None:
        self._lines = split_lines(source)
        self._pos = 0
        self._blocks: list[Block] = []

        self._in_fence = False
        self._fence_language: str | None = None
        self._fence_lines: list[str] = []

        self._rule_count = 0
        self._table_count = 0
        self._image_count = 0

    def parse(self) -> list[Block]:
        """Parse the source into blocks.

        Never raises: anything unrecognized ends up in a paragraph, and an
        unclosed fence is closed at end of input as a CodeBlock.
        """
        config = get_parse_config()
        lines = self._lines

        while self._pos < len(lines):
            line = lines[self._pos]

            if is_fence(line):
                self._toggle_fence(line)
                self._pos += 1
                continue

            if self._in_fence:
                self._fence_lines.append(line)
                self._pos += 1
                continue

            if not line.strip() or (config.strip_html and is_html_only_line(line)):
                self._pos += 1
                continue

            if contains_html_img(line):
                image = parse_image_line(line)
                if image is not None:
                    self._emit_image(*image)
                    self._pos += 1
                    continue

            self._parse_block(line)

        # An unterminated fence is always plain code, even a mermaid one
        if self._in_fence:
            self._close_fence(allow_diagram=False)

        return self._blocks

    def _parse_block(self, line: str) -> None:
        """Dispatch one non-blank line to its block handler."""
        config = get_parse_config()
        trimmed = line.strip()

        level = heading_level(line)
        if level:
            self._parse_heading(line, level)
        elif is_blockquote(line):
            self._parse_blockquote()
        elif is_horizontal_rule(line):
            self._emit(HorizontalRule(ordinal=self._rule_count))
            self._rule_count += 1
            self._pos += 1
        elif config.tables_enabled and is_table_row(line):
            self._parse_table_or_row(line)
        elif (image := parse_image_line(line)) is not None:
            self._emit_image(*image)
            self._pos += 1
        elif config.task_lists_enabled and is_task_item(trimmed):
            self._parse_task_list()
        elif is_bullet_item(trimmed):
            self._parse_unordered_list()
        elif is_ordered_item(trimmed):
            self._parse_ordered_list()
        else:
            self._parse_paragraph(line)

    def _parse_table_or_row(self, line: str) -> None:
        """Parse a table, or fall back to a one-line paragraph.

        Only the header candidate is consumed on fallback; following lines
        are tested again from scratch.
        """
        result = self._try_parse_table(self._lines, self._pos)
        if result is None:
            logger.debug("Line %d looks like a table row but has no separator", self._pos + 1)
            self._emit(Paragraph(content=self._parse_inline(line)))
            self._pos += 1
            return

        self._emit(
            Table(
                headers=result.headers,
                alignments=result.alignments,
                rows=result.rows,
                ordinal=self._table_count,
            )
        )
        self._table_count += 1
        self._pos = result.end_index

    def _toggle_fence(self, line: str) -> None:
        if self._in_fence:
            self._close_fence()
            return
        language = line[len(FENCE):].strip()
        self._in_fence = True
        self._fence_language = language or None
        self._fence_lines = []

    def _close_fence(self, *, allow_diagram: bool = True) -> None:
        code = "\n".join(self._fence_lines)
        language = self._fence_language
        if (
            allow_diagram
            and language is not None
            and language.lower() == "mermaid"
            and get_parse_config().mermaid_enabled
        ):
            self._emit(MermaidDiagram(code=code))
        else:
            self._emit(CodeBlock(language=language, code=code))
        self._in_fence = False
        self._fence_language = None
        self._fence_lines = []

    def _emit_image(self, alt: str, url: str) -> None:
        self._emit(Image(alt=alt, url=url, ordinal=self._image_count))
        self._image_count += 1

    def _emit(self, block: Block) -> None:
        self._blocks.append(block)
