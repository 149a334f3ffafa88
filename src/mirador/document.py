"""Document wrapper for a parsed preview.

Besides the blocks, a Document records whether the source was a full HTML
page. Such pages are not parsed at all: the host shows them in an HTML
view instead.

Example:
    >>> from mirador.document import parse_document
    >>> parse_document("<!DOCTYPE html>\\n<html></html>").is_html
    True
    >>> len(parse_document("# Title").blocks)
    1
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from mirador.nodes import Block, InlineContent, Paragraph, Text
from mirador.parser import Parser
from mirador.sanitize import looks_like_html_document
from mirador.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Document:
    """Parsed preview content.

    Attributes:
        blocks: Blocks in source order (empty for HTML documents)
        is_html: The source is an HTML page and was not parsed

    """

    blocks: tuple[Block, ...] = ()
    is_html: bool = False

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    @classmethod
    def from_error(cls, message: str) -> Document:
        """Wrap an error message as a one-paragraph document.

        The message is kept verbatim; no inline formatting is resolved.
        """
        content = InlineContent((Text(message),)) if message else InlineContent()
        return cls(blocks=(Paragraph(content=content),))


def parse_document(source: str) -> Document:
    """Parse source into a Document, bailing out early on HTML pages.

    Uses the parse configuration of the current context.
    """
    if looks_like_html_document(source):
        logger.debug("Source looks like an HTML document, skipping Markdown parse")
        return Document(is_html=True)
    return Document(blocks=tuple(Parser(source).parse()))


__all__ = ["Document", "parse_document"]
