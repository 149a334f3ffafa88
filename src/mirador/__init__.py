"""
Mirador: Markdown preview core for Python

Turns Markdown text into an ordered tuple of typed, immutable blocks with
flat inline formatting, and tokenizes fenced code into role-tagged runs.
Rendering is left to the host: Mirador never produces HTML or pixels.

Quick Start:
    >>> from mirador import parse
    >>> blocks = parse("# Hello\\n\\nSome **bold** text.")
    >>> blocks[0]
    Heading(level=1, content=InlineContent(segments=(Text(text='Hello'),)))

    >>> # Or use the high-level Markdown class
    >>> from mirador import Markdown, ParseConfig
    >>> md = Markdown(config=ParseConfig(tables_enabled=False))
    >>> doc = md.parse_document("| not | a table |")

Code Highlighting:
    >>> from mirador import highlight
    >>> runs = highlight('print("hi")', "python")
    >>> [(r.start, r.end, r.role.name) for r in runs]
    [(0, 5, 'FUNCTION'), (5, 6, 'PLAIN'), (6, 10, 'STRING'), (10, 11, 'PLAIN')]

Installation:
    pip install mirador              # Zero runtime dependencies
"""

from collections.abc import Iterable

from mirador.cache import DictParseCache, ParseCache, hash_config, hash_content
from mirador.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from mirador.document import Document, parse_document
from mirador.highlighting import (
    FormattedRun,
    Language,
    SyntaxRole,
    highlight,
    resolve_language,
    supports_language,
)
from mirador.identity import block_id
from mirador.nodes import (
    Block,
    Blockquote,
    Bold,
    BoldItalic,
    Code,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    InlineContent,
    InlineSegment,
    Italic,
    Link,
    MermaidDiagram,
    OrderedList,
    Paragraph,
    Strikethrough,
    Table,
    TableAlignment,
    TaskItem,
    TaskList,
    Text,
    UnorderedList,
)
from mirador.outline import OutlineEntry, outline
from mirador.parser import Parser
from mirador.parsing import TableParse, parse_inline, parse_table
from mirador.search import find_matches, split_matches
from mirador.serialization import from_dict, from_json, to_dict, to_json
from mirador.text import plain_text
from mirador.theme import Theme, parse_hex_color

__version__ = "0.1.0"


def _parse_blocks(source: str, config: ParseConfig, cache: ParseCache | None) -> tuple[Block, ...]:
    """Parse with an optional cache; the caller has already set ``config``."""
    config_hash = hash_config(config) if cache is not None else ""
    content_hash = hash_content(source) if config_hash else ""

    if cache is not None and config_hash:
        cached = cache.get(content_hash, config_hash)
        if cached is not None:
            return cached

    blocks = tuple(Parser(source).parse())

    if cache is not None and config_hash:
        cache.put(content_hash, config_hash, blocks)
    return blocks


def parse(source: str, *, cache: ParseCache | None = None) -> tuple[Block, ...]:
    """Parse Markdown source into blocks.

    Uses the parse configuration of the current context (the defaults
    unless ``parse_config_context`` or ``set_parse_config`` changed it).

    Args:
        source: Markdown source text
        cache: Optional content-addressed parse cache. When provided, checks cache
            before parsing; on miss, parses and stores result. Cache is bypassed
            when config has text_transformer set. For parallel parsing, use a
            thread-safe cache implementation.

    Returns:
        Blocks in source order. Never raises; malformed input degrades to
        paragraphs.

    Example:
        >>> parse("# Title\\n\\nSome **bold** and *italic* text.")[1]
        Paragraph(content=InlineContent(segments=(Text(text='Some '), Bold(text='bold'), ...)))
    """
    return _parse_blocks(source, get_parse_config(), cache)


class Markdown:
    """High-level Markdown processor with a fixed configuration.

    Example:
        >>> md = Markdown(config=ParseConfig(strip_html=False))
        >>> blocks = md.parse("<b>kept</b> as text")
        >>> entries = md.outline("# One\\n\\n## Two")

    Thread Safety:
        The configuration is immutable and applied through a ContextVar for
        the duration of each call, so one instance may be shared by threads.

    """

    __slots__ = ("_config",)

    def __init__(self, *, config: ParseConfig | None = None) -> None:
        """Initialize Markdown processor.

        Args:
            config: Parse configuration (defaults to every feature enabled)
        """
        self._config = config or ParseConfig()

    @property
    def config(self) -> ParseConfig:
        return self._config

    def parse(self, source: str, *, cache: ParseCache | None = None) -> tuple[Block, ...]:
        """Parse Markdown source into blocks.

        Args:
            source: Markdown source text
            cache: Optional content-addressed parse cache. For parallel parsing,
                use a thread-safe cache implementation.

        Returns:
            Blocks in source order

        """
        with parse_config_context(self._config):
            return _parse_blocks(source, self._config, cache)

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        cache: ParseCache | None = None,
    ) -> list[tuple[Block, ...]]:
        """Parse multiple Markdown sources.

        Sets config once, parses all, restores once. When cache is provided,
        duplicate sources within the batch hit cache.

        Example:
            >>> md = Markdown()
            >>> results = md.parse_many(["# Doc 1", "# Doc 2", "# Doc 3"])
        """
        with parse_config_context(self._config):
            return [_parse_blocks(source, self._config, cache) for source in sources]

    def parse_document(self, source: str) -> Document:
        """Parse into a Document, bailing out early on HTML pages."""
        with parse_config_context(self._config):
            return parse_document(source)

    def outline(self, source: str) -> tuple[OutlineEntry, ...]:
        """Parse and return the heading outline."""
        return outline(self.parse(source))


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "parse_document",
    "parse_inline",
    "parse_table",
    "highlight",
    # Parse cache
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
    # Block nodes
    "Block",
    "Blockquote",
    "CodeBlock",
    "Document",
    "Heading",
    "HorizontalRule",
    "Image",
    "MermaidDiagram",
    "OrderedList",
    "Paragraph",
    "Table",
    "TableAlignment",
    "TaskItem",
    "TaskList",
    "UnorderedList",
    # Inline nodes
    "InlineContent",
    "InlineSegment",
    "Bold",
    "BoldItalic",
    "Code",
    "Italic",
    "Link",
    "Strikethrough",
    "Text",
    # Parser components
    "Parser",
    "TableParse",
    # Highlighting
    "FormattedRun",
    "Language",
    "SyntaxRole",
    "resolve_language",
    "supports_language",
    # Projections
    "OutlineEntry",
    "block_id",
    "find_matches",
    "outline",
    "plain_text",
    "split_matches",
    # Theme
    "Theme",
    "parse_hex_color",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # High-level
    "Markdown",
]
