"""Typed document nodes for Mirador.

All nodes are frozen dataclasses with slots for:
- Immutability: safe sharing across threads and cache entries
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Heading
│   ├── Paragraph
│   ├── CodeBlock
│   ├── MermaidDiagram
│   ├── Blockquote
│   ├── UnorderedList
│   ├── OrderedList
│   ├── TaskList
│   ├── HorizontalRule
│   ├── Table
│   └── Image
└── InlineSegment (flat inline spans)
    ├── Text
    ├── Bold
    ├── Italic
    ├── BoldItalic
    ├── Code
    ├── Link
    └── Strikethrough

Unlike a full Markdown AST, inline content is flat: a block carries an
InlineContent, which is an ordered tuple of segments with no nesting.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all document nodes."""


# =============================================================================
# Inline Segments
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text with no formatting."""

    text: str


@dataclass(frozen=True, slots=True)
class Bold(Node):
    """Bold text.

    Markdown: **text**

    """

    text: str


@dataclass(frozen=True, slots=True)
class Italic(Node):
    """Italic text.

    Markdown: *text*

    """

    text: str


@dataclass(frozen=True, slots=True)
class BoldItalic(Node):
    """Bold and italic text.

    Markdown: ***text***

    """

    text: str


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Inline code.

    Markdown: `code`

    """

    text: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [text](url)

    """

    text: str
    url: str


@dataclass(frozen=True, slots=True)
class Strikethrough(Node):
    """Struck-through text.

    Markdown: ~~text~~

    """

    text: str


type InlineSegment = Text | Bold | Italic | BoldItalic | Code | Link | Strikethrough


@dataclass(frozen=True, slots=True)
class InlineContent(Node):
    """Resolved inline text of a block.

    Adjacent Text segments are always merged, and no two segments cover
    the same source characters.

    """

    segments: tuple[InlineSegment, ...] = ()

    @property
    def plain_text(self) -> str:
        """Text of every segment concatenated, with markers stripped."""
        return "".join(segment.text for segment in self.segments)

    @property
    def is_empty(self) -> bool:
        return not self.segments


EMPTY_INLINE = InlineContent()


# =============================================================================
# Block Nodes
# =============================================================================


class TableAlignment(Enum):
    """Column alignment, derived from colon placement in the separator row."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading.

    Markdown: ## Heading

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    content: InlineContent


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph of contiguous text lines joined by single spaces."""

    content: InlineContent


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block.

    Markdown:
        ```python
        print("hi")
        ```

    """

    language: str | None
    code: str


@dataclass(frozen=True, slots=True)
class MermaidDiagram(Node):
    """Fenced block declared as ``mermaid``.

    Same raw text as a CodeBlock, different render target.

    """

    code: str


@dataclass(frozen=True, slots=True)
class Blockquote(Node):
    """Contiguous ``>`` lines, resolved as one inline run."""

    content: InlineContent


@dataclass(frozen=True, slots=True)
class UnorderedList(Node):
    """Bullet list (``-``, ``*`` or ``+`` markers)."""

    items: tuple[InlineContent, ...]


@dataclass(frozen=True, slots=True)
class OrderedList(Node):
    """Numbered list.

    Item order is the source order; printed numerals are not kept.

    """

    items: tuple[InlineContent, ...]


@dataclass(frozen=True, slots=True)
class TaskItem(Node):
    """One checkbox item of a task list."""

    checked: bool
    content: InlineContent


@dataclass(frozen=True, slots=True)
class TaskList(Node):
    """Checkbox list.

    Markdown:
        - [ ] todo
        - [x] done

    """

    items: tuple[TaskItem, ...]


@dataclass(frozen=True, slots=True)
class HorizontalRule(Node):
    """Thematic break (``---``, ``***``, ``___``).

    ``ordinal`` counts rules within one parse so identical rules stay distinct.

    """

    ordinal: int


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Pipe table.

    Markdown:
        | A | B |
        |---|--:|
        | 1 | 2 |

    Every row has exactly ``len(headers)`` cells.

    """

    headers: tuple[InlineContent, ...]
    alignments: tuple[TableAlignment, ...]
    rows: tuple[tuple[InlineContent, ...], ...]
    ordinal: int


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Standalone image line: ``![alt](url)`` or an HTML ``<img>`` tag."""

    alt: str
    url: str
    ordinal: int


type Block = (
    Heading
    | Paragraph
    | CodeBlock
    | MermaidDiagram
    | Blockquote
    | UnorderedList
    | OrderedList
    | TaskList
    | HorizontalRule
    | Table
    | Image
)
