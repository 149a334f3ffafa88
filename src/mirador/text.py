"""Extract plain text from Mirador nodes.

Used for outline entries, heading slugs, block ids and find-in-page.

Example:
    >>> from mirador import parse, plain_text
    >>> blocks = parse("# Hello **World**")
    >>> plain_text(blocks[0])
    'Hello World'
"""

from mirador.nodes import (
    Blockquote,
    Bold,
    BoldItalic,
    Code,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    InlineContent,
    Italic,
    Link,
    MermaidDiagram,
    Node,
    OrderedList,
    Paragraph,
    Strikethrough,
    Table,
    TaskItem,
    TaskList,
    Text,
    UnorderedList,
)


def plain_text(node: Node) -> str:
    """Extract plain text from any node.

    Inline markers are dropped, link text is kept without its URL, and
    list items, table rows and code lines are separated by newlines.
    Table cells within a row are separated by tabs. A horizontal rule has
    no text.

    Args:
        node: Any block, inline segment, InlineContent or TaskItem.

    Returns:
        Plain text of the node.

    """
    match node:
        case Text() | Bold() | Italic() | BoldItalic() | Code() | Strikethrough() | Link():
            return node.text
        case InlineContent():
            return node.plain_text
        case Heading() | Paragraph() | Blockquote() | TaskItem():
            return node.content.plain_text
        case CodeBlock() | MermaidDiagram():
            return node.code
        case UnorderedList() | OrderedList():
            return "\n".join(item.plain_text for item in node.items)
        case TaskList():
            return "\n".join(item.content.plain_text for item in node.items)
        case Table():
            rows = (node.headers, *node.rows)
            return "\n".join("\t".join(cell.plain_text for cell in row) for row in rows)
        case Image():
            return node.alt
        case HorizontalRule():
            return ""
        case _:
            return ""


__all__ = ["plain_text"]
