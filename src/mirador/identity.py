"""Stable block identifiers.

A preview that re-parses on every file change needs to know which blocks
survived the edit so it can keep scroll position and skip redraws. The id
of a block depends only on its kind and a prefix of its text, so the
same block gets the same id across parses and across processes.

Rules, tables and images carry no distinguishing text, so their ids use
the ordinal the parser assigned instead.

Example:
    >>> from mirador import parse
    >>> from mirador.identity import block_id
    >>> block_id(parse("## Usage")[0])
    'h2-...'
"""

from mirador.nodes import (
    Block,
    Blockquote,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    MermaidDiagram,
    OrderedList,
    Paragraph,
    Table,
    TaskList,
    UnorderedList,
)
from mirador.utils.hashing import hash_str

_DIGEST_LENGTH = 12


def _digest(text: str, prefix_length: int) -> str:
    return hash_str(text[:prefix_length], truncate=_DIGEST_LENGTH)


def block_id(block: Block) -> str:
    """Compute a stable identifier for a block.

    Two blocks of the same kind whose text agrees on the hashed prefix
    share an id; hosts pair the id with the block position when they need
    uniqueness.
    """
    match block:
        case Heading(level=level, content=content):
            return f"h{level}-{_digest(content.plain_text, 20)}"
        case Paragraph(content=content):
            return f"p-{_digest(content.plain_text, 30)}"
        case CodeBlock(language=language, code=code):
            return f"code-{language or ''}-{_digest(code, 30)}"
        case MermaidDiagram(code=code):
            return f"mermaid-{_digest(code, 30)}"
        case Blockquote(content=content):
            return f"quote-{_digest(content.plain_text, 20)}"
        case UnorderedList(items=items):
            first = items[0].plain_text if items else ""
            return f"ul-{len(items)}-{_digest(first, 10)}"
        case OrderedList(items=items):
            first = items[0].plain_text if items else ""
            return f"ol-{len(items)}-{_digest(first, 10)}"
        case TaskList(items=items):
            first = items[0].content.plain_text if items else ""
            return f"task-{len(items)}-{_digest(first, 10)}"
        case HorizontalRule(ordinal=ordinal):
            return f"hr-{ordinal}"
        case Table(headers=headers, rows=rows, ordinal=ordinal):
            return f"table-{ordinal}-{len(headers)}-{len(rows)}"
        case Image(ordinal=ordinal):
            return f"img-{ordinal}"
    raise TypeError(f"Not a block: {type(block).__name__}")


__all__ = ["block_id"]
