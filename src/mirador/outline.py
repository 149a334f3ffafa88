"""Table-of-contents projection.

The outline is read straight off the parsed blocks; there is no second
pass over the source. Each entry carries the block index so the host can
scroll to the heading.

Example:
    >>> from mirador import parse
    >>> from mirador.outline import outline
    >>> [e.slug for e in outline(parse("# Intro\\n\\n## Setup\\n\\n## Setup"))]
    ['intro', 'setup', 'setup-1']
"""

from collections.abc import Sequence
from dataclasses import dataclass

from mirador.nodes import Block, Heading
from mirador.utils.text import slugify


@dataclass(frozen=True, slots=True)
class OutlineEntry:
    """One heading in the outline.

    Attributes:
        index: Position of the heading in the block sequence
        level: Heading level, 1-6
        text: Plain heading text
        slug: Anchor slug, unique within one outline

    """

    index: int
    level: int
    text: str
    slug: str


def outline(blocks: Sequence[Block]) -> tuple[OutlineEntry, ...]:
    """Collect every heading, in document order.

    Repeated slugs get ``-1``, ``-2`` suffixes. A heading whose text has
    no word characters gets the slug ``section``.
    """
    entries: list[OutlineEntry] = []
    seen: dict[str, int] = {}
    used: set[str] = set()

    for index, block in enumerate(blocks):
        if not isinstance(block, Heading):
            continue
        text = block.content.plain_text
        base = slugify(text) or "section"
        count = seen.get(base, 0)
        slug = base if count == 0 else f"{base}-{count}"
        while slug in used:
            count += 1
            slug = f"{base}-{count}"
        seen[base] = count + 1
        used.add(slug)
        entries.append(OutlineEntry(index=index, level=block.level, text=text, slug=slug))

    return tuple(entries)


__all__ = ["OutlineEntry", "outline"]
