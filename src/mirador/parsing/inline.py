"""Inline span resolution for Mirador.

Resolves bold-italic, bold, italic, inline code, links and strikethrough
into a flat sequence of typed segments.

Algorithm:
A cursor walks the text. At each step every span pattern is searched over
the unconsumed suffix and the earliest match wins. When two patterns start
at the same offset, the one earlier in _SPAN_PATTERNS wins, so ``***`` is
tried before ``**`` and ``*``. Unmatched text between spans becomes Text,
and adjacent Text segments are merged at the end.

Searching the suffix (not the whole string from an offset) means lookbehind
never sees characters that an earlier span already consumed.

Thread Safety:
All patterns are module-level and read-only. Every call allocates its own
segment list.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum, auto

from mirador.config import get_parse_config
from mirador.nodes import (
    EMPTY_INLINE,
    Bold,
    BoldItalic,
    Code,
    InlineContent,
    InlineSegment,
    Italic,
    Link,
    Strikethrough,
    Text,
)
from mirador.parsing.patterns import (
    BOLD,
    BOLD_ITALIC,
    CODE_SPAN,
    ITALIC,
    LINK,
    STRIKETHROUGH,
)


class SpanKind(Enum):
    """Inline span kinds, declared in tie-break priority order."""

    BOLD_ITALIC = auto()
    BOLD = auto()
    ITALIC = auto()
    CODE = auto()
    LINK = auto()
    STRIKETHROUGH = auto()


_SPAN_PATTERNS: tuple[tuple[SpanKind, re.Pattern[str]], ...] = (
    (SpanKind.BOLD_ITALIC, BOLD_ITALIC),
    (SpanKind.BOLD, BOLD),
    (SpanKind.ITALIC, ITALIC),
    (SpanKind.CODE, CODE_SPAN),
    (SpanKind.LINK, LINK),
    (SpanKind.STRIKETHROUGH, STRIKETHROUGH),
)

_WITHOUT_STRIKETHROUGH = tuple(p for p in _SPAN_PATTERNS if p[0] is not SpanKind.STRIKETHROUGH)

_SEGMENT_FACTORIES: dict[SpanKind, Callable[[str], InlineSegment]] = {
    SpanKind.BOLD_ITALIC: BoldItalic,
    SpanKind.BOLD: Bold,
    SpanKind.ITALIC: Italic,
    SpanKind.CODE: Code,
    SpanKind.STRIKETHROUGH: Strikethrough,
}


def _earliest_span(
    remaining: str,
    patterns: tuple[tuple[SpanKind, re.Pattern[str]], ...],
) -> tuple[SpanKind, re.Match[str]] | None:
    """Find the match with the smallest start offset.

    Ties keep the first pattern found, which is the higher-priority one.
    """
    best: tuple[SpanKind, re.Match[str]] | None = None
    for kind, pattern in patterns:
        match = pattern.search(remaining)
        if match is None:
            continue
        if best is None or match.start() < best[1].start():
            best = (kind, match)
            if match.start() == 0:
                break
    return best


def _make_segment(kind: SpanKind, match: re.Match[str]) -> InlineSegment:
    if kind is SpanKind.LINK:
        return Link(text=match.group(1), url=match.group(2))
    return _SEGMENT_FACTORIES[kind](match.group(1))


def merge_text_segments(segments: list[InlineSegment]) -> tuple[InlineSegment, ...]:
    """Merge adjacent Text segments in a single pass."""
    merged: list[InlineSegment] = []
    for segment in segments:
        if merged and isinstance(segment, Text) and isinstance(merged[-1], Text):
            merged[-1] = Text(merged[-1].text + segment.text)
        else:
            merged.append(segment)
    return tuple(merged)


def parse_inline(text: str) -> InlineContent:
    """Resolve inline formatting in text.

    Total: text with no recognizable spans comes back as a single Text
    segment, and empty text as empty InlineContent.

    Example:
        >>> parse_inline("Some **bold** text").segments
        (Text(text='Some '), Bold(text='bold'), Text(text=' text'))
    """
    if not text:
        return EMPTY_INLINE

    config = get_parse_config()
    patterns = _SPAN_PATTERNS if config.strikethrough_enabled else _WITHOUT_STRIKETHROUGH

    segments: list[InlineSegment] = []
    pos = 0
    length = len(text)

    while pos < length:
        remaining = text[pos:]
        found = _earliest_span(remaining, patterns)
        if found is None:
            segments.append(Text(remaining))
            break

        kind, match = found
        if match.start() > 0:
            segments.append(Text(remaining[: match.start()]))
        segments.append(_make_segment(kind, match))
        pos += match.end()

    return InlineContent(merge_text_segments(segments))


class InlineParsingMixin:
    """Mixin giving a block parser inline resolution.

    Required Host Attributes: None

    Applies the configured text_transformer (if any) before resolving.

    """

    def _parse_inline(self, text: str) -> InlineContent:
        transformer = get_parse_config().text_transformer
        if transformer is not None:
            text = transformer(text)
        return parse_inline(text)
