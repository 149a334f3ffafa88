"""Find-in-page matching.

Matching is case-insensitive and works on plain text, so the host runs it
over ``plain_text(block)`` and highlights the returned ranges.

Example:
    >>> from mirador.search import find_matches, split_matches
    >>> find_matches("Hello hello", "HELLO")
    ((0, 5), (6, 11))
    >>> split_matches("a cat", "cat")
    (('a ', False), ('cat', True))
"""

import re


def find_matches(text: str, query: str) -> tuple[tuple[int, int], ...]:
    """Find every occurrence of ``query`` in ``text``, ignoring case.

    Matches are non-overlapping and ordered left to right. An empty query
    matches nothing.

    Returns:
        ``(start, end)`` offsets into ``text``.
    """
    if not query or not text:
        return ()
    pattern = re.compile(re.escape(query), re.IGNORECASE)
    return tuple(match.span() for match in pattern.finditer(text))


def split_matches(text: str, query: str) -> tuple[tuple[str, bool], ...]:
    """Split ``text`` into ``(fragment, is_match)`` pairs.

    The fragments concatenate back to ``text``. Empty fragments are
    omitted.
    """
    parts: list[tuple[str, bool]] = []
    pos = 0
    for start, end in find_matches(text, query):
        if start > pos:
            parts.append((text[pos:start], False))
        parts.append((text[start:end], True))
        pos = end
    if pos < len(text):
        parts.append((text[pos:], False))
    return tuple(parts)


__all__ = ["find_matches", "split_matches"]
