"""HTML suppression for Mirador.

Markdown in the wild often carries raw HTML: badges, centered ``<p>`` wrappers,
comments, ``<img>`` tags. Mirador does not interpret HTML. It strips tags from
paragraph text, drops lines that are nothing but markup, and lifts ``<img>``
tags into Image blocks.

It can also tell when a whole document is HTML rather than Markdown, so the
host can hand it to an HTML view instead of parsing it.

Example:
    >>> from mirador.sanitize import strip_html_tags
    >>> strip_html_tags('<p align="center">Hello <b>World</b></p>')
    'Hello World'
"""

import re

HTML_IMG = re.compile(r"""<img\s+[^>]*src\s*=\s*["']([^"']+)["'][^>]*>""", re.IGNORECASE)
HTML_IMG_ALT = re.compile(r"""alt\s*=\s*["']([^"']*)["']""", re.IGNORECASE)
HTML_TAG = re.compile(r"<[^>]+>")
HTML_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)
IMAGE_LINE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
_MULTI_SPACE = re.compile(r"  +")

_HTML_DOCUMENT_PREFIXES = ("<!doctype html", "<html", "<head", "<body")
_META_MARKERS = ("charset", "content-security-policy")


def strip_html_tags(text: str) -> str:
    """Remove HTML comments and tags, keeping only the text content.

    Runs of spaces left behind are collapsed and the result is trimmed.
    """
    result = HTML_COMMENT.sub("", text)
    result = HTML_TAG.sub("", result)
    return _MULTI_SPACE.sub(" ", result).strip(" \t")


def contains_html_img(line: str) -> bool:
    """Check if a line holds an HTML ``<img>`` tag anywhere."""
    return HTML_IMG.search(line) is not None


def is_html_only_line(line: str) -> bool:
    """Check if a line is pure markup with no visible text.

    Matches comment lines and lines like ``<p align="center">`` or ``</div>``.
    Lines holding an ``<img>`` tag are never HTML-only; they become images.
    """
    trimmed = line.strip(" \t")
    if trimmed.startswith("<!--"):
        return True
    if trimmed.startswith("<") and trimmed.endswith(">") and not contains_html_img(trimmed):
        return not strip_html_tags(trimmed)
    return False


def parse_image_line(line: str) -> tuple[str, str] | None:
    """Parse a standalone image line.

    Accepts ``![alt](url)`` spanning the whole trimmed line, or any line
    holding an ``<img src="...">`` tag (alt comes from its ``alt`` attribute).

    Returns:
        (alt, url) if the line is an image, None otherwise.
    """
    trimmed = line.strip(" \t")

    match = IMAGE_LINE.fullmatch(trimmed)
    if match:
        return match.group(1), match.group(2)

    img = HTML_IMG.search(trimmed)
    if img:
        alt = HTML_IMG_ALT.search(trimmed)
        return (alt.group(1) if alt else ""), img.group(1)

    return None


def looks_like_html_document(text: str) -> bool:
    """Detect if content is a full HTML document rather than Markdown.

    Only the first non-blank line is inspected.

    Example:
        >>> looks_like_html_document("<!DOCTYPE html>\\n<html></html>")
        True
        >>> looks_like_html_document("# Title")
        False
    """
    for line in text.split("\n"):
        lower = line.strip().lower()
        if not lower:
            continue
        if lower.startswith("```"):
            return False
        if lower.startswith(_HTML_DOCUMENT_PREFIXES):
            return True
        return lower.startswith("<meta") and any(m in lower for m in _META_MARKERS)
    return False


__all__ = [
    "contains_html_img",
    "is_html_only_line",
    "looks_like_html_document",
    "parse_image_line",
    "strip_html_tags",
]
