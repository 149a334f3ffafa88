"""Text processing utilities for Mirador.

Example:
    >>> from mirador.utils.text import slugify
    >>> slugify("Hello World!")
    'hello-world'
"""

from __future__ import annotations

import html as html_module
import re

_NON_WORD = re.compile(r"[^\w\s-]")
_SEPARATOR_RUN = re.compile(r"[-\s]+")


def slugify(text: str, separator: str = "-") -> str:
    """Convert heading text to an anchor slug with Unicode support.

    Args:
        text: Text to slugify (HTML entities are decoded first)
        separator: Character to use between words (default: '-')

    Returns:
        Lowercase slug of Unicode word characters and separators

    Examples:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("Test &amp; Code")
        'test-code'
        >>> slugify("Café")
        'café'
    """
    if not text:
        return ""

    text = html_module.unescape(text).lower().strip()
    text = _NON_WORD.sub("", text)
    text = _SEPARATOR_RUN.sub(separator, text)
    return text.strip(separator)
