"""Preview theme values.

The parser and tokenizer only tag content with roles. A Theme turns those
roles into colors and sizes for the host's renderer. Colors are hex
strings, ``#RRGGBB`` or ``#AARRGGBB``, so themes load straight from a
settings file.

Example:
    >>> from mirador.theme import Theme, parse_hex_color
    >>> from mirador.highlighting import SyntaxRole
    >>> Theme.dark().color_for(SyntaxRole.KEYWORD)
    '#FF79C6'
    >>> parse_hex_color("#0A84FF")
    (10, 132, 255, 255)
"""

from __future__ import annotations

import string
from dataclasses import dataclass, replace
from typing import Any

from mirador.highlighting.claims import SyntaxRole

type RGBA = tuple[int, int, int, int]

_HEADING_SIZES = (28.0, 22.0, 18.0, 16.0, 14.0)
_SMALLEST_HEADING_SIZE = 13.0
_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True, slots=True)
class Theme:
    """Colors and font metrics for rendering a preview.

    Build one with ``Theme.dark()`` or ``Theme.light()`` and override
    fields with ``dataclasses.replace`` or ``Theme.from_dict``.

    """

    background: str = "#1C1C1E"
    surface: str = "#2C2C2E"
    foreground: str = "#E5E5E7"
    secondary: str = "#A1A1A6"
    muted: str = "#636366"
    accent: str = "#0A84FF"
    success: str = "#30D158"
    code_background: str = "#1E1E20"
    border: str = "#38383A"
    search_highlight: str = "#66FFD60A"

    syntax_keyword: str = "#FF79C6"
    syntax_string: str = "#F1FA8C"
    syntax_comment: str = "#6272A4"
    syntax_number: str = "#BD93F9"
    syntax_type: str = "#8BE9FD"
    syntax_function: str = "#50FA7B"

    font_size: float = 15.0
    code_font_size: float = 13.0
    line_height: float = 1.4

    @classmethod
    def dark(cls) -> Theme:
        return cls()

    @classmethod
    def light(cls) -> Theme:
        return cls(
            background="#FFFFFF",
            surface="#F5F5F7",
            foreground="#1D1D1F",
            secondary="#6E6E73",
            muted="#8E8E93",
            accent="#007AFF",
            success="#34C759",
            code_background="#F6F8FA",
            border="#D1D1D6",
            search_highlight="#80FFD60A",
            syntax_keyword="#D73A49",
            syntax_string="#22863A",
            syntax_comment="#6A737D",
            syntax_number="#005CC5",
            syntax_type="#6F42C1",
            syntax_function="#6F42C1",
        )

    @classmethod
    def from_dict(cls, theme_dict: dict[str, Any], *, base: Theme | None = None) -> Theme:
        """Create a Theme from a dictionary, starting from ``base``.

        Unknown keys are silently ignored. ``base`` defaults to the dark
        theme.

        Example:
            >>> Theme.from_dict({"accent": "#FF0000", "bogus": 1}).accent
            '#FF0000'
        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in theme_dict.items() if k in valid_fields}
        return replace(base or cls.dark(), **filtered)

    def color_for(self, role: SyntaxRole) -> str:
        """Map a syntax role to its color; PLAIN uses the foreground."""
        match role:
            case SyntaxRole.KEYWORD:
                return self.syntax_keyword
            case SyntaxRole.STRING:
                return self.syntax_string
            case SyntaxRole.COMMENT:
                return self.syntax_comment
            case SyntaxRole.NUMBER:
                return self.syntax_number
            case SyntaxRole.TYPE:
                return self.syntax_type
            case SyntaxRole.FUNCTION:
                return self.syntax_function
            case _:
                return self.foreground

    def heading_size(self, level: int) -> float:
        """Font size for a heading level (levels past 5 share the smallest)."""
        if 1 <= level <= len(_HEADING_SIZES):
            return _HEADING_SIZES[level - 1]
        return _SMALLEST_HEADING_SIZE


def parse_hex_color(value: str) -> RGBA:
    """Parse a hex color into ``(r, g, b, a)`` components, 0-255 each.

    Accepts 3 (``RGB``), 6 (``RRGGBB``) or 8 (``AARRGGBB``) hex digits,
    with or without a leading ``#``. Anything else is opaque black.

    Example:
        >>> parse_hex_color("#fff")
        (255, 255, 255, 255)
        >>> parse_hex_color("80FF0000")
        (255, 0, 0, 128)
        >>> parse_hex_color("nope")
        (0, 0, 0, 255)
    """
    digits = value.strip().lstrip("#")
    if not digits or not all(c in _HEX_DIGITS for c in digits):
        return (0, 0, 0, 255)

    n = int(digits, 16)
    match len(digits):
        case 3:
            return ((n >> 8) * 17, (n >> 4 & 0xF) * 17, (n & 0xF) * 17, 255)
        case 6:
            return (n >> 16, n >> 8 & 0xFF, n & 0xFF, 255)
        case 8:
            return (n >> 16 & 0xFF, n >> 8 & 0xFF, n & 0xFF, n >> 24)
        case _:
            return (0, 0, 0, 255)


__all__ = ["RGBA", "Theme", "parse_hex_color"]
