"""Pre-compiled patterns shared by the block and inline parsers.

All patterns are compiled once at import and never mutated, so they are
safe to share across threads.

Usage:
    from mirador.parsing.patterns import ORDERED_ITEM

    if ORDERED_ITEM.match(line):
        ...
"""

import re

# Inline spans, in tie-break priority order
BOLD_ITALIC = re.compile(r"\*\*\*(.+?)\*\*\*")
BOLD = re.compile(r"\*\*(.+?)\*\*")
# A lone * only: never fires on either star of **
ITALIC = re.compile(r"(?<!\*)\*(?!\*)(.+?)(?<!\*)\*(?!\*)")
CODE_SPAN = re.compile(r"`([^`\n]+)`")
LINK = re.compile(r"\[([^\]\n]+)\]\(([^)\n]+)\)")
STRIKETHROUGH = re.compile(r"~~(.+?)~~")

# Block starts (matched against the trimmed line)
ORDERED_ITEM = re.compile(r"\d+\.\s")
TASK_ITEM = re.compile(r"[-*+]\s+\[([ xX])\]\s")
BULLET_PREFIXES = ("- ", "* ", "+ ")
FENCE = "```"

# Table separator cells may only hold these
SEPARATOR_CHARS: frozenset[str] = frozenset("|:- \t")
