"""Syntax tokenizer for fenced code blocks.

Splits code into runs tagged with a SyntaxRole. The host maps roles to
colors (see mirador.theme); nothing here knows about colors or fonts.

This is a regex tokenizer, not a lexer. Passes run in a fixed order and a
match is skipped when it overlaps a range an earlier pass claimed:

1. Comments (strings are scanned alongside so ``"#"`` is not a comment)
2. Strings
3. Numbers
4. Keywords, then TypeScript type keywords, then ``@decorators``;
   JSON and YAML run a mapping-key pass here instead
5. Capitalized type names
6. Call sites

Usage:
    >>> from mirador.highlighting import highlight
    >>> [run.role.name for run in highlight("x = 1  # one", "python")]
    ['PLAIN', 'NUMBER', 'PLAIN', 'COMMENT']

Thread Safety:
    highlight() is a pure function. Rule tables are immutable once built.
"""

from __future__ import annotations

import re

from mirador.highlighting.claims import ClaimedRanges, FormattedRun, SyntaxRole
from mirador.highlighting.languages import (
    CALL_SITE,
    DECORATOR,
    NUMBER,
    TYPE_NAME,
    Language,
    get_rules,
    resolve_language,
    supports_language,
)
from mirador.utils.logger import get_logger

logger = get_logger(__name__)


def _claim_matches(
    code: str,
    pattern: re.Pattern[str],
    claims: ClaimedRanges,
    role: SyntaxRole,
    *,
    emphasized: bool = False,
    group: int = 0,
) -> None:
    """Claim every match of ``pattern`` that does not overlap a claim.

    After a rejected match the search resumes one character past its
    start, so a stray quote inside a comment cannot hide a real string
    that begins later on.
    """
    pos = 0
    length = len(code)
    while pos < length:
        match = pattern.search(code, pos)
        if match is None:
            return
        start, end = match.span(group)
        if claims.claim(start, end, role, emphasized=emphasized):
            pos = max(match.end(), match.start() + 1)
        else:
            pos = match.start() + 1


def _claim_comments(code: str, scanner: re.Pattern[str], claims: ClaimedRanges) -> None:
    # Strings are matched but not claimed; they only shield their contents
    for match in scanner.finditer(code):
        if match.lastgroup == "comment":
            claims.claim(match.start(), match.end(), SyntaxRole.COMMENT)


def highlight(code: str, language: str | None = None) -> tuple[FormattedRun, ...]:
    """Tokenize code into role-tagged runs.

    Args:
        code: Source code of a fenced block
        language: Fence language name or alias (case-insensitive)

    Returns:
        Runs covering ``[0, len(code))`` in order, with no gaps or
        overlaps. Empty code gives ``()``; an unknown or missing language
        gives one PLAIN run over the whole code.
    """
    if not code:
        return ()

    resolved = resolve_language(language)
    if resolved is None:
        if language:
            logger.debug("No highlighting rules for language %r", language)
        return (FormattedRun(0, len(code), SyntaxRole.PLAIN),)

    rules = get_rules(resolved)
    claims = ClaimedRanges()

    _claim_comments(code, rules.comment_scanner, claims)

    for pattern in rules.strings:
        _claim_matches(code, pattern, claims, SyntaxRole.STRING)

    _claim_matches(code, NUMBER, claims, SyntaxRole.NUMBER)

    if rules.keys is not None:
        _claim_matches(code, rules.keys, claims, SyntaxRole.TYPE, group=1)
    if rules.keywords is not None:
        _claim_matches(code, rules.keywords, claims, SyntaxRole.KEYWORD, emphasized=True)
    if rules.type_keywords is not None:
        _claim_matches(code, rules.type_keywords, claims, SyntaxRole.TYPE, emphasized=True)
    if rules.decorators:
        _claim_matches(code, DECORATOR, claims, SyntaxRole.KEYWORD, emphasized=True)

    if rules.types:
        _claim_matches(code, TYPE_NAME, claims, SyntaxRole.TYPE)
    if rules.calls:
        _claim_matches(code, CALL_SITE, claims, SyntaxRole.FUNCTION, group=1)

    return claims.partition(len(code))


__all__ = [
    "ClaimedRanges",
    "FormattedRun",
    "Language",
    "SyntaxRole",
    "highlight",
    "resolve_language",
    "supports_language",
]
