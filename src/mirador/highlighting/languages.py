"""Language table for the syntax tokenizer.

Maps fence language names (and their aliases) to a Language, and each
Language to the LanguageRules that drive the tokenizer passes.

Rules are compiled lazily on first use and kept in a read-only mapping.
Two threads racing on the first build both produce equal tables and the
last assignment wins, so no lock is needed.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class Language(Enum):
    """Languages the tokenizer has rules for."""

    SWIFT = "swift"
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    JSON = "json"
    SHELL = "shell"
    ZIG = "zig"
    GO = "go"
    RUST = "rust"
    C = "c"
    CPP = "cpp"
    RUBY = "ruby"
    JAVA = "java"
    KOTLIN = "kotlin"
    SQL = "sql"
    YAML = "yaml"
    TOML = "toml"
    CSS = "css"
    HTML = "html"


ALIASES: Mapping[str, Language] = MappingProxyType(
    {
        "swift": Language.SWIFT,
        "python": Language.PYTHON,
        "py": Language.PYTHON,
        "javascript": Language.JAVASCRIPT,
        "js": Language.JAVASCRIPT,
        "typescript": Language.TYPESCRIPT,
        "ts": Language.TYPESCRIPT,
        "json": Language.JSON,
        "shell": Language.SHELL,
        "bash": Language.SHELL,
        "sh": Language.SHELL,
        "zsh": Language.SHELL,
        "zig": Language.ZIG,
        "go": Language.GO,
        "golang": Language.GO,
        "rust": Language.RUST,
        "c": Language.C,
        "cpp": Language.CPP,
        "cxx": Language.CPP,
        "ruby": Language.RUBY,
        "rb": Language.RUBY,
        "java": Language.JAVA,
        "kotlin": Language.KOTLIN,
        "sql": Language.SQL,
        "yaml": Language.YAML,
        "yml": Language.YAML,
        "toml": Language.TOML,
        "css": Language.CSS,
        "html": Language.HTML,
    }
)


def resolve_language(language: str | None) -> Language | None:
    """Resolve a fence language name or alias, case-insensitively.

    Example:
        >>> resolve_language(" PY ")
        <Language.PYTHON: 'python'>
        >>> resolve_language("brainfuck") is None
        True
    """
    if not language:
        return None
    return ALIASES.get(language.strip().lower())


def supports_language(language: str | None) -> bool:
    """Check if a fence language gets highlighted."""
    return resolve_language(language) is not None


# =============================================================================
# Keyword sets
# =============================================================================

SWIFT_KEYWORDS = frozenset(
    "func let var if else guard switch case default for while repeat do try catch "
    "throw throws rethrows return break continue fallthrough in where is as nil true "
    "false self Self super init deinit class struct enum protocol extension import "
    "typealias associatedtype static final lazy private fileprivate internal public "
    "open override mutating nonmutating convenience required optional weak unowned "
    "inout some any async await actor nonisolated isolated".split()
)

PYTHON_KEYWORDS = frozenset(
    "def class if elif else for while try except finally with as import from return "
    "yield break continue pass raise in is not and or lambda global nonlocal assert "
    "True False None async await".split()
)

JAVASCRIPT_KEYWORDS = frozenset(
    "function const let var if else for while do switch case default break continue "
    "return throw try catch finally new delete typeof instanceof void this super class "
    "extends static get set async await yield import export from as true false null "
    "undefined of in".split()
)

TYPESCRIPT_TYPE_KEYWORDS = frozenset(
    "interface type enum namespace module declare abstract implements private "
    "protected public readonly keyof infer extends never unknown any void boolean "
    "number string symbol bigint object".split()
)

SHELL_KEYWORDS = frozenset(
    "if then else elif fi for while do done case esac in function return exit export "
    "source alias unalias local readonly declare typeset set unset shift true false".split()
)

ZIG_KEYWORDS = frozenset(
    "fn const var if else for while switch break continue return defer errdefer try "
    "catch unreachable pub extern export inline comptime noalias threadlocal allowzero "
    "volatile struct enum union error opaque test and or orelse null undefined true "
    "false".split()
)

GO_KEYWORDS = frozenset(
    "func package import var const type struct interface map chan go defer return if "
    "else for range switch case default break continue fallthrough select nil true "
    "false iota make new len cap append copy delete panic recover".split()
)

RUST_KEYWORDS = frozenset(
    "fn let mut const static if else match loop while for in break continue return "
    "move ref pub crate mod use as self Self super struct enum trait impl type where "
    "dyn unsafe extern async await true false None Some Ok Err".split()
)

C_KEYWORDS = frozenset(
    "auto break case char const continue default do double else enum extern float for "
    "goto if inline int long register restrict return short signed sizeof static "
    "struct switch typedef union unsigned void volatile while class public private "
    "protected virtual template typename namespace using try catch throw new delete "
    "this nullptr true false bool constexpr noexcept override final decltype".split()
)

RUBY_KEYWORDS = frozenset(
    "def end class module if elsif else unless case when while until for do begin "
    "rescue ensure raise return break next redo retry yield self super nil true false "
    "and or not in then alias".split()
)

JAVA_KEYWORDS = frozenset(
    "abstract assert boolean break byte case catch char class const continue default "
    "do double else enum extends final finally float for goto if implements import "
    "instanceof int interface long native new null package private protected public "
    "return short static strictfp super switch synchronized this throw throws "
    "transient true false try void volatile while var record sealed permits "
    "yield".split()
)

KOTLIN_KEYWORDS = frozenset(
    "fun val var if else when for while do break continue return throw try catch "
    "finally class interface object data sealed enum annotation companion init "
    "constructor this super null true false is as in out by where typealias import "
    "package suspend inline crossinline noinline reified operator infix tailrec "
    "external internal private protected public open final abstract override "
    "lateinit".split()
)

SQL_KEYWORDS = frozenset(
    "SELECT FROM WHERE AND OR NOT IN LIKE BETWEEN IS NULL AS JOIN LEFT RIGHT INNER "
    "OUTER ON GROUP BY HAVING ORDER ASC DESC LIMIT OFFSET INSERT INTO VALUES UPDATE "
    "SET DELETE CREATE TABLE INDEX VIEW DROP ALTER ADD COLUMN PRIMARY KEY FOREIGN "
    "REFERENCES UNIQUE CHECK DEFAULT CONSTRAINT CASCADE DISTINCT UNION ALL EXISTS "
    "CASE WHEN THEN ELSE END COUNT SUM AVG MIN MAX TRUE FALSE".split()
)

_KEYWORDS: Mapping[Language, frozenset[str]] = MappingProxyType(
    {
        Language.SWIFT: SWIFT_KEYWORDS,
        Language.PYTHON: PYTHON_KEYWORDS,
        Language.JAVASCRIPT: JAVASCRIPT_KEYWORDS,
        Language.TYPESCRIPT: JAVASCRIPT_KEYWORDS,
        Language.SHELL: SHELL_KEYWORDS,
        Language.ZIG: ZIG_KEYWORDS,
        Language.GO: GO_KEYWORDS,
        Language.RUST: RUST_KEYWORDS,
        Language.C: C_KEYWORDS,
        Language.CPP: C_KEYWORDS,
        Language.RUBY: RUBY_KEYWORDS,
        Language.JAVA: JAVA_KEYWORDS,
        Language.KOTLIN: KOTLIN_KEYWORDS,
        Language.SQL: SQL_KEYWORDS,
    }
)

_HASH_COMMENTS = frozenset(
    {Language.PYTHON, Language.SHELL, Language.RUBY, Language.YAML, Language.TOML}
)
_DECORATORS = frozenset({Language.SWIFT, Language.PYTHON, Language.ZIG, Language.RUBY})
_KEY_LANGUAGES = frozenset({Language.JSON, Language.YAML})


# =============================================================================
# Patterns
# =============================================================================

LINE_COMMENT = r"//[^\n]*"
HASH_COMMENT = r"#[^\n]*"
DASH_COMMENT = r"--[^\n]*"
BLOCK_COMMENT = r"/\*[\s\S]*?\*/"
MARKUP_COMMENT = r"<!--[\s\S]*?-->"

TRIPLE_STRING = r'"""[\s\S]*?"""' + r"|'''[\s\S]*?'''"
DOUBLE_STRING = r'"(?:[^"\\\n]|\\.)*"'
SINGLE_STRING = r"'(?:[^'\\\n]|\\.)*'"
BACKTICK_STRING = r"`(?:[^`\\]|\\.)*`"

NUMBER = re.compile(r"\b(?:0x[0-9A-Fa-f]+|0b[01]+|0o[0-7]+|\d+\.?\d*(?:[eE][+-]?\d+)?)\b")
DECORATOR = re.compile(r"(?<![\w@])@\w+")
TYPE_NAME = re.compile(r"\b[A-Z][a-zA-Z0-9]*\b")
CALL_SITE = re.compile(r"\b([a-zA-Z_][a-zA-Z0-9_]*)\s*\(")
JSON_KEY = re.compile(r'"([^"\n]+)"\s*:')
YAML_KEY = re.compile(r"^[ \t]*([a-zA-Z_][a-zA-Z0-9_-]*):", re.MULTILINE)


def _comment_alternatives(language: Language) -> list[str]:
    if language in _HASH_COMMENTS:
        return [HASH_COMMENT]
    if language is Language.SQL:
        return [HASH_COMMENT, LINE_COMMENT, DASH_COMMENT]
    if language is Language.CSS:
        return [BLOCK_COMMENT]
    if language is Language.HTML:
        return [BLOCK_COMMENT, MARKUP_COMMENT]
    return [LINE_COMMENT, BLOCK_COMMENT]


def _word_pattern(words: frozenset[str], *, ignore_case: bool = False) -> re.Pattern[str]:
    # Longest first so a word never loses to one of its prefixes
    alternation = "|".join(re.escape(w) for w in sorted(words, key=lambda w: (-len(w), w)))
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE if ignore_case else 0)


@dataclass(frozen=True, slots=True)
class LanguageRules:
    """Compiled tokenizer rules for one language.

    Attributes:
        language: The language these rules are for
        comment_scanner: Alternation of ``string`` and ``comment`` groups;
            only ``comment`` matches are claimed
        strings: String patterns, tried in order
        keys: Mapping-key pattern (JSON, YAML), group 1 is the key;
            runs in place of the keyword pass
        keywords: Keyword pattern (emphasized)
        type_keywords: Second keyword set with the TYPE role (TypeScript)
        decorators: ``@name`` words are keywords
        types: Capitalized identifiers get the TYPE role
        calls: ``name(`` call sites get the FUNCTION role

    """

    language: Language
    comment_scanner: re.Pattern[str]
    strings: tuple[re.Pattern[str], ...]
    keys: re.Pattern[str] | None = None
    keywords: re.Pattern[str] | None = None
    type_keywords: re.Pattern[str] | None = None
    decorators: bool = False
    types: bool = True
    calls: bool = True


def build_rules(language: Language) -> LanguageRules:
    """Compile the rules for one language."""
    string_sources = [DOUBLE_STRING, SINGLE_STRING, BACKTICK_STRING]
    if language is Language.PYTHON:
        string_sources.insert(0, TRIPLE_STRING)

    scanner = re.compile(
        "(?P<string>{})|(?P<comment>{})".format(
            "|".join(string_sources),
            "|".join(_comment_alternatives(language)),
        )
    )
    strings = tuple(re.compile(source) for source in string_sources)

    keys = None
    if language is Language.JSON:
        keys = JSON_KEY
    elif language is Language.YAML:
        keys = YAML_KEY

    words = _KEYWORDS.get(language)
    keywords = None
    if words is not None:
        keywords = _word_pattern(words, ignore_case=language is Language.SQL)

    type_keywords = None
    if language is Language.TYPESCRIPT:
        type_keywords = _word_pattern(TYPESCRIPT_TYPE_KEYWORDS)

    return LanguageRules(
        language=language,
        comment_scanner=scanner,
        strings=strings,
        keys=keys,
        keywords=keywords,
        type_keywords=type_keywords,
        decorators=language in _DECORATORS,
        types=language not in _KEY_LANGUAGES,
        calls=language not in _KEY_LANGUAGES and language is not Language.TOML,
    )


# Built on first use, never mutated afterwards
_rules: Mapping[Language, LanguageRules] | None = None


def get_rules(language: Language) -> LanguageRules:
    """Get the compiled rules for a language, building the table once."""
    global _rules

    if _rules is None:
        _rules = MappingProxyType({lang: build_rules(lang) for lang in Language})
    return _rules[language]


__all__ = [
    "ALIASES",
    "Language",
    "LanguageRules",
    "build_rules",
    "get_rules",
    "resolve_language",
    "supports_language",
]
