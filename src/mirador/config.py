"""Feature flags for the block and inline parsers.

The active ParseConfig lives in a ContextVar, so each thread (and each
asyncio task) sees its own value and the parsers never take it as an
argument. A host wires its preview settings in once:

    md = Markdown(config=ParseConfig.from_dict(settings))
    blocks = md.parse(source)

or scopes a change around lower-level calls:

    with parse_config_context(ParseConfig(strip_html=False)):
        blocks = Parser(source).parse()

With the defaults every feature is on.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Every feature is enabled by default; the default config gives the full
    preview behavior.

    Attributes:
        tables_enabled: Recognize pipe tables (otherwise rows are paragraphs)
        task_lists_enabled: Recognize ``- [ ]`` items (otherwise plain bullets)
        strikethrough_enabled: Resolve ``~~text~~`` spans
        mermaid_enabled: Emit MermaidDiagram for ``mermaid`` fences
        strip_html: Drop HTML-only lines and strip tags from paragraphs
        text_transformer: Optional callback applied to block text before
            inline resolution

    """

    tables_enabled: bool = True
    task_lists_enabled: bool = True
    strikethrough_enabled: bool = True
    mermaid_enabled: bool = True
    strip_html: bool = True
    text_transformer: Callable[[str], str] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Useful when settings come from a host's preferences file. Unknown
        keys are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "tables_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.tables_enabled
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Return the config active in the current context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Replace the config for the current context only."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Go back to the all-features default."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Activate config for the duration of a with block.

    The config that was active before is restored on exit, exceptions
    included, so contexts nest.

    Example:
        >>> with parse_config_context(ParseConfig(tables_enabled=False)):
        ...     blocks = Parser("| a | b |\\n|---|---|").parse()
        >>> # Previous config restored here

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
