"""Content-addressed parse cache for Mirador.

A live preview re-parses whenever the watched file changes, yet most change
events leave the text untouched (a save with no edits, an undo back to an
earlier state, the same file open in two panes). Keying parse results by
(content hash, config hash) turns those re-parses into dictionary lookups.

Thread Safety:
    DictParseCache is not thread-safe. Hosts that parse on several threads
    should guard get/put with a lock or supply their own ParseCache.

Example:
    >>> from mirador import Markdown, DictParseCache
    >>> cache = DictParseCache(max_entries=64)
    >>> md = Markdown()
    >>> first = md.parse("# Hello", cache=cache)
    >>> md.parse("# Hello", cache=cache) is first
    True
"""

from __future__ import annotations

from collections import OrderedDict
from typing import TYPE_CHECKING, Protocol

from mirador.utils.hashing import hash_parts, hash_str

if TYPE_CHECKING:
    from mirador.config import ParseConfig
    from mirador.nodes import Block

type CacheKey = tuple[str, str]


class ParseCache(Protocol):
    """Anything that stores block tuples under (content_hash, config_hash)."""

    def get(self, content_hash: str, config_hash: str) -> tuple[Block, ...] | None: ...

    def put(self, content_hash: str, config_hash: str, blocks: tuple[Block, ...]) -> None: ...


class DictParseCache:
    """In-memory parse cache with optional least-recently-used eviction.

    Args:
        max_entries: Upper bound on stored documents. None keeps everything,
            which suits one-shot batch parsing; a long-running preview
            should pass a bound.
    """

    __slots__ = ("_data", "_max_entries")

    def __init__(self, *, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self._data: OrderedDict[CacheKey, tuple[Block, ...]] = OrderedDict()
        self._max_entries = max_entries

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    @property
    def max_entries(self) -> int | None:
        return self._max_entries

    def get(self, content_hash: str, config_hash: str) -> tuple[Block, ...] | None:
        key = (content_hash, config_hash)
        blocks = self._data.get(key)
        if blocks is not None:
            self._data.move_to_end(key)
        return blocks

    def put(self, content_hash: str, config_hash: str, blocks: tuple[Block, ...]) -> None:
        key = (content_hash, config_hash)
        self._data[key] = blocks
        self._data.move_to_end(key)
        if self._max_entries is not None:
            while len(self._data) > self._max_entries:
                self._data.popitem(last=False)

    def clear(self) -> None:
        self._data.clear()


def hash_content(source: str) -> str:
    """SHA-256 hex digest of the Markdown source."""
    return hash_str(source)


def hash_config(config: ParseConfig) -> str:
    """Digest of the feature flags that change parse output.

    A text_transformer is an arbitrary callable whose effect cannot be
    hashed, so any config carrying one gets "" and is never cached.
    """
    if config.text_transformer is not None:
        return ""
    return hash_parts(
        str(config.tables_enabled),
        str(config.task_lists_enabled),
        str(config.strikethrough_enabled),
        str(config.mermaid_enabled),
        str(config.strip_html),
    )


__all__ = [
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
]
