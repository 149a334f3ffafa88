"""Tests for content-addressed parse cache."""

import pytest

from mirador import (
    DictParseCache,
    Markdown,
    ParseConfig,
    hash_config,
    hash_content,
    parse,
)
from mirador.nodes import Heading, Paragraph, Table


class TestDictParseCache:
    """Tests for DictParseCache."""

    def test_get_returns_none_when_empty(self) -> None:
        """Cache returns None when no entry exists."""
        cache = DictParseCache()
        assert cache.get("abc123", "config1") is None

    def test_put_then_get_returns_blocks(self) -> None:
        """Put then get returns the stored blocks."""
        cache = DictParseCache()
        blocks = parse("# Hi")
        cache.put("abc123", "config1", blocks)
        assert cache.get("abc123", "config1") is blocks
        assert len(cache) == 1

    def test_different_keys_return_none(self) -> None:
        """Different content_hash or config_hash returns None."""
        cache = DictParseCache()
        cache.put("abc123", "config1", ())
        assert cache.get("xyz789", "config1") is None
        assert cache.get("abc123", "config2") is None

    def test_clear(self) -> None:
        cache = DictParseCache()
        cache.put("a", "b", ())
        cache.clear()
        assert len(cache) == 0


class TestBoundedCache:
    """Tests for least-recently-used eviction."""

    def test_unbounded_by_default(self) -> None:
        cache = DictParseCache()
        for i in range(100):
            cache.put(str(i), "c", ())
        assert len(cache) == 100
        assert cache.max_entries is None

    def test_oldest_entry_evicted(self) -> None:
        cache = DictParseCache(max_entries=2)
        cache.put("a", "c", ())
        cache.put("b", "c", ())
        cache.put("d", "c", ())
        assert len(cache) == 2
        assert ("a", "c") not in cache
        assert ("b", "c") in cache

    def test_get_refreshes_entry(self) -> None:
        cache = DictParseCache(max_entries=2)
        cache.put("a", "c", ())
        cache.put("b", "c", ())
        assert cache.get("a", "c") == ()
        cache.put("d", "c", ())
        assert ("a", "c") in cache
        assert ("b", "c") not in cache

    def test_invalid_bound(self) -> None:
        with pytest.raises(ValueError, match="max_entries"):
            DictParseCache(max_entries=0)


class TestHashHelpers:
    """Tests for hash_content and hash_config."""

    def test_hash_content_deterministic(self) -> None:
        """Same content produces same hash."""
        assert hash_content("# Hello") == hash_content("# Hello")

    def test_hash_content_different_for_different_input(self) -> None:
        """Different content produces different hash."""
        assert hash_content("# Hello") != hash_content("# World")

    def test_hash_config_different_for_different_flags(self) -> None:
        """Each feature flag changes the hash."""
        base = hash_config(ParseConfig())
        for field in ("tables_enabled", "task_lists_enabled", "strikethrough_enabled",
                      "mermaid_enabled", "strip_html"):
            assert hash_config(ParseConfig(**{field: False})) != base

    def test_hash_config_empty_when_text_transformer_set(self) -> None:
        """hash_config returns empty string when text_transformer is set."""
        config = ParseConfig(text_transformer=lambda s: s.upper())
        assert hash_config(config) == ""


class TestParseWithCache:
    """Tests for parse() with cache."""

    def test_first_call_parses_second_hits_cache(self) -> None:
        """Second parse of same source hits cache."""
        cache = DictParseCache()
        blocks1 = parse("# Hello", cache=cache)
        blocks2 = parse("# Hello", cache=cache)
        assert blocks1 is blocks2
        assert isinstance(blocks1[0], Heading)

    def test_different_content_parses_both(self) -> None:
        """Different content produces different results."""
        cache = DictParseCache()
        blocks1 = parse("# Hello", cache=cache)
        blocks2 = parse("# World", cache=cache)
        assert blocks1 is not blocks2
        assert len(cache) == 2

    def test_transformer_bypasses_cache(self) -> None:
        cache = DictParseCache()
        md = Markdown(config=ParseConfig(text_transformer=str.lower))
        md.parse("# Hello", cache=cache)
        assert len(cache) == 0


class TestMarkdownParseWithCache:
    """Tests for Markdown.parse() with cache."""

    def test_cache_hit_on_second_parse(self) -> None:
        """Second parse of same source hits cache."""
        md = Markdown()
        cache = DictParseCache()
        assert md.parse("# Test", cache=cache) is md.parse("# Test", cache=cache)


class TestMarkdownParseManyWithCache:
    """Tests for Markdown.parse_many() with cache."""

    def test_duplicate_sources_hit_cache(self) -> None:
        """Duplicate sources in list hit cache on second occurrence."""
        md = Markdown()
        cache = DictParseCache()
        sources = ["# Doc 1", "# Doc 1", "# Doc 2", "# Doc 1"]
        results = md.parse_many(sources, cache=cache)
        assert len(results) == 4
        assert results[0] is results[1]
        assert results[0] is results[3]
        assert results[2] is not results[0]

    def test_parse_many_without_cache(self) -> None:
        results = Markdown().parse_many(["a", "# b"])
        assert [type(r[0]) for r in results] == [Paragraph, Heading]


class TestConfigHashCacheIsolation:
    """Tests that different configs use different cache entries."""

    def test_different_markdown_instances_different_cache_entries(self) -> None:
        """Tables on/off use different entries."""
        cache = DictParseCache()
        table_md = "| a | b |\n|---|---|\n| 1 | 2 |"

        blocks1 = Markdown(config=ParseConfig(tables_enabled=False)).parse(table_md, cache=cache)
        blocks2 = Markdown().parse(table_md, cache=cache)

        assert blocks1 is not blocks2
        assert isinstance(blocks1[0], Paragraph)
        assert isinstance(blocks2[0], Table)
