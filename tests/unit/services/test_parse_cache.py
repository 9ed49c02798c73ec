"""Tests for ParseCache."""

from wppkg.core.types import Parsed
from wppkg.parsing.profiles import parse_plugin_headers
from wppkg.services.caching import ParseCache


class TestParseCache:
    """Tests for per-pass parse memoization."""

    def test_first_lookup_parses(self, plugin_php):
        cache = ParseCache()

        result = cache.get_or_parse("hello.php", plugin_php, parse_plugin_headers)

        assert result.ok
        assert "hello.php" in cache
        assert len(cache) == 1
        assert cache.hits == 0

    def test_repeated_lookup_returns_identical_result(self, plugin_php):
        cache = ParseCache()

        first = cache.get_or_parse("hello.php", plugin_php, parse_plugin_headers)
        second = cache.get_or_parse("hello.php", plugin_php, parse_plugin_headers)

        assert second is first
        assert cache.hits == 1

    def test_hit_does_not_call_parser(self):
        cache = ParseCache()
        calls = []

        def parser(content):
            calls.append(content)
            return Parsed({"name": content})

        cache.get_or_parse("a.php", "one", parser)
        result = cache.get_or_parse("a.php", "two", parser)

        assert calls == ["one"]
        assert result.value == {"name": "one"}

    def test_failures_are_cached_too(self):
        cache = ParseCache()

        first = cache.get_or_parse("x.php", "<?php", parse_plugin_headers)

        assert not first.ok
        assert cache.get("x.php") is first

    def test_caches_are_independent(self, plugin_php):
        """Two caches never share results for the same file name."""
        first_cache = ParseCache()
        second_cache = ParseCache()

        first_cache.get_or_parse("main.php", plugin_php, parse_plugin_headers)
        result = second_cache.get_or_parse("main.php", "<?php", parse_plugin_headers)

        assert not result.ok
        assert first_cache.get("main.php").ok

    def test_get_missing(self):
        assert ParseCache().get("nothing") is None

    def test_clear(self, plugin_php):
        cache = ParseCache()
        cache.get_or_parse("hello.php", plugin_php, parse_plugin_headers)
        cache.get_or_parse("hello.php", plugin_php, parse_plugin_headers)

        cache.clear()

        assert len(cache) == 0
        assert cache.hits == 0
