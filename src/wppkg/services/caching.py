"""Parse result caching for a single extraction pass.

The same file is often parsed twice during a walk: once to detect the
package type and once to read its headers. ParseCache keeps the first
result per file name. A cache belongs to one pass and is discarded with it,
so archives that happen to share file names never see each other's results.
"""

from __future__ import annotations

from typing import Callable

from loguru import logger

from wppkg.core.types import ParseResult


class ParseCache:
    """Memoizes parse results by file name.

    Example:
        cache = ParseCache()
        result = cache.get_or_parse("style.css", content, parse_theme_headers)
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._entries: dict[str, ParseResult] = {}
        self.hits = 0

    def get(self, file_name: str) -> ParseResult | None:
        """Get the cached result for a file name, if any."""
        return self._entries.get(file_name)

    def get_or_parse(
        self,
        file_name: str,
        content: str,
        parser: Callable[[str], ParseResult],
    ) -> ParseResult:
        """Return the cached result or parse and store it.

        Args:
            file_name: Cache key.
            content: File content, parsed only on a miss.
            parser: Parser applied to the content.

        Returns:
            The same result object for every call with this file name.
        """
        if file_name in self._entries:
            self.hits += 1
            logger.debug(f"Parse cache hit: {file_name!r}")
            return self._entries[file_name]

        result = parser(content)
        self._entries[file_name] = result
        return result

    def clear(self) -> None:
        """Drop all cached results."""
        self._entries.clear()
        self.hits = 0

    def __contains__(self, file_name: str) -> bool:
        return file_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
