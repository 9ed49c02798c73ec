"""Extraction services.

- PackageExtractor: Archive walk, type detection and metadata merge
- ParseCache: Per-pass memoization of parse results
"""

from wppkg.services.caching import ParseCache
from wppkg.services.extraction import (
    PackageExtractor,
    decode_content,
    explore_entry,
    merge_metadata,
)

__all__ = [
    "PackageExtractor",
    "ParseCache",
    "decode_content",
    "explore_entry",
    "merge_metadata",
]
