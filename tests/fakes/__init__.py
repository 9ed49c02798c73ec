"""Test fakes for testing without real archives.

This module provides in-memory implementations of:
- ArchiveSource (entries held in a list, reads recorded)
- MarkdownRenderer (deterministic output, calls recorded)

Example:
    from tests.fakes import InMemoryArchiveSource

    source = InMemoryArchiveSource().add("hello/hello.php", PLUGIN_PHP)
    result = PackageExtractor().extract(source.list_entries())
"""

from .archive import InMemoryArchiveSource, RecordingRenderer

__all__ = [
    "InMemoryArchiveSource",
    "RecordingRenderer",
]
