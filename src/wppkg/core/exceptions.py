"""Custom exceptions for wppkg.

Per-file parse problems are reported as ``ParseFailure`` values, not raised.
These exceptions cover configuration mistakes, archive I/O errors and callers
that explicitly ask for a failed extraction to raise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import ParseFailure


class WPPkgError(Exception):
    """Base exception for all wppkg errors."""

    pass


class ConfigError(WPPkgError):
    """Invalid configuration value."""

    pass


class ArchiveReadError(WPPkgError):
    """Archive could not be opened or an entry could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read archive {path}: {reason}")


class PackageParseError(WPPkgError):
    """Extraction failed and the caller asked for an exception."""

    def __init__(self, failure: "ParseFailure"):
        """Initialize exception from a failure value.

        Args:
            failure: The failure reported by the extraction.
        """
        self.failure = failure
        message = failure.kind.value
        if failure.reason:
            message = f"{message}: {failure.reason}"
        super().__init__(message)
