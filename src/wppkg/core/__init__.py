"""Core types, configuration and exceptions for wppkg."""

from .config import ExtractorConfig
from .exceptions import (
    ArchiveReadError,
    ConfigError,
    PackageParseError,
    WPPkgError,
)
from .types import (
    ArchiveEntry,
    ExtractionResult,
    FailureKind,
    PackageType,
    Parsed,
    ParseFailure,
    ParseResult,
    ReadmeRecord,
)

__all__ = [
    "ExtractorConfig",
    "WPPkgError",
    "ConfigError",
    "ArchiveReadError",
    "PackageParseError",
    "ArchiveEntry",
    "ExtractionResult",
    "FailureKind",
    "PackageType",
    "Parsed",
    "ParseFailure",
    "ParseResult",
    "ReadmeRecord",
]
