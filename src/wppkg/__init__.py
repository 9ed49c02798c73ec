"""Metadata extraction for WordPress plugin and theme packages.

Reads package archives without executing anything in them:

    from wppkg import WPPackage

    package = WPPackage("akismet.zip")
    package.type       # "plugin"
    package.slug       # "akismet"
    package.metadata   # {"name": "Akismet Anti-spam", "version": ..., ...}
"""

from wppkg.core import (
    ArchiveReadError,
    ConfigError,
    ExtractionResult,
    ExtractorConfig,
    FailureKind,
    PackageParseError,
    PackageType,
    Parsed,
    ParseFailure,
    ReadmeRecord,
    WPPkgError,
)
from wppkg.package import WPPackage, extract_package
from wppkg.services import PackageExtractor, ParseCache

__version__ = "1.0.0"

__all__ = [
    "WPPackage",
    "extract_package",
    "PackageExtractor",
    "ParseCache",
    "ExtractorConfig",
    "ExtractionResult",
    "FailureKind",
    "PackageType",
    "Parsed",
    "ParseFailure",
    "ReadmeRecord",
    "WPPkgError",
    "ConfigError",
    "ArchiveReadError",
    "PackageParseError",
]
