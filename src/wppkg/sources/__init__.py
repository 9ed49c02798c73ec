"""Package archive sources."""

from wppkg.sources.archive import (
    PACKAGE_EXTENSION,
    ArchiveSource,
    ZipArchiveSource,
    validate_package_path,
)

__all__ = [
    "PACKAGE_EXTENSION",
    "ArchiveSource",
    "ZipArchiveSource",
    "validate_package_path",
]
