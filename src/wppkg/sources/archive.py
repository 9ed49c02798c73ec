"""Archive access for package files.

The extractor only needs an ordered stream of ``(entry_name, content)``
pairs. ArchiveSource is that capability; ZipArchiveSource implements it for
.zip files on any fsspec-readable path.
"""

from __future__ import annotations

import os
import zipfile
from pathlib import Path
from typing import Generator, Protocol, runtime_checkable

import fsspec
from loguru import logger

from wppkg.core.exceptions import ArchiveReadError
from wppkg.core.types import FailureKind, ParseFailure

PACKAGE_EXTENSION = ".zip"


@runtime_checkable
class ArchiveSource(Protocol):
    """Sequential access to the entries of a package archive."""

    def list_entries(self) -> Generator[tuple[str, bytes], None, None]:
        """Yield ``(entry_name, content)`` pairs in archive order.

        Implementations should read each entry only when it is requested, so
        a consumer that stops early never reads the remaining entries. The
        generator is closed when the consumer is done with it, which releases
        the archive.
        """
        ...


class ZipArchiveSource:
    """ArchiveSource for a .zip file, read through fsspec's zip filesystem.

    Example:
        source = ZipArchiveSource("my-plugin.zip")
        for name, content in source.list_entries():
            print(name, len(content))
    """

    def __init__(self, path: str | Path):
        """Initialize ZipArchiveSource.

        Args:
            path: Path to the .zip archive.
        """
        self.path = Path(path)

    def list_entries(self) -> Generator[tuple[str, bytes], None, None]:
        """Yield file entries of the archive in index order.

        Raises:
            ArchiveReadError: If the archive cannot be opened or read.
        """
        try:
            fs = fsspec.filesystem("zip", fo=str(self.path), skip_instance_cache=True)
        except (OSError, zipfile.BadZipFile) as e:
            raise ArchiveReadError(str(self.path), str(e)) from e

        try:
            for info in fs.zip.infolist():
                if info.is_dir():
                    continue
                try:
                    with fs.open(info.filename, "rb") as f:
                        content = f.read()
                except (OSError, zipfile.BadZipFile) as e:
                    raise ArchiveReadError(str(self.path), f"{info.filename}: {e}") from e
                yield info.filename, content
        finally:
            fs.close()


def validate_package_path(path: str | Path) -> ParseFailure | None:
    """Check that a package path can be handed to ZipArchiveSource.

    Returns:
        An INVALID_PACKAGE_SOURCE failure if the path is missing, unreadable
        or not a .zip file, otherwise None.
    """
    package_path = Path(path)

    if not package_path.is_file() or not os.access(package_path, os.R_OK):
        logger.debug(f"Package not found or unreadable: {package_path}")
        return ParseFailure(
            FailureKind.INVALID_PACKAGE_SOURCE,
            f"not a readable file: {package_path}",
        )

    if package_path.suffix != PACKAGE_EXTENSION:
        logger.debug(f"Package is not a zip archive: {package_path}")
        return ParseFailure(
            FailureKind.INVALID_PACKAGE_SOURCE,
            f"expected a {PACKAGE_EXTENSION} archive: {package_path}",
        )

    return None
