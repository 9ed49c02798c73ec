"""WordPress package facade.

WPPackage validates a package path, reads the archive and runs one
extraction pass on construction, then exposes the outcome.
"""

from __future__ import annotations

from contextlib import closing
from pathlib import Path
from typing import Any

from loguru import logger

from wppkg.core.config import ExtractorConfig
from wppkg.core.exceptions import ArchiveReadError, PackageParseError
from wppkg.core.types import (
    ExtractionResult,
    FailureKind,
    PackageType,
    ParseFailure,
)
from wppkg.parsing.rendering import MarkdownRenderer
from wppkg.services.extraction import PackageExtractor
from wppkg.sources.archive import ArchiveSource, ZipArchiveSource, validate_package_path


def extract_package(
    package_path: str | Path,
    config: ExtractorConfig | None = None,
    *,
    renderer: MarkdownRenderer | None = None,
    source: ArchiveSource | None = None,
) -> ExtractionResult:
    """Extract metadata from a package archive.

    Args:
        package_path: Path to the package .zip file.
        config: Extraction options (default: ExtractorConfig()).
        renderer: Markdown renderer for readme sections.
        source: Archive source to read instead of opening ``package_path``
            as a zip file. Path validation is skipped when given.

    Returns:
        ExtractionResult; invalid or unreadable archives produce an
        INVALID_PACKAGE_SOURCE failure.
    """
    if source is None:
        failure = validate_package_path(package_path)
        if failure is not None:
            return ExtractionResult(failure=failure)
        source = ZipArchiveSource(package_path)

    extractor = PackageExtractor(config, renderer=renderer)
    try:
        with closing(source.list_entries()) as entries:
            return extractor.extract(entries)
    except ArchiveReadError as e:
        logger.warning(f"Could not read package {package_path}: {e.reason}")
        return ExtractionResult(
            failure=ParseFailure(FailureKind.INVALID_PACKAGE_SOURCE, e.reason),
        )


class WPPackage:
    """A WordPress plugin or theme package.

    Example:
        package = WPPackage("hello-dolly.zip")
        if package.success:
            print(package.type, package.slug, package.metadata["version"])
    """

    def __init__(
        self,
        package_path: str | Path,
        package_type: PackageType | str | None = None,
        parse_readme: bool = True,
        *,
        config: ExtractorConfig | None = None,
        renderer: MarkdownRenderer | None = None,
        source: ArchiveSource | None = None,
    ):
        """Parse the package at ``package_path``.

        Args:
            package_path: Path to the package .zip file.
            package_type: Force "plugin" or "theme" (default: auto-detect).
            parse_readme: Whether to read readme.txt (default: True).
            config: Full configuration; overrides ``package_type`` and
                ``parse_readme`` when given.
            renderer: Markdown renderer for readme sections.
            source: Archive source to read instead of the zip file.
        """
        self.package_path = Path(package_path)
        self.config = config or ExtractorConfig(
            parse_readme=parse_readme,
            type_override=PackageType.parse(package_type),
        )
        self._result = extract_package(
            self.package_path,
            self.config,
            renderer=renderer,
            source=source,
        )

    @property
    def result(self) -> ExtractionResult:
        """Full extraction result."""
        return self._result

    @property
    def metadata(self) -> dict[str, Any]:
        """Merged package metadata (empty when extraction failed)."""
        return self._result.metadata

    @property
    def package_type(self) -> PackageType | None:
        """Detected or forced package type."""
        return self._result.package_type

    @property
    def type(self) -> str | None:
        """Package type as a string: "plugin", "theme" or None."""
        package_type = self._result.package_type
        return package_type.value if package_type is not None else None

    @property
    def slug(self) -> str | None:
        """Top-level directory of the package, or None."""
        return self.metadata.get("slug")

    @property
    def success(self) -> bool:
        """Whether metadata was extracted."""
        return self._result.success

    @property
    def failure(self) -> ParseFailure | None:
        """Why extraction failed, or None."""
        return self._result.failure

    def raise_for_failure(self) -> None:
        """Raise PackageParseError if extraction failed."""
        if self._result.failure is not None:
            raise PackageParseError(self._result.failure)

    def __repr__(self) -> str:
        return f"WPPackage({str(self.package_path)!r}, type={self.type!r}, slug={self.slug!r})"
