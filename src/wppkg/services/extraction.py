"""Package extraction service.

Walks the entries of a package archive, detects whether it holds a plugin
or a theme, parses the relevant files and merges the results into one
metadata mapping.

Only files directly inside the archive's top-level directory are looked at:

    my-plugin/my-plugin.php     -> considered
    my-plugin/readme.txt        -> considered
    my-plugin/includes/a.php    -> skipped (too deep)
    my-plugin/LICENSE           -> skipped (no extension)
"""

from __future__ import annotations

from typing import Any, Iterable

from loguru import logger

from wppkg.core.config import ExtractorConfig
from wppkg.core.types import (
    ArchiveEntry,
    ExtractionResult,
    FailureKind,
    PackageType,
    ParseFailure,
    ParseResult,
)
from wppkg.detection import PackageTypeDetector, build_default_detector
from wppkg.parsing.profiles import PROFILES
from wppkg.parsing.readme import ReadmeParser
from wppkg.parsing.rendering import MarkdownRenderer
from wppkg.services.caching import ParseCache

ArchiveContent = bytes | str


def explore_entry(entry_name: str) -> ArchiveEntry | None:
    """Split an archive entry name into directory, name and extension.

    Args:
        entry_name: Entry path inside the archive, "/" separated.

    Returns:
        ArchiveEntry for files exactly one level below a top-level directory
        that have an extension, otherwise None.

    Example:
        >>> explore_entry("my-plugin/my-plugin.php")
        ArchiveEntry(dirname='my-plugin', name='my-plugin', extension='php')
        >>> explore_entry("my-plugin/includes/helpers.php") is None
        True
    """
    dirname, _, basename = entry_name.rstrip("/").rpartition("/")
    if not dirname or "/" in dirname:
        return None

    name, dot, extension = basename.rpartition(".")
    if not dot or not extension:
        return None

    return ArchiveEntry(dirname=dirname, name=name, extension=extension)


def decode_content(content: ArchiveContent) -> str:
    """Decode entry content as UTF-8, replacing undecodable bytes."""
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return content


def merge_metadata(
    readme_metadata: dict[str, Any],
    header_metadata: dict[str, Any],
    slug: str | None,
) -> dict[str, Any]:
    """Merge readme and header metadata.

    Header values win over readme values with the same key. The readme
    title is not part of the result.
    """
    readme_fields = {key: value for key, value in readme_metadata.items() if key != "name"}
    return {**readme_fields, **header_metadata, "slug": slug}


class PackageExtractor:
    """Extracts metadata from the entries of a package archive.

    Every call to ``extract`` is an independent pass with its own ParseCache.

    Example:
        extractor = PackageExtractor(ExtractorConfig(parse_readme=False))
        result = extractor.extract(ZipArchiveSource("hello.zip").list_entries())
        if result.success:
            print(result.package_type, result.metadata["name"])
    """

    def __init__(
        self,
        config: ExtractorConfig | None = None,
        renderer: MarkdownRenderer | None = None,
        detector: PackageTypeDetector | None = None,
    ):
        """Initialize PackageExtractor.

        Args:
            config: Extraction options (default: ExtractorConfig()).
            renderer: Markdown renderer for readme sections.
            detector: Package type detector (default: themes via style.css,
                plugins via PHP files).
        """
        self.config = config or ExtractorConfig()
        self.readme_parser = ReadmeParser(renderer)
        self.detector = detector or build_default_detector(self.config)

    def header_type_for(self, file_name: str) -> PackageType | None:
        """Package type whose header block a file may carry."""
        if file_name == self.config.style_file:
            return PackageType.THEME
        if file_name.endswith(f".{self.config.code_extension}"):
            return PackageType.PLUGIN
        return None

    def parse_file(self, file_name: str, content: str) -> ParseResult:
        """Parse a file with the parser its name calls for (uncached).

        Raises:
            ValueError: If no parser handles ``file_name``.
        """
        header_type = self.header_type_for(file_name)
        if header_type is not None:
            return PROFILES[header_type].parse(content)
        if file_name == self.config.readme_file:
            return self.readme_parser.parse(content)
        raise ValueError(f"No parser for file {file_name!r}")

    def extract(self, entries: Iterable[tuple[str, ArchiveContent]]) -> ExtractionResult:
        """Walk archive entries and build the package metadata.

        Entries are consumed lazily. When readme parsing is disabled the walk
        stops at the first valid header file, leaving later entries unread.

        Args:
            entries: ``(entry_name, content)`` pairs in archive order.

        Returns:
            ExtractionResult with merged metadata, or a failure when no
            package type could be determined or no valid header was found.
        """
        cache = ParseCache()

        def parse(file_name: str, content: str) -> ParseResult:
            return cache.get_or_parse(
                file_name, content, lambda text: self.parse_file(file_name, text)
            )

        parse_readme = self.config.parse_readme
        package_type = self.config.type_override
        slug: str | None = None
        readme_metadata: dict[str, Any] = {}
        header_metadata: dict[str, Any] = {}

        for entry_name, raw_content in entries:
            entry = explore_entry(entry_name)
            if entry is None:
                continue

            slug = entry.dirname
            file_name = entry.file_name
            content = decode_content(raw_content)

            if package_type is None:
                package_type = self.detector.detect(file_name, content, parse)

            if file_name == self.config.readme_file and parse_readme:
                result = parse(file_name, content)
                if not result.ok:
                    logger.debug(f"Skipping {entry_name!r}: {result.reason}")
                    continue
                readme_metadata = result.value.to_dict()
                del readme_metadata["name"]
                readme_metadata["readme"] = True
                continue

            header_type = self.header_type_for(file_name)
            if header_type is None or header_type is not package_type:
                continue

            result = parse(file_name, content)
            if not result.ok:
                logger.debug(f"Skipping {entry_name!r}: {result.reason}")
                continue

            headers = dict(result.value)
            if package_type is PackageType.PLUGIN:
                headers["plugin"] = f"{slug}/{file_name}"
            header_metadata.update(headers)

            if not parse_readme:
                logger.debug(f"Stopping after {entry_name!r}: readme parsing disabled")
                break

        if package_type is None:
            logger.info("Extraction failed: no plugin or theme headers found")
            return ExtractionResult(
                failure=ParseFailure(
                    FailureKind.UNDETERMINED_TYPE,
                    "no file carries a valid plugin or theme header",
                ),
            )

        if not header_metadata:
            logger.info(f"Extraction failed: no valid {package_type.value} header found")
            return ExtractionResult(
                package_type=package_type,
                failure=ParseFailure(
                    FailureKind.INVALID_TYPE_HEADER,
                    f"no valid {package_type.value} header found",
                ),
            )

        metadata = merge_metadata(readme_metadata, header_metadata, slug)
        logger.info(
            f"Extracted {package_type.value} {metadata.get('name')!r} "
            f"(slug={slug!r}, readme={bool(readme_metadata)}, cache_hits={cache.hits})"
        )
        return ExtractionResult(metadata=metadata, package_type=package_type, slug=slug)
