"""Type definitions for wppkg."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

from .exceptions import ConfigError, PackageParseError

T = TypeVar("T")


class PackageType(Enum):
    """Kind of WordPress package found in an archive."""

    PLUGIN = "plugin"
    THEME = "theme"

    @classmethod
    def parse(cls, value: "PackageType | str | None") -> "PackageType | None":
        """Coerce a string (or enum member) into a PackageType.

        Args:
            value: "plugin", "theme", a PackageType, or None/empty for auto-detect.

        Returns:
            The matching member, or None when no value was given.

        Raises:
            ConfigError: If the value names no known package type.
        """
        if value is None or isinstance(value, cls):
            return value
        normalized = value.strip().lower()
        if not normalized:
            return None
        try:
            return cls(normalized)
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ConfigError(
                f"Unknown package type {value!r} (expected one of: {choices})"
            ) from None


class FailureKind(Enum):
    """Distinguished reasons a parse or extraction produced no result."""

    INVALID_PACKAGE_SOURCE = "invalid_package_source"
    NOT_A_STRUCTURED_DOCUMENT = "not_a_structured_document"
    INVALID_TYPE_HEADER = "invalid_type_header"
    UNDETERMINED_TYPE = "undetermined_type"


@dataclass(frozen=True)
class Parsed(Generic[T]):
    """Successful parse carrying its value."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ParseFailure:
    """Failed parse with its kind and a human readable reason."""

    kind: FailureKind
    reason: str = ""

    @property
    def ok(self) -> bool:
        return False


ParseResult = Union[Parsed[Any], ParseFailure]


@dataclass
class ReadmeRecord:
    """Structured content of a readme.txt file.

    Attributes:
        name: Title from the ``=== Name ===`` line.
        contributors: Comma separated ``Contributors`` field as a list.
        donate: ``Donate link`` field.
        tags: Comma separated ``Tags`` field as a list.
        requires: ``Requires at least`` field.
        tested: ``Tested up to`` field.
        requires_php: ``Requires PHP`` field.
        stable: ``Stable tag`` field.
        license: ``License`` field.
        license_uri: ``License URI`` field.
        short_description: Line following the header block, verbatim.
        sections: Section title -> rendered HTML body, in document order.
    """

    name: str = ""
    contributors: list[str] = field(default_factory=list)
    donate: str = ""
    tags: list[str] = field(default_factory=list)
    requires: str = ""
    tested: str = ""
    requires_php: str = ""
    stable: str = ""
    license: str = ""
    license_uri: str = ""
    short_description: str = ""
    sections: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the flat mapping used when merging metadata."""
        return {
            "name": self.name,
            "contributors": list(self.contributors),
            "donate": self.donate,
            "tags": list(self.tags),
            "requires": self.requires,
            "tested": self.tested,
            "requires_php": self.requires_php,
            "stable": self.stable,
            "license": self.license,
            "license_uri": self.license_uri,
            "short_description": self.short_description,
            "sections": dict(self.sections),
        }


@dataclass(frozen=True)
class ArchiveEntry:
    """A top-level file of a package archive.

    Attributes:
        dirname: Top-level directory holding the file (the package slug).
        name: File name without extension.
        extension: File extension without the leading dot.
    """

    dirname: str
    name: str
    extension: str

    @property
    def file_name(self) -> str:
        """File name including extension."""
        return f"{self.name}.{self.extension}"


@dataclass
class ExtractionResult:
    """Outcome of walking one package archive.

    Attributes:
        metadata: Merged package metadata (empty on failure).
        package_type: Detected or forced package type.
        slug: Top-level directory name of the package (None on failure).
        failure: Why the extraction failed, or None on success.
    """

    metadata: dict[str, Any] = field(default_factory=dict)
    package_type: PackageType | None = None
    slug: str | None = None
    failure: ParseFailure | None = None

    @property
    def success(self) -> bool:
        """Whether metadata was produced."""
        return self.failure is None

    def unwrap(self) -> dict[str, Any]:
        """Return the metadata or raise PackageParseError on failure."""
        if self.failure is not None:
            raise PackageParseError(self.failure)
        return self.metadata
