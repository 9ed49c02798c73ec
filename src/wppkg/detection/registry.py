"""Package type detection with a registry of detection rules.

Each rule pairs a package type with a file name matcher. A file determines
the package type when its name matches a rule and its header block parses
as a valid header of that type. Rules are tried by priority, so a theme's
style.css wins over a PHP file inspected at the same time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from loguru import logger

from wppkg.core.types import PackageType, ParseResult

if TYPE_CHECKING:
    from wppkg.core.config import ExtractorConfig


# Takes a file name and returns True if the rule applies to it
FileMatcher = Callable[[str], bool]

# Takes (file_name, content) and returns the parse result for that file
ParseFunc = Callable[[str, str], ParseResult]


@dataclass
class DetectionRule:
    """Registration entry for a package type.

    Attributes:
        package_type: Type reported when the rule matches.
        matches: Decides whether a file name is a candidate for this type.
        priority: Higher priority rules are checked first (default: 0).
    """

    package_type: PackageType
    matches: FileMatcher
    priority: int = 0


class PackageTypeDetector:
    """Registry of detection rules for package types.

    Example:
        detector = build_default_detector(config)
        package_type = detector.detect("style.css", content, parse)
    """

    def __init__(self) -> None:
        """Initialize an empty detector."""
        self._rules: dict[PackageType, DetectionRule] = {}

    def register(
        self,
        package_type: PackageType,
        matches: FileMatcher,
        *,
        priority: int = 0,
        override: bool = False,
    ) -> None:
        """Register a detection rule for a package type."""
        if package_type in self._rules and not override:
            raise ValueError(
                f"Package type '{package_type.value}' is already registered. "
                f"Use override=True to replace."
            )

        self._rules[package_type] = DetectionRule(
            package_type=package_type,
            matches=matches,
            priority=priority,
        )

    def unregister(self, package_type: PackageType) -> bool:
        """Remove a registered rule."""
        if package_type in self._rules:
            del self._rules[package_type]
            return True
        return False

    def detect(self, file_name: str, content: str, parse: ParseFunc) -> PackageType | None:
        """Determine the package type from a single file.

        Args:
            file_name: Entry file name (no directory).
            content: Entry content.
            parse: Parses the file's header block; callers pass their
                cached parse function so the header is parsed once.

        Returns:
            The detected type, or None if the file determines nothing.
        """
        sorted_rules = sorted(
            self._rules.values(),
            key=lambda r: r.priority,
            reverse=True,
        )

        for rule in sorted_rules:
            if not rule.matches(file_name):
                continue
            if parse(file_name, content).ok:
                logger.debug(f"Detected {rule.package_type.value} package from {file_name!r}")
                return rule.package_type

        return None

    def list_types(self) -> list[PackageType]:
        """Get registered package types in detection order."""
        rules = sorted(self._rules.values(), key=lambda r: r.priority, reverse=True)
        return [rule.package_type for rule in rules]

    def is_registered(self, package_type: PackageType) -> bool:
        """Check if a package type has a rule."""
        return package_type in self._rules


def build_default_detector(config: "ExtractorConfig") -> PackageTypeDetector:
    """Build a detector for themes (style.css) and plugins (PHP files)."""
    detector = PackageTypeDetector()

    style_file = config.style_file
    code_suffix = f".{config.code_extension}"

    detector.register(
        PackageType.THEME,
        lambda file_name: file_name == style_file,
        priority=10,
    )
    detector.register(
        PackageType.PLUGIN,
        lambda file_name: file_name.endswith(code_suffix),
        priority=0,
    )
    return detector
