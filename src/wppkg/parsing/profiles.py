"""Plugin and theme header profiles.

A profile is data: the label map for parse_headers plus a post-processing
step. Both profiles share the validity rule that a header block without a
name does not describe a package.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

from wppkg.core.types import FailureKind, PackageType, Parsed, ParseFailure, ParseResult
from wppkg.parsing.headers import parse_headers

PostProcessFunc = Callable[[dict[str, Any]], dict[str, Any]]

_MARKUP_PATTERN = re.compile(r"<[^>]*>")

PLUGIN_LABELS: dict[str, str] = {
    "name": "Plugin Name",
    "plugin_uri": "Plugin URI",
    "version": "Version",
    "description": "Description",
    "author": "Author",
    "author_uri": "Author URI",
    "text_domain": "Text Domain",
    "domain_path": "Domain Path",
    "network": "Network",
    "requires_at_least": "Requires at least",
    "requires_php": "Requires PHP",
    "license": "License",
    "license_uri": "License URI",
    "update_uri": "Update URI",
}

THEME_LABELS: dict[str, str] = {
    "name": "Theme Name",
    "theme_uri": "Theme URI",
    "author": "Author",
    "author_uri": "Author URI",
    "description": "Description",
    "version": "Version",
    "template": "Template",
    "requires_at_least": "Requires at least",
    "tested": "Tested up to",
    "requires_php": "Requires PHP",
    "license": "License",
    "license_uri": "License URI",
    "text_domain": "Text Domain",
    "tags": "Tags",
    "domain_path": "Domain Path",
}


def coerce_network_flag(headers: dict[str, Any]) -> dict[str, Any]:
    """Turn the ``network`` header into a bool (only "true" counts)."""
    headers["network"] = str(headers.get("network", "")).lower() == "true"
    return headers


def split_tags(headers: dict[str, Any]) -> dict[str, Any]:
    """Turn the ``tags`` header into a list of tags with markup removed."""
    raw = _MARKUP_PATTERN.sub("", str(headers.get("tags", "")))
    headers["tags"] = [tag.strip() for tag in raw.split(",") if tag.strip()]
    return headers


@dataclass(frozen=True)
class HeaderProfile:
    """Header parsing rules for one package type.

    Attributes:
        package_type: Package type the profile describes.
        labels: Result key -> header label.
        postprocess: Applied to the raw header record before validation.
    """

    package_type: PackageType
    labels: dict[str, str]
    postprocess: PostProcessFunc | None = None

    @property
    def name(self) -> str:
        return self.package_type.value

    def parse(self, content: str) -> ParseResult:
        """Parse a header block.

        Returns:
            Parsed(headers) when a name is present, otherwise an
            INVALID_TYPE_HEADER failure.
        """
        headers: dict[str, Any] = parse_headers(content, self.labels)
        if self.postprocess is not None:
            headers = self.postprocess(headers)

        # Without a name it is probably not a package file
        if not headers.get("name"):
            return ParseFailure(
                FailureKind.INVALID_TYPE_HEADER,
                f"no '{self.labels['name']}' header",
            )
        return Parsed(headers)


PLUGIN_PROFILE = HeaderProfile(PackageType.PLUGIN, PLUGIN_LABELS, coerce_network_flag)
THEME_PROFILE = HeaderProfile(PackageType.THEME, THEME_LABELS, split_tags)

PROFILES: dict[PackageType, HeaderProfile] = {
    PackageType.PLUGIN: PLUGIN_PROFILE,
    PackageType.THEME: THEME_PROFILE,
}


def parse_plugin_headers(content: str) -> ParseResult:
    """Parse the header block of a plugin's PHP file."""
    return PLUGIN_PROFILE.parse(content)


def parse_theme_headers(content: str) -> ParseResult:
    """Parse the header block of a theme's style.css."""
    return THEME_PROFILE.parse(content)
