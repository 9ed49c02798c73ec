"""Configuration management for wppkg."""

import os
from dataclasses import dataclass

from .exceptions import ConfigError
from .types import PackageType

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class ExtractorConfig:
    """Package extraction configuration.

    Attributes:
        parse_readme: Read readme.txt and keep scanning after the first valid
            header file (default: True).
        type_override: Force the package type and skip detection
            (default: None = auto-detect).
        readme_file: Name of the readme entry.
        style_file: Name of the theme stylesheet entry.
        code_extension: Extension of plugin code files.
    """

    parse_readme: bool = True
    type_override: PackageType | None = None
    readme_file: str = "readme.txt"
    style_file: str = "style.css"
    code_extension: str = "php"

    def __post_init__(self) -> None:
        self.type_override = PackageType.parse(self.type_override)

    @classmethod
    def from_env(cls) -> "ExtractorConfig":
        """Load configuration from environment variables."""
        config = cls()

        if value := os.environ.get("WPPKG_PARSE_README"):
            config.parse_readme = _parse_bool("WPPKG_PARSE_README", value)

        if value := os.environ.get("WPPKG_PACKAGE_TYPE"):
            config.type_override = PackageType.parse(value)

        return config


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {value!r}")
