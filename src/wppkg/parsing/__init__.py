"""Parsers for package header blocks and readme files.

- parse_headers: Generic "Label: value" extraction
- HeaderProfile: Plugin/theme label maps with post-processing and validation
- ReadmeParser: readme.txt state machine
- MarkdownRenderer: Section rendering capability
"""

from wppkg.parsing.headers import clean_header_value, parse_headers
from wppkg.parsing.profiles import (
    PLUGIN_LABELS,
    PLUGIN_PROFILE,
    PROFILES,
    THEME_LABELS,
    THEME_PROFILE,
    HeaderProfile,
    coerce_network_flag,
    parse_plugin_headers,
    parse_theme_headers,
    split_tags,
)
from wppkg.parsing.readme import (
    README_FIELDS,
    ReadmeParser,
    ReadmeState,
    parse_readme,
    split_list_field,
)
from wppkg.parsing.rendering import (
    MarkdownRenderer,
    PythonMarkdownRenderer,
    render_section,
    rewrite_subheadings,
)

__all__ = [
    # Headers
    "clean_header_value",
    "parse_headers",
    # Profiles
    "HeaderProfile",
    "PLUGIN_LABELS",
    "PLUGIN_PROFILE",
    "PROFILES",
    "THEME_LABELS",
    "THEME_PROFILE",
    "coerce_network_flag",
    "parse_plugin_headers",
    "parse_theme_headers",
    "split_tags",
    # Readme
    "README_FIELDS",
    "ReadmeParser",
    "ReadmeState",
    "parse_readme",
    "split_list_field",
    # Rendering
    "MarkdownRenderer",
    "PythonMarkdownRenderer",
    "render_section",
    "rewrite_subheadings",
]
