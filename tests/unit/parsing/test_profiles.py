"""Tests for plugin and theme header profiles."""

import pytest

from wppkg.core.types import FailureKind, PackageType
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


class TestPluginProfile:
    """Tests for plugin header parsing."""

    def test_parses_plugin_headers(self, plugin_php):
        result = parse_plugin_headers(plugin_php)

        assert result.ok
        headers = result.value
        assert headers["name"] == "Hello Dolly"
        assert headers["version"] == "1.7.2"
        assert headers["plugin_uri"] == "http://wordpress.org/plugins/hello-dolly/"
        assert headers["text_domain"] == "hello-dolly"
        assert headers["requires_php"] == ""

    def test_record_has_every_label_key(self, plugin_php):
        headers = parse_plugin_headers(plugin_php).value

        assert list(headers) == list(PLUGIN_LABELS)

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("true", True),
            ("TRUE", True),
            ("True", True),
            ("false", False),
            ("yes", False),
            ("1", False),
            ("", False),
        ],
    )
    def test_network_flag_is_true_only_for_true(self, raw, expected):
        content = f"/*\nPlugin Name: Net\nNetwork: {raw}\n*/"

        assert parse_plugin_headers(content).value["network"] is expected

    def test_missing_name_is_invalid(self):
        result = parse_plugin_headers("<?php\n/* Version: 1.0 */\n")

        assert not result.ok
        assert result.kind is FailureKind.INVALID_TYPE_HEADER
        assert "Plugin Name" in result.reason

    def test_theme_file_is_not_a_plugin(self, theme_css):
        assert not parse_plugin_headers(theme_css).ok


class TestThemeProfile:
    """Tests for theme header parsing."""

    def test_parses_theme_headers(self, theme_css):
        headers = parse_theme_headers(theme_css).value

        assert headers["name"] == "Twenty Twenty"
        assert headers["author"] == "the WordPress team"
        assert headers["version"] == "2.1"
        assert headers["tested"] == "6.2"
        assert headers["template"] == ""
        assert list(headers) == list(THEME_LABELS)

    def test_tags_are_split_and_stripped_of_markup(self, theme_css):
        headers = parse_theme_headers(theme_css).value

        assert headers["tags"] == [
            "blog",
            "one-column",
            "custom-colors",
            "accessibility-ready",
        ]

    def test_missing_tags_is_empty_list(self):
        headers = parse_theme_headers("/* Theme Name: Bare */").value

        assert headers["tags"] == []

    def test_missing_name_is_invalid(self):
        result = parse_theme_headers("/* Tags: a, b */")

        assert result.kind is FailureKind.INVALID_TYPE_HEADER


class TestPostProcessing:
    """Tests for the post-processing steps in isolation."""

    def test_coerce_network_flag(self):
        assert coerce_network_flag({"network": "TrUe"})["network"] is True
        assert coerce_network_flag({})["network"] is False

    def test_split_tags(self):
        assert split_tags({"tags": "<em>a</em>, b ,,"})["tags"] == ["a", "b"]


class TestHeaderProfile:
    """Tests for HeaderProfile itself."""

    def test_registry_of_profiles(self):
        assert PROFILES[PackageType.PLUGIN] is PLUGIN_PROFILE
        assert PROFILES[PackageType.THEME] is THEME_PROFILE

    def test_profile_name(self):
        assert PLUGIN_PROFILE.name == "plugin"
        assert THEME_PROFILE.name == "theme"

    def test_profile_without_postprocess(self):
        profile = HeaderProfile(PackageType.PLUGIN, {"name": "Block Name"})

        result = profile.parse("Block Name: Custom")

        assert result.value == {"name": "Custom"}
