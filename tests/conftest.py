"""Pytest configuration and fixtures."""

import zipfile
from pathlib import Path
from typing import Callable

import pytest

from wppkg.core.config import ExtractorConfig
from wppkg.services.extraction import PackageExtractor
from tests.fakes import InMemoryArchiveSource, RecordingRenderer


PLUGIN_PHP = """<?php
/**
 * Plugin Name: Hello Dolly
 * Plugin URI: http://wordpress.org/plugins/hello-dolly/
 * Description: This is not just a plugin, it symbolizes the hope of a generation.
 * Author: Matt Mullenweg
 * Version: 1.7.2
 * Author URI: http://ma.tt/
 * Text Domain: hello-dolly
 * Network: true
 */

function hello_dolly_get_lyric() {
    return "Hello, Dolly";
}
"""

THEME_CSS = """/*
Theme Name: Twenty Twenty
Theme URI: https://wordpress.org/themes/twentytwenty/
Author: the WordPress team
Author URI: https://wordpress.org/
Description: Our default theme for 2020.
Tags: blog, one-column, <strong>custom-colors</strong>, , accessibility-ready
Version: 2.1
Requires at least: 4.7
Tested up to: 6.2
Requires PHP: 5.2.4
License: GNU General Public License v2 or later
License URI: http://www.gnu.org/licenses/gpl-2.0.html
Text Domain: twentytwenty
*/

body { color: #000; }
"""

README_TXT = """=== My Plugin ===
Contributors: alice, bob
Tags: foo,bar
Stable tag: 1.2.3

Short desc here.

== Installation ==
Step one.
"""


@pytest.fixture
def plugin_php() -> str:
    """Provide a plugin main file with a full header block."""
    return PLUGIN_PHP


@pytest.fixture
def theme_css() -> str:
    """Provide a theme style.css with a full header block."""
    return THEME_CSS


@pytest.fixture
def readme_txt() -> str:
    """Provide a small but complete readme.txt."""
    return README_TXT


@pytest.fixture
def renderer() -> RecordingRenderer:
    """Provide a recording markdown renderer."""
    return RecordingRenderer()


@pytest.fixture
def archive() -> InMemoryArchiveSource:
    """Provide an empty in-memory archive."""
    return InMemoryArchiveSource()


@pytest.fixture
def extractor(renderer: RecordingRenderer) -> PackageExtractor:
    """Provide a PackageExtractor with default config and a fake renderer."""
    return PackageExtractor(ExtractorConfig(), renderer=renderer)


@pytest.fixture
def make_zip(tmp_path: Path) -> Callable[..., Path]:
    """Provide a factory writing real zip archives into tmp_path."""

    def _make_zip(entries: list[tuple[str, str]], name: str = "package.zip") -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as zf:
            for entry_name, content in entries:
                zf.writestr(entry_name, content)
        return path

    return _make_zip
