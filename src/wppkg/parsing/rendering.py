"""Markdown normalization and rendering for readme sections.

readme.txt files use ``= Title =`` lines as sub-headings, which markdown does
not understand. They are rewritten to ``<h4>`` elements before the section
body is handed to a renderer.
"""

from __future__ import annotations

import re
from typing import Protocol, runtime_checkable

import markdown

# Matches a "= Heading =" line (single delimiters)
_SUBHEADING_PATTERN = re.compile(r"^[ \t]*=[ \t]*(.+?)[ \t]*=[ \t]*$", re.MULTILINE)


@runtime_checkable
class MarkdownRenderer(Protocol):
    """Converts markdown text to HTML."""

    def render(self, text: str) -> str:
        """Render markdown text to an HTML fragment."""
        ...


class PythonMarkdownRenderer:
    """MarkdownRenderer backed by the ``markdown`` package."""

    def __init__(self, extensions: list[str] | None = None):
        """Initialize renderer.

        Args:
            extensions: Python-Markdown extensions to enable (default: none).
        """
        self._extensions = list(extensions or [])

    def render(self, text: str) -> str:
        return markdown.markdown(text, extensions=self._extensions)


def rewrite_subheadings(text: str) -> str:
    """Rewrite ``= Title =`` lines to ``<h4>Title</h4>`` blocks.

    Example:
        >>> rewrite_subheadings("= Usage =\\nRun it.")
        '<h4>Usage</h4>\\n\\nRun it.'
    """
    return _SUBHEADING_PATTERN.sub(r"<h4>\1</h4>\n", text)


def render_section(text: str, renderer: MarkdownRenderer) -> str:
    """Normalize a readme section body and render it to HTML.

    Args:
        text: Trimmed section body.
        renderer: Renderer used after the sub-heading rewrite.

    Returns:
        Rendered HTML.
    """
    return renderer.render(rewrite_subheadings(text))
