"""readme.txt parsing.

A WordPress readme has a fixed layout::

    === Plugin Name ===
    Contributors: alice, bob
    Tags: foo, bar
    Stable tag: 1.2.3

    Short description on a single line.

    == Description ==
    Free markdown text.

    = A sub-heading =
    More text.

ReadmeParser walks the lines with a small state machine:
START (title) -> META_HEADERS -> SHORT_DESCRIPTION -> SECTIONS -> DONE.
Only a missing title line fails the parse; everything else falls back to
empty values.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterator

from loguru import logger

from wppkg.core.types import FailureKind, Parsed, ParseFailure, ParseResult, ReadmeRecord
from wppkg.parsing.rendering import MarkdownRenderer, PythonMarkdownRenderer, render_section

# "=== Name ===" on the first line
_TITLE_PATTERN = re.compile(r"===\s*(.+?)\s*===")

# "== Section ==" lines start a new section
_SECTION_PATTERN = re.compile(r"^\s*==\s+(.+?)\s+==\s*$")

# Header field label -> ReadmeRecord attribute
README_FIELDS: dict[str, str] = {
    "Contributors": "contributors",
    "Donate link": "donate",
    "Tags": "tags",
    "Requires at least": "requires",
    "Tested up to": "tested",
    "Requires PHP": "requires_php",
    "Stable tag": "stable",
    "License": "license",
    "License URI": "license_uri",
}

LIST_FIELDS = ("contributors", "tags")


class ReadmeState(Enum):
    """Parser states, in the order they are visited."""

    START = "start"
    META_HEADERS = "meta_headers"
    SHORT_DESCRIPTION = "short_description"
    SECTIONS = "sections"
    DONE = "done"


def split_list_field(value: str) -> list[str]:
    """Split a comma separated field into trimmed, non-empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


class ReadmeParser:
    """Parser for readme.txt files.

    Example:
        parser = ReadmeParser()
        result = parser.parse(content)
        if result.ok:
            print(result.value.short_description)
    """

    def __init__(self, renderer: MarkdownRenderer | None = None):
        """Initialize ReadmeParser.

        Args:
            renderer: Markdown renderer for section bodies
                (default: PythonMarkdownRenderer).
        """
        self.renderer = renderer if renderer is not None else PythonMarkdownRenderer()

    def parse(self, content: str) -> ParseResult:
        """Parse readme content.

        Args:
            content: Full readme.txt text.

        Returns:
            Parsed(ReadmeRecord) on success, or a NOT_A_STRUCTURED_DOCUMENT
            failure when the first line is not a ``=== Title ===`` line.
        """
        text = content.replace("\r\n", "\n").replace("\r", "\n")
        lines = iter(text.strip(" \t\n").split("\n"))
        record = ReadmeRecord()
        raw_fields: dict[str, str] = {}
        raw_sections: dict[str, str] = {}

        state = ReadmeState.START
        while state is not ReadmeState.DONE:
            if state is ReadmeState.START:
                match = _TITLE_PATTERN.search(next(lines, ""))
                if not match:
                    logger.debug("readme rejected: first line is not a title line")
                    return ParseFailure(
                        FailureKind.NOT_A_STRUCTURED_DOCUMENT,
                        "first line is not a '=== Name ===' title",
                    )
                record.name = match.group(1)
                state = ReadmeState.META_HEADERS

            elif state is ReadmeState.META_HEADERS:
                raw_fields = self._read_meta_headers(lines)
                state = ReadmeState.SHORT_DESCRIPTION

            elif state is ReadmeState.SHORT_DESCRIPTION:
                record.short_description = next(lines, "")
                state = ReadmeState.SECTIONS

            elif state is ReadmeState.SECTIONS:
                raw_sections = self._read_sections(lines)
                state = ReadmeState.DONE

        self._apply_fields(record, raw_fields)
        record.sections = {
            title: render_section(body, self.renderer)
            for title, body in raw_sections.items()
        }
        return Parsed(record)

    def _read_meta_headers(self, lines: Iterator[str]) -> dict[str, str]:
        """Consume "Field: value" lines up to and including the first blank line."""
        fields: dict[str, str] = {}
        for line in lines:
            label, sep, value = line.partition(":")
            if not label.strip():
                break
            attribute = README_FIELDS.get(label)
            if attribute is not None:
                fields[attribute] = value.strip() if sep else ""
        return fields

    def _read_sections(self, lines: Iterator[str]) -> dict[str, str]:
        """Split the remaining lines into titled section bodies.

        Lines before the first section header are dropped. A repeated title
        replaces the earlier body.
        """
        sections: dict[str, str] = {}
        current: str | None = None
        buffer: list[str] = []

        for line in lines:
            match = _SECTION_PATTERN.match(line)
            if match:
                if current is not None:
                    sections[current] = "\n".join(buffer).strip()
                current = match.group(1)
                buffer = []
            else:
                buffer.append(line)

        if current is not None:
            sections[current] = "\n".join(buffer).strip()
        return sections

    def _apply_fields(self, record: ReadmeRecord, fields: dict[str, str]) -> None:
        for attribute, value in fields.items():
            if attribute in LIST_FIELDS:
                setattr(record, attribute, split_list_field(value))
            else:
                setattr(record, attribute, value)


def parse_readme(content: str, renderer: MarkdownRenderer | None = None) -> ParseResult:
    """Parse readme.txt content with a one-off ReadmeParser."""
    return ReadmeParser(renderer).parse(content)
