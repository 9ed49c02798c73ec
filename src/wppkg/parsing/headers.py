"""Header block parsing.

Extracts ``Label: value`` pairs from the comment block at the top of a
plugin's main PHP file or a theme's style.css.
"""

import re
from functools import lru_cache

# Matches the end of a header comment: "*/" or "?>" and anything after it
_COMMENT_CLOSE_PATTERN = re.compile(r"\s*(?:\*/|\?>).*")


@lru_cache(maxsize=128)
def _label_pattern(label: str) -> re.Pattern[str]:
    """Compile the line pattern for a header label.

    Tolerates an opening ``<?php`` and leading comment decoration
    (spaces, tabs, ``/``, ``*``, ``#``, ``@``) before the label.
    """
    return re.compile(
        rf"^(?:[ \t]*<\?php)?[ \t/*#@]*{re.escape(label)}:(.*)$",
        re.MULTILINE | re.IGNORECASE,
    )


def clean_header_value(value: str) -> str:
    """Strip whitespace and a trailing comment terminator from a header value.

    Example:
        >>> clean_header_value(" My Theme */")
        'My Theme'
    """
    return _COMMENT_CLOSE_PATTERN.sub("", value).strip()


def parse_headers(content: str, labels: dict[str, str]) -> dict[str, str]:
    """Parse header values from file content.

    The whole content is scanned for each label, so header blocks may be
    reordered or preceded by other comments. The first matching line wins.

    Args:
        content: File content.
        labels: Ordered mapping of result key -> label text before the colon.

    Returns:
        Mapping with one entry per key in ``labels`` order. Labels that are
        not present map to an empty string.

    Example:
        >>> parse_headers("/*\\n * Plugin Name: Hello\\n */", {"name": "Plugin Name"})
        {'name': 'Hello'}
    """
    text = content.replace("\r\n", "\n").replace("\r", "\n")

    headers: dict[str, str] = {}
    for key, label in labels.items():
        match = _label_pattern(label).search(text)
        headers[key] = clean_header_value(match.group(1)) if match else ""
    return headers
