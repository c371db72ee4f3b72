# viewer/markdown/frontmatter.py
"""
Front-matter extraction for knowledge-base documents.

A document may start with a metadata block::

    ---
    title: "Some article"
    tags: [python, 'django']
    ---
    Body text...

The block is a flat list of ``key: value`` lines. It is intentionally not
YAML: values are strings, except for the inline ``[a, b]`` form which
becomes a list of strings.
"""

from __future__ import annotations

import re
from typing import Dict, List, Tuple, Union

FrontMatterValue = Union[str, List[str]]
FrontMatter = Dict[str, FrontMatterValue]

FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(?P<meta>.*?)\r?\n---[ \t]*\r?\n(?P<body>.*)\Z",
    re.DOTALL,
)

_QUOTE_CHARS = "\"'"


def _strip_quotes(value: str) -> str:
    """Remove one matching pair of outer quotes, if present."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTE_CHARS:
        return value[1:-1]
    return value


def _parse_list(value: str) -> List[str]:
    items = []
    for part in value[1:-1].split(","):
        item = part.strip()
        for quote in _QUOTE_CHARS:
            item = item.replace(quote, "")
        items.append(item)
    return items


def parse_value(raw: str) -> FrontMatterValue:
    """
    Post-process a raw metadata value.

    Quotes are stripped first, then a bracketed value is split into a list.
    """
    value = _strip_quotes(raw.strip())
    if len(value) >= 2 and value.startswith("[") and value.endswith("]"):
        return _parse_list(value)
    return value


def parse_front_matter_lines(block: str) -> FrontMatter:
    """Parse the lines between the two ``---`` delimiters."""
    metadata: FrontMatter = {}
    for line in block.splitlines():
        key, sep, raw_value = line.partition(":")
        key = key.strip()
        # No colon or empty key: not a metadata line
        if not sep or not key:
            continue
        metadata[key] = parse_value(raw_value)
    return metadata


def extract(text: str | None) -> Tuple[FrontMatter, str]:
    """
    Split ``text`` into ``(metadata, body)``.

    When the document does not open with a complete ``---`` block the
    metadata is empty and the body is the input, unchanged.
    """
    if not text:
        return {}, text or ""

    match = FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text

    return parse_front_matter_lines(match.group("meta")), match.group("body")
