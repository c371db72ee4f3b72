# viewer/markdown/blocks.py
"""
Block-level structure of a markdown document.

The source is first split into prose and fenced-code segments. Code
segments are rendered once and then frozen, so no prose pass can ever
match inside them. After the prose passes have run, the segments are
flattened into block lines, list items are grouped and the remaining
plain lines are assembled into paragraphs.
"""

from __future__ import annotations

import re
from typing import Iterable, List, NamedTuple

from django.utils.html import escape

CODE = "code"
PROSE = "prose"

FENCE_RE = re.compile(r"```.*?```", re.DOTALL)

# Lines opening with one of these tags are already block-level. Fenced code
# never reaches this check, so "code" only matches a line that starts with
# inline code; such a line is left unwrapped, like any other block line.
BLOCK_TAG_RE = re.compile(r"^<(h[1-6]|ul|ol|li|pre|code)")
LIST_ITEM_RE = re.compile(r"^<li>.*</li>$")


class Segment(NamedTuple):
    kind: str
    text: str


def split_fences(text: str) -> List[Segment]:
    """
    Cut every fenced code block out of ``text``.

    Fences pair up left to right; an unterminated fence stays in the prose
    as literal backticks.
    """
    segments: List[Segment] = []
    position = 0
    for match in FENCE_RE.finditer(text):
        if match.start() > position:
            segments.append(Segment(PROSE, text[position : match.start()]))
        segments.append(Segment(CODE, match.group(0)))
        position = match.end()
    if position < len(text):
        segments.append(Segment(PROSE, text[position:]))
    return segments


def render_code_block(fenced: str) -> str:
    """Strip the fence markers and render the literal, escaped content."""
    code = fenced.replace("```", "").strip()
    return f"<pre><code>{escape(code)}</code></pre>"


def restore_code_blocks(segments: Iterable[Segment]) -> List[Segment]:
    return [
        Segment(CODE, render_code_block(segment.text)) if segment.kind == CODE else segment
        for segment in segments
    ]


def _flatten(segments: Iterable[Segment]) -> List[Segment]:
    """Turn segments into one entry per line; code blocks stay whole."""
    lines: List[Segment] = []
    for segment in segments:
        if segment.kind == CODE:
            lines.append(segment)
            continue
        for line in segment.text.split("\n"):
            lines.append(Segment(PROSE, line.strip()))
    return lines


def group_list_items(lines: List[Segment]) -> List[Segment]:
    """
    Wrap runs of ``<li>`` lines in a single ``<ul>``.

    Blank lines between two items do not end the list. Ordered items end
    up in a ``<ul>`` as well: the item pass does not record which marker
    produced an item.
    """
    grouped: List[Segment] = []
    items: List[str] = []
    pending_blanks = 0

    def close_list():
        nonlocal items, pending_blanks
        if items:
            grouped.append(Segment(PROSE, "<ul>" + "".join(items) + "</ul>"))
            items = []
        grouped.extend([Segment(PROSE, "")] * pending_blanks)
        pending_blanks = 0

    for line in lines:
        if line.kind == PROSE and LIST_ITEM_RE.match(line.text):
            pending_blanks = 0
            items.append(line.text)
            continue
        if items and line.kind == PROSE and not line.text:
            pending_blanks += 1
            continue
        close_list()
        grouped.append(line)
    close_list()
    return grouped


def assemble_paragraphs(lines: Iterable[Segment]) -> List[Segment]:
    """Join consecutive plain lines into ``<p>`` blocks."""
    blocks: List[Segment] = []
    current: List[str] = []

    def flush():
        if current:
            blocks.append(Segment(PROSE, "<p>" + " ".join(current) + "</p>"))
            current.clear()

    for line in lines:
        if line.kind == CODE or BLOCK_TAG_RE.match(line.text):
            flush()
            blocks.append(line)
        elif not line.text:
            flush()
        else:
            current.append(line.text)
    flush()
    return blocks


def join_blocks(blocks: Iterable[Segment]) -> str:
    """
    Join blocks with newlines and turn every newline outside code into
    ``<br>``.
    """
    parts = []
    for block in blocks:
        if block.kind == CODE:
            parts.append(block.text)
        else:
            parts.append(block.text.replace("\n", "<br>"))
    return "<br>".join(parts)


def build_blocks(segments: Iterable[Segment]) -> List[Segment]:
    return assemble_paragraphs(group_list_items(_flatten(segments)))
