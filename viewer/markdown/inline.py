# viewer/markdown/inline.py
"""
Line and inline substitution passes.

Every pass is a pure ``str -> str`` function applied to prose segments
only (fenced code never reaches them). The order of ``PROSE_PASSES`` is
significant: bold must run before italic, images before links, and list
items after everything that may rewrite the start of a line.
"""

import re

INLINE_CODE_RE = re.compile(r"`([^`\n]+)`")

HEADING_PATTERNS = [
    (re.compile(r"^### (.*)$", re.MULTILINE), r"<h3>\1</h3>"),
    (re.compile(r"^## (.*)$", re.MULTILINE), r"<h2>\1</h2>"),
    (re.compile(r"^# (.*)$", re.MULTILINE), r"<h1>\1</h1>"),
]

EMPHASIS_PATTERNS = [
    # strong first so "**x**" is not read as two single-star spans
    (re.compile(r"\*\*(.+?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"__(.+?)__"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.+?)\*"), r"<em>\1</em>"),
    (re.compile(r"_(.+?)_"), r"<em>\1</em>"),
]

IMAGE_RE = re.compile(r"!\[([^\]]*?)\]\(([^)]+?)\)")
LINK_RE = re.compile(r"\[([^\]]+?)\]\(([^)]+?)\)")

LIST_ITEM_PATTERNS = [
    re.compile(r"^[*-] (.+)$", re.MULTILINE),
    re.compile(r"^\+ (.+)$", re.MULTILINE),
    re.compile(r"^\d+\. (.+)$", re.MULTILINE),
]


def _substitute(text, patterns):
    for pattern, replacement in patterns:
        text = pattern.sub(replacement, text)
    return text


def inline_code(text: str) -> str:
    return INLINE_CODE_RE.sub(r"<code>\1</code>", text)


def headings(text: str) -> str:
    """``#``, ``##`` and ``###`` followed by a space; deeper levels stay literal."""
    return _substitute(text, HEADING_PATTERNS)


def emphasis(text: str) -> str:
    return _substitute(text, EMPHASIS_PATTERNS)


def images(text: str) -> str:
    return IMAGE_RE.sub(r'<img src="\2" alt="\1">', text)


def links(text: str) -> str:
    return LINK_RE.sub(r'<a href="\2">\1</a>', text)


def list_items(text: str) -> str:
    """Bullet and numbered markers both become plain ``<li>`` lines."""
    for pattern in LIST_ITEM_PATTERNS:
        text = pattern.sub(r"<li>\1</li>", text)
    return text


PROSE_PASSES = [
    inline_code,
    headings,
    emphasis,
    images,  # Must run before links, "![a](b)" contains "[a](b)"
    links,
    list_items,
    # Order matters - they run sequentially
]


# Passes anchored at the start of a source line
LINE_PASSES = (headings, list_items)


def apply_passes(text: str, passes=None) -> str:
    """Apply the prose passes in order"""
    for prose_pass in passes if passes is not None else PROSE_PASSES:
        text = prose_pass(text)
    return text


def apply_passes_after_fence(text: str) -> str:
    """
    Apply the prose passes to text that follows a closing fence.

    Up to its first newline the text continues the fence line, so the
    line-anchored passes must not treat it as the start of a line.
    """
    head, newline, tail = text.partition("\n")
    head = apply_passes(head, [p for p in PROSE_PASSES if p not in LINE_PASSES])
    if not newline:
        return head
    return head + newline + apply_passes(tail)
