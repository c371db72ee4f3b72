# viewer/markdown/renderer.py

from __future__ import annotations

from typing import List, NamedTuple

from .blocks import CODE, PROSE, Segment, build_blocks, join_blocks, restore_code_blocks, split_fences
from .frontmatter import FrontMatter, extract
from .headings import HeadingEntry, assign_heading_ids
from .inline import apply_passes, apply_passes_after_fence


class RenderedDocument(NamedTuple):
    meta: FrontMatter
    html: str
    headings: List[HeadingEntry]


def render_markdown(text):
    """
    Render the simplified markdown dialect to an HTML fragment.

    Pipeline:
        1. fenced code blocks are cut out of the text and rendered escaped
        2. prose segments go through the inline passes
        3. lines are grouped into lists and paragraphs
        4. blocks are joined, newlines outside code become ``<br>``

    Prose is not escaped: raw HTML in the source passes through as markup.
    """
    if not text:
        return ""

    text = text.replace("\r\n", "\n")

    rendered = []
    previous = None
    for segment in restore_code_blocks(split_fences(text)):
        if segment.kind == PROSE:
            # Prose right after a fence starts mid-line
            render = apply_passes_after_fence if previous == CODE else apply_passes
            segment = Segment(PROSE, render(segment.text))
        rendered.append(segment)
        previous = segment.kind

    return join_blocks(build_blocks(rendered))


def render_document(text) -> RenderedDocument:
    """Front matter, body rendering and heading ids in one call."""
    meta, body = extract(text)
    html, headings = assign_heading_ids(render_markdown(body))
    return RenderedDocument(meta=meta, html=html, headings=headings)
