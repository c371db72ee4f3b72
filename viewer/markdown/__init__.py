# viewer/markdown/__init__.py

from .frontmatter import extract
from .headings import assign_heading_ids
from .renderer import RenderedDocument, render_document, render_markdown

__all__ = (
    "RenderedDocument",
    "assign_heading_ids",
    "extract",
    "render_document",
    "render_markdown",
)
