# viewer/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from viewer.markdown import assign_heading_ids, extract, render_markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    """Render a markdown body, headings carry their outline ids"""
    html, _ = assign_heading_ids(render_markdown(value))
    return mark_safe(html)


@register.filter(name="markdown_body")
def markdown_body_filter(value):
    """Render a whole document, dropping its front matter"""
    _, body = extract(value)
    return markdown_filter(body)


@register.inclusion_tag("viewer/toc.html")
def heading_toc(headings):
    return {"headings": headings}
