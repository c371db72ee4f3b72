# viewer/markdown/headings.py

from __future__ import annotations

from typing import List, Tuple, TypedDict

from bs4 import BeautifulSoup

OUTLINE_LEVELS = ("h1", "h2")


class HeadingEntry(TypedDict):
    level: int
    text: str
    id: str


def heading_id(level: int, index: int) -> str:
    return f"heading-{level}-{index}"


def assign_heading_ids(html: str) -> Tuple[str, List[HeadingEntry]]:
    """
    Give every ``h1`` and ``h2`` a stable id and return the heading outline.

    Each level has its own zero-based counter, so the first ``h2`` is
    ``heading-2-0`` no matter how many ``h1`` precede it. Existing ids are
    overwritten. ``h3`` and deeper are left alone and are not part of the
    outline. The outline follows document order.
    """
    if not html:
        return "", []

    soup = BeautifulSoup(html, "html.parser")
    counters = {name: 0 for name in OUTLINE_LEVELS}
    headings: List[HeadingEntry] = []

    for element in soup.find_all(list(OUTLINE_LEVELS)):
        level = int(element.name[1])  # "h2" -> 2
        identifier = heading_id(level, counters[element.name])
        counters[element.name] += 1

        element["id"] = identifier
        headings.append(
            {
                "level": level,
                "text": element.get_text().strip(),
                "id": identifier,
            }
        )

    return str(soup), headings
