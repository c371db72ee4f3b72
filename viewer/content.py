# viewer/content.py
"""
Site content helpers built on top of the markdown core.

- Manifests: plain-text lists of document paths
- Article metadata normalised from front matter
- Showcase cards for the home page
- Sidebar navigation and category grouping for section listings
"""

from __future__ import annotations

import logging
import re
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional
from urllib.parse import quote

from dateutil import parser as date_parser
from django.urls import reverse

from . import conf

logger = logging.getLogger(__name__)

TAG_SEPARATORS_RE = re.compile(r"[,，、;；]")


def parse_manifest(text: str) -> List[str]:
    """One path per line; blank lines and ``#`` comments are skipped."""
    paths = []
    for line in (text or "").split("\n"):
        line = line.strip()
        if line and not line.startswith("#"):
            paths.append(line)
    return paths


def _first_value(data: Mapping, keys: Iterable[str]):
    for key in keys:
        value = data.get(key)
        if value:
            return value
    return None


def normalize_tags(value) -> List[str]:
    """Tags come as a list, a single scalar, or nothing at all."""
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        # "[a, , b]" keeps its empty element in the front matter, not on display
        return [str(tag) for tag in value if tag]
    return [str(value)]


def split_tags(raw: str) -> List[str]:
    if not raw:
        return []
    return [tag.strip() for tag in TAG_SEPARATORS_RE.split(str(raw)) if tag.strip()]


def _parse_update_time(value: str) -> Optional[date]:
    if not value:
        return None
    try:
        return date_parser.parse(value).date()
    except (ValueError, OverflowError):
        logger.debug("Unparseable update time %r", value)
        return None


def title_from_path(path: str) -> str:
    name = path.split("/")[-1]
    return name.replace(".md", "", 1)


@dataclass
class ArticleMeta:
    path: str
    title: str
    update_time: str = ""
    category: str = ""
    tags: List[str] = field(default_factory=list)
    intro: str = ""

    @property
    def updated(self) -> Optional[date]:
        return _parse_update_time(self.update_time)

    @property
    def folder(self) -> Optional[str]:
        """Second path component for paths nested at least one folder deep."""
        parts = self.path.split("/")
        return parts[1] if len(parts) > 2 else None


def article_meta(path: str, front_matter: Mapping) -> ArticleMeta:
    """Build the listing metadata for ``path`` from its front matter."""
    aliases = conf.get_field_aliases()

    def scalar(name: str) -> str:
        value = _first_value(front_matter, aliases[name])
        if isinstance(value, list):
            return ", ".join(value)
        return value or ""

    return ArticleMeta(
        path=path,
        title=scalar("title") or title_from_path(path),
        update_time=scalar("update_time"),
        category=scalar("category"),
        tags=normalize_tags(_first_value(front_matter, aliases["tags"])),
        intro=scalar("intro"),
    )


@dataclass
class ShowcaseCard:
    title: str = ""
    update_time: str = ""
    category: str = ""
    tags: List[str] = field(default_factory=list)
    intro: str = ""
    link: str = ""

    @property
    def meta_pieces(self) -> List[str]:
        pieces = []
        if self.update_time:
            pieces.append(self.update_time)
        if self.category:
            pieces.append(self.category)
        if self.tags:
            pieces.append("、".join(self.tags))
        return pieces


def _build_card(fields: Dict[str, str]) -> ShowcaseCard:
    aliases = conf.get_showcase_aliases()

    def value(name: str) -> str:
        return _first_value(fields, aliases[name]) or ""

    return ShowcaseCard(
        title=value("title"),
        update_time=value("update_time"),
        category=value("category"),
        tags=split_tags(value("tags")),
        intro=value("intro"),
        link=value("link"),
    )


def parse_showcase(text: str) -> List[ShowcaseCard]:
    """
    Parse a showcase file into cards.

    Cards are blocks of ``key: value`` lines separated by blank lines.
    Lines starting with ``#`` are comments. Cards with neither a title
    nor a link are dropped.
    """
    cards: List[ShowcaseCard] = []
    current: Dict[str, str] = {}

    def flush():
        if current:
            cards.append(_build_card(current))
            current.clear()

    for raw_line in (text or "").replace("\r", "").split("\n"):
        line = raw_line.strip()
        if not line:
            flush()
            continue
        if line.startswith("#"):
            continue
        key, sep, value = line.partition(":")
        if not sep or not key.strip():
            continue
        current[key.strip()] = value.strip()
    flush()

    return [card for card in cards if card.title or card.link]


def card_href(section: str, link: str) -> str:
    """Links to pages are kept, bare document paths open in ``section``."""
    raw = (link or "").strip()
    if not raw:
        return "#"
    if ".html" in raw:
        return raw
    return reverse("viewer:section", args=[section]) + "?path=" + quote(raw, safe="")


@dataclass
class NavItem:
    title: str
    path: str


@dataclass
class NavFolder:
    name: str
    children: List[NavItem] = field(default_factory=list)


@dataclass
class NavigationTree:
    root: List[NavItem] = field(default_factory=list)
    folders: List[NavFolder] = field(default_factory=list)


def build_navigation(articles: Iterable[ArticleMeta]) -> NavigationTree:
    """Group articles by their folder; top-level files go to ``root``."""
    tree = NavigationTree()
    folders: "OrderedDict[str, NavFolder]" = OrderedDict()

    for article in articles:
        item = NavItem(title=article.title, path=article.path)
        folder = article.folder
        if folder is None:
            tree.root.append(item)
            continue
        if folder not in folders:
            folders[folder] = NavFolder(name=folder)
        folders[folder].children.append(item)

    tree.folders = list(folders.values())
    return tree


def group_by_category(
    articles: Iterable[ArticleMeta], default: Optional[str] = None
) -> "OrderedDict[str, List[ArticleMeta]]":
    """Group articles by category, keeping manifest order."""
    if default is None:
        default = conf.get_uncategorized_label()

    grouped: "OrderedDict[str, List[ArticleMeta]]" = OrderedDict()
    for article in articles:
        grouped.setdefault(article.category or default, []).append(article)
    return grouped
