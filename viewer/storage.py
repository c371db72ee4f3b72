# viewer/storage.py
"""
Reading site content through a Django storage backend.

The content root holds the manifests, the showcase files and the markdown
documents, laid out exactly as they are served. Any storage backend works
(filesystem by default, S3-compatible via django-storages).
"""

from __future__ import annotations

import logging
from typing import List, Optional

from django.core.exceptions import SuspiciousFileOperation
from django.core.files.storage import FileSystemStorage, Storage

from . import conf
from .content import ArticleMeta, ShowcaseCard, article_meta, parse_manifest, parse_showcase
from .markdown import RenderedDocument, extract, render_document

logger = logging.getLogger(__name__)


class UnknownSection(KeyError):
    """Raised when a section name is not configured."""


def _storage_name(path: str) -> str:
    """Manifest paths may be site-absolute; storage names never are."""
    return path[1:] if path.startswith("/") else path


class ContentSource:
    def __init__(self, storage: Optional[Storage] = None):
        self.storage = storage or FileSystemStorage(location=conf.get_content_root())

    def section(self, name: str) -> dict:
        try:
            return conf.get_sections()[name]
        except KeyError:
            raise UnknownSection(name) from None

    def read_text(self, path: str) -> Optional[str]:
        """Return the decoded file, or None when it cannot be read."""
        name = _storage_name(path)
        try:
            with self.storage.open(name, "rb") as file_obj:
                return file_obj.read().decode("utf-8")
        except FileNotFoundError:
            logger.warning("Content file not found: %s", name)
        except SuspiciousFileOperation:
            logger.warning("Rejected content path outside the content root: %s", name)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read content file %s: %s", name, exc)
        return None

    def load_manifest(self, section: str) -> Optional[List[str]]:
        text = self.read_text(self.section(section)["manifest"])
        if text is None:
            return None
        return parse_manifest(text)

    def load_meta(self, path: str) -> Optional[ArticleMeta]:
        text = self.read_text(path)
        if text is None:
            return None
        front_matter, _ = extract(text)
        return article_meta(path, front_matter)

    def load_all_meta(self, section: str) -> Optional[List[ArticleMeta]]:
        """Metadata for every manifest entry; unreadable entries are dropped."""
        paths = self.load_manifest(section)
        if paths is None:
            return None

        articles = []
        for path in paths:
            meta = self.load_meta(path)
            if meta is not None:
                articles.append(meta)
        logger.debug("Loaded %d of %d %s articles", len(articles), len(paths), section)
        return articles

    def load_article(self, path: str) -> Optional[RenderedDocument]:
        text = self.read_text(path)
        if text is None:
            return None
        return render_document(text)

    def load_showcase(self, section: str) -> List[ShowcaseCard]:
        showcase = self.section(section).get("showcase")
        if not showcase:
            return []
        text = self.read_text(showcase)
        if text is None:
            return []
        return parse_showcase(text)
