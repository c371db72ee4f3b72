# viewer/conf.py
"""App settings with their defaults. Override any of them in Django settings."""

from django.conf import settings

DEFAULT_SECTIONS = {
    "knowledge": {
        "title": "Knowledge base",
        "manifest": "data/knowledge-list.txt",
        "showcase": "data/knowledge-show.txt",
    },
    "projects": {
        "title": "Projects",
        "manifest": "data/projects-list.txt",
        "showcase": "data/projects-show.txt",
    },
}

# Front-matter keys accepted for each article field, first match wins
DEFAULT_FIELD_ALIASES = {
    "title": ["title", "题目"],
    "update_time": ["updateTime", "更新时间"],
    "category": ["category", "分类"],
    "tags": ["tags", "标签"],
    "intro": ["intro", "引言"],
}

DEFAULT_SHOWCASE_ALIASES = {
    "title": ["题目", "title"],
    "update_time": ["更新时间", "updateTime"],
    "category": ["类别", "分类", "category"],
    "tags": ["标签", "tags"],
    "intro": ["内容", "引言", "intro"],
    "link": ["链接", "link"],
}


def get_content_root():
    return getattr(settings, "VIEWER_CONTENT_ROOT", settings.BASE_DIR / "content")


def get_sections():
    return getattr(settings, "VIEWER_SECTIONS", DEFAULT_SECTIONS)


def get_field_aliases():
    return getattr(settings, "VIEWER_FIELD_ALIASES", DEFAULT_FIELD_ALIASES)


def get_showcase_aliases():
    return getattr(settings, "VIEWER_SHOWCASE_ALIASES", DEFAULT_SHOWCASE_ALIASES)


def get_uncategorized_label():
    return getattr(settings, "VIEWER_UNCATEGORIZED_LABEL", "未分类")
