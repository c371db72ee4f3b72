# tests/conftest.py
import pytest

WELCOME = """---
题目: Welcome
更新时间: 2026-01-14
分类: General
标签: [intro, site]
引言: What this site is about.
---
# Welcome

Some **intro** text.

## Details

- one
- two
"""

NESTED = """---
title: "Nested doc"
tags: python
---
# Nested
"""

SHOWCASE = """# home page cards
题目: Welcome
更新时间: 2026-01-14
类别: General
标签: intro, site
内容: Start here.
链接: knowledge/welcome.md
"""


@pytest.fixture
def content_root(tmp_path, settings):
    """
    A throwaway content tree wired into the viewer settings:
    - a knowledge manifest with one top-level, one nested and one missing document
    - an empty projects manifest
    - a knowledge showcase file
    """
    data = tmp_path / "data"
    data.mkdir()
    (data / "knowledge-list.txt").write_text(
        "# comment\n\nknowledge/welcome.md\nknowledge/python/nested.md\nknowledge/missing.md\n",
        encoding="utf-8",
    )
    (data / "projects-list.txt").write_text("", encoding="utf-8")
    (data / "knowledge-show.txt").write_text(SHOWCASE, encoding="utf-8")

    docs = tmp_path / "knowledge" / "python"
    docs.mkdir(parents=True)
    (tmp_path / "knowledge" / "welcome.md").write_text(WELCOME, encoding="utf-8")
    (docs / "nested.md").write_text(NESTED, encoding="utf-8")

    settings.VIEWER_CONTENT_ROOT = tmp_path
    return tmp_path
