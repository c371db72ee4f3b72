# tests/test_views.py


def test_home_lists_showcase_cards(client, content_root):
    response = client.get("/")

    assert response.status_code == 200
    body = response.content.decode()
    assert "Welcome" in body
    assert "/knowledge/?path=knowledge%2Fwelcome.md" in body
    assert "intro、site" in body


def test_section_listing(client, content_root):
    response = client.get("/knowledge/")

    assert response.status_code == 200
    body = response.content.decode()
    assert "General" in body
    assert "未分类" in body
    assert "nav-folder-title" in body
    assert 'datetime="2026-01-14"' in body


def test_section_article(client, content_root):
    response = client.get("/knowledge/", {"path": "knowledge/welcome.md"})

    assert response.status_code == 200
    body = response.content.decode()
    assert '<h1 id="heading-1-0">Welcome</h1>' in body
    assert 'href="#heading-2-0"' in body
    assert response.context["page_title"] == "Welcome"


def test_unknown_article_is_404(client, content_root):
    assert client.get("/knowledge/", {"path": "knowledge/missing.md"}).status_code == 404


def test_unknown_section_is_404(client, content_root):
    assert client.get("/nowhere/").status_code == 404


def test_missing_manifest_renders_empty_section(client, content_root):
    (content_root / "data" / "projects-list.txt").unlink()

    response = client.get("/projects/")

    assert response.status_code == 200
    assert "No articles yet" in response.content.decode()
