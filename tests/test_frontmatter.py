# tests/test_frontmatter.py
import pytest

from viewer.markdown.frontmatter import extract, parse_value


def test_extracts_scalars_and_lists():
    meta, body = extract("---\ntitle: A\ntags: [a, b]\n---\nBody")

    assert meta == {"title": "A", "tags": ["a", "b"]}
    assert body == "Body"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Just a body",
        "# Heading\n---\ntitle: A\n---\n",
        "\n---\ntitle: A\n---\nBody",
        "---\ntitle: A\nno closing delimiter",
        "---\ntitle: A\n---",
        "----\ntitle: A\n----\nBody",
        "---\n---\nBody",
    ],
)
def test_without_valid_block_body_is_input(text):
    meta, body = extract(text)

    assert meta == {}
    assert body == text


def test_none_input():
    assert extract(None) == ({}, "")


def test_one_layer_of_quotes_is_stripped():
    meta, _ = extract("---\na: \"x\"\nb: 'y'\nc: \"'z'\"\nd: \"mixed'\n---\n")

    assert meta == {"a": "x", "b": "y", "c": "'z'", "d": "\"mixed'"}


def test_value_split_at_first_colon():
    meta, _ = extract("---\nurl: https://example.com:8080/a\n---\n")

    assert meta["url"] == "https://example.com:8080/a"


def test_lines_without_key_are_skipped():
    meta, _ = extract("---\nno colon here\n: orphan value\ntitle: T\n---\nBody")

    assert meta == {"title": "T"}


def test_duplicate_keys_last_wins():
    meta, _ = extract("---\ntitle: first\ntitle: second\n---\n")

    assert meta == {"title": "second"}


def test_quoted_list_and_quoted_items():
    meta, _ = extract("---\ntags: \"[a, 'b', \"c\"]\"\n---\n")

    assert meta["tags"] == ["a", "b", "c"]


def test_list_keeps_empty_elements():
    assert parse_value("[]") == [""]
    assert parse_value("[ a , , b ]") == ["a", "", "b"]


def test_extract_keeps_empty_list_elements():
    meta, body = extract("---\ntags: [a, , b]\nempty: []\n---\nBody")

    assert meta == {"tags": ["a", "", "b"], "empty": [""]}
    assert body == "Body"


def test_crlf_document():
    meta, body = extract("---\r\ntitle: A\r\n---\r\nBody\r\n")

    assert meta == {"title": "A"}
    assert body == "Body\r\n"


def test_body_keeps_later_delimiters():
    meta, body = extract("---\ntitle: A\n---\nText\n---\nMore")

    assert meta == {"title": "A"}
    assert body == "Text\n---\nMore"


def test_unicode_keys():
    meta, _ = extract("---\n题目: 你好\n标签: [甲, 乙]\n---\n正文")

    assert meta == {"题目": "你好", "标签": ["甲", "乙"]}
