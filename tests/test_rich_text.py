# test_rich_text.py

import pytest

from core.utils.rich_text import FORMATS, apply_format, render_preview
from core.utils.slug import slugify


def test_apply_format_bold_wraps_selection():
    text, start, end = apply_format("hello world", 6, 11, "bold")
    assert text == "hello **world**"
    assert text[start:end] == "world"


def test_apply_format_link_keeps_selection_as_url():
    text, start, end = apply_format("see https://example.com", 4, 23, "link")
    assert text == "see [Link Text](https://example.com)"
    assert text[start:end] == "https://example.com"


def test_apply_format_list_on_empty_selection():
    text, start, end = apply_format("Intro", 5, 5, "list")
    assert text == "Intro\n- "
    assert start == end == len(text)


def test_apply_format_clamps_out_of_range_selection():
    text, start, end = apply_format("abc", -4, 99, "code")
    assert text == "`abc`"
    assert (start, end) == (1, 4)


def test_apply_format_unknown_format():
    with pytest.raises(ValueError):
        apply_format("abc", 0, 1, "strike")


def test_toolbar_has_every_action():
    assert set(FORMATS) == {
        "bold", "italic", "underline", "list", "ordered-list", "link", "image", "quote", "code",
    }


def test_render_preview_empty():
    assert render_preview("") == ""
    assert render_preview(None) == ""


def test_render_preview_inline_tokens():
    html = render_preview("**bold** and *italic* and `code` and <u>under</u>")
    assert "<strong>bold</strong>" in html
    assert "<em>italic</em>" in html
    assert "<code>code</code>" in html
    assert "<u>under</u>" in html


def test_render_preview_escapes_raw_html():
    html = render_preview("<script>alert(1)</script>")
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_render_preview_links_and_images():
    html = render_preview("[Academy](https://example.com) ![Team](/static/team.jpg)")
    assert '<a href="https://example.com">Academy</a>' in html
    assert '<img src="/static/team.jpg" alt="Team">' in html


def test_render_preview_rejects_javascript_urls():
    html = render_preview("[click](javascript:alert(1))")
    assert 'href="#"' in html
    assert "javascript:" not in html.split("href=")[1].split(">")[0]


def test_render_preview_block_tokens():
    html = render_preview("> quoted\n- item\n1. first")
    assert "<blockquote>quoted</blockquote>" in html
    assert html.count("<li>") == 2
    assert "<br>" in html


@pytest.mark.parametrize("title, expected", [
    ("Summer Camp 2024", "summer-camp-2024"),
    ("  Hello, World!  ", "hello-world"),
    ("Académie & Club", "acad-mie-club"),
    ("---", ""),
])
def test_slugify(title, expected):
    assert slugify(title) == expected
