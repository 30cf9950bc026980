"""Tests for the HTML tag renderer."""

from __future__ import annotations

import re

import pytest

from mdbook_metadata.renderers.html import HtmlTagRenderer, escape_value


def _lines(html: str) -> set[str]:
    return set(html.splitlines())


def test_render_basic() -> None:
    metadata = {"title": "Example Title", "keywords": "rust, mdbook, testing", "author": "John Doe"}

    html = HtmlTagRenderer().render(metadata)

    assert _lines(html) == {
        "<title>Example Title</title>",
        '<meta name="keywords" content="rust, mdbook, testing">',
        '<meta name="author" content="John Doe">',
    }
    assert html.count("\n") == 3
    assert html.endswith("\n")


def test_render_empty_mapping_is_empty_string() -> None:
    assert HtmlTagRenderer().render({}) == ""


def test_title_key_is_case_sensitive() -> None:
    html = HtmlTagRenderer().render({"Title": "Upper"})

    assert html == '<meta name="Title" content="Upper">\n'


def test_render_escapes_special_characters() -> None:
    metadata = {
        "title": "Complex & <Special> 'Characters'",
        "description": 'Testing "quotes" and other <html> elements',
        "keywords": 'rust,mdbook,"special, characters",<html>',
    }

    html = HtmlTagRenderer().render(metadata)

    assert _lines(html) == {
        "<title>Complex &amp; &lt;Special&gt; &#x27;Characters&#x27;</title>",
        '<meta name="description" content="Testing &quot;quotes&quot; and other &lt;html&gt; elements">',
        '<meta name="keywords" content="rust,mdbook,&quot;special, characters&quot;,&lt;html&gt;">',
    }


def test_render_prevents_script_injection() -> None:
    metadata = {"title": "Safe Title", "script_injection": "<script>alert('XSS');</script>"}

    html = HtmlTagRenderer().render(metadata)

    assert _lines(html) == {
        "<title>Safe Title</title>",
        '<meta name="script_injection" content="&lt;script&gt;alert(&#x27;XSS&#x27;);&lt;&#x2F;script&gt;">',
    }
    assert "<script" not in html


def test_render_escapes_title_closing_tag() -> None:
    html = HtmlTagRenderer().render({"title": "</title><script>x()</script>"})

    assert html == "<title>&lt;&#x2F;title&gt;&lt;script&gt;x()&lt;&#x2F;script&gt;</title>\n"


def test_render_escapes_structured_values() -> None:
    metadata = {"title": "Complex Structures", "complex": '{"nested_key": ["value1", "value2"]}'}

    html = HtmlTagRenderer().render(metadata)

    assert _lines(html) == {
        "<title>Complex Structures</title>",
        '<meta name="complex" content="{&quot;nested_key&quot;: [&quot;value1&quot;, &quot;value2&quot;]}">',
    }


def test_render_large_volume() -> None:
    metadata = {f"key_{i}": f"value_{i}" for i in range(1000)}

    html = HtmlTagRenderer().render(metadata)

    for i in range(1000):
        assert f'<meta name="key_{i}" content="value_{i}">' in html
    assert "<title>" not in html


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", "plain"),
        ("a & b", "a &amp; b"),
        ("<b>", "&lt;b&gt;"),
        ('"q"', "&quot;q&quot;"),
        ("it's", "it&#x27;s"),
        ("a/b", "a&#x2F;b"),
        ("&amp;", "&amp;amp;"),
    ],
)
def test_escape_value(value: str, expected: str) -> None:
    assert escape_value(value) == expected


@pytest.mark.parametrize("value", ["<script>", "\"'&<>/", "</script><script>alert(1)</script>", "a\"onmouseover='x'"])
def test_escaped_values_carry_no_markup_characters(value: str) -> None:
    escaped = escape_value(value)

    for char in "<>\"'/":
        assert char not in escaped
    assert "&" not in re.sub(r"&(amp|lt|gt|quot|#x27|#x2F);", "", escaped)
