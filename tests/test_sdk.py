"""Tests for the MetadataPreprocessor SDK facade."""

from __future__ import annotations

from typing import Any

import pytest

from mdbook_metadata import (
    ConfigError,
    HtmlTagRenderer,
    MetadataConfig,
    MetadataPreprocessor,
    PreprocessError,
)


def _content(book: dict[str, Any], *path: int) -> str:
    items = book["sections"]
    node: dict[str, Any] = {}
    for index in path:
        node = items[index]["Chapter"]
        items = node["sub_items"]
    return str(node["content"])


def test_from_context_and_run_transforms_book(sample_context: dict[str, Any], sample_book: dict[str, Any]) -> None:
    preprocessor = MetadataPreprocessor.from_context(sample_context)

    book = preprocessor.run(sample_book)

    intro = _content(book, 0)
    assert "<title>Welcome</title>\n" in intro
    assert '<meta name="author" content="Jane Doe">\n' in intro
    assert intro.endswith("\n\n# Intro\n")
    assert _content(book, 3) == "# Guide without metadata\n"
    assert _content(book, 3, 0) == '<meta name="description" content="Install &lt;it&gt;">\n\nSetup steps.'
    assert preprocessor.last_result is not None
    assert preprocessor.last_result.processed == ["Intro", "Setup"]
    assert preprocessor.last_result.skipped == ["Guide"]


def test_run_with_allow_list(sample_context: dict[str, Any], sample_book: dict[str, Any]) -> None:
    sample_context["config"]["preprocessor"]["metadata"]["valid-tags"] = ["title"]

    book = MetadataPreprocessor.from_context(sample_context).run(sample_book)

    assert _content(book, 0) == "<title>Welcome</title>\n\n# Intro\n"
    assert _content(book, 3, 0) == "Setup steps."


def test_strict_failure_keeps_successful_chapters(sample_book: dict[str, Any]) -> None:
    sample_book["sections"][0]["Chapter"]["content"] = "---\ntitle = Broken\n---\nIntro"
    preprocessor = MetadataPreprocessor.from_config(MetadataConfig(continue_on_error=False))

    with pytest.raises(PreprocessError) as exc_info:
        preprocessor.run(sample_book)

    assert exc_info.value.errors == [
        "Error parsing metadata in chapter 'Intro': Improperly formatted metadata line: 'title = Broken'"
    ]
    assert _content(sample_book, 0) == "---\ntitle = Broken\n---\nIntro"
    assert _content(sample_book, 3, 0).startswith('<meta name="description"')


def test_from_config_rejects_unknown_renderer() -> None:
    with pytest.raises(ConfigError, match="Unknown renderer"):
        MetadataPreprocessor.from_config(MetadataConfig(), renderer_name="latex")


def test_constructor_accepts_explicit_renderer() -> None:
    preprocessor = MetadataPreprocessor(config=MetadataConfig(), renderer=HtmlTagRenderer())

    assert preprocessor.name == "metadata"
    assert preprocessor.config == MetadataConfig()


@pytest.mark.parametrize("renderer", ["html", "markdown", "epub"])
def test_supports_every_renderer(renderer: str) -> None:
    assert MetadataPreprocessor.supports_renderer(renderer) is True
