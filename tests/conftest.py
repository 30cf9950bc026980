"""Shared test fixtures for mdbook-metadata tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


def _chapter(name: str, content: str, sub_items: list[Any] | None = None) -> dict[str, Any]:
    return {
        "Chapter": {
            "name": name,
            "content": content,
            "number": None,
            "sub_items": sub_items or [],
            "path": f"{name.lower().replace(' ', '_')}.md",
            "source_path": f"{name.lower().replace(' ', '_')}.md",
            "parent_names": [],
        }
    }


@pytest.fixture
def make_chapter() -> Callable[..., dict[str, Any]]:
    """Factory for mdBook chapter items."""
    return _chapter


@pytest.fixture
def sample_book() -> dict[str, Any]:
    """A book with nested chapters, a separator and a part title."""
    return {
        "sections": [
            _chapter("Intro", "---\ntitle: Welcome\nauthor: Jane Doe\n---\n\n# Intro\n"),
            "Separator",
            {"PartTitle": "Guide"},
            _chapter(
                "Guide",
                "# Guide without metadata\n",
                sub_items=[_chapter("Setup", "---\ndescription: Install <it>\n---\nSetup steps.")],
            ),
        ],
        "__non_exhaustive": None,
    }


@pytest.fixture
def sample_context() -> dict[str, Any]:
    return {
        "root": "/tmp/book",
        "config": {
            "book": {"authors": ["Jane Doe"], "language": "en", "src": "src", "title": "Sample"},
            "preprocessor": {"metadata": {"command": "mdbook-metadata"}},
        },
        "renderer": "html",
        "mdbook_version": "0.4.40",
    }
