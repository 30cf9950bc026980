"""Renderer factory."""

from __future__ import annotations

from mdbook_metadata.contracts.renderer import TagRenderer
from mdbook_metadata.renderers.html import HtmlTagRenderer

RENDERERS: dict[str, type[TagRenderer]] = {"html": HtmlTagRenderer}


def create_renderer(name: str, **kwargs: object) -> TagRenderer:
    renderer_cls = RENDERERS.get(name)
    if renderer_cls is None:
        raise ValueError(f"Unknown renderer: {name}")
    return renderer_cls(**kwargs)
