"""Renderer implementations and factory."""

from mdbook_metadata.renderers.factory import create_renderer
from mdbook_metadata.renderers.html import HtmlTagRenderer, escape_value

__all__ = ["HtmlTagRenderer", "create_renderer", "escape_value"]
