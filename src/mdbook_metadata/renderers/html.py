"""HTML head tag renderer."""

from __future__ import annotations

import html
import logging
from collections.abc import Mapping

from mdbook_metadata.contracts.renderer import TagRenderer

logger = logging.getLogger(__name__)

TITLE_KEY = "title"


def escape_value(value: str) -> str:
    """Escape *value* for use in element text or a double-quoted attribute.

    Forward slashes are encoded as well so a value cannot close an enclosing
    element such as ``</script>``.
    """
    return html.escape(value, quote=True).replace("/", "&#x2F;")


class HtmlTagRenderer(TagRenderer):
    """Render metadata as ``<title>`` and ``<meta>`` lines.

    Keys are written as-is; only values are escaped.
    """

    def render(self, metadata: Mapping[str, str]) -> str:
        lines: list[str] = []
        for key, value in metadata.items():
            escaped = escape_value(value)
            if key == TITLE_KEY:
                lines.append(f"<title>{escaped}</title>\n")
            else:
                lines.append(f'<meta name="{key}" content="{escaped}">\n')
        tags = "".join(lines)
        logger.debug("Generated HTML tags: %s", tags)
        return tags
