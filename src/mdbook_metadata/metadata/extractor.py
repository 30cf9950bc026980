"""Locate the metadata block at the front of a chapter."""

from __future__ import annotations

import re

from mdbook_metadata.contracts.document import MetadataBlock

# An opening ``---`` line and the first later ``---`` line, across blank lines.
_METADATA_BLOCK_RE = re.compile(r"^---\r?$(.*?)^---\r?$", re.MULTILINE | re.DOTALL)


def extract_block(content: str) -> MetadataBlock:
    """Split *content* into its metadata block and the remaining body.

    Only the first block is recognised. Whitespace directly after the removed
    block is trimmed; text before it is kept as-is.

    Args:
        content: Raw chapter text.

    Returns:
        The block interior (``None`` when there is no block) and the body.
    """
    match = _METADATA_BLOCK_RE.search(content)
    if match is None:
        return MetadataBlock(block=None, body=content)
    body = content[: match.start()] + content[match.end() :].lstrip()
    return MetadataBlock(block=match.group(1), body=body)


class BlockExtractor:
    """Object wrapper around :func:`extract_block` for composition."""

    def extract(self, content: str) -> MetadataBlock:
        return extract_block(content)
