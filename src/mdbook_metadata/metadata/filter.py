"""Restrict parsed metadata to the configured tags."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


class TagFilter:
    """Keep only allow-listed keys. Without an allow-list every key passes."""

    def __init__(self, valid_tags: Iterable[str] | None = None) -> None:
        self._valid_tags = frozenset(valid_tags) if valid_tags is not None else None

    @property
    def valid_tags(self) -> frozenset[str] | None:
        return self._valid_tags

    def apply(self, metadata: Mapping[str, str]) -> dict[str, str]:
        if self._valid_tags is None:
            return dict(metadata)
        return {key: value for key, value in metadata.items() if key in self._valid_tags}
