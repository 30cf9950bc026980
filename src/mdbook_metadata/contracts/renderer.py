"""Renderer contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping


class TagRenderer(ABC):
    @abstractmethod
    def render(self, metadata: Mapping[str, str]) -> str: ...  # pragma: no cover
