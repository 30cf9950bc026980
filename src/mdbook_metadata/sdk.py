"""SDK composition root for mdbook-metadata."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mdbook_metadata.book.walker import BookWalker
from mdbook_metadata.config.loader import PREPROCESSOR_NAME, config_from_context
from mdbook_metadata.contracts.config import MetadataConfig
from mdbook_metadata.contracts.document import PreprocessResult
from mdbook_metadata.contracts.exceptions import ConfigError
from mdbook_metadata.contracts.progress import PreprocessProgress
from mdbook_metadata.contracts.renderer import TagRenderer
from mdbook_metadata.engine.transformer import DocumentTransformer
from mdbook_metadata.renderers import create_renderer


class MetadataPreprocessor:
    """mdbook-metadata SDK public API."""

    name = PREPROCESSOR_NAME

    def __init__(
        self,
        *,
        config: MetadataConfig,
        renderer: TagRenderer,
        progress: PreprocessProgress | None = None,
    ) -> None:
        self._config = config
        self._transformer = DocumentTransformer(config, renderer=renderer, progress=progress)
        self.last_result: PreprocessResult | None = None

    @classmethod
    def from_config(
        cls,
        config: MetadataConfig,
        *,
        renderer_name: str = "html",
        progress: PreprocessProgress | None = None,
    ) -> MetadataPreprocessor:
        try:
            renderer = create_renderer(renderer_name)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        return cls(config=config, renderer=renderer, progress=progress)

    @classmethod
    def from_context(
        cls,
        context: Mapping[str, Any],
        *,
        progress: PreprocessProgress | None = None,
    ) -> MetadataPreprocessor:
        return cls.from_config(config_from_context(context), progress=progress)

    @property
    def config(self) -> MetadataConfig:
        return self._config

    @staticmethod
    def supports_renderer(renderer: str) -> bool:
        # Head tags are plain text in the chapter, so every renderer can take them.
        return True

    def run(self, book: dict[str, Any]) -> dict[str, Any]:
        """Transform every chapter of *book* in place and return it.

        Raises:
            PreprocessError: Some chapters failed under the strict policy. The
                book still carries the chapters that were transformed.
        """
        walker = BookWalker(book)
        try:
            self.last_result = self._transformer.run(walker.units())
        finally:
            walker.commit()
        return walker.book
