"""Per-chapter metadata transformation and batch aggregation."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from mdbook_metadata.contracts.config import MetadataConfig
from mdbook_metadata.contracts.document import DocumentUnit, PreprocessResult
from mdbook_metadata.contracts.exceptions import ImproperlyFormattedLineError, PreprocessError
from mdbook_metadata.contracts.progress import NullPreprocessProgress, PreprocessProgress
from mdbook_metadata.contracts.renderer import TagRenderer
from mdbook_metadata.metadata.extractor import BlockExtractor
from mdbook_metadata.metadata.filter import TagFilter
from mdbook_metadata.metadata.parser import LineParser
from mdbook_metadata.renderers.html import HtmlTagRenderer

logger = logging.getLogger(__name__)

PHASE = "Preprocess"


class DocumentTransformer:
    """Replace each unit's metadata block with rendered head tags.

    The transformer only reads its configuration, so one instance can be shared
    across units and threads.
    """

    def __init__(
        self,
        config: MetadataConfig | None = None,
        *,
        renderer: TagRenderer | None = None,
        progress: PreprocessProgress | None = None,
    ) -> None:
        self._config = config or MetadataConfig()
        self._extractor = BlockExtractor()
        self._parser = LineParser(self._config.error_policy)
        self._filter = TagFilter(self._config.valid_tags)
        self._renderer = renderer or HtmlTagRenderer()
        self._progress = progress or NullPreprocessProgress()

    @property
    def config(self) -> MetadataConfig:
        return self._config

    def transform(self, unit: DocumentUnit) -> bool:
        """Transform *unit* in place.

        Returns:
            *True* when the unit had a metadata block.

        Raises:
            ImproperlyFormattedLineError: Under the strict policy. ``unit.content``
                is left untouched.
        """
        extracted = self._extractor.extract(unit.content)
        if not extracted.found:
            return False

        metadata = self._parser.parse(extracted.block)
        logger.debug("Parsed metadata for %s: %s", unit.name, metadata)
        tags = self._renderer.render(self._filter.apply(metadata))
        unit.content = f"{tags}\n{extracted.body}" if tags else extracted.body
        return True

    def run(self, units: Iterable[DocumentUnit]) -> PreprocessResult:
        """Transform every unit, collecting failures instead of stopping.

        Raises:
            PreprocessError: At least one unit failed. Units that succeeded
                have already been transformed; ``exc.result`` lists them.
        """
        batch = list(units)
        result = PreprocessResult()
        self._progress.phase_start(PHASE, total=len(batch))

        for unit in batch:
            try:
                found = self.transform(unit)
            except ImproperlyFormattedLineError as exc:
                message = f"Error parsing metadata in chapter '{unit.name}': {exc}"
                logger.error("%s", message)
                result.errors.append(message)
            else:
                (result.processed if found else result.skipped).append(unit.name)
            self._progress.item_done(PHASE)

        if result.errors:
            error = PreprocessError(result.errors, result)
            logger.error("Errors occurred during preprocessing: \n%s", error)
            self._progress.phase_error(PHASE, error)
            raise error

        self._progress.phase_done(PHASE)
        return result
