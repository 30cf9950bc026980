"""Exception hierarchy for mdbook-metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mdbook_metadata.contracts.document import PreprocessResult


class MetadataPreprocessorError(Exception):
    """Base exception for all mdbook-metadata errors."""


class ConfigError(MetadataPreprocessorError):
    """Configuration loading or validation failure."""


class BookLoadError(MetadataPreprocessorError):
    """Preprocessor input could not be decoded into a context and book."""


class ImproperlyFormattedLineError(MetadataPreprocessorError):
    """A non-blank metadata line without a ``key: value`` shape.

    Attributes:
        line: The offending line exactly as it appeared in the block.
    """

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Improperly formatted metadata line: '{line}'")


class PreprocessError(MetadataPreprocessorError):
    """One or more document units failed to parse.

    Attributes:
        errors: Per-unit error messages in processing order.
        result: Outcome of the batch; successful units are already transformed.
    """

    def __init__(self, errors: list[str], result: PreprocessResult | None = None) -> None:
        self.errors = errors
        self.result = result
        super().__init__("\n".join(errors))
