"""Public contracts for mdbook-metadata."""

from mdbook_metadata.contracts.config import MetadataConfig
from mdbook_metadata.contracts.document import DocumentUnit, ErrorPolicy, MetadataBlock, PreprocessResult
from mdbook_metadata.contracts.exceptions import (
    BookLoadError,
    ConfigError,
    ImproperlyFormattedLineError,
    MetadataPreprocessorError,
    PreprocessError,
)
from mdbook_metadata.contracts.progress import NullPreprocessProgress, PreprocessProgress
from mdbook_metadata.contracts.renderer import TagRenderer

__all__ = [
    "BookLoadError",
    "ConfigError",
    "DocumentUnit",
    "ErrorPolicy",
    "ImproperlyFormattedLineError",
    "MetadataBlock",
    "MetadataConfig",
    "MetadataPreprocessorError",
    "NullPreprocessProgress",
    "PreprocessError",
    "PreprocessProgress",
    "PreprocessResult",
    "TagRenderer",
]
