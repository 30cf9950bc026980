"""Public API surface for mdbook-metadata."""

__version__ = "0.1.0"

from mdbook_metadata.book import BookWalker, iter_chapters, parse_input, read_input, write_book
from mdbook_metadata.config import config_from_context, load_config
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
from mdbook_metadata.engine import DocumentTransformer
from mdbook_metadata.metadata import BlockExtractor, LineParser, TagFilter, extract_block
from mdbook_metadata.renderers import HtmlTagRenderer, create_renderer, escape_value
from mdbook_metadata.sdk import MetadataPreprocessor

__all__ = [
    "BlockExtractor",
    "BookLoadError",
    "BookWalker",
    "ConfigError",
    "DocumentTransformer",
    "DocumentUnit",
    "ErrorPolicy",
    "HtmlTagRenderer",
    "ImproperlyFormattedLineError",
    "LineParser",
    "MetadataBlock",
    "MetadataConfig",
    "MetadataPreprocessor",
    "MetadataPreprocessorError",
    "NullPreprocessProgress",
    "PreprocessError",
    "PreprocessProgress",
    "PreprocessResult",
    "TagFilter",
    "TagRenderer",
    "__version__",
    "config_from_context",
    "create_renderer",
    "escape_value",
    "extract_block",
    "iter_chapters",
    "load_config",
    "parse_input",
    "read_input",
    "write_book",
]
