"""Metadata block extraction, parsing and filtering."""

from mdbook_metadata.metadata.extractor import BlockExtractor, extract_block
from mdbook_metadata.metadata.filter import TagFilter
from mdbook_metadata.metadata.parser import LineParser, split_line

__all__ = ["BlockExtractor", "LineParser", "TagFilter", "extract_block", "split_line"]
