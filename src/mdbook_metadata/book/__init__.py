"""mdBook payload handling."""

from mdbook_metadata.book.loader import parse_input, read_input, write_book
from mdbook_metadata.book.walker import BookWalker, iter_chapters

__all__ = ["BookWalker", "iter_chapters", "parse_input", "read_input", "write_book"]
