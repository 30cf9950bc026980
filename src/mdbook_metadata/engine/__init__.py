"""Transformation engine."""

from mdbook_metadata.engine.transformer import DocumentTransformer

__all__ = ["DocumentTransformer"]
