"""Configuration loading."""

from mdbook_metadata.config.loader import PREPROCESSOR_NAME, config_from_context, config_from_table, load_config

__all__ = ["PREPROCESSOR_NAME", "config_from_context", "config_from_table", "load_config"]
