"""Config loading from an mdBook context or a ``book.toml`` file."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from mdbook_metadata.contracts.config import MetadataConfig
from mdbook_metadata.contracts.exceptions import ConfigError

PREPROCESSOR_NAME = "metadata"


def _preprocessor_table(book_config: Mapping[str, Any]) -> Any:
    preprocessors = book_config.get("preprocessor")
    if preprocessors is None:
        return {}
    if not isinstance(preprocessors, Mapping):
        raise ConfigError("'preprocessor' must be a table")
    return preprocessors.get(PREPROCESSOR_NAME, {})


def config_from_table(table: Any) -> MetadataConfig:
    try:
        return MetadataConfig.model_validate(table)
    except ValidationError as exc:
        raise ConfigError(f"invalid [preprocessor.{PREPROCESSOR_NAME}] config: {exc}") from exc


def config_from_context(context: Mapping[str, Any]) -> MetadataConfig:
    """Build the config from the ``config`` object mdBook passes in its context."""
    book_config = context.get("config") or {}
    if not isinstance(book_config, Mapping):
        raise ConfigError("preprocessor context 'config' must be an object")
    return config_from_table(_preprocessor_table(book_config))


def load_config(path: str | Path) -> MetadataConfig:
    """Read ``[preprocessor.metadata]`` from a ``book.toml`` file."""
    config_path = Path(path).expanduser().resolve()
    try:
        raw_payload = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in config file: {config_path}") from exc
    return config_from_table(_preprocessor_table(raw_payload))
