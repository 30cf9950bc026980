"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mdbook_metadata.contracts.document import ErrorPolicy


class MetadataConfig(BaseModel):
    """Settings read from the ``[preprocessor.metadata]`` table of ``book.toml``.

    Attributes:
        valid_tags: Keys allowed into the rendered output. *None* allows every key.
        continue_on_error: Skip malformed metadata lines with a warning instead of
            failing the chapter. Default is *True*.
    """

    valid_tags: list[str] | None = Field(default=None, alias="valid-tags")
    continue_on_error: bool = Field(default=True, alias="continue-on-error")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    @property
    def error_policy(self) -> ErrorPolicy:
        return ErrorPolicy.from_continue_on_error(self.continue_on_error)
