"""Document unit and batch outcome contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class ErrorPolicy(StrEnum):
    """How malformed metadata lines are handled."""

    TOLERANT = "tolerant"
    STRICT = "strict"

    @classmethod
    def from_continue_on_error(cls, continue_on_error: bool) -> ErrorPolicy:
        return cls.TOLERANT if continue_on_error else cls.STRICT


class DocumentUnit(BaseModel):
    """One addressable piece of text content, e.g. an mdBook chapter.

    ``content`` is replaced in place when the unit is transformed.
    """

    name: str
    content: str


class MetadataBlock(BaseModel):
    """Result of splitting a document into its metadata block and body.

    Attributes:
        block: Interior text between the delimiter lines, or *None* when the
            document has no metadata block.
        body: Document text with the block removed.
    """

    block: str | None = None
    body: str

    model_config = {"frozen": True}

    @property
    def found(self) -> bool:
        return self.block is not None


class PreprocessResult(BaseModel):
    """Outcome of running the transformer over a batch of document units."""

    processed: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
