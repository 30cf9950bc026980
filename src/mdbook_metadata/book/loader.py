"""Read the ``[context, book]`` pair mdBook sends to preprocessors."""

from __future__ import annotations

import json
from typing import IO, Any

from mdbook_metadata.contracts.exceptions import BookLoadError


def parse_input(raw: str) -> tuple[dict[str, Any], dict[str, Any]]:
    """Decode the preprocessor payload.

    Raises:
        BookLoadError: The payload is not JSON or not a ``[context, book]`` array
            of two objects.
    """
    try:
        payload: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise BookLoadError(f"invalid JSON on preprocessor input: {exc}") from exc

    if not isinstance(payload, list) or len(payload) != 2:
        raise BookLoadError("preprocessor input must be a [context, book] array")
    context, book = payload
    if not isinstance(context, dict):
        raise BookLoadError("preprocessor context must be a JSON object")
    if not isinstance(book, dict):
        raise BookLoadError("book must be a JSON object")
    return context, book


def read_input(stream: IO[str]) -> tuple[dict[str, Any], dict[str, Any]]:
    try:
        raw = stream.read()
    except OSError as exc:
        raise BookLoadError(f"failed reading preprocessor input: {exc}") from exc
    return parse_input(raw)


def write_book(book: dict[str, Any], stream: IO[str]) -> None:
    json.dump(book, stream, ensure_ascii=False)
    stream.flush()
