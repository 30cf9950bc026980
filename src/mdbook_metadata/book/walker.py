"""Walk the chapters of an mdBook book payload."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from mdbook_metadata.contracts.document import DocumentUnit

# mdBook 0.4 names the top-level list "sections"; later releases use "items".
_ITEM_LISTS = ("sections", "items")


def iter_chapters(book: dict[str, Any]) -> Iterator[dict[str, Any]]:
    """Yield every chapter object of *book*, depth first, in book order.

    Separators and part titles are skipped.
    """
    for key in _ITEM_LISTS:
        items = book.get(key)
        if isinstance(items, list):
            yield from _walk(items)
            return


def _walk(items: list[Any]) -> Iterator[dict[str, Any]]:
    for item in items:
        if not isinstance(item, dict):
            continue
        chapter = item.get("Chapter")
        if not isinstance(chapter, dict):
            continue
        yield chapter
        sub_items = chapter.get("sub_items")
        if isinstance(sub_items, list):
            yield from _walk(sub_items)


class BookWalker:
    """Expose the chapters of a book as :class:`DocumentUnit` objects.

    Units are detached copies; :meth:`commit` writes their content back into the
    book payload so untouched fields survive as-is.
    """

    def __init__(self, book: dict[str, Any]) -> None:
        self._book = book
        self._bindings: list[tuple[dict[str, Any], str, DocumentUnit]] = []
        for chapter in iter_chapters(book):
            original = str(chapter.get("content") or "")
            unit = DocumentUnit(name=str(chapter.get("name", "")), content=original)
            self._bindings.append((chapter, original, unit))

    @property
    def book(self) -> dict[str, Any]:
        return self._book

    def units(self) -> list[DocumentUnit]:
        return [unit for _, _, unit in self._bindings]

    def commit(self) -> int:
        """Copy changed unit content back into the book. Returns the change count."""
        changed = 0
        for chapter, original, unit in self._bindings:
            if unit.content != original:
                chapter["content"] = unit.content
                changed += 1
        return changed
