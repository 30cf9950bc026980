"""Rich-based preprocessing progress display."""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TextColumn

from mdbook_metadata.contracts.progress import PreprocessProgress


class RichPreprocessProgress(PreprocessProgress):
    """Chapter counter drawn on stderr; stdout is reserved for the book JSON.

    Use as a context manager::

        with RichPreprocessProgress() as progress:
            MetadataPreprocessor.from_context(context, progress=progress).run(book)
    """

    def __init__(self, console: Console | None = None) -> None:
        self._progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(bar_width=24),
            MofNCompleteColumn(),
            TextColumn("chapters"),
            console=console or Console(stderr=True),
        )
        self._phases: dict[str, TaskID] = {}

    def __enter__(self) -> RichPreprocessProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def phase_start(self, phase: str, total: int | None = None) -> None:
        self._phases[phase] = self._progress.add_task(f"[cyan]{phase}[/]", total=total)

    def item_done(self, phase: str) -> None:
        if phase in self._phases:
            self._progress.advance(self._phases[phase])

    def phase_done(self, phase: str) -> None:
        if phase in self._phases:
            self._progress.update(self._phases[phase], description=f"[green]{phase} done[/]")

    def phase_error(self, phase: str, error: BaseException) -> None:
        if phase in self._phases:
            self._progress.update(self._phases[phase], description=f"[red]{phase} failed[/]")
