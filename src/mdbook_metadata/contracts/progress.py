"""Progress reporting contract for the preprocessing pipeline.

The transformer emits phase lifecycle events; consumers (e.g. the CLI's Rich
progress bar) implement ``PreprocessProgress`` to render feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class PreprocessProgress(ABC):
    """Observer interface for preprocessing progress events."""

    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None) -> None:
        """A phase is starting. *total* is ``None`` for indeterminate phases."""
        ...  # pragma: no cover

    @abstractmethod
    def item_done(self, phase: str) -> None:
        """One document unit within *phase* has completed."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None:
        """The *phase* has finished successfully."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        """The *phase* finished with *error*."""
        ...  # pragma: no cover


class NullPreprocessProgress(PreprocessProgress):
    """No-op implementation used when no progress display is requested."""

    def phase_start(self, phase: str, total: int | None = None) -> None:
        pass

    def item_done(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
