"""Phase progress contract."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PhaseProgress(ABC):
    """Receives lifecycle callbacks for the non-interactive driver phases.

    Phases are reported by name: ``Initialize``, ``Write``, ``Install``,
    ``Finalize``. Prompting is never wrapped, so implementations may hold the
    terminal between ``phase_start`` and ``phase_done``.
    """

    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None) -> None: ...

    @abstractmethod
    def item_done(self, phase: str) -> None: ...

    @abstractmethod
    def phase_done(self, phase: str) -> None: ...

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None: ...


class NullPhaseProgress(PhaseProgress):
    def phase_start(self, phase: str, total: int | None = None) -> None:
        return None

    def item_done(self, phase: str) -> None:
        return None

    def phase_done(self, phase: str) -> None:
        return None

    def phase_error(self, phase: str, error: BaseException) -> None:
        return None
