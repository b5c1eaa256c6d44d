"""Rich-based phase progress display."""

from __future__ import annotations

from typing import ClassVar

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from extscaffold.contracts.progress import PhaseProgress


class RichPhaseProgress(PhaseProgress):
    """Terminal progress for the driver phases.

    Counted phases (``Write``) get a bar that lives only between
    ``phase_start`` and ``phase_done``; the rest print a status line. Nothing
    stays live while the package manager owns the terminal.
    """

    _PHASE_LABELS: ClassVar[dict[str, str]] = {
        "Initialize": "[cyan]Initialize[/]",
        "Write": "[green]Write[/]",
        "Install": "[blue]Install[/]",
        "Finalize": "[magenta]Finalize[/]",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._progress: Progress | None = None
        self._task_id: RichTaskID | None = None
        self._phase: str | None = None

    def phase_start(self, phase: str, total: int | None = None) -> None:
        label = self._PHASE_LABELS.get(phase, phase)
        if total is None:
            self._console.print(f"{label} ...")
            return
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description:>14}"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self._console,
            transient=False,
        )
        self._progress.start()
        self._task_id = self._progress.add_task(label, total=total)
        self._phase = phase

    def item_done(self, phase: str) -> None:
        if self._progress is not None and self._task_id is not None and phase == self._phase:
            self._progress.advance(self._task_id)

    def phase_done(self, phase: str) -> None:
        if self._progress is not None and phase == self._phase:
            self._stop()
            return
        self._console.print(f"[green]✓[/green] {self._PHASE_LABELS.get(phase, phase)}")

    def phase_error(self, phase: str, error: BaseException) -> None:
        if self._progress is not None and phase == self._phase:
            self._stop()
        self._console.print(f"[red]✗[/red] {self._PHASE_LABELS.get(phase, phase)}: {error}")

    def _stop(self) -> None:
        assert self._progress is not None
        self._progress.stop()
        self._progress = None
        self._task_id = None
        self._phase = None
