"""SearchSession — the mutable state of one search run.

Only the controller mutates a session, and only while a chunk executes.
Results are appended in discovery order and never modified afterwards.
"""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field

from trilattice.engine.components import ComponentCounts
from trilattice.engine.registry import SearchMode
from trilattice.lattice.coloring import Coloring, Shape
from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell


class SearchStatus(str, enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (SearchStatus.COMPLETED, SearchStatus.CANCELLED)


class CancellationToken:
    """Cooperative cancel flag, read by the controller between chunks."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


@dataclass(frozen=True)
class SearchResult:
    """A coloring that passed the non-degeneracy test."""

    coloring: tuple[tuple[Cell, Color], ...]
    minors: tuple[tuple[int, float], ...]
    # 1-based: exhaustive index + 1, or generation order in randomized mode
    attempt: int
    components: ComponentCounts


def apply_result(result: SearchResult) -> Coloring:
    """Materialize a stored result's coloring. The result is left untouched."""
    return dict(result.coloring)


@dataclass
class SearchSession:
    id: str
    mode: SearchMode
    shape: Shape
    token: CancellationToken = field(default_factory=CancellationToken)
    status: SearchStatus = SearchStatus.IDLE
    total: int | None = None
    generated: int = 0
    evaluated: int = 0
    chunks: int = 0
    results: list[SearchResult] = field(default_factory=list)
    started_at: float | None = None
    finished_at: float | None = None

    @property
    def found(self) -> int:
        return len(self.results)

    @property
    def elapsed(self) -> float:
        if self.started_at is None:
            return 0.0
        end = self.finished_at if self.finished_at is not None else time.perf_counter()
        return end - self.started_at

    @property
    def progress(self) -> float | None:
        """Percent of the space evaluated; None when the space is unbounded."""
        if not self.total:
            return None
        return self.evaluated / self.total * 100

    def record(self, coloring: Coloring, minors: tuple[tuple[int, float], ...],
               attempt: int, components: ComponentCounts) -> SearchResult:
        result = SearchResult(
            coloring=tuple(coloring.items()),
            minors=minors,
            attempt=attempt,
            components=components,
        )
        self.results.append(result)
        return result

    def status_message(self) -> str:
        elapsed = self.elapsed
        if self.mode is SearchMode.EXHAUSTIVE and self.total:
            counted = f"{self.evaluated:,}/{self.total:,} ({self.progress:.2f}%)"
            if self.status is SearchStatus.COMPLETED:
                return f"Completed: {self.total:,} colorings searched, found {self.found} ({elapsed:.1f}s)"
            if self.status is SearchStatus.CANCELLED:
                return f"Cancelled: {counted}, found {self.found} ({elapsed:.1f}s)"
            return f"Searching... {counted}, found {self.found} ({elapsed:.1f}s)"

        counted = f"generated {self.generated:,}, evaluated {self.evaluated:,}, found {self.found}"
        if self.status is SearchStatus.COMPLETED:
            return f"Completed: {counted} ({elapsed:.1f}s)"
        if self.status is SearchStatus.CANCELLED:
            return f"Cancelled: {counted} ({elapsed:.1f}s)"
        return f"Searching... {counted} ({elapsed:.1f}s)"
