"""Search controller — advances one session a chunk at a time.

Idle → Running → Completed | Cancelled. The host decides when to call
``step()``: a frame callback, an event-loop task, or a test looping
synchronously. Each chunk runs to completion; a cancel request is seen at
the next chunk boundary, so at most one more chunk executes after it.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Generator, Mapping, Sequence
from typing import Any

from trilattice.engine.config import SearchConfig
from trilattice.engine.registry import SearchMode, SearchStrategy, StrategyRegistry, get_registry
from trilattice.engine.session import SearchResult, SearchSession, SearchStatus
from trilattice.errors import InvalidStartRequest
from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell

# Registers the built-in modes
import trilattice.engine.strategies  # noqa: F401

logger = logging.getLogger(__name__)


class SearchController:
    """Owns a SearchSession and the strategy that fills it."""

    def __init__(
        self,
        session: SearchSession,
        strategy: SearchStrategy,
        config: SearchConfig | None = None,
    ) -> None:
        self.session = session
        self.strategy = strategy
        self.config = config or SearchConfig()

    @property
    def status(self) -> SearchStatus:
        return self.session.status

    def start(self) -> None:
        session = self.session
        if session.status is not SearchStatus.IDLE:
            raise ValueError(f"Search {session.id} already {session.status.value}")
        if not session.shape:
            raise InvalidStartRequest("cannot search an empty shape")
        session.status = SearchStatus.RUNNING
        session.started_at = time.perf_counter()
        logger.info(
            "Search %s started: %s over %d cells (chunk size %d)",
            session.id,
            session.mode.value,
            len(session.shape),
            self.config.chunk_size,
        )

    def step(self) -> SearchStatus:
        """Run one chunk unless the session is finished or cancellation was requested."""
        session = self.session
        if session.status is not SearchStatus.RUNNING:
            return session.status

        if session.token.cancelled:
            self._finish(SearchStatus.CANCELLED)
            return session.status

        t0 = time.perf_counter()
        exhausted = self.strategy.advance(session, self.config.chunk_size)
        session.chunks += 1
        logger.debug(
            "  %s chunk %d: %d evaluated, %d found in %.1fms",
            session.id,
            session.chunks,
            session.evaluated,
            session.found,
            (time.perf_counter() - t0) * 1000,
        )

        if exhausted:
            self._finish(SearchStatus.COMPLETED)
        return session.status

    def cancel(self) -> None:
        """Request cancellation; takes effect at the next chunk boundary."""
        self.session.token.cancel()

    def abort(self) -> None:
        """Cancel immediately, without waiting for another step. Used on replacement."""
        self.session.token.cancel()
        if self.session.status is SearchStatus.RUNNING:
            self._finish(SearchStatus.CANCELLED)

    def run(self, max_chunks: int | None = None) -> SearchSession:
        """Step synchronously until a terminal status or ``max_chunks`` steps."""
        session = self.session
        unbounded = not self.strategy.bounded and not session.token.cancelled
        if max_chunks is None and unbounded and not session.status.is_terminal:
            raise ValueError(
                "Unbounded randomized search only stops on cancel; pass max_chunks or set max_attempts"
            )
        if session.status is SearchStatus.IDLE:
            self.start()

        chunks = 0
        while not session.status.is_terminal:
            if max_chunks is not None and chunks >= max_chunks:
                break
            self.step()
            chunks += 1
        return session

    def run_streaming(self, max_chunks: int | None = None) -> Generator[dict[str, Any], None, None]:
        """Step like ``run()``, yielding a progress dict after each chunk.

        New results since the previous event are included under ``results``.
        """
        if self.session.status is SearchStatus.IDLE:
            self.start()

        sent = 0
        chunks = 0
        while not self.session.status.is_terminal:
            if max_chunks is not None and chunks >= max_chunks:
                break
            self.step()
            chunks += 1
            event = self.snapshot(since=sent)
            sent = self.session.found
            yield event

    def snapshot(self, since: int = 0) -> dict[str, Any]:
        session = self.session
        return {
            "id": session.id,
            "mode": session.mode.value,
            "status": session.status.value,
            "generated": session.generated,
            "evaluated": session.evaluated,
            "found": session.found,
            "total": session.total,
            "progress": session.progress,
            "elapsed_s": round(session.elapsed, 3),
            "message": session.status_message(),
            "results_offset": since,
            "results": session.results[since:],
        }

    def _finish(self, status: SearchStatus) -> None:
        session = self.session
        session.status = status
        session.finished_at = time.perf_counter()
        logger.info("Search %s %s", session.id, session.status_message())


def create_controller(
    shape: Sequence[Cell],
    mode: SearchMode,
    seed_coloring: Mapping[Cell, Color] | None = None,
    config: SearchConfig | None = None,
    registry: StrategyRegistry | None = None,
) -> SearchController:
    """Factory: build the session and the strategy for ``mode``."""
    config = config or SearchConfig()
    spec = (registry or get_registry()).get(mode)
    strategy = spec.factory(tuple(shape), seed_coloring, config)
    session = SearchSession(
        id=uuid.uuid4().hex,
        mode=mode,
        shape=tuple(shape),
        total=strategy.total,
    )
    return SearchController(session, strategy, config)


def result_at(session: SearchSession, index: int) -> SearchResult:
    if not 0 <= index < session.found:
        raise IndexError(f"Search {session.id} has no result {index}")
    return session.results[index]
