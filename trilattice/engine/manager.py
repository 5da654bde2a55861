"""SearchManager — the engine surface consumed by hosts (HTTP API, UI, tests).

Exactly one session is active. Starting a new search while one is running
either cancels and replaces it, or is rejected, depending on
``replace_running``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from trilattice.engine.config import SearchConfig
from trilattice.engine.constants import DEFAULT_CHUNK_SIZE
from trilattice.engine.controller import SearchController, create_controller, result_at
from trilattice.engine.registry import SearchMode
from trilattice.engine.session import SearchResult, SearchStatus, apply_result
from trilattice.errors import InvalidStartRequest, SearchAlreadyRunning, UnknownSession
from trilattice.lattice.coloring import Coloring, colored_cells
from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell

logger = logging.getLogger(__name__)


class SearchManager:
    def __init__(
        self,
        replace_running: bool = True,
        default_chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self.replace_running = replace_running
        self.default_chunk_size = default_chunk_size
        self._active: SearchController | None = None

    @property
    def active(self) -> SearchController | None:
        return self._active

    def start_search(
        self,
        shape: Sequence[Cell],
        mode: SearchMode,
        seed_coloring: Mapping[Cell, Color] | None = None,
        config: SearchConfig | None = None,
    ) -> str:
        """Start a search and return its handle.

        An empty ``shape`` is derived from the seed coloring's colored cells.
        With neither available the request fails before any session exists.
        """
        shape = tuple(shape)
        if not shape and seed_coloring:
            shape = colored_cells(seed_coloring)
        if not shape:
            raise InvalidStartRequest("no shape and no colored cells to derive one from")

        current = self._active
        if current is not None and current.status is SearchStatus.RUNNING:
            if not self.replace_running:
                raise SearchAlreadyRunning(f"search {current.session.id} is still running")
            logger.info("Replacing running search %s", current.session.id)
            current.abort()

        config = config or SearchConfig(chunk_size=self.default_chunk_size)
        controller = create_controller(shape, mode, seed_coloring, config)
        controller.start()
        self._active = controller
        return controller.session.id

    def _get(self, handle: str) -> SearchController:
        controller = self._active
        if controller is None or controller.session.id != handle:
            raise UnknownSession(handle)
        return controller

    def step(self, handle: str, chunks: int = 1) -> SearchStatus:
        controller = self._get(handle)
        for _ in range(chunks):
            if controller.step().is_terminal:
                break
        return controller.status

    def cancel(self, handle: str) -> None:
        self._get(handle).cancel()

    def poll(self, handle: str, since: int = 0) -> dict[str, Any]:
        return self._get(handle).snapshot(since=since)

    def result(self, handle: str, index: int) -> SearchResult:
        return result_at(self._get(handle).session, index)

    @staticmethod
    def apply_result(result: SearchResult) -> Coloring:
        return apply_result(result)
