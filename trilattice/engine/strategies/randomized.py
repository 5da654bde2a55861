"""Randomized mode — priority-ordered random sampling until cancelled.

Each chunk draws independent uniform colorings of the currently colored shape
cells, scores them by component-count product, and evaluates them lowest
score first. Results keep their generation-order attempt number. There is no
natural end; SearchConfig.max_attempts is an opt-in bound.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import numpy as np

from trilattice.engine.components import ComponentCounts, count_components, priority_score
from trilattice.engine.config import SearchConfig
from trilattice.engine.matrix import evaluate_minors
from trilattice.engine.registry import SearchMode, strategy
from trilattice.engine.session import SearchSession
from trilattice.lattice.coloring import Coloring
from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell


@dataclass
class _Candidate:
    coloring: Coloring
    components: ComponentCounts
    priority: int
    attempt: int


@strategy(mode=SearchMode.RANDOMIZED, description="Random colorings, evaluated in priority order")
class RandomizedStrategy:
    total = None

    def __init__(
        self,
        shape: Sequence[Cell],
        seed_coloring: Mapping[Cell, Color] | None = None,
        config: SearchConfig | None = None,
    ) -> None:
        config = config or SearchConfig()
        # Shape membership is necessary but not sufficient: the cell must be colored now
        if seed_coloring is None:
            self.cells = tuple(shape)
        else:
            self.cells = tuple(cell for cell in shape if seed_coloring.get(cell) is not None)
        self.rng = np.random.default_rng(config.seed)
        self.max_attempts = config.max_attempts
        self.bounded = config.max_attempts is not None

    def generate(self, count: int, first_attempt: int) -> list[_Candidate]:
        draws = self.rng.integers(1, 4, size=(count, len(self.cells)))
        candidates: list[_Candidate] = []
        for offset, row in enumerate(draws):
            coloring = {cell: Color(int(v)) for cell, v in zip(self.cells, row)}
            components = count_components(coloring)
            candidates.append(_Candidate(
                coloring=coloring,
                components=components,
                priority=priority_score(components),
                attempt=first_attempt + offset,
            ))
        return candidates

    def advance(self, session: SearchSession, limit: int) -> bool:
        count = limit
        if self.max_attempts is not None:
            count = min(count, self.max_attempts - session.generated)

        candidates = self.generate(count, session.generated + 1)
        session.generated += len(candidates)

        # Stable sort: equal scores keep generation order
        candidates.sort(key=lambda c: c.priority)
        for candidate in candidates:
            session.evaluated += 1
            evaluation = evaluate_minors(list(candidate.coloring.items()), early_exit=True)
            if evaluation.passed:
                session.record(candidate.coloring, evaluation.minors, candidate.attempt, candidate.components)

        return self.max_attempts is not None and session.generated >= self.max_attempts
