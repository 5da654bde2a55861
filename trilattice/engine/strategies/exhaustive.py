"""Exhaustive mode — every coloring of the shape, in base-3 index order.

Index k maps to the coloring whose i-th cell (shape order) gets color
digit_i(k) + 1, least-significant digit first. The 3^N indices are visited
exactly once each. Cost is exponential in N; bounding N is up to the caller.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from trilattice.engine.components import count_components
from trilattice.engine.config import SearchConfig
from trilattice.engine.matrix import evaluate_minors
from trilattice.engine.registry import SearchMode, strategy
from trilattice.engine.session import SearchSession
from trilattice.lattice.coloring import Coloring
from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell


def index_to_coloring(index: int, shape: Sequence[Cell]) -> Coloring:
    coloring: Coloring = {}
    remaining = index
    for cell in shape:
        remaining, digit = divmod(remaining, 3)
        coloring[cell] = Color(digit + 1)
    return coloring


@strategy(mode=SearchMode.EXHAUSTIVE, description="Enumerate all 3^N colorings of the shape")
class ExhaustiveStrategy:
    bounded = True

    def __init__(
        self,
        shape: Sequence[Cell],
        seed_coloring: Mapping[Cell, Color] | None = None,
        config: SearchConfig | None = None,
    ) -> None:
        # Every shape cell is colored here, so the seed coloring plays no part
        self.shape = tuple(shape)
        self.total = 3 ** len(self.shape)
        self.next_index = 0

    def advance(self, session: SearchSession, limit: int) -> bool:
        stop = min(self.total, self.next_index + limit)
        for index in range(self.next_index, stop):
            coloring = index_to_coloring(index, self.shape)
            session.generated += 1
            session.evaluated += 1
            evaluation = evaluate_minors(list(coloring.items()), early_exit=True)
            if evaluation.passed:
                session.record(coloring, evaluation.minors, index + 1, count_components(coloring))
        self.next_index = stop
        return self.next_index >= self.total
