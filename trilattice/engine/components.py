"""Per-color connected components and the randomized-search priority score."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell, neighbors


@dataclass(frozen=True)
class ComponentCounts:
    white: int = 0
    black: int = 0
    gray: int = 0

    @property
    def total(self) -> int:
        return self.white + self.black + self.gray

    def as_dict(self) -> dict[str, int]:
        return {"white": self.white, "black": self.black, "gray": self.gray}


def count_components(coloring: Mapping[Cell, Color | None]) -> ComponentCounts:
    """Count maximal same-color connected regions for each color.

    Flood fill uses an explicit stack, so region size is not bounded by the
    recursion limit. Uncolored cells are never entered.
    """
    visited: set[Cell] = set()
    counts = {Color.WHITE: 0, Color.BLACK: 0, Color.GRAY: 0}

    for start, color in coloring.items():
        if color is None or start in visited:
            continue
        counts[Color(color)] += 1
        visited.add(start)
        stack = [start]
        while stack:
            cell = stack.pop()
            for nb in neighbors(cell):
                if nb not in visited and coloring.get(nb) == color:
                    visited.add(nb)
                    stack.append(nb)

    return ComponentCounts(
        white=counts[Color.WHITE],
        black=counts[Color.BLACK],
        gray=counts[Color.GRAY],
    )


def priority_score(counts: ComponentCounts) -> int:
    """white × black × gray component counts; lower is evaluated first.

    An unproven ordering heuristic: a small product suggests at least one
    color forms large contiguous regions. It only reorders evaluation within
    a chunk and never decides whether a candidate passes.
    """
    return counts.white * counts.black * counts.gray
