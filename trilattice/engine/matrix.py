"""Signed color-weighted matrix and the non-degeneracy test.

For colored cells i != j: M[i][j] = -rel_diff(c_i, c_j) when the cells are
adjacent, else 0. The diagonal M[i][i] is the sum of rel_diff(c_i, c_j) over
neighbours j, so every row sums to 0. A coloring passes when it has at least
two colored cells and every principal minor exceeds NONDEGENERACY_EPSILON in
magnitude.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from trilattice.engine.constants import NONDEGENERACY_EPSILON
from trilattice.engine.linalg import principal_minors
from trilattice.lattice.colors import Color, rel_diff
from trilattice.lattice.geometry import Cell, neighbors


@dataclass(frozen=True)
class MinorEvaluation:
    minors: tuple[tuple[int, float], ...]
    passed: bool


def build_signed_matrix(entries: Sequence[tuple[Cell, Color]]) -> NDArray[np.int64]:
    """N×N signed matrix over ``entries`` in the given row order."""
    n = len(entries)
    mat = np.zeros((n, n), dtype=np.int64)
    index = {cell: i for i, (cell, _) in enumerate(entries)}

    # Only the three lattice neighbours can be adjacent
    for i, (cell, color) in enumerate(entries):
        for nb in neighbors(cell):
            j = index.get(nb)
            if j is None:
                continue
            rel = rel_diff(color, entries[j][1])
            mat[i, j] = -rel
            mat[i, i] += rel
    return mat


def evaluate_minors(
    entries: Sequence[tuple[Cell, Color]],
    early_exit: bool = False,
    epsilon: float = NONDEGENERACY_EPSILON,
) -> MinorEvaluation:
    """Compute the principal minors of the signed matrix and the pass flag.

    ``early_exit`` stops at the first failing minor. A passing evaluation always
    holds all N minors.
    """
    n = len(entries)
    if n <= 1:
        return MinorEvaluation(minors=(), passed=False)

    mat = build_signed_matrix(entries)
    minors = principal_minors(mat, stop_at_or_below=epsilon if early_exit else None)
    passed = len(minors) == n and all(abs(value) > epsilon for _, value in minors)
    return MinorEvaluation(minors=tuple(minors), passed=passed)
