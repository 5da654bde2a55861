"""Determinants and principal minors in float64. No lattice imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from trilattice.engine.constants import PIVOT_EPSILON


def determinant(matrix: ArrayLike, pivot_epsilon: float = PIVOT_EPSILON) -> float:
    """Gaussian elimination with partial pivoting.

    The empty matrix has determinant 1. When the largest candidate pivot in a
    column is below ``pivot_epsilon`` the matrix is singular and the result is
    exactly 0.0, with no further elimination.
    """
    m = np.array(matrix, dtype=np.float64)
    n = len(m)
    if n == 0:
        return 1.0
    if n == 1:
        return float(m[0, 0])

    det = 1.0
    for i in range(n):
        # argmax keeps the first row among equal magnitudes
        pivot = i + int(np.argmax(np.abs(m[i:, i])))
        if abs(m[pivot, i]) < pivot_epsilon:
            return 0.0
        if pivot != i:
            m[[i, pivot]] = m[[pivot, i]]
            det = -det
        det *= m[i, i]
        factors = m[i + 1:, i] / m[i, i]
        m[i + 1:, i:] -= np.outer(factors, m[i, i:])
    return float(det)


def principal_minors(
    matrix: ArrayLike,
    stop_at_or_below: float | None = None,
) -> list[tuple[int, float]]:
    """(i, det of ``matrix`` without row i and column i) for each i.

    With ``stop_at_or_below`` set, returns early after the first minor whose
    magnitude does not exceed it.
    """
    m = np.asarray(matrix, dtype=np.float64)
    n = len(m)
    minors: list[tuple[int, float]] = []
    for i in range(n):
        keep = np.arange(n) != i
        value = determinant(m[np.ix_(keep, keep)])
        minors.append((i, value))
        if stop_at_or_below is not None and not abs(value) > stop_at_or_below:
            break
    return minors
