"""Tests for the partial-pivot determinant and principal minors."""

from __future__ import annotations

import numpy as np
import pytest

from trilattice.engine.linalg import determinant, principal_minors


def _cofactor_det(m: list[list[float]]) -> float:
    """Reference determinant by Laplace expansion along the first row."""
    n = len(m)
    if n == 0:
        return 1.0
    if n == 1:
        return m[0][0]
    total = 0.0
    for j in range(n):
        sub = [row[:j] + row[j + 1:] for row in m[1:]]
        total += (-1) ** j * m[0][j] * _cofactor_det(sub)
    return total


def test_empty_matrix():
    assert determinant(np.zeros((0, 0))) == 1.0


def test_one_by_one():
    assert determinant([[7]]) == 7.0
    assert determinant([[-2.5]]) == -2.5


def test_two_by_two():
    assert determinant([[1, 2], [3, 4]]) == pytest.approx(-2.0)


def test_needs_pivot_swap():
    # Zero on the first diagonal entry
    assert determinant([[0, 1], [1, 0]]) == pytest.approx(-1.0)


def test_singular_is_exact_zero():
    assert determinant([[1, 2], [2, 4]]) == 0.0
    assert determinant([[0, 0, 0], [1, 2, 3], [4, 5, 6]]) == 0.0


def test_input_not_modified():
    m = np.array([[0.0, 2.0], [3.0, 1.0]])
    before = m.copy()
    determinant(m)
    assert np.array_equal(m, before)


@pytest.mark.parametrize("n", [2, 3, 4])
def test_matches_cofactor_expansion(n):
    rng = np.random.default_rng(n)
    for _ in range(25):
        m = rng.integers(-4, 5, size=(n, n))
        assert determinant(m) == pytest.approx(_cofactor_det(m.tolist()), abs=1e-9)


@pytest.mark.parametrize("n", [2, 3, 4])
def test_row_swap_negates(n):
    rng = np.random.default_rng(100 + n)
    for _ in range(25):
        m = rng.integers(-4, 5, size=(n, n))
        swapped = m.copy()
        swapped[[0, n - 1]] = swapped[[n - 1, 0]]
        assert determinant(swapped) == pytest.approx(-determinant(m), abs=1e-9)


def test_principal_minors_of_diagonal():
    m = np.diag([2.0, 3.0, 5.0])
    minors = principal_minors(m)
    assert [i for i, _ in minors] == [0, 1, 2]
    assert [v for _, v in minors] == pytest.approx([15.0, 10.0, 6.0])


def test_principal_minors_stop_early():
    # Removing row/column 0 leaves a singular block
    m = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 1.0], [0.0, 1.0, 1.0]])
    assert len(principal_minors(m)) == 3
    minors = principal_minors(m, stop_at_or_below=1e-4)
    assert minors == [(0, 0.0)]
