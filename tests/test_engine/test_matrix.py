"""Tests for the signed matrix, the non-degeneracy test and analyze_coloring."""

from __future__ import annotations

import numpy as np
import pytest

from trilattice.engine.analysis import analyze_coloring
from trilattice.engine.matrix import build_signed_matrix, evaluate_minors
from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell
from tests.conftest import B, G, HEXAGON, PAIR, PATCH, STRIP3, W


def test_pair_matrix():
    entries = [(PAIR[0], W), (PAIR[1], B)]
    mat = build_signed_matrix(entries)
    assert mat.tolist() == [[1, -1], [-2, 2]]


def test_pair_passes_with_unit_minors(pair_coloring):
    evaluation = evaluate_minors(list(pair_coloring.items()))
    assert evaluation.passed
    # Removing row 0 leaves [[2]], removing row 1 leaves [[1]]
    assert evaluation.minors == ((0, 2.0), (1, 1.0))


def test_pair_same_color_fails():
    evaluation = evaluate_minors([(PAIR[0], G), (PAIR[1], G)])
    assert not evaluation.passed
    assert evaluation.minors == ((0, 0.0), (1, 0.0))


def test_disjoint_cells_fail():
    entries = [(PAIR[0], W), (PAIR[1], B), (Cell(10, 0, True), G)]
    evaluation = evaluate_minors(entries)
    assert not evaluation.passed


def test_zero_and_one_cell_never_pass():
    assert evaluate_minors([]).passed is False
    single = evaluate_minors([(PAIR[0], W)])
    assert single.passed is False
    assert single.minors == ()


def test_strip_minors():
    # a=white, b=black, c=white
    entries = [(STRIP3[0], W), (STRIP3[1], B), (STRIP3[2], W)]
    evaluation = evaluate_minors(entries)
    assert evaluation.passed
    assert [v for _, v in evaluation.minors] == pytest.approx([2.0, 1.0, 2.0])


def test_early_exit_stops_at_first_failure():
    entries = [(STRIP3[0], W), (STRIP3[1], W), (STRIP3[2], B)]
    full = evaluate_minors(entries)
    short = evaluate_minors(entries, early_exit=True)
    assert not full.passed and not short.passed
    assert len(full.minors) == 3
    assert len(short.minors) == 1


def test_epsilon_threshold():
    entries = [(STRIP3[0], W), (STRIP3[1], B), (STRIP3[2], W)]
    assert not evaluate_minors(entries, epsilon=1.5).passed


def test_rows_sum_to_zero():
    rng = np.random.default_rng(7)
    for _ in range(20):
        colors = rng.integers(1, 4, size=len(PATCH))
        entries = [(cell, Color(int(c))) for cell, c in zip(PATCH, colors)]
        mat = build_signed_matrix(entries)
        assert mat.shape == (len(PATCH), len(PATCH))
        assert np.all(mat.sum(axis=1) == 0)


def test_off_diagonal_only_for_adjacent():
    entries = [(cell, W if i % 2 else B) for i, cell in enumerate(HEXAGON)]
    mat = build_signed_matrix(entries)
    for i in range(6):
        for j in range(6):
            if i != j and abs(i - j) not in (1, 5):
                assert mat[i, j] == 0


def test_analyze_coloring():
    coloring = {STRIP3[0]: W, STRIP3[1]: B, STRIP3[2]: W}
    analysis = analyze_coloring(coloring)
    assert analysis.labels == ["v0(0,0,u)", "v1(1,0,d)", "v2(2,0,u)"]
    assert analysis.matrix == [[1, -1, 0], [-2, 4, -2], [0, -1, 1]]
    assert analysis.passed
    assert analysis.components.as_dict() == {"white": 2, "black": 1, "gray": 0}


def test_analyze_ignores_uncolored():
    coloring = {STRIP3[0]: W, STRIP3[1]: None, STRIP3[2]: B}
    analysis = analyze_coloring(coloring)
    assert len(analysis.labels) == 2
    assert analysis.matrix == [[0, 0], [0, 0]]
    assert not analysis.passed
