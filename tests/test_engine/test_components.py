"""Tests for per-color connected components and the priority score."""

from __future__ import annotations

import random

from trilattice.engine.components import ComponentCounts, count_components, priority_score
from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell
from tests.conftest import B, G, HEXAGON, PATCH, STRIP3, W


def test_empty():
    counts = count_components({})
    assert counts == ComponentCounts(0, 0, 0)
    assert counts.total == 0


def test_strip_alternating():
    counts = count_components({STRIP3[0]: W, STRIP3[1]: B, STRIP3[2]: W})
    assert counts.as_dict() == {"white": 2, "black": 1, "gray": 0}


def test_single_color_hexagon_is_one_region():
    counts = count_components({cell: G for cell in HEXAGON})
    assert counts == ComponentCounts(white=0, black=0, gray=1)


def test_hexagon_halves():
    coloring = {cell: (W if i < 3 else B) for i, cell in enumerate(HEXAGON)}
    assert count_components(coloring) == ComponentCounts(white=1, black=1, gray=0)


def test_same_orientation_cells_do_not_connect():
    coloring = {Cell(0, 0, True): W, Cell(2, 0, True): W}
    assert count_components(coloring).white == 2


def test_uncolored_cells_break_regions():
    coloring = {STRIP3[0]: W, STRIP3[1]: None, STRIP3[2]: W}
    assert count_components(coloring).white == 2


def test_independent_of_insertion_order():
    rng = random.Random(11)
    for _ in range(10):
        coloring = {cell: Color(rng.randint(1, 3)) for cell in PATCH}
        expected = count_components(coloring)
        items = list(coloring.items())
        for _ in range(5):
            rng.shuffle(items)
            assert count_components(dict(items)) == expected


def test_large_region_has_no_recursion_limit():
    coloring = {cell: B for cell in PATCH}
    assert count_components(coloring) == ComponentCounts(white=0, black=1, gray=0)


def test_priority_score():
    assert priority_score(ComponentCounts(2, 3, 4)) == 24
    assert priority_score(ComponentCounts(5, 1, 0)) == 0
