"""Shared test fixtures."""

from __future__ import annotations

import pytest

from trilattice.engine.manager import SearchManager
from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell, lattice_cells

W, B, G = Color.WHITE, Color.BLACK, Color.GRAY

# Two touching cells: up at (0,0), down at (1,0)
PAIR = (Cell(0, 0, True), Cell(1, 0, False))

# Path of three cells: up(0,0) - down(1,0) - up(2,0)
STRIP3 = (Cell(0, 0, True), Cell(1, 0, False), Cell(2, 0, True))

# Six triangles around the lattice point between (0,0) and (0,1)
HEXAGON = (
    Cell(0, 0, True),
    Cell(1, 0, False),
    Cell(1, 1, True),
    Cell(0, 1, False),
    Cell(-1, 1, True),
    Cell(-1, 0, False),
)

# Exhaustive indices whose strip colors satisfy a != b and b != c
STRIP3_PASSING_INDICES = [3, 5, 6, 7, 10, 11, 15, 16, 19, 20, 21, 23]

# Central part of the drawable window, for property tests
PATCH = tuple(c for c in lattice_cells() if -4 <= c.x <= 4 and -2 <= c.y <= 2)


@pytest.fixture
def pair_coloring() -> dict[Cell, Color]:
    return {PAIR[0]: W, PAIR[1]: B}


@pytest.fixture
def manager() -> SearchManager:
    return SearchManager(default_chunk_size=5)
