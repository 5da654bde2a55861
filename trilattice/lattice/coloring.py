"""Coloring and Shape aliases plus small helpers over them.

A Coloring maps cells to colors; a cell missing from the mapping is uncolored
and takes no part in matrix construction or component counting. Insertion
order is the matrix row order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell

Coloring = dict[Cell, Color]
Shape = tuple[Cell, ...]


def colored_cells(coloring: Mapping[Cell, Color | None]) -> Shape:
    return tuple(cell for cell, color in coloring.items() if color is not None)


def colored_entries(coloring: Mapping[Cell, Color | None]) -> list[tuple[Cell, Color]]:
    """(cell, color) pairs for colored cells, in mapping order."""
    return [(cell, Color(color)) for cell, color in coloring.items() if color is not None]


def restrict(coloring: Mapping[Cell, Color | None], shape: Iterable[Cell]) -> Coloring:
    """Colored cells of ``coloring`` that belong to ``shape``, in shape order."""
    out: Coloring = {}
    for cell in shape:
        color = coloring.get(cell)
        if color is not None:
            out[cell] = Color(color)
    return out
