"""Triangular lattice geometry. No engine imports.

An upward triangle at (x, y) touches the downward triangles at (x-1, y),
(x+1, y) and (x, y-1). A downward triangle touches the upward triangles at
(x-1, y), (x+1, y) and (x, y+1). Same-orientation cells never touch.
"""

from __future__ import annotations

from dataclasses import dataclass

# Drawable window of the lattice canvas
LATTICE_X_RANGE = (-17, 17)
LATTICE_Y_RANGE = (-9, 8)


@dataclass(frozen=True)
class Cell:
    x: int
    y: int
    is_up: bool

    @property
    def key(self) -> str:
        return f"{self.x},{self.y},{'u' if self.is_up else 'd'}"

    def label(self, index: int) -> str:
        """Matrix row label, e.g. ``v0(0,0,u)``."""
        return f"v{index}({self.key})"


def adjacent(a: Cell, b: Cell) -> bool:
    if a.is_up == b.is_up:
        return False
    dx = b.x - a.x
    dy = b.y - a.y
    if dy == 0:
        return dx in (-1, 1)
    if dx != 0:
        return False
    return dy == (-1 if a.is_up else 1)


def neighbors(cell: Cell) -> tuple[Cell, Cell, Cell]:
    """The three cells sharing an edge with ``cell``."""
    x, y = cell.x, cell.y
    other = not cell.is_up
    dy = -1 if cell.is_up else 1
    return (Cell(x - 1, y, other), Cell(x + 1, y, other), Cell(x, y + dy, other))


def canonical_key(cell: Cell) -> tuple[int, int, int]:
    """Export order: descending y, ascending x, upward before downward."""
    return (-cell.y, cell.x, 0 if cell.is_up else 1)


def lattice_cells() -> list[Cell]:
    """All cells of the drawable window; a cell points up when x + y is even."""
    cells: list[Cell] = []
    for y in range(LATTICE_Y_RANGE[0], LATTICE_Y_RANGE[1] + 1):
        for x in range(LATTICE_X_RANGE[0], LATTICE_X_RANGE[1] + 1):
            cells.append(Cell(x, y, (x + y) % 2 == 0))
    return cells
