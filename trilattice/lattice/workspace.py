"""Workspace — the current coloring plus the saved shape of one editing session.

The saved shape is the search domain. When none has been saved, starting a
search derives it from the currently colored cells and keeps it for reuse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from trilattice.codec.parser import parse_coloring
from trilattice.codec.serializer import dump_coloring
from trilattice.errors import InvalidStartRequest
from trilattice.lattice.coloring import Coloring, Shape, colored_cells
from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell

logger = logging.getLogger(__name__)


@dataclass
class Workspace:
    colors: Coloring = field(default_factory=dict)
    shape: Shape = ()

    def set_color(self, cell: Cell, color: Color | None) -> None:
        """Color a cell, or uncolor it with ``None``."""
        if color is None:
            self.colors.pop(cell, None)
        else:
            self.colors[cell] = Color(color)

    def clear(self) -> None:
        self.colors = {}
        self.shape = ()

    def save_shape(self) -> int:
        self.shape = colored_cells(self.colors)
        logger.info("Shape saved: %d cells", len(self.shape))
        return len(self.shape)

    def pending_shape(self) -> Shape:
        """Saved shape, or one derived from the colored cells. Nothing is saved."""
        if self.shape:
            return self.shape
        if not self.colors:
            raise InvalidStartRequest("draw a shape first: no saved shape and no colored cells")
        return colored_cells(self.colors)

    def resolve_shape(self) -> Shape:
        """Saved shape, or one derived from the colored cells and saved."""
        self.shape = self.pending_shape()
        return self.shape

    def randomize(self, rng: np.random.Generator | None = None) -> Coloring:
        """Recolor every currently colored shape cell uniformly at random."""
        shape = self.resolve_shape()
        rng = rng or np.random.default_rng()
        cells = [cell for cell in shape if self.colors.get(cell) is not None]
        draws = rng.integers(1, 4, size=len(cells))
        self.colors = {cell: Color(int(v)) for cell, v in zip(cells, draws)}
        return self.colors

    def import_json(self, text: str | bytes) -> int:
        """Replace the coloring from exported JSON. Malformed input changes nothing."""
        colors = parse_coloring(text)
        self.colors = colors
        logger.info("Imported %d colored cells", len(colors))
        return len(colors)

    def export_json(self) -> str:
        return dump_coloring(self.colors)
