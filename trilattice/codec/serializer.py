"""Coloring export in canonical order (descending y, ascending x, up before down)."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell, canonical_key
from trilattice.models.coloring import ColoredCellModel, CoordModel


def coord_model(cell: Cell) -> CoordModel:
    return CoordModel(x=cell.x, y=cell.y, is_up=cell.is_up)


def coloring_to_models(coloring: Mapping[Cell, Color | None]) -> list[ColoredCellModel]:
    colored = [(cell, Color(color)) for cell, color in coloring.items() if color is not None]
    colored.sort(key=lambda item: canonical_key(item[0]))
    return [ColoredCellModel(coord=coord_model(cell), color=color.label) for cell, color in colored]


def coloring_to_payload(coloring: Mapping[Cell, Color | None]) -> list[dict[str, Any]]:
    return [m.model_dump(by_alias=True) for m in coloring_to_models(coloring)]


def dump_coloring(coloring: Mapping[Cell, Color | None]) -> str:
    """JSON text with two-space indentation."""
    return json.dumps(coloring_to_payload(coloring), indent=2)
