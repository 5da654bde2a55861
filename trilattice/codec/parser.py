"""Coloring import — JSON text or payload models → Coloring.

Entries whose color is not "white", "black" or "gray" are dropped. A payload
that fails to parse as a whole raises MalformedPayload and yields nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import TypeAdapter, ValidationError

from trilattice.errors import MalformedPayload
from trilattice.lattice.coloring import Coloring
from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell
from trilattice.models.coloring import ColoredCellModel, CoordModel

logger = logging.getLogger(__name__)

_PAYLOAD = TypeAdapter(list[ColoredCellModel])


def cell_from_model(coord: CoordModel) -> Cell:
    return Cell(coord.x, coord.y, coord.is_up)


def coloring_from_models(items: Iterable[ColoredCellModel]) -> Coloring:
    coloring: Coloring = {}
    dropped = 0
    for item in items:
        color = Color.from_name(item.color)
        if color is None:
            dropped += 1
            continue
        coloring[cell_from_model(item.coord)] = color
    if dropped:
        logger.debug("Dropped %d entries with unrecognized colors", dropped)
    return coloring


def parse_coloring(text: str | bytes) -> Coloring:
    """Parse exported JSON back into a Coloring."""
    try:
        items = _PAYLOAD.validate_json(text)
    except ValidationError as e:
        logger.warning("Rejected coloring payload: %d errors", e.error_count())
        raise MalformedPayload(f"invalid coloring payload: {e.error_count()} errors") from e
    return coloring_from_models(items)
