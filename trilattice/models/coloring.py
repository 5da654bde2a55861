"""Coloring exchange format: ``[{"coord": {"x", "y", "isUp"}, "color": name}, ...]``."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CoordModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    x: int
    y: int
    is_up: bool = Field(..., alias="isUp")


class ColoredCellModel(BaseModel):
    coord: CoordModel
    # Any JSON value: anything but a known name is dropped on import, not rejected
    color: Any = None
