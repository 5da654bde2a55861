"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from trilattice.engine.registry import SearchMode
from trilattice.models.coloring import ColoredCellModel, CoordModel


class StartSearchRequest(BaseModel):
    mode: SearchMode = Field(default=SearchMode.EXHAUSTIVE, description="exhaustive or randomized")
    shape: list[CoordModel] = Field(
        default_factory=list,
        description="Search domain in fixed order; derived from the coloring when empty",
    )
    coloring: list[ColoredCellModel] = Field(
        default_factory=list,
        description="Current coloring; randomized mode only recolors cells colored here",
    )
    chunk_size: int | None = Field(default=None, ge=1, description="Candidates per step")
    max_attempts: int | None = Field(default=None, ge=1, description="Optional randomized bound")
    seed: int | None = Field(default=None, description="Randomized generator seed")


class WorkspaceSearchRequest(BaseModel):
    mode: SearchMode = Field(default=SearchMode.EXHAUSTIVE)
    chunk_size: int | None = Field(default=None, ge=1)
    max_attempts: int | None = Field(default=None, ge=1)
    seed: int | None = None


class ColoringRequest(BaseModel):
    coloring: list[ColoredCellModel] = Field(..., description="Colored cells")


class ImportRequest(BaseModel):
    text: str = Field(..., description="Exported coloring JSON")


class RandomizeRequest(BaseModel):
    seed: int | None = None
