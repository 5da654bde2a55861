"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from trilattice.models.coloring import ColoredCellModel, CoordModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = "development"
    strategies_registered: int = 0


class MinorModel(BaseModel):
    i: int
    det: float


class ComponentCountsModel(BaseModel):
    white: int = 0
    black: int = 0
    gray: int = 0
    total: int = 0


class SearchResultModel(BaseModel):
    attempt: int
    coloring: list[ColoredCellModel]
    minors: list[MinorModel]
    connected: ComponentCountsModel


class SearchStatusResponse(BaseModel):
    id: str
    mode: str
    status: str
    generated: int = 0
    evaluated: int = 0
    found: int = 0
    total: int | None = None
    progress: float | None = None
    elapsed_s: float = 0.0
    message: str = ""
    results_offset: int = 0
    results: list[SearchResultModel] = Field(default_factory=list)


class ColoringResponse(BaseModel):
    coloring: list[ColoredCellModel] = Field(default_factory=list)
    json_text: str = ""


class AnalysisResponse(BaseModel):
    matrix: list[list[int]] = Field(default_factory=list)
    labels: list[str] = Field(default_factory=list)
    minors: list[MinorModel] = Field(default_factory=list)
    passed: bool = False
    connected: ComponentCountsModel = Field(default_factory=ComponentCountsModel)


class WorkspaceResponse(BaseModel):
    coloring: list[ColoredCellModel] = Field(default_factory=list)
    shape: list[CoordModel] = Field(default_factory=list)


class LatticeResponse(BaseModel):
    cells: list[CoordModel] = Field(default_factory=list)
