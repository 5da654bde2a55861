"""Engine objects → response models. No FastAPI imports."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from trilattice.codec.serializer import coloring_to_models, coord_model
from trilattice.engine.analysis import ColoringAnalysis
from trilattice.engine.components import ComponentCounts
from trilattice.engine.session import SearchResult
from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell
from trilattice.models.coloring import CoordModel
from trilattice.models.responses import (
    AnalysisResponse,
    ComponentCountsModel,
    MinorModel,
    SearchResultModel,
    SearchStatusResponse,
    WorkspaceResponse,
)


def counts_model(counts: ComponentCounts) -> ComponentCountsModel:
    return ComponentCountsModel(**counts.as_dict(), total=counts.total)


def minor_models(minors: Iterable[tuple[int, float]]) -> list[MinorModel]:
    return [MinorModel(i=i, det=det) for i, det in minors]


def result_model(result: SearchResult) -> SearchResultModel:
    return SearchResultModel(
        attempt=result.attempt,
        coloring=coloring_to_models(dict(result.coloring)),
        minors=minor_models(result.minors),
        connected=counts_model(result.components),
    )


def status_response(snapshot: dict[str, Any]) -> SearchStatusResponse:
    data = dict(snapshot)
    data["results"] = [result_model(r) for r in snapshot["results"]]
    return SearchStatusResponse(**data)


def analysis_response(analysis: ColoringAnalysis) -> AnalysisResponse:
    return AnalysisResponse(
        matrix=analysis.matrix,
        labels=analysis.labels,
        minors=minor_models(analysis.minors),
        passed=analysis.passed,
        connected=counts_model(analysis.components),
    )


def cell_models(cells: Iterable[Cell]) -> list[CoordModel]:
    return [coord_model(cell) for cell in cells]


def workspace_response(colors: Mapping[Cell, Color], shape: Iterable[Cell]) -> WorkspaceResponse:
    return WorkspaceResponse(coloring=coloring_to_models(colors), shape=cell_models(shape))
