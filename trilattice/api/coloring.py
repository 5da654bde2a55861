"""Stateless coloring endpoints: analysis, import validation, lattice window."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from trilattice.codec.parser import coloring_from_models, parse_coloring
from trilattice.codec.serializer import coloring_to_models, dump_coloring
from trilattice.engine.analysis import analyze_coloring
from trilattice.errors import MalformedPayload
from trilattice.lattice.geometry import lattice_cells
from trilattice.models.convert import analysis_response, cell_models
from trilattice.models.requests import ColoringRequest, ImportRequest
from trilattice.models.responses import AnalysisResponse, ColoringResponse, LatticeResponse

router = APIRouter()


@router.post("/coloring/analyze", response_model=AnalysisResponse)
async def analyze(req: ColoringRequest) -> AnalysisResponse:
    return analysis_response(analyze_coloring(coloring_from_models(req.coloring)))


@router.post("/coloring/import", response_model=ColoringResponse)
async def import_coloring(req: ImportRequest) -> ColoringResponse:
    try:
        coloring = parse_coloring(req.text)
    except MalformedPayload as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ColoringResponse(coloring=coloring_to_models(coloring), json_text=dump_coloring(coloring))


@router.get("/lattice", response_model=LatticeResponse)
async def lattice() -> LatticeResponse:
    return LatticeResponse(cells=cell_models(lattice_cells()))
