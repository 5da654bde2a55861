"""/api/workspace — the server-held coloring and saved shape."""

from __future__ import annotations

import numpy as np
from fastapi import APIRouter, Depends, HTTPException

from trilattice.api.search import build_config, start_or_reject
from trilattice.codec.parser import coloring_from_models
from trilattice.codec.serializer import coloring_to_models
from trilattice.dependencies import get_search_manager, get_workspace
from trilattice.engine.manager import SearchManager
from trilattice.errors import InvalidStartRequest, MalformedPayload
from trilattice.lattice.workspace import Workspace
from trilattice.models.convert import workspace_response
from trilattice.models.requests import (
    ColoringRequest,
    ImportRequest,
    RandomizeRequest,
    WorkspaceSearchRequest,
)
from trilattice.models.responses import ColoringResponse, SearchStatusResponse, WorkspaceResponse

router = APIRouter(prefix="/workspace")


@router.get("", response_model=WorkspaceResponse)
async def get_state(ws: Workspace = Depends(get_workspace)) -> WorkspaceResponse:
    return workspace_response(ws.colors, ws.shape)


@router.delete("", response_model=WorkspaceResponse)
async def clear(ws: Workspace = Depends(get_workspace)) -> WorkspaceResponse:
    ws.clear()
    return workspace_response(ws.colors, ws.shape)


@router.put("/coloring", response_model=WorkspaceResponse)
async def set_coloring(req: ColoringRequest, ws: Workspace = Depends(get_workspace)) -> WorkspaceResponse:
    ws.colors = coloring_from_models(req.coloring)
    return workspace_response(ws.colors, ws.shape)


@router.post("/import", response_model=WorkspaceResponse)
async def import_json(req: ImportRequest, ws: Workspace = Depends(get_workspace)) -> WorkspaceResponse:
    try:
        ws.import_json(req.text)
    except MalformedPayload as e:
        raise HTTPException(status_code=400, detail=str(e))
    return workspace_response(ws.colors, ws.shape)


@router.get("/export", response_model=ColoringResponse)
async def export_json(ws: Workspace = Depends(get_workspace)) -> ColoringResponse:
    return ColoringResponse(coloring=coloring_to_models(ws.colors), json_text=ws.export_json())


@router.post("/shape", response_model=WorkspaceResponse)
async def save_shape(ws: Workspace = Depends(get_workspace)) -> WorkspaceResponse:
    ws.save_shape()
    return workspace_response(ws.colors, ws.shape)


@router.post("/randomize", response_model=WorkspaceResponse)
async def randomize(req: RandomizeRequest, ws: Workspace = Depends(get_workspace)) -> WorkspaceResponse:
    try:
        ws.randomize(np.random.default_rng(req.seed))
    except InvalidStartRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    return workspace_response(ws.colors, ws.shape)


@router.post("/search", response_model=SearchStatusResponse)
async def search(
    req: WorkspaceSearchRequest,
    ws: Workspace = Depends(get_workspace),
    manager: SearchManager = Depends(get_search_manager),
) -> SearchStatusResponse:
    try:
        shape = ws.pending_shape()
    except InvalidStartRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    config = build_config(manager, req.chunk_size, req.max_attempts, req.seed)
    response = start_or_reject(manager, shape, req.mode, dict(ws.colors), config)
    # Keep the derived shape only once the search has started
    ws.shape = shape
    return response
