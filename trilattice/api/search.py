"""/api/search — start, step, poll, cancel and stream a search.

Handlers are async so every chunk runs on the event-loop thread; two chunks
of one session never execute at the same time.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse

from trilattice.codec.parser import cell_from_model, coloring_from_models
from trilattice.codec.serializer import coloring_to_models, dump_coloring
from trilattice.dependencies import get_search_manager
from trilattice.engine.config import SearchConfig
from trilattice.engine.manager import SearchManager
from trilattice.engine.registry import SearchMode
from trilattice.errors import InvalidStartRequest, SearchAlreadyRunning, UnknownSession
from trilattice.lattice.coloring import Coloring, Shape
from trilattice.models.convert import status_response
from trilattice.models.requests import StartSearchRequest
from trilattice.models.responses import ColoringResponse, SearchStatusResponse

router = APIRouter(prefix="/search")


def build_config(
    manager: SearchManager,
    chunk_size: int | None,
    max_attempts: int | None,
    seed: int | None,
) -> SearchConfig:
    return SearchConfig(
        chunk_size=chunk_size or manager.default_chunk_size,
        max_attempts=max_attempts,
        seed=seed,
    )


def start_or_reject(
    manager: SearchManager,
    shape: Shape,
    mode: SearchMode,
    coloring: Coloring | None,
    config: SearchConfig,
) -> SearchStatusResponse:
    try:
        handle = manager.start_search(shape, mode, seed_coloring=coloring, config=config)
    except InvalidStartRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SearchAlreadyRunning as e:
        raise HTTPException(status_code=409, detail=str(e))
    return status_response(manager.poll(handle))


def _not_found(handle: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"No active search {handle}")


@router.post("", response_model=SearchStatusResponse)
async def start_search(
    req: StartSearchRequest,
    manager: SearchManager = Depends(get_search_manager),
) -> SearchStatusResponse:
    shape = tuple(cell_from_model(c) for c in req.shape)
    # An absent coloring means every shape cell counts as colored
    coloring = coloring_from_models(req.coloring) if req.coloring else None
    config = build_config(manager, req.chunk_size, req.max_attempts, req.seed)
    return start_or_reject(manager, shape, req.mode, coloring, config)


@router.get("/{handle}", response_model=SearchStatusResponse)
async def poll_search(
    handle: str,
    since: int = Query(default=0, ge=0, description="Return results from this index on"),
    manager: SearchManager = Depends(get_search_manager),
) -> SearchStatusResponse:
    try:
        return status_response(manager.poll(handle, since=since))
    except UnknownSession:
        raise _not_found(handle)


@router.post("/{handle}/step", response_model=SearchStatusResponse)
async def step_search(
    handle: str,
    chunks: int = Query(default=1, ge=1, le=10_000),
    since: int = Query(default=0, ge=0),
    manager: SearchManager = Depends(get_search_manager),
) -> SearchStatusResponse:
    try:
        manager.step(handle, chunks=chunks)
        return status_response(manager.poll(handle, since=since))
    except UnknownSession:
        raise _not_found(handle)


@router.post("/{handle}/cancel", response_model=SearchStatusResponse)
async def cancel_search(
    handle: str,
    manager: SearchManager = Depends(get_search_manager),
) -> SearchStatusResponse:
    try:
        manager.cancel(handle)
        return status_response(manager.poll(handle))
    except UnknownSession:
        raise _not_found(handle)


@router.get("/{handle}/results/{index}/coloring", response_model=ColoringResponse)
async def result_coloring(
    handle: str,
    index: int,
    manager: SearchManager = Depends(get_search_manager),
) -> ColoringResponse:
    try:
        coloring = manager.apply_result(manager.result(handle, index))
    except UnknownSession:
        raise _not_found(handle)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ColoringResponse(coloring=coloring_to_models(coloring), json_text=dump_coloring(coloring))


async def _stream_search(manager: SearchManager, handle: str) -> AsyncGenerator[str, None]:
    """Step the search one chunk per event until it finishes or is replaced."""
    sent = 0
    while True:
        try:
            status = manager.step(handle)
            snapshot = manager.poll(handle, since=sent)
        except UnknownSession:
            data = json.dumps({"type": "error", "message": f"search {handle} is no longer active"})
            yield f"event: error\ndata: {data}\n\n"
            return

        sent = snapshot["found"]
        data = json.dumps(status_response(snapshot).model_dump(by_alias=True))
        yield f"event: progress\ndata: {data}\n\n"

        if status.is_terminal:
            break
        # Let cancel and poll requests run between chunks
        await asyncio.sleep(0)

    yield f"event: done\ndata: {json.dumps({'type': 'done'})}\n\n"


@router.post("/{handle}/stream")
async def stream_search(
    handle: str,
    manager: SearchManager = Depends(get_search_manager),
) -> StreamingResponse:
    try:
        manager.poll(handle)
    except UnknownSession:
        raise _not_found(handle)
    return StreamingResponse(
        _stream_search(manager, handle),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
