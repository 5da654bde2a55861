"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from trilattice.api import coloring, health, search, workspace

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(search.router)
api_router.include_router(coloring.router)
api_router.include_router(workspace.router)
