"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from trilattice.config import Settings
from trilattice.dependencies import get_settings
from trilattice.engine.registry import get_registry
from trilattice.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        env=settings.trilattice_env,
        strategies_registered=get_registry().count,
    )


@router.get("/modes")
async def modes() -> dict[str, str]:
    return {spec.mode.value: spec.description for spec in get_registry().all()}
