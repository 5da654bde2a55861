"""FastAPI dependency injection."""

from __future__ import annotations

from trilattice.config import Settings, settings
from trilattice.engine.manager import SearchManager
from trilattice.lattice.workspace import Workspace

_search_manager = SearchManager(
    replace_running=settings.replace_running_search,
    default_chunk_size=settings.search_chunk_size,
)
_workspace = Workspace()


def get_settings() -> Settings:
    return settings


def get_search_manager() -> SearchManager:
    return _search_manager


def get_workspace() -> Workspace:
    return _workspace
