"""Triangular-lattice coloring search engine."""

from trilattice.engine.registry import SearchMode, get_registry, strategy
from trilattice.engine.session import SearchResult, SearchSession, SearchStatus, apply_result
from trilattice.engine.config import SearchConfig
from trilattice.engine.controller import SearchController, create_controller
from trilattice.engine.manager import SearchManager

__all__ = [
    "strategy",
    "SearchMode",
    "get_registry",
    "SearchResult",
    "SearchSession",
    "SearchStatus",
    "apply_result",
    "SearchConfig",
    "SearchController",
    "create_controller",
    "SearchManager",
]
