"""Strategy registry — each search mode is a class registered via decorator.

Usage:
    @strategy(mode=SearchMode.EXHAUSTIVE, description="Enumerate every coloring")
    class ExhaustiveStrategy:
        def __init__(self, shape, seed_coloring, config): ...
        def advance(self, session, limit) -> bool: ...

Adding a new mode = one enum member and one decorated class.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from trilattice.engine.config import SearchConfig
    from trilattice.engine.session import SearchSession
    from trilattice.lattice.colors import Color
    from trilattice.lattice.geometry import Cell

logger = logging.getLogger(__name__)


class SearchMode(str, enum.Enum):
    EXHAUSTIVE = "exhaustive"
    RANDOMIZED = "randomized"


class SearchStrategy(Protocol):
    # Candidate count when finite, else None
    total: int | None
    # False when the strategy only ends on cancellation
    bounded: bool

    def advance(self, session: SearchSession, limit: int) -> bool:
        """Process up to ``limit`` candidates; True once the space is exhausted."""
        ...


StrategyFactory = Callable[
    ["tuple[Cell, ...]", "Mapping[Cell, Color] | None", "SearchConfig"],
    SearchStrategy,
]


@dataclass
class StrategySpec:
    mode: SearchMode
    factory: StrategyFactory
    description: str = ""


class StrategyRegistry:
    """Singleton registry of search strategies, one per mode."""

    def __init__(self) -> None:
        self._strategies: dict[SearchMode, StrategySpec] = {}

    def register(self, spec: StrategySpec) -> None:
        if spec.mode in self._strategies:
            raise ValueError(f"Duplicate strategy for mode: {spec.mode.value}")
        self._strategies[spec.mode] = spec
        logger.debug("Registered strategy %s", spec.mode.value)

    def get(self, mode: SearchMode) -> StrategySpec:
        return self._strategies[mode]

    def all(self) -> list[StrategySpec]:
        return sorted(self._strategies.values(), key=lambda s: s.mode.value)

    @property
    def count(self) -> int:
        return len(self._strategies)


# Module-level singleton
_registry = StrategyRegistry()


def get_registry() -> StrategyRegistry:
    return _registry


def strategy(*, mode: SearchMode, description: str = ""):
    """Decorator to register a strategy class under ``mode``."""

    def decorator(cls):
        _registry.register(StrategySpec(mode=mode, factory=cls, description=description))
        return cls

    return decorator
