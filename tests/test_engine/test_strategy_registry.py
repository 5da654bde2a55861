"""Tests for the search strategy registry."""

from __future__ import annotations

import pytest

from trilattice.engine.registry import SearchMode, StrategyRegistry, StrategySpec, get_registry
from trilattice.engine.strategies.exhaustive import ExhaustiveStrategy
from trilattice.engine.strategies.randomized import RandomizedStrategy


def test_register_and_get():
    reg = StrategyRegistry()
    spec = StrategySpec(mode=SearchMode.EXHAUSTIVE, factory=ExhaustiveStrategy)
    reg.register(spec)
    assert reg.get(SearchMode.EXHAUSTIVE) is spec
    assert reg.count == 1


def test_duplicate_mode_rejected():
    reg = StrategyRegistry()
    reg.register(StrategySpec(mode=SearchMode.RANDOMIZED, factory=RandomizedStrategy))
    with pytest.raises(ValueError):
        reg.register(StrategySpec(mode=SearchMode.RANDOMIZED, factory=RandomizedStrategy))


def test_unknown_mode_raises_key_error():
    with pytest.raises(KeyError):
        StrategyRegistry().get(SearchMode.EXHAUSTIVE)


def test_builtin_modes_registered():
    reg = get_registry()
    assert reg.count == 2
    assert [s.mode for s in reg.all()] == [SearchMode.EXHAUSTIVE, SearchMode.RANDOMIZED]
    assert reg.get(SearchMode.EXHAUSTIVE).factory is ExhaustiveStrategy
    assert reg.get(SearchMode.RANDOMIZED).factory is RandomizedStrategy
