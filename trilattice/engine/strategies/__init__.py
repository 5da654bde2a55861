"""Search strategies. Importing this package registers every mode."""

from trilattice.engine.strategies import exhaustive, randomized

__all__ = ["exhaustive", "randomized"]
