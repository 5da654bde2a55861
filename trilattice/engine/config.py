"""Search configuration — chunking and optional bounds."""

from __future__ import annotations

from dataclasses import dataclass

from trilattice.engine.constants import DEFAULT_CHUNK_SIZE


@dataclass
class SearchConfig:
    """Controls how a search advances."""

    # Candidates per step; cancellation is observed between chunks
    chunk_size: int = DEFAULT_CHUNK_SIZE

    # Randomized mode only. None keeps sampling until cancelled.
    max_attempts: int | None = None

    # Seed for the randomized generator; None draws fresh entropy
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {self.max_attempts}")
