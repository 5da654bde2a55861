"""One-shot read-out of a coloring: matrix, labels, minors, pass flag, components."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from trilattice.engine.components import ComponentCounts, count_components
from trilattice.engine.matrix import build_signed_matrix, evaluate_minors
from trilattice.lattice.coloring import colored_entries
from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell


@dataclass(frozen=True)
class ColoringAnalysis:
    matrix: list[list[int]]
    labels: list[str]
    minors: tuple[tuple[int, float], ...]
    passed: bool
    components: ComponentCounts


def analyze_coloring(coloring: Mapping[Cell, Color | None]) -> ColoringAnalysis:
    entries = colored_entries(coloring)
    evaluation = evaluate_minors(entries)
    return ColoringAnalysis(
        matrix=build_signed_matrix(entries).tolist(),
        labels=[cell.label(i) for i, (cell, _) in enumerate(entries)],
        minors=evaluation.minors,
        passed=evaluation.passed,
        components=count_components(coloring),
    )
