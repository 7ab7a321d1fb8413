from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .graph_io import GraphData


@dataclass
class ColoringResult:
    """
    colors[v] = color of vertex v: 0 means uncolored, 1..n_colors assigned.
    elapsed is filled in by the trial runner and never affects the coloring.
    """
    colors: List[int]
    n_colors: int = 0
    elapsed: float = 0.0
    strategy: str = ""

    @classmethod
    def empty(cls, n_vertices: int) -> "ColoringResult":
        return cls(colors=[0] * n_vertices)

    def reset(self) -> None:
        for i in range(len(self.colors)):
            self.colors[i] = 0
        self.n_colors = 0
        self.elapsed = 0.0

    def color_classes(self) -> List[List[int]]:
        """For each color 1..n_colors, the 1-based ids of the vertices carrying it."""
        classes: List[List[int]] = [[] for _ in range(self.n_colors)]
        for v, col in enumerate(self.colors):
            if col:
                classes[col - 1].append(v + 1)
        return classes


def _check_permutation(order: Sequence[int], n: int) -> None:
    if len(order) != n or sorted(order) != list(range(n)):
        raise ValueError(f"order must be a permutation of 0..{n - 1}")


def greedy_coloring(
    graph: GraphData,
    order: Sequence[int],
    result: Optional[ColoringResult] = None,
) -> ColoringResult:
    """
    Sequential independent-set sweep.

    Colors are opened in `order`: the first uncolored vertex takes a new color,
    then every other uncolored vertex is scanned in natural id order (not
    `order`) and joins that color unless it is adjacent to a vertex already
    holding it. Repeats until `order` is exhausted.
    """
    n = graph.n_vertices
    _check_permutation(order, n)

    if result is None:
        result = ColoringResult.empty(n)
    elif len(result.colors) != n:
        raise ValueError(f"result covers {len(result.colors)} vertices, graph has {n}")

    colors = result.colors
    adjacency = graph.adjacency
    max_color = result.n_colors

    for v in order:
        if colors[v]:
            continue

        max_color += 1
        banned = bytearray(n)
        for nb in adjacency[v]:
            banned[nb] = 1
        colors[v] = max_color

        for u in range(n):
            if colors[u] or banned[u]:
                continue
            colors[u] = max_color
            for nb in adjacency[u]:
                banned[nb] = 1

    result.n_colors = max_color
    return result


def count_conflicts(graph: GraphData, colors: Sequence[int]) -> int:
    c = 0
    for u, v in graph.edges:
        if colors[u] == colors[v]:
            c += 1
    return c


def verify_coloring(graph: GraphData, colors: Sequence[int], sample_conflicts: int = 10) -> Dict[str, Any]:
    report: Dict[str, Any] = {}

    report["uncolored"] = [v for v in range(graph.n_vertices) if not colors[v]]

    conflicts = [(u, v, colors[u]) for u, v in graph.edges if colors[u] == colors[v]]
    report["num_conflicts"] = len(conflicts)
    report["conflicts_sample"] = conflicts[:sample_conflicts]

    used = set(colors) - {0}
    report["num_used_colors"] = len(used)

    report["feasible"] = not report["uncolored"] and not conflicts
    return report
