from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Tuple


class GraphFormatError(ValueError):
    """Raised when a graph instance is malformed (bad file or bad edge list)."""


@dataclass(frozen=True)
class GraphData:
    """
    Graph stored in 0-based indexing.
    edges: list of undirected edges (u, v) with u < v, no duplicates
    adjacency: neighbor sets, one per vertex; read-only for all trials
    """
    n_vertices: int
    edges: List[Tuple[int, int]]
    adjacency: Tuple[FrozenSet[int], ...]

    @classmethod
    def from_edges(cls, n_vertices: int, edges: Iterable[Tuple[int, int]]) -> "GraphData":
        if n_vertices < 0:
            raise GraphFormatError(f"n_vertices must be >= 0, got {n_vertices}")

        normalized = set()
        for u, v in edges:
            if not (0 <= u < n_vertices and 0 <= v < n_vertices):
                raise GraphFormatError(
                    f"Edge ({u}, {v}) references a vertex outside [0, {n_vertices})"
                )
            if u == v:
                continue
            normalized.add((u, v) if u < v else (v, u))

        adjacency: List[set] = [set() for _ in range(n_vertices)]
        for u, v in normalized:
            adjacency[u].add(v)
            adjacency[v].add(u)

        return cls(
            n_vertices=n_vertices,
            edges=sorted(normalized),
            adjacency=tuple(frozenset(nbs) for nbs in adjacency),
        )

    def neighbors(self, v: int) -> FrozenSet[int]:
        return self.adjacency[v]

    def degree(self, v: int) -> int:
        return len(self.adjacency[v])


def _ints(fields: List[str], path: str, lineno: int) -> List[int]:
    try:
        return [int(x) for x in fields]
    except ValueError:
        raise GraphFormatError(f"{path}:{lineno}: non-integer field in {fields}") from None


def read_col(path: str) -> GraphData:
    """
    Read a DIMACS .col graph coloring instance.

    Typical format:
      c comment lines
      p edge <n_vertices> <n_edges>
      e u v     (1-based vertex ids)

    We convert vertices to 0-based indexing.
    """
    n_vertices = 0
    edges: List[Tuple[int, int]] = []

    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line or line.startswith("c"):
                continue

            parts = line.split()
            if parts[0] == "p":
                # p edge n m
                # sometimes: p col n m (still fine)
                if len(parts) < 4:
                    raise GraphFormatError(f"{path}:{lineno}: expected 'p <name> <n> <m>'")
                n_vertices, _ = _ints(parts[2:4], path, lineno)
                if n_vertices <= 0:
                    raise GraphFormatError(f"{path}:{lineno}: vertex count must be > 0")
            elif parts[0] == "e":
                if n_vertices <= 0:
                    raise GraphFormatError(f"{path}:{lineno}: edge line before 'p' line")
                if len(parts) < 3:
                    raise GraphFormatError(f"{path}:{lineno}: expected 'e <u> <v>'")
                u, v = _ints(parts[1:3], path, lineno)
                if not (1 <= u <= n_vertices and 1 <= v <= n_vertices):
                    raise GraphFormatError(
                        f"{path}:{lineno}: edge ({u}, {v}) outside [1, {n_vertices}]"
                    )
                edges.append((u - 1, v - 1))

    if n_vertices <= 0:
        raise GraphFormatError(f"Could not parse 'p edge n m' line in file: {path}")

    return GraphData.from_edges(n_vertices, edges)
