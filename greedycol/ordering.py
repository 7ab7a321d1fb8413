from __future__ import annotations
import random
from typing import List, Optional, Tuple

from .graph_io import GraphData


NONE = "none"
ASC = "asc"
DESC = "desc"
DESC_SHUFFLE = "desc_shuffle"
ASC_SHUFFLE = "asc_shuffle"
SHUFFLE = "shuffle"

ORDERINGS = (NONE, ASC, DESC, DESC_SHUFFLE, ASC_SHUFFLE, SHUFFLE)
RANDOM_ORDERINGS = (DESC_SHUFFLE, ASC_SHUFFLE, SHUFFLE)


def by_degree(graph: GraphData, descending: bool) -> List[int]:
    """Stable sort of 0..n-1 by degree; ties keep natural id order."""
    return sorted(range(graph.n_vertices), key=graph.degree, reverse=descending)


def degree_buckets(graph: GraphData, order: List[int]) -> List[Tuple[int, int]]:
    """
    Split a degree-sorted order into maximal runs of equal degree.
    Returns (start, stop) slice bounds covering the whole order.
    """
    buckets: List[Tuple[int, int]] = []
    lb = 0
    for i in range(1, len(order)):
        if graph.degree(order[i]) != graph.degree(order[lb]):
            buckets.append((lb, i))
            lb = i
    if order:
        buckets.append((lb, len(order)))
    return buckets


def shuffle_buckets(graph: GraphData, order: List[int], rnd: random.Random) -> List[int]:
    """Shuffle inside every equal-degree bucket, keeping the buckets in place."""
    out = order[:]
    for lb, rb in degree_buckets(graph, out):
        bucket = out[lb:rb]
        rnd.shuffle(bucket)
        out[lb:rb] = bucket
    return out


def vertex_order(graph: GraphData, strategy: str, rnd: Optional[random.Random] = None) -> List[int]:
    """
    Permutation of the vertices in which the greedy colorer opens colors.

    rnd is only used by the shuffling strategies; without one, a generator
    seeded from OS entropy is created so repeated calls differ.
    """
    if strategy not in ORDERINGS:
        raise ValueError(f"strategy must be one of {ORDERINGS}, got {strategy!r}")

    if strategy in RANDOM_ORDERINGS and rnd is None:
        rnd = random.Random()

    if strategy == NONE:
        return list(range(graph.n_vertices))
    if strategy == ASC:
        return by_degree(graph, descending=False)
    if strategy == DESC:
        return by_degree(graph, descending=True)
    if strategy == DESC_SHUFFLE:
        return shuffle_buckets(graph, by_degree(graph, descending=True), rnd)
    if strategy == ASC_SHUFFLE:
        return shuffle_buckets(graph, by_degree(graph, descending=False), rnd)

    order = list(range(graph.n_vertices))
    rnd.shuffle(order)
    return order
