import random

import pytest

from greedycol.graph_io import GraphData


@pytest.fixture
def c4():
    # 1-2, 2-3, 3-4, 4-1 in 0-based ids
    return GraphData.from_edges(4, [(0, 1), (1, 2), (2, 3), (3, 0)])


@pytest.fixture
def k3():
    return GraphData.from_edges(3, [(0, 1), (1, 2), (0, 2)])


@pytest.fixture
def mixed():
    # star centered at 0, a path 5-6-7, a triangle 8-9-10 and isolated 11
    edges = [(0, 1), (0, 2), (0, 3), (0, 4), (5, 6), (6, 7), (8, 9), (9, 10), (8, 10)]
    return GraphData.from_edges(12, edges)


@pytest.fixture
def col_file(tmp_path):
    def write(text, name="g.col"):
        p = tmp_path / name
        p.write_text(text)
        return str(p)
    return write


def _random_graph(n, p, seed):
    rnd = random.Random(seed)
    edges = [(u, v) for u in range(n) for v in range(u + 1, n) if rnd.random() < p]
    return GraphData.from_edges(n, edges)


@pytest.fixture
def random_graph():
    return _random_graph
