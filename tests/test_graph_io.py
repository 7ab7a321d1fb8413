import pytest

from greedycol.graph_io import GraphData, GraphFormatError, read_col


def test_from_edges_symmetric_and_deduplicated():
    g = GraphData.from_edges(3, [(0, 1), (1, 0), (1, 2), (2, 2)])
    assert g.edges == [(0, 1), (1, 2)]
    assert g.neighbors(1) == {0, 2}
    assert g.neighbors(0) == {1}
    assert g.neighbors(2) == {1}
    assert [g.degree(v) for v in range(3)] == [1, 2, 1]
    for u in range(g.n_vertices):
        for v in g.neighbors(u):
            assert u in g.neighbors(v)


def test_from_edges_rejects_out_of_range():
    with pytest.raises(GraphFormatError):
        GraphData.from_edges(3, [(0, 3)])
    with pytest.raises(GraphFormatError):
        GraphData.from_edges(3, [(-1, 0)])


def test_graph_is_read_only(c4):
    with pytest.raises(AttributeError):
        c4.neighbors(0).add(2)
    with pytest.raises(Exception):
        c4.n_vertices = 5


def test_read_col_one_based_ids(col_file):
    path = col_file(
        "c cycle of four\n"
        "c\n"
        "p edge 4 4\n"
        "e 1 2\n"
        "e 2 3\n"
        "\n"
        "e 3 4\n"
        "e 4 1\n"
        "e 1 2\n"
    )
    g = read_col(path)
    assert g.n_vertices == 4
    assert g.edges == [(0, 1), (0, 3), (1, 2), (2, 3)]
    assert g.neighbors(0) == {1, 3}


def test_read_col_isolated_vertices(col_file):
    g = read_col(col_file("p col 5 1\ne 1 5\n"))
    assert g.n_vertices == 5
    assert g.degree(2) == 0
    assert g.neighbors(4) == {0}


@pytest.mark.parametrize(
    "text",
    [
        "c no problem line\ne 1 2\n",
        "e 1 2\np edge 2 1\n",
        "p edge 0 0\n",
        "p edge 3\n",
        "p edge x 1\n",
        "p edge 3 1\ne 1 4\n",
        "p edge 3 1\ne 0 1\n",
        "p edge 3 1\ne 1\n",
        "p edge 3 1\ne 1 b\n",
    ],
)
def test_read_col_rejects_malformed(col_file, text):
    with pytest.raises(GraphFormatError):
        read_col(col_file(text))


def test_graph_format_error_is_value_error(col_file):
    with pytest.raises(ValueError, match="g.col"):
        read_col(col_file("c empty\n"))
