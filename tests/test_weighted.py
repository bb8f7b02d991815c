import math

import pytest

from dsalgo.weighted import WeightedEdge, dijkstra, kruskal, prim

DIJKSTRA_GRAPH = [
    [0, 4, 0, 0, 0, 0, 0, 8, 0],
    [4, 0, 8, 0, 0, 0, 0, 11, 0],
    [0, 8, 0, 7, 0, 4, 0, 0, 2],
    [0, 0, 7, 0, 9, 14, 0, 0, 0],
    [0, 0, 0, 9, 0, 10, 0, 0, 0],
    [0, 0, 4, 14, 10, 0, 2, 0, 0],
    [0, 0, 0, 0, 0, 2, 0, 1, 6],
    [8, 11, 0, 0, 0, 0, 1, 0, 7],
    [0, 0, 2, 0, 0, 0, 6, 7, 0],
]

PRIM_GRAPH = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]

KRUSKAL_EDGES = [
    (0, 1, 4), (0, 2, 4), (1, 2, 2), (1, 0, 4), (2, 0, 4), (2, 1, 2), (2, 3, 3),
    (2, 5, 2), (2, 4, 4), (3, 2, 3), (3, 4, 3), (4, 2, 4), (4, 3, 3), (5, 2, 2),
    (5, 4, 3),
]


def matrix_edges(matrix):
    return [
        (u, v, w)
        for u, row in enumerate(matrix)
        for v, w in enumerate(row)
        if w and u < v
    ]


def spans(vertex_count, tree):
    reached = {0}
    changed = True
    while changed:
        changed = False
        for e in tree:
            if (e.u in reached) != (e.v in reached):
                reached |= {e.u, e.v}
                changed = True
    return reached == set(range(vertex_count))


def test_dijkstra_known_distances():
    assert dijkstra(DIJKSTRA_GRAPH, 0) == [0, 4, 12, 19, 21, 11, 9, 8, 14]


def test_dijkstra_distances_are_tight():
    dist = dijkstra(DIJKSTRA_GRAPH, 3)
    assert dist[3] == 0
    for u, v, w in matrix_edges(DIJKSTRA_GRAPH):
        assert dist[v] <= dist[u] + w
        assert dist[u] <= dist[v] + w


def test_dijkstra_unreachable_is_inf():
    dist = dijkstra([[0, 5, 0], [5, 0, 0], [0, 0, 0]], 0)
    assert dist[:2] == [0, 5]
    assert math.isinf(dist[2])


def test_dijkstra_rejects_non_square():
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 0)


def test_dijkstra_rejects_bad_source():
    with pytest.raises(IndexError):
        dijkstra([[0]], 1)


def test_prim_tree_shape():
    tree = prim(PRIM_GRAPH, 0)
    assert len(tree) == len(PRIM_GRAPH) - 1
    assert [e.v for e in tree] == [1, 2, 3, 4]
    for e in tree:
        assert PRIM_GRAPH[e.u][e.v] == e.weight
    assert spans(len(PRIM_GRAPH), tree)


def test_prim_total_weight():
    assert sum(e.weight for e in prim(PRIM_GRAPH, 0)) == 16


def test_prim_matches_kruskal_total():
    for matrix in (PRIM_GRAPH, DIJKSTRA_GRAPH):
        prim_total = sum(e.weight for e in prim(matrix, 0))
        kruskal_total = sum(e.weight for e in kruskal(len(matrix), matrix_edges(matrix)))
        assert prim_total == kruskal_total


def test_prim_source_independent_total():
    totals = {sum(e.weight for e in prim(PRIM_GRAPH, s)) for s in range(5)}
    assert len(totals) == 1


def test_prim_disconnected():
    with pytest.raises(ValueError):
        prim([[0, 1, 0], [1, 0, 0], [0, 0, 0]], 0)


def test_kruskal_example():
    tree = kruskal(6, KRUSKAL_EDGES)
    assert len(tree) == 5
    assert spans(6, tree)
    assert sum(e.weight for e in tree) == 14


def test_kruskal_picks_edges_in_weight_order():
    tree = kruskal(6, KRUSKAL_EDGES)
    weights = [e.weight for e in tree]
    assert weights == sorted(weights)
    assert tree[0] == WeightedEdge(1, 2, 2)


def test_kruskal_accepts_edge_objects():
    edges = [WeightedEdge(0, 1, 3), WeightedEdge(1, 2, 1), WeightedEdge(0, 2, 2)]
    assert kruskal(3, edges) == [WeightedEdge(1, 2, 1), WeightedEdge(0, 2, 2)]


def test_kruskal_forest_when_disconnected():
    assert kruskal(4, [(0, 1, 1), (2, 3, 1)]) == [WeightedEdge(0, 1, 1), WeightedEdge(2, 3, 1)]


def test_kruskal_out_of_range():
    with pytest.raises(IndexError):
        kruskal(2, [(0, 2, 1)])