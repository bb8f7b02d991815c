"""Shortest paths and minimum spanning trees on weighted graphs."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class WeightedEdge:
    """An undirected edge between ``u`` and ``v`` with a weight."""

    u: int
    v: int
    weight: int


def _square(matrix) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def _closest(keys, done):
    candidates = [(key, i) for i, key in enumerate(keys) if not done[i] and key < math.inf]
    return min(candidates)[1] if candidates else None


def dijkstra(matrix, source=0):
    """Return distances from ``source``; a zero entry means no edge, unreachable is inf."""
    rows = _square(matrix)
    n = len(rows)
    if not 0 <= source < n:
        raise IndexError(f"vertex {source} is not defined")
    dist = [math.inf] * n
    dist[source] = 0
    done = [False] * n
    for _ in range(n):
        e = _closest(dist, done)
        if e is None:
            break
        done[e] = True
        for v, weight in enumerate(rows[e]):
            if not done[v] and weight and dist[e] + weight < dist[v]:
                dist[v] = dist[e] + weight
    return dist


def prim(matrix, source=0):
    """Return the minimum spanning tree edges (parent, child) for each non-source vertex."""
    rows = _square(matrix)
    n = len(rows)
    if not 0 <= source < n:
        raise IndexError(f"vertex {source} is not defined")
    key = [math.inf] * n
    parent: list[int | None] = [None] * n
    in_tree = [False] * n
    key[source] = 0
    for _ in range(n):
        u = _closest(key, in_tree)
        if u is None:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v, weight in enumerate(rows[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    return [
        WeightedEdge(parent[v], v, rows[v][parent[v]])
        for v in range(n)
        if v != source
    ]


def _as_edge(edge) -> WeightedEdge:
    if isinstance(edge, WeightedEdge):
        return edge
    u, v, weight = edge
    return WeightedEdge(u, v, weight)


def kruskal(vertex_count, edges):
    """Return the minimum spanning forest, choosing edges by (weight, u, v)."""
    parent = list(range(vertex_count))

    def find(i: int) -> int:
        root = i
        while parent[root] != root:
            root = parent[root]
        while parent[i] != root:
            parent[i], i = root, parent[i]
        return root

    ordered = sorted((_as_edge(e) for e in edges), key=lambda e: (e.weight, e.u, e.v))
    tree = []
    for edge in ordered:
        for vertex in (edge.u, edge.v):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} is not defined")
        u_root, v_root = find(edge.u), find(edge.v)
        if u_root != v_root:
            tree.append(edge)
            parent[u_root] = v_root
    return tree