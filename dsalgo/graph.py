"""Unweighted graphs: adjacency lists, traversals, components and ordering."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Edge:
    """An outgoing edge to ``destination_id`` carrying a weight."""

    destination_id: int = 0
    weight: int = 0


@dataclass
class Vertex:
    """A named vertex together with its outgoing edges."""

    source_id: int = 0
    source_name: str = ""
    edges: list[Edge] = field(default_factory=list)


class Graph:
    """Undirected graph over the vertices ``0 .. size - 1``."""

    def __init__(self, size=6):
        if size < 0:
            raise ValueError("graph size must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < len(self._adjacency):
                raise IndexError(f"vertex {vertex} is not defined")

    def add_edge(self, u, v):
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u, v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def remove_edge(self, u, v):
        """Remove every edge between ``u`` and ``v``."""
        self._check(u, v)
        self._adjacency[u] = [w for w in self._adjacency[u] if w != v]
        self._adjacency[v] = [w for w in self._adjacency[v] if w != u]

    def neighbours(self, u):
        """Return the neighbours of ``u`` in insertion order."""
        self._check(u)
        return list(self._adjacency[u])

    def format(self):
        """Render the adjacency lists as text."""
        lines = [" ---------  Graph  --------- "]
        for vertex, neighbours in enumerate(self._adjacency):
            lines.append(f"{vertex} -> " + "".join(f"{n} | " for n in neighbours))
        return "\n".join(lines) + "\n"

    def bfs(self, source):
        """Return the vertices reachable from ``source`` in breadth-first order."""
        self._check(source)
        visited = [False] * len(self._adjacency)
        visited[source] = True
        queue = deque([source])
        order = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for w in self._adjacency[vertex]:
                if not visited[w]:
                    visited[w] = True
                    queue.append(w)
        return order

    def dfs_recursive(self, source):
        """Return the depth-first pre-order visiting neighbours in insertion order."""
        self._check(source)
        visited = [False] * len(self._adjacency)
        visited[source] = True
        order = [source]
        stack: list[Iterator[int]] = [iter(self._adjacency[source])]
        while stack:
            for w in stack[-1]:
                if not visited[w]:
                    visited[w] = True
                    order.append(w)
                    stack.append(iter(self._adjacency[w]))
                    break
            else:
                stack.pop()
        return order

    def dfs_iterative(self, source):
        """Return the depth-first order produced by an explicit stack."""
        self._check(source)
        visited = [False] * len(self._adjacency)
        stack = [source]
        order = []
        while stack:
            vertex = stack.pop()
            if visited[vertex]:
                continue
            visited[vertex] = True
            order.append(vertex)
            stack.extend(w for w in self._adjacency[vertex] if not visited[w])
        return order

    def _component_sizes(self) -> Iterator[int]:
        visited = [False] * len(self._adjacency)
        for start in range(len(self._adjacency)):
            if visited[start]:
                continue
            visited[start] = True
            stack = [start]
            size = 0
            while stack:
                vertex = stack.pop()
                size += 1
                for w in self._adjacency[vertex]:
                    if not visited[w]:
                        visited[w] = True
                        stack.append(w)
            yield size

    def count_components(self):
        """Return the number of connected components, isolated vertices included."""
        return sum(1 for _ in self._component_sizes())

    def largest_component(self):
        """Return the vertex count of the largest connected component."""
        return max(self._component_sizes(), default=0)

    def shortest_path(self, source, destination):
        """Return the number of edges on a shortest path, or None if unreachable."""
        self._check(source, destination)
        visited = [False] * len(self._adjacency)
        visited[source] = True
        queue = deque([(source, 0)])
        while queue:
            vertex, distance = queue.popleft()
            if vertex == destination:
                return distance
            for w in self._adjacency[vertex]:
                if not visited[w]:
                    visited[w] = True
                    queue.append((w, distance + 1))
        return None


class DirectedGraph:
    """Directed graph over the vertices ``0 .. size - 1``."""

    def __init__(self, size):
        if size < 0:
            raise ValueError("graph size must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def add_edge(self, u, v):
        """Add the edge ``u -> v``."""
        for vertex in (u, v):
            if not 0 <= vertex < len(self._adjacency):
                raise IndexError(f"vertex {vertex} is not defined")
        self._adjacency[u].append(v)

    def topological_sort(self):
        """Return the vertices in reverse depth-first finishing order."""
        visited = [False] * len(self._adjacency)
        finished = []
        for start in range(len(self._adjacency)):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(self._adjacency[start]))]
            while stack:
                vertex, pending = stack[-1]
                for w in pending:
                    if not visited[w]:
                        visited[w] = True
                        stack.append((w, iter(self._adjacency[w])))
                        break
                else:
                    stack.pop()
                    finished.append(vertex)
        return finished[::-1]