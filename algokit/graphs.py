"""Adjacency-list graphs: traversal, topological order and shortest paths."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Hashable, Iterable


def _check_count(vertex_count: int) -> None:
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative, got {vertex_count}")


class Graph:
    """A graph over the vertices 0 .. vertex_count - 1."""

    def __init__(self, vertex_count: int) -> None:
        _check_count(vertex_count)
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int, undirected: bool = True) -> None:
        """Add an edge u -> v, and v -> u as well when undirected."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        if undirected:
            self._adjacency[v].append(u)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the neighbours of a vertex in insertion order."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def format_adjacency(self) -> str:
        """Render one line per vertex as 'vertex-->n1,n2,'."""
        return "\n".join(
            f"{vertex}-->" + "".join(f"{nbr}," for nbr in nbrs)
            for vertex, nbrs in enumerate(self._adjacency)
        )

    def bfs(self, source: int) -> list[int]:
        """Return the vertices reachable from source in breadth-first order."""
        self._check(source)
        visited = {source}
        order: list[int] = []
        queue = deque([source])
        while queue:
            node = queue.popleft()
            order.append(node)
            for nbr in self._adjacency[node]:
                if nbr not in visited:
                    visited.add(nbr)
                    queue.append(nbr)
        return order

    def dfs(self, source: int) -> list[int]:
        """Return the vertices reachable from source in depth-first preorder."""
        self._check(source)
        visited = {source}
        order = [source]
        stack = [iter(self._adjacency[source])]
        while stack:
            for nbr in stack[-1]:
                if nbr not in visited:
                    visited.add(nbr)
                    order.append(nbr)
                    stack.append(iter(self._adjacency[nbr]))
                    break
            else:
                stack.pop()
        return order

    def topological_sort(self) -> list[int]:
        """Order the vertices so every edge points forward (Kahn's algorithm).

        Vertices that lie on or behind a cycle never reach in-degree zero and
        are left out of the result.
        """
        indegree = [0] * len(self._adjacency)
        for nbrs in self._adjacency:
            for nbr in nbrs:
                indegree[nbr] += 1
        queue = deque(v for v, degree in enumerate(indegree) if degree == 0)
        order: list[int] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for nbr in self._adjacency[node]:
                indegree[nbr] -= 1
                if indegree[nbr] == 0:
                    queue.append(nbr)
        return order


class NamedGraph:
    """A graph whose vertices are identified by name."""

    def __init__(self, names: Iterable[Hashable]) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {name: [] for name in names}

    def _check(self, name: Hashable) -> None:
        if name not in self._adjacency:
            raise KeyError(name)

    def add_edge(self, x: Hashable, y: Hashable, undirected: bool = False) -> None:
        """Add an edge x -> y, and y -> x as well when undirected."""
        self._check(x)
        self._check(y)
        self._adjacency[x].append(y)
        if undirected:
            self._adjacency[y].append(x)

    def neighbours(self, name: Hashable) -> list[Hashable]:
        """Return the neighbours of a vertex in insertion order."""
        self._check(name)
        return list(self._adjacency[name])

    def format_adjacency(self) -> str:
        """Render one line per vertex as 'name-->n1,n2,'."""
        return "\n".join(
            f"{name}-->" + "".join(f"{nbr}," for nbr in nbrs)
            for name, nbrs in self._adjacency.items()
        )


class WeightedGraph:
    """A graph with weighted edges over the vertices 0 .. vertex_count - 1."""

    def __init__(self, vertex_count: int) -> None:
        _check_count(vertex_count)
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int, weight: float, undirected: bool = True) -> None:
        """Add an edge u -> v of the given weight, and v -> u when undirected."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append((v, weight))
        if undirected:
            self._adjacency[v].append((u, weight))

    def shortest_distances(self, source: int) -> list[float]:
        """Return the shortest distance from source to every vertex.

        Unreachable vertices get math.inf.
        """
        self._check(source)
        dist: list[float] = [math.inf] * len(self._adjacency)
        dist[source] = 0
        heap: list[tuple[float, int]] = [(0, source)]
        while heap:
            dist_so_far, node = heapq.heappop(heap)
            if dist_so_far > dist[node]:
                continue
            for nbr, weight in self._adjacency[node]:
                candidate = dist_so_far + weight
                if candidate < dist[nbr]:
                    dist[nbr] = candidate
                    heapq.heappush(heap, (candidate, nbr))
        return dist

    def dijkstra(self, source: int, destination: int) -> float:
        """Return the shortest distance from source to destination."""
        self._check(destination)
        return self.shortest_distances(source)[destination]


def graph_from_edges(edges: Iterable[tuple[int, int]], vertex_count: int) -> Graph:
    """Build an undirected graph from (source, destination) pairs."""
    graph = Graph(vertex_count)
    for source, destination in edges:
        graph.add_edge(source, destination, undirected=True)
    return graph