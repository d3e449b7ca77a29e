"""Minimum spanning trees and shortest routes over weighted edges."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Sequence
from typing import Any, NamedTuple


class WeightedEdge(NamedTuple):
    """An edge between u and v carrying a weight."""

    u: Any
    v: Any
    weight: float


def kruskal(vertex_count: int, edges: Iterable[tuple[int, int, float]]) -> list[WeightedEdge]:
    """Return a minimum spanning forest by Kruskal's algorithm.

    Edges are taken in order of weight, then endpoints.
    """
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative, got {vertex_count}")
    parent = list(range(vertex_count))

    def find(i: int) -> int:
        while parent[i] != i:
            i = parent[i]
        return i

    ordered = sorted(
        (WeightedEdge(*edge) for edge in edges),
        key=lambda e: (e.weight, e.u, e.v),
    )
    tree: list[WeightedEdge] = []
    for edge in ordered:
        for end in (edge.u, edge.v):
            if not 0 <= end < vertex_count:
                raise IndexError(f"vertex {end} is out of range")
        root_u, root_v = find(edge.u), find(edge.v)
        if root_u != root_v:
            tree.append(edge)
            parent[root_u] = root_v
    return tree


def prim(matrix: Sequence[Sequence[float]]) -> list[WeightedEdge]:
    """Return a minimum spanning tree of an adjacency matrix by Prim's algorithm.

    A zero entry means no edge. The tree grows from vertex 0.
    """
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")
    selected = [False] * size
    if size:
        selected[0] = True
    tree: list[WeightedEdge] = []
    while len(tree) < size - 1:
        candidates = (
            WeightedEdge(i, j, weight)
            for i, row in enumerate(rows)
            if selected[i]
            for j, weight in enumerate(row)
            if not selected[j] and weight
        )
        best = min(candidates, key=lambda e: e.weight, default=None)
        if best is None:
            raise ValueError("graph is not connected")
        tree.append(best)
        selected[best.v] = True
    return tree


def shortest_route(
    edges: Iterable[tuple[Hashable, Hashable, float]],
    start: Hashable,
    destination: Hashable,
) -> tuple[float, list[Hashable]]:
    """Return the shortest distance and route from start to destination.

    Edges are undirected. The route lists the nodes from start to destination.
    """
    edge_list = [WeightedEdge(*edge) for edge in edges]
    nodes: dict[Hashable, None] = {}
    for edge in edge_list:
        nodes.setdefault(edge.u)
        nodes.setdefault(edge.v)
    for node in (start, destination):
        if node not in nodes:
            raise KeyError(node)

    distance: dict[Hashable, float] = {node: math.inf for node in nodes}
    previous: dict[Hashable, Hashable] = {}
    distance[start] = 0

    def edge_length(a: Hashable, b: Hashable) -> float:
        return next(e.weight for e in edge_list if {e.u, e.v} == {a, b})

    remaining = list(nodes)
    while remaining:
        smallest = min(remaining, key=distance.__getitem__)
        remaining.remove(smallest)
        for edge in edge_list:
            if edge.u == smallest:
                adjacent = edge.v
            elif edge.v == smallest:
                adjacent = edge.u
            else:
                continue
            if adjacent not in remaining:
                continue
            candidate = distance[smallest] + edge_length(smallest, adjacent)
            if candidate < distance[adjacent]:
                distance[adjacent] = candidate
                previous[adjacent] = smallest

    if distance[destination] == math.inf:
        raise ValueError(f"{destination!r} is not reachable from {start!r}")
    route = [destination]
    while route[-1] != start:
        route.append(previous[route[-1]])
    route.reverse()
    return distance[destination], route