import pytest
from hypothesis import given, strategies as st

from algokit.graphs import WeightedGraph
from algokit.weighted import WeightedEdge, kruskal, prim, shortest_route

KRUSKAL_EDGES = [
    (0, 1, 4), (0, 2, 4), (1, 2, 2), (1, 0, 4), (2, 0, 4), (2, 1, 2), (2, 3, 3),
    (2, 5, 2), (2, 4, 4), (3, 2, 3), (3, 4, 3), (4, 2, 4), (4, 3, 3), (5, 2, 2),
    (5, 4, 3),
]

PRIM_MATRIX = [
    [0, 9, 75, 0, 0],
    [9, 0, 95, 19, 42],
    [75, 95, 0, 51, 66],
    [0, 19, 51, 0, 31],
    [0, 42, 66, 31, 0],
]

ROUTE_EDGES = [
    ("a", "c", 1), ("a", "d", 2), ("b", "c", 2), ("c", "d", 1), ("b", "f", 3),
    ("c", "e", 3), ("e", "f", 2), ("d", "g", 1), ("g", "f", 1),
]


def _components(n, edges):
    parent = list(range(n))

    def find(i):
        while parent[i] != i:
            i = parent[i]
        return i

    for u, v, _ in edges:
        parent[find(u)] = find(v)
    return len({find(i) for i in range(n)})


@st.composite
def _connected_matrices(draw):
    n = draw(st.integers(min_value=1, max_value=7))
    matrix = [[0] * n for _ in range(n)]
    weight = st.integers(min_value=1, max_value=30)
    for i in range(1, n):
        j = draw(st.integers(min_value=0, max_value=i - 1))
        matrix[i][j] = matrix[j][i] = draw(weight)
    extra = draw(st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1), weight), max_size=12))
    for i, j, w in extra:
        if i != j:
            matrix[i][j] = matrix[j][i] = w
    return matrix


def _matrix_edges(matrix):
    return [
        (i, j, w)
        for i, row in enumerate(matrix)
        for j, w in enumerate(row)
        if w and i < j
    ]


def test_kruskal_source_example_weight():
    tree = kruskal(6, KRUSKAL_EDGES)
    assert sum(edge.weight for edge in tree) == 14
    assert len(tree) == 5
    assert _components(6, tree) == 1


def test_kruskal_returns_weighted_edges_in_weight_order():
    tree = kruskal(6, KRUSKAL_EDGES)
    assert all(isinstance(edge, WeightedEdge) for edge in tree)
    weights = [edge.weight for edge in tree]
    assert weights == sorted(weights)


def test_kruskal_forest_for_disconnected_graph():
    tree = kruskal(4, [(0, 1, 5), (2, 3, 1)])
    assert tree == [WeightedEdge(2, 3, 1), WeightedEdge(0, 1, 5)]


def test_kruskal_out_of_range_vertex():
    with pytest.raises(IndexError):
        kruskal(2, [(0, 2, 1)])


def test_prim_matches_kruskal_on_source_matrix():
    tree = prim(PRIM_MATRIX)
    assert len(tree) == 4
    assert tree[0].u == 0
    assert sum(e.weight for e in tree) == sum(
        e.weight for e in kruskal(5, _matrix_edges(PRIM_MATRIX))
    )
    assert all(PRIM_MATRIX[e.u][e.v] == e.weight for e in tree)


@given(_connected_matrices())
def test_prim_and_kruskal_agree(matrix):
    n = len(matrix)
    by_prim = prim(matrix)
    by_kruskal = kruskal(n, _matrix_edges(matrix))
    assert len(by_prim) == len(by_kruskal) == n - 1
    assert sum(e.weight for e in by_prim) == sum(e.weight for e in by_kruskal)
    assert _components(n, by_prim) == 1
    assert _components(n, by_kruskal) == 1


def test_prim_disconnected_raises():
    with pytest.raises(ValueError):
        prim([[0, 0], [0, 0]])


def test_prim_non_square_raises():
    with pytest.raises(ValueError):
        prim([[0, 1], [1]])


def test_prim_empty_matrix():
    assert prim([]) == []


def test_shortest_route_source_example():
    distance, route = shortest_route(ROUTE_EDGES, "a", "f")
    assert distance == 4
    assert route == ["a", "d", "g", "f"]


def test_shortest_route_to_start_itself():
    assert shortest_route(ROUTE_EDGES, "c", "c") == (0, ["c"])


def test_shortest_route_unreachable():
    with pytest.raises(ValueError):
        shortest_route([("a", "b", 1), ("c", "d", 1)], "a", "d")


def test_shortest_route_unknown_node():
    with pytest.raises(KeyError):
        shortest_route(ROUTE_EDGES, "a", "z")


@given(_connected_matrices(), st.data())
def test_shortest_route_is_consistent(matrix, data):
    n = len(matrix)
    edges = _matrix_edges(matrix)
    if not edges:
        assert prim(matrix) == []
        return
    nodes = sorted({e[0] for e in edges} | {e[1] for e in edges})
    destination = data.draw(st.sampled_from(nodes))
    distance, route = shortest_route(edges, 0, destination)
    assert route[0] == 0 and route[-1] == destination
    assert sum(matrix[a][b] for a, b in zip(route, route[1:])) == distance
    graph = WeightedGraph(n)
    for u, v, w in edges:
        graph.add_edge(u, v, w)
    assert graph.dijkstra(0, destination) == distance