"""
Tests for utils/matrix.py and the graph matrix views.

Random graphs are cross-checked against scipy.sparse.csgraph.
"""

import numpy as np
import pytest
from scipy.sparse import csgraph, csr_array

from errors import VertexNotFoundError
from graphs import (
    DirectedGraph,
    Forest,
    GraphMutation,
    GraphQuery,
    Network,
    Traversable,
    WeightedQuery,
)
from utils.matrix import adjacency_to_matrix, unweighted

SEEDS = [0, 1, 2, 3, 4]


def random_pairs(rng, n, density, directed):
    """Distinct (u, v) pairs without self-loops."""
    mask = rng.random((n, n)) < density
    np.fill_diagonal(mask, False)
    if not directed:
        mask = np.triu(mask)
    return [(int(u), int(v)) for u, v in zip(*np.nonzero(mask))]


def random_network(seed, n=12, density=0.25, directed=False):
    rng = np.random.default_rng(seed)
    network = Network[int](directed=directed)
    for vertex in range(n):
        network.add_vertex(vertex)
    for u, v in random_pairs(rng, n, density, directed):
        network.add_edge(u, v, int(rng.integers(1, 20)))
    return network


def random_directed(seed, n=12, density=0.15):
    rng = np.random.default_rng(seed)
    graph = DirectedGraph[int]()
    for vertex in range(n):
        graph.add_vertex(vertex)
    for u, v in random_pairs(rng, n, density, directed=True):
        graph.add_edge(u, v)
    return graph


def as_partition(labels):
    groups: dict[int, set[int]] = {}
    for vertex, label in enumerate(labels):
        groups.setdefault(int(label), set()).add(vertex)
    return {frozenset(group) for group in groups.values()}


class TestAdjacencyToMatrix:
    def test_dense(self):
        adjacency = {"a": [("b", 2)], "b": [("a", 3), ("c", 1)], "c": []}
        matrix = adjacency_to_matrix(adjacency, ["a", "b", "c"])
        assert matrix.dtype == np.int64
        assert matrix.tolist() == [[0, 2, 0], [3, 0, 1], [0, 0, 0]]

    def test_sparse_matches_dense(self):
        adjacency = {0: [(1, 4), (2, 5)], 1: [(2, 6)], 2: []}
        dense = adjacency_to_matrix(adjacency, [0, 1, 2])
        sparse = adjacency_to_matrix(adjacency, [0, 1, 2], sparse=True)
        assert isinstance(sparse, csr_array)
        np.testing.assert_array_equal(sparse.toarray(), dense)

    def test_parallel_entries_add_up(self):
        adjacency = {0: [(1, 4), (1, 3)], 1: []}
        assert adjacency_to_matrix(adjacency, [0, 1])[0, 1] == 7
        assert adjacency_to_matrix(adjacency, [0, 1], sparse=True)[0, 1] == 7

    def test_empty(self):
        assert adjacency_to_matrix({}, []).shape == (0, 0)
        assert adjacency_to_matrix({}, [], sparse=True).shape == (0, 0)

    def test_vertex_missing_from_order(self):
        with pytest.raises(VertexNotFoundError):
            adjacency_to_matrix({0: [(1, 1)], 1: []}, [0])

    def test_unweighted(self):
        assert unweighted({0: [1, 2], 1: []}) == {0: [(1, 1), (2, 1)], 1: []}


class TestGraphMatrixViews:
    def test_default_order_is_sorted(self):
        graph = DirectedGraph[str]()
        graph.add_edge("b", "a")
        matrix, order = graph.adjacency_matrix()
        assert order == ("a", "b")
        assert matrix.tolist() == [[0, 0], [1, 0]]

    def test_custom_order(self):
        network = Network[str](directed=True)
        network.add_edge("x", "y", 9)
        matrix, order = network.adjacency_matrix(order=["y", "x"], sparse=True)
        assert order == ("y", "x")
        assert matrix.toarray().tolist() == [[0, 0], [9, 0]]

    @pytest.mark.parametrize("seed", SEEDS)
    def test_undirected_matrix_is_symmetric(self, seed):
        matrix, _ = random_network(seed).adjacency_matrix()
        np.testing.assert_array_equal(matrix, matrix.T)


class TestAgainstCsgraph:
    @pytest.mark.parametrize("seed", SEEDS)
    def test_connected_components(self, seed):
        rng = np.random.default_rng(seed)
        forest = Forest[int]()
        for vertex in range(15):
            forest.add_vertex(vertex)
        for _ in range(10):
            u, v = (int(x) for x in rng.integers(0, 15, size=2))
            if u not in forest.breadth_first_iterator(v):
                forest.add_edge(u, v)

        matrix, _ = forest.adjacency_matrix(sparse=True)
        count, labels = csgraph.connected_components(matrix, directed=False)
        components = forest.connected_components()
        assert len(components) == count
        assert set(components) == as_partition(labels)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_strongly_connected_components(self, seed):
        graph = random_directed(seed)
        matrix, _ = graph.adjacency_matrix(sparse=True)
        count, labels = csgraph.connected_components(
            matrix, directed=True, connection="strong"
        )
        components = graph.strongly_connected_components()
        assert len(components) == count
        assert set(components) == as_partition(labels)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_unweighted_distances(self, seed):
        graph = random_directed(seed)
        matrix, order = graph.adjacency_matrix(sparse=True)
        distances = csgraph.shortest_path(matrix, directed=True, unweighted=True)
        for i, u in enumerate(order):
            for j, v in enumerate(order):
                expected = distances[i, j]
                found = graph.shortest_path(u, v)
                if np.isinf(expected):
                    assert found is None
                else:
                    assert found == int(expected)

    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("directed", [False, True])
    def test_shortest_paths(self, seed, directed):
        network = random_network(seed, directed=directed)
        matrix, order = network.adjacency_matrix(sparse=True)
        distances = csgraph.dijkstra(matrix, directed=directed, indices=0)
        for j, v in enumerate(order):
            found = network.shortest_path(order[0], v)
            if np.isinf(distances[j]):
                assert found is None
            else:
                assert found == int(distances[j])

    @pytest.mark.parametrize("seed", SEEDS)
    def test_spanning_tree_weight(self, seed):
        network = random_network(seed, density=0.4)
        matrix, _ = network.adjacency_matrix(sparse=True)
        expected = csgraph.minimum_spanning_tree(matrix).sum()

        tree = network.spanning_tree()
        assert tree is not None
        assert tree.edge_sum() == int(expected)
        count, _ = csgraph.connected_components(matrix, directed=False)
        assert tree.edge_count() == network.vertex_count() - count

    @pytest.mark.parametrize("seed", SEEDS)
    def test_max_flow(self, seed):
        network = random_network(seed, density=0.3, directed=True)
        matrix, order = network.adjacency_matrix(sparse=True)
        sink = len(order) - 1
        expected = csgraph.maximum_flow(matrix.astype(np.int32), 0, sink).flow_value
        assert network.max_flow(order[0], order[sink]) == expected


class TestCapabilities:
    def test_every_variant_is_queryable(self):
        for graph in (DirectedGraph(), Forest(), Network()):
            assert isinstance(graph, GraphQuery)
            assert isinstance(graph, GraphMutation)
            assert isinstance(graph, Traversable)

    def test_only_networks_are_weighted(self):
        assert isinstance(Network(), WeightedQuery)
        assert not isinstance(DirectedGraph(), WeightedQuery)
        assert not isinstance(Forest(), WeightedQuery)
