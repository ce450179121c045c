"""Tests for graphs/directed.py"""

import pytest

from errors import NullArgumentError, VertexNotFoundError
from graphs import DirectedGraph
from localtypes import Edge


def build(*edges):
    graph = DirectedGraph[int]()
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


class TestVertexLifecycle:
    def test_add_edge_adds_endpoints(self):
        graph = build((0, 1))
        assert 0 in graph and 1 in graph
        assert graph.contains(1)
        assert len(graph) == 2

    def test_duplicate_edge_ignored(self):
        graph = build((0, 1), (0, 1))
        assert graph.edge_count() == 1
        assert graph.degree(0) == 1

    def test_opposite_edges_are_distinct(self):
        graph = build((0, 1), (1, 0))
        assert graph.edge_count() == 2

    def test_degree_counts_successors(self):
        graph = build((0, 1), (0, 2), (3, 0))
        assert graph.degree(0) == 2
        assert graph.degree(3) == 1
        assert graph.degree(1) == 0

    def test_remove_vertex_purges_references(self):
        graph = build((0, 1), (1, 2), (2, 0), (2, 1))
        graph.remove_vertex(1)
        assert 1 not in graph
        assert graph.get_edges() == [Edge(2, 0)]
        adjacency = graph.get_adjacency_list()
        assert 1 not in adjacency
        assert all(1 not in successors for successors in adjacency.values())

    def test_remove_missing_vertex(self):
        with pytest.raises(VertexNotFoundError) as info:
            build((0, 1)).remove_vertex(7)
        assert info.value.vertex == 7

    def test_degree_of_missing_vertex(self):
        with pytest.raises(VertexNotFoundError):
            DirectedGraph[int]().degree(0)

    def test_none_rejected(self):
        graph = DirectedGraph[int]()
        with pytest.raises(NullArgumentError):
            graph.add_vertex(None)  # type: ignore[arg-type]
        with pytest.raises(NullArgumentError):
            graph.add_edge(0, None)  # type: ignore[arg-type]
        with pytest.raises(NullArgumentError):
            graph.contains(None)  # type: ignore[arg-type]
        assert graph.vertex_count() == 0


class TestEdgeRemoval:
    def test_remove_edge_keeps_vertices(self):
        graph = build((0, 1), (1, 2))
        graph.remove_edge(0, 1)
        assert graph.vertex_count() == 3
        assert graph.edge_count() == 1
        assert graph.degree(0) == 0
        assert graph.shortest_path(0, 2) is None

    def test_remove_missing_edge_is_noop(self):
        graph = build((0, 1))
        graph.remove_edge(1, 0)
        graph.remove_edge(5, 6)
        assert graph.get_edges() == [Edge(0, 1)]

    def test_remove_every_edge_of_chain(self):
        edges = [(i, i + 1) for i in range(6)]
        graph = build(*edges)
        for u, v in edges:
            graph.remove_edge(u, v)
        assert graph.edge_count() == 0
        assert graph.vertex_count() == 7


class TestScenarios:
    def test_triangle(self):
        graph = build((0, 1), (1, 2), (2, 0))
        assert graph.vertex_count() == 3
        assert graph.edge_count() == 3
        assert graph.is_directed()
        assert graph.is_cyclic()
        assert graph.strongly_connected_components() == (frozenset({0, 1, 2}),)
        assert list(graph.breadth_first_iterator(0)) == [0, 1, 2]
        assert list(graph.depth_first_iterator(0)) == [0, 1, 2]

    def test_cycle_with_tail(self):
        graph = build((1, 0), (0, 2), (2, 1), (0, 3), (3, 4))
        assert graph.vertex_count() == 5
        assert graph.edge_count() == 5
        assert graph.is_cyclic()
        assert set(graph.strongly_connected_components()) == {
            frozenset({0, 1, 2}),
            frozenset({3}),
            frozenset({4}),
        }
        assert graph.shortest_path(0, 4) == 2
        assert graph.shortest_path(4, 0) is None

    def test_dag(self):
        graph = build((5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1))
        assert graph.vertex_count() == 6
        assert graph.edge_count() == 6
        assert not graph.is_cyclic()
        order = graph.topological_sort()
        assert order is not None
        position = {vertex: i for i, vertex in enumerate(order)}
        assert all(position[edge.u] < position[edge.v] for edge in graph.get_edges())
        assert len(graph.strongly_connected_components()) == 6

    def test_topological_sort_of_cyclic_graph(self):
        assert build((0, 1), (1, 0)).topological_sort() is None

    def test_isolated_vertex_in_order(self):
        graph = build((0, 1))
        graph.add_vertex(9)
        order = graph.topological_sort()
        assert order is not None and set(order) == {0, 1, 9}


class TestTranspose:
    def test_reverses_every_edge(self):
        graph = build((0, 1), (1, 2))
        graph.add_vertex(3)
        transposed = graph.transpose()
        assert isinstance(transposed, DirectedGraph)
        assert set(transposed.get_edges()) == {Edge(1, 0), Edge(2, 1)}
        assert transposed.get_vertices() == frozenset({0, 1, 2, 3})

    def test_source_untouched(self):
        graph = build((0, 1))
        graph.transpose().add_edge(5, 6)
        assert graph.get_edges() == [Edge(0, 1)]

    def test_twice_is_identity(self):
        graph = build((0, 1), (1, 2), (2, 0), (2, 3))
        assert graph.transpose().transpose() == graph


class TestShortestPath:
    def test_same_vertex(self):
        assert build((0, 1)).shortest_path(1, 1) == 0

    def test_missing_endpoint(self):
        with pytest.raises(VertexNotFoundError):
            build((0, 1)).shortest_path(0, 8)


class TestIterators:
    def test_only_reachable(self):
        graph = build((0, 1), (2, 0))
        assert list(graph.breadth_first_iterator(0)) == [0, 1]

    def test_missing_source(self):
        with pytest.raises(VertexNotFoundError):
            build((0, 1)).depth_first_iterator(3)

    def test_none_source(self):
        with pytest.raises(NullArgumentError):
            build((0, 1)).breadth_first_iterator(None)  # type: ignore[arg-type]


class TestIntrospection:
    def test_snapshot_is_detached(self):
        graph = build((0, 1))
        snapshot = graph.get_adjacency_list()
        graph.add_edge(0, 2)
        assert snapshot == {0: frozenset({1}), 1: frozenset()}

    def test_edges_in_insertion_order(self):
        graph = build((2, 1), (0, 1), (1, 0))
        assert graph.get_edges() == [Edge(2, 1), Edge(0, 1), Edge(1, 0)]

    def test_equality(self):
        assert build((0, 1), (1, 2)) == build((1, 2), (0, 1))
        assert build((0, 1)) != build((1, 0))
        assert build((0, 1)) != 42

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(DirectedGraph())
