"""
Directed graphs.
"""

from typing_extensions import Self, override

from errors import ensure_not_none
from localtypes import Edge, V
from utils import dag_functionals

from .base import AdjacencyGraph, Unweighted


class DirectedGraph(Unweighted[V], AdjacencyGraph[V, V, Edge[V]]):
    """
    Graph whose edges go one way.

    Example:
        >>> g = DirectedGraph[int]()
        >>> g.add_edge(0, 1)
        >>> g.add_edge(1, 0)
        >>> g.is_cyclic()
        True
    """

    @override
    def is_directed(self) -> bool:
        return True

    def add_edge(self, u: V, v: V) -> None:
        """Add the edge u -> v and its endpoints. Adding an existing edge does nothing."""
        ensure_not_none(u, v)
        edge = Edge(u, v)
        if edge not in self._edges:
            self._insert(edge, v)

    def remove_edge(self, u: V, v: V) -> None:
        """Remove the edge u -> v, keeping both endpoints. Missing edges are ignored."""
        ensure_not_none(u, v)
        self._delete(Edge(u, v), v)

    def is_cyclic(self) -> bool:
        return dag_functionals.is_cyclic(self._adjacency)

    def topological_sort(self) -> tuple[V, ...] | None:
        """
        Order vertices so that every edge goes from an earlier to a later one.

        Returns:
            The ordering, or None if the graph has a cycle.
        """
        return dag_functionals.topological_sort(self._adjacency)

    def transpose(self) -> Self:
        """New graph with the same vertices and every edge reversed."""
        transposed = type(self)()
        for vertex in self._vertices:
            transposed.add_vertex(vertex)
        for edge in self._edges:
            transposed.add_edge(edge.v, edge.u)
        return transposed

    def strongly_connected_components(self) -> tuple[frozenset[V], ...]:
        """Partition of the vertices where each part is mutually reachable."""
        return dag_functionals.strongly_connected_components(self._adjacency)


__all__ = ["DirectedGraph"]
