"""
Weighted graphs: shortest paths, spanning trees and flows.
"""

import logging
from collections.abc import Iterable

from typing_extensions import override

from constants import DEFAULT_EDGE_ORDERING
from errors import ensure_not_none
from localtypes import EdgeOrdering, Neighbour, V, WeightedEdge
from utils.algorithms.flow import edmonds_karp
from utils.algorithms.paths import shortest_path_faster
from utils.algorithms.spanning import kruskal

from .base import AdjacencyGraph

logger = logging.getLogger(__name__)


class Network(AdjacencyGraph[V, Neighbour[V], WeightedEdge[V]]):
    """
    General purpose weighted graph, undirected unless told otherwise.

    Adjacency entries are (neighbour, weight) pairs, so two vertices may be
    joined by several edges of different weights.

    Example:
        >>> network = Network[str]()
        >>> network.add_edge("a", "b", 3)
        >>> network.add_edge("b", "c", 4)
        >>> network.shortest_path("a", "c")
        7
    """

    def __init__(self, directed: bool = False) -> None:
        super().__init__()
        self._directed = directed
        self._ordering: EdgeOrdering = DEFAULT_EDGE_ORDERING

    @override
    def _target(self, entry: Neighbour[V]) -> V:
        return entry.vertex

    @override
    def _weighted(self) -> dict[V, Iterable[tuple[V, int]]]:
        return dict(self._adjacency)

    @override
    def is_directed(self) -> bool:
        return self._directed

    def add_edge(self, u: V, v: V, weight: int) -> None:
        ensure_not_none(u, v, weight)
        self.add_weighted_edge(WeightedEdge(u, v, weight))

    def add_weighted_edge(self, edge: WeightedEdge[V]) -> None:
        """Add an edge and its endpoints. Adding an existing edge does nothing."""
        ensure_not_none(edge)
        ensure_not_none(edge.u, edge.v, edge.weight)
        if edge in self._edges:
            return

        self._insert(edge, Neighbour(edge.v, edge.weight))
        if not self._directed:
            self._insert(edge.reversed(), Neighbour(edge.u, edge.weight))

    def remove_edge(self, u: V, v: V, weight: int) -> None:
        """Remove the edge of this weight between u and v. Missing edges are ignored."""
        ensure_not_none(u, v, weight)
        edge = WeightedEdge(u, v, weight)
        if edge not in self._edges:
            return

        self._delete(edge, Neighbour(v, weight))
        if not self._directed:
            self._delete(edge.reversed(), Neighbour(u, weight))

    def edge_sum(self) -> int:
        """Total weight, each undirected edge counted once."""
        return sum(edge.weight for edge in self._logical_edges())

    def set_edge_ordering(self, key: EdgeOrdering) -> None:
        """Set the sort key used to pick spanning tree edges, lightest first by default."""
        ensure_not_none(key)
        self._ordering = key

    def shortest_path(self, u: V, v: V) -> int | None:
        """
        Weight of a lightest path from u to v (SPFA).

        Weights are expected to be non-negative.

        Returns:
            The total weight, or None if v cannot be reached from u.

        Raises:
            VertexNotFoundError: if u or v is not in the network.
        """
        self._require(u)
        self._require(v)
        return shortest_path_faster(self._adjacency, u, v)

    def spanning_tree(self, key: EdgeOrdering | None = None) -> "Network[V] | None":
        """
        Minimum spanning tree by Kruskal's algorithm.

        Edges are taken in the order given by `key`, or by the network's edge
        ordering when no key is given.

        Returns:
            A new undirected network with every vertex of this one, or None
            if the network is directed or has no edges.
        """
        if self._directed or not self._edges:
            return None

        tree: Network[V] = Network()
        tree.set_edge_ordering(self._ordering)
        for vertex in self._vertices:
            tree.add_vertex(vertex)

        ordering = self._ordering if key is None else key
        for edge in kruskal(self._vertices, list(self._edges), ordering):
            tree.add_weighted_edge(edge)
        return tree

    def max_flow(self, source: V, sink: V) -> int:
        """
        Maximum flow from source to sink, weights being capacities (Edmonds-Karp).

        Returns:
            The flow value, or -1 if source and sink are the same vertex.

        Raises:
            VertexNotFoundError: if source or sink is not in the network.
        """
        self._require(source)
        self._require(sink)
        flow = edmonds_karp(self._adjacency, source, sink)
        logger.debug(f"Max flow {source!r} -> {sink!r}: {flow}")
        return flow


__all__ = ["Network"]
