"""
Undirected acyclic graphs.
"""

import logging

from typing_extensions import override

from errors import CycleViolationError, ensure_not_none
from localtypes import Edge, V
from utils.graph import is_bipartite, nodes_to_connected_components
from utils.union_find import UnionFind

from .base import AdjacencyGraph, Unweighted

logger = logging.getLogger(__name__)


class Forest(Unweighted[V], AdjacencyGraph[V, V, Edge[V]]):
    """
    Undirected graph without cycles.

    Acyclicity is enforced when edges are added: a union-find over the
    vertices tells whether both endpoints are already connected, in which
    case the edge is refused. No traversal is needed.
    """

    def __init__(self) -> None:
        super().__init__()
        self._components: UnionFind[V] = UnionFind()

    @override
    def is_directed(self) -> bool:
        return False

    @override
    def add_vertex(self, vertex: V) -> None:
        super().add_vertex(vertex)
        self._components.make_set(vertex)

    @override
    def remove_vertex(self, vertex: V) -> None:
        super().remove_vertex(vertex)
        self._rebuild_components()

    def add_edge(self, u: V, v: V) -> None:
        """
        Add the undirected edge u - v and its endpoints.

        Adding an existing edge does nothing.

        Raises:
            CycleViolationError: if u and v are already connected. The forest
                is left unchanged.
        """
        ensure_not_none(u, v)
        edge = Edge(u, v)
        if edge in self._edges:
            return

        if not self._components.union(u, v):
            logger.debug(f"Refused edge ({u!r}, {v!r}): endpoints already connected")
            raise CycleViolationError(u, v)

        self._insert(edge, v)
        self._insert(edge.reversed(), u)

    def remove_edge(self, u: V, v: V) -> None:
        """Remove the undirected edge u - v, keeping both endpoints."""
        ensure_not_none(u, v)
        edge = Edge(u, v)
        if edge not in self._edges:
            return

        self._delete(edge, v)
        self._delete(edge.reversed(), u)
        self._rebuild_components()

    def is_bipartite(self) -> bool:
        return is_bipartite(self._adjacency, self._after)

    def connected_components(self) -> tuple[frozenset[V], ...]:
        return nodes_to_connected_components(self._adjacency, self._after)

    def _rebuild_components(self) -> None:
        """Union-find cannot split sets, so it is rebuilt from the remaining edges."""
        components = UnionFind(self._vertices)
        for edge in self._edges:
            components.union(edge.u, edge.v)
        self._components = components


__all__ = ["Forest"]
