"""
Adjacency model shared by every graph variant.

A graph owns three structures kept consistent by every mutation:
- the vertex set
- the adjacency index: vertex -> set of entries, every vertex being a key.
  Entries are the successor itself for unweighted graphs, and
  Neighbour(successor, weight) for weighted ones
- the edges, insertion ordered. Undirected graphs store both directions
  of each logical edge

Variants decide how entries map to successor vertices and how edges are
inserted; everything else lives here.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable, Iterator, Sequence
from typing import Generic, TypeVar

import numpy as np
from scipy.sparse import csr_array

from errors import VertexNotFoundError, ensure_not_none
from localtypes import Edge, V
from utils.algorithms.traversal import GraphIterator
from utils.graph import breadth_first_distance
from utils.matrix import adjacency_to_matrix, unweighted

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)  # adjacency entry
E = TypeVar("E", bound=Edge)


class AdjacencyGraph(ABC, Generic[V, N, E]):
    def __init__(self) -> None:
        self._vertices: set[V] = set()
        self._adjacency: dict[V, set[N]] = {}
        self._edges: dict[E, None] = {}

    @abstractmethod
    def _target(self, entry: N) -> V:
        """Vertex an adjacency entry points to."""

    @abstractmethod
    def _weighted(self) -> dict[V, Iterable[tuple[V, int]]]:
        """Adjacency as (successor, weight) entries."""

    @abstractmethod
    def is_directed(self) -> bool: ...

    # Vertex lifecycle

    def add_vertex(self, vertex: V) -> None:
        ensure_not_none(vertex)
        self._vertices.add(vertex)
        self._adjacency.setdefault(vertex, set())

    def remove_vertex(self, vertex: V) -> None:
        """
        Remove a vertex with every edge and adjacency entry touching it.

        Raises:
            VertexNotFoundError: if the vertex is not in the graph.
        """
        self._require(vertex)

        self._vertices.remove(vertex)
        self._edges = {
            edge: None
            for edge in self._edges
            if edge.u != vertex and edge.v != vertex
        }
        del self._adjacency[vertex]
        for entries in self._adjacency.values():
            entries.difference_update(
                [entry for entry in entries if self._target(entry) == vertex]
            )
        logger.debug(f"Removed vertex {vertex!r}, {len(self._edges)} edges left")

    def contains(self, vertex: V) -> bool:
        ensure_not_none(vertex)
        return vertex in self._vertices

    def __contains__(self, vertex: object) -> bool:
        return self.contains(vertex)  # type: ignore[arg-type]

    def degree(self, vertex: V) -> int:
        """Number of adjacency entries of the vertex (its successors)."""
        self._require(vertex)
        return len(self._adjacency[vertex])

    def vertex_count(self) -> int:
        return len(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        """Number of logical edges: both directions of an undirected edge count once."""
        return sum(1 for _ in self._logical_edges())

    def neighbours(self, vertex: V) -> Iterator[V]:
        self._require(vertex)
        return self._after(vertex)

    # Traversal

    def breadth_first_iterator(self, source: V) -> GraphIterator[V]:
        """Vertices reachable from source, closest first. Other components are skipped."""
        self._require(source)
        return GraphIterator(self._after, source, depth_first=False)

    def depth_first_iterator(self, source: V) -> GraphIterator[V]:
        """Vertices reachable from source, deepest first. Other components are skipped."""
        self._require(source)
        return GraphIterator(self._after, source, depth_first=True)

    # Introspection

    def get_adjacency_list(self) -> dict[V, frozenset[N]]:
        """Snapshot of the adjacency index; later mutations do not show in it."""
        return {
            vertex: frozenset(entries) for vertex, entries in self._adjacency.items()
        }

    def get_vertices(self) -> frozenset[V]:
        return frozenset(self._vertices)

    def get_edges(self) -> list[E]:
        return list(self._edges)

    def adjacency_matrix(
        self, order: Sequence[V] | None = None, sparse: bool = False
    ) -> tuple[np.ndarray | csr_array, tuple[V, ...]]:
        """
        Matrix of edge weights (1 per edge for unweighted graphs).

        Args:
            order: Vertex for each row/column, sorted vertices by default.
            sparse: Return a scipy CSR array instead of a numpy array.

        Returns:
            The matrix and the vertex order used.
        """
        vertices = tuple(sorted(self._vertices) if order is None else order)
        return adjacency_to_matrix(self._weighted(), vertices, sparse), vertices

    # Equality compares vertices and edges only: equal edges imply equal
    # adjacency for graphs built through this API.

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        assert isinstance(other, AdjacencyGraph)
        return (
            self._vertices == other._vertices
            and self._edges.keys() == other._edges.keys()
        )

    __hash__ = None  # type: ignore[assignment]

    # Helpers for variants

    def _require(self, vertex: V) -> None:
        if not self.contains(vertex):
            raise VertexNotFoundError(vertex)

    def _after(self, vertex: V) -> Iterator[V]:
        return (self._target(entry) for entry in self._adjacency.get(vertex, ()))

    def _insert(self, edge: E, entry: N) -> None:
        """Record one directed edge entry, adding its endpoints if needed."""
        self.add_vertex(edge.u)
        self.add_vertex(edge.v)
        self._edges[edge] = None
        self._adjacency[edge.u].add(entry)

    def _delete(self, edge: E, entry: N) -> None:
        self._edges.pop(edge, None)
        self._adjacency.get(edge.u, set()).discard(entry)

    def _logical_edges(self) -> Iterator[E]:
        if self.is_directed():
            yield from self._edges
            return

        seen: set[Edge] = set()
        for edge in self._edges:
            if edge.reversed() not in seen:
                seen.add(edge)
                yield edge


class Unweighted(Generic[V]):
    """Adjacency entries are the successors themselves."""

    _adjacency: dict[V, set[V]]

    def _target(self, entry: V) -> V:
        return entry

    def _weighted(self) -> dict[V, Iterable[tuple[V, int]]]:
        return unweighted(self._adjacency)

    def shortest_path(self, u: V, v: V) -> int | None:
        """
        Number of edges on a shortest path from u to v.

        Returns:
            The distance, or None if v cannot be reached from u.

        Raises:
            VertexNotFoundError: if u or v is not in the graph.
        """
        self._require(u)  # type: ignore[attr-defined]
        self._require(v)  # type: ignore[attr-defined]
        return breadth_first_distance(self._after, u, v)  # type: ignore[attr-defined]


__all__ = ["AdjacencyGraph", "Unweighted"]
