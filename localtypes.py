"""
Type definitions for graphs.

This module contains the custom types used throughout the graph library,
organized by their primary use cases.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping, Set
from dataclasses import dataclass
from typing import Any, Generic, NamedTuple, TypeAlias, TypeVar

# Vertices are opaque values compared by equality
V = TypeVar("V", bound=Hashable)
T = TypeVar("T")


# Edges
@dataclass(frozen=True)
class Edge(Generic[V]):
    """Directed pair of vertices. Undirected graphs store both directions."""

    u: V
    v: V

    def reversed(self) -> Edge[V]:
        return Edge(self.v, self.u)


@dataclass(frozen=True)
class WeightedEdge(Edge[V]):
    """
    Edge with an integer weight.

    Identity is (u, v, weight). How edges are ordered for sorting is not a
    property of the edge: it is passed to the sort as a key function.
    """

    weight: int

    def reversed(self) -> WeightedEdge[V]:
        return WeightedEdge(self.v, self.u, self.weight)


class Neighbour(NamedTuple, Generic[V]):
    """Entry of a weighted adjacency set"""

    vertex: V
    weight: int


# Graph representations
Adjacency: TypeAlias = Mapping[V, Set[V]]  # vertex -> successors
WeightedAdjacency: TypeAlias = Mapping[V, Set[Neighbour[V]]]
NeighbourFunc: TypeAlias = Callable[[V], Iterable[V]]

# Ordering key for weighted edges, used by spanning tree construction
EdgeOrdering: TypeAlias = Callable[[WeightedEdge[Any]], Any]


__all__ = [
    # Type variables
    "V",
    "T",
    # Edges
    "Edge",
    "WeightedEdge",
    "Neighbour",
    # Graph representations
    "Adjacency",
    "WeightedAdjacency",
    "NeighbourFunc",
    "EdgeOrdering",
]
