"""
Maximum flow (Edmonds-Karp).

The residual graph holds, for every capacity entry u -> v of capacity c, a
forward edge (u -> v, flow 0, capacity c) and a backward edge
(v -> u, flow 0, capacity 0). Each edge knows its pair: pushing flow on
one takes the same amount off the other, which keeps flow conserved.

Augmenting paths are found breadth-first, so each one is a shortest path
in the residual graph; this is what bounds the number of augmentations
polynomially. A depth-first search would lose that bound.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from constants import NO_FLOW
from localtypes import Neighbour

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(eq=False)
class ResidualEdge(Generic[T]):
    source: T
    target: T
    capacity: int
    flow: int = 0
    pair: ResidualEdge[T] | None = field(default=None, repr=False)

    @property
    def residual(self) -> int:
        return self.capacity - self.flow

    def push(self, amount: int) -> None:
        """Send `amount` along this edge and cancel it on the paired edge."""
        assert self.pair is not None, f"Unpaired residual edge: {self}"
        self.flow += amount
        self.pair.flow -= amount


class ResidualGraph(Generic[T]):
    """Residual edges of a capacity network, grouped by source vertex."""

    def __init__(self, vertices: Iterable[T] = ()) -> None:
        self._edges: dict[T, list[ResidualEdge[T]]] = {
            vertex: [] for vertex in vertices
        }

    @classmethod
    def from_adjacency(
        cls, adjacency: Mapping[T, Iterable[Neighbour[T]]]
    ) -> ResidualGraph[T]:
        residual = cls(adjacency)
        for u, neighbours in adjacency.items():
            for v, capacity in neighbours:
                residual.add_capacity(u, v, capacity)
        return residual

    def add_capacity(self, u: T, v: T, capacity: int) -> None:
        forward = ResidualEdge(u, v, capacity)
        backward = ResidualEdge(v, u, 0)
        forward.pair = backward
        backward.pair = forward
        self._edges.setdefault(u, []).append(forward)
        self._edges.setdefault(v, []).append(backward)

    def edges_from(self, vertex: T) -> list[ResidualEdge[T]]:
        return self._edges.get(vertex, [])

    def augmenting_path(self, source: T, sink: T) -> list[ResidualEdge[T]] | None:
        """
        Breadth-first search over edges with residual capacity left.

        Returns:
            Edges from source to sink, or None if the sink is unreachable.
        """
        reached_by: dict[T, ResidualEdge[T] | None] = {source: None}
        queue = deque([source])
        while queue and sink not in reached_by:
            current = queue.popleft()
            for edge in self.edges_from(current):
                if edge.target not in reached_by and edge.residual > 0:
                    reached_by[edge.target] = edge
                    queue.append(edge.target)

        if sink not in reached_by:
            return None

        path: list[ResidualEdge[T]] = []
        vertex = sink
        while (edge := reached_by[vertex]) is not None:
            path.append(edge)
            vertex = edge.source
        path.reverse()
        return path


def edmonds_karp(
    adjacency: Mapping[T, Iterable[Neighbour[T]]], source: T, sink: T
) -> int:
    """
    Maximum flow from source to sink.

    Args:
        adjacency: Every vertex mapped to its (neighbour, capacity) entries.

    Returns:
        The total flow, or NO_FLOW if source and sink are the same vertex.
    """
    if source == sink:
        return NO_FLOW

    residual = ResidualGraph.from_adjacency(adjacency)
    total = 0
    while (path := residual.augmenting_path(source, sink)) is not None:
        bottleneck = min(edge.residual for edge in path)
        for edge in path:
            edge.push(bottleneck)
        total += bottleneck
        logger.debug(
            f"Augmented {bottleneck} along {len(path)} edges, total {total}"
        )
    return total


__all__ = [
    "ResidualEdge",
    "ResidualGraph",
    "edmonds_karp",
]
