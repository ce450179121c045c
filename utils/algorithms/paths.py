"""
Weighted shortest paths.

Precondition: weights are non-negative. Negative weights are not rejected,
but with a negative cycle reachable from the source the queue never
empties.
"""

import logging
from collections import deque
from collections.abc import Iterable, Mapping
from typing import TypeVar

from constants import INFINITY
from localtypes import Neighbour

logger = logging.getLogger(__name__)

T = TypeVar("T")


def shortest_path_faster(
    adjacency: Mapping[T, Iterable[Neighbour[T]]], source: T, target: T
) -> int | None:
    """
    Shortest Path Faster Algorithm, the queue-based Bellman-Ford.

    Every distance starts at INFINITY except the source. Vertices are
    popped from a work queue and their outgoing edges relaxed; a neighbour
    whose distance improved is queued unless it already is.

    Args:
        adjacency: Every vertex mapped to its (neighbour, weight) entries.
        source: Start vertex, must be a key of adjacency.
        target: Destination vertex.

    Returns:
        Total weight of a lightest path, or None if target is unreachable.
    """
    distance: dict[T, int] = {vertex: INFINITY for vertex in adjacency}
    distance[source] = 0

    queue = deque([source])
    queued = {source}
    relaxations = 0

    while queue:
        current = queue.popleft()
        queued.discard(current)

        for neighbour, weight in adjacency.get(current, ()):
            candidate = distance[current] + weight
            if candidate < distance.get(neighbour, INFINITY):
                distance[neighbour] = candidate
                relaxations += 1
                if neighbour not in queued:
                    queue.append(neighbour)
                    queued.add(neighbour)

    logger.debug(f"SPFA from {source}: {relaxations} relaxations")

    result = distance.get(target, INFINITY)
    return None if result == INFINITY else result
