"""
Functions related to undirected graphs
"""

import logging
from collections import deque
from collections.abc import Iterable
from enum import Enum
from typing import Callable, TypeVar

from utils.algorithms.traversal import depth_first_preorder

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Colour(Enum):
    """Two-colouring classes for the bipartite check"""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> "Colour":
        return Colour.BLACK if self is Colour.WHITE else Colour.WHITE


def nodes_to_connected_components(
    nodes: Iterable[T], node_to_neighbours: Callable[[T], Iterable[T]]
) -> tuple[frozenset[T], ...]:
    """
    Extract connected components from an undirected graph structure.

    Args:
        nodes: nodes of the graph.
        node_to_neighbours: Function returning the nodes a given node is linked to.

    Returns:
        Components in discovery order; together they partition the nodes.
    """
    seen: set[T] = set()
    components: list[frozenset[T]] = []

    # Guarantees all the nodes are at least visited once
    for node in nodes:
        if node in seen:
            continue
        components.append(
            frozenset(depth_first_preorder(node_to_neighbours, node, seen))
        )
    return tuple(components)


def is_bipartite(
    nodes: Iterable[T], node_to_neighbours: Callable[[T], Iterable[T]]
) -> bool:
    """
    Check if the nodes can be split in two classes with no edge inside a class.

    Breadth-first two-colouring of every component. Stops at the first edge
    whose endpoints share a colour. Empty graphs are bipartite.
    """
    colour: dict[T, Colour] = {}

    for node in nodes:
        if node in colour:
            continue

        colour[node] = Colour.WHITE
        queue = deque([node])
        while queue:
            current = queue.popleft()
            for neighbour in node_to_neighbours(current):
                if neighbour not in colour:
                    colour[neighbour] = colour[current].opposite
                    queue.append(neighbour)
                elif colour[neighbour] is colour[current]:
                    logger.debug(f"Odd cycle through edge ({current}, {neighbour})")
                    return False
    return True


def breadth_first_distance(
    node_to_neighbours: Callable[[T], Iterable[T]], source: T, target: T
) -> int | None:
    """
    Number of edges on a shortest path from source to target.

    Returns:
        The distance, or None if target cannot be reached.
    """
    distance: dict[T, int] = {source: 0}
    queue = deque([source])
    while queue:
        current = queue.popleft()
        if current == target:
            return distance[current]
        for neighbour in node_to_neighbours(current):
            if neighbour not in distance:
                distance[neighbour] = distance[current] + 1
                queue.append(neighbour)
    return None
