"""
Directed graph utilities.

Functions:
    graph_nodes(graph)                   - All nodes, including child-only ones
    is_cyclic(graph)                     - Three-colour depth-first cycle detection
    topological_sort(graph)              - Reversed depth-first postorder
    transpose(graph)                     - Graph with every edge reversed
    strongly_connected_components(graph) - Kosaraju's two-pass algorithm

Graphs are adjacency mappings (node -> set of successors). Nodes that only
appear as successors are part of the graph.
"""

import logging
from collections.abc import Mapping, Set
from enum import Enum
from typing import Iterator, TypeVar

from utils.algorithms.traversal import depth_first_postorder, depth_first_preorder

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Colour(Enum):
    """
    WHITE: not visited yet
    GRAY: on the current exploration path
    BLACK: visited, including all its successors
    """

    WHITE = 0
    GRAY = 1
    BLACK = 2


def graph_nodes(graph: Mapping[T, Set[T]]) -> tuple[T, ...]:
    """Keys first, in mapping order, then nodes only seen as successors."""
    nodes: dict[T, None] = dict.fromkeys(graph)
    for children in graph.values():
        nodes.update(dict.fromkeys(children))
    return tuple(nodes)


def _successors(graph: Mapping[T, Set[T]]):
    def after(node: T) -> Iterator[T]:
        return iter(graph.get(node, ()))

    return after


def is_cyclic(graph: Mapping[T, Set[T]]) -> bool:
    """
    Returns True if the graph has a back edge, i.e. a cycle.

    Explores every node, not only one component. Self-loops are cycles.
    """
    colour: dict[T, Colour] = {node: Colour.WHITE for node in graph_nodes(graph)}

    for root in colour:
        if colour[root] is not Colour.WHITE:
            continue

        colour[root] = Colour.GRAY
        stack: list[tuple[T, Iterator[T]]] = [(root, iter(graph.get(root, ())))]
        while stack:
            current, children = stack[-1]
            for child in children:
                if colour[child] is Colour.GRAY:
                    logger.debug(f"Back edge ({current}, {child})")
                    return True
                if colour[child] is Colour.WHITE:
                    colour[child] = Colour.GRAY
                    stack.append((child, iter(graph.get(child, ()))))
                    break
            else:
                colour[current] = Colour.BLACK
                stack.pop()
    return False


def topological_sort(graph: Mapping[T, Set[T]]) -> tuple[T, ...] | None:
    """
    Returns nodes in topological order using depth-first postorder.

    Args:
        graph: Graph as adjacency list (node -> set of dependents)

    Returns:
        Nodes ordered so parents come before children,
        or None if the graph contains a cycle.
    """
    if is_cyclic(graph):
        logger.debug("No topological order: the graph has a cycle")
        return None

    after = _successors(graph)
    seen: set[T] = set()
    order: list[T] = []
    for node in graph_nodes(graph):
        order.extend(depth_first_postorder(after, node, seen))

    order.reverse()
    return tuple(order)


def transpose(graph: Mapping[T, Set[T]]) -> dict[T, set[T]]:
    """Returns a new graph with every edge reversed. Every node is a key."""
    transposed: dict[T, set[T]] = {node: set() for node in graph_nodes(graph)}
    for parent, children in graph.items():
        for child in children:
            transposed[child].add(parent)
    return transposed


def strongly_connected_components(
    graph: Mapping[T, Set[T]],
) -> tuple[frozenset[T], ...]:
    """
    Partition the nodes into strongly connected components (Kosaraju).

    1. Depth-first search over the graph, stacking nodes as they finish
    2. Depth-first search over the transposed graph, popping the stack:
       each unvisited node seeds a component made of what it reaches

    Returns:
        Components in discovery order. A DAG gives one singleton per node.
    """
    after = _successors(graph)
    seen: set[T] = set()
    finished: list[T] = []
    for node in graph_nodes(graph):
        finished.extend(depth_first_postorder(after, node, seen))

    after_transposed = _successors(transpose(graph))
    seen.clear()
    components: list[frozenset[T]] = []
    while finished:
        node = finished.pop()
        if node not in seen:
            components.append(
                frozenset(depth_first_preorder(after_transposed, node, seen))
            )

    logger.debug(f"{len(components)} strongly connected components")
    return tuple(components)


__all__ = [
    "graph_nodes",
    "is_cyclic",
    "topological_sort",
    "transpose",
    "strongly_connected_components",
]
