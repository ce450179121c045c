"""
Minimum spanning tree (Kruskal's algorithm).
"""

import logging
from collections.abc import Iterable, Sequence
from typing import TypeVar

from constants import DEFAULT_EDGE_ORDERING
from localtypes import EdgeOrdering, WeightedEdge
from utils.union_find import UnionFind

logger = logging.getLogger(__name__)

T = TypeVar("T")


def kruskal(
    vertices: Iterable[T],
    edges: Sequence[WeightedEdge[T]],
    key: EdgeOrdering = DEFAULT_EDGE_ORDERING,
) -> list[WeightedEdge[T]]:
    """
    Select spanning tree edges, lightest first.

    Edges are sorted by `key` (stable, so ties keep their input order) and
    accepted when their endpoints are still in different sets. Stops once
    the tree has one edge less than there are vertices.

    Both directions of an undirected edge may be given: the second one is
    refused since its endpoints are already joined.

    Returns:
        Accepted edges in acceptance order. For a disconnected graph this is
        a spanning forest.
    """
    components = UnionFind(vertices)
    needed = len(components) - 1
    tree: list[WeightedEdge[T]] = []

    for edge in sorted(edges, key=key):
        if len(tree) >= needed:
            break
        if components.union(edge.u, edge.v):
            tree.append(edge)

    logger.debug(f"Spanning tree with {len(tree)} edges out of {len(edges)}")
    return tree
