"""
In-memory generic graphs and their algorithms.

Variants:
- DirectedGraph: cycles, topological order, transpose, strongly connected components
- Forest: undirected and acyclic, bipartiteness, connected components
- Network: weighted, shortest paths, minimum spanning tree, maximum flow

Every variant supports vertex/edge mutation, breadth/depth-first
iterators, adjacency snapshots and matrix views. The algorithms
themselves live in utils/ as functions over adjacency mappings.
"""

from .base import AdjacencyGraph
from .directed import DirectedGraph
from .forest import Forest
from .network import Network
from .types import GraphMutation, GraphQuery, Traversable, WeightedQuery

__all__ = [
    # Variants
    "AdjacencyGraph",
    "DirectedGraph",
    "Forest",
    "Network",
    # Capabilities
    "GraphQuery",
    "GraphMutation",
    "Traversable",
    "WeightedQuery",
]
