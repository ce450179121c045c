"""
Capability interfaces of graph objects.

Each protocol covers one concern; graph classes satisfy several of them
structurally instead of inheriting from a hierarchy of interfaces:

- GraphQuery: counting and lookups
- GraphMutation: vertex lifecycle
- Traversable: lazy breadth/depth-first iteration
- WeightedQuery: weight-aware analysis
"""

from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable

from localtypes import V


@runtime_checkable
class GraphQuery(Protocol[V]):
    def vertex_count(self) -> int: ...

    def edge_count(self) -> int: ...

    def contains(self, vertex: V) -> bool: ...

    def degree(self, vertex: V) -> int: ...

    def is_directed(self) -> bool: ...

    def shortest_path(self, u: V, v: V) -> int | None: ...


@runtime_checkable
class GraphMutation(Protocol[V]):
    def add_vertex(self, vertex: V) -> None: ...

    def remove_vertex(self, vertex: V) -> None: ...


@runtime_checkable
class Traversable(Protocol[V]):
    def breadth_first_iterator(self, source: V) -> Iterator[V]: ...

    def depth_first_iterator(self, source: V) -> Iterator[V]: ...


@runtime_checkable
class WeightedQuery(Protocol[V]):
    def edge_sum(self) -> int: ...

    def spanning_tree(self, key: Any = None) -> "WeightedQuery[V] | None": ...

    def max_flow(self, source: V, sink: V) -> int: ...


__all__ = ["GraphQuery", "GraphMutation", "Traversable", "WeightedQuery"]
