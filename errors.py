"""
Exceptions raised by graph operations.

Errors are synchronous and raised before any state is mutated.
"No path" and "no spanning tree" are not errors: they are returned as None.
"""


class GraphError(Exception):
    """Base class for all graph errors."""

    pass


class NullArgumentError(GraphError, TypeError):
    """Raised when a vertex, weight or ordering argument is None."""

    pass


class VertexNotFoundError(GraphError, LookupError):
    """Raised when an operation requires a vertex absent from the graph."""

    def __init__(self, vertex: object) -> None:
        super().__init__(f"The vertex does not exist: {vertex!r}")
        self.vertex = vertex


class CycleViolationError(GraphError, ValueError):
    """Raised when an edge added to a forest would create a cycle."""

    def __init__(self, u: object, v: object) -> None:
        super().__init__(f"Edge ({u!r}, {v!r}) would create a cycle")
        self.u = u
        self.v = v


class IteratorExhausted(StopIteration):
    """
    Raised when a graph iterator is advanced after its last vertex.

    Subclasses StopIteration so that for loops end normally.
    """

    pass


def ensure_not_none(*values: object) -> None:
    if any(value is None for value in values):
        raise NullArgumentError(f"None is not a valid argument: {values}")


__all__ = [
    "GraphError",
    "NullArgumentError",
    "VertexNotFoundError",
    "CycleViolationError",
    "IteratorExhausted",
    "ensure_not_none",
]
