"""
Graph traversal utilities.

Iterators:
    GraphIterator(after, source, depth_first) - lazy BFS/DFS over one component

Traversals (explicit stacks, caller-owned `seen` set):
    depth_first_preorder(after, root, seen)  - DFS yielding a vertex when discovered
    depth_first_postorder(after, root, seen) - DFS yielding a vertex when finished

`after` returns the successors of a vertex. Passing the same `seen` set to
several calls continues one traversal across roots, which is how the
whole-graph algorithms visit every component exactly once.
"""

from collections import deque
from collections.abc import Iterable, Iterator, MutableSet
from typing import Callable, Generic, TypeVar

from errors import IteratorExhausted

T = TypeVar("T")


class GraphIterator(Generic[T]):
    """
    Lazy traversal of the vertices reachable from a source.

    A single deque serves both orders: breadth-first appends discovered
    vertices to the back, depth-first pushes them to the front. The
    depth-first order is a valid one, not necessarily the recursive one.

    The iterator is not restartable and the graph must not be mutated
    while it is in use.
    """

    def __init__(
        self, after: Callable[[T], Iterable[T]], source: T, depth_first: bool = False
    ) -> None:
        self._after = after
        self._depth_first = depth_first
        self._frontier: deque[T] = deque([source])
        self._marked: set[T] = {source}

    def __iter__(self) -> "GraphIterator[T]":
        return self

    def has_next(self) -> bool:
        return bool(self._frontier)

    def __next__(self) -> T:
        if not self._frontier:
            raise IteratorExhausted("There are no more vertices to explore")

        current = self._frontier.popleft()
        for neighbour in self._after(current):
            if neighbour in self._marked:
                continue
            self._marked.add(neighbour)
            if self._depth_first:
                self._frontier.appendleft(neighbour)
            else:
                self._frontier.append(neighbour)
        return current


def depth_first_preorder(
    after: Callable[[T], Iterable[T]], root: T, seen: MutableSet[T]
) -> Iterator[T]:
    """Yields vertices as they are discovered, skipping those already in `seen`."""
    if root in seen:
        return
    seen.add(root)
    yield root
    stack: list[Iterator[T]] = [iter(after(root))]
    while stack:
        for child in stack[-1]:
            if child not in seen:
                seen.add(child)
                yield child
                stack.append(iter(after(child)))
                break
        else:
            stack.pop()


def depth_first_postorder(
    after: Callable[[T], Iterable[T]], root: T, seen: MutableSet[T]
) -> Iterator[T]:
    """Yields vertices once all their successors are finished."""
    if root in seen:
        return
    seen.add(root)
    stack: list[tuple[T, Iterator[T]]] = [(root, iter(after(root)))]
    while stack:
        current, children = stack[-1]
        for child in children:
            if child not in seen:
                seen.add(child)
                stack.append((child, iter(after(child))))
                break
        else:
            stack.pop()
            yield current


__all__ = [
    "GraphIterator",
    "depth_first_preorder",
    "depth_first_postorder",
]
