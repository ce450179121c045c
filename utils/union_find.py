"""
Disjoint-set forest over hashable elements.

Forest relies on it to refuse an edge whose endpoints are already joined,
and Kruskal's algorithm to pick spanning tree edges. Both only ever merge
sets: a structure that must split sets again rebuilds a fresh instance.

Operations run in O(α(n)) amortized time thanks to path compression and
union by rank.
"""

from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

from errors import ensure_not_none

Element = TypeVar("Element", bound=Hashable)


class UnionFind(Generic[Element]):
    """
    Sets of elements identified by a root element.

    Unseen elements passed to find or union become singletons first.

    Example:
        >>> sets = UnionFind(["a", "b", "c"])
        >>> sets.union("a", "b")
        True
        >>> sets.union("b", "a")
        False
        >>> sets.connected("a", "c")
        False
    """

    def __init__(self, elements: Iterable[Element] = ()) -> None:
        self._parent: dict[Element, Element] = {}
        self._rank: dict[Element, int] = {}
        for element in elements:
            self.make_set(element)

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def make_set(self, element: Element) -> None:
        """Add element as a singleton. Known elements keep their set."""
        ensure_not_none(element)
        self._parent.setdefault(element, element)
        self._rank.setdefault(element, 0)

    def find(self, element: Element) -> Element:
        """Root of the set holding element. Every node on the way is re-pointed at it."""
        self.make_set(element)

        path: list[Element] = []
        while (parent := self._parent[element]) != element:
            path.append(element)
            element = parent
        for node in path:
            self._parent[node] = element
        return element

    def union(self, x: Element, y: Element) -> bool:
        """
        Join the sets of x and y, the lower ranked root going under the other.

        Ties go to y: its root absorbs the root of x and gains one rank.

        Returns:
            True if two sets were joined, False if x and y already shared one.
        """
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False

        if self._rank[root_x] > self._rank[root_y]:
            root_x, root_y = root_y, root_x
        self._parent[root_x] = root_y
        if self._rank[root_x] == self._rank[root_y]:
            self._rank[root_y] += 1
        return True

    def connected(self, x: Element, y: Element) -> bool:
        return self.find(x) == self.find(y)

    def get_all_sets(self) -> dict[Element, set[Element]]:
        """Members of every set, keyed by root."""
        sets: dict[Element, set[Element]] = {}
        for element in list(self._parent):
            sets.setdefault(self.find(element), set()).add(element)
        return sets
