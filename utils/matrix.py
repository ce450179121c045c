"""
Matrix views of adjacency mappings.

Rows and columns follow a given vertex order. Parallel entries between the
same two vertices add up, which matches how capacities combine in a flow
network and how scipy.sparse.csgraph reads its inputs.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import TypeVar

import numpy as np
from scipy.sparse import csr_array

from errors import VertexNotFoundError

T = TypeVar("T")


def _index(order: Sequence[T]) -> dict[T, int]:
    return {vertex: i for i, vertex in enumerate(order)}


def weighted_entries(
    adjacency: Mapping[T, Iterable[tuple[T, int]]], order: Sequence[T]
) -> tuple[list[int], list[int], list[int]]:
    """Row indices, column indices and values of every adjacency entry."""
    index = _index(order)
    rows: list[int] = []
    cols: list[int] = []
    values: list[int] = []
    for u, neighbours in adjacency.items():
        if u not in index:
            raise VertexNotFoundError(u)
        for v, weight in neighbours:
            if v not in index:
                raise VertexNotFoundError(v)
            rows.append(index[u])
            cols.append(index[v])
            values.append(weight)
    return rows, cols, values


def adjacency_to_matrix(
    adjacency: Mapping[T, Iterable[tuple[T, int]]],
    order: Sequence[T],
    sparse: bool = False,
) -> np.ndarray | csr_array:
    """
    Build a square matrix where cell [i, j] is the weight from order[i] to order[j].

    Args:
        adjacency: vertex -> (neighbour, weight) entries.
        order: Vertices giving the row/column positions.
        sparse: Return a scipy CSR array instead of a dense numpy array.
    """
    n = len(order)
    rows, cols, values = weighted_entries(adjacency, order)
    row_index = np.asarray(rows, dtype=np.intp)
    col_index = np.asarray(cols, dtype=np.intp)
    data = np.asarray(values, dtype=np.int64)

    if sparse:
        # Duplicates are summed when the COO triplets are converted
        return csr_array((data, (row_index, col_index)), shape=(n, n))

    matrix = np.zeros((n, n), dtype=np.int64)
    np.add.at(matrix, (row_index, col_index), data)
    return matrix


def unweighted(adjacency: Mapping[T, Iterable[T]]) -> dict[T, list[tuple[T, int]]]:
    """Give every entry of an unweighted adjacency a weight of 1."""
    return {u: [(v, 1) for v in neighbours] for u, neighbours in adjacency.items()}
