"""ShearSort on square matrices: alternating row sorts followed by column sorts."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor

from gridsortlab.mergesort import merge_sort


def _require_square(matrix: list[list[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def _resolve_workers(workers: int | None) -> int:
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    return workers


def _phases(size: int) -> int:
    # floor(log2(size)) + 1
    return size.bit_length()


def sort_row(matrix: list[list[int]], index: int, ascending: bool = True) -> None:
    """Sort row ``index`` of ``matrix`` in place, ascending or descending."""
    row = matrix[index]
    ordered = merge_sort(row)
    if not ascending:
        ordered.reverse()
    row[:] = ordered


def sort_column(matrix: list[list[int]], index: int) -> None:
    """Sort column ``index`` of ``matrix`` in place, ascending from top to bottom."""
    column = merge_sort([row[index] for row in matrix])
    for row, value in zip(matrix, column):
        row[index] = value


def shearsort(matrix: list[list[int]]) -> None:
    """Run ShearSort on a square matrix in place.

    Each of the floor(log2(n)) + 1 phases sorts even rows ascending, odd rows
    descending, then every column ascending.
    """
    size = _require_square(matrix)
    for _ in range(_phases(size)):
        for index in range(size):
            sort_row(matrix, index, index % 2 == 0)
        for index in range(size):
            sort_column(matrix, index)


def shearsort_parallel(matrix: list[list[int]], workers: int | None = None) -> None:
    """Run ShearSort in place, sorting the rows and columns of each phase on a thread pool."""
    workers = _resolve_workers(workers)
    size = _require_square(matrix)
    if size == 0:
        return
    with ThreadPoolExecutor(max_workers=workers) as pool:
        for _ in range(_phases(size)):
            list(pool.map(lambda i: sort_row(matrix, i, i % 2 == 0), range(size)))
            list(pool.map(lambda i: sort_column(matrix, i), range(size)))