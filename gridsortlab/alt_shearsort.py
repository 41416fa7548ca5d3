"""ShearSort variant that sorts columns by transposing the matrix."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor

from gridsortlab.matrix import transpose
from gridsortlab.mergesort import merge_sort
from gridsortlab.shearsort import sort_row


def _require_square(matrix: list[list[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def _rounds(size: int) -> int:
    # ceil(log2(size)) + 1
    return (size - 1).bit_length() + 1 if size else 0


def _write_back(matrix: list[list[int]], columns: list[list[int]]) -> None:
    for row, new_row in zip(matrix, transpose(columns)):
        row[:] = new_row


def alternative_shearsort(matrix: list[list[int]]) -> None:
    """Run ShearSort in place for ceil(log2(n)) + 1 rounds, sorting columns via a transpose."""
    size = _require_square(matrix)
    for _ in range(_rounds(size)):
        for index in range(size):
            sort_row(matrix, index, index % 2 == 0)
        columns = [merge_sort(column) for column in transpose(matrix)]
        _write_back(matrix, columns)


def alternative_shearsort_parallel(
    matrix: list[list[int]], workers: int | None = None
) -> None:
    """Run the transposing ShearSort in place with rows and columns sorted on a thread pool."""
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    size = _require_square(matrix)
    if size == 0:
        return
    with ThreadPoolExecutor(max_workers=workers) as pool:
        for _ in range(_rounds(size)):
            list(pool.map(lambda i: sort_row(matrix, i, i % 2 == 0), range(size)))
            columns = list(pool.map(merge_sort, transpose(matrix)))
            _write_back(matrix, columns)