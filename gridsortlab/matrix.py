"""Helpers for square integer matrices: creation, transposition, display."""

from __future__ import annotations

import random
from collections.abc import Sequence


def random_matrix(size: int, rng: random.Random | None = None) -> list[list[int]]:
    """Return a ``size`` x ``size`` matrix of random integers in 0..99."""
    if size < 0:
        raise ValueError(f"matrix size must not be negative, got {size}")
    rng = rng or random.Random()
    return [[rng.randrange(100) for _ in range(size)] for _ in range(size)]


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of a rectangular matrix as a new list of lists."""
    if matrix:
        width = len(matrix[0])
        if any(len(row) != width for row in matrix):
            raise ValueError("matrix rows must all have the same length")
    return [list(column) for column in zip(*matrix)]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix one row per line, each value followed by a space and tab.

    The text ends with an extra blank line.
    """
    lines = "".join("".join(f"{value} \t" for value in row) + "\n" for row in matrix)
    return lines + "\n"


def is_snake_sorted(matrix: Sequence[Sequence[int]]) -> bool:
    """Tell whether the matrix read in boustrophedon order is non-decreasing.

    Even rows are read left to right, odd rows right to left.
    """
    snake = [
        value
        for index, row in enumerate(matrix)
        for value in (row if index % 2 == 0 else reversed(row))
    ]
    return all(a <= b for a, b in zip(snake, snake[1:]))