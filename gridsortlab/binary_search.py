"""Binary search over sorted lists, sequential and thread-parallel."""

from __future__ import annotations

import os
import random
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor


def random_list(length: int, rng: random.Random | None = None) -> list[int]:
    """Return ``length`` random integers in 1..100."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    rng = rng or random.Random()
    return [rng.randint(1, 100) for _ in range(length)]


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in ascending ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = low + ((high - low) >> 1)
        current = values[middle]
        if current == target:
            return middle
        if current < target:
            low = middle + 1
        else:
            high = middle - 1
    return None


def binary_search_parallel(
    values: Sequence[int], target: int, workers: int | None = None
) -> int | None:
    """Search with several threads, each running the whole binary search.

    Any index one of the workers found is returned; None if none found it.
    """
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(lambda _: binary_search(values, target), range(workers)))
    found = [index for index in results if index is not None]
    return found[-1] if found else None