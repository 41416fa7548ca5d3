"""Top-down merge sort on plain lists."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def merge(left: Sequence[T], right: Sequence[T]) -> list[T]:
    """Merge two sorted sequences into one sorted list.

    When elements are equal, the one from ``left`` comes first, so the
    merge is stable.
    """
    merged: list[T] = []
    left_iter, right_iter = iter(left), iter(right)
    left_item = next(left_iter, _EXHAUSTED)
    right_item = next(right_iter, _EXHAUSTED)
    while left_item is not _EXHAUSTED and right_item is not _EXHAUSTED:
        if left_item <= right_item:  # type: ignore[operator]
            merged.append(left_item)  # type: ignore[arg-type]
            left_item = next(left_iter, _EXHAUSTED)
        else:
            merged.append(right_item)  # type: ignore[arg-type]
            right_item = next(right_iter, _EXHAUSTED)
    if left_item is not _EXHAUSTED:
        merged.append(left_item)  # type: ignore[arg-type]
        merged.extend(left_iter)
    if right_item is not _EXHAUSTED:
        merged.append(right_item)  # type: ignore[arg-type]
        merged.extend(right_iter)
    return merged


def merge_sort(values: Sequence[T]) -> list[T]:
    """Return a new ascending list holding the items of ``values``."""
    items = list(values)
    if len(items) < 2:
        return items
    middle = (len(items) - 1) // 2 + 1
    return merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


_EXHAUSTED = object()