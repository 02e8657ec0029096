"""Classic comparison sorts and three-way partitioning."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Return the items in ascending order, sorted by repeated adjacent swaps."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for index in range(end):
            if result[index] > result[index + 1]:  # type: ignore[operator]
                result[index], result[index + 1] = result[index + 1], result[index]
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged = []
    left_pos = right_pos = 0
    while left_pos < len(left) and right_pos < len(right):
        if left[left_pos] <= right[right_pos]:
            merged.append(left[left_pos])
            left_pos += 1
        else:
            merged.append(right[right_pos])
            right_pos += 1
    merged.extend(left[left_pos:])
    merged.extend(right[right_pos:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Return the items in ascending order; equal items keep their order."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) + 1) // 2
    return _merge(merge_sort(values[:middle]), merge_sort(values[middle:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low
    for index in range(low, high):
        if values[index] < pivot:
            values[boundary], values[index] = values[index], values[boundary]
            boundary += 1
    values[boundary], values[high] = values[high], values[boundary]
    return boundary


def quick_sort(items: Iterable[T]) -> list[T]:
    """Return the items in ascending order, partitioning around the last element."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(values, low, high)
            pending.append((pivot_index + 1, high))
            pending.append((low, pivot_index - 1))
    return values


def sort_colors(nums: Iterable[int]) -> list[int]:
    """Return the 0s, 1s and 2s of ``nums`` grouped in that order.

    Any other value raises ValueError.
    """
    values = list(nums)
    low, mid, high = 0, 0, len(values) - 1
    while mid <= high:
        value = values[mid]
        if value == 0:
            values[low], values[mid] = values[mid], values[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            values[mid], values[high] = values[high], values[mid]
            high -= 1
        else:
            raise ValueError(f"only 0, 1 and 2 can be sorted, got {value!r}")
    return values