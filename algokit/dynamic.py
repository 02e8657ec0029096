"""Dynamic-programming problems on sequences and item sets."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from functools import lru_cache


def knapsack(capacity: int, weights: Iterable[int], values: Iterable[int]) -> int:
    """Return the best total value of items that fit in ``capacity``.

    Each item is taken at most once. ``weights`` and ``values`` describe the
    items pairwise and must have the same length.
    """
    item_weights = tuple(weights)
    item_values = tuple(values)
    if len(item_weights) != len(item_values):
        raise ValueError("weights and values must have the same length")

    @lru_cache(maxsize=None)
    def best(remaining: int, count: int) -> int:
        if count == 0 or remaining == 0:
            return 0
        weight = item_weights[count - 1]
        value = item_values[count - 1]
        without_item = best(remaining, count - 1)
        if weight > remaining:
            return without_item
        return max(value + best(remaining - weight, count - 1), without_item)

    return best(capacity, len(item_weights))


def edit_distance(source: Sequence[Hashable], target: Sequence[Hashable]) -> int:
    """Return the fewest insertions, deletions and replacements turning
    ``source`` into ``target``."""
    previous = list(range(len(target) + 1))
    for row, source_item in enumerate(source, start=1):
        current = [row]
        for column, target_item in enumerate(target, start=1):
            if source_item == target_item:
                current.append(previous[column - 1])
            else:
                current.append(
                    1 + min(current[column - 1], previous[column], previous[column - 1])
                )
        previous = current
    return previous[-1]


def longest_common_subsequence(first: Sequence[Hashable], second: Sequence[Hashable]) -> int:
    """Return the length of the longest subsequence common to both inputs."""
    previous = [0] * (len(second) + 1)
    for first_item in first:
        current = [0]
        for column, second_item in enumerate(second, start=1):
            if first_item == second_item:
                current.append(previous[column - 1] + 1)
            else:
                current.append(max(current[column - 1], previous[column]))
        previous = current
    return previous[-1]


def max_product_subarray(nums: Iterable[int]) -> int:
    """Return the largest product of a contiguous run of at least two numbers."""
    values = list(nums)
    if len(values) < 2:
        raise ValueError("at least two numbers are required")
    best: int | None = None
    for start, first in enumerate(values[:-1]):
        product = first
        for value in values[start + 1:]:
            product *= value
            best = product if best is None else max(best, product)
    assert best is not None
    return best


def max_sum_increasing_subsequence(nums: Iterable[int]) -> int:
    """Return the largest sum of a strictly increasing subsequence.

    The result is never below zero; an empty input gives zero.
    """
    values = list(nums)
    sums: list[int] = []
    for index, value in enumerate(values):
        best = value
        for earlier, earlier_sum in zip(values[:index], sums):
            if value > earlier and earlier_sum + value > best:
                best = earlier_sum + value
        sums.append(best)
    return max([0, *sums])