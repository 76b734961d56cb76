"""Array drills: order statistics, water trapping, products, rotated arrays, sums."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

from dsadrills.arrays_basic import search_rotated

__all__ = [
    "kth_largest",
    "trapped_water",
    "product_except_self",
    "max_product_subarray",
    "rotated_minimum",
    "search_rotated_unique",
    "three_sum",
    "max_area",
    "has_pair_with_sum",
]


def kth_largest(values: Iterable[int], k: int) -> int:
    """Return the k-th largest value, counting repeated values separately."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}, got {k}")
    return heapq.nlargest(k, items)[-1]


def trapped_water(heights: Iterable[int]) -> int:
    """Return how many units of water an elevation map holds after rain."""
    items = list(heights)
    left, right = 0, len(items) - 1
    left_peak = right_peak = 0
    water = 0
    while left < right:
        if items[left] < items[right]:
            left_peak = max(left_peak, items[left])
            water += left_peak - items[left]
            left += 1
        else:
            right_peak = max(right_peak, items[right])
            water += right_peak - items[right]
            right -= 1
    return water


def product_except_self(values: Iterable[int]) -> list[int]:
    """Return, for each position, the product of every other value, without division."""
    items = list(values)
    result: list[int] = []
    running = 1
    for value in items:
        result.append(running)
        running *= value
    running = 1
    for position in reversed(range(len(items))):
        result[position] *= running
        running *= items[position]
    return result


def max_product_subarray(values: Iterable[int]) -> int:
    """Return the largest product of a non-empty contiguous subarray."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    best = highest = lowest = items[0]
    for value in items[1:]:
        candidates = (value, value * highest, value * lowest)
        highest, lowest = max(candidates), min(candidates)
        best = max(best, highest)
    return best


def rotated_minimum(values: Iterable[int]) -> int:
    """Return the smallest value of a rotated ascending list of distinct values."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    low, high = 0, len(items) - 1
    while low < high:
        mid = (low + high) // 2
        if items[mid] > items[high]:
            low = mid + 1
        else:
            high = mid
    return items[low]


def search_rotated_unique(values: Iterable[int], key: int) -> int | None:
    """Return the index of key in a rotated sorted list of unique values, or None."""
    return search_rotated(values, key)


def three_sum(values: Iterable[int]) -> list[tuple[int, int, int]]:
    """Return every distinct ascending triplet of values that sums to zero."""
    items = sorted(values)
    count = len(items)
    triplets: list[tuple[int, int, int]] = []
    for first in range(count - 2):
        if first > 0 and items[first] == items[first - 1]:
            continue
        low, high = first + 1, count - 1
        while low < high:
            total = items[first] + items[low] + items[high]
            if total == 0:
                triplets.append((items[first], items[low], items[high]))
                low += 1
                high -= 1
                while low < high and items[low] == items[low - 1]:
                    low += 1
                while low < high and items[high] == items[high + 1]:
                    high -= 1
            elif total > 0:
                high -= 1
            else:
                low += 1
    return triplets


def max_area(heights: Iterable[int]) -> int:
    """Return the most water a container formed by two of the lines can hold."""
    items = list(heights)
    if len(items) < 2:
        raise ValueError("at least two heights are needed")
    left, right = 0, len(items) - 1
    best = 0
    while left < right:
        width = right - left
        if items[left] < items[right]:
            best = max(best, items[left] * width)
            left += 1
        else:
            best = max(best, items[right] * width)
            right -= 1
    return best


def has_pair_with_sum(values: Iterable[int], total: int) -> bool:
    """Tell whether two elements of a rotated sorted list of distinct values add to total."""
    items = list(values)
    count = len(items)
    if count < 2:
        return False
    largest = next(
        (index for index, (current, following) in enumerate(zip(items, items[1:]))
         if current > following),
        count - 1,
    )
    low = (largest + 1) % count
    high = largest
    while low != high:
        pair = items[low] + items[high]
        if pair == total:
            return True
        if pair < total:
            low = (low + 1) % count
        else:
            high = (high - 1) % count
    return False