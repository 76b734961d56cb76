"""Array drills: extremes, reversal, subarray sums, rotated search and more."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = [
    "MinMax",
    "RepeatMissing",
    "min_max",
    "reversed_values",
    "max_subarray_sum",
    "contains_duplicate",
    "min_chocolate_difference",
    "search_rotated",
    "next_permutation",
    "max_profit",
    "repeat_and_missing",
]


@dataclass(frozen=True)
class MinMax:
    """The largest and smallest values of a sequence."""

    maximum: int
    minimum: int


@dataclass(frozen=True)
class RepeatMissing:
    """The value that appears twice and the value that is absent."""

    repeated: int
    missing: int


def _non_empty(values: Iterable[int], what: str = "values") -> list[int]:
    items = list(values)
    if not items:
        raise ValueError(f"{what} must not be empty")
    return items


def min_max(values: Iterable[int]) -> MinMax:
    """Return the maximum and minimum of a non-empty sequence."""
    items = _non_empty(values)
    largest = smallest = items[0]
    for value in items[1:]:
        if value > largest:
            largest = value
        elif value < smallest:
            smallest = value
    return MinMax(largest, smallest)


def reversed_values(values: Iterable[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(values)[::-1]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    items = _non_empty(values)
    best = items[0]
    running = 0
    for value in items:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def contains_duplicate(values: Iterable[int]) -> bool:
    """Tell whether any value occurs at least twice."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def min_chocolate_difference(packets: Iterable[int], students: int) -> int:
    """Return the smallest max-min spread when giving one packet to each student."""
    ordered = sorted(packets)
    if students < 1:
        raise ValueError("there must be at least one student")
    if students > len(ordered):
        raise ValueError("more students than packets")
    return min(
        high - low
        for low, high in zip(ordered, ordered[students - 1:])
    )


def _pivot(items: list[int]) -> int:
    """Index of the smallest element of a rotated ascending list."""
    low, high = 0, len(items) - 1
    while low < high:
        mid = (low + high) // 2
        if items[mid] > items[high]:
            low = mid + 1
        else:
            high = mid
    return low


def _find_sorted(items: list[int], low: int, high: int, key: int) -> int | None:
    index = bisect_left(items, key, low, high)
    if index < high and items[index] == key:
        return index
    return None


def search_rotated(values: Iterable[int], key: int) -> int | None:
    """Return the index of key in a rotated sorted list of distinct values, or None."""
    items = list(values)
    if not items:
        return None
    pivot = _pivot(items)
    if pivot == 0:
        return _find_sorted(items, 0, len(items), key)
    if key >= items[0]:
        return _find_sorted(items, 0, pivot, key)
    return _find_sorted(items, pivot, len(items), key)


def next_permutation(values: Iterable[int]) -> list[int]:
    """Return the next lexicographic permutation, wrapping to the smallest."""
    items = list(values)
    if len(items) < 2:
        return items
    pivot = len(items) - 2
    while pivot >= 0 and items[pivot] >= items[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        return items[::-1]
    successor = len(items) - 1
    while items[successor] <= items[pivot]:
        successor -= 1
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1:] = items[pivot + 1:][::-1]
    return items


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one later sell, or 0."""
    best = 0
    cheapest: int | None = None
    for price in prices:
        if cheapest is None or price < cheapest:
            cheapest = price
        else:
            best = max(best, price - cheapest)
    return best


def repeat_and_missing(values: Iterable[int]) -> RepeatMissing:
    """Find the duplicated and the missing number in a list meant to hold 1..n."""
    items = list(values)
    difference = 0
    square_difference = 0
    for position, value in enumerate(items, start=1):
        difference += value - position
        square_difference += value * value - position * position
    if difference == 0:
        raise ValueError("values hold no repeated and missing pair")
    pair_sum = square_difference // difference
    repeated = (pair_sum + difference) // 2
    return RepeatMissing(repeated, pair_sum - repeated)