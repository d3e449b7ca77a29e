"""Searching sorted and unsorted sequences.

Every search returns the index of a matching item, or None when the target
is absent. All searches except the linear one expect items in ascending order.
"""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt
from typing import Any


def linear_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first item equal to target."""
    return next((i for i, item in enumerate(items) if item == target), None)


def _bisect_range(items: Sequence[Any], target: Any, low: int, high: int) -> int | None:
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == target:
            return mid
        if value > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def _bisect_recursive(items: Sequence[Any], target: Any, low: int, high: int) -> int | None:
    if high < low:
        return None
    mid = low + (high - low) // 2
    value = items[mid]
    if value == target:
        return mid
    if value > target:
        return _bisect_recursive(items, target, low, mid - 1)
    return _bisect_recursive(items, target, mid + 1, high)


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Find target in ascending items by iterative halving."""
    return _bisect_range(items, target, 0, len(items) - 1)


def binary_search_recursive(items: Sequence[Any], target: Any) -> int | None:
    """Find target in ascending items by recursive halving."""
    return _bisect_recursive(items, target, 0, len(items) - 1)


def exponential_search(items: Sequence[Any], target: Any) -> int | None:
    """Find target by doubling a bound, then binary searching within it."""
    size = len(items)
    if size == 0:
        return None
    if items[0] == target:
        return 0
    bound = 1
    while bound < size and items[bound] <= target:
        bound *= 2
    return _bisect_recursive(items, target, bound // 2, min(bound, size - 1))


def interpolation_search(items: Sequence[Any], target: Any) -> int | None:
    """Find target by probing where it would sit if values were evenly spread."""
    low, high = 0, len(items) - 1
    while low <= high and items[low] <= target <= items[high]:
        if items[high] == items[low]:
            # The range holds a single repeated value, which must be the target.
            return low
        pos = low + int(
            (high - low) / (items[high] - items[low]) * (target - items[low])
        )
        value = items[pos]
        if value == target:
            return pos
        if value < target:
            low = pos + 1
        else:
            high = pos - 1
    return None


def jump_search(items: Sequence[Any], target: Any) -> int | None:
    """Find target by jumping ahead in blocks of sqrt(n), then scanning a block."""
    size = len(items)
    if size == 0:
        return None
    jump = isqrt(size)
    step = jump
    prev = 0
    while items[min(step, size) - 1] < target:
        prev = step
        step += jump
        if prev >= size:
            return None
    while items[prev] < target:
        prev += 1
        if prev == min(step, size):
            return None
    return prev if items[prev] == target else None