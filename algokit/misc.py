"""Small array and string utilities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def arrays_equal(first: Iterable[Any], second: Iterable[Any]) -> bool:
    """Tell whether two collections hold the same items, ignoring order."""
    left, right = list(first), list(second)
    if len(left) != len(right):
        return False
    return sorted(left) == sorted(right)


def nearest_valid_point(x: int, y: int, points: Iterable[Sequence[int]]) -> int | None:
    """Return the index of the nearest point sharing x or y, by Manhattan distance.

    Ties go to the smallest index; None when no point shares a coordinate.
    """
    best_index: int | None = None
    best_distance = 0
    for index, (px, py) in enumerate(points):
        if px == x or py == y:
            distance = abs(x - px) + abs(y - py)
            if best_index is None or distance < best_distance:
                best_index, best_distance = index, distance
    return best_index


def find_pair(numbers: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return the first pair (earlier, later) of numbers summing to target, or None."""
    seen: set[int] = set()
    for number in numbers:
        complement = target - number
        if complement in seen:
            return complement, number
        seen.add(number)
    return None


def naive_search(pattern: str, text: str) -> list[int]:
    """Return every index at which pattern occurs in text, overlaps included."""
    width = len(pattern)
    return [i for i in range(len(text) - width + 1) if text[i : i + width] == pattern]