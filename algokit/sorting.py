"""Classic comparison and distribution sorts.

Each function takes any iterable and returns a new ascending list, leaving
the input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in [0, 1) by scattering them into n buckets."""
    items = list(values)
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value}")
        buckets[int(count * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap bottom-up and repeatedly removing its top."""
    heap = list(values)
    size = len(heap)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(heap, size, root)
    for end in range(size - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap


def iterative_heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap through sift-up insertions."""
    heap = list(values)
    size = len(heap)
    for i in range(1, size):
        j = i
        while j > 0 and heap[j] > heap[(j - 1) // 2]:
            parent = (j - 1) // 2
            heap[j], heap[parent] = heap[parent], heap[j]
            j = parent
    for end in range(size - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        j = 0
        while True:
            child = 2 * j + 1
            if child >= end:
                break
            if child < end - 1 and heap[child] < heap[child + 1]:
                child += 1
            if heap[j] < heap[child]:
                heap[j], heap[child] = heap[child], heap[j]
            j = child
    return heap


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort stably by splitting in halves and merging the sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    left, right = merge_sort(items[:mid]), merge_sort(items[mid:])
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by n - 1 passes of swapping adjacent out-of-order pairs."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def cocktail_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by bubbling alternately forwards and backwards until nothing moves."""
    items = list(values)
    start, end = 0, len(items) - 1
    swapped = True
    while swapped:
        swapped = False
        for i in range(start, end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
        swapped = False
        end -= 1
        for i in range(end - 1, start - 1, -1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        start += 1
    return items


def _counting_sort_by_digit(items: list[int], exp: int) -> list[int]:
    counts = [0] * 10
    for value in items:
        counts[(value // exp) % 10] += 1
    for digit in range(1, 10):
        counts[digit] += counts[digit - 1]
    output = [0] * len(items)
    for value in reversed(items):
        digit = (value // exp) % 10
        counts[digit] -= 1
        output[counts[digit]] = value
    return output


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers digit by digit, least significant first."""
    items = list(values)
    if not items:
        return items
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        items = _counting_sort_by_digit(items, exp)
        exp *= 10
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        last = items[i]
        j = i - 1
        while j >= 0 and items[j] > last:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = last
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining item to the front of the rest."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        smallest = min(range(i, size), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items