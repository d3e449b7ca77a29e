"""Dynamic programming: maximum subarray, partition cost, Fibonacci, word break."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence


def max_subarray_sum(values: Iterable[float]) -> float:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("max_subarray_sum needs at least one value") from None
    best = current = first
    for value in iterator:
        current = max(value, current + value)
        best = max(best, current)
    return best


def partition_cost(groups: int, length: int, cost: Callable[[int, int], float]) -> float:
    """Split positions 0 .. length - 1 into at most groups runs at least total cost.

    cost(i, j) is the cost of the run i .. j inclusive. The layers are filled by
    divide and conquer, which relies on the optimal split points being monotone.
    """
    if groups < 1:
        raise ValueError(f"groups must be positive, got {groups}")
    if length < 1:
        raise ValueError(f"length must be positive, got {length}")

    before = [cost(0, i) for i in range(length)]
    for _ in range(1, groups):
        current = [0.0] * length

        def compute(left: int, right: int, opt_left: int, opt_right: int) -> None:
            if left > right:
                return
            mid = (left + right) // 2
            best = (math.inf, -1)
            for k in range(opt_left, min(mid, opt_right) + 1):
                candidate = (before[k - 1] if k else 0) + cost(k, mid)
                best = min(best, (candidate, k))
            current[mid] = best[0]
            compute(left, mid - 1, opt_left, best[1])
            compute(mid + 1, right, best[1], opt_right)

        compute(0, length - 1, 0, length - 1)
        before = current
    return before[length - 1]


def _check_index(n: int) -> None:
    if n < 0:
        raise ValueError(f"fibonacci index must not be negative, got {n}")


def fibonacci_recursive(n: int) -> int:
    """Return the n-th Fibonacci number, counting fib(0) = fib(1) = 1, by plain recursion."""
    _check_index(n)
    if n <= 1:
        return 1
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting fib(0) = fib(1) = 1, bottom-up."""
    _check_index(n)
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def word_break(words: Iterable[str], text: str) -> list[str]:
    """Return every way to split text into dictionary words, as space-joined sentences.

    Sentences come in depth-first order, shorter first words first.
    """
    dictionary = set(words)
    sentences: list[str] = []
    if not text:
        return sentences

    def split(rest: str, chosen: Sequence[str]) -> None:
        if not rest:
            sentences.append(" ".join(chosen))
            return
        for end in range(1, len(rest) + 1):
            head = rest[:end]
            if head in dictionary:
                split(rest[end:], [*chosen, head])

    split(text, [])
    return sentences