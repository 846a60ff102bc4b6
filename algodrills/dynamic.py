"""Dynamic programming and prefix-sum drills."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate
from math import isqrt


def max_increasing_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a strictly increasing subsequence (at least 0)."""
    if not values:
        raise ValueError("sequence must not be empty")
    sums: list[int] = []
    for i, value in enumerate(values):
        best = value
        for earlier, total in zip(values[:i], sums):
            if earlier < value:
                best = max(best, total + value)
        sums.append(best)
    return max(0, *sums)


def longest_decreasing_length(values: Sequence[int]) -> int:
    """Return the length of the longest strictly decreasing subsequence."""
    lengths: list[int] = []
    for i, value in enumerate(values):
        best = 1
        for earlier, length in zip(values[:i], lengths):
            if value < earlier:
                best = max(best, length + 1)
        lengths.append(best)
    return max(lengths, default=0)


def longest_consecutive_run(values: Iterable[int]) -> int:
    """Return the longest subsequence whose terms go up by exactly one each step.

    Values must be positive integers.
    """
    lengths: dict[int, int] = {}
    for value in values:
        if value < 1:
            raise ValueError(f"values must be positive, got {value}")
        lengths[value] = max(lengths.get(value, 0), lengths.get(value - 1, 0) + 1)
    return max(lengths.values(), default=0)


def min_square_terms(n: int) -> int:
    """Return the fewest perfect squares that add up to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    terms = [0] * (n + 1)
    for i in range(1, n + 1):
        terms[i] = min(terms[i - j * j] for j in range(1, isqrt(i) + 1)) + 1
    return terms[n]


def knapsack(capacity: int, items: Iterable[tuple[int, int]]) -> int:
    """Return the best total value of (weight, value) items within ``capacity``.

    Each item may be taken at most once.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight < 0:
            raise ValueError("item weight must not be negative")
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def fractional_knapsack(capacity: float, items: Iterable[tuple[int, int]]) -> float:
    """Return the best value of (weight, value) items when items may be split.

    Items are taken in order of value per unit of weight, the last one partially.
    """
    ranked = []
    for weight, value in items:
        if weight <= 0:
            raise ValueError("item weight must be positive")
        ranked.append((value / weight, weight, value))
    ranked.sort(key=lambda entry: entry[0], reverse=True)

    total = 0.0
    remaining = capacity
    for ratio, weight, value in ranked:
        if remaining >= weight:
            total += value
            remaining -= weight
        else:
            total += remaining * ratio
            break
    return total


def range_sums(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer inclusive 1-based (start, end) sum queries over ``values``."""
    prefix = list(accumulate(values, initial=0))
    size = len(values)
    answers = []
    for start, end in queries:
        if not 1 <= start <= end <= size:
            raise IndexError(f"query ({start}, {end}) outside 1..{size}")
        answers.append(prefix[end] - prefix[start - 1])
    return answers


def grid_range_sums(
    matrix: Sequence[Sequence[int]],
    queries: Iterable[tuple[int, int, int, int]],
) -> list[int]:
    """Answer 1-based (x1, y1, x2, y2) rectangle sum queries over ``matrix``."""
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must have equal length")

    prefix = [[0] * (cols + 1) for _ in range(rows + 1)]
    for r, row in enumerate(matrix, start=1):
        for c, cell in enumerate(row, start=1):
            prefix[r][c] = cell + prefix[r - 1][c] + prefix[r][c - 1] - prefix[r - 1][c - 1]

    answers = []
    for x1, y1, x2, y2 in queries:
        if not (1 <= x1 <= x2 <= rows and 1 <= y1 <= y2 <= cols):
            raise IndexError(f"query ({x1}, {y1}, {x2}, {y2}) outside the matrix")
        answers.append(
            prefix[x2][y2] - prefix[x1 - 1][y2] - prefix[x2][y1 - 1] + prefix[x1 - 1][y1 - 1]
        )
    return answers