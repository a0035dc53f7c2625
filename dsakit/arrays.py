"""Elementary algorithms over one-dimensional integer sequences."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor


def maximum(values: Iterable[int]) -> int:
    """Return the largest value; raise ValueError for an empty input."""
    best: int | None = None
    for value in values:
        if best is None or value > best:
            best = value
    if best is None:
        raise ValueError("maximum() of an empty sequence")
    return best


def minimum(values: Iterable[int]) -> int:
    """Return the smallest value; raise ValueError for an empty input."""
    best: int | None = None
    for value in values:
        if best is None or value < best:
            best = value
    if best is None:
        raise ValueError("minimum() of an empty sequence")
    return best


def intersection(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Intersect two ascending sequences by scanning ``second`` for each item.

    A matched slot of ``second`` is consumed; the scan for an item stops at
    the first slot larger than it, consumed slots included.
    """
    pool: list[float] = list(second)
    found: list[int] = []
    for element in first:
        for position, candidate in enumerate(pool):
            if element < candidate:
                break
            if element == candidate:
                found.append(element)
                pool[position] = math.inf
                break
    return found


def sorted_intersection(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Intersect two ascending sequences with two advancing cursors."""
    i = j = 0
    found: list[int] = []
    while i < len(first) and j < len(second):
        if first[i] == second[j]:
            found.append(first[i])
            i += 1
            j += 1
        elif first[i] < second[j]:
            i += 1
        else:
            j += 1
    return found


def find_duplicates(values: Sequence[int]) -> list[int]:
    """Return, in order, every element that has an equal element after it."""
    return [value for position, value in enumerate(values) if value in values[position + 1:]]


def xor_duplicate(values: Sequence[int]) -> int:
    """Find the repeated number in a list holding 1..n-1 plus one repeat."""
    combined = reduce(xor, values, 0)
    return reduce(xor, range(1, len(values)), combined)


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Largest rectangle in a histogram, by expanding around each bar."""
    best = 0
    for index, height in enumerate(heights):
        width = 1
        for other in reversed(heights[:index]):
            if other < height:
                break
            width += 1
        for other in heights[index + 1:]:
            if other < height:
                break
            width += 1
        best = max(best, height * width)
    return best


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list."""
    i = j = 0
    merged: list[int] = []
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def move_zeros(values: Iterable[int]) -> list[int]:
    """Return a copy with zeros moved to the end, other items kept in order."""
    result = list(values)
    write = 0
    for read, value in enumerate(result):
        if value != 0:
            result[read], result[write] = result[write], result[read]
            write += 1
    return result


def reversed_copy(values: Iterable[int]) -> list[int]:
    """Return the items in reverse order as a new list."""
    return list(values)[::-1]


def rotate(values: Sequence[int], key: int) -> list[int]:
    """Rotate right by ``key`` places: item i moves to (i + key) mod n."""
    count = len(values)
    if count == 0:
        return []
    shift = key % count
    return list(values[count - shift:]) + list(values[:count - shift])


def array_sum(values: Iterable[int]) -> int:
    """Sum of all values."""
    return sum(values)


def swap_alternate(values: Iterable[int]) -> list[int]:
    """Swap items pairwise (0 with 1, 2 with 3, ...); an odd last item stays."""
    result = list(values)
    result[0:len(result) - 1:2], result[1::2] = result[1::2], result[0:len(result) - 1:2]
    return result


def pairs_with_sum(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """For each item, the first later item that adds up to ``target`` with it."""
    pairs: list[tuple[int, int]] = []
    for position, left in enumerate(values):
        partner = next((right for right in values[position + 1:] if left + right == target), None)
        if partner is not None:
            pairs.append((left, partner))
    return pairs


def unique_element(values: Iterable[int]) -> int:
    """Return the one value that is not paired, when all others appear twice."""
    return reduce(xor, values, 0)