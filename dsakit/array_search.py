"""Searching in grids, rotated arrays and mountain arrays."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def grid_contains(grid: Iterable[Iterable[int]], target: int) -> bool:
    """True if any cell of the two-dimensional grid equals ``target``."""
    return any(cell == target for row in grid for cell in row)


def is_sorted_rotated(values: Sequence[int]) -> bool:
    """True if the sequence is a non-decreasing sequence rotated some places."""
    if not values:
        return True
    drops = sum(1 for before, after in zip(values, values[1:]) if before > after)
    if values[-1] > values[0]:
        drops += 1
    return drops <= 1


def peak_in_mountain(values: Sequence[int]) -> int:
    """Return the peak value of a strictly rising then falling sequence."""
    if not values:
        raise ValueError("a mountain needs at least one value")
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if values[mid] < values[mid + 1]:
            start = mid + 1
        else:
            end = mid
    return values[start]


def pivot_index(values: Sequence[int]) -> int:
    """Index of the smallest item in a rotated ascending sequence.

    For a sequence that is not rotated this is ``len(values)``.
    """
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] >= values[0]:
            start = mid + 1
        else:
            end = mid - 1
    return start


def binary_search(values: Sequence[int], key: int, start: int = 0, end: int | None = None) -> int:
    """Index of ``key`` within ``values[start..end]`` (inclusive), or -1."""
    if end is None:
        end = len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == key:
            return mid
        if key > values[mid]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def search_rotated(values: Sequence[int], key: int) -> int:
    """Index of ``key`` in a rotated ascending sequence, or -1."""
    if not values:
        return -1
    pivot = pivot_index(values)
    last = len(values) - 1
    if pivot > last:
        return binary_search(values, key, 0, last)
    if values[pivot] <= key <= values[last]:
        return binary_search(values, key, pivot, last)
    return binary_search(values, key, 0, pivot - 1)