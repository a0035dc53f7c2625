"""Bubble sort, merge sort and quick sort, each returning a new list."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by bubbling the largest remaining item to the end on each pass."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for index in range(end):
            if items[index] > items[index + 1]:
                items[index], items[index + 1] = items[index + 1], items[index]
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Stable sort by splitting in halves and merging the sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], start: int, end: int) -> int:
    """Put ``items[start]`` at its sorted place within ``start..end`` and
    return that place; smaller items end up left of it, the rest right."""
    pivot = items[start]
    smaller = sum(1 for value in items[start:end + 1] if value < pivot)
    place = start + smaller
    items[start], items[place] = items[place], items[start]
    i, j = start, end
    while i < place and j > place:
        if items[i] < pivot:
            i += 1
        elif items[j] >= pivot:
            j -= 1
        else:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return place


def quick_sort(values: Iterable[int]) -> list[int]:
    """Sort by partitioning around the first item of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        place = _partition(items, start, end)
        pending.append((start, place - 1))
        pending.append((place + 1, end))
    return items