"""Backtracking searches: permutations, maze paths, keypad words and subsets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import product

KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def permutations(values: Iterable[int]) -> list[list[int]]:
    """All orderings of ``values``, generated by swapping each remaining
    item into the current position in turn."""
    items = list(values)
    found: list[list[int]] = []

    def solve(index: int) -> None:
        if index >= len(items):
            found.append(list(items))
            return
        for other in range(index, len(items)):
            items[index], items[other] = items[other], items[index]
            solve(index + 1)
            items[index], items[other] = items[other], items[index]

    solve(0)
    return found


def rat_in_maze(maze: Sequence[Sequence[int]]) -> list[str]:
    """Every path from the top-left to the bottom-right cell of a square maze.

    Cells holding 1 are open. A path is a string of moves D, L, R and U and
    never visits a cell twice. Directions are tried in that order.
    """
    size = len(maze)
    if size == 0 or maze[0][0] != 1:
        return []
    visited = [[False] * size for _ in range(size)]
    paths: list[str] = []
    steps: list[str] = []

    def can_enter(row: int, col: int) -> bool:
        return (
            0 <= row < size
            and 0 <= col < size
            and not visited[row][col]
            and maze[row][col] == 1
        )

    def solve(row: int, col: int) -> None:
        if row == size - 1 and col == size - 1:
            paths.append("".join(steps))
            return
        visited[row][col] = True
        for letter, d_row, d_col in _MOVES:
            next_row, next_col = row + d_row, col + d_col
            if can_enter(next_row, next_col):
                steps.append(letter)
                solve(next_row, next_col)
                steps.pop()
        visited[row][col] = False

    solve(0, 0)
    return paths


def letter_combinations(digits: str) -> list[str]:
    """All words a phone keypad can spell from ``digits`` (2-9 only).

    An empty input spells one empty word.
    """
    try:
        letters = [KEYPAD[digit] for digit in digits]
    except KeyError as exc:
        raise ValueError(f"digit {exc.args[0]!r} has no letters") from None
    return ["".join(combo) for combo in product(*letters)]


def subsequences(text: str) -> list[str]:
    """All non-empty subsequences of ``text``; at each character the branch
    without it is explored before the branch with it."""
    found: list[str] = []

    def solve(index: int, chosen: str) -> None:
        if index >= len(text):
            if chosen:
                found.append(chosen)
            return
        solve(index + 1, chosen)
        solve(index + 1, chosen + text[index])

    solve(0, "")
    return found


def subsets(values: Sequence[int]) -> list[list[int]]:
    """All non-empty subsets of ``values``, each kept in input order.

    A subset is recorded after both branches below the item that completed
    it have been explored.
    """
    found: list[list[int]] = []

    def solve(index: int, chosen: list[int]) -> None:
        if index >= len(values):
            return
        solve(index + 1, chosen)
        with_item = [*chosen, values[index]]
        solve(index + 1, with_item)
        found.append(with_item)

    solve(0, [])
    return found