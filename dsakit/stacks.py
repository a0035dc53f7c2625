"""Fixed-capacity stacks and recursive stack exercises.

Stacks passed to the functions here are lists whose last item is the top.
"""

from __future__ import annotations

from collections.abc import Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has no room left."""


class StackEmptyError(IndexError):
    """Raised when reading or removing from an empty stack."""


class ArrayStack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: int) -> None:
        if len(self._items) >= self.capacity:
            raise StackFullError("stack is full")
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def top(self) -> int:
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]


class TwoStack:
    """Two stacks sharing one array of ``size`` slots: the first grows from
    the left end, the second from the right end."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._slots: list[int] = [0] * size
        self._top1 = -1
        self._top2 = size

    def _has_room(self) -> bool:
        return self._top2 - self._top1 > 1

    def push1(self, value: int) -> None:
        if not self._has_room():
            raise StackFullError("no room left in the shared array")
        self._top1 += 1
        self._slots[self._top1] = value

    def push2(self, value: int) -> None:
        if not self._has_room():
            raise StackFullError("no room left in the shared array")
        self._top2 -= 1
        self._slots[self._top2] = value

    def pop1(self) -> int:
        if self._top1 < 0:
            raise StackEmptyError("first stack is empty")
        value = self._slots[self._top1]
        self._top1 -= 1
        return value

    def pop2(self) -> int:
        if self._top2 >= len(self._slots):
            raise StackEmptyError("second stack is empty")
        value = self._slots[self._top2]
        self._top2 += 1
        return value


def is_valid_parentheses(text: str) -> bool:
    """True if every bracket in ``text`` is properly closed and nested.

    Only the characters ()[]{} are allowed; any other character makes the
    text invalid.
    """
    open_brackets: list[str] = []
    for ch in text:
        if ch in "([{":
            open_brackets.append(ch)
        elif open_brackets and _PAIRS.get(ch) == open_brackets[-1]:
            open_brackets.pop()
        else:
            return False
    return not open_brackets


def delete_middle(stack: Sequence[int]) -> list[int]:
    """Return the stack without the item ``len // 2`` places below the top."""
    if not stack:
        raise StackEmptyError("cannot delete from an empty stack")
    result = list(stack)
    del result[len(result) - 1 - len(result) // 2]
    return result


def insert_at_bottom(stack: Sequence[int], value: int) -> list[int]:
    """Return the stack with ``value`` placed beneath every other item."""
    return [value, *stack]


def reverse_stack(stack: Sequence[int]) -> list[int]:
    """Return the stack upside down."""
    return list(reversed(stack))


def sort_stack(stack: Sequence[int]) -> list[int]:
    """Return the stack sorted so that the largest item is on top."""
    return sorted(stack)


def reverse_with_stack(text: str) -> str:
    """Reverse ``text`` by pushing its characters and popping them back."""
    pending = list(text)
    out: list[str] = []
    while pending:
        out.append(pending.pop())
    return "".join(out)