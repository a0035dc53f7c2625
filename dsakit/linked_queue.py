"""A first-in first-out queue built from singly linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class _Node:
    value: int
    next: Optional[_Node] = None


class LinkedQueue:
    """FIFO queue with a head pointer for removal and a tail for appending."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._head is None

    def push(self, value: int) -> None:
        """Append ``value`` at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop(self) -> int:
        """Remove and return the front value."""
        if self._head is None:
            raise IndexError("queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def front(self) -> int:
        if self._head is None:
            raise IndexError("queue is empty")
        return self._head.value

    def back(self) -> int:
        if self._tail is None:
            raise IndexError("queue is empty")
        return self._tail.value