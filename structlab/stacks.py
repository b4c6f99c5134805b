"""LIFO stacks backed by a bounded array and by a linked list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_CAPACITY = 1000


class StackEmptyError(IndexError):
    """Raised when an element is requested from an empty stack."""


class StackOverflowError(OverflowError):
    """Raised when pushing onto a stack that is at capacity."""


class ArrayStack:
    """Stack with a fixed maximum number of elements."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        if len(self._items) >= self._capacity:
            raise StackOverflowError("Stack Overflow")
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise StackEmptyError("Stack Underflow")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise StackEmptyError("Stack is Empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield elements from the top down."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


@dataclass
class _Link:
    value: Any
    next: Optional["_Link"] = None


class LinkedStack:
    """Unbounded stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Link] = None
        self._size = 0

    def push(self, value: Any) -> None:
        self._top = _Link(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        if self._top is None:
            raise StackEmptyError("Stack is empty")
        link = self._top
        self._top = link.next
        self._size -= 1
        return link.value

    def peek(self) -> Any:
        if self._top is None:
            raise StackEmptyError("Stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield elements from the top down."""
        link = self._top
        while link is not None:
            yield link.value
            link = link.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"