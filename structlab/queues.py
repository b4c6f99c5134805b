"""FIFO queues backed by a fixed array, a ring buffer and a linked list, plus a deque."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_CAPACITY = 100


class QueueEmptyError(IndexError):
    """Raised when an element is requested from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when an element is added to a queue that has no room left."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")


class _Container(ABC):
    """Shared behaviour of the sized, iterable containers in this module."""

    _empty_message = "Queue is empty"

    @abstractmethod
    def __len__(self) -> int:
        """Number of stored elements."""

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Elements from front to back."""

    def is_empty(self) -> bool:
        return len(self) == 0

    def _require_items(self) -> None:
        if self.is_empty():
            raise QueueEmptyError(self._empty_message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class _Bounded(_Container):
    """Container with a fixed number of slots."""

    @abstractmethod
    def is_full(self) -> bool:
        """Whether no further element can be added."""

    def _require_room(self) -> None:
        if self.is_full():
            raise QueueFullError("Queue is full")


class ArrayQueue(_Bounded):
    """Queue over a fixed block of slots that are used once, front to back.

    Slots freed by dequeuing are not reused until the queue drains
    completely, so the queue reports full once its last slot is taken.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._slots: list[Any] = []
        self._head = 0

    def is_empty(self) -> bool:
        return self._head == len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) == self._capacity

    def enqueue(self, element: Any) -> None:
        self._require_room()
        self._slots.append(element)

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        element = self.front()
        self._head += 1
        if self.is_empty():
            self._slots = []
            self._head = 0
        return element

    def front(self) -> Any:
        self._require_items()
        return self._slots[self._head]

    def rear(self) -> Any:
        self._require_items()
        return self._slots[-1]

    def __len__(self) -> int:
        return len(self._slots) - self._head

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._head:])


class CircularQueue(_Bounded):
    """Bounded queue stored in a ring buffer whose slots are reused."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self._data: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == len(self._data)

    def enqueue(self, element: Any) -> None:
        self._require_room()
        self._data[(self._front + self._size) % len(self._data)] = element
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        element = self.peek()
        self._data[self._front] = None
        self._size -= 1
        self._front = (self._front + 1) % len(self._data) if self._size else 0
        return element

    def peek(self) -> Any:
        self._require_items()
        return self._data[self._front]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        capacity = len(self._data)
        for offset in range(self._size):
            yield self._data[(self._front + offset) % capacity]


@dataclass
class _Link:
    value: Any
    next: Optional["_Link"] = None


class LinkedQueue(_Container):
    """Unbounded queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Link] = None
        self._tail: Optional[_Link] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._head is None

    def enqueue(self, element: Any) -> None:
        link = _Link(element)
        if self._tail is None:
            self._head = link
        else:
            self._tail.next = link
        self._tail = link
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        element = self.peek()
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return element

    def peek(self) -> Any:
        self._require_items()
        return self._head.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        link = self._head
        while link is not None:
            yield link.value
            link = link.next


class Deque(_Container):
    """Double-ended queue with no size limit."""

    _empty_message = "Deque is empty"

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(values)

    def push_front(self, value: Any) -> None:
        self._items.appendleft(value)

    def push_back(self, value: Any) -> None:
        self._items.append(value)

    def pop_front(self) -> Any:
        self._require_items()
        return self._items.popleft()

    def pop_back(self) -> Any:
        self._require_items()
        return self._items.pop()

    def front(self) -> Any:
        self._require_items()
        return self._items[0]

    def back(self) -> Any:
        self._require_items()
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def resize(self, size: int, fill: Any = 0) -> None:
        """Truncate at the back or pad the back with ``fill`` to ``size`` items."""
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        while len(self._items) > size:
            self._items.pop()
        self._items.extend([fill] * (size - len(self._items)))

    def assign(self, values: Iterable[Any]) -> None:
        """Replace the whole contents with ``values``."""
        self._items = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)