"""Binary max-heap and min-heap stored in a list."""

from __future__ import annotations

from typing import Any


class HeapEmptyError(IndexError):
    """Raised when removing from an empty heap."""


class _BinaryHeap:
    """Array-backed binary heap; subclasses decide which of two values ranks higher."""

    def __init__(self) -> None:
        self._data: list[Any] = []

    @staticmethod
    def _ranks_higher(a: Any, b: Any) -> bool:
        raise NotImplementedError

    def insert(self, value: Any) -> None:
        """Add ``value`` at the bottom and let it rise to its place."""
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def remove(self) -> Any:
        """Remove and return the top element."""
        if not self._data:
            raise HeapEmptyError("Heap is empty!")
        top = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return top

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if not self._ranks_higher(data[index], data[parent]):
                break
            data[index], data[parent] = data[parent], data[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            best = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._ranks_higher(data[child], data[best]):
                    best = child
            if best == index:
                return
            data[index], data[best] = data[best], data[index]
            index = best


class MaxHeap(_BinaryHeap):
    """Heap whose ``remove`` always returns the largest element."""

    def __init__(self) -> None:
        super().__init__()

    @staticmethod
    def _ranks_higher(a: Any, b: Any) -> bool:
        return a > b

    def insert(self, value: Any) -> None:
        super().insert(value)

    def remove(self) -> Any:
        return super().remove()

    def is_empty(self) -> bool:
        return super().is_empty()

    def __len__(self) -> int:
        return super().__len__()


class MinHeap(_BinaryHeap):
    """Heap whose ``remove`` always returns the smallest element."""

    def __init__(self) -> None:
        super().__init__()

    @staticmethod
    def _ranks_higher(a: Any, b: Any) -> bool:
        return a < b

    def insert(self, value: Any) -> None:
        super().insert(value)

    def remove(self) -> Any:
        return super().remove()

    def is_empty(self) -> bool:
        return super().is_empty()

    def __len__(self) -> int:
        return super().__len__()