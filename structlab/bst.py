"""Unbalanced binary search tree; equal values are placed in the right subtree."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

from structlab import binary_tree
from structlab.binary_tree import Node


class BinarySearchTree:
    """Binary search tree that accepts duplicate values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value``; values not smaller than a node go to its right."""
        new = Node(value)
        self._size += 1
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            side = "left" if value < node.value else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, new)
                return
            node = child

    def _locate(self, key: Any) -> tuple[Optional[Node], Optional[Node]]:
        """Return (parent, node) for the first node holding ``key``."""
        parent: Optional[Node] = None
        node = self.root
        while node is not None and node.value != key:
            parent = node
            node = node.left if key < node.value else node.right
        return parent, node

    def search(self, key: Any) -> Optional[Node]:
        """Return the first node holding ``key`` on the search path, or None."""
        return self._locate(key)[1]

    def delete(self, key: Any) -> None:
        """Remove one occurrence of ``key``.

        A node with two children takes the value of its in-order
        predecessor, which is then unlinked. Raises KeyError when
        ``key`` is not in the tree.
        """
        parent, node = self._locate(key)
        if node is None:
            raise KeyError(key)

        if node.left is not None and node.right is not None:
            pred_parent = node
            pred = node.left
            while pred.right is not None:
                pred_parent = pred
                pred = pred.right
            node.value = pred.value
            if pred_parent is node:
                pred_parent.left = pred.left
            else:
                pred_parent.right = pred.left
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self.root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1

    def _collect(self, walk: Callable[[Optional[Node]], Iterator[Any]]) -> list[Any]:
        return list(walk(self.root))

    def inorder(self) -> list[Any]:
        return self._collect(binary_tree.inorder)

    def preorder(self) -> list[Any]:
        return self._collect(binary_tree.preorder)

    def postorder(self) -> list[Any]:
        return self._collect(binary_tree.postorder)

    def level_order(self) -> list[Any]:
        return self._collect(binary_tree.level_order)

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield values in sorted (in-order) order."""
        return binary_tree.inorder(self.root)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"