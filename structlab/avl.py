"""Self-balancing AVL search tree holding distinct values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from structlab import binary_tree
from structlab.binary_tree import Node


@dataclass(eq=False)
class AVLNode(Node):
    """A binary tree node that also records the height of its subtree."""

    height: int = 1


def _height(node: Optional[AVLNode]) -> int:
    return node.height if node is not None else 0


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_left(x: AVLNode) -> AVLNode:
    y = x.right
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def _rotate_right(y: AVLNode) -> AVLNode:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rebalance(node: AVLNode) -> AVLNode:
    _update_height(node)
    balance = _balance_factor(node)
    if balance > 1:
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: Optional[AVLNode], value: Any) -> AVLNode:
    if node is None:
        return AVLNode(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    else:
        node.right = _insert(node.right, value)
    return _rebalance(node)


def _delete(node: AVLNode, key: Any) -> Optional[AVLNode]:
    if key < node.value:
        node.left = _delete(node.left, key)
    elif key > node.value:
        node.right = _delete(node.right, key)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right = _delete(node.right, successor.value)
    return _rebalance(node)


class AVLTree:
    """Balanced binary search tree; inserting a value already present does nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[AVLNode] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` unless it is already in the tree."""
        if value in self:
            return
        self.root = _insert(self.root, value)
        self._size += 1

    def delete(self, key: Any) -> None:
        """Remove ``key``, raising KeyError when it is not in the tree."""
        if key not in self:
            raise KeyError(key)
        self.root = _delete(self.root, key)
        self._size -= 1

    def search(self, key: Any) -> Optional[AVLNode]:
        """Return the node holding ``key``, or None."""
        node = self.root
        while node is not None and node.value != key:
            node = node.left if key < node.value else node.right
        return node

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _height(self.root)

    def inorder(self) -> list[Any]:
        return list(binary_tree.inorder(self.root))

    def preorder(self) -> list[Any]:
        return list(binary_tree.preorder(self.root))

    def postorder(self) -> list[Any]:
        return list(binary_tree.postorder(self.root))

    def level_order(self) -> list[Any]:
        return list(binary_tree.level_order(self.root))

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield values in sorted order."""
        return binary_tree.inorder(self.root)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"