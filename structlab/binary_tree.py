"""Plain binary trees: linked nodes with traversals, level-order insertion
and deepest-node deletion, and a fixed-size array representation."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def inorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield values left subtree, node, right subtree."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.value
    yield from inorder(root.right)


def preorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield values node, left subtree, right subtree."""
    if root is None:
        return
    yield root.value
    yield from preorder(root.left)
    yield from preorder(root.right)


def postorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield values left subtree, right subtree, node."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.value


def _nodes_level_order(root: Optional[Node]) -> Iterator[Node]:
    if root is None:
        return
    pending = deque([root])
    while pending:
        node = pending.popleft()
        yield node
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)


def level_order(root: Optional[Node]) -> Iterator[Any]:
    """Yield values breadth first, left to right within each level."""
    for node in _nodes_level_order(root):
        yield node.value


def levels(root: Optional[Node]) -> list[list[Any]]:
    """Return the values grouped by depth, top level first."""
    result: list[list[Any]] = []
    current = [root] if root is not None else []
    while current:
        result.append([node.value for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return result


def insert(root: Optional[Node], value: Any) -> Node:
    """Place ``value`` in the first free child slot in level order.

    Returns the root, which is a new node when the tree was empty.
    """
    if root is None:
        return Node(value)
    for node in _nodes_level_order(root):
        if node.left is None:
            node.left = Node(value)
            return root
        if node.right is None:
            node.right = Node(value)
            return root
    raise AssertionError("a finite tree always has a free child slot")


def delete(root: Optional[Node], value: Any) -> Optional[Node]:
    """Remove ``value`` by overwriting it with the deepest node's value.

    The deepest, rightmost node is then detached. Returns the root, which
    is None when the last node was removed. Raises KeyError when
    ``value`` is not in the tree.
    """
    target: Optional[Node] = None
    parent_of_last: Optional[Node] = None
    last: Optional[Node] = None
    for node in _nodes_level_order(root):
        if target is None and node.value == value:
            target = node
        for child in (node.left, node.right):
            if child is not None:
                parent_of_last = node
        last = node
    if target is None or last is None:
        raise KeyError(value)
    if parent_of_last is None:
        return None
    target.value = last.value
    if parent_of_last.right is last:
        parent_of_last.right = None
    else:
        parent_of_last.left = None
    return root


class ArrayBinaryTree:
    """Binary tree stored in a list: children of slot i sit at 2i+1 and 2i+2."""

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        self._slots: list[Optional[Any]] = [None] * size

    def insert_root(self, key: Any) -> None:
        if self._slots[0] is not None:
            raise ValueError("The tree already has a root")
        self._slots[0] = key

    def insert_left(self, key: Any, parent: int) -> None:
        self._set_child(key, parent, 2 * parent + 1)

    def insert_right(self, key: Any, parent: int) -> None:
        self._set_child(key, parent, 2 * parent + 2)

    def _set_child(self, key: Any, parent: int, index: int) -> None:
        if not 0 <= parent < len(self._slots) or self._slots[parent] is None:
            raise ValueError(f"Cannot set child node at {index}. No parent found!")
        if index >= len(self._slots):
            raise IndexError(f"child slot {index} is beyond the tree size {len(self._slots)}")
        self._slots[index] = key

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> Optional[Any]:
        return self._slots[index]

    def __str__(self) -> str:
        return "".join("-" if key is None else str(key) for key in self._slots)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"