import random

import pytest

from structlab.bst import BinarySearchTree

TRAVERSAL_VALUES = [5, 2, 8, 3, 7, 11, 9]


def _check_order_invariant(node, low=None, high=None):
    if node is None:
        return True
    if low is not None and node.value < low:
        return False
    if high is not None and node.value >= high:
        return False
    return _check_order_invariant(node.left, low, node.value) and _check_order_invariant(
        node.right, node.value, high
    )


def test_inorder_of_sample_tree_is_sorted():
    values = [1, 8, 3, 9, 6, 7, 10, 14, 4]
    tree = BinarySearchTree(values)
    assert tree.inorder() == sorted(values)
    assert len(tree) == len(values)


def test_insertion_sample():
    tree = BinarySearchTree([5, 4, 8, 2, 3, 6, 10])
    tree.insert(1)
    tree.insert(9)
    assert tree.inorder() == sorted([5, 4, 8, 2, 3, 6, 10, 1, 9])


def test_deletion_sample():
    tree = BinarySearchTree([5, 4, 6, 3, 2, 1, 7])
    tree.delete(4)
    tree.delete(7)
    assert tree.inorder() == [1, 2, 3, 5, 6]
    assert len(tree) == 5


def test_search_sample_finds_key():
    tree = BinarySearchTree(TRAVERSAL_VALUES)
    node = tree.search(7)
    assert node.value == 7
    assert 7 in tree


def test_search_missing_key_returns_none():
    tree = BinarySearchTree(TRAVERSAL_VALUES)
    assert tree.search(4) is None
    assert (4 in tree) is False


def test_preorder_sample():
    assert BinarySearchTree(TRAVERSAL_VALUES).preorder() == [5, 2, 3, 8, 7, 11, 9]


def test_postorder_sample():
    assert BinarySearchTree(TRAVERSAL_VALUES).postorder() == [3, 2, 7, 9, 11, 8, 5]


def test_level_order_sample():
    assert BinarySearchTree(TRAVERSAL_VALUES).level_order() == [5, 2, 8, 3, 7, 11, 9]


def test_root_is_first_value_in_preorder_and_level_order():
    tree = BinarySearchTree(TRAVERSAL_VALUES)
    assert tree.preorder()[0] == TRAVERSAL_VALUES[0]
    assert tree.level_order()[0] == TRAVERSAL_VALUES[0]
    assert tree.postorder()[-1] == TRAVERSAL_VALUES[0]


def test_iteration_matches_inorder():
    tree = BinarySearchTree(TRAVERSAL_VALUES)
    assert list(tree) == tree.inorder()


def test_duplicates_go_right_and_are_counted():
    tree = BinarySearchTree([5, 5, 5])
    assert tree.root.left is None
    assert tree.root.right.value == 5
    assert list(tree) == [5, 5, 5]
    assert len(tree) == 3


def test_delete_one_duplicate_keeps_others():
    tree = BinarySearchTree([3, 1, 3, 2, 3])
    tree.delete(3)
    assert list(tree) == [1, 2, 3, 3]
    assert _check_order_invariant(tree.root)


def test_delete_node_with_two_children_uses_predecessor():
    values = [50, 30, 70, 20, 40, 60, 80]
    tree = BinarySearchTree(values)
    tree.delete(50)
    assert tree.root.value == max(v for v in values if v < 50)
    assert list(tree) == sorted(v for v in values if v != 50)


def test_delete_only_node_empties_tree():
    tree = BinarySearchTree([1])
    tree.delete(1)
    assert tree.root is None
    assert len(tree) == 0
    assert list(tree) == []


def test_delete_missing_key_raises():
    tree = BinarySearchTree([1, 2, 3])
    with pytest.raises(KeyError):
        tree.delete(99)
    assert len(tree) == 3


def test_delete_from_empty_tree_raises():
    with pytest.raises(KeyError):
        BinarySearchTree().delete(1)


def test_empty_tree_traversals():
    tree = BinarySearchTree()
    assert tree.inorder() == []
    assert tree.preorder() == []
    assert tree.postorder() == []
    assert tree.level_order() == []