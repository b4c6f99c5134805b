"""Classic data structures: queues, stacks, heaps, binary, search and AVL trees, and string helpers."""

__version__ = "0.1.0"

__all__ = ["queues", "stacks", "strings", "binary_tree", "heaps", "bst", "avl"]