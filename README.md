# structlab

Classic data structures in plain Python, with no dependencies beyond the
standard library.

## Modules

- **`structlab.queues`**
  - `ArrayQueue(capacity=100)`: a bounded queue. Slots freed by `dequeue` are
    not reused until the queue has drained completely, so `is_full()` turns
    true once the last slot has been taken. It provides `enqueue`, `dequeue`,
    `front` and `rear`.
  - `CircularQueue(capacity=100)`: a bounded ring buffer whose slots are
    reused. It provides `enqueue`, `dequeue`, `peek` and a `capacity`
    property.
  - `LinkedQueue()`: an unbounded linked queue with `enqueue`, `dequeue` and
    `peek`.
  - `Deque(values=())`: a double-ended queue with `push_front`, `push_back`,
    `pop_front`, `pop_back`, `front`, `back`, `clear`,
    `resize(size, fill=0)`, which truncates or pads at the back, and
    `assign(values)`.

  All of them support `len()`, iteration from front to back and `is_empty()`.
- **`structlab.stacks`**
  - `ArrayStack(capacity=1000)`: a bounded stack.
  - `LinkedStack()`: an unbounded stack.

  Both provide `push`, `pop`, `peek`, `is_empty`, `len()` and iteration from
  the top down.
- **`structlab.strings`**: `is_anagram`, `is_palindrome`, `reverse`,
  `remove_spaces`, `substring(text, start, length=None)`, `find` (returns -1
  when the pattern is absent) and `concatenate(*args)`.
- **`structlab.binary_tree`**: a `Node(value, left, right)` dataclass with the
  following functions:
  - traversal generators `inorder`, `preorder`, `postorder` and `level_order`;
  - `levels`, which returns the values grouped by depth;
  - `insert`, which fills the first free child slot in level order;
  - `delete`, which overwrites the target with the value of the deepest,
    rightmost node and then detaches that node.

  The module also has `ArrayBinaryTree(size=10)`, which stores the tree in a
  list. It provides `insert_root`, `insert_left(key, parent)` and
  `insert_right(key, parent)`. Its `str()` shows empty slots as `-`.
- **`structlab.heaps`**: `MaxHeap` and `MinHeap`, each with `insert`,
  `remove`, `is_empty` and `len()`.
- **`structlab.bst`**: `BinarySearchTree(values=())`. It accepts duplicate
  values and places them in the right subtree. It provides `insert`,
  `search`, `delete` and `in`, plus the traversal methods `inorder`,
  `preorder`, `postorder` and `level_order`. Iterating over it yields the
  values in sorted order.
- **`structlab.avl`**: `AVLTree(values=())`, a self-balancing tree built from
  `AVLNode` objects. Inserting a value that is already present does nothing.
  It offers the same operations as `BinarySearchTree`, plus `height()`.

## Errors

The modules raise an exception when an operation cannot be carried out:

| Situation | Exception |
|---|---|
| Reading or removing from an empty queue or deque | `QueueEmptyError` |
| Enqueuing onto a full bounded queue | `QueueFullError` |
| Popping or peeking an empty stack | `StackEmptyError` |
| Pushing onto a full `ArrayStack` | `StackOverflowError` |
| Removing from an empty heap | `HeapEmptyError` |
| Deleting a value that is absent from a tree | `KeyError` |
| `ArrayBinaryTree`: the root is already set, or the parent slot is empty | `ValueError` |
| `ArrayBinaryTree`: the child slot lies beyond the size | `IndexError` |

## Installation

```
pip install .
```

## Example

```python
from structlab.queues import CircularQueue
from structlab.stacks import LinkedStack
from structlab.heaps import MinHeap
from structlab.avl import AVLTree

queue = CircularQueue(4)
for value in (10, 20, 30, 40):
    queue.enqueue(value)
queue.dequeue()          # 10
list(queue)              # [20, 30, 40]

stack = LinkedStack()
stack.push(10)
stack.push(20)
stack.pop()              # 20

heap = MinHeap()
for value in (9, 7, 2, 4):
    heap.insert(value)
heap.remove()            # 2

tree = AVLTree([40, 10, 50, 30, 20, 60])
tree.inorder()           # [10, 20, 30, 40, 50, 60]
30 in tree               # True
```

## What it does not do

This is a library only. It has no command-line program, and it does not print
or persist the structures.

## Running the tests

```
pip install ".[test]"
pytest
```