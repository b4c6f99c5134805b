import pytest

from structlab.queues import (
    ArrayQueue,
    CircularQueue,
    Deque,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
)


def test_array_queue_walkthrough():
    q = ArrayQueue()
    for value in (10, 20, 30, 40, 50):
        q.enqueue(value)
    assert list(q) == [10, 20, 30, 40, 50]
    assert q.dequeue() == 10
    assert q.dequeue() == 20
    assert list(q) == [30, 40, 50]
    assert q.front() == 30
    assert q.rear() == 50
    assert len(q) == 3


def test_empty_containers_raise():
    cases = [
        (ArrayQueue(), ("dequeue", "front", "rear")),
        (CircularQueue(2), ("dequeue", "peek")),
        (LinkedQueue(), ("dequeue", "peek")),
        (Deque(), ("pop_front", "pop_back", "front", "back")),
    ]
    for container, operations in cases:
        assert container.is_empty()
        for operation in operations:
            with pytest.raises(QueueEmptyError):
                getattr(container, operation)()


def test_array_queue_full_after_capacity():
    q = ArrayQueue(3)
    for value in "abc":
        q.enqueue(value)
    assert q.is_full()
    with pytest.raises(QueueFullError):
        q.enqueue("d")


def test_array_queue_slots_not_reused_until_drained():
    q = ArrayQueue(2)
    q.enqueue(1)
    q.enqueue(2)
    assert q.dequeue() == 1
    assert q.is_full()
    with pytest.raises(QueueFullError):
        q.enqueue(3)
    assert q.dequeue() == 2
    assert q.is_empty()
    assert not q.is_full()
    q.enqueue(3)
    assert list(q) == [3]


def test_invalid_capacity():
    for factory in (ArrayQueue, CircularQueue):
        with pytest.raises(ValueError):
            factory(0)


def test_peekable_queues_walkthrough():
    for q in (CircularQueue(), LinkedQueue()):
        for value in (10, 20, 30, 40):
            q.enqueue(value)
        assert list(q) == [10, 20, 30, 40]
        assert q.peek() == 10
        assert q.dequeue() == 10
        assert q.peek() == 20
        assert list(q) == [20, 30, 40]
        assert len(q) == 3


def test_circular_queue_reuses_slots():
    q = CircularQueue(3)
    for value in (1, 2, 3):
        q.enqueue(value)
    assert q.is_full()
    with pytest.raises(QueueFullError):
        q.enqueue(4)
    assert q.dequeue() == 1
    q.enqueue(4)
    assert q.is_full()
    assert list(q) == [2, 3, 4]
    assert [q.dequeue() for _ in range(3)] == [2, 3, 4]
    assert q.is_empty()


def test_circular_queue_long_run_keeps_fifo_order():
    q = CircularQueue(4)
    out = []
    for value in range(20):
        if q.is_full():
            out.append(q.dequeue())
        q.enqueue(value)
    while not q.is_empty():
        out.append(q.dequeue())
    assert out == list(range(20))


def test_linked_queue_reuse_after_draining():
    q = LinkedQueue()
    q.enqueue("x")
    assert q.dequeue() == "x"
    assert q.is_empty()
    q.enqueue("y")
    assert list(q) == ["y"]


def test_deque_walkthrough():
    d = Deque()
    d.push_front(20)
    d.push_front(10)
    assert list(d) == [10, 20]
    d.push_back(30)
    d.push_back(40)
    assert list(d) == [10, 20, 30, 40]
    assert d.pop_front() == 10
    assert d.pop_back() == 40
    assert list(d) == [20, 30]
    assert d.front() == 20
    assert d.back() == 30
    assert not d.is_empty()
    assert len(d) == 2
    d.clear()
    assert list(d) == []
    assert d.is_empty()


def test_deque_resize_and_assign():
    d = Deque()
    d.push_front(50)
    d.push_back(60)
    assert list(d) == [50, 60]
    d.resize(3)
    assert list(d) == [50, 60, 0]
    d.resize(1)
    assert list(d) == [50]
    d.resize(3, fill=7)
    assert list(d) == [50, 7, 7]
    d.assign([1, 2, 3])
    assert list(d) == [1, 2, 3]


def test_deque_negative_resize():
    d = Deque([1])
    with pytest.raises(ValueError):
        d.resize(-1)


def test_deque_initial_values():
    d = Deque([5, 6])
    assert d.front() == 5
    assert d.back() == 6