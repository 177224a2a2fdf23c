import pytest

from edkit.queues import (
    MAX_ITEMS,
    ArrayQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
)


def test_dequeue_preserves_order():
    items = list("queue")
    for queue in (ArrayQueue(), LinkedQueue()):
        for item in items:
            queue.enqueue(item)
        assert [queue.dequeue() for _ in items] == items
        assert queue.is_empty()


@pytest.mark.parametrize("kind", ["array", "linked"])
def test_dequeue_empty_raises(kind):
    queue = ArrayQueue() if kind == "array" else LinkedQueue()
    with pytest.raises(QueueEmptyError, match="Queue is empty!"):
        queue.dequeue()


def test_length_and_iteration():
    for queue in (ArrayQueue(), LinkedQueue()):
        for item in "abc":
            queue.enqueue(item)
        assert len(queue) == 3
        assert list(queue) == ["a", "b", "c"]
        queue.dequeue()
        assert list(queue) == ["b", "c"]
        assert len(queue) == 2


def test_reuse_after_emptying():
    for queue in (ArrayQueue(), LinkedQueue()):
        queue.enqueue("a")
        assert queue.dequeue() == "a"
        assert queue.is_empty()
        queue.enqueue("b")
        queue.enqueue("c")
        assert list(queue) == ["b", "c"]


def test_array_queue_default_capacity():
    assert ArrayQueue().capacity == MAX_ITEMS == 100


def test_array_queue_full_raises():
    queue = ArrayQueue(capacity=2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.is_full()
    with pytest.raises(QueueFullError, match="Queue is already full!"):
        queue.enqueue(3)
    assert list(queue) == [1, 2]


def test_array_queue_wraps_around():
    queue = ArrayQueue(capacity=3)
    for item in (1, 2, 3):
        queue.enqueue(item)
    assert queue.dequeue() == 1
    assert queue.dequeue() == 2
    queue.enqueue(4)
    queue.enqueue(5)
    assert queue.is_full()
    assert list(queue) == [3, 4, 5]
    assert [queue.dequeue() for _ in range(3)] == [3, 4, 5]


def test_array_queue_rejects_bad_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(capacity=0)


def test_array_queue_str():
    queue = ArrayQueue()
    for item in "abc":
        queue.enqueue(item)
    assert str(queue) == "Fila = abc"
    assert str(ArrayQueue()) == "Fila = "


def test_linked_queue_never_full():
    queue = LinkedQueue()
    for number in range(MAX_ITEMS * 2):
        queue.enqueue(number)
    assert not queue.is_full()
    assert list(queue) == list(range(MAX_ITEMS * 2))


def test_linked_queue_str_uses_item_str():
    class Named:
        def __init__(self, name):
            self.name = name

        def __str__(self):
            return self.name

    queue = LinkedQueue()
    for name in ("A", "B"):
        queue.enqueue(Named(name))
    assert str(queue) == "AB"