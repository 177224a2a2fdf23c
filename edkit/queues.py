"""Bounded circular-array and unbounded linked FIFO queues."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

MAX_ITEMS = 100


class QueueFullError(OverflowError):
    """Raised when enqueuing into a queue that has no room left."""

    def __init__(self, message: str = "Queue is already full!") -> None:
        super().__init__(message)


class QueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""

    def __init__(self, message: str = "Queue is empty!") -> None:
        super().__init__(message)


class ArrayQueue:
    """A queue holding at most ``capacity`` items in a circular buffer."""

    def __init__(self, capacity: int = MAX_ITEMS) -> None:
        if capacity < 1:
            raise ValueError("queue capacity must be positive")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._back = 0

    def is_empty(self) -> bool:
        """True when the queue holds no items."""
        return self._front == self._back

    def is_full(self) -> bool:
        """True when the queue has reached its capacity."""
        return self._back - self._front == self.capacity

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the back of the queue."""
        if self.is_full():
            raise QueueFullError()
        self._slots[self._back % self.capacity] = item
        self._back += 1

    def dequeue(self) -> Any:
        """Remove and return the item at the front of the queue."""
        if self.is_empty():
            raise QueueEmptyError()
        index = self._front % self.capacity
        item = self._slots[index]
        self._slots[index] = None
        self._front += 1
        return item

    def __len__(self) -> int:
        return self._back - self._front

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the back."""
        for position in range(self._front, self._back):
            yield self._slots[position % self.capacity]

    def __str__(self) -> str:
        return "Fila = " + "".join(str(item) for item in self)


@dataclass(slots=True)
class _Node:
    info: Any
    next: Optional["_Node"] = None


class LinkedQueue:
    """A queue built from linked nodes, limited only by available memory."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._length = 0

    def is_empty(self) -> bool:
        """True when the queue holds no items."""
        return self._front is None

    def is_full(self) -> bool:
        """True when no new node can be allocated."""
        try:
            _Node(None)
        except MemoryError:
            return True
        return False

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the back of the queue."""
        if self.is_full():
            raise QueueFullError()
        node = _Node(item)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._length += 1

    def dequeue(self) -> Any:
        """Remove and return the item at the front of the queue."""
        if self._front is None:
            raise QueueEmptyError()
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._length -= 1
        return node.info

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the back."""
        node = self._front
        while node is not None:
            yield node.info
            node = node.next

    def __str__(self) -> str:
        return "".join(str(item) for item in self)