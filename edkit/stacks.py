"""Bounded array-backed and unbounded linked stacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

MAX_ITEMS = 100


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has no room left."""

    def __init__(self, message: str = "Stack is already full!") -> None:
        super().__init__(message)


class StackEmptyError(IndexError):
    """Raised when popping from an empty stack."""

    def __init__(self, message: str = "Stack is empty!") -> None:
        super().__init__(message)


class ArrayStack:
    """A stack holding at most ``capacity`` items in a contiguous store."""

    def __init__(self, capacity: int = MAX_ITEMS) -> None:
        if capacity < 1:
            raise ValueError("stack capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        """True when the stack holds no items."""
        return not self._items

    def is_full(self) -> bool:
        """True when the stack has reached its capacity."""
        return len(self._items) == self.capacity

    def push(self, item: Any) -> None:
        """Place ``item`` on top of the stack."""
        if self.is_full():
            raise StackFullError()
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the item on top of the stack."""
        if self.is_empty():
            raise StackEmptyError()
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))

    def __str__(self) -> str:
        return "Pilha = " + "".join(str(item) for item in self._items)


@dataclass(slots=True)
class _Node:
    info: Any
    next: Optional["_Node"] = None


class LinkedStack:
    """A stack built from linked nodes, limited only by available memory."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._length = 0

    def is_empty(self) -> bool:
        """True when the stack holds no items."""
        return self._top is None

    def is_full(self) -> bool:
        """True when no new node can be allocated."""
        try:
            _Node(None)
        except MemoryError:
            return True
        return False

    def push(self, item: Any) -> None:
        """Place ``item`` on top of the stack."""
        if self.is_full():
            raise StackFullError()
        self._top = _Node(item, self._top)
        self._length += 1

    def pop(self) -> Any:
        """Remove and return the item on top of the stack."""
        if self._top is None:
            raise StackEmptyError()
        node = self._top
        self._top = node.next
        self._length -= 1
        return node.info

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        node = self._top
        while node is not None:
            yield node.info
            node = node.next

    def __str__(self) -> str:
        return "".join(str(item) for item in self)