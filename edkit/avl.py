"""A self-balancing AVL search tree of students keyed by their registration number."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


@dataclass(frozen=True)
class Student:
    """A student identified by a registration number (``ra``)."""

    ra: int = -1
    name: str = ""


class OrderEntry(NamedTuple):
    """A student visited during a traversal together with its node's balance factor."""

    student: Student
    balance: int


class Order(str, Enum):
    """Depth-first traversal orders."""

    PRE = "pre"
    IN = "in"
    POST = "post"


@dataclass
class _Node:
    student: Student
    balance: int = 0
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    return pivot


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    return pivot


def _rebalance(node: _Node) -> _Node:
    """Rotate ``node`` when its balance factor reaches +/-2 and fix the factors."""
    if node.balance == -2:
        child = node.left
        if child.balance == -1:
            node.balance = 0
            child.balance = 0
            return _rotate_right(node)
        if child.balance == 0:
            node.balance = -1
            child.balance = 1
            return _rotate_right(node)
        grandchild = child.right
        node.balance, child.balance = {
            -1: (1, 0),
            0: (0, 0),
            1: (0, -1),
        }[grandchild.balance]
        grandchild.balance = 0
        node.left = _rotate_left(child)
        return _rotate_right(node)
    if node.balance == 2:
        child = node.right
        if child.balance == 1:
            node.balance = 0
            child.balance = 0
            return _rotate_left(node)
        if child.balance == 0:
            node.balance = 1
            child.balance = -1
            return _rotate_left(node)
        grandchild = child.left
        node.balance, child.balance = {
            -1: (0, 1),
            0: (0, 0),
            1: (-1, 0),
        }[grandchild.balance]
        grandchild.balance = 0
        node.right = _rotate_right(child)
        return _rotate_left(node)
    return node


def _insert(node: Optional[_Node], student: Student) -> tuple[_Node, bool]:
    if node is None:
        return _Node(student), True
    if student.ra < node.student.ra:
        node.left, taller = _insert(node.left, student)
        if taller:
            node.balance -= 1
    else:
        node.right, taller = _insert(node.right, student)
        if taller:
            node.balance += 1
    node = _rebalance(node)
    if taller and node.balance == 0:
        taller = False
    return node, taller


def _delete(node: Optional[_Node], ra: int) -> tuple[Optional[_Node], bool]:
    if node is None:
        raise KeyError(ra)
    if ra < node.student.ra:
        node.left, shorter = _delete(node.left, ra)
        if shorter:
            node.balance += 1
    elif ra > node.student.ra:
        node.right, shorter = _delete(node.right, ra)
        if shorter:
            node.balance -= 1
    else:
        node, shorter = _delete_node(node)
    if node is not None:
        node = _rebalance(node)
        if shorter and node.balance != 0:
            shorter = False
    return node, shorter


def _delete_node(node: _Node) -> tuple[Optional[_Node], bool]:
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    successor = node.right
    while successor.left is not None:
        successor = successor.left
    node.student = successor.student
    node.right, shorter = _delete(node.right, successor.student.ra)
    if shorter:
        node.balance -= 1
    return node, shorter


class AVLTree:
    """A height-balanced binary search tree of students ordered by ``ra``."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def is_empty(self) -> bool:
        """True when the tree holds no students."""
        return self._root is None

    def is_full(self) -> bool:
        """True when no new node can be allocated."""
        try:
            _Node(Student())
        except MemoryError:
            return True
        return False

    def insert(self, student: Student) -> None:
        """Insert ``student``; equal keys go to the right subtree."""
        self._root, _ = _insert(self._root, student)

    def delete(self, ra: int) -> None:
        """Remove the student with registration number ``ra``.

        Raises KeyError when no such student is stored.
        """
        self._root, _ = _delete(self._root, ra)

    def retrieve(self, ra: int) -> Student:
        """Return the stored student with registration number ``ra``.

        Raises KeyError when no such student is stored.
        """
        node = self._root
        while node is not None:
            if ra < node.student.ra:
                node = node.left
            elif ra > node.student.ra:
                node = node.right
            else:
                return node.student
        raise KeyError(ra)

    def pre_order(self) -> Iterator[OrderEntry]:
        """Yield entries root first, then the left and right subtrees."""
        yield from self._walk(self._root, Order.PRE)

    def in_order(self) -> Iterator[OrderEntry]:
        """Yield entries in ascending key order."""
        yield from self._walk(self._root, Order.IN)

    def post_order(self) -> Iterator[OrderEntry]:
        """Yield entries of both subtrees before their root."""
        yield from self._walk(self._root, Order.POST)

    def format_order(self, order: Order | str) -> str:
        """Render a traversal as ``name[balance] `` for each visited node."""
        walk = {
            Order.PRE: self.pre_order,
            Order.IN: self.in_order,
            Order.POST: self.post_order,
        }[Order(order)]
        return "".join(f"{entry.student.name}[{entry.balance}] " for entry in walk())

    def _walk(self, node: Optional[_Node], order: Order) -> Iterator[OrderEntry]:
        if node is None:
            return
        entry = OrderEntry(node.student, node.balance)
        if order is Order.PRE:
            yield entry
        yield from self._walk(node.left, order)
        if order is Order.IN:
            yield entry
        yield from self._walk(node.right, order)
        if order is Order.POST:
            yield entry