"""Text checks built on stacks and queues: reversal, echo, brackets, palindromes."""

from __future__ import annotations

from collections.abc import Iterator

from edkit.queues import ArrayQueue, LinkedQueue
from edkit.stacks import ArrayStack, LinkedStack

_OPENERS = {"}": "{", ")": "(", "]": "["}


def _first_line(text: str) -> Iterator[str]:
    """Yield the characters of ``text`` up to the first newline."""
    for character in text:
        if character == "\n":
            return
        yield character


def reverse_text(text: str) -> str:
    """Reverse the first line of ``text`` through a bounded stack.

    Raises StackFullError when the line is longer than the stack's capacity.
    """
    stack = ArrayStack()
    for character in _first_line(text):
        stack.push(character)
    return "".join(stack.pop() for _ in range(len(stack)))


def queue_echo(text: str) -> str:
    """Pass the first line of ``text`` through a bounded queue, stopping when full."""
    queue = ArrayQueue()
    for character in _first_line(text):
        if queue.is_full():
            break
        queue.enqueue(character)
    return "".join(queue.dequeue() for _ in range(len(queue)))


def is_balanced(text: str) -> bool:
    """Tell whether the brackets on the first line of ``text`` are well formed."""
    stack = LinkedStack()
    for character in _first_line(text):
        if character in "{([":
            stack.push(character)
        elif character in _OPENERS:
            if stack.is_empty() or stack.pop() != _OPENERS[character]:
                return False
    return stack.is_empty()


def is_palindrome(text: str) -> bool:
    """Tell whether the first line of ``text`` reads the same both ways."""
    stack = LinkedStack()
    queue = LinkedQueue()
    for character in _first_line(text):
        stack.push(character)
        queue.enqueue(character)
    while not queue.is_empty():
        if stack.pop() != queue.dequeue():
            return False
    return True