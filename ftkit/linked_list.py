"""A singly linked list holding arbitrary items."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class ListNode:
    """One cell of a linked list."""

    content: Any
    next: ListNode | None = None


class LinkedList:
    """Singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    @property
    def head(self) -> ListNode | None:
        """The first node, or None when the list is empty."""
        return self._head

    def push_front(self, content: Any) -> ListNode:
        """Insert ``content`` at the front and return its new node."""
        node = ListNode(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> ListNode:
        """Append ``content`` at the back and return its new node."""
        node = ListNode(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> ListNode | None:
        """The last node, or None when the list is empty."""
        return self._tail

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, passing each item to ``delete`` first if given."""
        if delete is not None:
            for content in self:
                delete(content)
        self._head = None
        self._tail = None
        self._size = 0

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """A new list holding ``func(item)`` for every item, in order."""
        return LinkedList(func(content) for content in self)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every item, front to back."""
        for content in self:
            func(content)

    def _nodes(self) -> Iterator[ListNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"