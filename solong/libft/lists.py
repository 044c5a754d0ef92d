"""A singly linked list with the classic head/next layout."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One list cell: a content value and a link to the following cell."""

    content: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list of arbitrary values."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert a new node holding content before the current head."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append a new node holding content after the last node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call func on the content of every node, front to back."""
        for content in self:
            func(content)

    def clear(self, delete: Callable[[Any], Any]) -> None:
        """Pass every content to delete, then empty the list."""
        node = self.head
        while node is not None:
            following = node.next
            delete(node.content)
            node.next = None
            node = following
        self.head = None
        self._tail = None
        self._size = 0

    def map(self, func: Callable[[Any], Any], delete: Callable[[Any], Any]) -> LinkedList:
        """Return a new list of func(content) for every node.

        If func raises part way through, the contents already produced are
        handed to delete and the error is re-raised.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result