"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a LinkedList."""

    content: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list with insertion at either end, iteration and mapping."""

    def __init__(self, contents: Iterator[Any] | list[Any] | tuple[Any, ...] = ()) -> None:
        self.head: Node | None = None
        for content in contents:
            self.push_back(content)

    def push_front(self, content: Any) -> Node:
        """Insert content at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The final node, or None for an empty list."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def clear(self, delete: Callable[[Any], None] | None) -> None:
        """Pass each content to delete, in order, then empty the list."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None

    def iterate(self, f: Callable[[Any], None]) -> None:
        """Call f on each content in order."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Callable[[Any], None] | None) -> LinkedList:
        """New list of f applied to each content.

        If f raises, the contents already produced are passed to delete and the
        error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except Exception:
            result.clear(delete)
            raise
        return result