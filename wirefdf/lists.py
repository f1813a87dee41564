"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One link of a list: its content and the following node."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list with cheap insertion at the front."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for content in contents:
            self.add_back(content)

    def add_front(self, content: Any) -> Node:
        """Insert ``content`` as the new first element and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append ``content`` after the last element and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the last node, or None for an empty list."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def remove_first(self, delete: Callable[[Any], None] | None = None) -> Any:
        """Unlink the first node, pass its content to ``delete`` and return it.

        Raises IndexError on an empty list.
        """
        node = self.head
        if node is None:
            raise IndexError("remove_first from an empty list")
        self.head = node.next
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Remove every node, passing each content to ``delete`` in order."""
        while self.head is not None:
            self.remove_first(delete)

    def iterate(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on the content of every node, front to back."""
        for content in self:
            func(content)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next