"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with constant-time pushes at both ends."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """The last node, or ``None`` for an empty list."""
        return self._tail

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first node, pass its content to ``delete`` and return it."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, passing each content to ``delete`` front to back."""
        while self.head is not None:
            self.pop_front(delete)

    def iterate(self, func: Optional[Callable[[Any], Any]]) -> None:
        """Call ``func`` on each content, front to back."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self, func: Optional[Callable[[Any], Any]], delete: Deleter = None
    ) -> "LinkedList":
        """Return a new list of ``func(content)`` for each content.

        If ``func`` raises, the contents mapped so far are passed to
        ``delete`` and the error propagates. A ``func`` of ``None`` gives
        an empty list.
        """
        result = LinkedList()
        if func is None:
            return result
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"