"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a list: its content and the next node."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list with front and back insertion."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        for item in items or ():
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: Any) -> Node:
        """Put ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        return node

    def add_back(self, content: Any) -> Node:
        """Put ``content`` at the back and return its node."""
        node = Node(content)
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node
        self._tail = node
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        if self._tail is not None and self._tail.next is None:
            return self._tail
        last = None
        for last in self._nodes():
            pass
        self._tail = last
        return last

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, calling ``delete`` on each content in order."""
        node = self.head
        self.head = None
        self._tail = None
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def each(self, f: Callable[[Any], None]) -> None:
        """Call ``f`` on each content in order."""
        for content in self:
            f(content)

    def map(
        self, f: Callable[[Any], Any], delete: Optional[Callable[[Any], None]] = None
    ) -> "LinkedList":
        """Return a new list of ``f(content)`` for each content.

        If ``f`` raises, the partly built list is cleared with ``delete``
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result