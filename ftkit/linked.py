"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.append(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, content: Any) -> Node:
        """Add ``content`` at the end of the list and return its node."""
        new = Node(content)
        tail = self.last()
        if tail is None:
            self.head = new
        else:
            tail.next = new
        return new

    def appendleft(self, content: Any) -> Node:
        """Add ``content`` at the front of the list and return its node."""
        self.head = Node(content, self.head)
        return self.head

    def last(self) -> Optional[Node]:
        """Return the last node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing each content to ``delete`` first, front to back."""
        if delete is not None:
            for node in self._nodes():
                delete(node.content)
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content, front to back."""
        for node in self._nodes():
            func(node.content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list holding ``func`` applied to each content.

        If ``func`` raises, the contents built so far are passed to
        ``delete`` and the exception propagates; the list itself is left
        untouched.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                new = Node(func(content))
                if tail is None:
                    result.head = new
                else:
                    tail.next = new
                tail = new
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"