"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    content: Any
    next: Optional[_Node] = None


class LinkedList:
    """Singly linked list with O(1) insertion at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> None:
        """Insert ``content`` at the start of the list."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, content: Any) -> None:
        """Append ``content`` at the end of the list."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Return the content of the last element.

        Raises IndexError if the list is empty.
        """
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.content

    def clear(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every element, passing each content to ``release`` in order."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if release is not None:
                release(node.content)
            node.next = None
            node = following

    def remove_first(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove the first element, passing its content to ``release``.

        Raises IndexError if the list is empty.
        """
        node = self._head
        if node is None:
            raise IndexError("remove_first() on an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        node.next = None
        if release is not None:
            release(node.content)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        release: Optional[Callable[[Any], Any]] = None,
    ) -> LinkedList:
        """Return a new list holding ``func(content)`` for each element.

        If ``func`` raises, the contents built so far are passed to
        ``release`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(release)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"