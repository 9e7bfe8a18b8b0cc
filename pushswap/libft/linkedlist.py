"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("content", "next")

    def __init__(self, content: Any, next: Optional[_Node] = None) -> None:
        self.content = content
        self.next = next


class LinkedList:
    """Singly linked list with a head; front operations are constant time."""

    def __init__(self, contents: Any = ()) -> None:
        self._head: Optional[_Node] = None
        for content in contents:
            self.append(content)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _last_node(self) -> Optional[_Node]:
        last = None
        for last in self._nodes():
            pass
        return last

    def push_front(self, content: Any) -> None:
        """Insert ``content`` at the front."""
        self._head = _Node(content, self._head)

    def append(self, content: Any) -> None:
        """Insert ``content`` at the back."""
        node = _Node(content)
        last = self._last_node()
        if last is None:
            self._head = node
        else:
            last.next = node

    def last(self) -> Any:
        """Content of the last element; ``IndexError`` if the list is empty."""
        last = self._last_node()
        if last is None:
            raise IndexError("last of an empty list")
        return last.content

    def pop_front(self, destroy: Optional[Callable[[Any], Any]] = None) -> Any:
        """Remove the first element and return its content.

        ``destroy``, when given, is called with the content first.
        Raises ``IndexError`` if the list is empty.
        """
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        node.next = None
        if destroy is not None:
            destroy(node.content)
        return node.content

    def clear(self) -> None:
        """Remove every element."""
        self._head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the content of every element, front to back."""
        for node in self._nodes():
            func(node.content)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())