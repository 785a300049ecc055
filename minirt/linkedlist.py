"""Singly linked list of typed scene entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple

Comparator = Callable[[Any, Any], int]


@dataclass(eq=False)
class Node:
    """A list cell holding a kind tag, a payload and the following cell."""

    kind: int
    data: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list whose cells carry a kind tag alongside their data."""

    def __init__(self, items: Optional[Iterable[Tuple[int, Any]]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        for kind, data in items or ():
            self.append(kind, data)

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.data

    def __bool__(self) -> bool:
        return self.head is not None

    def nodes(self) -> Iterator[Node]:
        """Yield every cell from head to tail."""
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def at(self, index: int) -> Optional[Node]:
        """Return the cell at ``index``, or None when there is no such cell."""
        if index < 0:
            return None
        for position, node in enumerate(self.nodes()):
            if position == index:
                return node
        return None

    def find(self, ref: Any, cmp: Comparator) -> Optional[Node]:
        """Return the first cell whose data compares equal (0) to ``ref``."""
        return next((n for n in self.nodes() if cmp(n.data, ref) == 0), None)

    def foreach(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the data of every cell in order."""
        for data in self:
            func(data)

    def foreach_if(self, func: Callable[[Any], Any], ref: Any, cmp: Comparator) -> None:
        """Call ``func`` on the data of every cell that compares equal to ``ref``."""
        for data in self:
            if cmp(data, ref) == 0:
                func(data)

    def last(self) -> Optional[Node]:
        """Return the final cell, or None for an empty list."""
        last = None
        for last in self.nodes():
            pass
        return last

    def _refresh_tail(self) -> None:
        self._tail = self.last()

    def append(self, kind: int, data: Any) -> Node:
        """Add a new cell at the end and return it."""
        node = Node(kind, data)
        tail = self.last() if self._tail is None or self._tail.next is not None else self._tail
        if tail is None:
            self.head = node
        else:
            tail.next = node
        self._tail = node
        return node

    def push_front(self, kind: int, data: Any) -> Node:
        """Add a new cell at the start and return it."""
        node = Node(kind, data, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        return node

    def pop_front(self, release: Optional[Callable[[Any], Any]] = None) -> Any:
        """Remove the first cell and return its data; None when the list is empty.

        ``release`` is called with the removed data when given.
        """
        node = self.head
        if node is None:
            return None
        self.head = node.next
        node.next = None
        if self.head is None:
            self._tail = None
        if release is not None:
            release(node.data)
        return node.data

    def clear(self, release: Optional[Callable[[Any, int], Any]] = None) -> None:
        """Remove every cell, calling ``release(data, kind)`` on each in order."""
        for node in self.nodes():
            if release is not None:
                release(node.data, node.kind)
            node.next = None
        self.head = None
        self._tail = None