"""Operations that reshape a LinkedList: merging, filtering, reversing, sorting."""

from __future__ import annotations

from typing import Any, Callable, Optional

from minirt.linkedlist import Comparator, LinkedList, Node


def _take_over(other: LinkedList) -> Optional[Node]:
    """Detach and return the chain of ``other``, leaving it empty."""
    head = other.head
    other.head = None
    other._refresh_tail()
    return head


def merge(lst: LinkedList, other: LinkedList) -> None:
    """Attach the cells of ``other`` to the end of ``lst``; ``other`` is emptied."""
    chain = _take_over(other)
    tail = lst.last()
    if tail is None:
        lst.head = chain
    else:
        tail.next = chain
    lst._refresh_tail()


def remove_if(
    lst: LinkedList,
    ref: Any,
    cmp: Comparator,
    release: Optional[Callable[[Any], Any]] = None,
) -> int:
    """Remove every cell whose data compares equal (0) to ``ref``.

    ``release`` is called on the data of each removed cell. Returns how many
    cells were removed.
    """
    removed = 0
    prev: Optional[Node] = None
    for node in lst.nodes():
        if cmp(node.data, ref) == 0:
            if prev is None:
                lst.head = node.next
            else:
                prev.next = node.next
            node.next = None
            if release is not None:
                release(node.data)
            removed += 1
        else:
            prev = node
    lst._refresh_tail()
    return removed


def reverse(lst: LinkedList) -> None:
    """Reverse the order of the cells by relinking them."""
    prev: Optional[Node] = None
    for node in lst.nodes():
        node.next = prev
        prev = node
    lst.head = prev
    lst._refresh_tail()


def reverse_data(lst: LinkedList) -> None:
    """Reverse the order of the data in place, leaving cells and kinds where they are."""
    nodes = list(lst.nodes())
    for node, data in zip(nodes, reversed([n.data for n in nodes])):
        node.data = data


def sort(lst: LinkedList, cmp: Comparator) -> None:
    """Sort the data ascending by ``cmp`` with an exchange sort; kinds stay put."""
    nodes = list(lst.nodes())
    for position, node in enumerate(nodes):
        for other in nodes[position + 1:]:
            if cmp(node.data, other.data) > 0:
                node.data, other.data = other.data, node.data


def _insert_node(lst: LinkedList, node: Node, cmp: Comparator) -> None:
    """Link ``node`` before the first cell whose data sorts after its data."""
    prev: Optional[Node] = None
    current = lst.head
    while current is not None and cmp(current.data, node.data) <= 0:
        prev = current
        current = current.next
    node.next = current
    if prev is None:
        lst.head = node
    else:
        prev.next = node


def sorted_insert(lst: LinkedList, kind: int, data: Any, cmp: Comparator) -> Node:
    """Insert a new cell into an ascending list, after any equal entries."""
    node = Node(kind, data)
    _insert_node(lst, node, cmp)
    lst._refresh_tail()
    return node


def sorted_merge(lst: LinkedList, other: LinkedList, cmp: Comparator) -> None:
    """Move every cell of ``other`` into the ascending ``lst``; ``other`` is emptied."""
    node = _take_over(other)
    while node is not None:
        following = node.next
        _insert_node(lst, node, cmp)
        node = following
    lst._refresh_tail()