"""Singly linked list holding arbitrary data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Match = Callable[[Any, Any], int]


@dataclass(eq=False)
class ListNode:
    """One element of a linked list: its payload and the following node."""

    data: Any
    next: Optional["ListNode"] = None


def prefix_match(a: Any, b: Any) -> int:
    """Return 0 when ``a`` is a prefix of ``b`` (or equal to it), otherwise 1."""
    if isinstance(a, str) and isinstance(b, str):
        return 0 if b.startswith(a) else 1
    matched = 0
    for x, y in zip(a, b):
        if x != y:
            break
        matched += 1
    return 0 if matched == len(a) else 1


class LinkedList:
    """A singly linked list that exposes its nodes through ``head``."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[ListNode] = None
        if items is not None:
            tail: Optional[ListNode] = None
            for item in items:
                node = ListNode(item)
                if tail is None:
                    self.head = node
                else:
                    tail.next = node
                tail = node

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_back(self, data: Any) -> ListNode:
        """Append ``data`` at the end and return the new node."""
        node = ListNode(data)
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node
        return node

    def push_front(self, data: Any) -> ListNode:
        """Insert ``data`` before the current head and return the new node."""
        self.head = ListNode(data, self.head)
        return self.head

    def last(self) -> Optional[ListNode]:
        """Return the last node, or None for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def clear(self) -> None:
        """Remove every element."""
        node = self.head
        self.head = None
        while node is not None:
            node, node.next = node.next, None

    def at(self, nbr: int) -> Optional[ListNode]:
        """Return the ``nbr``-th node, counting from 1.

        Positions 0 and 1 both give the head; a position past the end gives None.
        """
        if nbr < 0:
            raise IndexError("list position cannot be negative")
        for position, node in enumerate(self._nodes(), start=1):
            if position >= nbr:
                return node
        return None

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        previous: Optional[ListNode] = None
        node = self.head
        while node is not None:
            following = node.next
            node.next = previous
            previous, node = node, following
        self.head = previous

    def foreach(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the data of every element, front to back."""
        for data in self:
            func(data)

    def foreach_if(
        self,
        func: Callable[[Any], Any],
        data_ref: Any,
        cmp: Match = prefix_match,
    ) -> None:
        """Call ``func`` on every element for which ``cmp(data_ref, data) == 0``."""
        for data in self:
            if cmp(data_ref, data) == 0:
                func(data)

    def find(self, data_ref: Any, cmp: Match = prefix_match) -> Optional[ListNode]:
        """Return the first node for which ``cmp(data_ref, data) == 0``, or None."""
        return next(
            (node for node in self._nodes() if cmp(data_ref, node.data) == 0), None
        )

    def remove_if(self, data_ref: Any, cmp: Match = prefix_match) -> None:
        """Remove every element for which ``cmp(data_ref, data) == 0``."""
        while self.head is not None and cmp(data_ref, self.head.data) == 0:
            self.head = self.head.next
        node = self.head
        while node is not None and node.next is not None:
            if cmp(data_ref, node.next.data) == 0:
                node.next = node.next.next
            else:
                node = node.next

    def merge(self, other: "LinkedList | Iterable[Any]") -> None:
        """Append ``other`` to the end of this list.

        A LinkedList is linked in directly, so both lists then share its nodes.
        """
        if isinstance(other, LinkedList):
            last = self.last()
            if last is None:
                self.head = other.head
            else:
                last.next = other.head
        else:
            for item in other:
                self.push_back(item)