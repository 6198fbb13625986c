"""Sorting helpers for linked lists: in-place sort, sorted insert and sorted merge."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional

from microkit.linkedlist import LinkedList, ListNode

Order = Callable[[Any, Any], int]


def default_order(a: Any, b: Any) -> int:
    """Return 0 when ``a < b`` (already in order), otherwise 1 (swap needed)."""
    in_order = a < b
    if in_order:
        return 0
    return 1


def _walk(start: Optional[ListNode]) -> Iterator[ListNode]:
    node = start
    while node is not None:
        yield node
        node = node.next


def sort_list(lst: LinkedList, cmp: Order = default_order) -> None:
    """Sort ``lst`` in place by exchanging node payloads.

    Each element is compared with every element after it; when
    ``cmp(earlier, later) == 1`` their data are swapped.
    """
    for first in _walk(lst.head):
        for second in _walk(first.next):
            if cmp(first.data, second.data) == 1:
                first.data, second.data = second.data, first.data


def sorted_insert(lst: LinkedList, data: Any, cmp: Order = default_order) -> None:
    """Append ``data`` to ``lst`` and sort the whole list again."""
    lst.push_back(data)
    sort_list(lst, cmp)


def sorted_merge(
    lst: LinkedList, other: "LinkedList | Iterable[Any]", cmp: Order = default_order
) -> None:
    """Append ``other`` to ``lst`` and sort the combined list."""
    lst.merge(other)
    sort_list(lst, cmp)