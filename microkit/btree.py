"""Unbalanced binary search tree built from nodes holding arbitrary data."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

Compare = Callable[[Any, Any], int]

_INDENT = 10


@dataclass
class Node:
    """A tree node with its payload and two optional children."""

    data: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def default_compare(a: Any, b: Any) -> int:
    """Return -1 when ``a <= b`` (the new item goes right), otherwise 0."""
    return -1 if a <= b else 0


def default_match(a: Any, b: Any) -> int:
    """Return 0 when ``a`` equals ``b``, otherwise 1."""
    return 0 if a == b else 1


def insert(root: Optional[Node], item: Any, cmp: Compare = default_compare) -> Node:
    """Insert ``item`` below ``root`` and return the (possibly new) root.

    ``cmp(node.data, item) == -1`` sends the item to the right subtree,
    any other result sends it to the left. With the default comparison,
    smaller items go left and equal or larger items go right.
    """
    new = Node(item)
    if root is None:
        return new
    node = root
    while True:
        if cmp(node.data, item) == -1:
            if node.right is None:
                node.right = new
                return root
            node = node.right
        else:
            if node.left is None:
                node.left = new
                return root
            node = node.left


def get_content(
    root: Optional[Node], data_ref: Any, match: Compare = default_match
) -> Any:
    """Search for data for which ``match(data_ref, data) == 0``.

    At each node the search descends into the left child when there is
    one, and into the right child only when there is no left child.
    Returns the matching data, or None when the search ends without a match.
    """
    node = root
    while node is not None:
        if match(data_ref, node.data) == 0:
            return node.data
        node = node.left if node.left is not None else node.right
    return None


def level_count(root: Optional[Node]) -> int:
    """Return the number of levels (height) of the tree; 0 for an empty tree."""
    if root is None:
        return 0
    deepest = 0
    stack = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return deepest


def node_count(root: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    count = 0
    stack = [root]
    while stack:
        node = stack.pop()
        count += 1
        stack.extend(c for c in (node.left, node.right) if c is not None)
    return count


def _reverse_inorder(root: Optional[Node]) -> Iterator[tuple[Node, int]]:
    """Yield ``(node, depth)`` pairs right subtree first, then node, then left."""
    stack: list[tuple[Node, int]] = []
    node, depth = root, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.right, depth + 1
        node, depth = stack.pop()
        yield node, depth
        node, depth = node.left, depth + 1


def render(root: Optional[Node]) -> str:
    """Render the tree sideways: right subtree on top, ten spaces per level.

    Every node is written on its own line, preceded by a newline, as
    ``( data )``; there is no trailing newline.
    """
    return "".join(
        "\n" + " " * (_INDENT * depth) + f"( {node.data} )"
        for node, depth in _reverse_inorder(root)
    )


def print_tree(root: Optional[Node]) -> None:
    """Write the rendering of the tree to standard output."""
    sys.stdout.write(render(root))