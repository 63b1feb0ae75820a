"""Unbalanced binary search trees with prefix, infix, suffix and level-order walks.

Ordering is decided by a comparison function ``cmp(a, b)`` that returns a
negative number when ``a`` sorts before ``b``, zero when they are equal and
a positive number otherwise. Items that compare equal to a node go to its
right subtree, so equal items keep their insertion order in an infix walk.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

Compare = Callable[[Any, Any], int]


@dataclass
class BTreeNode:
    """One node of a binary tree holding an arbitrary item."""

    item: Any
    left: BTreeNode | None = None
    right: BTreeNode | None = None


def level_count(root: BTreeNode | None) -> int:
    """Number of levels in the tree; an empty tree has none."""
    if root is None:
        return 0
    depth = 0
    frontier = [root]
    while frontier:
        depth += 1
        frontier = [
            child
            for node in frontier
            for child in (node.left, node.right)
            if child is not None
        ]
    return depth


def nodes_count(root: BTreeNode | None) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in walk_prefix(root))


def insert(root: BTreeNode | None, item: Any, cmp: Compare) -> BTreeNode:
    """Insert ``item`` into the tree and return its root.

    An empty tree gets a new root node holding ``item``.
    """
    new_node = BTreeNode(item)
    if root is None:
        return new_node
    node = root
    while True:
        if cmp(item, node.item) < 0:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right


def search(root: BTreeNode | None, ref: Any, cmp: Compare) -> Any:
    """First item, in infix order, for which ``cmp(item, ref)`` is zero.

    Returns None when no item matches or when ``ref`` is None.
    """
    if ref is None:
        return None
    return next((item for item in walk_infix(root) if cmp(item, ref) == 0), None)


def _prefix_nodes(root: BTreeNode | None) -> Iterator[BTreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _infix_nodes(root: BTreeNode | None) -> Iterator[BTreeNode]:
    stack: list[BTreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _suffix_nodes(root: BTreeNode | None) -> Iterator[BTreeNode]:
    stack: list[tuple[BTreeNode, bool]] = [(root, False)] if root is not None else []
    while stack:
        node, children_done = stack.pop()
        if children_done:
            yield node
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def walk_prefix(root: BTreeNode | None) -> Iterator[Any]:
    """Items in prefix order: node, left subtree, right subtree."""
    return (node.item for node in _prefix_nodes(root))


def walk_infix(root: BTreeNode | None) -> Iterator[Any]:
    """Items in infix order: left subtree, node, right subtree."""
    return (node.item for node in _infix_nodes(root))


def walk_suffix(root: BTreeNode | None) -> Iterator[Any]:
    """Items in suffix order: left subtree, right subtree, node."""
    return (node.item for node in _suffix_nodes(root))


def walk_by_level(root: BTreeNode | None) -> Iterator[tuple[Any, int, bool]]:
    """Items level by level, left to right.

    Yields ``(item, level, is_first)`` where the root is on level 1 and
    ``is_first`` marks the leftmost item of each level.
    """
    if root is None:
        return
    queue: deque[tuple[BTreeNode, int]] = deque([(root, 1)])
    previous_level = 0
    while queue:
        node, level = queue.popleft()
        yield node.item, level, level != previous_level
        previous_level = level
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, level + 1))


def apply_by_level(
    root: BTreeNode | None, func: Callable[[Any, int, bool], Any]
) -> None:
    """Call ``func(item, level, is_first)`` for each item in level order."""
    for item, level, is_first in walk_by_level(root):
        func(item, level, is_first)