"""Unbalanced binary search tree: insertion, search and traversal."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary search tree with a link back to its parent."""

    item: Any
    left: TreeNode | None = None
    right: TreeNode | None = None
    parent: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.item!r})"


def search_tree(root: TreeNode | None, x: Any) -> TreeNode | None:
    """Return the node holding *x*, or None when *x* is not in the tree."""
    node = root
    while node is not None:
        if node.item == x:
            return node
        node = node.left if x < node.item else node.right
    return None


def insert_tree(root: TreeNode | None, x: Any) -> TreeNode:
    """Insert *x* and return the root; equal values go to the right subtree."""
    if root is None:
        return TreeNode(x)
    node = root
    while True:
        if x < node.item:
            if node.left is None:
                node.left = TreeNode(x, parent=node)
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = TreeNode(x, parent=node)
                return root
            node = node.right


def in_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield the items of the tree in ascending order."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.item
        node = node.right


def describe_tree(root: TreeNode | None) -> list[str]:
    """Describe every node with its parent and children, in pre-order."""
    lines: list[str] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        parts = [f"Node: {node.item}"]
        parts.append(
            f"Parent: {node.parent.item}" if node.parent is not None else "Parent: NULL"
        )
        if node.left is not None:
            parts.append(f"Left child: {node.left.item}")
        if node.right is not None:
            parts.append(f"Right child: {node.right.item}")
        lines.append(" | ".join(parts))
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return lines