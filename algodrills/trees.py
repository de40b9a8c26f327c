"""Binary tree nodes and traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass
class Node:
    """A binary tree node."""

    val: int
    left: Node | None = None
    right: Node | None = None


def level_order(root: Node | None) -> list[int]:
    """Values in breadth-first order."""
    if root is None:
        return []
    values = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left:
            queue.append(node.left)
        if node.right:
            queue.append(node.right)
        values.append(node.val)
    return values


def preorder(root: Node | None) -> list[int]:
    """Values in node, left, right order."""
    values = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        values.append(node.val)
        stack.append(node.right)
        stack.append(node.left)
    return values


def invert_tree(root: Node | None) -> Node | None:
    """Mirror the tree in place and return its root."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        node.left, node.right = node.right, node.left
        stack.append(node.left)
        stack.append(node.right)
    return root