"""Binary tree nodes with depth-first traversals and side views."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class TreeNode:
    """A binary tree node holding a value and two optional children."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.data
    yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield node.data
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.data


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, node, right order."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the values in node, left, right order."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, right, node order."""
    return list(_postorder(root))


def _side_view(root: TreeNode | None, left_first: bool) -> list[Any]:
    view: list[Any] = []
    stack: list[tuple[TreeNode | None, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node is None:
            continue
        if depth == len(view):
            view.append(node.data)
        first, second = (node.left, node.right) if left_first else (node.right, node.left)
        stack.append((second, depth + 1))
        stack.append((first, depth + 1))
    return view


def left_view(root: TreeNode | None) -> list[Any]:
    """Return the first value met on each level, scanning from the left."""
    return _side_view(root, left_first=True)


def right_view(root: TreeNode | None) -> list[Any]:
    """Return the first value met on each level, scanning from the right."""
    return _side_view(root, left_first=False)