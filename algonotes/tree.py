"""Binary trees rebuilt from their traversals."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

__all__ = ["TreeNode", "build_tree", "inorder_values", "postorder_values"]


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree(inorder: Sequence[int], postorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild the binary tree that has the given inorder and postorder traversals.

    Returns None when the traversals differ in length or are empty. Raises
    ValueError when the postorder holds a value the inorder does not.
    """
    if len(inorder) != len(postorder) or not inorder:
        return None

    position = {value: index for index, value in enumerate(inorder)}
    pending = iter(reversed(postorder))

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low >= high:
            return None
        root_val = next(pending)
        try:
            split = position[root_val]
        except KeyError:
            raise ValueError(f"value {root_val} is missing from the inorder traversal") from None
        root = TreeNode(root_val)
        # Postorder read backwards visits the root, then the right subtree, then the left.
        root.right = build(split + 1, high)
        root.left = build(low, split)
        return root

    return build(0, len(inorder))


def inorder_values(root: Optional[TreeNode]) -> list[int]:
    """Return the values of the tree in inorder: left, node, right."""
    values: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def postorder_values(root: Optional[TreeNode]) -> list[int]:
    """Return the values of the tree in postorder: left, right, node."""
    if root is None:
        return []
    values: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    values.reverse()
    return values