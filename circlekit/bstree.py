"""Binary search trees of comparable values, with traversal and shape checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree.

    ``bf`` is a balance-factor slot that callers may use; the tree
    operations here leave it untouched.
    """

    value: Any = ""
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None
    bf: int = 0


def preorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values in node, left, right order."""
    if root is None:
        return
    yield root.value
    yield from preorder(root.left)
    yield from preorder(root.right)


def postorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values in left, right, node order."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.value


def inorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values in left, node, right order."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.value
    yield from inorder(root.right)


def insert_node(root: Optional[TreeNode], key: Any) -> TreeNode:
    """Insert ``key`` and return the root; keys already present are ignored."""
    new = TreeNode(key)
    if root is None:
        return new
    node = root
    while node.value != key:
        if key > node.value:
            if node.right is None:
                node.right = new
                break
            node = node.right
        else:
            if node.left is None:
                node.left = new
                break
            node = node.left
    return root


def build_tree(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a search tree by inserting ``values`` in order."""
    root: Optional[TreeNode] = None
    for value in values:
        root = insert_node(root, value)
    return root


def contains(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Return the node holding ``key``, or None."""
    node = root
    while node is not None:
        if key == node.value:
            return node
        node = node.left if key < node.value else node.right
    return None


def take_rightmost_value(root: TreeNode) -> tuple[Any, Optional[TreeNode]]:
    """Remove the rightmost node of a non-empty subtree.

    Returns the removed value and the root of what remains.
    """
    if root.right is None:
        return root.value, root.left
    parent = root
    while parent.right.right is not None:
        parent = parent.right
    rightmost = parent.right
    parent.right = rightmost.left
    return rightmost.value, root


def delete_node(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Delete ``key`` from the tree and return the new root.

    A node with two children takes the largest value of its left subtree.
    Deleting a missing key leaves the tree as it was.
    """
    if root is None:
        return None
    if key == root.value:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        root.value, root.left = take_rightmost_value(root.left)
        return root
    if key > root.value:
        root.right = delete_node(root.right, key)
    else:
        root.left = delete_node(root.left, key)
    return root


def height(tree: Optional[TreeNode]) -> int:
    """Number of levels, counted level by level."""
    if tree is None:
        return 0
    level: deque[TreeNode] = deque([tree])
    levels = 0
    while level:
        for _ in range(len(level)):
            node = level.popleft()
            level.extend(child for child in (node.left, node.right) if child is not None)
        levels += 1
    return levels


def height_rec(tree: Optional[TreeNode]) -> int:
    """Number of levels, computed recursively."""
    if tree is None:
        return 0
    return max(height_rec(tree.left), height_rec(tree.right)) + 1


def is_balanced(tree: Optional[TreeNode]) -> bool:
    """True if every node's subtrees differ in height by at most one."""
    if tree is None:
        return True
    if abs(height_rec(tree.left) - height_rec(tree.right)) > 1:
        return False
    return is_balanced(tree.left) and is_balanced(tree.right)


def has_binary_search_property(tree: Optional[TreeNode]) -> bool:
    """True if every left child is smaller and every right child larger than its parent."""
    if tree is None:
        return True
    if tree.left is not None and not tree.left.value < tree.value:
        return False
    if tree.right is not None and not tree.right.value > tree.value:
        return False
    return has_binary_search_property(tree.left) and has_binary_search_property(tree.right)