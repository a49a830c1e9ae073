"""Binary trees: builders, traversals and structural checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

NULL_TOKEN = "N"
NULL_VALUE = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding ``value`` and optional children."""

    value: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree(text: str) -> TreeNode | None:
    """Build a tree from space-separated level-order tokens, ``N`` marking a missing child.

    An empty string, or one starting with ``N``, gives an empty tree.
    """
    if not text or text[0] == NULL_TOKEN:
        return None
    tokens = text.split()
    if not tokens:
        raise ValueError("no tokens to build a tree from")
    root = TreeNode(int(tokens[0]))
    pending: deque[TreeNode] = deque([root])
    rest = iter(tokens[1:])
    while pending:
        node = pending.popleft()
        token = next(rest, None)
        if token is None:
            break
        if token != NULL_TOKEN:
            node.left = TreeNode(int(token))
            pending.append(node.left)
        token = next(rest, None)
        if token is None:
            break
        if token != NULL_TOKEN:
            node.right = TreeNode(int(token))
            pending.append(node.right)
    return root


def _take(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("ran out of values while building the tree") from None


def build_from_level_order(values: Iterable[int]) -> TreeNode:
    """Build a tree from level-order values, ``-1`` marking a missing child.

    The first value always becomes the root. Every node created asks for a
    left and a right value; running out of values raises ValueError.
    """
    source = iter(values)
    root = TreeNode(_take(source))
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        left = _take(source)
        if left != NULL_VALUE:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = _take(source)
        if right != NULL_VALUE:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def build_preorder(values: Iterable[int]) -> TreeNode | None:
    """Build a tree from preorder values, ``-1`` marking a missing subtree."""
    source = iter(values)

    def build() -> TreeNode | None:
        value = _take(source)
        if value == NULL_VALUE:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return node values level by level, left to right."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.value for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def _inorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def inorder(root: TreeNode | None) -> list[int]:
    """Return values in left, node, right order."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[int]:
    """Return values in node, left, right order."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list[int]:
    """Return values in left, right, node order."""
    return list(_postorder(root))


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def _diameter_and_height(node: TreeNode | None) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_diameter, left_height = _diameter_and_height(node.left)
    right_diameter, right_height = _diameter_and_height(node.right)
    through_node = left_height + right_height + 1
    return (
        max(left_diameter, right_diameter, through_node),
        max(left_height, right_height) + 1,
    )


def diameter(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest path between any two nodes."""
    return _diameter_and_height(root)[0]


def _balanced_and_height(node: TreeNode | None) -> tuple[bool, int]:
    if node is None:
        return True, 0
    left_ok, left_height = _balanced_and_height(node.left)
    right_ok, right_height = _balanced_and_height(node.right)
    balanced = left_ok and right_ok and abs(left_height - right_height) <= 1
    return balanced, max(left_height, right_height) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """Return True if every node's subtrees differ in height by at most one."""
    return _balanced_and_height(root)[0]


def is_identical(first: TreeNode | None, second: TreeNode | None) -> bool:
    """Return True if both trees have the same shape and values."""
    if first is None or second is None:
        return first is second
    return (
        first.value == second.value
        and is_identical(first.left, second.left)
        and is_identical(first.right, second.right)
    )


def _sum_tree_and_total(node: TreeNode | None) -> tuple[bool, int]:
    if node is None:
        return True, 0
    if node.left is None and node.right is None:
        return True, node.value
    left_ok, left_sum = _sum_tree_and_total(node.left)
    if not left_ok:
        return False, 0
    right_ok, right_sum = _sum_tree_and_total(node.right)
    if not right_ok or node.value != left_sum + right_sum:
        return False, 0
    return True, node.value + left_sum + right_sum


def is_sum_tree(root: TreeNode | None) -> bool:
    """Return True if every non-leaf node equals the sum of its subtrees."""
    return _sum_tree_and_total(root)[0]