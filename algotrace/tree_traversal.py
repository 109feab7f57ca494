"""Tree traversal tracers.

Depth-first orders walk the arena with an explicit stack, so degenerate
trees of any depth are traced without hitting the recursion limit.
"""

from __future__ import annotations

from collections import deque

from .recorder import TraversalRecorder
from .structures import BinaryTree
from .trace_types import TraversalStep


def inorder(tree: BinaryTree) -> list[TraversalStep]:
    """Left, node, right. Yields ascending values for a BST."""
    rec = TraversalRecorder()
    stack: list[int] = []
    index = tree.root
    while stack or index is not None:
        while index is not None:
            stack.append(index)
            index = tree.nodes[index].left
        node = tree.nodes[stack.pop()]
        rec.visit_pair(node.id, node.value)
        index = node.right
    return rec.steps


def preorder(tree: BinaryTree) -> list[TraversalStep]:
    """Node, left, right."""
    rec = TraversalRecorder()
    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = tree.nodes[stack.pop()]
        rec.visit_pair(node.id, node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return rec.steps


def postorder(tree: BinaryTree) -> list[TraversalStep]:
    """Left, right, node."""
    rec = TraversalRecorder()
    # (index, children_done): a node is visited on its second pop
    stack = [(tree.root, False)] if tree.root is not None else []
    while stack:
        index, children_done = stack.pop()
        node = tree.nodes[index]
        if children_done:
            rec.visit_pair(node.id, node.value)
            continue
        stack.append((index, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))
    return rec.steps


def level_order(tree: BinaryTree) -> list[TraversalStep]:
    """Breadth-first, left child queued before right."""
    rec = TraversalRecorder()
    if tree.root is None:
        return rec.steps

    queue: deque[int] = deque([tree.root])
    while queue:
        node = tree.nodes[queue.popleft()]
        rec.visit_pair(node.id, node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return rec.steps
