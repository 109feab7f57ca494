"""Structure generators — random arrays, connected graphs and binary search trees."""

from __future__ import annotations

import logging
import math
import random
from typing import Iterable

from .structures import BinaryTree, Graph, GraphEdge, GraphNode, Position, TreeNode
from . import constants

logger = logging.getLogger(__name__)


def _node_id(index: int) -> str:
    return constants.NODE_ID_TEMPLATE.format(index=index)


def generate_array(
    size: int = constants.DEFAULT_ARRAY_SIZE,
    min_value: int = constants.ARRAY_MIN_VALUE,
    max_value: int = constants.ARRAY_MAX_VALUE,
    rng: random.Random | None = None,
) -> list[int]:
    """Return ``size`` integers drawn uniformly from ``[min_value, max_value]``.

    Values may repeat.
    """
    if size < 0:
        raise ValueError(f"Array size must be non-negative, got {size}")
    if min_value > max_value:
        raise ValueError(f"Empty value range [{min_value}, {max_value}]")
    rng = rng or random.Random()
    values = [rng.randint(min_value, max_value) for _ in range(size)]
    logger.info("Generated array of %d values", size)
    return values


def generate_graph(
    node_count: int = constants.DEFAULT_GRAPH_NODES,
    rng: random.Random | None = None,
) -> Graph:
    """Build a simple connected undirected graph with nodes on a circle.

    A path through every node guarantees connectivity; random extra edges
    are then drawn without replacement from the remaining pairs until the
    target edge count in ``[node_count, node_count + 5]`` is reached or the
    pool runs dry.
    """
    if node_count < 0:
        raise ValueError(f"Node count must be non-negative, got {node_count}")
    rng = rng or random.Random()

    nodes: list[GraphNode] = []
    for i in range(node_count):
        angle = (i * 2 * math.pi) / node_count
        nodes.append(
            GraphNode(
                id=_node_id(i),
                value=i + 1,
                position=Position(
                    x=constants.GRAPH_CENTER_X + constants.GRAPH_RADIUS * math.cos(angle),
                    y=constants.GRAPH_CENTER_Y + constants.GRAPH_RADIUS * math.sin(angle),
                ),
            )
        )

    edges = [
        GraphEdge(source=_node_id(i), target=_node_id(i + 1))
        for i in range(node_count - 1)
    ]

    candidates = [
        GraphEdge(source=_node_id(i), target=_node_id(j))
        for i in range(node_count)
        for j in range(i + 1, node_count)
    ]
    remaining = [
        edge for edge in candidates if not any(edge.same_pair(existing) for existing in edges)
    ]

    target_edges = rng.randint(node_count, node_count + constants.GRAPH_EXTRA_EDGE_SPAN)
    extra = max(0, min(target_edges - len(edges), len(remaining)))
    for _ in range(extra):
        edges.append(remaining.pop(rng.randrange(len(remaining))))

    logger.info("Generated graph with %d nodes and %d edges", len(nodes), len(edges))
    return Graph(nodes=nodes, edges=edges)


def _insert(tree: BinaryTree, value: int, node_id: str) -> None:
    new_index = len(tree.nodes)
    tree.nodes.append(TreeNode(id=node_id, value=value))
    if tree.root is None:
        tree.root = new_index
        return

    current = tree.root
    while True:
        node = tree.nodes[current]
        if value < node.value:
            if node.left is None:
                node.left = new_index
                return
            current = node.left
        else:
            if node.right is None:
                node.right = new_index
                return
            current = node.right


def build_tree(values: Iterable[int]) -> BinaryTree:
    """Insert ``values`` in order into an unbalanced BST and lay it out.

    Smaller values go left, everything else (duplicates included) goes right.
    Node ids follow insertion order.
    """
    tree = BinaryTree()
    for index, value in enumerate(values):
        _insert(tree, value, _node_id(index))
    return layout_tree(tree)


def generate_tree(
    value_count: int = constants.DEFAULT_TREE_VALUES,
    min_value: int = constants.TREE_MIN_VALUE,
    max_value: int = constants.TREE_MAX_VALUE,
    rng: random.Random | None = None,
) -> BinaryTree:
    """Build a BST from ``value_count`` random values."""
    values = generate_array(value_count, min_value, max_value, rng=rng)
    tree = build_tree(values)
    logger.info("Generated tree with %d nodes", len(tree))
    return tree


def layout_tree(
    tree: BinaryTree,
    x: float = constants.TREE_ROOT_X,
    y: float = constants.TREE_ROOT_Y,
) -> BinaryTree:
    """Assign positions and depths: root at (x, y), spacing halves per level."""
    if tree.root is None:
        return tree

    pending = [(tree.root, x, y, 0)]
    while pending:
        index, node_x, node_y, level = pending.pop()
        node = tree.nodes[index]
        node.position = Position(x=node_x, y=node_y)
        node.depth = level
        # Underflows to 0.0 on very deep trees instead of overflowing
        spacing = math.ldexp(constants.TREE_BASE_SPACING, -level)
        child_y = node_y + constants.TREE_LEVEL_HEIGHT
        if node.right is not None:
            pending.append((node.right, node_x + spacing, child_y, level + 1))
        if node.left is not None:
            pending.append((node.left, node_x - spacing, child_y, level + 1))
    return tree
