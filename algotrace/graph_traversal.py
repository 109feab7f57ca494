"""BFS and DFS over an undirected graph from a single start node."""

from __future__ import annotations

import logging
from collections import deque

from .recorder import TraversalRecorder
from .structures import Graph
from .trace_types import TraversalStep
from . import constants

logger = logging.getLogger(__name__)


def neighbors(graph: Graph, node_id: str) -> list[str]:
    """Opposite endpoints of every edge touching ``node_id``, in edge order."""
    result: list[str] = []
    for edge in graph.edges:
        if edge.touches(node_id):
            result.append(edge.target if edge.source == node_id else edge.source)
    return result


def _check_start(graph: Graph, start: str) -> None:
    if not graph.has_node(start):
        raise ValueError(
            f"Start node '{start}' not found in graph. "
            f"Available: {graph.node_ids()}"
        )


def bfs(graph: Graph, start: str) -> list[TraversalStep]:
    """Breadth-first traversal with a FIFO work list.

    Neighbors already queued are not enqueued twice. Nodes outside the start
    node's component are never visited.
    """
    _check_start(graph, start)
    values = {node.id: node.value for node in graph.nodes}

    queue: deque[str] = deque([start])
    rec = TraversalRecorder(queue)
    rec.emit(constants.STEP_FRONTIER)

    while queue:
        current = queue.popleft()
        if current in rec.visited:
            continue

        rec.work_list = list(queue)
        rec.enter(current)
        rec.visit(current, values[current])

        for neighbor in neighbors(graph, current):
            if neighbor not in rec.visited and neighbor not in queue:
                queue.append(neighbor)
        rec.work_list = list(queue)
        rec.emit(constants.STEP_FRONTIER)

    logger.debug("BFS from %s visited %d nodes", start, len(rec.visited))
    return rec.steps


def dfs(graph: Graph, start: str) -> list[TraversalStep]:
    """Depth-first traversal with a LIFO work list.

    Neighbors are pushed in reverse so they pop in edge order. The stack is
    not deduplicated; stale entries are skipped when popped.
    """
    _check_start(graph, start)
    values = {node.id: node.value for node in graph.nodes}

    stack: list[str] = [start]
    rec = TraversalRecorder(stack)
    rec.emit(constants.STEP_FRONTIER)

    while stack:
        current = stack.pop()
        if current in rec.visited:
            continue

        rec.work_list = list(stack)
        rec.enter(current)
        rec.visit(current, values[current])

        for neighbor in reversed(neighbors(graph, current)):
            if neighbor not in rec.visited:
                stack.append(neighbor)
        rec.work_list = list(stack)
        rec.emit(constants.STEP_FRONTIER)

    logger.debug("DFS from %s visited %d nodes", start, len(rec.visited))
    return rec.steps
