"""Shared fixtures and structure builders for the unit tests."""

import random

import pytest

from algotrace.playback import ManualScheduler
from algotrace.structures import Graph, GraphEdge, GraphNode


def make_graph(node_count: int, edges: list[tuple[int, int]]) -> Graph:
    """Graph with nodes node-0..node-{n-1} valued 10, 20, ... and the given index edges."""
    return Graph(
        nodes=[GraphNode(id=f"node-{i}", value=(i + 1) * 10) for i in range(node_count)],
        edges=[GraphEdge(source=f"node-{a}", target=f"node-{b}") for a, b in edges],
    )


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
