"""Algorithm registry: static metadata and tracer lookup per algorithm key."""

from __future__ import annotations

from typing import Callable

from pydantic import BaseModel

from .graph_traversal import bfs, dfs
from .run_types import AlgorithmFamily
from .sorting import bubble_sort, merge_sort, quick_sort
from .tree_traversal import inorder, level_order, postorder, preorder
from . import constants


class AlgorithmInfo(BaseModel):
    """Display metadata a presentation adapter shows next to a run."""

    key: str
    name: str
    family: AlgorithmFamily
    complexity: str
    description: str
    default_delay_ms: int

    @property
    def requires_start(self) -> bool:
        return self.family == AlgorithmFamily.GRAPH


_SORT_DELAY_MS = constants.SORT_SPEED_CEILING - constants.DEFAULT_SORT_SPEED

_ALGORITHMS: dict[str, AlgorithmInfo] = {
    info.key: info
    for info in (
        AlgorithmInfo(
            key=constants.ALGO_BUBBLE,
            name="Bubble Sort",
            family=AlgorithmFamily.SORTING,
            complexity="O(n²)",
            description="Compares adjacent elements and swaps them if they are in wrong order",
            default_delay_ms=_SORT_DELAY_MS,
        ),
        AlgorithmInfo(
            key=constants.ALGO_QUICK,
            name="Quick Sort",
            family=AlgorithmFamily.SORTING,
            complexity="O(n log n) avg",
            description="Divides array using a pivot and recursively sorts partitions",
            default_delay_ms=_SORT_DELAY_MS,
        ),
        AlgorithmInfo(
            key=constants.ALGO_MERGE,
            name="Merge Sort",
            family=AlgorithmFamily.SORTING,
            complexity="O(n log n)",
            description="Divides array into halves and merges them in sorted order",
            default_delay_ms=_SORT_DELAY_MS,
        ),
        AlgorithmInfo(
            key=constants.ALGO_BFS_GRAPH,
            name="Breadth-First Search",
            family=AlgorithmFamily.GRAPH,
            complexity="O(V + E)",
            description="Explores neighbors level by level using a queue",
            default_delay_ms=constants.GRAPH_DELAY_MS,
        ),
        AlgorithmInfo(
            key=constants.ALGO_DFS_GRAPH,
            name="Depth-First Search",
            family=AlgorithmFamily.GRAPH,
            complexity="O(V + E)",
            description="Explores as far as possible along each branch using a stack",
            default_delay_ms=constants.GRAPH_DELAY_MS,
        ),
        AlgorithmInfo(
            key=constants.ALGO_INORDER,
            name="In-Order (DFS)",
            family=AlgorithmFamily.TREE,
            complexity="O(n)",
            description="Left → Root → Right. Results in sorted order for BST",
            default_delay_ms=constants.TREE_DELAY_MS,
        ),
        AlgorithmInfo(
            key=constants.ALGO_PREORDER,
            name="Pre-Order (DFS)",
            family=AlgorithmFamily.TREE,
            complexity="O(n)",
            description="Root → Left → Right. Useful for copying/serializing tree",
            default_delay_ms=constants.TREE_DELAY_MS,
        ),
        AlgorithmInfo(
            key=constants.ALGO_POSTORDER,
            name="Post-Order (DFS)",
            family=AlgorithmFamily.TREE,
            complexity="O(n)",
            description="Left → Right → Root. Useful for deleting tree",
            default_delay_ms=constants.TREE_DELAY_MS,
        ),
        AlgorithmInfo(
            key=constants.ALGO_BFS_TREE,
            name="Breadth-First Search",
            family=AlgorithmFamily.TREE,
            complexity="O(n)",
            description="Level by level traversal using queue",
            default_delay_ms=constants.TREE_DELAY_MS,
        ),
    )
}

_TRACERS: dict[str, Callable] = {
    constants.ALGO_BUBBLE: bubble_sort,
    constants.ALGO_QUICK: quick_sort,
    constants.ALGO_MERGE: merge_sort,
    constants.ALGO_BFS_GRAPH: bfs,
    constants.ALGO_DFS_GRAPH: dfs,
    constants.ALGO_INORDER: inorder,
    constants.ALGO_PREORDER: preorder,
    constants.ALGO_POSTORDER: postorder,
    constants.ALGO_BFS_TREE: level_order,
}


def get_algorithm(key: str) -> AlgorithmInfo:
    if key not in _ALGORITHMS:
        raise ValueError(
            f"Unsupported algorithm: {key}. "
            f"Available: {list(constants.SUPPORTED_ALGORITHMS)}"
        )
    return _ALGORITHMS[key]


def get_tracer(key: str) -> Callable:
    get_algorithm(key)
    return _TRACERS[key]


def algorithms_for(family: AlgorithmFamily) -> list[str]:
    return [key for key, info in _ALGORITHMS.items() if info.family == family]


def all_algorithms() -> list[AlgorithmInfo]:
    return list(_ALGORITHMS.values())
