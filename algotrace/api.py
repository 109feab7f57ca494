"""Composable API functions for the step-trace engine.

Each function corresponds to a CLI workflow (trace, --json, --stats) but is
callable programmatically without argparse.
"""

from __future__ import annotations

import logging
import random
from dataclasses import asdict
from typing import Union

from .generators import generate_array, generate_graph, generate_tree
from .registry import get_algorithm, get_tracer
from .run_types import AlgorithmFamily
from .structures import BinaryTree, Graph
from .trace_stats import compute_stats
from .trace_types import StepTrace
from . import constants

logger = logging.getLogger(__name__)

Structure = Union[list, Graph, BinaryTree]

_FAMILY_TYPES: dict[AlgorithmFamily, type] = {
    AlgorithmFamily.SORTING: list,
    AlgorithmFamily.GRAPH: Graph,
    AlgorithmFamily.TREE: BinaryTree,
}


def trace_algorithm(
    algorithm: str,
    structure: Structure,
    start: str | None = None,
) -> StepTrace:
    """Run one algorithm against a structure and record its step sequence.

    Args:
        algorithm: Algorithm key, e.g. "bubble", "bfs-graph", "inorder".
        structure: A list of ints, a Graph or a BinaryTree, matching the
            algorithm's family.
        start: Start node id; required for graph traversals, ignored
            otherwise.

    Returns:
        A StepTrace holding the immutable step sequence and its statistics.

    Raises:
        ValueError: Unknown algorithm, or a missing/invalid start node.
        TypeError: The structure does not match the algorithm's family.
    """
    info = get_algorithm(algorithm)
    expected = _FAMILY_TYPES[info.family]
    if not isinstance(structure, expected):
        raise TypeError(
            f"Algorithm '{algorithm}' expects a {expected.__name__}, "
            f"got {type(structure).__name__}"
        )

    tracer = get_tracer(algorithm)
    if info.requires_start:
        if start is None:
            raise ValueError(f"Algorithm '{algorithm}' requires a start node")
        steps = tracer(structure, start)
    else:
        steps = tracer(structure)

    trace = StepTrace(algorithm=algorithm, steps=tuple(steps), stats=compute_stats(steps))
    logger.info("Traced %s: %d steps", algorithm, len(trace))
    return trace


def generate_structure(
    algorithm: str,
    size: int | None = None,
    rng: random.Random | None = None,
) -> Structure:
    """Generate a fresh random structure of the kind ``algorithm`` consumes."""
    family = get_algorithm(algorithm).family
    if family == AlgorithmFamily.SORTING:
        return generate_array(size if size is not None else constants.DEFAULT_ARRAY_SIZE, rng=rng)
    if family == AlgorithmFamily.GRAPH:
        return generate_graph(size if size is not None else constants.DEFAULT_GRAPH_NODES, rng=rng)
    return generate_tree(size if size is not None else constants.DEFAULT_TREE_VALUES, rng=rng)


def default_start(structure: Structure) -> str | None:
    """First node of a graph, the default traversal start; None otherwise."""
    if isinstance(structure, Graph) and structure.nodes:
        return structure.nodes[0].id
    return None


def delay_for_speed(speed: int) -> int:
    """Map a 1–100 speed setting to a tick delay in milliseconds."""
    clamped = max(constants.MIN_SORT_SPEED, min(constants.MAX_SORT_SPEED, speed))
    return constants.SORT_SPEED_CEILING - clamped


def dump_trace(trace: StepTrace) -> str:
    """Return a human-readable text dump, one line per step."""
    width = len(str(max(len(trace) - 1, 0)))
    lines = [f"═══ {get_algorithm(trace.algorithm).name} ({len(trace)} steps) ═══"]
    lines.extend(f"  [{i:>{width}}] {step}" for i, step in enumerate(trace.steps))
    return "\n".join(lines)


def trace_to_dict(trace: StepTrace) -> dict:
    """Return a JSON-serialisable view of a trace and its metadata."""
    info = get_algorithm(trace.algorithm)
    return {
        "algorithm": trace.algorithm,
        "name": info.name,
        "family": info.family.value,
        "complexity": info.complexity,
        "stats": asdict(trace.stats),
        "steps": [step.to_dict() for step in trace.steps],
    }
