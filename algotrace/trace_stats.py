"""Pure functions for computing statistics over step sequences."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from algotrace.run_types import TraceStats
from algotrace.trace_types import Step
from algotrace import constants


def count_step_kinds(steps: Sequence[Step]) -> dict[str, int]:
    """Return a frequency map of step kinds in the given sequence.

    Args:
        steps: A sequence of sort or traversal steps.

    Returns:
        A dict mapping step kind strings to their occurrence counts.
        Empty dict for an empty sequence.
    """
    return dict(Counter(step.kind for step in steps))


def compute_stats(steps: Sequence[Step]) -> TraceStats:
    kinds = count_step_kinds(steps)
    return TraceStats(
        steps=len(steps),
        comparisons=kinds.get(constants.STEP_COMPARE, 0),
        swaps=kinds.get(constants.STEP_SWAP, 0),
        writes=kinds.get(constants.STEP_WRITE, 0),
        visits=kinds.get(constants.STEP_VISIT, 0),
    )
