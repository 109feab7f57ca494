"""Step recorders: output sinks threaded through the tracing algorithms.

Each tracer owns one recorder for the duration of a run and passes it down
through its helpers; the recorder copies the mutable working state
into an immutable snapshot on every ``emit``.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .trace_types import SortStep, TraversalStep
from . import constants


class SortRecorder:
    """Owns the working copy of the array being sorted."""

    def __init__(self, values: Sequence[int]):
        self.array: list[int] = list(values)
        self.steps: list[SortStep] = []

    def __len__(self) -> int:
        return len(self.array)

    def emit(
        self,
        comparing: tuple[int, int] | None = None,
        swapping: tuple[int, int] | None = None,
        sorted_indices: Iterable[int] | None = None,
        pivot: int | None = None,
    ) -> None:
        self.steps.append(
            SortStep(
                array=tuple(self.array),
                comparing=comparing,
                swapping=swapping,
                sorted=tuple(sorted_indices) if sorted_indices is not None else None,
                pivot=pivot,
            )
        )

    def swap(self, i: int, j: int) -> None:
        self.array[i], self.array[j] = self.array[j], self.array[i]

    def finish(self) -> list[SortStep]:
        """Emit the terminal all-sorted step and hand over the sequence.

        Arrays too short to compare never emitted anything, so they get their
        plain initial snapshot first.
        """
        if not self.steps:
            self.emit()
        self.emit(sorted_indices=range(len(self.array)))
        return self.steps


class TraversalRecorder:
    """Tracks visited ids, traversal order and (optionally) the work list."""

    def __init__(self, work_list: Sequence[str] | None = None):
        self.visited: list[str] = []
        self.order: list[int] = []
        self.work_list: list[str] | None = list(work_list) if work_list is not None else None
        self.steps: list[TraversalStep] = []

    def emit(self, kind: str, current: str | None = None) -> None:
        self.steps.append(
            TraversalStep(
                visited=tuple(self.visited),
                current=current,
                work_list=tuple(self.work_list) if self.work_list is not None else None,
                order=tuple(self.order),
                kind=kind,
            )
        )

    def enter(self, node_id: str) -> None:
        self.emit(constants.STEP_ENTER, current=node_id)

    def visit(self, node_id: str, value: int) -> None:
        self.visited.append(node_id)
        self.order.append(value)
        self.emit(constants.STEP_VISIT)

    def visit_pair(self, node_id: str, value: int) -> None:
        """Enter step with the node pending, then visit step with it recorded."""
        self.enter(node_id)
        self.visit(node_id, value)
