"""Trace data types for step-by-step algorithm replay."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from .run_types import TraceStats
from . import constants


@dataclass(frozen=True)
class SortStep:
    """A freeze-frame of a sorting run.

    ``array`` is the full array contents at this instant. For a swap step the
    values are still the pre-swap ones; the swap is applied after the step.
    """

    array: tuple[int, ...]
    comparing: tuple[int, int] | None = None
    swapping: tuple[int, int] | None = None
    sorted: tuple[int, ...] | None = None
    pivot: int | None = None

    @property
    def kind(self) -> str:
        if self.swapping is not None:
            return constants.STEP_SWAP
        if self.comparing is not None:
            return constants.STEP_COMPARE
        if self.pivot is not None:
            return constants.STEP_PIVOT
        if self.sorted is not None:
            return constants.STEP_SORTED
        return constants.STEP_WRITE

    def to_dict(self) -> dict:
        d: dict = {"kind": self.kind, "array": list(self.array)}
        if self.comparing is not None:
            d["comparing"] = list(self.comparing)
        if self.swapping is not None:
            d["swapping"] = list(self.swapping)
        if self.sorted is not None:
            d["sorted"] = list(self.sorted)
        if self.pivot is not None:
            d["pivot"] = self.pivot
        return d

    def __str__(self) -> str:
        parts = [self.kind]
        if self.comparing is not None:
            parts.append(f"{self.comparing[0]}<->{self.comparing[1]}")
        if self.swapping is not None:
            parts.append(f"{self.swapping[0]}<=>{self.swapping[1]}")
        if self.pivot is not None:
            parts.append(f"pivot={self.pivot}")
        parts.append(str(list(self.array)))
        return " ".join(parts)


@dataclass(frozen=True)
class TraversalStep:
    """A freeze-frame of a graph or tree traversal.

    ``work_list`` holds the queue (BFS) or stack (DFS) contents, front/bottom
    first; tree traversals leave it as None. ``kind`` is set by the recorder
    since a visit step and a frontier step can carry identical fields.
    """

    visited: tuple[str, ...] = ()
    current: str | None = None
    work_list: tuple[str, ...] | None = None
    order: tuple[int, ...] = ()
    kind: str = constants.STEP_VISIT

    def to_dict(self) -> dict:
        d: dict = {
            "kind": self.kind,
            "visited": list(self.visited),
            "order": list(self.order),
        }
        if self.current is not None:
            d["current"] = self.current
        if self.work_list is not None:
            d["work_list"] = list(self.work_list)
        return d

    def __str__(self) -> str:
        parts = [self.kind]
        if self.current is not None:
            parts.append(self.current)
        if self.work_list is not None:
            parts.append(f"work={list(self.work_list)}")
        parts.append(f"order={list(self.order)}")
        return " ".join(parts)


Step = Union[SortStep, TraversalStep]


@dataclass(frozen=True)
class StepTrace:
    """Complete, immutable step sequence of one algorithm run."""

    algorithm: str
    steps: tuple[Step, ...] = ()
    stats: TraceStats = field(default_factory=TraceStats)

    @property
    def final_step(self) -> Step | None:
        return self.steps[-1] if self.steps else None

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> Step:
        return self.steps[index]
