"""Visualizer session — the state a presentation adapter drives with its controls.

A session owns the current structure, the selected algorithm, the start node
and a playback cursor. Every change of structure or algorithm forces the
cursor out of PLAYING before anything new can be started, so there is never
more than one active playback.
"""

from __future__ import annotations

import logging
import random

from .api import Structure, default_start, delay_for_speed, generate_structure, trace_algorithm
from .playback import PlaybackCursor, StepCallback, TickScheduler
from .registry import AlgorithmInfo, get_algorithm
from .run_types import AlgorithmFamily, PlaybackState
from .structures import Graph
from .trace_types import SortStep, Step, StepTrace, TraversalStep

logger = logging.getLogger(__name__)


class VisualizerSession:
    def __init__(
        self,
        algorithm: str,
        scheduler: TickScheduler,
        rng: random.Random | None = None,
        size: int | None = None,
        delay_ms: int | None = None,
        on_step: StepCallback | None = None,
    ):
        self._info = get_algorithm(algorithm)
        self.rng = rng or random.Random()
        self.size = size
        self.trace: StepTrace | None = None
        self.start_node: str | None = None
        self.structure: Structure = []
        self.cursor = PlaybackCursor(
            scheduler,
            delay_ms if delay_ms is not None else self._info.default_delay_ms,
            on_step=on_step,
        )
        self.regenerate()

    @property
    def info(self) -> AlgorithmInfo:
        return self._info

    @property
    def algorithm(self) -> str:
        return self._info.key

    @property
    def state(self) -> PlaybackState:
        return self.cursor.state

    @property
    def current_step(self) -> Step | None:
        return self.cursor.current_step

    @property
    def result(self) -> list[int]:
        """Traversal order of the final step, once playback has reached it."""
        step = self.cursor.current_step
        if not isinstance(step, TraversalStep) or not self.cursor.is_finished:
            return []
        return list(step.order)

    def regenerate(self) -> None:
        """Replace the structure with a fresh random one (the shuffle control)."""
        self.cursor.clear()
        self.trace = None
        self.structure = generate_structure(self.algorithm, self.size, rng=self.rng)
        self.start_node = default_start(self.structure)
        if isinstance(self.structure, list):
            self.cursor.load([SortStep(array=tuple(self.structure))])
        logger.info("Session regenerated structure for %s", self.algorithm)

    def select_algorithm(self, algorithm: str) -> None:
        info = get_algorithm(algorithm)
        family_changed = info.family != self._info.family
        self.cursor.clear()
        self.trace = None
        self._info = info
        self.cursor.delay_ms = info.default_delay_ms
        if family_changed:
            self.regenerate()
        elif isinstance(self.structure, list):
            self.cursor.load([SortStep(array=tuple(self.structure))])

    def select_start(self, node_id: str) -> None:
        if not isinstance(self.structure, Graph):
            raise ValueError(f"Algorithm '{self.algorithm}' does not take a start node")
        if not self.structure.has_node(node_id):
            raise ValueError(
                f"Start node '{node_id}' not found in graph. "
                f"Available: {self.structure.node_ids()}"
            )
        self.cursor.clear()
        self.trace = None
        self.start_node = node_id

    def set_size(self, size: int) -> None:
        self.size = size
        self.regenerate()

    def set_speed(self, speed: int) -> None:
        """Sorting speed control; takes effect from the next tick."""
        if self._info.family != AlgorithmFamily.SORTING:
            raise ValueError(f"Speed control only applies to sorting, not '{self.algorithm}'")
        self.cursor.delay_ms = delay_for_speed(speed)

    def start(self) -> StepTrace:
        """Compute a fresh trace from the current structure and play it."""
        self.cursor.pause()
        self.trace = trace_algorithm(self.algorithm, self.structure, self.start_node)
        self.cursor.start(self.trace.steps)
        return self.trace

    def pause(self) -> None:
        self.cursor.pause()

    def reset(self) -> None:
        self.cursor.reset()
