"""Run pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AlgorithmFamily(Enum):
    """Which structure an algorithm consumes."""

    SORTING = "sorting"
    GRAPH = "graph"
    TREE = "tree"


class PlaybackState(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"


@dataclass(frozen=True)
class PlaybackConfig:
    """Groups run configuration chosen by the caller."""

    delay_ms: int | None = None  # None → algorithm default
    size: int | None = None  # None → family default
    seed: int | None = None


@dataclass
class TraceStats:
    """Counts derived from a step sequence."""

    steps: int = 0
    comparisons: int = 0
    swaps: int = 0
    writes: int = 0
    visits: int = 0

    def report(self) -> str:
        lines = [
            "═══ Trace Statistics ═══",
            f"  {'Steps':<14} {self.steps:>8}",
        ]
        if self.comparisons or self.swaps or self.writes:
            lines.append(f"  {'Comparisons':<14} {self.comparisons:>8}")
            lines.append(f"  {'Swaps':<14} {self.swaps:>8}")
            lines.append(f"  {'Writes':<14} {self.writes:>8}")
        if self.visits:
            lines.append(f"  {'Visits':<14} {self.visits:>8}")
        return "\n".join(lines)
