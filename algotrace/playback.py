"""Playback cursor — walks a step sequence on a cancellable repeating timer.

State machine:
    IDLE     → start(steps) → PLAYING   (PAUSED straight away for ≤ 1 step)
    PLAYING  → pause()      → PAUSED
    PLAYING  → last tick    → PAUSED
    any      → reset()      → PAUSED    (index 0, sequence kept)
    any      → clear()      → IDLE      (sequence dropped)

At most one tick is ever pending: every transition cancels the pending tick
before anything is rescheduled.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence

from .run_types import PlaybackState
from .trace_types import Step

logger = logging.getLogger(__name__)

StepCallback = Callable[[int, Step], None]


class PlaybackError(RuntimeError):
    """Raised when a transport operation is not allowed in the current state."""


class TickScheduler(ABC):
    """Strategy for scheduling a single delayed callback."""

    @abstractmethod
    def call_later(self, delay_s: float, callback: Callable[[], None]) -> Any:
        """Schedule ``callback`` after ``delay_s`` seconds; return a handle with cancel()."""
        ...


class AsyncioScheduler(TickScheduler):
    """Ticks on an asyncio event loop — single-threaded, cooperative."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay_s, callback)


class _ManualHandle:
    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(TickScheduler):
    """Virtual clock for hosts that drive time themselves.

    Nothing fires until ``advance`` moves the clock past a callback's due time.
    """

    def __init__(self):
        self.now = 0.0
        self._queue: list[tuple[float, int, _ManualHandle]] = []
        self._counter = itertools.count()

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> _ManualHandle:
        handle = _ManualHandle(self.now + delay_s, callback)
        heapq.heappush(self._queue, (handle.due, next(self._counter), handle))
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for _, _, handle in self._queue if not handle.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing due callbacks in order. Returns the count fired."""
        target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now = due
            handle.callback()
            fired += 1
        self.now = target
        return fired


class PlaybackCursor:
    """Holds one step sequence and the index currently shown."""

    def __init__(
        self,
        scheduler: TickScheduler,
        delay_ms: int,
        on_step: StepCallback | None = None,
    ):
        self.scheduler = scheduler
        self.delay_ms = delay_ms
        self.on_step = on_step
        self._steps: tuple[Step, ...] = ()
        self._index = 0
        self._state = PlaybackState.IDLE
        self._pending: Any = None

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    @property
    def index(self) -> int:
        return self._index

    @property
    def current_step(self) -> Step | None:
        if not self._steps:
            return None
        return self._steps[self._index]

    @property
    def is_playing(self) -> bool:
        return self._state == PlaybackState.PLAYING

    @property
    def is_finished(self) -> bool:
        return bool(self._steps) and self._index >= len(self._steps) - 1

    def start(self, steps: Sequence[Step]) -> None:
        """Replace the sequence and play it from the first step."""
        if self._state == PlaybackState.PLAYING:
            raise PlaybackError("Cannot start a new run while playing; pause or reset first")
        self._cancel_pending()
        self._steps = tuple(steps)
        self._index = 0
        logger.debug("Playback started with %d steps", len(self._steps))
        self._notify()
        if len(self._steps) <= 1:
            self._state = PlaybackState.PAUSED
            return
        self._state = PlaybackState.PLAYING
        self._schedule()

    def load(self, steps: Sequence[Step]) -> None:
        """Show ``steps`` from the first one without playing."""
        self._cancel_pending()
        self._steps = tuple(steps)
        self._index = 0
        self._state = PlaybackState.PAUSED
        self._notify()

    def pause(self) -> None:
        self._cancel_pending()
        if self._state == PlaybackState.PLAYING:
            self._state = PlaybackState.PAUSED
            logger.debug("Playback paused at %d", self._index)

    def reset(self) -> None:
        self._cancel_pending()
        self._index = 0
        self._state = PlaybackState.PAUSED
        self._notify()

    def clear(self) -> None:
        self._cancel_pending()
        self._steps = ()
        self._index = 0
        self._state = PlaybackState.IDLE

    def _schedule(self) -> None:
        self._cancel_pending()
        self._pending = self.scheduler.call_later(self.delay_ms / 1000.0, self._tick)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _tick(self) -> None:
        self._pending = None
        if self._state != PlaybackState.PLAYING:
            return
        self._index += 1
        self._notify()
        if self.is_finished:
            self._state = PlaybackState.PAUSED
            logger.debug("Playback reached final step %d", self._index)
            return
        self._schedule()

    def _notify(self) -> None:
        step = self.current_step
        if self.on_step is not None and step is not None:
            self.on_step(self._index, step)
