"""Frame clock supplying frame time and per-frame delta time.

The host loop advances a clock once per frame, either by sampling real time
with ``tick()`` or by a fixed step with ``advance(dt)``. Progress values read
the module's ``default_clock`` through ``now()`` and ``delta_time()`` unless
they are given their own sources.
"""
from __future__ import annotations

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)


class FrameClock:
    def __init__(self, time_fn: Callable[[], float] = time.monotonic) -> None:
        self._time_fn = time_fn
        self._last_sample = time_fn()
        self._time = 0.0
        self._delta_time = 0.0
        self._frame = 0

    @property
    def time(self) -> float:
        """Seconds accumulated since the clock started, as of the last frame."""
        return self._time

    @property
    def delta_time(self) -> float:
        return self._delta_time

    @property
    def frame(self) -> int:
        return self._frame

    def tick(self) -> int:
        """Sample the time function and advance by the real elapsed time."""
        sample = self._time_fn()
        dt = sample - self._last_sample
        self._last_sample = sample
        return self.advance(max(dt, 0.0))

    def advance(self, dt: float) -> int:
        if dt < 0:
            raise ValueError("dt must not be negative")
        self._time += dt
        self._delta_time = dt
        self._frame += 1
        return self._frame

    def reset(self) -> None:
        self._last_sample = self._time_fn()
        self._time = 0.0
        self._delta_time = 0.0
        self._frame = 0
        logger.debug("frame clock reset")


default_clock = FrameClock()


def now() -> float:
    """Frame time of the default clock."""
    return default_clock.time


def delta_time() -> float:
    """Last frame's delta of the default clock."""
    return default_clock.delta_time
