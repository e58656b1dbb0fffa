"""Countdown timer whose progress is a pure function of its time source."""
from __future__ import annotations

import logging
from typing import Callable, Generator

from tick_progress import easing
from tick_progress.clock import now
from tick_progress.types import Normalization, TimeSource

logger = logging.getLogger(__name__)


class CountdownTimer:
    """Timer that counts towards a set duration.

    ``progress()`` is the normalized elapsed time and ``is_complete()`` turns
    true once the duration has passed or ``finish()`` was called. Nothing is
    stored between reads, so the timer can be queried from any number of
    places per frame without drifting.
    """

    def __init__(
        self,
        normalization: Normalization | str = Normalization.CLAMP,
        time_source: TimeSource | None = None,
    ) -> None:
        self.normalization = Normalization(normalization)
        self._time_source = time_source if time_source is not None else now
        self._target = 0.0
        self._started_at = 0.0
        self._reached = False

    @classmethod
    def create(
        cls,
        duration: float,
        time_source: TimeSource | None = None,
        normalization: Normalization | str = Normalization.CLAMP,
    ) -> CountdownTimer:
        """Return a timer already started towards ``duration``."""
        timer = cls(normalization, time_source)
        timer.start(duration)
        return timer

    @classmethod
    def finished(cls) -> CountdownTimer:
        """Return a timer that is already complete."""
        return cls.from_flag(True)

    @classmethod
    def from_flag(cls, reached: bool) -> CountdownTimer:
        timer = cls()
        timer._reached = reached
        return timer

    @property
    def target(self) -> float:
        return self._target

    @property
    def duration(self) -> float:
        return self._target

    @property
    def started_at(self) -> float:
        return self._started_at

    @property
    def current(self) -> float:
        """Seconds elapsed since the last start or restart."""
        return self._time_source() - self._started_at

    @property
    def reached(self) -> bool:
        return self._reached

    def start(self, duration: float) -> None:
        self._started_at = self._time_source()
        self._reached = False
        self._target = duration
        logger.debug("timer started: duration=%s at=%s", duration, self._started_at)

    def restart(self) -> None:
        self._started_at = self._time_source()
        self._reached = False
        logger.debug("timer restarted at=%s", self._started_at)

    def finish(self) -> None:
        self._reached = True

    def progress(self) -> float:
        return easing.normalize(self.current, self._target, self.normalization)

    def inverse(self) -> float:
        return easing.inverse(self.progress())

    def midway(self) -> float:
        return easing.midway(self.progress())

    def is_complete(self) -> bool:
        return self._reached or self.current >= self._target

    def routine(
        self, on_step: Callable[[CountdownTimer], None] | None
    ) -> Generator[None, None, None]:
        """Restart, then call ``on_step`` once per resumed step until complete.

        Drive it with ``next()`` once per frame. A ``None`` callback produces
        an empty generator.
        """
        if on_step is None:
            return
        self.restart()
        while not self.is_complete():
            yield
            on_step(self)
        logger.debug("timer routine complete")

    def until_complete(
        self, on_complete: Callable[[], None] | None
    ) -> Generator[None, None, None]:
        """Restart, yield until complete, then call ``on_complete`` once."""
        if on_complete is None:
            return
        self.restart()
        while not self.is_complete():
            yield
        on_complete()
        logger.debug("timer completion callback fired")

    def __repr__(self) -> str:
        return (
            f"CountdownTimer(duration={self._target!r}, started_at={self._started_at!r}, "
            f"reached={self._reached!r}, normalization={self.normalization.value!r})"
        )
