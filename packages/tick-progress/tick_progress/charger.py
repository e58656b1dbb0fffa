"""Charge meter filled by explicit charges and drained by passive decay."""
from __future__ import annotations

import logging

from tick_progress import easing
from tick_progress.clock import delta_time
from tick_progress.types import DeltaSource, Normalization

logger = logging.getLogger(__name__)


class ChargeMeter:
    """Stored value in ``[0, capacity]``.

    ``decay_rate`` is drained per second of frame time, applied each time the
    normalized value is read (``progress``, ``inverse``, ``midway``).
    """

    def __init__(
        self,
        capacity: float,
        decay_rate: float = 0.0,
        normalization: Normalization | str = Normalization.CLAMP,
        delta_source: DeltaSource | None = None,
    ) -> None:
        self.decay_rate = decay_rate
        self.normalization = Normalization(normalization)
        self._delta_source = delta_source if delta_source is not None else delta_time
        self._target = capacity
        self._current = 0.0
        self._reached = False

    @property
    def target(self) -> float:
        return self._target

    @property
    def capacity(self) -> float:
        return self._target

    @property
    def current(self) -> float:
        return self._current

    @property
    def reached(self) -> bool:
        return self._reached

    def charge(self, amount: float) -> None:
        self._current = easing.clamp(self._current + amount, 0.0, self._target)

    def _decay(self) -> None:
        if not self.decay_rate:
            return
        drained = self.decay_rate * self._delta_source()
        self._current = easing.clamp(self._current - drained, 0.0, self._target)

    def progress(self) -> float:
        self._decay()
        return easing.normalize(self._current, self._target, self.normalization)

    def inverse(self) -> float:
        return easing.inverse(self.progress())

    def midway(self) -> float:
        return easing.midway(self.progress())

    def is_complete(self) -> bool:
        return self._reached or self._current >= self._target

    def finish(self) -> None:
        self._reached = True

    def restart(self) -> None:
        self._current = 0.0
        self._reached = False
        logger.debug("charge meter restarted: capacity=%s", self._target)

    def __repr__(self) -> str:
        return (
            f"ChargeMeter(capacity={self._target!r}, current={self._current!r}, "
            f"decay_rate={self.decay_rate!r}, reached={self._reached!r})"
        )
