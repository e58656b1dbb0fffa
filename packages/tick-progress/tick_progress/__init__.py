"""tick-progress - Normalized progress values for bars and countdowns."""
from __future__ import annotations

from tick_progress.charger import ChargeMeter
from tick_progress.clock import FrameClock, default_clock
from tick_progress.easing import NORMALIZERS, smoothstep
from tick_progress.timer import CountdownTimer
from tick_progress.types import Normalization, ProgressValue

__all__ = [
    "ChargeMeter",
    "CountdownTimer",
    "FrameClock",
    "NORMALIZERS",
    "Normalization",
    "ProgressValue",
    "default_clock",
    "smoothstep",
]
