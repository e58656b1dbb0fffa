"""Shared types for normalized progress values."""
from __future__ import annotations

from enum import Enum
from typing import Callable, Protocol, runtime_checkable

TimeSource = Callable[[], float]
DeltaSource = Callable[[], float]


class Normalization(Enum):
    """How current/target maps to a normalized progress value."""

    CLAMP = "clamp"
    SMOOTH_CLAMP = "smooth_clamp"
    UNLIMITED = "unlimited"


@runtime_checkable
class ProgressValue(Protocol):
    """Anything a UI widget can read "how far along" from."""

    normalization: Normalization

    @property
    def target(self) -> float: ...

    @property
    def current(self) -> float: ...

    @property
    def reached(self) -> bool: ...

    def progress(self) -> float: ...

    def inverse(self) -> float: ...

    def midway(self) -> float: ...

    def is_complete(self) -> bool: ...

    def finish(self) -> None: ...

    def restart(self) -> None: ...
