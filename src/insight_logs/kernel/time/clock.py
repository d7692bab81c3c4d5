"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def now(self) -> datetime: ...
    def timestamp(self) -> float: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def timestamp(self) -> float:
        return datetime.now(UTC).timestamp()


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    @classmethod
    def at_epoch(cls, seconds: int | float) -> "FrozenClock":
        """Pin the clock to *seconds* since the Unix epoch."""
        return cls(datetime.fromtimestamp(seconds, UTC))

    def now(self) -> datetime:
        return self._fixed

    def timestamp(self) -> float:
        return self._fixed.timestamp()

    def set(self, fixed: datetime) -> None:
        """Move the frozen time to *fixed*."""
        self._fixed = fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


def epoch_seconds(clock: Clock) -> int:
    """Whole seconds since the Unix epoch according to *clock*."""
    return int(clock.timestamp())


__all__ = ["Clock", "FrozenClock", "SystemClock", "epoch_seconds"]
