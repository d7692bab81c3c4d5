"""Log store – record, level and iteration types."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from insight_logs.kernel.errors import RejectedLevelError


class LogLevel(str, Enum):
    """Severity of a log record.

    ``DEBUG`` is listed for completeness; writes at that level are rejected.
    """

    EMERGENCY = "emergency"
    ALERT = "alert"
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    INFO = "info"
    DEBUG = "debug"

    @property
    def is_stored(self) -> bool:
        return self is not LogLevel.DEBUG

    @classmethod
    def parse(cls, value: "LogLevel | str") -> "LogLevel":
        """Resolve *value* to a storable level or raise :class:`RejectedLevelError`."""
        if isinstance(value, cls):
            level = value
        else:
            try:
                level = cls(str(value).lower())
            except ValueError as exc:
                raise RejectedLevelError(value, f"Unknown log level '{value}'") from exc
        if not level.is_stored:
            raise RejectedLevelError(
                level.value, "Debug messages should not be stored in the insight log"
            )
        return level


class IterationControl(str, Enum):
    """Returned by a ``for_each`` callback to continue or halt the walk."""

    CONTINUE = "CONTINUE"
    STOP = "STOP"


@dataclasses.dataclass(frozen=True)
class LogRecord:
    """A resolved log entry, as returned by pagination and iteration."""

    id: str
    timestamp: int
    level: LogLevel
    message: str
    context: dict[str, Any] = dataclasses.field(default_factory=dict)


__all__ = ["IterationControl", "LogLevel", "LogRecord"]
