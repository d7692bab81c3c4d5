"""Domain errors – rejected input to the log store."""

from __future__ import annotations

from typing import Any

from insight_logs.kernel.errors.base import InsightError


class DomainError(InsightError):
    default_code = "domain_error"


class ValidationError(DomainError):
    """An argument (page, timestamp, account id, ttl) is out of range.

    ``errors`` lists the offending fields as ``{"field": ..., "value": ...}``.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []
        if self.errors:
            self.detail["errors"] = self.errors


class RejectedLevelError(DomainError):
    """Debug, or an unknown level name, was passed to a write."""

    default_code = "rejected_level"

    def __init__(self, level: Any, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Log level '{level}' is not stored in the insight log",
            **kwargs,
        )
        self.level = level
        self.detail["level"] = str(level)


__all__ = ["DomainError", "RejectedLevelError", "ValidationError"]
