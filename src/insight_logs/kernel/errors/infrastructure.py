"""Infrastructure errors – backing store and payload failures."""

from __future__ import annotations

from typing import Any

from insight_logs.kernel.errors.base import InsightError


class InfrastructureError(InsightError):
    default_code = "infrastructure_error"


class BackingStoreUnavailableError(InfrastructureError):
    """The key-value store could not be reached (connection refused, timeout)."""

    default_code = "backing_store_unavailable"

    def __init__(self, resource: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Backing store '{resource}' is unavailable", **kwargs)
        self.resource = resource
        self.detail["resource"] = resource


class SerializationError(InfrastructureError):
    """A record field could not be encoded or decoded."""

    default_code = "serialization_error"

    def __init__(self, message: str, *, payload_type: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type
        if payload_type is not None:
            self.detail["payload_type"] = payload_type


__all__ = ["BackingStoreUnavailableError", "InfrastructureError", "SerializationError"]
