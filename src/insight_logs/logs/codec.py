"""Log store – residual context encoding.

Contexts are stored as a versioned JSON envelope::

    {"v": 1, "data": {...}}

Values JSON cannot represent natively are stored through ``str()``.
"""
from __future__ import annotations

import json
from typing import Any, Mapping

from insight_logs.kernel.errors import SerializationError

CONTEXT_FORMAT_VERSION = 1


def encode_context(context: Mapping[str, Any]) -> str:
    try:
        return json.dumps(
            {"v": CONTEXT_FORMAT_VERSION, "data": dict(context)},
            ensure_ascii=False,
            default=str,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"Could not encode log context: {exc}", payload_type="context", cause=exc
        ) from exc


def decode_context(raw: str | bytes | None) -> dict[str, Any]:
    if raw is None or raw == "" or raw == b"":
        return {}
    try:
        envelope = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            "Log context is not valid JSON", payload_type="context", cause=exc
        ) from exc
    if not isinstance(envelope, dict) or envelope.get("v") != CONTEXT_FORMAT_VERSION:
        raise SerializationError(
            f"Unsupported log context format: {str(raw)[:64]!r}", payload_type="context"
        )
    data = envelope.get("data")
    if not isinstance(data, dict):
        raise SerializationError("Log context payload must be an object", payload_type="context")
    return data


__all__ = ["CONTEXT_FORMAT_VERSION", "decode_context", "encode_context"]
