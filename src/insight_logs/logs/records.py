"""Log store – RecordStore (immutable, self-expiring record hashes)."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable

from insight_logs.kernel.errors import SerializationError
from insight_logs.logs.codec import decode_context, encode_context
from insight_logs.logs.models import LogLevel
from insight_logs.logs.ports import LogBackend, LogTransaction

RECORD_FIELDS = ("level", "message", "context")


@dataclasses.dataclass(frozen=True)
class RecordPayload:
    level: LogLevel
    message: str
    context: dict[str, Any]


class RecordStore:
    """Record hashes addressed by id; *key_for* maps an id to its store key."""

    def __init__(self, backend: LogBackend, key_for: Callable[[str], str]) -> None:
        self._backend = backend
        self.key_for = key_for

    async def exists(self, record_id: str) -> bool:
        return await self._backend.exists(self.key_for(record_id))

    async def put(
        self,
        tx: LogTransaction,
        record_id: str,
        payload: RecordPayload,
        ttl_seconds: int | None,
    ) -> None:
        """Queue the record hash (and its expiry, when *ttl_seconds* is set) on *tx*."""
        key = self.key_for(record_id)
        await tx.hset(
            key,
            {
                "level": payload.level.value,
                "message": payload.message,
                "context": encode_context(payload.context),
            },
        )
        if ttl_seconds:
            await tx.expire(key, ttl_seconds)

    async def get(self, record_id: str) -> RecordPayload | None:
        """Return the stored payload, or ``None`` when the hash is gone."""
        level, message, context = await self._backend.hmget(self.key_for(record_id), RECORD_FIELDS)
        if level is None or message is None:
            return None
        try:
            parsed_level = LogLevel(level)
        except ValueError as exc:
            raise SerializationError(
                f"Record '{record_id}' has unknown level {level!r}", payload_type="level", cause=exc
            ) from exc
        return RecordPayload(level=parsed_level, message=message, context=decode_context(context))

    async def ttl(self, record_id: str) -> int:
        """Remaining lifetime in seconds (``-2`` missing, ``-1`` no expiry)."""
        return await self._backend.ttl(self.key_for(record_id))


__all__ = ["RECORD_FIELDS", "RecordPayload", "RecordStore"]
