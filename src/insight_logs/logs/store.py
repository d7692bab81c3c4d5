"""Log store – per-account writer and reader.

A :class:`LogStore` keeps a bounded window of recent log records for one
account.  Records live in individually expiring hashes; a sorted index maps
each record id to the second it was written and drives pagination, iteration
and age-based pruning.

Reads stop at the first index entry whose record can no longer be resolved
(a *gap*).  A gap means the record expired or was pruned while the read was
in progress, so everything past it is treated as unavailable.
"""
from __future__ import annotations

import inspect
import logging
from datetime import datetime
from typing import Any, Awaitable, Callable, Collection, Mapping

from insight_logs.application.pagination import PageRequest
from insight_logs.config.settings import DEFAULT_LOG_TTL
from insight_logs.kernel.errors import ValidationError
from insight_logs.kernel.time import Clock, SystemClock, epoch_seconds
from insight_logs.kernel.types import generate_id
from insight_logs.logs.index import LogIndex
from insight_logs.logs.models import IterationControl, LogLevel, LogRecord
from insight_logs.logs.ports import LogBackend
from insight_logs.logs.records import RecordPayload, RecordStore
from insight_logs.logs.rendering import render_message

logger = logging.getLogger(__name__)

Namespace = Callable[[str], str]
CallbackResult = IterationControl | None
ForEachCallback = Callable[[LogRecord, int], CallbackResult | Awaitable[CallbackResult]]


def _to_epoch(value: Any) -> int:
    if isinstance(value, datetime):
        return int(value.timestamp())
    if isinstance(value, bool):
        raise ValidationError(f"Invalid log timestamp {value!r}")
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(float(value))
        except ValueError as exc:
            raise ValidationError(f"Invalid log timestamp {value!r}", cause=exc) from exc
    raise ValidationError(f"Invalid log timestamp {value!r}")


class LogStore:
    """Writer and reader for one account's log.

    Parameters
    ----------
    backend:
        Key-value store implementing :class:`~insight_logs.logs.ports.LogBackend`.
    namespace:
        Maps a sub-key (``"log:records"``, ``"log:<id>"``) to the account's
        private key.
    ttl:
        Retention window in seconds.  Index entries older than this are
        pruned after every write.
    record_ttl:
        Lifetime of each record hash.  ``None`` uses *ttl*; ``0`` disables
        the per-record expiry so only the index prune bounds the log.
    clock:
        Source of "now" for timestamps and pruning.
    id_factory:
        Produces candidate record ids; collisions are retried.
    """

    def __init__(
        self,
        backend: LogBackend,
        namespace: Namespace,
        *,
        ttl: int = DEFAULT_LOG_TTL,
        record_ttl: int | None = None,
        clock: Clock | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        if ttl <= 0:
            raise ValidationError("ttl must be a positive number of seconds")
        if record_ttl is not None and record_ttl < 0:
            raise ValidationError("record_ttl must not be negative")
        self._backend = backend
        self._namespace = namespace
        self._ttl = ttl
        self._record_ttl = ttl if record_ttl is None else record_ttl
        self._clock = clock or SystemClock()
        self._id_factory = id_factory or generate_id
        self.index = LogIndex(backend, self.records_key)
        self.records = RecordStore(backend, self.record_key)

    @property
    def ttl(self) -> int:
        return self._ttl

    @property
    def record_ttl(self) -> int:
        return self._record_ttl

    @property
    def records_key(self) -> str:
        return self._namespace("log:records")

    def record_key(self, record_id: str) -> str:
        return self._namespace(f"log:{record_id}")

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    async def write(
        self,
        level: LogLevel | str,
        message: str,
        context: Mapping[str, Any] | None = None,
        *,
        timestamp: int | float | datetime | None = None,
    ) -> str:
        """Persist one record and return its id.

        ``{key}`` placeholders are rendered from *context* and the consumed
        keys dropped.  A truthy ``context["timestamp"]`` is consumed as the
        record time unless *timestamp* is passed explicitly.
        """
        parsed_level = LogLevel.parse(level)
        record_id = await self._allocate_id()

        rendered, residual = render_message(message, context or {})

        context_timestamp = residual.get("timestamp")
        if context_timestamp:
            del residual["timestamp"]

        if timestamp is not None:
            written_at = _to_epoch(timestamp)
        elif context_timestamp:
            written_at = _to_epoch(context_timestamp)
        else:
            written_at = epoch_seconds(self._clock)

        payload = RecordPayload(level=parsed_level, message=rendered, context=residual)
        async with self._backend.transaction() as tx:
            await self.records.put(tx, record_id, payload, self._record_ttl)
            await self.index.insert(tx, record_id, written_at)

        logger.debug(
            "log_store.written key=%s id=%s level=%s timestamp=%d",
            self.records_key, record_id, parsed_level.value, written_at,
        )

        await self.prune()
        return record_id

    async def log(self, level: LogLevel | str, message: str, context: Mapping[str, Any] | None = None) -> str:
        return await self.write(level, message, context)

    async def emergency(self, message: str, context: Mapping[str, Any] | None = None) -> str:
        return await self.write(LogLevel.EMERGENCY, message, context)

    async def alert(self, message: str, context: Mapping[str, Any] | None = None) -> str:
        return await self.write(LogLevel.ALERT, message, context)

    async def critical(self, message: str, context: Mapping[str, Any] | None = None) -> str:
        return await self.write(LogLevel.CRITICAL, message, context)

    async def error(self, message: str, context: Mapping[str, Any] | None = None) -> str:
        return await self.write(LogLevel.ERROR, message, context)

    async def warning(self, message: str, context: Mapping[str, Any] | None = None) -> str:
        return await self.write(LogLevel.WARNING, message, context)

    async def notice(self, message: str, context: Mapping[str, Any] | None = None) -> str:
        return await self.write(LogLevel.NOTICE, message, context)

    async def info(self, message: str, context: Mapping[str, Any] | None = None) -> str:
        return await self.write(LogLevel.INFO, message, context)

    def debug(self, message: str, context: Mapping[str, Any] | None = None) -> None:  # noqa: ARG002
        """Always raises :class:`RejectedLevelError`; debug records are never stored."""
        LogLevel.parse(LogLevel.DEBUG)

    async def prune(self) -> int:
        """Drop index entries that fell out of the retention window."""
        cutoff = epoch_seconds(self._clock) - self._ttl
        removed = await self.index.prune_older_than(cutoff)
        if removed:
            logger.debug("log_store.pruned key=%s count=%d cutoff=%d", self.records_key, removed, cutoff)
        return removed

    async def _allocate_id(self) -> str:
        while True:
            candidate = self._id_factory()
            if not await self.records.exists(candidate):
                return candidate
            logger.debug("log_store.id_collision key=%s id=%s", self.records_key, candidate)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    async def paginate(self, page: int = 1, per_page: int = 100) -> list[LogRecord]:
        """Return one page of records, newest first.

        The page is cut short at the first gap.
        """
        request = PageRequest(page=page, size=per_page)
        result: list[LogRecord] = []
        for record_id, timestamp in await self.index.range_descending(request.offset, request.size):
            record = await self._resolve(record_id, timestamp)
            if record is None:
                break
            result.append(record)
        return result

    async def for_each(
        self,
        callback: ForEachCallback,
        include: Collection[str] | None = None,
        exclude: Collection[str] | None = None,
    ) -> None:
        """Walk the whole log newest first.

        *callback* receives each delivered record and its 1-based delivery
        count.  Only records whose message is in *include* (when given) and
        not in *exclude* are delivered; exclusion wins.  The walk ends when
        the callback returns :attr:`IterationControl.STOP` or at the first
        gap.  Awaitable callback results are awaited.
        """
        include_set = None if include is None else frozenset(include)
        exclude_set = frozenset(exclude or ())

        delivered = 0
        entries = await self.index.range_descending(0, await self.index.size())
        for record_id, timestamp in entries:
            record = await self._resolve(record_id, timestamp)
            if record is None:
                break
            if record.message in exclude_set:
                continue
            if include_set is not None and record.message not in include_set:
                continue

            delivered += 1
            outcome = callback(record, delivered)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            if outcome is IterationControl.STOP:
                break

    async def count(self) -> int:
        return await self.index.size()

    async def _resolve(self, record_id: str, timestamp: int) -> LogRecord | None:
        payload = await self.records.get(record_id)
        if payload is None:
            logger.debug("log_store.gap key=%s id=%s timestamp=%d", self.records_key, record_id, timestamp)
            return None
        return LogRecord(
            id=record_id,
            timestamp=timestamp,
            level=payload.level,
            message=payload.message,
            context=payload.context,
        )


__all__ = ["ForEachCallback", "LogStore", "Namespace"]
