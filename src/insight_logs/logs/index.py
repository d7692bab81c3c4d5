"""Log store – LogIndex (sorted ``id -> timestamp`` mapping)."""
from __future__ import annotations

from insight_logs.logs.ports import LogBackend, LogTransaction


class LogIndex:
    """Per-account ordering of record ids by write timestamp."""

    def __init__(self, backend: LogBackend, key: str) -> None:
        self._backend = backend
        self.key = key

    async def insert(self, tx: LogTransaction, record_id: str, timestamp: int) -> None:
        """Queue an upsert of *record_id* at *timestamp* on *tx*."""
        await tx.zadd(self.key, {record_id: timestamp})

    async def range_descending(self, offset: int, limit: int) -> list[tuple[str, int]]:
        """Up to *limit* ``(id, timestamp)`` pairs from rank *offset*, newest first."""
        if limit <= 0 or offset < 0:
            return []
        rows = await self._backend.zrevrange_withscores(self.key, offset, offset + limit - 1)
        return [(record_id, int(score)) for record_id, score in rows]

    async def count_between(self, low: int, high: int) -> int:
        """Entries whose timestamp lies in ``[low, high]``."""
        return await self._backend.zcount(self.key, low, high)

    async def prune_older_than(self, cutoff: int) -> int:
        """Remove every entry stamped at or before *cutoff*; return how many went."""
        return await self._backend.zremrangebyscore(self.key, "-inf", cutoff)

    async def size(self) -> int:
        return await self._backend.zcard(self.key)


__all__ = ["LogIndex"]
