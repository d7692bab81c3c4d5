"""Log store – backing store ports.

The log store needs an ordered index (sorted set), small hashes with a
per-key TTL, and a transaction covering both.  Range and TTL semantics follow
Redis: ``stop`` is inclusive, ``ttl`` returns ``-2`` for a missing key and
``-1`` for a key without expiry.
"""
from __future__ import annotations

import abc
from contextlib import AbstractAsyncContextManager
from typing import Mapping, Sequence

Score = float | str


class LogTransaction(abc.ABC):
    """Commands buffered inside :meth:`LogBackend.transaction`.

    Nothing is visible to readers until the surrounding block exits cleanly;
    an exception inside the block discards every buffered command.
    """

    @abc.abstractmethod
    async def hset(self, key: str, mapping: Mapping[str, str]) -> None: ...

    @abc.abstractmethod
    async def expire(self, key: str, seconds: int) -> None: ...

    @abc.abstractmethod
    async def zadd(self, key: str, mapping: Mapping[str, float]) -> None: ...


class LogBackend(abc.ABC):
    """Port: the key-value primitives the log store is built on."""

    @abc.abstractmethod
    async def exists(self, key: str) -> bool: ...

    @abc.abstractmethod
    async def hmget(self, key: str, fields: Sequence[str]) -> list[str | None]: ...

    @abc.abstractmethod
    async def ttl(self, key: str) -> int: ...

    @abc.abstractmethod
    async def zrevrange_withscores(self, key: str, start: int, stop: int) -> list[tuple[str, float]]: ...

    @abc.abstractmethod
    async def zcount(self, key: str, min_score: Score, max_score: Score) -> int: ...

    @abc.abstractmethod
    async def zcard(self, key: str) -> int: ...

    @abc.abstractmethod
    async def zremrangebyscore(self, key: str, min_score: Score, max_score: Score) -> int: ...

    @abc.abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[LogTransaction]: ...

    async def close(self) -> None:
        """Release the underlying connection, if any."""


__all__ = ["LogBackend", "LogTransaction", "Score"]
