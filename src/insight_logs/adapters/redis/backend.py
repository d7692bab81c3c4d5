"""Redis adapter – RedisLogBackend."""
from __future__ import annotations

import contextlib
from typing import Any, AsyncIterator, Iterator, Mapping, Sequence

import redis.asyncio as aioredis
from redis import exceptions as redis_exceptions

from insight_logs.kernel.errors import BackingStoreUnavailableError
from insight_logs.logs.ports import LogBackend, LogTransaction, Score


def _text(value: Any) -> Any:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


class _RedisTransaction(LogTransaction):
    """Buffers commands on a ``MULTI/EXEC`` pipeline."""

    def __init__(self, pipe: Any) -> None:
        self._pipe = pipe

    async def hset(self, key: str, mapping: Mapping[str, str]) -> None:
        await self._pipe.hset(key, mapping=dict(mapping))

    async def expire(self, key: str, seconds: int) -> None:
        await self._pipe.expire(key, seconds)

    async def zadd(self, key: str, mapping: Mapping[str, float]) -> None:
        await self._pipe.zadd(key, dict(mapping))


class RedisLogBackend(LogBackend):
    """Log backend on top of an async Redis client.

    Connection and timeout failures surface as
    :class:`BackingStoreUnavailableError` with the Redis exception chained.
    """

    resource = "redis"

    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> "RedisLogBackend":
        kwargs.setdefault("decode_responses", True)
        return cls(aioredis.from_url(url, **kwargs))

    @contextlib.contextmanager
    def _translate(self) -> Iterator[None]:
        try:
            yield
        except (redis_exceptions.ConnectionError, redis_exceptions.TimeoutError) as exc:
            raise BackingStoreUnavailableError(self.resource, cause=exc) from exc

    async def exists(self, key: str) -> bool:
        with self._translate():
            return bool(await self._client.exists(key))

    async def hmget(self, key: str, fields: Sequence[str]) -> list[str | None]:
        with self._translate():
            values = await self._client.hmget(key, list(fields))
        return [_text(v) for v in values]

    async def ttl(self, key: str) -> int:
        with self._translate():
            return int(await self._client.ttl(key))

    async def zrevrange_withscores(self, key: str, start: int, stop: int) -> list[tuple[str, float]]:
        with self._translate():
            rows = await self._client.zrevrange(key, start, stop, withscores=True)
        return [(_text(member), float(score)) for member, score in rows]

    async def zcount(self, key: str, min_score: Score, max_score: Score) -> int:
        with self._translate():
            return int(await self._client.zcount(key, min_score, max_score))

    async def zcard(self, key: str) -> int:
        with self._translate():
            return int(await self._client.zcard(key))

    async def zremrangebyscore(self, key: str, min_score: Score, max_score: Score) -> int:
        with self._translate():
            return int(await self._client.zremrangebyscore(key, min_score, max_score))

    @contextlib.asynccontextmanager
    async def transaction(self) -> AsyncIterator[LogTransaction]:
        with self._translate():
            async with self._client.pipeline(transaction=True) as pipe:
                yield _RedisTransaction(pipe)
                await pipe.execute()

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisLogBackend"]
