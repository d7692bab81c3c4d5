"""Accounts – Insight facade and per-account handles."""
from __future__ import annotations

from typing import Sequence

from insight_logs.adapters.redis import RedisLogBackend
from insight_logs.config.settings import DEFAULT_LOG_TTL, InsightSettings
from insight_logs.kernel.errors import ValidationError
from insight_logs.kernel.time import Clock
from insight_logs.logs import LogBackend, LogStore
from insight_logs.observability.logging import get_logger


class AccountInsight:
    """One account's private namespace and the log store living in it."""

    def __init__(
        self,
        account_id: int,
        backend: LogBackend,
        *,
        key_prefix: str = "insight",
        log_ttl: int = DEFAULT_LOG_TTL,
        log_record_ttl: int | None = None,
        clock: Clock | None = None,
    ) -> None:
        if isinstance(account_id, bool) or not isinstance(account_id, int) or account_id < 1:
            raise ValidationError(f"Invalid account id {account_id!r}")
        self.account_id = account_id
        self._key_prefix = key_prefix
        self.logs = LogStore(
            backend,
            self.redis_key,
            ttl=log_ttl,
            record_ttl=log_record_ttl,
            clock=clock,
        )

    def redis_key(self, sub: str | Sequence[str] | None = None) -> str:
        """Return the key for *sub* inside this account's namespace.

        A sequence is joined with ``:``; ``None`` returns the namespace root.
        """
        base = f"{self._key_prefix}:acc:{self.account_id}"
        if sub is None:
            return base
        parts = [sub] if isinstance(sub, str) else list(sub)
        return ":".join([base, *parts])

    def __repr__(self) -> str:
        return f"AccountInsight(account_id={self.account_id!r})"


class Insight:
    """Entry point: hands out :class:`AccountInsight` objects sharing one backend."""

    def __init__(
        self,
        backend: LogBackend,
        *,
        key_prefix: str = "insight",
        log_ttl: int = DEFAULT_LOG_TTL,
        log_record_ttl: int | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.backend = backend
        self._key_prefix = key_prefix
        self._log_ttl = log_ttl
        self._log_record_ttl = log_record_ttl
        self._clock = clock
        self._accounts: dict[int, AccountInsight] = {}
        self._log = get_logger(__name__, key_prefix=key_prefix)

    @classmethod
    def from_settings(cls, settings: InsightSettings, *, clock: Clock | None = None) -> "Insight":
        """Connect to ``settings.redis_url`` and apply the configured retention."""
        return cls(
            RedisLogBackend.from_url(settings.redis_url),
            key_prefix=settings.key_prefix,
            log_ttl=settings.log_ttl,
            log_record_ttl=settings.log_record_ttl,
            clock=clock,
        )

    def account(self, account_id: int) -> AccountInsight:
        """Return the (cached) insight handle for *account_id*."""
        existing = self._accounts.get(account_id)
        if existing is not None:
            return existing
        account = AccountInsight(
            account_id,
            self.backend,
            key_prefix=self._key_prefix,
            log_ttl=self._log_ttl,
            log_record_ttl=self._log_record_ttl,
            clock=self._clock,
        )
        self._accounts[account_id] = account
        self._log.debug("insight.account_opened", account_id=account_id)
        return account

    async def close(self) -> None:
        await self.backend.close()


__all__ = ["AccountInsight", "Insight"]
