"""Config settings – InsightSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from insight_logs.config.errors import InvalidSettingValueError

DEFAULT_LOG_TTL = 604800  # 7 days


@dataclasses.dataclass
class InsightSettings:
    """Connection and retention settings for the account log stores.

    ``log_record_ttl`` left as ``None`` makes every record hash expire after
    ``log_ttl``; ``0`` disables the per-record expiry.
    """

    env_prefix: ClassVar[str] = "INSIGHT"

    redis_url: str = "redis://localhost:6379/0"
    key_prefix: str = "insight"
    log_ttl: int = DEFAULT_LOG_TTL
    log_record_ttl: int | None = None

    def __post_init__(self) -> None:
        if not self.key_prefix:
            raise InvalidSettingValueError("key_prefix", self.key_prefix, "must not be empty")
        if self.log_ttl <= 0:
            raise InvalidSettingValueError("log_ttl", self.log_ttl, "must be a positive number of seconds")
        if self.log_record_ttl is not None and self.log_record_ttl < 0:
            raise InvalidSettingValueError("log_record_ttl", self.log_record_ttl, "must not be negative")


__all__ = ["DEFAULT_LOG_TTL", "InsightSettings"]
