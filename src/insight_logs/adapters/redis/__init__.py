"""Redis adapter – log backend."""
from insight_logs.adapters.redis.backend import RedisLogBackend

__all__ = ["RedisLogBackend"]
