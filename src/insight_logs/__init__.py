"""
insight_logs – per-account system logs with time-bounded retention.

Import path convention::

    from insight_logs.accounts import Insight
    from insight_logs.logs import IterationControl, LogLevel, LogStore
    from insight_logs.adapters.redis import RedisLogBackend
    from insight_logs.kernel.errors import RejectedLevelError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
