"""Kernel time – Clock port + implementations."""
from insight_logs.kernel.time.clock import Clock, FrozenClock, SystemClock, epoch_seconds

__all__ = ["Clock", "FrozenClock", "SystemClock", "epoch_seconds"]
