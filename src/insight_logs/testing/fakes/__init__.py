"""Testing fakes – in-memory doubles for the log ports."""
from insight_logs.testing.fakes.backend import InMemoryLogBackend
from insight_logs.testing.fakes.clock import DEFAULT_START, FakeClock

__all__ = ["DEFAULT_START", "FakeClock", "InMemoryLogBackend"]
