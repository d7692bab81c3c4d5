"""Testing – fakes for exercising log stores without Redis."""
from insight_logs.testing.fakes import FakeClock, InMemoryLogBackend

__all__ = ["FakeClock", "InMemoryLogBackend"]
