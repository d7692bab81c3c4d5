"""Application – use-case building blocks (framework-agnostic)."""

from insight_logs.application.pagination import PageRequest

__all__ = ["PageRequest"]
