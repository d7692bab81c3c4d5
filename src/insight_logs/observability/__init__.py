"""Observability – structured logging for the library itself."""

from insight_logs.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
