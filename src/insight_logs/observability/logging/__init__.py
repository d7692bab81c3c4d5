"""Observability – structured logging helpers."""
from insight_logs.observability.logging.factory import JsonLoggerFactory
from insight_logs.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
