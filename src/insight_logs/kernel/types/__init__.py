"""Kernel types – identifier generation."""
from insight_logs.kernel.types.ids import LOG_ID_ALPHABET, LOG_ID_LENGTH, generate_id

__all__ = ["LOG_ID_ALPHABET", "LOG_ID_LENGTH", "generate_id"]
