"""Log store – per-account, self-expiring system log."""
from insight_logs.logs.codec import decode_context, encode_context
from insight_logs.logs.index import LogIndex
from insight_logs.logs.models import IterationControl, LogLevel, LogRecord
from insight_logs.logs.ports import LogBackend, LogTransaction
from insight_logs.logs.records import RecordPayload, RecordStore
from insight_logs.logs.rendering import render_message
from insight_logs.logs.store import ForEachCallback, LogStore

__all__ = [
    "ForEachCallback",
    "IterationControl",
    "LogBackend",
    "LogIndex",
    "LogLevel",
    "LogRecord",
    "LogStore",
    "LogTransaction",
    "RecordPayload",
    "RecordStore",
    "decode_context",
    "encode_context",
    "render_message",
]
