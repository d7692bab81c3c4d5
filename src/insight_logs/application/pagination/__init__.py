"""Application pagination – page request primitive."""
from insight_logs.application.pagination.page_request import PageRequest

__all__ = ["PageRequest"]
