"""Application pagination – PageRequest."""
from __future__ import annotations

import dataclasses

from insight_logs.kernel.errors import ValidationError


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters (1-based page numbers)."""
    page: int = 1
    size: int = 100

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError("page must be >= 1", errors=[{"field": "page", "value": self.page}])
        if self.size < 1:
            raise ValidationError("size must be >= 1", errors=[{"field": "size", "value": self.size}])

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


__all__ = ["PageRequest"]
