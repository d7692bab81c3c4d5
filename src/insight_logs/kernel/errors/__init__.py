"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    InsightError
    ├── DomainError                      (domain.py)
    │   ├── ValidationError
    │   └── RejectedLevelError
    ├── InfrastructureError              (infrastructure.py)
    │   ├── BackingStoreUnavailableError
    │   └── SerializationError
    └── ConfigError                      (insight_logs.config.errors)
"""

from insight_logs.kernel.errors.base import InsightError
from insight_logs.kernel.errors.domain import (
    DomainError,
    RejectedLevelError,
    ValidationError,
)
from insight_logs.kernel.errors.infrastructure import (
    BackingStoreUnavailableError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "BackingStoreUnavailableError",
    "DomainError",
    "InfrastructureError",
    "InsightError",
    "RejectedLevelError",
    "SerializationError",
    "ValidationError",
]
