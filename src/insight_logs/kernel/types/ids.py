"""Short random identifiers for log records."""
from __future__ import annotations

import random
import string

LOG_ID_ALPHABET = string.digits + string.ascii_lowercase
LOG_ID_LENGTH = 12


def generate_id(alphabet: str = LOG_ID_ALPHABET, length: int = LOG_ID_LENGTH) -> str:
    """Return *length* characters sampled uniformly from *alphabet*.

    Uniqueness is not guaranteed here; callers check the store and retry.
    """
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    if length < 1:
        raise ValueError("length must be >= 1")
    return "".join(random.choices(alphabet, k=length))  # noqa: S311


__all__ = ["LOG_ID_ALPHABET", "LOG_ID_LENGTH", "generate_id"]
