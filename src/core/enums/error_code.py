"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and are carried by
DomainError values inside Result types, or logged alongside a failure.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Session errors
    SESSION_DATA_INVALID = "session_data_invalid"

    # Cache errors (surface of infrastructure failures)
    CACHE_UNAVAILABLE = "cache_unavailable"
