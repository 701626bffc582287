"""Infrastructure-specific error codes.

Internal codes a cache adapter attaches to a CacheError next to the domain
ErrorCode. Session persistence logs them with every cache failure.
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    CACHE_CONNECTION_ERROR = "cache_connection_error"
