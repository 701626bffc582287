"""Cache protocol for domain layer.

Defines the key-value store that session persistence writes session data
into. Concrete stores (Redis, Memcached, in-process dicts) live outside this
package and satisfy the protocol structurally.

Architecture:
- Protocol-based - uses structural typing
- All operations return Result types
- Every write carries an optional TTL in seconds
"""

from typing import Any, Protocol

from src.core.errors import DomainError
from src.core.result import Result


class CacheProtocol(Protocol):
    """Cache protocol - what session persistence needs from a cache.

    Fail-open strategy: callers treat a Failure as a cache miss (reads) or a
    dropped write (writes) and keep serving the request. Adapters report
    failures as CacheError with ErrorCode.CACHE_UNAVAILABLE and an
    InfrastructureErrorCode naming the cause.
    """

    async def get_json(self, key: str) -> Result[Any, DomainError]:
        """Get JSON value from cache.

        Args:
            key: Cache key.

        Returns:
            Result with the decoded JSON value if found, None if not found,
            or CacheError.

        Example:
            result = await cache.get_json("session:9f86d081884c7d65...")
            match result:
                case Success(value=data) if isinstance(data, dict):
                    session_data = data
                case Success(value=None):
                    # Cache miss
                    pass
                case Failure(_):
                    # Fail open
                    pass
        """
        ...

    async def set_json(
        self,
        key: str,
        value: dict[str, Any],
        ttl: int | None = None,
    ) -> Result[None, DomainError]:
        """Set JSON value in cache.

        Args:
            key: Cache key.
            value: Dict to cache (will be JSON serialized).
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.

        Example:
            result = await cache.set_json(f"session:{session_id}", {"user_id": 42}, ttl=10800)
        """
        ...

    async def delete(self, key: str) -> Result[bool, DomainError]:
        """Delete key from cache.

        Args:
            key: Cache key to delete.

        Returns:
            Result with True if key was deleted, False if key didn't exist,
            or CacheError.
        """
        ...

    async def exists(self, key: str) -> Result[bool, DomainError]:
        """Check if key exists in cache.

        Args:
            key: Cache key to check.

        Returns:
            Result with True if key exists, False if not, or CacheError.
        """
        ...
