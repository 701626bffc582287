"""Session Cache Package.

Cache-backed HTTP session persistence: session state lives in any key-value
cache implementing CacheProtocol, keyed by the session identifier carried in
a cookie.

Key Features:
    - Cache-agnostic storage (Redis, Memcached, ...) with per-entry TTL
    - Session id regeneration with removal of the previous entry
    - Persistent cookies (global flag or per-session lifetime)
    - PHP-style cache limiter headers (nocache, public, private, private_no_expire)
    - Factory resolving configuration and cache from a service locator

Usage:
    ```python
    from src.session_cache import get_session_persistence

    persistence = get_session_persistence(container)

    session = await persistence.initialize_session_from_request(request)
    session.set("user_id", 42)
    response = await persistence.persist_session(session, response)
    ```
"""

from src.session_cache.base import SessionPersistenceProtocol
from src.session_cache.errors import MissingDependencyError, SessionCacheError
from src.session_cache.factory import (
    CACHE_ITEM_POOL_SERVICE,
    CONFIG_NAMESPACE,
    get_session_persistence,
)
from src.session_cache.models.config import SessionCacheConfig
from src.session_cache.persistence import CacheSessionPersistence
from src.session_cache.session import SESSION_AGE_KEY, Session

__all__ = [
    "CACHE_ITEM_POOL_SERVICE",
    "CONFIG_NAMESPACE",
    "SESSION_AGE_KEY",
    "CacheSessionPersistence",
    "MissingDependencyError",
    "Session",
    "SessionCacheConfig",
    "SessionCacheError",
    "SessionPersistenceProtocol",
    "get_session_persistence",
]
