"""Session persistence factory for dependency injection.

Builds a CacheSessionPersistence from a host application's service locator:
the ``"config"`` service supplies the ``session_cache`` configuration
section and the cache service is resolved by identifier.

Configuration shape (every key optional):

    {
        "session_cache": {
            "cache_item_pool_service": "app.cache",
            "cookie_name": "PHPSESSION",
            "cookie_domain": None,
            "cookie_path": "/",
            "cookie_secure": False,
            "cookie_http_only": False,
            "cookie_same_site": "Lax",
            "cache_limiter": "nocache",
            "cache_expire": 10800,
            "last_modified": 1700000000,  # unix timestamp
            "persistent": False,
        }
    }

Usage:
    from src.session_cache.factory import get_session_persistence

    persistence = get_session_persistence(container)
"""

from typing import Any, Final

from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.service_locator_protocol import ServiceLocatorProtocol
from src.session_cache.errors import MissingDependencyError
from src.session_cache.models.config import SessionCacheConfig
from src.session_cache.persistence import CacheSessionPersistence

CONFIG_SERVICE: Final[str] = "config"
CONFIG_NAMESPACE: Final[str] = "session_cache"
CACHE_SERVICE_KEY: Final[str] = "cache_item_pool_service"

# Canonical identifier of the cache service: the protocol's dotted path.
CACHE_ITEM_POOL_SERVICE: Final[str] = (
    f"{CacheProtocol.__module__}.{CacheProtocol.__qualname__}"
)


def get_session_persistence(
    container: ServiceLocatorProtocol,
    *,
    logger: LoggerProtocol | None = None,
) -> CacheSessionPersistence:
    """Create a configured CacheSessionPersistence.

    Locator queries are issued in a fixed order: ``has("config")``,
    ``get("config")`` (when present), ``has(<cache id>)``, ``get(<cache id>)``
    (when present). Configuration values are applied verbatim; missing keys
    take SessionCacheConfig defaults.

    Args:
        container: Service locator exposing ``has``/``get``.
        logger: Logger passed to the persistence (default: application logger).

    Returns:
        Fully configured CacheSessionPersistence instance.

    Raises:
        MissingDependencyError: If the cache service (default or the one named
            by ``cache_item_pool_service``) is not registered.

    Example:
        >>> persistence = get_session_persistence(container)
        >>> persistence.cookie_name
        'PHPSESSION'
    """
    if logger is None:
        from src.core.container import get_logger

        logger = get_logger()

    options = _get_options(container)

    cache_service = options.get(CACHE_SERVICE_KEY, CACHE_ITEM_POOL_SERVICE)
    cache = _get_cache(container, cache_service)

    config = SessionCacheConfig.from_mapping(options)

    logger.bind(component="session_cache").info(
        "Session persistence configured",
        cache_service=cache_service,
        cookie_name=config.cookie_name,
        cache_limiter=config.cache_limiter,
        cache_expire=config.cache_expire,
        persistent=config.persistent,
    )
    return CacheSessionPersistence(cache, config, logger=logger)


def _get_options(container: ServiceLocatorProtocol) -> dict[str, Any]:
    """Return the ``session_cache`` section, or an empty mapping.

    Args:
        container: Service locator.

    Returns:
        Configuration section for session persistence.
    """
    if not container.has(CONFIG_SERVICE):
        return {}

    config = container.get(CONFIG_SERVICE) or {}
    return dict(config.get(CONFIG_NAMESPACE) or {})


def _get_cache(container: ServiceLocatorProtocol, identifier: str) -> CacheProtocol:
    """Resolve the cache service.

    Args:
        container: Service locator.
        identifier: Cache service identifier.

    Returns:
        Cache implementing CacheProtocol.

    Raises:
        MissingDependencyError: If ``identifier`` is not registered.
    """
    if not container.has(identifier):
        raise MissingDependencyError(identifier)
    return container.get(identifier)
