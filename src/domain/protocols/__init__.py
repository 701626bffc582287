"""Domain protocols (ports) package.

Protocol definitions the session persistence layer depends on. Adapters
implement these protocols without inheritance.

Usage:
    from src.domain.protocols import CacheProtocol, ServiceLocatorProtocol
"""

from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.service_locator_protocol import ServiceLocatorProtocol

__all__ = [
    "CacheProtocol",
    "LoggerProtocol",
    "ServiceLocatorProtocol",
]
