"""Pytest configuration and shared fakes.

Provides:
1. An in-memory cache implementing CacheProtocol (Result-returning, TTL aware)
2. A dict-backed service locator
3. A mock logger whose bind() returns itself
"""

import json
from typing import Any
from unittest.mock import MagicMock

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError


class InMemoryCache:
    """CacheProtocol fake backed by a dict.

    Stores serialized strings like a real cache would and records the TTL of
    every write. Operations listed in ``failing`` return a CacheError.
    """

    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int | None] = {}
        self.failing: set[str] = set()
        self.calls: list[tuple[str, str]] = []

    def _error(self, operation: str, key: str) -> Failure[CacheError]:
        return Failure(
            error=CacheError(
                code=ErrorCode.CACHE_UNAVAILABLE,
                infrastructure_code=InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                message=f"Cache {operation} failed for key '{key}'",
                details={"key": key},
            )
        )

    async def get_json(self, key: str) -> Result[Any, CacheError]:
        self.calls.append(("get_json", key))
        if "get" in self.failing:
            return self._error("get", key)
        raw = self.store.get(key)
        return Success(value=None if raw is None else json.loads(raw))

    async def set_json(
        self, key: str, value: dict[str, Any], ttl: int | None = None
    ) -> Result[None, CacheError]:
        self.calls.append(("set_json", key))
        if "set" in self.failing:
            return self._error("set", key)
        self.store[key] = json.dumps(value)
        self.ttls[key] = ttl
        return Success(value=None)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        self.calls.append(("delete", key))
        if "delete" in self.failing:
            return self._error("delete", key)
        existed = self.store.pop(key, None) is not None
        self.ttls.pop(key, None)
        return Success(value=existed)

    async def exists(self, key: str) -> Result[bool, CacheError]:
        self.calls.append(("exists", key))
        if "exists" in self.failing:
            return self._error("exists", key)
        return Success(value=key in self.store)


class DictServiceLocator:
    """Service locator backed by a dict; records every has/get query."""

    def __init__(self, services: dict[str, Any] | None = None) -> None:
        self.services = dict(services or {})
        self.queries: list[tuple[str, str]] = []

    def has(self, identifier: str) -> bool:
        self.queries.append(("has", identifier))
        return identifier in self.services

    def get(self, identifier: str) -> Any:
        self.queries.append(("get", identifier))
        return self.services[identifier]


@pytest.fixture
def cache() -> InMemoryCache:
    """Fresh in-memory cache per test."""
    return InMemoryCache()


@pytest.fixture
def locator() -> DictServiceLocator:
    """Empty service locator per test."""
    return DictServiceLocator()


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger mock; bind()/with_context() return the same mock."""
    logger = MagicMock(spec=LoggerProtocol)
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests through a real ASGI app"
    )
