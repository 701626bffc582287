"""Service locator protocol.

The minimal lookup capability the session persistence factory consumes from
a host application's dependency-injection container. Identifiers are plain
strings; ``"config"`` conventionally resolves to the application's nested
configuration mapping.
"""

from typing import Any, Protocol


class ServiceLocatorProtocol(Protocol):
    """Lookup of constructed services by string identifier."""

    def has(self, identifier: str) -> bool:
        """Return True when ``identifier`` can be resolved."""
        ...

    def get(self, identifier: str) -> Any:
        """Return the service registered under ``identifier``.

        Callers check ``has()`` first; behavior for unknown identifiers is
        left to the implementation.
        """
        ...
