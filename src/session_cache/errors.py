"""Session cache exceptions.

Cache failures during a request travel as ``Failure`` values and are
tolerated. The exceptions here are for composition-time problems, where
failing fast beats serving requests with a persistence layer that cannot
store anything.
"""


class SessionCacheError(Exception):
    """Base exception for the session cache package."""

    pass


class MissingDependencyError(SessionCacheError):
    """Raised when a required service cannot be resolved.

    Attributes:
        identifier: Service identifier that the locator could not resolve.
    """

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(
            f"Cannot create session persistence: cache service "
            f"'{identifier}' is not registered in the service container"
        )
