"""Per-request session container.

A Session holds the data loaded for one request plus the identifier it was
loaded under. Persistence compares the current data with the data the
session was created with to decide whether anything needs to be written,
and inspects the regeneration flag to decide whether a new identifier must
be issued.

Values are normalized through a JSON round trip on ``set()`` so that what a
handler reads back during the request is exactly what the next request will
read from the cache.
"""

import copy
import json
from typing import Any, Final

SESSION_AGE_KEY: Final[str] = "__SESSION_AGE__"


def _serializable(value: Any) -> Any:
    """Return ``value`` as it will look after a cache round trip.

    Raises:
        TypeError: If the value cannot be JSON encoded.
    """
    return json.loads(json.dumps(value))


class Session:
    """Session data for a single request.

    Attributes:
        id: Session identifier ("" when the client has none yet).
    """

    def __init__(self, data: dict[str, Any], session_id: str = "") -> None:
        """Initialize session.

        Args:
            data: Session data as loaded from storage.
            session_id: Session identifier; empty string for a brand-new session.
        """
        self._id = session_id
        self._data = copy.deepcopy(data)
        self._original_data = copy.deepcopy(data)
        self._is_regenerated = False

    @property
    def id(self) -> str:
        return self._id

    @property
    def is_regenerated(self) -> bool:
        return self._is_regenerated

    @property
    def has_changed(self) -> bool:
        """True when regenerated or when data differs from what was loaded."""
        if self._is_regenerated:
            return True
        return self._data != self._original_data

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)

    def get(self, name: str, default: Any = None) -> Any:
        return self._data.get(name, default)

    def has(self, name: str) -> bool:
        return name in self._data

    def set(self, name: str, value: Any) -> None:
        """Store a value under ``name``.

        Raises:
            TypeError: If the value is not JSON serializable.
        """
        self._data[name] = _serializable(value)

    def unset(self, name: str) -> None:
        self._data.pop(name, None)

    def clear(self) -> None:
        self._data = {}

    def regenerate(self) -> "Session":
        """Return a copy flagged for a new identifier on persistence.

        The current instance is left untouched so callers must use the
        returned session from here on.
        """
        session = self._copy(self._id)
        session._is_regenerated = True
        return session

    def with_id(self, session_id: str) -> "Session":
        """Return a copy carrying ``session_id``.

        The copy is not flagged as regenerated: the new identifier is final.
        """
        session = self._copy(session_id)
        session._is_regenerated = False
        return session

    def persist_session_for(self, duration: int) -> None:
        """Request that the session cookie and cache entry live ``duration`` seconds."""
        self.set(SESSION_AGE_KEY, duration)

    @property
    def session_lifetime(self) -> int:
        """Requested lifetime in seconds, 0 when none was requested."""
        return int(self._data.get(SESSION_AGE_KEY, 0))

    def _copy(self, session_id: str) -> "Session":
        session = Session.__new__(Session)
        session._id = session_id
        session._data = copy.deepcopy(self._data)
        session._original_data = copy.deepcopy(self._original_data)
        session._is_regenerated = self._is_regenerated
        return session

    def __repr__(self) -> str:
        return f"Session(id={self._id!r}, keys={sorted(self._data)!r})"
