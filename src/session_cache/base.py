"""Session persistence interface.

Port between an HTTP session middleware and the store that keeps session
state between requests. The middleware calls
``initialize_session_from_request`` before the handler runs and
``persist_session`` on the way out.
"""

from typing import TYPE_CHECKING, Protocol

from starlette.requests import Request
from starlette.responses import Response

if TYPE_CHECKING:
    from src.session_cache.session import Session


class SessionPersistenceProtocol(Protocol):
    """Load and store sessions around a request/response cycle."""

    async def initialize_session_from_request(self, request: Request) -> "Session":
        """Build the session for an incoming request.

        Args:
            request: Incoming HTTP request (session id travels in a cookie).

        Returns:
            Session populated from storage, or an empty session.
        """
        ...

    async def persist_session(self, session: "Session", response: Response) -> Response:
        """Store session state and attach the session cookie to a response.

        Args:
            session: Session produced by initialize_session_from_request.
            response: Outgoing response to decorate.

        Returns:
            The response carrying cookie and cache headers.
        """
        ...

    async def initialize_id(self, session: "Session") -> "Session":
        """Ensure the session carries a usable identifier before the response.

        Args:
            session: Session that may lack an identifier or be regenerated.

        Returns:
            Session with a persisted-ready identifier.
        """
        ...
