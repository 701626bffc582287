"""Cache-backed session persistence.

Stores session data in ANY cache implementing CacheProtocol under
``session:{session_id}`` keys, and manages the session cookie plus the
cache-limiter headers on the way out.

Request/response cycle:
    1. ``initialize_session_from_request`` reads the session cookie and loads
       the cached data. The cookie's id is kept only when it is well formed
       and names a stored session; anything else yields an empty session
       without an id.
    2. The handler reads and mutates the Session.
    3. ``persist_session`` issues a fresh identifier when needed, writes the
       data with a TTL, sets the cookie and adds cache headers.

Identifiers are only ever issued by the server, so a client cannot choose
the key its session is stored under.

Cache failures never break a request: reads degrade to an empty session and
writes are logged and dropped.
"""

import re
import secrets
from datetime import UTC, datetime, timedelta
from typing import Any, Final

from starlette.requests import Request
from starlette.responses import Response

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Success
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.errors import CacheError
from src.session_cache.http import (
    SUPPORTED_CACHE_LIMITERS,
    generate_cache_headers,
    response_has_cache_headers,
)
from src.session_cache.models.config import SessionCacheConfig
from src.session_cache.session import SESSION_AGE_KEY, Session

SUPPORTED_SAME_SITE = ("lax", "strict", "none")
SESSION_KEY_PREFIX: Final[str] = "session:"
SESSION_ID_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9a-f]{32}")


def generate_session_id() -> str:
    """Return a new random session identifier (32 hex characters)."""
    return secrets.token_hex(16)


def is_valid_session_id(session_id: str) -> bool:
    """Return True if ``session_id`` looks like an id issued by this package."""
    return SESSION_ID_PATTERN.fullmatch(session_id) is not None


def mask_session_id(session_id: str) -> str:
    """Shorten a session identifier for logging."""
    if len(session_id) <= 8:
        return "*" * len(session_id)
    return f"{session_id[:8]}***"


def _error_context(error: DomainError) -> dict[str, Any]:
    """Structured log fields for a cache failure."""
    context: dict[str, Any] = {
        "error_code": error.code.value,
        "error_message": error.message,
    }
    if isinstance(error, CacheError) and error.infrastructure_code is not None:
        context["infrastructure_code"] = error.infrastructure_code.value
    return context


class CacheSessionPersistence:
    """Session persistence on top of a key-value cache.

    The cache reference is shared with the rest of the application and is
    never replaced. Configuration is a frozen snapshot taken at construction.

    Example:
        ```python
        persistence = CacheSessionPersistence(cache, SessionCacheConfig())

        session = await persistence.initialize_session_from_request(request)
        session.set("user_id", 42)
        response = await persistence.persist_session(session, response)
        ```
    """

    def __init__(
        self,
        cache: CacheProtocol,
        config: SessionCacheConfig,
        *,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Initialize with the application's cache and resolved settings.

        Args:
            cache: Any client implementing CacheProtocol.
            config: Resolved cookie/cache settings (not re-validated).
            logger: Structured logger (default: application logger).
        """
        if logger is None:
            from src.core.container import get_logger

            logger = get_logger()

        self._cache = cache
        self._config = config
        self._logger = logger.bind(component="session_cache")

        if config.cache_limiter not in SUPPORTED_CACHE_LIMITERS:
            self._logger.warning(
                "Unsupported cache limiter, nocache headers will be sent",
                cache_limiter=config.cache_limiter,
                supported=list(SUPPORTED_CACHE_LIMITERS),
            )
        if str(config.cookie_same_site).lower() not in SUPPORTED_SAME_SITE:
            self._logger.warning(
                "Unsupported SameSite value, attribute will be omitted",
                cookie_same_site=config.cookie_same_site,
            )
        elif str(config.cookie_same_site).lower() == "none" and not config.cookie_secure:
            self._logger.warning(
                "SameSite=None without Secure, browsers will reject the cookie",
                cookie_same_site=config.cookie_same_site,
                cookie_secure=config.cookie_secure,
            )

    # ------------------------------------------------------------------
    # Read-only configuration accessors
    # ------------------------------------------------------------------

    @property
    def cache(self) -> CacheProtocol:
        return self._cache

    @property
    def config(self) -> SessionCacheConfig:
        return self._config

    @property
    def cookie_name(self) -> str:
        return self._config.cookie_name

    @property
    def cookie_path(self) -> str:
        return self._config.cookie_path

    @property
    def cookie_domain(self) -> str | None:
        return self._config.cookie_domain

    @property
    def cookie_secure(self) -> bool:
        return self._config.cookie_secure

    @property
    def cookie_http_only(self) -> bool:
        return self._config.cookie_http_only

    @property
    def cookie_same_site(self) -> str:
        return self._config.cookie_same_site

    @property
    def cache_limiter(self) -> str:
        return self._config.cache_limiter

    @property
    def cache_expire(self) -> int:
        return self._config.cache_expire

    @property
    def last_modified(self) -> str:
        return self._config.last_modified

    @property
    def persistent(self) -> bool:
        return self._config.persistent

    # ------------------------------------------------------------------
    # Request/response cycle
    # ------------------------------------------------------------------

    async def initialize_session_from_request(self, request: Request) -> Session:
        """Load the session named by the request's session cookie.

        The cookie's identifier is kept only when it has the issued format
        and resolves to a stored session. A malformed cookie, a miss or a
        cache failure yields an empty session without an identifier, so any
        data written afterwards gets a freshly issued one.

        Args:
            request: Incoming request.

        Returns:
            Session with cached data, or an empty session.
        """
        session_id = request.cookies.get(self._config.cookie_name, "")
        if not session_id:
            return Session({})

        if not is_valid_session_id(session_id):
            self._logger.warning(
                "Ignoring malformed session cookie",
                cookie_name=self._config.cookie_name,
                cookie_length=len(session_id),
            )
            return Session({})

        data = await self._load_session_data(session_id)
        if data is None:
            return Session({})
        return Session(data, session_id)

    async def initialize_id(self, session: Session) -> Session:
        """Give the session its final identifier ahead of persistence.

        Lets handlers learn the identifier (e.g. to hand it to a client that
        cannot read cookies) before the response is produced.

        Args:
            session: Current session.

        Returns:
            The same session if its identifier is already final, otherwise a
            copy carrying a newly issued identifier.
        """
        if session.id and not session.is_regenerated:
            return session

        session_id = await self._regenerate_session_id(session.id)
        return session.with_id(session_id)

    async def persist_session(self, session: Session, response: Response) -> Response:
        """Write session data and attach cookie and cache headers.

        Args:
            session: Session to store.
            response: Response to decorate (mutated in place).

        Returns:
            The response, for chaining.
        """
        session_id = session.id

        # New session with nothing worth storing: no cookie, no cache entry.
        if not session_id and (not session.to_dict() or not session.has_changed):
            return response

        if not session_id or session.is_regenerated:
            session_id = await self._regenerate_session_id(session_id)

        duration = self._persistence_duration(session)
        await self._persist_session_data(
            session_id,
            session.to_dict(),
            ttl=duration or self._config.cache_expire or None,
        )

        self._set_session_cookie(response, session_id, duration)

        if response_has_cache_headers(response.headers):
            return response

        for name, value in generate_cache_headers(
            self._config.cache_limiter,
            self._config.cache_expire,
            self._config.last_modified,
        ).items():
            response.headers[name] = value

        return response

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _session_key(self, session_id: str) -> str:
        """Cache key for session data (e.g. ``session:9f86d081...``)."""
        return f"{SESSION_KEY_PREFIX}{session_id}"

    async def _load_session_data(self, session_id: str) -> dict[str, Any] | None:
        """Return the stored data, or None when the id names no usable session."""
        result = await self._cache.get_json(self._session_key(session_id))

        match result:
            case Success(value=None):
                self._logger.debug(
                    "Session not found",
                    session_id=mask_session_id(session_id),
                )
                return None
            case Success(value=data) if isinstance(data, dict):
                return data
            case Success(value=data):
                self._logger.warning(
                    "Discarding non-mapping session payload",
                    session_id=mask_session_id(session_id),
                    error_code=ErrorCode.SESSION_DATA_INVALID.value,
                    payload_type=type(data).__name__,
                )
                return None
            case Failure(error=err):
                self._logger.warning(
                    "Cache error loading session",
                    session_id=mask_session_id(session_id),
                    **_error_context(err),
                )
                return None
            case _:
                return None

    async def _persist_session_data(
        self, session_id: str, data: dict[str, Any], *, ttl: int | None
    ) -> None:
        result = await self._cache.set_json(
            self._session_key(session_id), data, ttl=ttl
        )

        if isinstance(result, Failure):
            self._logger.error(
                "Failed to store session in cache",
                session_id=mask_session_id(session_id),
                ttl=ttl,
                **_error_context(result.error),
            )
            return

        self._logger.debug(
            "Session stored",
            session_id=mask_session_id(session_id),
            ttl=ttl,
        )

    async def _regenerate_session_id(self, previous_id: str) -> str:
        """Drop the entry under ``previous_id`` (if any) and issue a new id."""
        if previous_id:
            previous_key = self._session_key(previous_id)
            match await self._cache.exists(previous_key):
                case Success(value=True):
                    deleted = await self._cache.delete(previous_key)
                    if isinstance(deleted, Failure):
                        self._logger.warning(
                            "Failed to delete regenerated session",
                            session_id=mask_session_id(previous_id),
                            **_error_context(deleted.error),
                        )
                case Failure(error=err):
                    self._logger.warning(
                        "Cache error checking regenerated session",
                        session_id=mask_session_id(previous_id),
                        **_error_context(err),
                    )

        session_id = generate_session_id()
        self._logger.debug(
            "Session id issued",
            session_id=mask_session_id(session_id),
            previous_session_id=mask_session_id(previous_id) if previous_id else None,
        )
        return session_id

    def _persistence_duration(self, session: Session) -> int:
        """Seconds the cookie and cache entry should outlive the request.

        A per-session lifetime wins over the ``persistent`` flag. Zero means
        a browser-session cookie.
        """
        duration = self._config.cache_expire if self._config.persistent else 0
        if session.has(SESSION_AGE_KEY):
            duration = session.session_lifetime
        return max(duration, 0)

    def _set_session_cookie(
        self, response: Response, session_id: str, duration: int
    ) -> None:
        same_site: str | None = self._config.cookie_same_site
        if str(same_site).lower() not in SUPPORTED_SAME_SITE:
            same_site = None

        expires: datetime | None = None
        max_age: int | None = None
        if duration > 0:
            expires = datetime.now(UTC) + timedelta(seconds=duration)
            max_age = duration

        response.set_cookie(
            self._config.cookie_name,
            session_id,
            max_age=max_age,
            expires=expires,
            path=self._config.cookie_path,
            domain=self._config.cookie_domain,
            secure=self._config.cookie_secure,
            httponly=self._config.cookie_http_only,
            samesite=same_site,  # type: ignore[arg-type]
        )
