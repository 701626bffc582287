"""Session cache configuration model.

SessionCacheConfig is the immutable snapshot of cookie and cache-limiter
settings a CacheSessionPersistence is built with. Every field has a default
so a host application with no ``session_cache`` configuration section still
gets a working persistence layer.

Values are NOT validated here. ``cookie_same_site`` and ``cache_expire``
pass through exactly as configured; the factory documents that choice.
"""

import time
from dataclasses import dataclass, field, fields
from typing import Any, Final, Literal

from src.session_cache.http import format_http_date

DEFAULT_COOKIE_NAME: Final[str] = "PHPSESSION"
DEFAULT_COOKIE_PATH: Final[str] = "/"
DEFAULT_CACHE_LIMITER: Final[str] = "nocache"
DEFAULT_CACHE_EXPIRE: Final[int] = 10800  # 3 hours

SameSite = Literal["Lax", "Strict", "None"]


def _current_http_date() -> str:
    return format_http_date(time.time())


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionCacheConfig:
    """Cookie and cache settings for cache-backed session persistence.

    Attributes:
        cookie_name: Name of the cookie carrying the session id.
        cookie_path: Cookie Path attribute.
        cookie_domain: Cookie Domain attribute (None = host-only cookie).
        cookie_secure: Cookie Secure attribute.
        cookie_http_only: Cookie HttpOnly attribute.
        cookie_same_site: Cookie SameSite attribute ("Lax", "Strict", "None").
        cache_limiter: nocache, public, private or private_no_expire.
        cache_expire: Cache lifetime in seconds; also the session entry TTL.
        last_modified: HTTP-date used for the Last-Modified header.
        persistent: Whether the session cookie outlives the browser session.

    Example:
        >>> config = SessionCacheConfig(cookie_name="APPSESSION", persistent=True)
        >>> config.cache_expire
        10800
    """

    cookie_name: str = DEFAULT_COOKIE_NAME
    cookie_path: str = DEFAULT_COOKIE_PATH
    cookie_domain: str | None = None
    cookie_secure: bool = False
    cookie_http_only: bool = False
    cookie_same_site: SameSite = "Lax"
    cache_limiter: str = DEFAULT_CACHE_LIMITER
    cache_expire: int = DEFAULT_CACHE_EXPIRE
    last_modified: str = field(default_factory=_current_http_date)
    persistent: bool = False

    @classmethod
    def from_mapping(cls, options: dict[str, Any]) -> "SessionCacheConfig":
        """Build config from a configuration section.

        Keys that are not config fields are ignored. Missing keys take their
        defaults. An integer or float ``last_modified`` is treated as a unix
        timestamp and formatted as an HTTP-date.

        Args:
            options: Configuration section (e.g. ``config["session_cache"]``).

        Returns:
            SessionCacheConfig with supplied values applied.
        """
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in options.items() if key in known}

        last_modified = values.get("last_modified")
        if isinstance(last_modified, (int, float)) and not isinstance(
            last_modified, bool
        ):
            values["last_modified"] = format_http_date(last_modified)

        return cls(**values)
