"""HTTP date formatting and cache-limiter headers.

Cache limiters follow the classic PHP ``session.cache_limiter`` semantics:

    nocache            Expires in the past, no-store/no-cache, Pragma no-cache
    public             Expires = now + cache_expire, public max-age
    private            Expires in the past, private max-age
    private_no_expire  private max-age, no Expires

All dates use the RFC 7231 IMF-fixdate layout, e.g.
``Sun, 06 Nov 1994 08:49:37 GMT``.
"""

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from email.utils import format_datetime
from typing import Final

CACHE_PAST_DATE: Final[str] = "Thu, 19 Nov 1981 08:52:00 GMT"

SUPPORTED_CACHE_LIMITERS: Final[tuple[str, ...]] = (
    "nocache",
    "public",
    "private",
    "private_no_expire",
)

CACHE_HEADERS: Final[tuple[str, ...]] = (
    "Expires",
    "Last-Modified",
    "Cache-Control",
    "Pragma",
)


def format_http_date(value: float | datetime) -> str:
    """Format a unix timestamp or datetime as an HTTP-date (always GMT).

    Naive datetimes are taken to be UTC.

    Args:
        value: Unix timestamp in seconds, or a datetime.

    Returns:
        str: HTTP-date string.
    """
    if isinstance(value, datetime):
        moment = value if value.tzinfo else value.replace(tzinfo=UTC)
    else:
        moment = datetime.fromtimestamp(value, tz=UTC)
    return format_datetime(moment.astimezone(UTC), usegmt=True)


def generate_cache_headers(
    cache_limiter: str,
    cache_expire: int,
    last_modified: str,
    *,
    now: datetime | None = None,
) -> dict[str, str]:
    """Build the response headers for a cache limiter.

    Unsupported limiters fall back to ``nocache``.

    Args:
        cache_limiter: One of SUPPORTED_CACHE_LIMITERS.
        cache_expire: Cache lifetime in seconds (max-age).
        last_modified: Pre-formatted HTTP-date for Last-Modified.
        now: Reference time for the ``public`` Expires header.

    Returns:
        dict[str, str]: Header name to value.
    """
    if cache_limiter == "public":
        current = now or datetime.now(UTC)
        return {
            "Expires": format_http_date(current + timedelta(seconds=cache_expire)),
            "Cache-Control": f"public, max-age={cache_expire}",
            "Last-Modified": last_modified,
        }

    if cache_limiter == "private":
        return {
            "Expires": CACHE_PAST_DATE,
            "Cache-Control": f"private, max-age={cache_expire}",
            "Last-Modified": last_modified,
        }

    if cache_limiter == "private_no_expire":
        return {
            "Cache-Control": f"private, max-age={cache_expire}",
            "Last-Modified": last_modified,
        }

    return {
        "Expires": CACHE_PAST_DATE,
        "Cache-Control": "no-store, no-cache, must-revalidate",
        "Pragma": "no-cache",
    }


def response_has_cache_headers(headers: Mapping[str, str]) -> bool:
    """Return True if any cache-related header is already present.

    Args:
        headers: Response headers (Starlette headers are case-insensitive).
    """
    return any(name in headers for name in CACHE_HEADERS)
