"""Result types for railway-oriented programming.

Cache operations can fail without that failure being exceptional for the
caller (a missing or unreachable cache should degrade a session, not crash a
request). The Result pattern makes those failures explicit values.

Usage:
    result = await cache.get_json(session_id)
    match result:
        case Success(value=data) if data is not None:
            session = Session(data, session_id)
        case Success(value=None):
            session = Session({}, session_id)
        case Failure(error=err):
            logger.warning("Session cache read failed", error_code=err.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
