"""Session cache configuration models."""

from src.session_cache.models.config import SessionCacheConfig

__all__ = ["SessionCacheConfig"]
