"""Application environment types.

Used by Settings and the logger factory to pick environment-specific
behavior (human-readable logs in development, JSON logs in testing and CI).
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
