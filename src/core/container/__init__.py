"""Container module - application-scoped dependency factories.

Only the logger lives here. Session persistence is built by
``src.session_cache.factory.get_session_persistence`` from whatever service
locator the host application uses.

    from src.core.container import get_logger
"""

from src.core.container.infrastructure import get_logger

__all__ = ["get_logger"]
