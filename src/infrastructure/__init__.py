"""Infrastructure layer - Adapters and infrastructure error types.

Structure:
- logging/: structlog console adapter implementing LoggerProtocol
- errors/: CacheError and friends, returned by cache adapters inside Result
- enums/: Infrastructure-specific error codes

Concrete cache stores are supplied by the host application.
"""
