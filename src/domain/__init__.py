"""Domain layer - ports only.

This layer holds the protocols (ports) session persistence depends on. It
has NO dependencies on any framework or infrastructure - it is pure Python.

Structure:
- protocols/: Cache, logger and service-locator interfaces
"""
