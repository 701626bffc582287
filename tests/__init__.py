"""Test suite for the session cache package.

Test structure:
- unit/: Unit tests - components in isolation with fakes and mocks
- integration/: Integration tests - full request/response round trips
"""
