"""
Test package for talent_match.

Shared record builders live in tests.fixtures.matching_fixtures; pytest
markers and fixtures are registered in tests/conftest.py.
"""
