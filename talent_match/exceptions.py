#!/usr/bin/env python3
"""
Custom exceptions for the matching engine.
"""


class MatchingException(Exception):
    """Base exception for matching engine errors."""
    pass


class ValidationError(MatchingException):
    """Raised when a candidate or requirement record is not well-formed."""
    pass


class ConfigurationError(MatchingException):
    """Raised when engine configuration is invalid."""
    pass
