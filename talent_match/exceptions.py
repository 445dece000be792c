#!/usr/bin/env python3
"""
Custom exceptions for the matching engine.
"""


class EngineException(Exception):
    """Base exception for engine errors."""
    pass


class InvalidInputError(EngineException, ValueError):
    """Raised when input is structurally impossible (inverted range, negative years)."""
    pass


class ConfigurationError(EngineException):
    """Raised when configuration cannot be loaded or is inconsistent."""
    pass
