#!/usr/bin/env python3
"""
Custom exceptions for the readiness engine.

Missing or partial business data is never an error; it is scored as an
absent value. These exceptions cover structurally invalid input and bad
configuration only.
"""


class EngineException(Exception):
    """Base exception for readiness engine errors."""
    pass


class InputValidationError(EngineException, ValueError):
    """Raised when an input record has the wrong structure (e.g. not a mapping)."""
    pass


class ConfigurationError(EngineException):
    """Raised when the engine configuration is invalid."""
    pass
