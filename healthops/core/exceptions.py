"""
Custom Exceptions - HealthOps Tender Scoring
healthops/core/exceptions.py

Exception classes raised by the scoring calculators.
"""
from typing import Any


class ScoringException(Exception):
    """Base exception for scoring operations."""

    pass


class InvalidInputException(ScoringException, ValueError):
    """Input value outside its declared domain."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}={value!r}: {reason}")


class InvalidParametersException(ScoringException, ValueError):
    """Scoring parameters are inconsistent."""

    def __init__(self, message: str = "Invalid scoring parameters"):
        self.message = message
        super().__init__(message)
