"""
Core Package - HealthOps Tender Scoring
healthops/core/__init__.py

Core infrastructure: exceptions, logging, dependencies.
"""

from healthops.core.exceptions import (
    InvalidInputException,
    InvalidParametersException,
    ScoringException,
)

__all__ = [
    "InvalidInputException",
    "InvalidParametersException",
    "ScoringException",
]
