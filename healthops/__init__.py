"""HealthOps tender viability scoring engine."""

__version__ = "3.0.0"
