"""
Dependencies - HealthOps Tender Scoring
healthops/core/dependencies.py

FastAPI dependency injection for the calculators.
"""

from functools import lru_cache

from healthops.config import get_settings
from healthops.scoring.capacity_planner import CapacityPlanningCalculator
from healthops.scoring.parameters import ScoringParameters
from healthops.scoring.tender_scorer import TenderScoringCalculator


@lru_cache()
def get_scoring_parameters() -> ScoringParameters:
    """Get cached ScoringParameters built from settings."""
    return ScoringParameters.from_settings(get_settings())


def get_tender_calculator() -> TenderScoringCalculator:
    """Get a TenderScoringCalculator bound to the active parameters."""
    return TenderScoringCalculator(get_scoring_parameters())


def get_capacity_calculator() -> CapacityPlanningCalculator:
    """Get a CapacityPlanningCalculator bound to the active parameters."""
    return CapacityPlanningCalculator(get_scoring_parameters())
