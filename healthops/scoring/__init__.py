"""
scoring/ - Tender Viability Scoring Engine

Modules:
    utils.py              - Decimal utilities
    parameters.py         - ScoringParameters (tunable constants)
    tender_scorer.py      - Tender scoring: margin, capacity flag, decision
    capacity_planner.py   - Staff capacity vs. tender demand
    portfolio.py          - Batch scoring with per-tender failures
"""
from healthops.scoring.capacity_planner import (
    CapacityPlanningCalculator,
    CapacityPlanningResult,
    plan_capacity,
)
from healthops.scoring.parameters import DEFAULT_PARAMETERS, ScoringParameters
from healthops.scoring.portfolio import PortfolioEntry, PortfolioResult, score_portfolio
from healthops.scoring.tender_scorer import (
    ScoringResult,
    TenderScoringCalculator,
    score,
    validate_tender,
)

__all__ = [
    "CapacityPlanningCalculator",
    "CapacityPlanningResult",
    "DEFAULT_PARAMETERS",
    "PortfolioEntry",
    "PortfolioResult",
    "ScoringParameters",
    "ScoringResult",
    "TenderScoringCalculator",
    "plan_capacity",
    "score",
    "score_portfolio",
    "validate_tender",
]
