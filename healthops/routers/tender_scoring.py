"""
routers/tender_scoring.py - Tender Scoring Endpoints

Endpoints:
  GET  /api/v1/scoring/parameters        - Active scoring parameters
  POST /api/v1/scoring/tender            - Score one tender
  POST /api/v1/scoring/tender/portfolio  - Score a batch of tenders
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from datetime import datetime, timezone
import logging
import time

from healthops.config import describe_sla_risk
from healthops.core.dependencies import get_scoring_parameters, get_tender_calculator
from healthops.models.tender import TenderRecord
from healthops.scoring.parameters import ScoringParameters
from healthops.scoring.portfolio import score_portfolio
from healthops.scoring.tender_scorer import ScoringResult, TenderScoringCalculator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/scoring", tags=["Tender Scoring"])


# =====================================================================
# Request / Response Models
# =====================================================================

class TenderScoringRequest(BaseModel):
    tender: TenderRecord
    staff_capacity_units: int = Field(..., description="Available full-time professionals")


class PortfolioScoringRequest(BaseModel):
    tenders: List[TenderRecord]
    staff_capacity_units: int


class TenderScoreBreakdown(BaseModel):
    regular_fraction: float
    urgent_fraction: float
    holiday_fraction: float
    cost_ratio: float


class TenderScoreResponse(BaseModel):
    """Single tender scoring response."""
    tender_id: Optional[str] = None
    status: str  # "success" or "failed"

    risk_score: Optional[int] = None
    risk_level: Optional[str] = None
    sla_risk_description: Optional[str] = None
    projected_revenue: Optional[float] = None
    projected_cost: Optional[float] = None
    real_margin_pct: Optional[float] = None
    margin_level: Optional[str] = None
    decision: Optional[str] = None
    decision_label: Optional[str] = None
    is_over_capacity: Optional[bool] = None
    breakdown: Optional[TenderScoreBreakdown] = None

    error: Optional[str] = None
    scored_at: Optional[str] = None


class PortfolioScoreResponse(BaseModel):
    status: str
    tenders_scored: int
    tenders_failed: int
    decision_counts: Dict[str, int]
    results: List[TenderScoreResponse]
    duration_seconds: float


# =====================================================================
# Helpers
# =====================================================================

def _to_response(result: ScoringResult, calculator: TenderScoringCalculator) -> TenderScoreResponse:
    return TenderScoreResponse(
        tender_id=result.tender_id,
        status="success",
        risk_score=result.risk_score,
        risk_level=calculator.interpret_risk(result.risk_score),
        sla_risk_description=describe_sla_risk(result.risk_score),
        projected_revenue=float(result.projected_revenue),
        projected_cost=float(result.projected_cost),
        real_margin_pct=float(result.real_margin_pct),
        margin_level=calculator.interpret_margin(result.real_margin_pct),
        decision=result.decision.value,
        decision_label=result.decision.label,
        is_over_capacity=result.is_over_capacity,
        breakdown=TenderScoreBreakdown(
            regular_fraction=float(result.regular_fraction),
            urgent_fraction=float(result.urgent_fraction),
            holiday_fraction=float(result.holiday_fraction),
            cost_ratio=float(result.cost_ratio),
        ),
        scored_at=datetime.now(timezone.utc).isoformat(),
    )


# =====================================================================
# Endpoints
# =====================================================================

@router.get(
    "/parameters",
    summary="Active scoring parameters",
    description="Constants and thresholds currently bound to the calculators.",
)
async def get_parameters(parameters: ScoringParameters = Depends(get_scoring_parameters)) -> Dict[str, Any]:
    return parameters.as_dict()


@router.post(
    "/tender",
    response_model=TenderScoreResponse,
    summary="Score one tender",
    description=(
        "Computes projected revenue, cost, real margin, capacity flag and the "
        "participation decision. Out-of-range input returns 422 INVALID_INPUT."
    ),
)
async def score_tender(
    request: TenderScoringRequest,
    calculator: TenderScoringCalculator = Depends(get_tender_calculator),
):
    result = calculator.calculate(request.tender, request.staff_capacity_units)
    logger.info(
        f"[{result.tender_id or '-'}] decision={result.decision.value} "
        f"margin={float(result.real_margin_pct):.1f}% over_capacity={result.is_over_capacity}"
    )
    return _to_response(result, calculator)


@router.post(
    "/tender/portfolio",
    response_model=PortfolioScoreResponse,
    summary="Score a batch of tenders",
    description="Invalid tenders are reported as failed entries; the rest are scored.",
)
async def score_tender_portfolio(
    request: PortfolioScoringRequest,
    calculator: TenderScoringCalculator = Depends(get_tender_calculator),
):
    start = time.time()
    portfolio = score_portfolio(
        request.tenders, request.staff_capacity_units, calculator.parameters
    )

    results: List[TenderScoreResponse] = []
    for entry in portfolio.entries:
        if entry.status == "success":
            results.append(_to_response(entry.result, calculator))
        else:
            results.append(TenderScoreResponse(
                tender_id=entry.tender_id,
                status="failed",
                error=entry.error,
            ))

    if portfolio.tenders_failed == 0:
        overall = "success"
    elif portfolio.tenders_scored == 0:
        overall = "failed"
    else:
        overall = "partial"

    logger.info(
        f"Portfolio scored: {portfolio.tenders_scored} ok, "
        f"{portfolio.tenders_failed} failed, counts={portfolio.decision_counts}"
    )

    return PortfolioScoreResponse(
        status=overall,
        tenders_scored=portfolio.tenders_scored,
        tenders_failed=portfolio.tenders_failed,
        decision_counts=portfolio.decision_counts,
        results=results,
        duration_seconds=round(time.time() - start, 4),
    )
