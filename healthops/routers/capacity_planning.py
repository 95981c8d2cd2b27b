"""
routers/capacity_planning.py - Capacity Planning Endpoint

Endpoints:
  POST /api/v1/planning/capacity - Staff hours vs. tender demand
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from typing import Dict, List
import logging

from healthops.core.dependencies import get_capacity_calculator
from healthops.models.professional import ProfessionalSummary
from healthops.models.tender import TenderRecord
from healthops.scoring.capacity_planner import CapacityPlanningCalculator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/planning", tags=["Capacity Planning"])


class CapacityPlanningRequest(BaseModel):
    professionals: List[ProfessionalSummary] = Field(default_factory=list)
    tenders: List[TenderRecord] = Field(default_factory=list)


class CapacityPlanningResponse(BaseModel):
    total_staff_hours: int
    required_hours: float
    capacity_gap_hours: float
    utilization_rate_pct: float
    is_overloaded: bool
    competency_coverage: Dict[str, int]
    professionals_count: int
    tenders_count: int


@router.post(
    "/capacity",
    response_model=CapacityPlanningResponse,
    summary="Plan staff capacity",
    description="Monthly staff hours against the hours the given tenders require.",
)
async def plan_capacity(
    request: CapacityPlanningRequest,
    calculator: CapacityPlanningCalculator = Depends(get_capacity_calculator),
):
    result = calculator.calculate(request.professionals, request.tenders)
    if result.is_overloaded:
        logger.warning(
            f"Staff overloaded: utilization={float(result.utilization_rate_pct):.1f}% "
            f"gap={float(result.capacity_gap_hours):.0f}h"
        )
    return CapacityPlanningResponse(
        total_staff_hours=result.total_staff_hours,
        required_hours=float(result.required_hours),
        capacity_gap_hours=float(result.capacity_gap_hours),
        utilization_rate_pct=float(result.utilization_rate_pct),
        is_overloaded=result.is_overloaded,
        competency_coverage=result.competency_coverage,
        professionals_count=result.professionals_count,
        tenders_count=result.tenders_count,
    )
