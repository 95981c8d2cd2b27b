"""
scoring/capacity_planner.py

Compares current staff capacity with the demand of the active tenders.

Formula:
    staff_hours     = professionals × 160
    required_hours  = Σ tender.volume.total / 2
    gap             = staff_hours − required_hours       (negative = deficit)
    utilization %   = required_hours / staff_hours × 100 (0 if no staff)
    overloaded      = utilization % > 90     (unrounded ratio)

Competency coverage counts, per competency tag, how many professionals hold it.
"""

import structlog
from collections import Counter
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, Optional

from healthops.core.exceptions import InvalidInputException
from healthops.models.professional import ProfessionalSummary
from healthops.models.tender import TenderRecord
from healthops.scoring.parameters import DEFAULT_PARAMETERS, ScoringParameters
from healthops.scoring.utils import quantize_pct, safe_divide

logger = structlog.get_logger(__name__)


@dataclass
class CapacityPlanningResult:
    """Output of CapacityPlanningCalculator.calculate()."""
    total_staff_hours: int
    required_hours: Decimal
    capacity_gap_hours: Decimal
    utilization_rate_pct: Decimal    # quantized to 0.0001
    is_overloaded: bool
    competency_coverage: Dict[str, int] = field(default_factory=dict)
    professionals_count: int = 0
    tenders_count: int = 0


class CapacityPlanningCalculator:
    """Aggregate staff capacity against tender demand."""

    def __init__(self, parameters: Optional[ScoringParameters] = None):
        self.parameters = parameters or DEFAULT_PARAMETERS

    def calculate(
        self,
        professionals: Iterable[ProfessionalSummary],
        tenders: Iterable[TenderRecord],
    ) -> CapacityPlanningResult:
        """
        Args:
            professionals: Staff available for the tenders. Only competencies
                are read.
            tenders: Active tenders; only volume.total is read.

        Returns:
            CapacityPlanningResult with gap, utilization and coverage.

        Raises:
            InvalidInputException: a tender has a negative volume.total.
        """
        p = self.parameters
        professionals = list(professionals)
        tenders = list(tenders)

        total_demand_volume = 0
        for tender in tenders:
            total = tender.volume.total
            if total < 0:
                raise InvalidInputException(
                    f"tender[{tender.id or '?'}].volume.total", total, "must be >= 0"
                )
            total_demand_volume += total

        total_staff_hours = len(professionals) * p.monthly_hours_per_professional
        required_hours = Decimal(total_demand_volume) / p.units_per_hour
        capacity_gap = Decimal(total_staff_hours) - required_hours
        raw_utilization = (
            safe_divide(required_hours, Decimal(total_staff_hours)) * Decimal("100")
        )
        utilization = quantize_pct(raw_utilization)

        coverage: Counter = Counter()
        for professional in professionals:
            coverage.update(professional.competencies)

        is_overloaded = raw_utilization > p.overload_utilization_pct

        logger.debug(
            "capacity_planned",
            professionals_count=len(professionals),
            tenders_count=len(tenders),
            total_staff_hours=total_staff_hours,
            required_hours=float(required_hours),
            capacity_gap_hours=float(capacity_gap),
            utilization_rate_pct=float(utilization),
            is_overloaded=is_overloaded,
        )

        return CapacityPlanningResult(
            total_staff_hours=total_staff_hours,
            required_hours=required_hours,
            capacity_gap_hours=capacity_gap,
            utilization_rate_pct=utilization,
            is_overloaded=is_overloaded,
            competency_coverage=dict(coverage),
            professionals_count=len(professionals),
            tenders_count=len(tenders),
        )


def plan_capacity(
    professionals: Iterable[ProfessionalSummary],
    tenders: Iterable[TenderRecord],
    parameters: Optional[ScoringParameters] = None,
) -> CapacityPlanningResult:
    """Plan capacity with the given (or default) parameters."""
    return CapacityPlanningCalculator(parameters).calculate(professionals, tenders)
