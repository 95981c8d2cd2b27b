"""
scoring/tender_scorer.py - Tender Viability Scoring (Risk Matrix v3.0)

Turns a tender record plus the organisation's staffing capacity into a risk
score, projected revenue/cost, real margin and a participation decision.

Formula:
    regular_fraction = (ambulatory + hospitalized) / total   (0.7 if total == 0)
    urgent_fraction  = urgent / total                         (0.3 if total == 0)
    revenue          = total × regular_fraction × price_regular
                     + total × urgent_fraction  × price_urgent
    over_capacity    = total > staff_capacity_units
    cost_ratio       = 0.65 + (0.15 if over_capacity else 0)
    cost             = revenue × cost_ratio
    margin %         = (revenue − cost) / revenue × 100       (0 if revenue == 0)

Decision (first match wins):
    risk ≥ 7 or margin < 15     → DO_NOT_PARTICIPATE
    risk ≤ 3 and margin ≥ 25    → PARTICIPATE
    otherwise                   → REVIEW

The decision reads the unrounded margin; real_margin_pct is the reported,
quantized figure.

Note: over_capacity compares a case volume against a professional headcount.
The two are different units; the comparison is kept as a rough capacity
pressure indicator.
"""
import math

import structlog
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from healthops.core.exceptions import InvalidInputException
from healthops.models.enumerations import Decision
from healthops.models.tender import TenderRecord
from healthops.scoring.parameters import DEFAULT_PARAMETERS, ScoringParameters
from healthops.scoring.utils import quantize_money, quantize_pct, safe_divide, to_decimal

logger = structlog.get_logger(__name__)

RISK_SCALE_MIN = 0
RISK_SCALE_MAX = 8


@dataclass
class ScoringResult:
    """Output of TenderScoringCalculator.calculate()."""
    risk_score: int                # copied from sla_risk.scale, [0, 8]
    projected_revenue: Decimal     # quantized to 0.01
    projected_cost: Decimal        # quantized to 0.01
    real_margin_pct: Decimal       # quantized to 0.0001
    decision: Decision
    is_over_capacity: bool
    regular_fraction: Decimal
    urgent_fraction: Decimal
    holiday_fraction: Decimal
    cost_ratio: Decimal
    tender_id: Optional[str] = None


def _require_non_negative(field: str, value) -> None:
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidInputException(field, value, "must be a finite number")
    if value < 0:
        raise InvalidInputException(field, value, "must be >= 0")


def validate_tender(tender: TenderRecord, staff_capacity_units: int) -> None:
    """
    Reject any tender value outside its declared domain.

    Raises:
        InvalidInputException: on the first offending field. Values are never
        clamped.
    """
    scale = tender.sla_risk.scale
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise InvalidInputException("sla_risk.scale", scale, "must be an integer")
    if not RISK_SCALE_MIN <= scale <= RISK_SCALE_MAX:
        raise InvalidInputException(
            "sla_risk.scale", scale, f"must be in [{RISK_SCALE_MIN}, {RISK_SCALE_MAX}]"
        )

    if isinstance(staff_capacity_units, bool) or not isinstance(staff_capacity_units, int):
        raise InvalidInputException(
            "staff_capacity_units", staff_capacity_units, "must be an integer"
        )
    _require_non_negative("staff_capacity_units", staff_capacity_units)

    volume = tender.volume
    for name in ("total", "urgent", "hospitalized", "ambulatory"):
        _require_non_negative(f"volume.{name}", getattr(volume, name))

    economics = tender.economics
    for name in ("total_budget", "unit_price_regular", "unit_price_urgent"):
        _require_non_negative(f"economics.{name}", getattr(economics, name))

    penalties = tender.penalties
    for name in (
        "system_downtime_pct",
        "diagnostic_error_pct",
        "confidentiality_breach_pct",
        "contract_cap_pct",
    ):
        _require_non_negative(f"penalties.{name}", getattr(penalties, name))


class TenderScoringCalculator:
    """Score a tender for participation viability."""

    # Display bands used by the tender dashboard
    CRITICAL_RISK_ABOVE = 6
    HEALTHY_MARGIN_ABOVE = Decimal("20")

    def __init__(self, parameters: Optional[ScoringParameters] = None):
        self.parameters = parameters or DEFAULT_PARAMETERS

    def calculate(
        self,
        tender: TenderRecord,
        staff_capacity_units: int,
    ) -> ScoringResult:
        """
        Args:
            tender: Tender record to evaluate. Not mutated.
            staff_capacity_units: Available full-time professionals. Compared
                directly against volume.total.

        Returns:
            ScoringResult with the decision and its breakdown.

        Raises:
            InvalidInputException: risk scale outside [0, 8] or any negative
                or non-finite volume, price, budget, penalty or capacity.

        Examples:
            >>> result = TenderScoringCalculator().calculate(tender, 1200)
            >>> result.real_margin_pct
            Decimal('35.0000')
        """
        validate_tender(tender, staff_capacity_units)
        p = self.parameters

        risk_score = tender.sla_risk.scale
        volume = tender.volume
        total = Decimal(volume.total)

        if total > 0:
            regular_fraction = Decimal(volume.ambulatory + volume.hospitalized) / total
            urgent_fraction = Decimal(volume.urgent) / total
        else:
            regular_fraction = p.default_regular_fraction
            urgent_fraction = p.default_urgent_fraction

        price_regular = to_decimal(tender.economics.unit_price_regular)
        price_urgent = to_decimal(tender.economics.unit_price_urgent)

        raw_revenue = (
            total * regular_fraction * price_regular
            + total * urgent_fraction * price_urgent
        )

        is_over_capacity = volume.total > staff_capacity_units
        cost_ratio = p.base_cost_ratio
        if is_over_capacity:
            cost_ratio += p.over_capacity_surcharge

        raw_cost = raw_revenue * cost_ratio
        # decided on the unrounded margin; only reported figures are quantized
        raw_margin = safe_divide(raw_revenue - raw_cost, raw_revenue) * Decimal("100")
        margin = quantize_pct(raw_margin)
        revenue = quantize_money(raw_revenue)
        cost = quantize_money(raw_cost)

        decision = self.decide(risk_score, raw_margin)

        logger.debug(
            "tender_scored",
            tender_id=tender.id,
            risk_score=risk_score,
            total_volume=volume.total,
            staff_capacity_units=staff_capacity_units,
            is_over_capacity=is_over_capacity,
            cost_ratio=float(cost_ratio),
            projected_revenue=float(revenue),
            projected_cost=float(cost),
            real_margin_pct=float(margin),
            decision=decision.value,
        )

        return ScoringResult(
            risk_score=risk_score,
            projected_revenue=revenue,
            projected_cost=cost,
            real_margin_pct=margin,
            decision=decision,
            is_over_capacity=is_over_capacity,
            regular_fraction=quantize_pct(regular_fraction),
            urgent_fraction=quantize_pct(urgent_fraction),
            holiday_fraction=p.holiday_fraction,
            cost_ratio=cost_ratio,
            tender_id=tender.id,
        )

    def decide(self, risk_score: int, margin_pct: Decimal) -> Decision:
        """Apply the decision thresholds; the risk veto always wins."""
        p = self.parameters
        if risk_score >= p.risk_veto_min or margin_pct < p.margin_floor_pct:
            return Decision.DO_NOT_PARTICIPATE
        if risk_score <= p.participate_risk_max and margin_pct >= p.participate_margin_min_pct:
            return Decision.PARTICIPATE
        return Decision.REVIEW

    def interpret_risk(self, risk_score: int) -> str:
        """Dashboard band for the SLA risk bar: critical above scale 6."""
        return "critical" if risk_score > self.CRITICAL_RISK_ABOVE else "standard"

    def interpret_margin(self, margin_pct: Decimal) -> str:
        """Dashboard band for the margin figure: healthy above 20%."""
        return "healthy" if to_decimal(margin_pct) > self.HEALTHY_MARGIN_ABOVE else "tight"


def score(
    tender: TenderRecord,
    staff_capacity_units: int,
    parameters: Optional[ScoringParameters] = None,
) -> ScoringResult:
    """Score one tender with the given (or default) parameters."""
    return TenderScoringCalculator(parameters).calculate(tender, staff_capacity_units)
