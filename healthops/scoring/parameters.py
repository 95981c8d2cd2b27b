# healthops/scoring/parameters.py
"""
Scoring Parameters
------------------
Named constants shared by TenderScoringCalculator and CapacityPlanningCalculator.

Defaults (Risk Matrix v3.0):
    monthly_hours_per_professional   160
    units_per_hour                   2
    base_cost_ratio                  0.65   (35% baseline margin)
    over_capacity_surcharge          0.15   (urgent-hiring penalty)
    default_regular_fraction         0.7    (used when volume.total == 0)
    default_urgent_fraction          0.3
    risk_veto_min                    7      (risk >= 7  -> do not participate)
    margin_floor_pct                 15     (margin < 15 -> do not participate)
    participate_risk_max             3
    participate_margin_min_pct       25
    overload_utilization_pct         90

Override through environment variables (see healthops.config.Settings) and
build with ScoringParameters.from_settings().
"""
from dataclasses import dataclass, asdict
from decimal import Decimal
from typing import Any, Dict

from healthops.config import Settings
from healthops.core.exceptions import InvalidParametersException
from healthops.scoring.utils import to_decimal


@dataclass(frozen=True)
class ScoringParameters:
    """Tunable constants of the scoring engine."""
    monthly_hours_per_professional: int = 160
    units_per_hour: Decimal = Decimal("2")
    base_cost_ratio: Decimal = Decimal("0.65")
    over_capacity_surcharge: Decimal = Decimal("0.15")
    default_regular_fraction: Decimal = Decimal("0.7")
    default_urgent_fraction: Decimal = Decimal("0.3")
    holiday_fraction: Decimal = Decimal("0")
    risk_veto_min: int = 7
    margin_floor_pct: Decimal = Decimal("15")
    participate_risk_max: int = 3
    participate_margin_min_pct: Decimal = Decimal("25")
    overload_utilization_pct: Decimal = Decimal("90")

    def __post_init__(self):
        if self.monthly_hours_per_professional <= 0:
            raise InvalidParametersException("monthly_hours_per_professional must be positive")
        if self.units_per_hour <= 0:
            raise InvalidParametersException("units_per_hour must be positive")
        if not Decimal("0") <= self.base_cost_ratio < Decimal("1"):
            raise InvalidParametersException(
                f"base_cost_ratio must be in [0, 1), got {self.base_cost_ratio}"
            )
        if self.over_capacity_surcharge < 0:
            raise InvalidParametersException("over_capacity_surcharge must be >= 0")
        if self.participate_risk_max >= self.risk_veto_min:
            raise InvalidParametersException(
                "participate_risk_max must be below risk_veto_min"
            )
        if self.margin_floor_pct > self.participate_margin_min_pct:
            raise InvalidParametersException(
                "margin_floor_pct must not exceed participate_margin_min_pct"
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ScoringParameters":
        """Build parameters from validated application settings."""
        return cls(
            monthly_hours_per_professional=settings.MONTHLY_HOURS_PER_PROFESSIONAL,
            units_per_hour=to_decimal(settings.UNITS_PER_HOUR),
            base_cost_ratio=to_decimal(settings.BASE_COST_RATIO),
            over_capacity_surcharge=to_decimal(settings.OVER_CAPACITY_SURCHARGE),
            default_regular_fraction=to_decimal(settings.DEFAULT_REGULAR_FRACTION),
            default_urgent_fraction=to_decimal(settings.DEFAULT_URGENT_FRACTION),
            risk_veto_min=settings.RISK_VETO_MIN,
            margin_floor_pct=to_decimal(settings.MARGIN_FLOOR_PCT),
            participate_risk_max=settings.PARTICIPATE_RISK_MAX,
            participate_margin_min_pct=to_decimal(settings.PARTICIPATE_MARGIN_MIN_PCT),
            overload_utilization_pct=to_decimal(settings.OVERLOAD_UTILIZATION_PCT),
        )

    def as_dict(self) -> Dict[str, Any]:
        """JSON-friendly snapshot (Decimals as floats)."""
        return {
            k: float(v) if isinstance(v, Decimal) else v
            for k, v in asdict(self).items()
        }


DEFAULT_PARAMETERS = ScoringParameters()
