from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional

from healthops.models.enumerations import Modality


class TenderModel(BaseModel):
    """
    Base for tender sections.

    Records are immutable per evaluation. Fields accept either snake_case
    names or the camelCase keys of the source spreadsheet export.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class Identification(TenderModel):
    modality: Modality = Field(..., description="Service delivery modality")
    service_type: str = Field(..., min_length=1, description="e.g. Radiology, Cardiology")
    duration_months: float = Field(..., description="Contract duration in months")

    @field_validator("modality", mode="before")
    @classmethod
    def normalize_modality(cls, value):
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
            return "on_site" if normalized == "onsite" else normalized
        return value


class Volume(TenderModel):
    """
    Projected case volume.

    urgent + hospitalized + ambulatory is NOT checked against total; source
    spreadsheets are often inconsistent and scoring tolerates it.
    """

    total: int = Field(..., description="Total expected units (reports/studies)")
    urgent: int = Field(default=0, description="Urgent cases")
    hospitalized: int = Field(default=0, description="Inpatient cases")
    ambulatory: int = Field(default=0, description="Outpatient cases")


class SlaRisk(TenderModel):
    scale: int = Field(..., description="SLA risk scale, 0 (none) to 8 (critical)")
    impact: Optional[str] = Field(default=None, description="Impact of SLA breach")


class Penalties(TenderModel):
    system_downtime_pct: float = 0.0
    diagnostic_error_pct: float = 0.0
    confidentiality_breach_pct: float = 0.0
    contract_cap_pct: float = Field(default=0.0, description="Cap on total penalties over contract amount")


class Integration(TenderModel):
    dicom: bool = False
    hl7: bool = False
    ris_pacs: bool = False
    on_prem_server: bool = False


class Economics(TenderModel):
    total_budget: float = 0.0
    unit_price_regular: float = Field(..., description="Price per unit in business hours")
    unit_price_urgent: float = Field(..., description="Price per urgent unit")
    projected_margin_pct: float = Field(default=0.0, description="Margin declared by the bid team")


class TenderRecord(TenderModel):
    """
    A competitive bid for clinical services.

    Domain ranges (risk scale 0-8, non-negative volumes and amounts) are
    enforced by the scoring calculators, which raise InvalidInputException.
    """

    id: Optional[str] = Field(default=None, description="Tender identifier, e.g. TEN-2026-001")
    identification: Identification
    volume: Volume
    sla_risk: SlaRisk
    penalties: Penalties = Field(default_factory=Penalties)
    integration: Integration = Field(default_factory=Integration)
    economics: Economics
