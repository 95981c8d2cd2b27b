# tests/conftest.py

"""
Pytest Fixtures - Shared tender, professional and API fixtures

REFERENCE TENDER (TEN-2026-001):
- Volume: total=1000, urgent=300, hospitalized=200, ambulatory=500
- Prices: regular=15000, urgent=22000
- SLA risk scale: 3
- Capacity 800  → over capacity, margin 20% → REVIEW
- Capacity 1200 → within capacity, margin 35% → PARTICIPATE
"""

import pytest
from fastapi.testclient import TestClient

from healthops.main import app
from healthops.models.professional import ProfessionalSummary
from healthops.models.tender import TenderRecord


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# TENDER FIXTURES
# =============================================================================

@pytest.fixture
def tender_data():
    """Reference tender as a JSON-ready dict (snake_case keys)."""
    return {
        "id": "TEN-2026-001",
        "identification": {
            "modality": "telemedicine",
            "service_type": "Radiology",
            "duration_months": 24,
        },
        "volume": {
            "total": 1000,
            "urgent": 300,
            "hospitalized": 200,
            "ambulatory": 500,
        },
        "sla_risk": {
            "scale": 3,
            "impact": "Regional emergency services depend on turnaround",
        },
        "penalties": {
            "system_downtime_pct": 2,
            "diagnostic_error_pct": 5,
            "confidentiality_breach_pct": 10,
            "contract_cap_pct": 20,
        },
        "integration": {
            "dicom": True,
            "hl7": True,
            "ris_pacs": True,
            "on_prem_server": False,
        },
        "economics": {
            "total_budget": 150000000,
            "unit_price_regular": 15000,
            "unit_price_urgent": 22000,
            "projected_margin_pct": 30,
        },
    }


@pytest.fixture
def tender_data_camel():
    """Same tender keyed the way the spreadsheet export names fields."""
    return {
        "id": "TEN-2026-001",
        "identification": {
            "modality": "Telemedicine",
            "serviceType": "Radiology",
            "durationMonths": 24,
        },
        "volume": {"total": 1000, "urgent": 300, "hospitalized": 200, "ambulatory": 500},
        "slaRisk": {"scale": 3},
        "penalties": {
            "systemDowntimePct": 2,
            "diagnosticErrorPct": 5,
            "confidentialityBreachPct": 10,
            "contractCapPct": 20,
        },
        "integration": {"dicom": True, "hl7": True, "risPacs": True, "onPremServer": False},
        "economics": {
            "totalBudget": 150000000,
            "unitPriceRegular": 15000,
            "unitPriceUrgent": 22000,
            "projectedMarginPct": 30,
        },
    }


@pytest.fixture
def reference_tender(tender_data):
    """Reference tender as a TenderRecord."""
    return TenderRecord(**tender_data)


@pytest.fixture
def make_tender(tender_data):
    """Build a TenderRecord from the reference tender with overrides.

    Keyword names: total, urgent, hospitalized, ambulatory, scale,
    unit_price_regular, unit_price_urgent, total_budget, id.
    """
    def _make(**overrides):
        data = {
            section: dict(values) if isinstance(values, dict) else values
            for section, values in tender_data.items()
        }
        for key, value in overrides.items():
            if key in data["volume"]:
                data["volume"][key] = value
            elif key in data["economics"]:
                data["economics"][key] = value
            elif key == "scale":
                data["sla_risk"]["scale"] = value
            elif key == "id":
                data["id"] = value
            else:
                raise KeyError(f"Unknown tender override: {key}")
        return TenderRecord(**data)

    return _make


# =============================================================================
# PROFESSIONAL FIXTURES
# =============================================================================

@pytest.fixture
def professionals():
    """Three radiologists with overlapping competencies."""
    return [
        ProfessionalSummary(id="p1", name="Ana", competencies={"MRI Prostate", "Coronary CT"}),
        ProfessionalSummary(id="p2", name="Bruno", competencies={"Coronary CT"}),
        ProfessionalSummary(id="p3", name="Carla", competencies={"Mammography", "MRI Prostate", "Coronary CT"}),
    ]
