# tests/test_api.py

"""
API Endpoint Tests - Tests for all FastAPI endpoints
"""

import json

import pytest
from fastapi import status



# ROOT & HEALTH ENDPOINT TESTS


class TestRootEndpoint:
    """Tests for GET / endpoint."""

    def test_root_running(self, client):
        response = client.get("/")
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["status"] == "running"
        assert data["service"] == "HealthOps Tender Scoring"
        assert data["docs"]["swagger"] == "/docs"


class TestHealthEndpoint:
    """Tests for GET /health endpoint."""

    def test_health_ok(self, client):
        response = client.get("/health")
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert data["parameters"]["base_cost_ratio"] == 0.65



# PARAMETERS ENDPOINT TESTS


class TestParametersEndpoint:
    """Tests for GET /api/v1/scoring/parameters endpoint."""

    def test_get_parameters(self, client):
        response = client.get("/api/v1/scoring/parameters")
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["risk_veto_min"] == 7
        assert data["margin_floor_pct"] == 15.0
        assert data["participate_risk_max"] == 3
        assert data["participate_margin_min_pct"] == 25.0
        assert data["monthly_hours_per_professional"] == 160



# TENDER SCORING ENDPOINT TESTS


class TestScoreTenderEndpoint:
    """Tests for POST /api/v1/scoring/tender endpoint."""

    def test_over_capacity_review(self, client, tender_data):
        response = client.post(
            "/api/v1/scoring/tender",
            json={"tender": tender_data, "staff_capacity_units": 800},
        )
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["status"] == "success"
        assert data["tender_id"] == "TEN-2026-001"
        assert data["projected_revenue"] == 17100000.0
        assert data["projected_cost"] == 13680000.0
        assert data["real_margin_pct"] == 20.0
        assert data["is_over_capacity"] is True
        assert data["decision"] == "REVIEW"
        assert data["margin_level"] == "tight"
        assert data["sla_risk_description"] == "Moderate"
        assert data["breakdown"]["cost_ratio"] == 0.8

    def test_within_capacity_participate(self, client, tender_data_camel):
        response = client.post(
            "/api/v1/scoring/tender",
            json={"tender": tender_data_camel, "staff_capacity_units": 1200},
        )
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["decision"] == "PARTICIPATE"
        assert data["decision_label"] == "PARTICIPATE"
        assert data["real_margin_pct"] == 35.0
        assert data["risk_level"] == "standard"

    def test_high_risk_do_not_participate(self, client, tender_data):
        tender_data["sla_risk"]["scale"] = 8
        response = client.post(
            "/api/v1/scoring/tender",
            json={"tender": tender_data, "staff_capacity_units": 1200},
        )
        data = response.json()
        assert data["decision"] == "DO_NOT_PARTICIPATE"
        assert data["decision_label"] == "DO NOT PARTICIPATE"
        assert data["risk_level"] == "critical"

    def test_scale_out_of_range(self, client, tender_data):
        tender_data["sla_risk"]["scale"] = 9
        response = client.post(
            "/api/v1/scoring/tender",
            json={"tender": tender_data, "staff_capacity_units": 800},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

        data = response.json()
        assert data["error_code"] == "INVALID_INPUT"
        assert data["details"] == {"field": "sla_risk.scale", "value": 9}

    def test_infinite_price(self, client, tender_data):
        tender_data["economics"]["unit_price_regular"] = 123456.5
        body = json.dumps({"tender": tender_data, "staff_capacity_units": 800})
        response = client.post(
            "/api/v1/scoring/tender",
            content=body.replace("123456.5", "1e999"),
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

        data = response.json()
        assert data["error_code"] == "INVALID_INPUT"
        assert data["details"] == {"field": "economics.unit_price_regular", "value": "inf"}

    def test_negative_capacity(self, client, tender_data):
        response = client.post(
            "/api/v1/scoring/tender",
            json={"tender": tender_data, "staff_capacity_units": -1},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["details"]["field"] == "staff_capacity_units"

    def test_missing_field(self, client, tender_data):
        response = client.post("/api/v1/scoring/tender", json={"tender": tender_data})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"]["field"] == "staff_capacity_units"

    def test_unknown_modality(self, client, tender_data):
        tender_data["identification"]["modality"] = "carrier pigeon"
        response = client.post(
            "/api/v1/scoring/tender",
            json={"tender": tender_data, "staff_capacity_units": 800},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_malformed_json(self, client):
        response = client.post(
            "/api/v1/scoring/tender",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "INVALID_REQUEST"



# PORTFOLIO ENDPOINT TESTS


class TestPortfolioEndpoint:
    """Tests for POST /api/v1/scoring/tender/portfolio endpoint."""

    def test_all_scored(self, client, tender_data):
        second = dict(tender_data, id="TEN-2026-002", sla_risk={"scale": 7})
        response = client.post(
            "/api/v1/scoring/tender/portfolio",
            json={"tenders": [tender_data, second], "staff_capacity_units": 1200},
        )
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["status"] == "success"
        assert data["tenders_scored"] == 2
        assert data["decision_counts"] == {
            "PARTICIPATE": 1,
            "REVIEW": 0,
            "DO_NOT_PARTICIPATE": 1,
        }

    def test_partial_failure(self, client, tender_data):
        bad = dict(tender_data, id="TEN-BAD", sla_risk={"scale": 12})
        response = client.post(
            "/api/v1/scoring/tender/portfolio",
            json={"tenders": [tender_data, bad], "staff_capacity_units": 800},
        )
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["status"] == "partial"
        assert data["tenders_scored"] == 1
        assert data["tenders_failed"] == 1
        assert data["decision_counts"]["REVIEW"] == 1

        failed = data["results"][1]
        assert failed["tender_id"] == "TEN-BAD"
        assert failed["status"] == "failed"
        assert "sla_risk.scale" in failed["error"]

    def test_infinite_price_is_failed_entry(self, client, tender_data):
        bad = dict(tender_data, id="TEN-INF", economics=dict(tender_data["economics"], unit_price_urgent=123456.5))
        body = json.dumps({"tenders": [bad, tender_data], "staff_capacity_units": 800})
        response = client.post(
            "/api/v1/scoring/tender/portfolio",
            content=body.replace("123456.5", "1e999"),
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["status"] == "partial"
        assert data["results"][0]["status"] == "failed"
        assert data["results"][1]["decision"] == "REVIEW"

    def test_empty_portfolio(self, client):
        response = client.post(
            "/api/v1/scoring/tender/portfolio",
            json={"tenders": [], "staff_capacity_units": 10},
        )
        data = response.json()
        assert data["status"] == "success"
        assert data["results"] == []



# CAPACITY PLANNING ENDPOINT TESTS


class TestCapacityEndpoint:
    """Tests for POST /api/v1/planning/capacity endpoint."""

    def test_plan_capacity(self, client, tender_data):
        professionals = [
            {"id": "p1", "competencies": ["MRI Prostate", "Coronary CT"]},
            {"id": "p2", "competencies": ["Coronary CT"]},
            {"id": "p3", "competencies": ["Mammography"]},
        ]
        response = client.post(
            "/api/v1/planning/capacity",
            json={"professionals": professionals, "tenders": [tender_data]},
        )
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["total_staff_hours"] == 480
        assert data["required_hours"] == 500.0
        assert data["capacity_gap_hours"] == -20.0
        assert data["utilization_rate_pct"] == pytest.approx(104.1667)
        assert data["is_overloaded"] is True
        assert data["competency_coverage"] == {
            "MRI Prostate": 1,
            "Coronary CT": 2,
            "Mammography": 1,
        }

    def test_empty_request(self, client):
        response = client.post("/api/v1/planning/capacity", json={})
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["total_staff_hours"] == 0
        assert data["utilization_rate_pct"] == 0.0
        assert data["is_overloaded"] is False
