"""API route tests using FastAPI's TestClient."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from dealmetrics.api.app import app
from dealmetrics.api.formatting import money, ratio


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def deal_payload() -> dict:
    return {
        "property": {
            "purchase_price": "1000000",
            "down_payment": "200000",
            "loan_term_years": 30,
            "interest_rate": "6.5",
            "total_units": 10,
            "property_size_sqft": 8000,
        },
        "unit_mix": [
            {"unit_type": "1bd1bth", "count": 10, "current_rent": "1200", "market_rent": "1400"},
        ],
        "income": [
            {"name": "Rental Income", "amount": "12000", "is_calculated": True},
        ],
        "expenses": [
            {"name": "Property Management", "amount": "8", "is_percentage": True, "percentage_of": "rent"},
        ],
    }


class TestHealth:
    def test_ok(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestAnalyze:
    def test_full_report(self, client, deal_payload):
        resp = client.post("/api/v1/analyze", json=deal_payload)
        assert resp.status_code == 200
        data = resp.json()

        current = data["scenarios"]["current"]
        assert Decimal(current["monthly_breakdown"]["gross_income"]) == Decimal("12000")
        assert Decimal(current["monthly_breakdown"]["total_expenses"]) == Decimal("960")
        assert Decimal(current["monthly_breakdown"]["mortgage_payment"]) == Decimal("5056.54")
        assert Decimal(current["key_metrics"]["cap_rate"]) == Decimal("0.1325")
        assert Decimal(data["scenarios"]["upside"]["key_metrics"]["annual_cash_flow"]) == Decimal("22080.00")

        assert Decimal(data["financing"]["loan_amount"]) == Decimal("800000")
        assert Decimal(data["market_analysis"]["potential_increase"]) == Decimal("2000")
        assert data["expense_breakdown"][0]["name"] == "Property Management"
        assert Decimal(data["expense_breakdown"][0]["market_amount"]) == Decimal("1120")
        assert Decimal(data["price_per_unit"]) == Decimal("100000")
        assert data["allocated_units"] == 10
        assert data["current_returns"]["years"] == 5

    def test_money_rounded_to_cents(self, client, deal_payload):
        data = client.post("/api/v1/analyze", json=deal_payload).json()
        cash_flow = data["scenarios"]["current"]["monthly_breakdown"]["cash_flow"]
        assert Decimal(cash_flow) == Decimal("5983.46")

    def test_cash_purchase_dscr_null(self, client, deal_payload):
        deal_payload["property"]["is_cash_purchase"] = True
        data = client.post("/api/v1/analyze", json=deal_payload).json()
        key = data["scenarios"]["current"]["key_metrics"]
        assert key["debt_service_coverage_ratio"] is None
        assert Decimal(key["total_investment"]) == Decimal("1000000")
        assert Decimal(data["scenarios"]["upside"]["key_metrics"]["debt_service_coverage_ratio"]) == 0

    def test_custom_projection_years(self, client, deal_payload):
        deal_payload["projection_years"] = 10
        data = client.post("/api/v1/analyze", json=deal_payload).json()
        assert data["current_returns"]["years"] == 10

    def test_near_zero_down_payment_rounds_huge_ratios(self, client, deal_payload):
        deal_payload["property"]["down_payment"] = "0.000000000000000000001"
        resp = client.post("/api/v1/analyze", json=deal_payload)
        assert resp.status_code == 200
        key = resp.json()["scenarios"]["current"]["key_metrics"]
        assert Decimal(key["cash_on_cash_return"]) > Decimal("1e24")
        assert Decimal(key["total_investment"]) == Decimal("0.00")

    def test_rejects_down_payment_above_price(self, client, deal_payload):
        deal_payload["property"]["down_payment"] = "1200000"
        resp = client.post("/api/v1/analyze", json=deal_payload)
        assert resp.status_code == 400

    def test_rejects_over_allocated_units(self, client, deal_payload):
        deal_payload["property"]["total_units"] = 8
        resp = client.post("/api/v1/analyze", json=deal_payload)
        assert resp.status_code == 400
        assert "8 units" in resp.json()["detail"]

    def test_rejects_percentage_over_100(self, client, deal_payload):
        deal_payload["expenses"][0]["amount"] = "120"
        resp = client.post("/api/v1/analyze", json=deal_payload)
        assert resp.status_code == 422

    def test_rejects_zero_unit_count(self, client, deal_payload):
        deal_payload["unit_mix"][0]["count"] = 0
        resp = client.post("/api/v1/analyze", json=deal_payload)
        assert resp.status_code == 422


class TestMetrics:
    def test_scenarios_only(self, client, deal_payload):
        resp = client.post("/api/v1/metrics", json=deal_payload)
        assert resp.status_code == 200
        data = resp.json()
        assert set(data) == {"current", "market", "upside"}
        assert (
            data["current"]["monthly_breakdown"]["mortgage_payment"]
            == data["market"]["monthly_breakdown"]["mortgage_payment"]
        )


class TestDefaults:
    def test_defaults(self, client):
        data = client.get("/api/v1/defaults").json()
        assert len(data["expenses"]) == 7
        assert data["income"][0]["is_calculated"] is True
        assert data["loan_term_years"] == 30


class TestAmortization:
    def test_schedule(self, client):
        resp = client.post(
            "/api/v1/amortization",
            json={"principal": "200000", "interest_rate": "6.5", "loan_term_years": 30, "yearly": True},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert Decimal(data["monthly_payment"]) == Decimal("1264.14")
        assert len(data["payments"]) == 360
        assert len(data["yearly"]) == 30
        assert Decimal(data["payments"][-1]["balance"]) == Decimal("0")

    def test_hold_years(self, client):
        resp = client.post(
            "/api/v1/amortization",
            json={"principal": "200000", "interest_rate": "6.5", "loan_term_years": 30, "hold_years": 5},
        )
        data = resp.json()
        assert len(data["payments"]) == 60
        assert data["yearly"] == []


class TestCommission:
    def test_percent(self, client):
        resp = client.post(
            "/api/v1/deals/commission",
            json={"price": "2000000", "commission_percent": "2.5", "commission_amount": "1000"},
        )
        assert resp.json()["source"] == "percent"
        assert Decimal(resp.json()["amount"]) == Decimal("50000")

    def test_amount(self, client):
        resp = client.post("/api/v1/deals/commission", json={"price": "2000000", "commission_amount": "1000"})
        assert resp.json()["source"] == "amount"


class TestFormatting:
    def test_ratio_beyond_context_precision(self):
        assert ratio(Decimal("1e25")) == Decimal("1e25")
        assert ratio(Decimal("Infinity")) is None

    def test_money_beyond_context_precision(self):
        assert money(Decimal("123456789012345678901234567.891")) == Decimal("123456789012345678901234567.89")
