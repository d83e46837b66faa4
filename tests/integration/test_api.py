"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient

from cardcycle_gateway.api.dependencies import get_due_date_rule
from cardcycle_gateway.api.main import create_app
from cardcycle_gateway.api.v1.schemas import MAX_INSTALLMENT_COUNT
from cardcycle_gateway.domain.models import DueDateRule


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient, card_policy: dict):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/installments", json={"purchase_date": "2025-01-05", "amount": 100, "installment_count": 3, **card_policy})

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "cardcycle_installment_plan_total" in response.text


def test_request_id_is_propagated(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_request_id_is_generated(client: TestClient):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_billing_cycle_endpoint(client: TestClient, card_policy: dict):
    """Test POST /v1/billing-cycle across a year boundary"""
    response = client.post("/v1/billing-cycle", json={"purchase_date": "2025-12-20", **card_policy})

    assert response.status_code == 200
    assert response.json() == {"statement_month": 0, "statement_year": 2026, "due_date": "2026-01-15"}


def test_billing_cycle_endpoint_rejects_bad_date(client: TestClient, card_policy: dict):
    response = client.post("/v1/billing-cycle", json={"purchase_date": "20/12/2025", **card_policy})
    assert response.status_code == 422


def test_billing_cycle_endpoint_rejects_out_of_range_day(client: TestClient):
    response = client.post(
        "/v1/billing-cycle",
        json={"purchase_date": "2025-12-20", "closing_day": 32, "due_day": 15},
    )
    assert response.status_code == 422


def test_billing_cycle_endpoint_statement_month_rule():
    """Due-date rule comes from configuration"""
    app = create_app()
    app.dependency_overrides[get_due_date_rule] = lambda: DueDateRule.STATEMENT_MONTH
    client = TestClient(app)

    response = client.post(
        "/v1/billing-cycle",
        json={"purchase_date": "2025-01-25", "closing_day": 20, "due_day": 10},
    )

    assert response.status_code == 200
    assert response.json()["due_date"] == "2025-02-10"


def test_installments_endpoint(client: TestClient, card_policy: dict):
    """Test POST /v1/installments with an indivisible amount"""
    response = client.post(
        "/v1/installments",
        json={"purchase_date": "2025-01-05", "amount": 100, "installment_count": 3, **card_policy},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total_cents"] == 10000
    assert [inst["amount_cents"] for inst in data["installments"]] == [3334, 3333, 3333]
    assert [inst["statement_month"] for inst in data["installments"]] == [0, 1, 2]
    assert [inst["installment_id"] for inst in data["installments"]] == [
        "2025-01-05-i1",
        "2025-01-05-i2",
        "2025-01-05-i3",
    ]


def test_installments_endpoint_decimal_amount(client: TestClient, card_policy: dict):
    response = client.post(
        "/v1/installments",
        json={"purchase_date": "2025-03-15", "amount": "59.99", "installment_count": 2, **card_policy},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total_cents"] == 5999
    assert [inst["amount_cents"] for inst in data["installments"]] == [3000, 2999]


def test_installments_endpoint_invalid_count(client: TestClient, card_policy: dict):
    """Domain InvalidInstallmentCountError maps to 422"""
    response = client.post(
        "/v1/installments",
        json={"purchase_date": "2025-01-05", "amount": 100, "installment_count": 0, **card_policy},
    )

    assert response.status_code == 422
    assert "installment_count" in response.json()["detail"]


def test_installments_endpoint_rejects_negative_amount(client: TestClient, card_policy: dict):
    response = client.post(
        "/v1/installments",
        json={"purchase_date": "2025-01-05", "amount": -5, "installment_count": 2, **card_policy},
    )
    assert response.status_code == 422


def test_recurrence_next_endpoint(client: TestClient):
    """Test POST /v1/recurrence/next clamps Jan 31 to February"""
    response = client.post("/v1/recurrence/next", json={"current_date": "2025-01-31", "pattern": "monthly"})

    assert response.status_code == 200
    assert response.json() == {"next_date": "2025-02-28"}


def test_recurrence_next_endpoint_defaults_to_monthly(client: TestClient):
    response = client.post("/v1/recurrence/next", json={"current_date": "2025-05-10"})
    assert response.json()["next_date"] == "2025-06-10"


def test_recurrence_next_endpoint_rejects_unknown_pattern(client: TestClient):
    response = client.post("/v1/recurrence/next", json={"current_date": "2025-05-10", "pattern": "daily"})
    assert response.status_code == 422


def test_recurrence_series_endpoint(client: TestClient):
    """Test POST /v1/recurrence/series by count"""
    response = client.post(
        "/v1/recurrence/series",
        json={"start_date": "2024-02-29", "pattern": "yearly", "count": 3},
    )

    assert response.status_code == 200
    occurrences = response.json()["occurrences"]
    assert [occ["occurrence_date"] for occ in occurrences] == ["2024-02-29", "2025-02-28", "2026-02-28"]
    assert [occ["installment_number"] for occ in occurrences] == [1, 2, 3]
    assert all(occ["total_installments"] == 3 for occ in occurrences)


def test_recurrence_series_endpoint_capped(client: TestClient):
    response = client.post(
        "/v1/recurrence/series",
        json={"start_date": "2025-01-01", "pattern": "weekly", "count": 60},
    )

    assert response.status_code == 200
    assert len(response.json()["occurrences"]) == 25


def test_recurrence_series_endpoint_rejects_large_count(client: TestClient):
    response = client.post(
        "/v1/recurrence/series",
        json={"start_date": "2025-01-01", "count": 61},
    )
    assert response.status_code == 422


@pytest.mark.parametrize("purchase_date", ["2025-13-05", "2025-13-20", "2025-00-05", "2025-02-30", "2025-04-31", "2025-01-00"])
def test_billing_cycle_endpoint_rejects_impossible_date(client: TestClient, card_policy: dict, purchase_date: str):
    response = client.post("/v1/billing-cycle", json={"purchase_date": purchase_date, **card_policy})
    assert response.status_code == 422


@pytest.mark.parametrize("purchase_date", ["2025-13-05", "2025-00-05", "2025-02-30"])
def test_installments_endpoint_rejects_impossible_date(client: TestClient, card_policy: dict, purchase_date: str):
    response = client.post(
        "/v1/installments",
        json={"purchase_date": purchase_date, "amount": 100, "installment_count": 2, **card_policy},
    )
    assert response.status_code == 422


def test_installments_endpoint_accepts_leap_day(client: TestClient, card_policy: dict):
    response = client.post(
        "/v1/installments",
        json={"purchase_date": "2024-02-29", "amount": 100, "installment_count": 1, **card_policy},
    )

    assert response.status_code == 200
    assert response.json()["installments"][0]["installment_id"] == "2024-02-29-i1"


def test_installments_endpoint_accepts_max_count(client: TestClient, card_policy: dict):
    response = client.post(
        "/v1/installments",
        json={"purchase_date": "2025-01-05", "amount": 100, "installment_count": MAX_INSTALLMENT_COUNT, **card_policy},
    )

    assert response.status_code == 200
    assert len(response.json()["installments"]) == MAX_INSTALLMENT_COUNT


def test_installments_endpoint_rejects_count_above_max(client: TestClient, card_policy: dict):
    response = client.post(
        "/v1/installments",
        json={"purchase_date": "2025-01-05", "amount": 100, "installment_count": MAX_INSTALLMENT_COUNT + 1, **card_policy},
    )
    assert response.status_code == 422


def test_metrics_unmatched_path_uses_fixed_label(client: TestClient):
    """404 paths share one endpoint label"""
    assert client.get("/no-such-route-7f3a").status_code == 404

    metrics = client.get("/metrics").text
    assert 'endpoint="unmatched"' in metrics
    assert "no-such-route-7f3a" not in metrics
