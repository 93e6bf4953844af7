"""Integration tests for API endpoints"""
import pytest
import sys
import os

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from fastapi.testclient import TestClient

from pv_calculator.api.main import app
from pv_calculator.services.export import EXPORT_COLUMNS

PARAMS = {
    "car_price": 6_500_000,
    "deposit": 200_000,
    "rate_at_zero": 3900,
    "diff_under_15": 200,
    "days_in_month": 30.5,
    "months": 55,
}

ROWS = [
    {"id": 1, "pv": 0},
    {"id": 2, "pv": 500_000},
    {"id": 3, "pv": 800_000},
    {"id": 4, "pv": 1_000_000},
]


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "online"


def test_defaults(client):
    response = client.get("/defaults")
    assert response.status_code == 200
    data = response.json()
    assert data["params"]["months"] == 55
    assert data["params"]["days_in_month"] == 30.5
    assert len(data["pv_values"]) == 4


def test_calculate(client):
    response = client.post("/calculate", json={"params": PARAMS, "rows": ROWS})
    assert response.status_code == 200

    data = response.json()
    rows = data["rows"]
    assert [r["id"] for r in rows] == [1, 2, 3, 4]
    assert rows[0]["total_buyout"] == 6_542_250
    assert rows[0]["check_status"] == "good"
    assert rows[3]["rate_over_15_rounded"] == 2850
    assert rows[3]["rate_under_15_rounded"] == 3050
    assert len(data["warnings"]) == 2


def test_calculate_overflow_is_sent_as_null(client):
    params = {**PARAMS, "rate_at_zero": 1e307}
    response = client.post("/calculate", json={"params": params, "rows": [{"id": 1, "pv": 0}]})
    assert response.status_code == 200

    data = response.json()
    row = data["rows"][0]
    assert row["id"] == 1
    assert row["total_buyout"] is None
    assert row["rate_over_15"] is None
    assert row["check_status"] == "bad"
    assert any("invalid figures" in w for w in data["warnings"])


@pytest.mark.parametrize("field, value", [
    ("days_in_month", 0),
    ("months", 0),
    ("car_price", -1),
    ("rate_at_zero", 0),
])
def test_calculate_rejects_contract_violations(client, field, value):
    params = {**PARAMS, field: value}
    response = client.post("/calculate", json={"params": params, "rows": ROWS})
    assert response.status_code == 422


def test_quote_text(client):
    response = client.post("/api/quote", json={
        "params": PARAMS,
        "rows": ROWS[:1],
        "client_name": "Иван",
        "car_model": "Toyota Camry",
    })
    assert response.status_code == 200

    text = response.json()["text"]
    assert text.startswith("Необходимо отправить расчет клиенту Иван")
    assert "Toyota Camry" in text
    assert text.count("ПВ ") == 1


def test_quote_text_without_rows(client):
    response = client.post("/api/quote", json={
        "params": PARAMS,
        "rows": [],
        "client_name": "Иван",
        "car_model": "Toyota Camry",
    })
    assert response.status_code == 200
    assert response.json()["text"] == ""


def test_export_csv(client):
    response = client.post("/api/quote/export", json={
        "params": PARAMS,
        "rows": ROWS,
        "client_name": "Иван",
        "car_model": "Toyota Camry",
    })
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")

    lines = response.text.splitlines()
    assert lines[0] == ",".join(EXPORT_COLUMNS)
    assert len(lines) == 5
