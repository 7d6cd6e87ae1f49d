from __future__ import annotations

from math import isclose

import pytest
from flask.testing import FlaskClient


def calculation_payload() -> dict:
    return {
        "principal": 1000,
        "annual_rate_percent": 12,
        "years": 1,
        "contribution_amount": 100,
        "contribution_frequency": "monthly",
    }


def test_compound_endpoint_returns_total_and_breakdown(client: FlaskClient):
    resp = client.post("/api/calc/compound", json=calculation_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert isclose(body["total_future_value"], 2395.08, abs_tol=0.01)
    assert isclose(body["future_value_of_principal"], 1126.825, abs_tol=0.001)
    assert isclose(body["future_value_of_contributions"], 1268.25, abs_tol=0.001)
    assert body["total_contributed"] == 1200.0


def test_frequency_defaults_to_monthly(client: FlaskClient):
    payload = calculation_payload()
    del payload["contribution_frequency"]

    resp = client.post("/api/calc/compound", json=payload)

    assert resp.status_code == 200
    assert isclose(resp.get_json()["total_future_value"], 2395.08, abs_tol=0.01)


def test_annual_frequency(client: FlaskClient):
    payload = {
        "principal": 500,
        "annual_rate_percent": 0,
        "years": 5,
        "contribution_amount": 200,
        "contribution_frequency": "annually",
    }

    resp = client.post("/api/calc/compound", json=payload)

    assert resp.status_code == 200
    assert resp.get_json()["total_future_value"] == 1500.0


@pytest.mark.parametrize(
    "field", ["principal", "annual_rate_percent", "years", "contribution_amount"]
)
def test_missing_field_returns_422(client: FlaskClient, field: str):
    payload = calculation_payload()
    del payload[field]

    resp = client.post("/api/calc/compound", json=payload)

    assert resp.status_code == 422
    body = resp.get_json()
    assert body["error"] == "All fields are required."
    assert any(error["loc"] == [field] for error in body["detail"])


@pytest.mark.parametrize("value", ["", "abc", None])
def test_blank_or_non_numeric_field_returns_422(client: FlaskClient, value):
    payload = calculation_payload()
    payload["principal"] = value

    resp = client.post("/api/calc/compound", json=payload)

    assert resp.status_code == 422
    assert resp.get_json()["error"] == "All fields are required."


def test_negative_years_are_rejected_not_coerced(client: FlaskClient):
    payload = calculation_payload()
    payload["years"] = -1

    resp = client.post("/api/calc/compound", json=payload)

    assert resp.status_code == 422


def test_unknown_frequency_returns_422(client: FlaskClient):
    payload = calculation_payload()
    payload["contribution_frequency"] = "weekly"

    resp = client.post("/api/calc/compound", json=payload)

    assert resp.status_code == 422


def test_non_json_body_returns_400(client: FlaskClient):
    resp = client.post("/api/calc/compound", data="principal=1000", content_type="text/plain")

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "All fields are required."}


def test_schedule_endpoint(client: FlaskClient):
    payload = calculation_payload()
    payload["years"] = 3

    resp = client.post("/api/calc/compound/schedule", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert [row["year"] for row in body["schedule"]] == [0, 1, 2, 3]
    assert body["schedule"][0]["balance"] == 1000.0
    assert isclose(body["schedule"][1]["balance"], 2395.08, abs_tol=0.01)
    assert body["final_balance"] == body["schedule"][-1]["balance"]


def test_frequencies_use_default_language(client: FlaskClient):
    resp = client.get("/api/frequencies")

    assert resp.status_code == 200
    assert resp.get_json() == [
        {"value": "monthly", "label": "Mensual"},
        {"value": "annually", "label": "Anual"},
    ]


def test_frequencies_in_english(client: FlaskClient):
    resp = client.get("/api/frequencies?lang=en")

    assert [option["label"] for option in resp.get_json()] == ["Monthly", "Annually"]


def test_unknown_language_falls_back_to_default(client: FlaskClient):
    resp = client.get("/api/frequencies?lang=fr")

    assert [option["label"] for option in resp.get_json()] == ["Mensual", "Anual"]


@pytest.mark.parametrize("field", ["principal", "contribution_amount"])
def test_negative_amount_returns_422(client: FlaskClient, field: str):
    payload = calculation_payload()
    payload[field] = -1

    resp = client.post("/api/calc/compound", json=payload)

    assert resp.status_code == 422
    assert any(error["loc"] == [field] for error in resp.get_json()["detail"])


@pytest.mark.parametrize(
    "field, value",
    [
        ("annual_rate_percent", "NaN"),
        ("principal", "Infinity"),
        ("contribution_amount", "-inf"),
        ("principal", True),
        ("years", True),
        ("annual_rate_percent", False),
    ],
)
def test_non_finite_or_boolean_numbers_return_422(client: FlaskClient, field: str, value):
    payload = calculation_payload()
    payload[field] = value

    resp = client.post("/api/calc/compound", json=payload)

    assert resp.status_code == 422
    assert resp.get_json()["error"] == "All fields are required."


@pytest.mark.parametrize("url", ["/api/calc/compound", "/api/calc/compound/schedule"])
def test_years_above_limit_return_422(client: FlaskClient, url: str):
    payload = calculation_payload()
    payload["years"] = 100_000_000

    resp = client.post(url, json=payload)

    assert resp.status_code == 422
    assert any(error["loc"] == ["years"] for error in resp.get_json()["detail"])


@pytest.mark.parametrize("url", ["/api/calc/compound", "/api/calc/compound/schedule"])
def test_result_too_large_for_json_returns_422(client: FlaskClient, url: str):
    payload = calculation_payload()
    payload["years"] = 1000
    payload["annual_rate_percent"] = 1000

    resp = client.post(url, json=payload)

    assert resp.status_code == 422
    assert resp.get_json() == {"error": "The projected value is too large to represent."}
