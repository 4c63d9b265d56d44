from __future__ import annotations

import json

from flask.testing import FlaskClient


def plan_payload() -> dict:
    return {
        "present_value": 0,
        "periodic_contribution": 2000,
        "periods": 24,
        "target_future_value": 100000,
        "participants": 2,
    }


def test_health_reports_service(client: FlaskClient):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json == {"status": "ok", "service": "savings-goal-test"}


def test_rate_endpoint(client: FlaskClient):
    resp = client.post("/api/calc/rate", json=plan_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["solved"] is True
    assert 0.054 < body["rate"] < 0.056
    assert body["iterations"] >= 1


def test_rate_endpoint_reports_unsolved(client: FlaskClient):
    resp = client.post(
        "/api/calc/rate",
        json={"present_value": 0, "periodic_contribution": 0, "periods": 1, "target_future_value": 100},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["rate"] == 0
    assert body["solved"] is False


def test_schedule_endpoint_solves_when_rate_missing(client: FlaskClient):
    resp = client.post("/api/calc/schedule", json=plan_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body["schedule"]) == 24
    assert body["schedule"][0]["interest_earned"] == 0
    assert body["schedule"][-1]["contribution_per_participant"] == 1000
    assert abs(body["schedule"][-1]["ending_balance"] - 100000) < 1e-4


def test_schedule_endpoint_uses_given_rate(client: FlaskClient):
    payload = plan_payload()
    payload["rate"] = 0.0

    resp = client.post("/api/calc/schedule", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["rate"] == 0.0
    assert body["schedule"][-1]["ending_balance"] == 48000


def test_plan_endpoint_marks_paid_rows(client: FlaskClient):
    payload = plan_payload()
    payload["paid"] = {"1": True, "2": True, "3": False}

    resp = client.post("/api/calc/plan", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["summary"]["solved"] is True
    assert abs(body["summary"]["progress_percent"] - 100) < 1e-6
    assert [row["paid"] for row in body["schedule"][:4]] == [True, True, False, False]
    assert body["paid_total"] == 4000
    assert body["pending_total"] == 44000


def test_plan_endpoint_rejects_paid_period_out_of_range(client: FlaskClient):
    payload = plan_payload()
    payload["paid"] = {"30": True}

    resp = client.post("/api/calc/plan", json=payload)

    assert resp.status_code == 400
    body = resp.get_json()
    assert any("30" in message for message in body["error"])


def test_invalid_payload_returns_422(client: FlaskClient):
    resp = client.post("/api/calc/rate", json={"basicInfo": {}})

    assert resp.status_code == 422
    body = resp.get_json()
    assert "detail" in body


def test_sloppy_numbers_are_coerced(client: FlaskClient):
    resp = client.post(
        "/api/calc/schedule",
        json={"present_value": "", "periodic_contribution": "100", "periods": 0, "rate": 0.1},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body["schedule"]) == 1
    assert body["schedule"][0]["ending_balance"] == 100


def _strict_json(raw: bytes):
    def reject(constant: str):
        raise ValueError(f"non-finite number {constant} in response")

    return json.loads(raw, parse_constant=reject)


def test_overflowing_schedule_serializes_as_valid_json(client: FlaskClient):
    resp = client.post(
        "/api/calc/schedule",
        json={"present_value": 1, "periodic_contribution": 1, "periods": 1000, "rate": 5},
    )

    assert resp.status_code == 200
    body = _strict_json(resp.data)
    assert len(body["schedule"]) == 1000
    assert body["schedule"][-1]["ending_balance"] == 0
    assert body["schedule"][-1]["interest_earned"] == 0


def test_nan_rate_is_treated_as_zero(client: FlaskClient):
    resp = client.post(
        "/api/calc/schedule",
        data='{"periods": 2, "periodic_contribution": 1, "rate": NaN}',
        content_type="application/json",
    )

    assert resp.status_code == 200
    body = _strict_json(resp.data)
    assert body["rate"] == 0
    assert body["schedule"][-1]["ending_balance"] == 2


def test_overflowing_plan_summary_serializes_as_valid_json(client: FlaskClient):
    resp = client.post(
        "/api/calc/plan",
        json={"present_value": 1, "periodic_contribution": 1, "periods": 1000, "target_future_value": 1e300},
    )

    assert resp.status_code == 200
    _strict_json(resp.data)


def test_period_count_above_cap_returns_422(client: FlaskClient):
    resp = client.post("/api/calc/schedule", json={"periods": 1e12, "rate": 0.01})

    assert resp.status_code == 422
    assert "detail" in resp.get_json()
