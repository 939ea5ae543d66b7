from __future__ import annotations

from flask.testing import FlaskClient

from firecalc.app import create_app
from firecalc.config import AppConfig


def coast_payload(**overrides) -> dict:
    payload = {
        "currentAge": 30,
        "retirementAge": 50,
        "annualSpending": 40000,
        "currentAssets": 200000,
        "monthlyContributions": 1000,
        "investmentRate": 0.07,
        "inflationRate": 0.03,
        "withdrawalRate": 0.04,
    }
    payload.update(overrides)
    return payload


def test_coast_fire_single_result(client: FlaskClient):
    resp = client.post("/api/calc/coast-fire", json=coast_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["yearsToRetirement"] == 20
    assert len(body["projectedGrowth"]) == 21
    assert set(body["projectedGrowth"][0]) == {"age", "netWorth", "coastFireRequired"}


def test_coast_fire_range_analysis_returns_three_scenarios(client: FlaskClient):
    resp = client.post(
        "/api/calc/coast-fire",
        json=coast_payload(enableRangeAnalysis=True, rateRange=0.02),
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert set(body) == {"conservative", "expected", "optimistic"}
    assert body["expected"]["investmentRate"] == 0.07


def test_scenarios_endpoint_uses_configured_clamp():
    app = create_app(AppConfig(log_level="WARNING", scenario_max_rate=0.10))
    with app.test_client() as client:
        resp = client.post(
            "/api/calc/coast-fire/scenarios",
            json=coast_payload(investmentRate=0.09, rateRange=0.03),
        )

    assert resp.status_code == 200
    assert resp.get_json()["optimistic"]["investmentRate"] == 0.10


def test_coast_fire_domain_errors_list_every_field(client: FlaskClient):
    resp = client.post(
        "/api/calc/coast-fire",
        json=coast_payload(currentAge=90, annualSpending=0),
    )

    assert resp.status_code == 400
    fields = {error["field"] for error in resp.get_json()["error"]}
    assert {"currentAge", "retirementAge", "annualSpending"} <= fields


def test_malformed_payload_returns_detail(client: FlaskClient):
    resp = client.post("/api/calc/coast-fire", json={"currentAge": "thirty"})

    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_unknown_fields_are_rejected(client: FlaskClient):
    resp = client.post("/api/calc/growth-rate", json={
        "startingAmount": 1, "endingAmount": 2, "numberOfYears": 1, "currency": "USD",
    })

    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_traditional_fire_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/calc/traditional-fire",
        json={
            "yearlySpending": 40000,
            "monthlyInvestments": 3000,
            "currentInvestedAssets": 100000,
            "expectedReturnRate": 0.07,
            "inflationRate": 0.03,
            "safeWithdrawalRate": 0.04,
        },
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["timeToFire"]["achievable"] is True
    assert body["projectionData"][0] == {"year": 0, "portfolioValue": 100000}


def test_traditional_fire_rejects_low_return(client: FlaskClient):
    resp = client.post(
        "/api/calc/traditional-fire",
        json={
            "yearlySpending": 40000,
            "monthlyInvestments": 3000,
            "currentInvestedAssets": 100000,
            "expectedReturnRate": 0.03,
            "inflationRate": 0.03,
            "safeWithdrawalRate": 0.04,
        },
    )

    assert resp.status_code == 400
    assert resp.get_json()["error"][0]["field"] == "expectedReturnRate"


def test_mortgage_endpoint_serialises_milestones(client: FlaskClient):
    resp = client.post(
        "/api/calc/mortgage",
        json={
            "netMonthlyIncome": 6000,
            "monthlyMortgagePayment": 1800,
            "mortgageLength": 30,
            "salaryIncreaseRate": 0.03,
        },
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["milestones"] == {"30": 0, "25": 7, "20": 14}
    assert len(body["dataPoints"]) == 31


def test_growth_rate_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/calc/growth-rate",
        json={"startingAmount": 10000, "endingAmount": 20000, "numberOfYears": 5},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert round(body["annualGrowthRate"], 2) == 14.87
    assert body["classification"] == "exceptional"
    assert body["isExceptionalGrowth"] is False


def test_growth_rate_overflow_is_a_client_error(client: FlaskClient):
    resp = client.post(
        "/api/calc/growth-rate",
        json={"startingAmount": 1, "endingAmount": 100000, "numberOfYears": 0.01},
    )

    assert resp.status_code == 400
    assert resp.get_json()["error"][0]["field"] == "numberOfYears"


def test_non_finite_numbers_are_rejected(client: FlaskClient):
    resp = client.post(
        "/api/calc/mortgage",
        json={
            "netMonthlyIncome": 6000,
            "monthlyMortgagePayment": 1800,
            "mortgageLength": 30,
            "salaryIncreaseRate": float("nan"),
        },
    )

    assert resp.status_code == 400
    assert "detail" in resp.get_json()
