"""
E2E tests walking player personas through a session against the API.

Personas:
- founder: opens a venture on a small loan, pays it down, sells a stake
- mogul: poor credit, falls behind on an emergency loan
- tycoon: runs a film studio on autopilot advice and saves progress
"""

import pytest
from fastapi.testclient import TestClient


def test_founder_bootstraps_with_small_loan(client: TestClient):
    """
    founder: 690 credit, $5K cash
    Expected: qualifies for a small loan, founds a food truck, exits 20% fee-free
    """
    cash = 5_000

    loan = client.post(
        "/v1/loans",
        json={"loan_type": "small", "amount": 25_000, "credit_score": 690},
    ).json()
    cash += loan["amount"]

    company = client.post(
        "/v1/companies",
        json={"industry_id": "food-truck", "name": "Rolling Tacos", "cash": cash},
    ).json()
    cash -= company["market_value"]
    assert cash == 5_000

    for _ in range(3):
        repayment = client.post("/v1/loans/repay", json={"loan": loan}).json()
        loan = repayment["loan"]
        cash -= repayment["amount_paid"]

    assert loan["remaining_payments"] == 9
    assert loan["progress"] == 25

    holding = {
        "id": company["id"],
        "kind": "venture",
        "market_value": company["market_value"],
        "shares_owned": company["shares_owned"],
        "current_income": company["current_income"],
    }
    trade = client.post("/v1/trades/sell", json={"holding": holding, "percentage": 20}).json()

    assert trade["fee"] == 0
    assert trade["cash_delta"] == pytest.approx(5_000)
    assert trade["shares_after"] == 80
    assert trade["buy_steps"] == [5, 10, 20]


def test_mogul_with_poor_credit_defaults(client: TestClient):
    """
    mogul: 520 credit
    Expected: locked out of bank loans, emergency loan at a penalty rate, default after 3 misses
    """
    for loan_type in ("small", "medium", "large"):
        response = client.post(
            "/v1/loans",
            json={"loan_type": loan_type, "amount": 50_000, "credit_score": 520},
        )
        assert response.status_code == 422
        assert response.json()["detail"]["code"] == "credit-too-low"

    quote = client.post(
        "/v1/loans/quote",
        json={"loan_type": "emergency", "amount": 10_000, "credit_score": 520},
    ).json()
    assert quote["adjusted_interest_rate"] > 0.18

    loan = client.post(
        "/v1/loans",
        json={"loan_type": "emergency", "amount": 10_000, "credit_score": 520},
    ).json()

    for _ in range(3):
        loan = client.post("/v1/loans/missed-payment", json={"loan": loan}).json()

    assert loan["status"] == "defaulted"
    summary = client.post("/v1/loans/summary", json={"loans": [loan]}).json()
    assert summary["active_loans"] == 0


def test_tycoon_follows_autopilot_and_saves(client: TestClient):
    """
    tycoon: $20.1M cash, default autopilot settings
    Expected: autopilot suggests a $4M movie, release is a hit, save shows up in the list
    """
    cash = 20_100_000
    settings = client.get("/v1/auto-investment/defaults").json()
    plan = client.post(
        "/v1/auto-investment/plan",
        json={"settings": settings, "current_cash": cash},
    ).json()

    assert plan["project_type"] == "movie"
    assert plan["budget"] == pytest.approx(4_000_000)
    assert plan["recommended_label"] == "Independent Film"

    started = client.post(
        "/v1/productions",
        json={
            "company_id": "studio-1",
            "project_type": plan["project_type"],
            "budget": plan["budget"],
            "cash": cash,
            "is_auto_generated": True,
        },
    ).json()
    cash -= started["project"]["budget"]
    assert started["project"]["is_auto_generated"] is True

    # Production wrapped
    started["project"]["release_date"] = "2020-01-01T00:00:00+00:00"
    released = client.post(
        "/v1/productions/release",
        json={"project": started["project"], "gross_earnings": 24_000_000},
    ).json()
    cash += released["project"]["gross_earnings"]
    assert released["outcome"] == "Blockbuster"

    response = client.put(
        "/v1/saves/main",
        json={"name": "Main Save", "cash": cash, "play_time": 900},
    )
    assert response.status_code == 200

    slots = client.get("/v1/saves").json()["slots"]
    assert len(slots) == 1
    assert slots[0]["net_worth"] == pytest.approx(40_100_000)
