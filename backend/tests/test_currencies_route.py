from fastapi.testclient import TestClient

from debtplan.config import settings
from debtplan.main import app

client = TestClient(app)


def test_currencies_returns_200():
    response = client.get("/api/currencies")
    assert response.status_code == 200
    codes = [c["code"] for c in response.json()]
    assert settings.DEFAULT_CURRENCY in codes
    assert "EUR" in codes


def test_currencies_include_display_rules():
    data = {c["code"]: c for c in client.get("/api/currencies").json()}
    assert data["USD"] == {"code": "USD", "symbol": "$", "name": "US Dollar", "decimals": 2}
    assert data["JPY"]["decimals"] == 0


def test_listed_currencies_are_accepted_by_projection():
    debt = {"current_balance": 1000.0, "interest_rate": 0.1, "minimum_payment": 100.0}
    for currency in client.get("/api/currencies").json():
        response = client.post("/api/debts/projection", json={"debt": debt, "currency": currency["code"]})
        assert response.status_code == 200, currency["code"]
