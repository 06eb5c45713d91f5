from fastapi.testclient import TestClient

from debtplan.main import app

client = TestClient(app)


def test_health_returns_200():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["iteration_cap"] == 1200
    assert "version" in data


def test_projection_no_body_returns_422():
    response = client.post("/api/debts/projection")
    assert response.status_code == 422


def test_lifespan_starts_cleanly():
    with TestClient(app) as c:
        assert c.get("/api/health").status_code == 200
