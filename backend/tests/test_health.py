from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


def test_health_ok():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


def test_cart_requires_authentication():
    r = client.get("/cart")
    assert r.status_code in (401, 403)
