from __future__ import annotations

from fastapi.testclient import TestClient

from canvas_app.main import app
from canvas_app.sample_data import build_sample_canvas


client = TestClient(app)

REFERENCE_CANVAS = {
    "equipment": [{"unit_value": 1_200_000, "quantity": 1, "lifespan": 60}],
    "products": [{"price": 10_000, "monthly_quantity": 50}],
    "growth_rate": 15,
}


def test_health():
    assert client.get("/health").json() == {"status": "ok"}


def test_run_inline_canvas():
    response = client.post("/run", json={"canvas": REFERENCE_CANVAS})
    assert response.status_code == 200
    result = response.json()["result"]
    assert result["metrics"]["break_even_months"] == 3
    assert len(result["projections"]) == 3
    assert result["projections"][0]["profit"] == 5_760_000


def test_run_with_growth_override():
    response = client.post("/run", json={"canvas": REFERENCE_CANVAS, "growth_rate": 0})
    projections = response.json()["result"]["projections"]
    assert projections[2]["revenue"] == 6_000_000
    assert projections[2]["expenses"] == 240_000


def test_register_and_run_stored_canvas():
    created = client.post("/canvases", json={"canvas": build_sample_canvas().model_dump(mode="json")})
    canvas_id = created.json()["canvas_id"]

    assert canvas_id in client.get("/canvases").json()["canvases"]
    response = client.get(f"/canvases/{canvas_id}")
    assert response.status_code == 200
    assert response.json()["result"]["tax"]["tax_rate"] == 33
    assert response.json()["result"]["projections"][0]["period_start"] == "2025-01-01"

    cloned = client.post("/canvases", json={"clone_from": canvas_id}).json()["canvas_id"]
    assert cloned != canvas_id
    run = client.post("/run", json={"canvas_id": cloned}).json()["result"]
    assert run["metrics"]["break_even_months"] == 57


def test_blank_canvas_uses_defaults():
    canvas_id = client.post("/canvases", json={}).json()["canvas_id"]
    result = client.get(f"/canvases/{canvas_id}").json()["result"]
    assert result["metrics"]["break_even_months"] == 999
    assert result["tax"]["region_id"] == "cameroon"


def test_unknown_canvas_is_404():
    assert client.get("/canvases/missing").status_code == 404
    assert client.post("/run", json={"canvas_id": "missing"}).status_code == 404
    assert client.post("/canvases", json={"clone_from": "missing"}).status_code == 404


def test_depreciation_endpoint():
    response = client.post("/depreciation", json={"unit_value": 600_000, "quantity": 2, "lifespan": 0})
    assert response.json()["result"] == {"monthly": 0.0, "semi_annual": 0.0}


def test_tax_regions():
    zones = client.get("/tax-regions").json()["zones"]
    assert [r["id"] for r in zones["Europe"]] == ["uk", "france", "germany", "netherlands"]

    assert client.get("/tax-regions/ghana").json()["corporate_tax_rate"] == 25
    assert client.get("/tax-regions/atlantis").status_code == 404
