"""
HTTP tests for the resource endpoints, using FastAPI's TestClient.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from stable_store_api.app.core.config import Settings
from stable_store_api.app.main import create_app
from stable_store_api.app.schemas.donation import Donation

# One valid create payload and one partial update per resource kind.
SAMPLES = {
    "staking": ({"stakerAddress": "0xabc", "amount": 100, "currency": "ICP"}, {"amount": 150}),
    "skill-records": ({"holderName": "Ada", "skill": "Rust", "level": 3}, {"level": 4}),
    "donations": ({"amount": 10, "donorName": "Alice", "message": "hi"}, {"message": "thanks"}),
    "horoscopes": ({"sign": "Leo", "prediction": "x"}, {"prediction": "y"}),
    "products": ({"name": "Lamp", "price": 12.5}, {"price": 9.5}),
}


@pytest.mark.parametrize("resource", sorted(SAMPLES))
def test_crud_lifecycle(client, resource):
    create_body, update_body = SAMPLES[resource]

    created = client.post(f"/{resource}", json=create_body)
    assert created.status_code == 201
    record = created.json()
    assert record["id"]
    assert record["createdAt"]
    assert record["updatedAt"] is None

    fetched = client.get(f"/{resource}/{record['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == record

    updated = client.put(f"/{resource}/{record['id']}", json=update_body)
    assert updated.status_code == 200
    body = updated.json()
    for field, value in update_body.items():
        assert body[field] == value
    untouched = set(create_body) - set(update_body)
    for field in untouched:
        assert body[field] == record[field]
    assert body["id"] == record["id"]
    assert body["createdAt"] == record["createdAt"]
    assert body["updatedAt"] is not None

    listed = client.get(f"/{resource}")
    assert listed.status_code == 200
    assert listed.json() == [body]

    deleted = client.delete(f"/{resource}/{record['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == body

    assert client.get(f"/{resource}").json() == []
    assert client.get(f"/{resource}/{record['id']}").status_code == 404


def test_create_then_read_donation(client):
    resp = client.post("/donations", json={"amount": 10, "donorName": "Alice", "message": "hi"})
    assert resp.status_code == 201
    donation = resp.json()
    assert donation["amount"] == 10
    assert donation["donorName"] == "Alice"
    assert client.get(f"/donations/{donation['id']}").json() == donation


def test_read_missing_returns_404_naming_id(client):
    resp = client.get("/donations/does-not-exist")
    assert resp.status_code == 404
    assert "does-not-exist" in resp.json()["detail"]


def test_update_missing_returns_404_and_creates_nothing(client):
    resp = client.put("/products/does-not-exist", json={"price": 5})
    assert resp.status_code == 404
    assert "does-not-exist" in resp.json()["detail"]
    assert client.get("/products").json() == []


def test_delete_missing_returns_404(client):
    resp = client.delete("/staking/does-not-exist")
    assert resp.status_code == 404
    assert "does-not-exist" in resp.json()["detail"]


def test_horoscope_sign_uniqueness(client):
    first = client.post("/horoscopes", json={"sign": "Leo", "prediction": "x"})
    assert first.status_code == 201
    second = client.post("/horoscopes", json={"sign": "Leo", "prediction": "y"})
    assert second.status_code == 400
    assert "Leo" in second.json()["detail"]
    records = client.get("/horoscopes").json()
    assert [(r["sign"], r["prediction"]) for r in records] == [("Leo", "x")]


def test_horoscope_update_into_taken_sign_is_rejected(client):
    client.post("/horoscopes", json={"sign": "Leo", "prediction": "x"})
    virgo = client.post("/horoscopes", json={"sign": "virgo", "prediction": "y"}).json()
    assert virgo["sign"] == "Virgo"
    resp = client.put(f"/horoscopes/{virgo['id']}", json={"sign": "LEO"})
    assert resp.status_code == 400
    assert client.get(f"/horoscopes/{virgo['id']}").json()["sign"] == "Virgo"


def test_unknown_sign_is_rejected(client):
    resp = client.post("/horoscopes", json={"sign": "Ophiuchus", "prediction": "x"})
    assert resp.status_code == 400
    assert "sign" in resp.json()["detail"]


@pytest.mark.parametrize(
    "payload, field",
    [
        ({"donorName": "Alice", "message": "hi"}, "amount"),
        ({"amount": 10, "message": "hi"}, "donorName"),
        ({"amount": 10, "donorName": "   ", "message": "hi"}, "donorName"),
        ({"amount": 0, "donorName": "Alice", "message": "hi"}, "amount"),
        ({"amount": 10, "donorName": "Alice", "message": ""}, "message"),
    ],
)
def test_create_validation_errors(client, payload, field):
    resp = client.post("/donations", json=payload)
    assert resp.status_code == 400
    assert field in resp.json()["detail"]
    assert client.get("/donations").json() == []


def test_malformed_json_is_a_client_error(client):
    resp = client.post(
        "/donations",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400


def test_update_validation_errors_leave_record_untouched(client):
    product = client.post("/products", json={"name": "Lamp", "price": 12.5}).json()
    resp = client.put(f"/products/{product['id']}", json={"price": -1})
    assert resp.status_code == 400
    assert client.get(f"/products/{product['id']}").json() == product


def test_identity_fields_in_body_are_ignored(client):
    created = client.post(
        "/products",
        json={"id": "chosen", "createdAt": "2000-01-01T00:00:00Z", "name": "Lamp", "price": 1},
    ).json()
    assert created["id"] != "chosen"
    assert not created["createdAt"].startswith("2000")

    updated = client.put(
        f"/products/{created['id']}",
        json={"id": "other", "createdAt": "2000-01-01T00:00:00Z", "name": "Desk"},
    ).json()
    assert updated["id"] == created["id"]
    assert updated["createdAt"] == created["createdAt"]
    assert updated["name"] == "Desk"


def test_updated_at_not_before_created_at(client):
    created = client.post("/donations", json={"amount": 10, "donorName": "A", "message": "m"}).json()
    updated = client.put(f"/donations/{created['id']}", json={}).json()
    record = Donation.model_validate(updated)
    assert record.updated_at >= record.created_at
    assert record.amount == 10


def test_snake_case_input_is_accepted(client):
    resp = client.post("/staking", json={"staker_address": "0xdef", "amount": 1, "currency": "ICP"})
    assert resp.status_code == 201
    assert resp.json()["stakerAddress"] == "0xdef"


def test_unexpected_failure_returns_500(app, monkeypatch):
    def boom():
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(app.state.services["donations"].store, "scan", boom)
    with TestClient(app, raise_server_exceptions=False) as client:
        resp = client.get("/donations")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}


def test_health_reports_record_counts(client):
    client.post("/products", json={"name": "Lamp", "price": 1})
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["records"]["products"] == 1
    assert body["records"]["donations"] == 0


def test_records_persist_across_app_instances(app_settings):
    with TestClient(create_app(app_settings)) as first:
        created = first.post("/products", json={"name": "Lamp", "price": 1}).json()
    with TestClient(create_app(app_settings)) as second:
        assert second.get(f"/products/{created['id']}").json() == created


def test_api_prefix(tmp_path):
    settings = Settings(database_url=str(tmp_path / "prefixed.db"), api_prefix="/api/v1")
    with TestClient(create_app(settings)) as client:
        assert client.post("/api/v1/products", json={"name": "Lamp", "price": 1}).status_code == 201
        assert client.get("/products").status_code == 404


@pytest.mark.parametrize("raw_amount", ["1e400", "Infinity", "-Infinity", "NaN"])
def test_non_finite_amounts_are_rejected(client, raw_amount):
    body = '{"amount": %s, "donorName": "A", "message": "m"}' % raw_amount
    resp = client.post("/donations", content=body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert "amount" in resp.json()["detail"]
    listed = client.get("/donations")
    assert listed.status_code == 200
    assert listed.json() == []


def test_non_finite_price_is_rejected_on_update(client):
    product = client.post("/products", json={"name": "Lamp", "price": 12.5}).json()
    resp = client.put(
        f"/products/{product['id']}",
        content='{"price": Infinity}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert client.get("/products").json() == [product]


def test_null_clears_optional_field_but_not_required_one(client):
    product = client.post("/products", json={"name": "Lamp", "price": 12.5, "description": "Brass"}).json()
    resp = client.put(f"/products/{product['id']}", json={"description": None, "name": None})
    assert resp.status_code == 200
    body = resp.json()
    assert body["description"] is None
    assert body["name"] == "Lamp"
