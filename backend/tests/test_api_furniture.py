"""API tests for furniture requests."""

from __future__ import annotations

import time

from fastapi.testclient import TestClient

COMMERCIAL = "Commercial Furniture"
RESIDENTIAL = "Residential Furniture"


def _furniture(**overrides) -> dict:
    payload = {
        "name": "Nadia Islam",
        "email": "Nadia@Example.com",
        "phone": "01911 000 000",
        "furnitureType": RESIDENTIAL,
        "paymentType": "EMI Plan",
        "furnitureCondition": "New Furniture",
    }
    payload.update(overrides)
    return payload


def _create(client: TestClient, **overrides) -> dict:
    resp = client.post("/furniture", json=_furniture(**overrides))
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_is_public(client: TestClient) -> None:
    body = _create(client)
    assert body["email"] == "nadia@example.com"
    assert body["phone"] == "01911000000"
    assert body["furnitureType"] == RESIDENTIAL


def test_create_rejects_unknown_type(client: TestClient) -> None:
    resp = client.post("/furniture", json=_furniture(furnitureType="Garden"))
    assert resp.status_code == 400


def test_list_paginates(client: TestClient) -> None:
    for i in range(3):
        _create(client, name=f"Customer {i}")

    body = client.get("/furniture", params={"page": 2, "limit": 2}).json()
    assert len(body["data"]) == 1
    assert body["meta"] == {
        "currentPage": 2,
        "totalPages": 2,
        "totalItems": 3,
        "itemsPerPage": 2,
        "hasNextPage": False,
        "hasPreviousPage": True,
    }


def test_list_sorting(client: TestClient) -> None:
    for name in ("Charlie", "Alpha", "Bravo"):
        _create(client, name=name)

    body = client.get("/furniture", params={"sortBy": "name", "sortOrder": "asc"}).json()
    assert [i["name"] for i in body["data"]] == ["Alpha", "Bravo", "Charlie"]


def test_list_rejects_bad_params(client: TestClient) -> None:
    assert client.get("/furniture", params={"limit": 0}).status_code == 400
    assert client.get("/furniture", params={"sortBy": "email"}).status_code == 400


def test_stats(client: TestClient) -> None:
    _create(client, furnitureType=COMMERCIAL)
    _create(client, furnitureType=RESIDENTIAL)
    _create(client, furnitureType=RESIDENTIAL)

    assert client.get("/furniture/stats").json() == {
        "total": 3,
        "commercial": 1,
        "residential": 2,
    }


def test_update_and_delete_require_token(client: TestClient, auth_headers) -> None:
    item = _create(client)
    path = f"/furniture/{item['id']}"

    assert client.put(path, json={"paymentType": "Lease"}).status_code == 401
    assert client.delete(path).status_code == 401

    resp = client.put(path, json={"paymentType": "Lease"}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["paymentType"] == "Lease"
    assert resp.json()["name"] == "Nadia Islam"

    resp = client.delete(path, headers=auth_headers)
    assert resp.json()["success"] is True
    assert client.get(path).status_code == 404


def test_update_null_handling(client: TestClient, auth_headers) -> None:
    item = _create(client)
    path = f"/furniture/{item['id']}"

    resp = client.put(path, json={"furnitureType": None}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["details"][0]["field"] == "furnitureType"

    resp = client.put(path, json={"paymentType": None}, headers=auth_headers)
    assert resp.status_code == 200, resp.text
    assert "paymentType" not in resp.json()
    assert resp.json()["furnitureType"] == RESIDENTIAL


def test_long_malformed_email_is_rejected_quickly(client: TestClient) -> None:
    started = time.perf_counter()
    resp = client.post("/furniture", json=_furniture(email="a" * 40 + "!"))
    assert resp.status_code == 400
    assert resp.json()["details"][0]["field"] == "email"
    assert time.perf_counter() - started < 1.0
