import uuid

import pytest

from conftest import bearer, make_user


RESOURCES = [
    ("/bodyMeasurements", {"height": 170.5, "weight": 62}),
    ("/clothingDesigns", {"designName": "Summer Dress", "price": 49.5}),
    ("/userPreferences", {"preferredColors": "navy, olive"}),
]


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.parametrize("path", ["/bodyMeasurements", "/clothingDesigns", "/trendingFashions", "/userPreferences"])
def test_resources_require_authentication(client, path):
    assert client.get(path).status_code == 401
    assert client.get(path, headers={"Authorization": "Bearer not-a-jwt"}).status_code == 401


def test_inactive_user_is_rejected(client, db):
    dormant = make_user(db, "dormant@example.com", is_active=False)
    assert client.get("/clothingDesigns", headers=bearer(dormant)).status_code == 401


@pytest.mark.parametrize("path,payload", RESOURCES)
def test_crud_cycle(client, headers, path, payload):
    created = client.post(path, json=payload, headers=headers)
    assert created.status_code == 201, created.text
    body = created.json()
    record_id = body["id"]
    for key, value in payload.items():
        assert body[key] == value

    listed = client.get(path, headers=headers).json()
    assert listed["total"] == 1
    assert listed["result"][0]["id"] == record_id

    assert client.get(f"{path}/{record_id}", headers=headers).json() == body

    assert client.delete(f"{path}/{record_id}", headers=headers).status_code == 204
    missing = client.get(f"{path}/{record_id}", headers=headers)
    assert missing.status_code == 404
    assert "not found" in missing.json()["detail"]


def test_update_merges_present_fields(client, headers):
    created = client.post("/bodyMeasurements", json={"height": 1, "weight": 2, "hipSize": 90}, headers=headers).json()
    resp = client.put(f"/bodyMeasurements/{created['id']}", json={"height": 9}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["height"] == 9
    assert resp.json()["weight"] == 2
    assert resp.json()["hipSize"] == 90


def test_records_are_invisible_to_other_users(client, headers, stranger_headers):
    created = client.post("/clothingDesigns", json={"designName": "Mine"}, headers=headers).json()
    path = f"/clothingDesigns/{created['id']}"

    assert client.get("/clothingDesigns", headers=stranger_headers).json() == {"result": [], "total": 0}
    assert client.get(path, headers=stranger_headers).status_code == 404
    assert client.put(path, json={"designName": "Theirs"}, headers=stranger_headers).status_code == 404
    assert client.delete(path, headers=stranger_headers).status_code == 404
    assert client.get(path, headers=headers).json()["designName"] == "Mine"


def test_malformed_id_is_bad_request(client, headers):
    resp = client.get("/clothingDesigns/not-an-id", headers=headers)
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_id"


def test_pagination_params(client, headers):
    for i in range(15):
        client.post("/clothingDesigns", json={"designName": f"Design {i}"}, headers=headers)

    default = client.get("/clothingDesigns", headers=headers).json()
    assert default["total"] == 15
    assert len(default["result"]) == 10

    second = client.get("/clothingDesigns", params={"page": 2, "limit": 10}, headers=headers).json()
    assert len(second["result"]) == 5
    assert not {r["id"] for r in second["result"]} & {r["id"] for r in default["result"]}

    coerced = client.get("/clothingDesigns", params={"page": 0, "limit": 0}, headers=headers).json()
    assert len(coerced["result"]) == 1
    assert coerced["total"] == 15

    beyond = client.get("/clothingDesigns", params={"page": 9}, headers=headers).json()
    assert beyond == {"result": [], "total": 15}

    huge = client.get("/clothingDesigns", params={"page": 10**19}, headers=headers)
    assert huge.status_code == 400
    assert huge.json()["code"] == "invalid_page"
    assert client.get("/clothingDesigns", params={"limit": 2**40}, headers=headers).status_code == 400


def test_search_query(client, headers):
    for name in ("Red Dress", "Blue Jeans", "Dark red coat"):
        client.post("/clothingDesigns", json={"designName": name}, headers=headers)
    resp = client.get("/clothingDesigns", params={"search": "red"}, headers=headers).json()
    assert resp["total"] == 2
    assert sorted(r["designName"] for r in resp["result"]) == ["Dark red coat", "Red Dress"]


def test_dropdown_defaults_to_id(client, headers):
    created = client.post("/userPreferences", json={"preferredStyles": "minimal"}, headers=headers).json()
    resp = client.get("/userPreferences/dropdown", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == [{"id": created["id"]}]


def test_dropdown_with_fields_and_keyword(client, headers):
    for name in ("Red Dress", "Blue Jeans"):
        client.post("/clothingDesigns", json={"designName": name}, headers=headers)
    resp = client.get(
        "/clothingDesigns/dropdown",
        params={"fields": "id,designName", "keyword": "red"},
        headers=headers,
    ).json()
    assert len(resp) == 1
    assert set(resp[0]) == {"id", "designName"}
    assert resp[0]["designName"] == "Red Dress"


def test_dropdown_unknown_field(client, headers):
    resp = client.get("/clothingDesigns/dropdown", params={"fields": "userId"}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["code"] == "unknown_field"


def test_trending_fashion_with_design(client, headers, stranger_headers):
    design = client.post("/clothingDesigns", json={"designName": "Summer Dress"}, headers=headers).json()
    created = client.post(
        "/trendingFashions",
        json={
            "designId": design["id"],
            "trendStartDate": "2024-06-01",
            "trendEndDate": "2024-08-31",
            "trendDescription": "Linen everywhere",
        },
        headers=headers,
    )
    assert created.status_code == 201, created.text
    assert created.json()["design"] == {"id": design["id"], "designName": "Summer Dress"}

    # Shared across users and searchable by the design's name.
    listed = client.get("/trendingFashions", params={"search": "summer"}, headers=stranger_headers).json()
    assert listed["total"] == 1
    record = listed["result"][0]
    assert record["trendStartDate"] == "2024-06-01"
    assert record["design"]["designName"] == "Summer Dress"


def test_trending_fashion_rejects_unknown_design(client, headers):
    resp = client.post("/trendingFashions", json={"designId": str(uuid.uuid4())}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["code"] == "unknown_reference"


def test_trending_fashion_rejects_inverted_window(client, headers):
    design = client.post("/clothingDesigns", json={"designName": "Coat"}, headers=headers).json()
    resp = client.post(
        "/trendingFashions",
        json={"designId": design["id"], "trendStartDate": "2024-09-01", "trendEndDate": "2024-08-01"},
        headers=headers,
    )
    assert resp.status_code == 422


def test_trending_fashion_for_design(client, headers):
    design = client.post("/clothingDesigns", json={"designName": "Parka"}, headers=headers).json()
    other = client.post("/clothingDesigns", json={"designName": "Sandals"}, headers=headers).json()
    for target, text in ((design, "winter"), (design, "ski"), (other, "beach")):
        client.post("/trendingFashions", json={"designId": target["id"], "trendDescription": text}, headers=headers)

    resp = client.get(f"/clothingDesigns/{design['id']}/trendingFashion", headers=headers).json()
    assert resp["total"] == 2
    assert sorted(r["trendDescription"] for r in resp["result"]) == ["ski", "winter"]

    empty = client.get(f"/clothingDesigns/{uuid.uuid4()}/trendingFashion", headers=headers).json()
    assert empty == {"result": [], "total": 0}

    assert client.get("/clothingDesigns/bad/trendingFashion", headers=headers).status_code == 400


def test_validation_errors_are_unprocessable(client, headers):
    assert client.post("/bodyMeasurements", json={"weight": 60}, headers=headers).status_code == 422
    assert client.post("/clothingDesigns", json={"designName": ""}, headers=headers).status_code == 422
