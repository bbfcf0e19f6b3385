from unittest.mock import AsyncMock, MagicMock

import pytest
from dependency_injector import providers


def save(client, user_id, amount, **overrides):
    body = {
        "userId": user_id,
        "fromCurrency": "USD",
        "toCurrency": "EUR",
        "amount": amount,
        "result": round(amount * 0.85, 2),
    }
    body.update(overrides)
    return client.post("/conversions", json=body)


def test_create_conversion_coerces_user_id(client):
    response = save(client, "5", 100, rate=0.85)

    assert response.status_code == 201
    body = response.json()
    assert body["userId"] == 5
    assert body["fromCurrency"] == "USD"
    assert body["toCurrency"] == "EUR"
    assert body["amount"] == 100
    assert body["result"] == 85
    assert body["rate"] == 0.85
    assert body["createdAt"] is not None
    assert "timestamp" not in body
    assert isinstance(body["id"], int)


def test_create_conversion_ignores_unexpected_fields(client):
    response = save(client, 5, 10, id=1234, createdAt="1999-01-01T00:00:00Z")

    assert response.status_code == 201
    assert response.json()["id"] != 1234


def test_create_conversion_with_non_numeric_user_id(client):
    response = save(client, "abc", 10)

    assert response.status_code == 400
    assert response.json()["error"] == "Validation Error"


@pytest.mark.parametrize("user_id, expected", [("12abc", 12), (5.5, 5), (" 7", 7)])
def test_create_conversion_reads_user_id_leniently(client, user_id, expected):
    response = save(client, user_id, 10)

    assert response.status_code == 201
    assert response.json()["userId"] == expected


def test_create_conversion_failure_returns_generic_500(app, client):
    failing = MagicMock()
    failing.save_conversion = AsyncMock(side_effect=RuntimeError("disk full"))
    app.container.services.conversion_service.override(providers.Object(failing))

    try:
        response = save(client, 5, 10)
    finally:
        app.container.services.conversion_service.reset_override()

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to save conversion"


def test_list_conversions_paginates_newest_first(client):
    for amount in range(1, 8):
        assert save(client, 5, amount).status_code == 201
    for amount in (100, 200):
        assert save(client, 6, amount).status_code == 201

    response = client.get("/conversions", params={"userId": "5", "page": "2", "pageSize": "3"})

    assert response.status_code == 200
    body = response.json()
    assert [item["amount"] for item in body["items"]] == [4, 3, 2]
    assert all(item["userId"] == 5 for item in body["items"])
    assert body["total"] == 7
    assert body["page"] == 2
    assert body["pageSize"] == 3
    assert body["totalPages"] == 3


def test_list_conversions_last_page_is_partial(client):
    for amount in range(1, 8):
        save(client, 5, amount)

    body = client.get("/conversions", params={"userId": 5, "page": 3, "pageSize": 3}).json()

    assert [item["amount"] for item in body["items"]] == [1]


def test_list_conversions_defaults(client):
    for amount in range(1, 13):
        save(client, 9, amount)

    body = client.get("/conversions", params={"userId": 9}).json()

    assert body["page"] == 1
    assert body["pageSize"] == 10
    assert len(body["items"]) == 10
    assert body["totalPages"] == 2


def test_list_conversions_unparseable_paging_falls_back_to_defaults(client):
    save(client, 5, 1)

    body = client.get(
        "/conversions", params={"userId": "5", "page": "abc", "pageSize": "0"}
    ).json()

    assert body["page"] == 1
    assert body["pageSize"] == 10
    assert len(body["items"]) == 1


def test_list_conversions_for_user_without_history(client):
    body = client.get("/conversions", params={"userId": 42}).json()

    assert body == {"items": [], "total": 0, "page": 1, "pageSize": 10, "totalPages": 0}


def test_list_conversions_requires_user_id(client):
    response = client.get("/conversions")

    assert response.status_code == 400
    assert "error" in response.json()


def test_list_conversions_failure_returns_generic_500(app, client):
    failing = MagicMock()
    failing.get_conversions = AsyncMock(side_effect=RuntimeError("timeout"))
    app.container.services.conversion_service.override(providers.Object(failing))

    try:
        response = client.get("/conversions", params={"userId": 5})
    finally:
        app.container.services.conversion_service.reset_override()

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to fetch conversions"


@pytest.mark.parametrize("page_size", ["99999999999999999999", "101", "5000"])
def test_list_conversions_caps_page_size(client, page_size):
    for amount in range(1, 4):
        save(client, 5, amount)

    response = client.get("/conversions", params={"userId": 5, "pageSize": page_size})

    assert response.status_code == 200
    body = response.json()
    assert body["pageSize"] == 100
    assert body["totalPages"] == 1
    assert len(body["items"]) == 3


def test_list_conversions_caps_page(client):
    save(client, 5, 1)

    response = client.get("/conversions", params={"userId": 5, "page": "99999999999999999999"})

    assert response.status_code == 200
    body = response.json()
    assert body["page"] == 2**31 - 1
    assert body["items"] == []
    assert body["total"] == 1
