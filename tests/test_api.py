"""Tests for the HTTP API"""

import pytest
from fastapi.testclient import TestClient

from storefront_cart.database import customer_db
from storefront_cart.database.customers import CUSTOMERS
from storefront_cart.engine import decode
from storefront_cart.main import app

JORDAN = {"X-Customer-Id": "1"}
GUEST = {"X-Customer-Id": "2"}
JORDAN_GUID = "8f7a3c52-1d8e-4a39-9a51-0c2b5f6e7d10"


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(customer_db, "customers", dict(CUSTOMERS))
    with TestClient(app) as client:
        yield client


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.parametrize("headers", [{}, {"X-Customer-Id": "abc"}, {"X-Customer-Id": "999"}])
def test_unknown_customer_is_rejected(client, headers):
    assert client.get("/api/cart", headers=headers).status_code == 404


def test_unknown_currency_is_rejected(client):
    response = client.get("/api/cart", headers={**JORDAN, "X-Currency": "XYZ"})

    assert response.status_code == 400


def test_get_cart(client):
    response = client.get("/api/cart", headers=JORDAN)

    assert response.status_code == 200
    cart = response.json()
    assert [item["id"] for item in cart["items"]] == [1, 2, 5]
    assert [child["id"] for child in cart["items"][1]["child_items"]] == [3, 4]
    assert cart["items"][0]["sku"] == "AUR-ANC700-SLV"
    assert cart["items"][0]["attribute_info"] == "Color: Silver [+$10.00]"
    assert cart["items"][1]["child_items"][0]["product_name"] == "Desk Lamp (Bundle Edition)"
    assert cart["items"][2]["discount"] == "$40.00"
    assert cart["delivery_times_presentation"] == "label_and_date"
    assert cart["items"][0]["delivery_time_name"] == "Ready to ship"
    assert cart["items"][2]["delivery_time_hex_value"] == "#FFFF00"
    assert cart["items"][1]["delivery_time_name"] is None
    assert cart["sub_total"] == "$957.97"
    assert cart["discount_box"]["current_code"] == "SAVE10"
    assert cart["estimate_shipping"]["state"] == "country_selected_with_states"
    assert [a["id"] for a in cart["checkout_attributes"]] == [1, 2, 3, 4, 5, 6]


def test_get_cart_in_working_currency(client):
    cart = client.get("/api/cart", headers={**JORDAN, "X-Currency": "EUR"}).json()

    assert cart["items"][2]["unit_price"] == "€210.68"


def test_get_cart_saves_query_checkout_attributes(client):
    response = client.get(
        "/api/cart",
        params={"ca_1": "102", "ca_2": "Leave at the door", "ca_3_date": "not-a-date"},
        headers=JORDAN,
    )

    assert response.status_code == 200
    stored = decode(customer_db.get_customer(1).checkout_attributes)
    assert stored.to_dict() == {1: ["102"], 2: ["Leave at the door"]}

    wrapping, instructions = response.json()["checkout_attributes"][:2]
    assert [v["is_pre_selected"] for v in wrapping["values"]] == [False, True]
    assert instructions["text_value"] == "Leave at the door"


def test_post_checkout_attributes_replaces_selection(client):
    client.get("/api/cart", params={"ca_1": "102"}, headers=JORDAN)

    response = client.post(
        "/api/cart/checkout-attributes",
        json={
            "values": [
                {"attribute_id": 4, "value": "401"},
                {"attribute_id": 4, "value": "402"},
                {"attribute_id": 3, "date": "2026-12-24"},
            ]
        },
        headers=JORDAN,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["attributes"] == {"3": ["2026-12-24"], "4": ["401", "402"]}
    assert decode(body["encoded"]).to_dict() == {3: ["2026-12-24"], 4: ["401", "402"]}
    assert decode(customer_db.get_customer(1).checkout_attributes).to_dict() == {
        3: ["2026-12-24"],
        4: ["401", "402"],
    }


def test_mini_cart_for_guest(client):
    response = client.get("/api/cart/mini", headers=GUEST)

    assert response.status_code == 200
    mini = response.json()
    assert mini["current_customer_is_guest"]
    assert mini["total_products"] == 3
    assert mini["sub_total"] == "$74.97"
    assert not mini["display_checkout_button"]


def test_own_wishlist(client):
    wishlist = client.get("/api/wishlist", headers=JORDAN).json()

    assert wishlist["is_editable"]
    assert wishlist["customer_guid"] == JORDAN_GUID
    assert [item["product_id"] for item in wishlist["items"]] == [7]


def test_shared_wishlist_is_read_only(client):
    response = client.get(f"/api/wishlist/{JORDAN_GUID}", headers=GUEST)

    assert response.status_code == 200
    assert not response.json()["is_editable"]


def test_shared_wishlist_not_found(client):
    response = client.get("/api/wishlist/00000000-0000-0000-0000-000000000000", headers=GUEST)

    assert response.status_code == 404
