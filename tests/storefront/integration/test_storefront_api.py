"""Integration tests for the product, cart and checkout endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean import current_domain
from storefront.api.errors import register_exception_handlers
from storefront.api.routes import cart_router, checkout_router, product_router
from storefront.catalogue.product import Product


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(product_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)
    register_exception_handlers(app)
    return TestClient(app)


def _add(client, product_id=1, quantity=1):
    response = client.post("/cart", json={"productId": product_id, "quantity": quantity})
    assert response.status_code == 200
    return response.json()


class TestProductEndpoints:
    def test_list_products(self, client):
        response = client.get("/products")
        assert response.status_code == 200

        products = response.json()
        assert [p["id"] for p in products] == list(range(1, 9))
        assert products[0] == {
            "id": 1,
            "name": "Wireless Headphones",
            "price": 79.99,
            "image": products[0]["image"],
            "description": "Premium sound quality",
        }

    def test_get_product(self, client):
        response = client.get("/products/6")
        assert response.status_code == 200
        assert response.json()["name"] == "Webcam HD"

    def test_get_unknown_product(self, client):
        response = client.get("/products/999")
        assert response.status_code == 404
        assert "error" in response.json()


class TestAddToCartEndpoint:
    def test_add_item(self, client):
        assert _add(client, 1, 2) == {"id": 1, "productId": 1, "quantity": 2}

    def test_add_merges(self, client):
        _add(client, 1, 2)
        assert _add(client, 1, 3) == {"id": 1, "productId": 1, "quantity": 5}

    def test_unknown_product(self, client):
        response = client.post("/cart", json={"productId": 999, "quantity": 1})
        assert response.status_code == 404
        assert response.json() == {"error": "Product 999 not found"}

    @pytest.mark.parametrize(
        "body",
        [
            {"productId": 1, "quantity": 0},
            {"productId": 1, "quantity": -2},
            {"productId": 1, "quantity": 1.5},
            {"productId": 1, "quantity": "2"},
            {"productId": 1},
            {"quantity": 1},
            {"productId": "abc", "quantity": 1},
        ],
    )
    def test_invalid_body(self, client, body):
        response = client.post("/cart", json=body)
        assert response.status_code == 400
        assert isinstance(response.json()["error"], str)

        assert client.get("/cart").json() == {"items": [], "total": 0.0}


class TestGetCartEndpoint:
    def test_empty_cart(self, client):
        response = client.get("/cart")
        assert response.status_code == 200
        assert response.json() == {"items": [], "total": 0.0}

    def test_priced_cart(self, client):
        _add(client, 1, 3)
        _add(client, 7, 1)

        body = client.get("/cart").json()
        assert body["total"] == 274.96

        first = body["items"][0]
        assert first["id"] == first["lineId"] == 1
        assert first["productId"] == 1
        assert first["name"] == "Wireless Headphones"
        assert first["price"] == 79.99
        assert first["quantity"] == 3
        assert first["subtotal"] == 239.97
        assert "image" in first

    def test_integrity_fault(self, client):
        _add(client, 2, 1)
        repo = current_domain.repository_for(Product)
        repo._dao.delete(repo.get(2))

        response = client.get("/cart")
        assert response.status_code == 500
        assert "unknown product 2" in response.json()["error"]


class TestUpdateQuantityEndpoint:
    def test_update(self, client):
        line = _add(client, 3, 1)

        response = client.put(f"/cart/{line['id']}", json={"quantity": 4})
        assert response.status_code == 200
        assert response.json() == {"id": line["id"], "quantity": 4}

    def test_zero_rejected(self, client):
        line = _add(client, 3, 2)

        response = client.put(f"/cart/{line['id']}", json={"quantity": 0})
        assert response.status_code == 400
        assert client.get("/cart").json()["items"][0]["quantity"] == 2

    def test_missing_quantity(self, client):
        line = _add(client, 3, 2)
        response = client.put(f"/cart/{line['id']}", json={})
        assert response.status_code == 400

    def test_unknown_line(self, client):
        response = client.put("/cart/42", json={"quantity": 1})
        assert response.status_code == 404
        assert response.json() == {"error": "Cart item 42 not found"}

    def test_non_numeric_line_id(self, client):
        response = client.put("/cart/abc", json={"quantity": 1})
        assert response.status_code == 400


class TestRemoveEndpoint:
    def test_remove(self, client):
        line = _add(client, 5, 2)

        response = client.delete(f"/cart/{line['id']}")
        assert response.status_code == 200
        assert response.json() == {"id": line["id"]}
        assert client.get("/cart").json()["items"] == []

    def test_unknown_line(self, client):
        response = client.delete("/cart/9")
        assert response.status_code == 404


class TestCheckoutEndpoint:
    def test_checkout(self, client):
        _add(client, 1, 3)
        cart = client.get("/cart").json()

        response = client.post(
            "/checkout",
            json={"cartItems": cart["items"], "name": "Ada Lovelace", "email": "ada@example.com"},
        )
        assert response.status_code == 201

        receipt = response.json()
        assert receipt["orderId"]
        assert receipt["customerName"] == "Ada Lovelace"
        assert receipt["customerEmail"] == "ada@example.com"
        assert receipt["total"] == 239.97
        assert receipt["items"] == cart["items"]
        assert receipt["timestamp"]

        # The cart survives checkout
        assert client.get("/cart").json()["items"] == cart["items"]

    def test_empty_cart_rejected(self, client):
        response = client.post("/checkout", json={"cartItems": [], "name": "Ada", "email": "ada@example.com"})
        assert response.status_code == 400
        assert response.json() == {"error": "Cart is empty"}

    def test_invalid_email_rejected(self, client):
        response = client.post(
            "/checkout",
            json={"cartItems": [{"price": 1.0, "quantity": 1}], "name": "Ada", "email": "nope"},
        )
        assert response.status_code == 400
        assert "error" in response.json()


class TestCartWalkthrough:
    def test_add_merge_update_remove(self, client):
        assert client.post("/cart", json={"productId": 1, "quantity": 1}).json() == {
            "id": 1,
            "productId": 1,
            "quantity": 1,
        }
        assert client.post("/cart", json={"productId": 1, "quantity": 2}).json()["quantity"] == 3

        cart = client.get("/cart").json()
        assert cart["items"][0]["subtotal"] == 239.97
        assert cart["total"] == 239.97

        client.put("/cart/1", json={"quantity": 1})
        assert client.get("/cart").json()["total"] == 79.99

        client.delete("/cart/1")
        assert client.get("/cart").json() == {"items": [], "total": 0.0}

    def test_reading_the_cart_is_idempotent(self, client):
        _add(client, 6, 2)
        assert client.get("/cart").json() == client.get("/cart").json()


class TestOversizedValues:
    def test_huge_quantity_rejected_and_cart_still_readable(self, client):
        response = client.post("/cart", json={"productId": 1, "quantity": 10**30})
        assert response.status_code == 400

        cart = client.get("/cart")
        assert cart.status_code == 200
        assert cart.json() == {"items": [], "total": 0.0}

    def test_merge_past_line_limit_rejected(self, client):
        _add(client, 1, 9999)

        response = client.post("/cart", json={"productId": 1, "quantity": 1})
        assert response.status_code == 400

        cart = client.get("/cart").json()
        assert cart["items"][0]["quantity"] == 9999
        assert cart["total"] == 799820.01

    def test_huge_update_rejected(self, client):
        line = _add(client, 1, 1)
        response = client.put(f"/cart/{line['id']}", json={"quantity": 10**30})
        assert response.status_code == 400
        assert client.get("/cart").status_code == 200

    @pytest.mark.parametrize("price", [1e27, "1e40"])
    def test_checkout_with_huge_price_rejected(self, client, price):
        response = client.post(
            "/checkout",
            json={"cartItems": [{"price": price, "quantity": 1}], "name": "Ada", "email": "ada@example.com"},
        )
        assert response.status_code == 400
        assert "invalid price" in response.json()["error"]
