"""Integration tests for the assembled application: prefix, lifespan and error handling."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def app():
    from app import app

    return app


class TestHealth:
    def test_health(self, app):
        response = TestClient(app).get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "domain": {"name": "storefront"}}


class TestApiPrefix:
    def test_routes_are_served_under_api(self, app):
        client = TestClient(app)
        assert client.get("/api/products").status_code == 200
        assert client.get("/products").status_code == 404

    def test_cart_round_trip(self, app):
        client = TestClient(app)
        response = client.post("/api/cart", json={"productId": 2, "quantity": 1})
        assert response.status_code == 200

        cart = client.get("/api/cart").json()
        assert cart["total"] == 199.99


class TestLifespan:
    def test_startup_seeding_is_idempotent(self, app):
        with TestClient(app) as client:
            products = client.get("/api/products").json()
        assert len(products) == 8

    @pytest.fixture()
    def seed_calls(self, monkeypatch):
        from storefront.catalogue import registration

        calls = []
        monkeypatch.setattr(registration, "seed_catalogue", lambda products=None: calls.append(products) or 0)
        return calls

    def test_startup_seeds_the_catalogue(self, app, seed_calls, monkeypatch):
        monkeypatch.delenv("STOREFRONT_SEED_CATALOGUE", raising=False)
        with TestClient(app):
            pass
        assert seed_calls == [None]

    @pytest.mark.parametrize("value", ["0", "false", "no", "FALSE"])
    def test_seeding_can_be_disabled(self, app, seed_calls, monkeypatch, value):
        monkeypatch.setenv("STOREFRONT_SEED_CATALOGUE", value)
        with TestClient(app) as client:
            assert client.get("/health").status_code == 200
        assert seed_calls == []


class TestUnexpectedErrors:
    def test_unhandled_exception_becomes_500(self, app, monkeypatch):
        from storefront.cart import service as cart_service

        def boom():
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(cart_service, "get_cart", boom)

        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/api/cart")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestCors:
    def test_any_origin_allowed(self, app):
        response = TestClient(app).get("/api/products", headers={"Origin": "http://shop.example"})
        assert response.headers["access-control-allow-origin"] in ("*", "http://shop.example")
