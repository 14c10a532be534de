"""Tests for the assembled storefront application in `app.py`."""

import pytest
from fastapi.testclient import TestClient

import app as storefront_app
from storefront.catalogue.api import routes as catalogue_routes


@pytest.fixture()
def client():
    return TestClient(storefront_app.app, raise_server_exceptions=False)


class TestApplication:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "domain": "storefront"}

    def test_command_round_trip(self, client):
        created = client.post("/categories", json={"name": "Hookahs", "description": "Sets"})
        assert created.status_code == 201

        category_id = created.json()["category_id"]
        response = client.get(f"/categories/{category_id}")

        assert response.status_code == 200
        assert response.json()["name"] == "Hookahs"

    def test_unknown_resource_maps_to_404(self, client):
        assert client.get("/products/missing").status_code == 404

    def test_unhandled_error_returns_generic_500(self, client, monkeypatch):
        def broken():
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(catalogue_routes, "list_categories", broken)

        response = client.get("/categories")

        assert response.status_code == 500
        assert response.json() == {
            "error": "internal_error",
            "message": "An unexpected error occurred.",
        }

    def test_every_router_is_mounted(self):
        paths = {route.path for route in storefront_app.app.routes}

        for prefix in ("/categories", "/products", "/carts", "/orders", "/reviews", "/customers", "/analytics"):
            assert any(path.startswith(prefix) for path in paths), prefix
