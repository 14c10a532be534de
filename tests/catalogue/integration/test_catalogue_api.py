"""Integration tests for Catalogue API endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.exceptions import ValidationError
from protean.integrations.fastapi import register_exception_handlers

from storefront.catalogue.api import category_router, product_router
from storefront.catalogue.api import routes as catalogue_routes
from storefront.constants import MAX_IMAGE_SIZE_BYTES


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(category_router)
    app.include_router(product_router)
    register_exception_handlers(app)
    return TestClient(app)


def _create_category(client, name="Hookahs"):
    response = client.post("/categories", json={"name": name, "description": "Sets"})
    assert response.status_code == 201
    return response.json()["category_id"]


def _create_product(client, category_id, **overrides):
    payload = {"name": "Glass hookah", "price": 349.9, "stock": 5, "category_id": category_id}
    payload.update(overrides)
    response = client.post("/products", json=payload)
    assert response.status_code == 201
    return response.json()["product_id"]


class TestCategoryAPI:
    def test_create_and_get(self, client):
        category_id = _create_category(client)
        response = client.get(f"/categories/{category_id}")
        assert response.status_code == 200
        assert response.json()["name"] == "Hookahs"

    def test_list_includes_product_counts(self, client):
        category_id = _create_category(client)
        _create_product(client, category_id)

        response = client.get("/categories")

        assert response.status_code == 200
        assert response.json()[0]["product_count"] == 1

    def test_update(self, client):
        category_id = _create_category(client)
        response = client.put(f"/categories/{category_id}", json={"name": "Kits"})
        assert response.status_code == 200
        assert client.get(f"/categories/{category_id}").json()["name"] == "Kits"

    def test_get_unknown_returns_404(self, client):
        assert client.get("/categories/missing").status_code == 404

    def test_delete_with_products_returns_400(self, client):
        category_id = _create_category(client)
        _create_product(client, category_id)
        assert client.delete(f"/categories/{category_id}").status_code == 400

    def test_delete_empty_category(self, client):
        category_id = _create_category(client)
        assert client.delete(f"/categories/{category_id}").status_code == 200
        assert client.get(f"/categories/{category_id}").status_code == 404


class TestProductAPI:
    def test_create_with_unknown_category_returns_400(self, client):
        response = client.post("/products", json={"name": "X", "price": 1.0, "category_id": "missing"})
        assert response.status_code == 400

    def test_get_product(self, client):
        category_id = _create_category(client)
        product_id = _create_product(client, category_id, description="Borosilicate glass base")

        body = client.get(f"/products/{product_id}").json()

        assert body["name"] == "Glass hookah"
        assert body["in_stock"] is True
        assert body["summary"] == "Borosilicate glass base"

    def test_search_with_filters_and_paging(self, client):
        category_id = _create_category(client)
        _create_product(client, category_id, name="Glass hookah", price=300.0)
        _create_product(client, category_id, name="Glass bowl", price=40.0)
        _create_product(client, category_id, name="Hose", price=25.0)

        response = client.get("/products", params={"q": "glass", "sort": "price_asc", "page_size": 1})

        body = response.json()
        assert response.status_code == 200
        assert body["total_count"] == 2
        assert body["total_pages"] == 2
        assert [p["name"] for p in body["items"]] == ["Glass bowl"]

    def test_all_and_admin_listings(self, client):
        category_id = _create_category(client)
        _create_product(client, category_id, name="B")
        _create_product(client, category_id, name="A")

        assert [p["name"] for p in client.get("/products/all").json()] == ["A", "B"]
        assert client.get("/products/admin").json()["page_size"] == 10

    def test_by_ids(self, client):
        category_id = _create_category(client)
        first = _create_product(client, category_id, name="First")
        second = _create_product(client, category_id, name="Second")

        response = client.post("/products/by-ids", json={"product_ids": [second, first]})

        assert [p["product_id"] for p in response.json()] == [second, first]

    def test_update_and_delete(self, client):
        category_id = _create_category(client)
        product_id = _create_product(client, category_id)

        response = client.put(
            f"/products/{product_id}",
            json={"name": "Steel hookah", "price": 99.0, "stock": 1, "category_id": category_id},
        )
        assert response.status_code == 200
        assert client.get(f"/products/{product_id}").json()["name"] == "Steel hookah"

        assert client.delete(f"/products/{product_id}").status_code == 200
        assert client.get(f"/products/{product_id}").status_code == 404


class TestProductImageUpload:
    def test_upload_sets_image_url(self, client, image_store):
        category_id = _create_category(client)
        product_id = _create_product(client, category_id)

        response = client.post(
            f"/products/{product_id}/image",
            files={"file": ("photo.jpg", b"jpeg-bytes", "image/jpeg")},
        )

        assert response.status_code == 201
        image_url = response.json()["image_url"]
        assert image_url.startswith("/images/products/")
        assert client.get(f"/products/{product_id}").json()["image_url"] == image_url
        assert (image_store.directory / image_url.rsplit("/", 1)[1]).is_file()

    def test_replacing_image_deletes_previous_file(self, client, image_store):
        category_id = _create_category(client)
        product_id = _create_product(client, category_id)

        first = client.post(f"/products/{product_id}/image", files={"file": ("a.png", b"a", "image/png")})
        client.post(f"/products/{product_id}/image", files={"file": ("b.png", b"b", "image/png")})

        old_name = first.json()["image_url"].rsplit("/", 1)[1]
        assert not (image_store.directory / old_name).exists()

    def test_disallowed_extension_returns_400(self, client):
        category_id = _create_category(client)
        product_id = _create_product(client, category_id)

        response = client.post(
            f"/products/{product_id}/image",
            files={"file": ("notes.txt", b"text", "text/plain")},
        )

        assert response.status_code == 400

    def test_oversized_upload_is_rejected_without_storing(self, client, image_store):
        category_id = _create_category(client)
        product_id = _create_product(client, category_id)

        response = client.post(
            f"/products/{product_id}/image",
            files={"file": ("huge.jpg", b"\0" * (MAX_IMAGE_SIZE_BYTES + 1), "image/jpeg")},
        )

        assert response.status_code == 400
        assert list(image_store.directory.iterdir()) == []
        assert client.get(f"/products/{product_id}").json()["image_url"] is None

    def test_failed_image_change_removes_stored_file(self, client, image_store, monkeypatch):
        category_id = _create_category(client)
        product_id = _create_product(client, category_id)

        def rejected(**kwargs):
            raise ValidationError({"image_url": ["Image URL is too long"]})

        monkeypatch.setattr(catalogue_routes, "ChangeProductImage", rejected)

        response = client.post(
            f"/products/{product_id}/image",
            files={"file": ("photo.jpg", b"jpeg-bytes", "image/jpeg")},
        )

        assert response.status_code == 400
        assert list(image_store.directory.iterdir()) == []
