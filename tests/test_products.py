"""
Tests for GET /products and GET /product/:id, against the in-memory store
and the HTTP KV client backed by httpx.MockTransport.
"""

import json

import httpx
import pytest

from storefront.repositories.product_store import HttpProductStore, InMemoryProductStore
from tests.conftest import SAMPLE_PRODUCTS


class VanishingStore(InMemoryProductStore):
    """Lists keys whose documents are already gone."""

    def __init__(self, products, vanished):
        super().__init__(products)
        self.vanished = set(vanished)

    async def get(self, key):
        if key in self.vanished:
            return None
        return await super().get(key)


class BrokenStore(InMemoryProductStore):
    """Fails every operation."""

    async def list_keys(self):
        raise RuntimeError("KV namespace unreachable")

    async def get(self, key):
        raise RuntimeError("KV namespace unreachable")


def kv_transport(products, page_size=2, token=None):
    """MockTransport serving a paginated KV namespace under /ns."""
    keys = list(products)

    def handler(request: httpx.Request) -> httpx.Response:
        if token and request.headers.get("authorization") != f"Bearer {token}":
            return httpx.Response(401, json={"success": False})

        path = request.url.path
        if path == "/ns/keys":
            start = int(request.url.params.get("cursor", 0))
            page = keys[start:start + page_size]
            next_start = start + page_size
            cursor = str(next_start) if next_start < len(keys) else ""
            return httpx.Response(200, json={
                "success": True,
                "result": [{"name": key} for key in page],
                "result_info": {"count": len(page), "cursor": cursor},
            })
        if path.startswith("/ns/values/"):
            key = path[len("/ns/values/"):]
            if key not in products:
                return httpx.Response(404, json={"success": False})
            return httpx.Response(200, content=json.dumps(products[key]))
        return httpx.Response(500)

    return httpx.MockTransport(handler)


# 
# GET /products
# 

def test_list_products_in_key_order(client):
    response = client.get("/products")

    assert response.status_code == 200
    assert response.json() == list(SAMPLE_PRODUCTS.values())


def test_list_products_empty_store(make_client):
    response = make_client(product_store=InMemoryProductStore()).get("/products")

    assert response.status_code == 200
    assert response.json() == []


def test_list_products_drops_missing_documents(make_client):
    store = VanishingStore(SAMPLE_PRODUCTS, vanished=["tee-002"])

    response = make_client(product_store=store).get("/products")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == ["mug-001", "cap-003"]


def test_list_products_without_store(make_client):
    response = make_client().get("/products")

    assert response.status_code == 500
    assert response.json() == {"error": "Products KV binding not configured"}


def test_list_products_store_failure(make_client):
    response = make_client(product_store=BrokenStore()).get("/products")

    assert response.status_code == 500
    assert response.json() == {"error": "KV namespace unreachable"}


# 
# GET /product/:id
# 

def test_get_product(client):
    response = client.get("/product/tee-002")

    assert response.status_code == 200
    assert response.json() == SAMPLE_PRODUCTS["tee-002"]


def test_get_product_uses_last_path_segment(client):
    response = client.get("/product/catalog/summer/cap-003")

    assert response.status_code == 200
    assert response.json()["name"] == "Baseball Cap"


def test_get_product_not_found(client):
    response = client.get("/product/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "Product not found"}


def test_get_product_without_store(make_client):
    response = make_client().get("/product/mug-001")

    assert response.status_code == 500
    assert response.json() == {"error": "Products KV binding not configured"}


def test_get_product_store_failure(make_client):
    response = make_client(product_store=BrokenStore()).get("/product/mug-001")

    assert response.status_code == 500
    assert response.json() == {"error": "KV namespace unreachable"}


# 
# HTTP KV namespace
# 

@pytest.fixture
def http_store():
    return HttpProductStore(
        "https://kv.test/ns/",
        token="secret",
        transport=kv_transport(SAMPLE_PRODUCTS, token="secret")
    )


def test_http_store_lists_across_pages(make_client, http_store):
    response = make_client(product_store=http_store).get("/products")

    assert response.status_code == 200
    assert response.json() == list(SAMPLE_PRODUCTS.values())


def test_http_store_get_and_missing(make_client, http_store):
    client = make_client(product_store=http_store)

    assert client.get("/product/mug-001").json() == SAMPLE_PRODUCTS["mug-001"]
    assert client.get("/product/ghost").status_code == 404


def test_http_store_unexpected_status(make_client):
    store = HttpProductStore(
        "https://kv.test/ns",
        token="wrong",
        transport=kv_transport(SAMPLE_PRODUCTS, token="secret")
    )

    response = make_client(product_store=store).get("/products")

    assert response.status_code == 500
    assert response.json() == {"error": "Listing product keys failed with status 401"}
