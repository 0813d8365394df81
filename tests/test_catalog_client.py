"""Tests for the HTTP catalog client."""

from __future__ import annotations

import httpx
import pytest
from prometheus_client import REGISTRY

from shopassist.catalog.client import CatalogClient
from shopassist.config.settings import Settings

PRODUCT_PAYLOAD = {
    "id": 1,
    "title": "Fjallraven Backpack",
    "price": 109.95,
    "description": "Your perfect pack for everyday use and walks in the forest.",
    "category": "men's clothing",
    "image": "https://img.example/1.jpg",
    "rating": {"rate": 3.9, "count": 120},
}
SETTINGS = Settings(catalog_base_url="https://catalog.test/", catalog_timeout=1.0)


def _client(handler) -> CatalogClient:
    return CatalogClient(SETTINGS, transport=httpx.MockTransport(handler))


def _invalid_records(operation: str) -> float:
    value = REGISTRY.get_sample_value("catalog_invalid_records_total", {"operation": operation})
    return value or 0.0


@pytest.mark.asyncio
async def test_list_all_products_parses_payload() -> None:
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, json=[PRODUCT_PAYLOAD])

    client = _client(handler)
    try:
        products = await client.list_all_products()
    finally:
        await client.close()

    assert requested == ["https://catalog.test/products"]
    assert products[0].title == "Fjallraven Backpack"
    assert products[0].rating.count == 120


@pytest.mark.asyncio
async def test_server_error_becomes_empty_list() -> None:
    client = _client(lambda request: httpx.Response(500, text="boom"))
    try:
        assert await client.list_all_products() == []
        assert await client.list_categories() == []
        assert await client.list_by_category("electronics") == []
        assert await client.get_product(1) is None
    finally:
        await client.close()


@pytest.mark.asyncio
async def test_network_error_becomes_empty_list() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    client = _client(handler)
    try:
        assert await client.list_all_products() == []
        assert await client.get_product(1) is None
    finally:
        await client.close()


@pytest.mark.asyncio
async def test_malformed_payload_becomes_empty_list() -> None:
    client = _client(lambda request: httpx.Response(200, json={"unexpected": True}))
    try:
        assert await client.list_all_products() == []
    finally:
        await client.close()


@pytest.mark.asyncio
async def test_invalid_record_is_skipped_and_the_rest_kept() -> None:
    invalid = {**PRODUCT_PAYLOAD, "id": 2, "rating": {"rate": 5.1, "count": 10}}
    client = _client(lambda request: httpx.Response(200, json=[PRODUCT_PAYLOAD, invalid]))
    try:
        all_products = await client.list_all_products()
        by_category = await client.list_by_category("men's clothing")
    finally:
        await client.close()

    assert [product.id for product in all_products] == [1]
    assert [product.id for product in by_category] == [1]


@pytest.mark.asyncio
async def test_invalid_records_are_counted() -> None:
    invalid = {"id": "not-a-number"}
    client = _client(lambda request: httpx.Response(200, json=[invalid, PRODUCT_PAYLOAD, invalid]))
    before = _invalid_records("list_all_products")
    try:
        products = await client.list_all_products()
    finally:
        await client.close()

    assert len(products) == 1
    assert _invalid_records("list_all_products") - before == 2


@pytest.mark.asyncio
async def test_get_product_with_empty_body_is_absent() -> None:
    client = _client(lambda request: httpx.Response(200, content=b""))
    try:
        assert await client.get_product(999) is None
    finally:
        await client.close()


@pytest.mark.asyncio
async def test_list_by_category_encodes_name() -> None:
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(200, json=[PRODUCT_PAYLOAD])

    client = _client(handler)
    try:
        products = await client.list_by_category("men's clothing")
    finally:
        await client.close()

    assert [product.id for product in products] == [1]
    assert paths[0].startswith("/products/category/")
    assert paths[0].endswith("clothing")


@pytest.mark.asyncio
async def test_search_uses_given_products_without_fetching(products) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("search should not hit the network")

    client = _client(handler)
    try:
        assert [p.id for p in await client.search("JEWEL", products)] == [3, 4]
        assert await client.search("anything", []) == []
    finally:
        await client.close()


@pytest.mark.asyncio
async def test_search_fetches_catalog_when_no_products_given() -> None:
    client = _client(lambda request: httpx.Response(200, json=[PRODUCT_PAYLOAD]))
    try:
        result = await client.search("forest")
    finally:
        await client.close()

    assert [product.id for product in result] == [1]


@pytest.mark.asyncio
async def test_ping_reports_status() -> None:
    client = _client(lambda request: httpx.Response(200, json=["electronics"]))
    try:
        assert await client.ping()
    finally:
        await client.close()
