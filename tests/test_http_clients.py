"""Tests for HTTP-based adapters."""

import asyncio
from urllib.parse import parse_qs

import httpx
import pytest

from nutrition_engine.adapters.spoonacular_client import (
    HttpxSpoonacularClient,
    RateLimitExceededError,
)


def _client(handler) -> HttpxSpoonacularClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    return HttpxSpoonacularClient(
        api_key="key",
        base_url="https://api.test",
        http_client=async_client,
    )


def test_spoonacular_client_posts_ingredient_list() -> None:
    seen: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        seen["form"] = parse_qs(request.content.decode())
        return httpx.Response(200, json=[{"name": "rice"}, {"name": "tofu"}])

    client = _client(handler)

    items = asyncio.run(client.parse_ingredients(["1 cup rice", "100 g tofu"]))

    assert items == [{"name": "rice"}, {"name": "tofu"}]
    assert seen["path"] == "/recipes/parseIngredients"
    assert seen["params"] == {"apiKey": "key", "includeNutrition": "true"}
    assert seen["form"] == {"ingredientList": ["1 cup rice\n100 g tofu"], "servings": ["1"]}


def test_spoonacular_client_raises_on_rate_limit() -> None:
    client = _client(lambda request: httpx.Response(429, json={"status": "failure"}))

    with pytest.raises(RateLimitExceededError):
        asyncio.run(client.parse_ingredients(["1 cup rice"]))


def test_spoonacular_client_treats_quota_exhaustion_as_rate_limit() -> None:
    client = _client(lambda request: httpx.Response(402, json={"status": "failure"}))

    with pytest.raises(RateLimitExceededError, match="daily quota"):
        asyncio.run(client.parse_ingredients(["1 cup rice"]))


def test_spoonacular_client_raises_on_server_error() -> None:
    client = _client(lambda request: httpx.Response(500, json={}))

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.parse_ingredients(["1 cup rice"]))


def test_spoonacular_client_rejects_unexpected_payload() -> None:
    client = _client(lambda request: httpx.Response(200, json={"items": []}))

    with pytest.raises(RuntimeError, match="unexpected payload"):
        asyncio.run(client.parse_ingredients(["1 cup rice"]))


def test_spoonacular_client_close() -> None:
    client = _client(lambda request: httpx.Response(200, json=[]))

    asyncio.run(client.close())

    assert client.http_client.is_closed
