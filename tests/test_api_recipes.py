"""Route tests for the recipe catalog, health and fallback endpoints."""

from __future__ import annotations

import re
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from recipes_api.api.dependencies import get_current_identity, get_recipe_store
from recipes_api.database import mongodb
from recipes_api.errors import StoreTimeoutError
from recipes_api.main import app
from recipes_api.models import Identity
from tests.fakes import InMemoryRecipeStore


@pytest_asyncio.fixture
async def client(recipe_store: InMemoryRecipeStore, user_one: Identity) -> AsyncIterator[AsyncClient]:
    app.dependency_overrides[get_recipe_store] = lambda: recipe_store
    app.dependency_overrides[get_current_identity] = lambda: user_one

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http

    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_list_all_recipes(client: AsyncClient) -> None:
    response = await client.get("/api/v1/recipes")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Successfully fetched all recipes!"
    assert [recipe["id"] for recipe in body["data"]["data"]] == ["r1", "r2", "r3"]
    assert set(body["data"]["data"][0]) == {"id", "title", "ingredients", "instructions", "authorId", "imageLinks"}


@pytest.mark.asyncio
async def test_get_recipe_by_id(client: AsyncClient) -> None:
    response = await client.get("/api/v1/recipes/r2")

    assert response.status_code == 200
    assert response.json()["data"]["data"]["title"] == "Lemon Pasta"


@pytest.mark.asyncio
async def test_get_missing_recipe_is_not_found(client: AsyncClient) -> None:
    response = await client.get("/api/v1/recipes/unknown")

    assert response.status_code == 404
    assert response.json()["message"] == "error"


@pytest.mark.asyncio
async def test_my_recipes_use_caller_subject(client: AsyncClient, recipe_store: InMemoryRecipeStore) -> None:
    response = await client.get("/api/v1/recipes/me")

    assert response.status_code == 200
    assert [recipe["id"] for recipe in response.json()["data"]["data"]] == ["r1", "r3"]
    assert recipe_store.calls == ["find_by_author"]


@pytest.mark.asyncio
async def test_create_recipe_generates_id(client: AsyncClient, recipe_store: InMemoryRecipeStore) -> None:
    response = await client.post(
        "/api/v1/recipes",
        json={
            "title": "Tomato Soup",
            "ingredients": ["tomatoes", "stock"],
            "instructions": ["simmer", "blend"],
            "authorId": "u1",
            "imageLinks": "https://img.test/soup.png",
        },
    )

    assert response.status_code == 201
    created = response.json()["data"]["data"]
    assert re.fullmatch(r"[0-9a-f]{24}", created["id"])
    assert created["authorId"] == "u1"
    assert recipe_store.recipes[created["id"]].title == "Tomato Soup"


@pytest.mark.asyncio
async def test_create_recipe_requires_title(client: AsyncClient, recipe_store: InMemoryRecipeStore) -> None:
    response = await client.post("/api/v1/recipes", json={"ingredients": ["water"]})

    assert response.status_code == 422
    assert "insert" not in recipe_store.calls


@pytest.mark.asyncio
async def test_search_recipes_by_title(client: AsyncClient) -> None:
    response = await client.post("/api/v1/recipes/search", json={"searchTerm": "PASTA"})

    assert response.status_code == 200
    assert [recipe["id"] for recipe in response.json()["data"]["data"]] == ["r2"]


@pytest.mark.asyncio
async def test_delete_recipe(client: AsyncClient, recipe_store: InMemoryRecipeStore) -> None:
    response = await client.delete("/api/v1/recipes/r1")

    assert response.status_code == 200
    assert response.json()["data"]["data"] == {"deletedCount": 1}
    assert "r1" not in recipe_store.recipes


@pytest.mark.asyncio
async def test_store_timeout_is_gateway_timeout(client: AsyncClient, recipe_store: InMemoryRecipeStore) -> None:
    async def slow_find_all():
        raise StoreTimeoutError("find_all", 10.0)

    recipe_store.find_all = slow_find_all

    response = await client.get("/api/v1/recipes")

    assert response.status_code == 504


@pytest.mark.asyncio
async def test_unknown_route_message(client: AsyncClient) -> None:
    response = await client.get("/api/v1/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"message": "We couldn't find the page you requested!"}


@pytest.mark.asyncio
async def test_ping(client: AsyncClient) -> None:
    response = await client.get("/api/v1/ping")

    assert response.json() == {"ping": "pong"}


@pytest.mark.asyncio
async def test_health_without_database_is_degraded(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")

    assert response.status_code == 503
    body = response.json()
    assert body["status"] == 503
    assert body["message"] == "degraded"
    assert body["data"]["data"]["mongodbConnected"] is False
    assert body["data"]["data"]["identityProvider"] == "keycloak.test"


@pytest.mark.asyncio
async def test_health_with_database_is_healthy(client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def reachable() -> bool:
        return True

    monkeypatch.setattr(mongodb, "ping", reachable)

    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["message"] == "healthy"
    assert response.json()["data"]["data"]["mongodbConnected"] is True


@pytest.mark.asyncio
async def test_docs_are_served_outside_production(client: AsyncClient) -> None:
    response = await client.get("/docs")

    assert response.status_code == 200
