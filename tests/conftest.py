"""Pytest configuration.

Settings are read from the environment when ``config.settings`` is first
imported, so the required values are provided here before any test module
imports application code.
"""

from __future__ import annotations

import os
import tempfile

os.environ.setdefault("KC_USERINFO_ENDPOINT", "https://keycloak.test/realms/recipes/protocol/openid-connect/userinfo")
os.environ.setdefault("CORS_ALLOWED_LIST", "http://localhost:3000")
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "table-recipes-tests.log"))

import pytest  # noqa: E402

from recipes_api.models import Identity, Recipe  # noqa: E402
from tests.fakes import InMemoryFavoritesStore, InMemoryRecipeStore  # noqa: E402


@pytest.fixture
def recipes() -> list[Recipe]:
    return [
        Recipe(id="r1", title="Shakshuka", ingredients=["eggs"], instructions=["cook"], author_id="u1"),
        Recipe(id="r2", title="Lemon Pasta", ingredients=["pasta"], instructions=["boil"], author_id="u2"),
        Recipe(id="r3", title="Overnight Oats", ingredients=["oats"], instructions=["soak"], author_id="u1"),
    ]


@pytest.fixture
def recipe_store(recipes: list[Recipe]) -> InMemoryRecipeStore:
    return InMemoryRecipeStore(recipes)


@pytest.fixture
def favorites_store() -> InMemoryFavoritesStore:
    return InMemoryFavoritesStore()


@pytest.fixture
def user_one() -> Identity:
    return Identity(subject="u1", email_verified=True, display_name="User One", email="one@example.com")


@pytest.fixture
def user_two() -> Identity:
    return Identity(subject="u2")
