"""Tests for wire names and validation of the plain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from recipes_api.models import Identity, Recipe, UserFavorites, new_recipe_id


def test_recipe_uses_camel_case_on_the_wire() -> None:
    recipe = Recipe.model_validate(
        {"id": "r1", "title": "Soup", "authorId": "u1", "imageLinks": "https://img.test/soup.png"}
    )

    assert recipe.author_id == "u1"
    assert recipe.model_dump(by_alias=True) == {
        "id": "r1",
        "title": "Soup",
        "ingredients": [],
        "instructions": [],
        "authorId": "u1",
        "imageLinks": "https://img.test/soup.png",
    }


def test_user_favorites_wire_shape() -> None:
    favorites = UserFavorites(user_id="u1", favorite_recipe_ids=["r1"])

    assert favorites.model_dump(by_alias=True) == {"userId": "u1", "favoriteRecipeIds": ["r1"]}


def test_new_recipe_ids_are_unique_object_ids() -> None:
    ids = {new_recipe_id() for _ in range(50)}

    assert len(ids) == 50
    assert all(len(recipe_id) == 24 for recipe_id in ids)


def test_identity_requires_subject() -> None:
    with pytest.raises(ValidationError):
        Identity.model_validate({"email": "ada@example.com"})
