"""
Per-user favorite recipes model for MongoDB.
Stored as ``{_id: userId, favoriteRecipeIds: [...]}`` in the ``users`` collection.
"""

from typing import List
from beanie import Document
from pydantic import BaseModel, ConfigDict, Field


class UserFavorites(BaseModel):
    """Favorite recipe ids of one user, in the order they were added."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    favorite_recipe_ids: List[str] = Field(default_factory=list, alias="favoriteRecipeIds")


class UserFavoritesDocument(Document):
    """User favorites document keyed by the identity provider subject."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    favorite_recipe_ids: List[str] = Field(default_factory=list, alias="favoriteRecipeIds")

    def to_favorites(self) -> UserFavorites:
        return UserFavorites(user_id=self.id, favorite_recipe_ids=list(self.favorite_recipe_ids))

    @classmethod
    def from_favorites(cls, favorites: UserFavorites) -> "UserFavoritesDocument":
        return cls(id=favorites.user_id, favorite_recipe_ids=list(favorites.favorite_recipe_ids))

    class Settings:
        name = "users"
