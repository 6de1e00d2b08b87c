"""
Recipe model and its MongoDB document (Beanie ODM).
"""

from typing import List
from beanie import Document
from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


def new_recipe_id() -> str:
    """Generate an opaque recipe id (ObjectId hex string)."""
    return str(ObjectId())


class Recipe(BaseModel):
    """Recipe as exchanged with clients and services."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str = ""
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    author_id: str = Field(default="", alias="authorId")
    image_links: str = Field(default="", alias="imageLinks")


class RecipeDocument(Document):
    """Recipe document stored in the ``recipes`` collection."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_recipe_id)
    title: str = ""
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    author_id: str = Field(default="", alias="authorId")
    image_links: str = Field(default="", alias="imageLinks")

    def to_recipe(self) -> Recipe:
        return Recipe(
            id=self.id,
            title=self.title,
            ingredients=list(self.ingredients),
            instructions=list(self.instructions),
            author_id=self.author_id,
            image_links=self.image_links,
        )

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeDocument":
        return cls(
            id=recipe.id,
            title=recipe.title,
            ingredients=recipe.ingredients,
            instructions=recipe.instructions,
            author_id=recipe.author_id,
            image_links=recipe.image_links,
        )

    class Settings:
        name = "recipes"
        indexes = [
            "authorId",
            "title",
        ]
