"""
MongoDB models export.
"""

from .identity import Identity
from .recipe import Recipe, RecipeDocument, new_recipe_id
from .user_favorites import UserFavorites, UserFavoritesDocument

__all__ = [
    # Identity
    "Identity",
    # Recipe models
    "Recipe",
    "RecipeDocument",
    "new_recipe_id",
    # Favorites models
    "UserFavorites",
    "UserFavoritesDocument",
]


# List of all document models for Beanie initialization
DOCUMENT_MODELS = [
    RecipeDocument,
    UserFavoritesDocument,
]
