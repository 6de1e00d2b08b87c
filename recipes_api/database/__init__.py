"""
Database layer exports.
"""

from .mongodb import mongodb, MongoDB
from .stores import (
    RecipeStore,
    UserFavoritesStore,
    BeanieRecipeStore,
    BeanieUserFavoritesStore,
    run_bounded,
)

__all__ = [
    "mongodb",
    "MongoDB",
    "RecipeStore",
    "UserFavoritesStore",
    "BeanieRecipeStore",
    "BeanieUserFavoritesStore",
    "run_bounded",
]
