"""
User favorites API routes.
"""

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from recipes_api.api.dependencies import get_current_identity, get_favorites_service
from recipes_api.api.envelope import RecipeResponse, recipes_payload
from recipes_api.models import Identity
from recipes_api.services import FavoritesService

router = APIRouter(prefix="/users", tags=["favorites"])


class FavoriteToggleRequest(BaseModel):
    """Add or remove one recipe from the user's favorites."""

    model_config = ConfigDict(populate_by_name=True)

    recipe_id: str = Field(..., alias="recipeId", min_length=1, description="Recipe to toggle")
    is_adding_favorite: bool = Field(..., alias="isAddingFavorite", description="True to add, False to remove")


@router.post("/{user_id}/recipes", response_model=RecipeResponse)
async def toggle_favorite(
    user_id: str,
    request: FavoriteToggleRequest,
    identity: Identity = Depends(get_current_identity),
    service: FavoritesService = Depends(get_favorites_service),
):
    """Add or remove a recipe from the user's favorites. Repeating a request is harmless."""
    favorites = await service.toggle_favorite(
        requester=identity,
        target_user_id=user_id,
        recipe_id=request.recipe_id,
        add=request.is_adding_favorite,
    )

    if request.is_adding_favorite:
        message = "Successfully added recipe to user favorites!"
    else:
        message = "Successfully removed recipe from user favorites!"

    return RecipeResponse(
        status=status.HTTP_200_OK,
        message=message,
        data={"data": favorites.model_dump(by_alias=True)},
    )


@router.get("/{user_id}/recipes", response_model=RecipeResponse)
async def get_favorite_recipes(
    user_id: str,
    identity: Identity = Depends(get_current_identity),
    service: FavoritesService = Depends(get_favorites_service),
):
    """Recipes the user has marked as favorite."""
    recipes = await service.list_favorite_recipes(requester=identity, target_user_id=user_id)
    return RecipeResponse(
        status=status.HTTP_200_OK,
        message="Successfully fetched all favorite recipes!",
        data=recipes_payload(recipes),
    )
