"""
Recipe catalog API routes.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from recipes_api.api.dependencies import get_current_identity, get_recipe_store
from recipes_api.api.envelope import RecipeResponse, recipes_payload
from recipes_api.database.stores import RecipeStore
from recipes_api.errors import RecipeNotFoundError
from recipes_api.models import Identity, Recipe, new_recipe_id

router = APIRouter(prefix="/recipes", tags=["recipes"])


class RecipeCreateRequest(BaseModel):
    """New recipe payload."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, description="Recipe title")
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    author_id: str = Field(default="", alias="authorId", description="Identity provider subject of the author")
    image_links: str = Field(default="", alias="imageLinks")


class SearchQuery(BaseModel):
    """Title search payload."""

    model_config = ConfigDict(populate_by_name=True)

    search_term: str = Field(..., alias="searchTerm")


@router.get("", response_model=RecipeResponse)
async def get_all_recipes(store: RecipeStore = Depends(get_recipe_store)):
    """List every recipe."""
    recipes = await store.find_all()
    return RecipeResponse(
        status=status.HTTP_200_OK,
        message="Successfully fetched all recipes!",
        data=recipes_payload(recipes),
    )


@router.get("/me", response_model=RecipeResponse)
async def get_my_recipes(
    identity: Identity = Depends(get_current_identity),
    store: RecipeStore = Depends(get_recipe_store),
):
    """List recipes created by the authenticated user."""
    logger.info(f"Fetching recipes created by user {identity.subject}")
    recipes = await store.find_by_author(identity.subject)
    return RecipeResponse(
        status=status.HTTP_200_OK,
        message=f"Successfully fetched all recipes created by user with ID: {identity.subject}",
        data=recipes_payload(recipes),
    )


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(recipe_id: str, store: RecipeStore = Depends(get_recipe_store)):
    """Get one recipe by id."""
    recipe = await store.find_by_id(recipe_id)
    if recipe is None:
        raise RecipeNotFoundError(recipe_id)

    return RecipeResponse(
        status=status.HTTP_200_OK,
        message=f"Successfully fetched recipe with ID {recipe_id}",
        data={"data": recipe.model_dump(by_alias=True)},
    )


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
async def create_recipe(request: RecipeCreateRequest, store: RecipeStore = Depends(get_recipe_store)):
    """Create a recipe with a freshly generated id."""
    recipe = Recipe(
        id=new_recipe_id(),
        title=request.title,
        ingredients=request.ingredients,
        instructions=request.instructions,
        author_id=request.author_id,
        image_links=request.image_links,
    )
    created = await store.insert(recipe)
    logger.info(f"Created recipe {created.id}")

    return RecipeResponse(
        status=status.HTTP_201_CREATED,
        message="Successfully created recipe!",
        data={"data": created.model_dump(by_alias=True)},
    )


@router.post("/search", response_model=RecipeResponse)
async def search_recipes(query: SearchQuery, store: RecipeStore = Depends(get_recipe_store)):
    """Case-insensitive search on recipe titles."""
    recipes = await store.search_by_title(query.search_term)
    return RecipeResponse(
        status=status.HTTP_200_OK,
        message=f"Successfully fetched all recipes with title containing '{query.search_term}'!",
        data=recipes_payload(recipes),
    )


@router.delete("/{recipe_id}", response_model=RecipeResponse)
async def delete_recipe(recipe_id: str, store: RecipeStore = Depends(get_recipe_store)):
    """Delete a recipe. Favorites that reference it are left as they are."""
    deleted = await store.delete(recipe_id)
    logger.info(f"Deleted {deleted} recipe(s) with ID {recipe_id}")

    return RecipeResponse(
        status=status.HTTP_200_OK,
        message=f"Successfully deleted recipe with ID {recipe_id}",
        data={"data": {"deletedCount": deleted}},
    )
