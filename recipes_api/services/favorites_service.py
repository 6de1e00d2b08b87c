"""
Favorites service: toggling and listing a user's favorite recipes.

Toggle flow:
1. Requester must be the target user (single guard, before any store call)
2. Adding requires the recipe to exist in the catalog
3. Missing favorites record: created on add, nothing to do on remove
4. Existing record: add is a no-op when present, remove always rewrites

Writes replace the whole favorites list. There is no versioning, so two
concurrent toggles for the same user can lose one update.
"""

from typing import List
from loguru import logger

from recipes_api.database.stores import RecipeStore, UserFavoritesStore
from recipes_api.errors import (
    FavoritesStorageError,
    ForbiddenError,
    RecipeNotFoundError,
    RecordNotFoundError,
    StoreError,
)
from recipes_api.models import Identity, Recipe, UserFavorites


class FavoritesService:
    """Maintains per-user favorite recipe sets."""

    def __init__(self, favorites_store: UserFavoritesStore, recipe_store: RecipeStore):
        self._favorites = favorites_store
        self._recipes = recipe_store

    @staticmethod
    def _authorize(requester: Identity, target_user_id: str) -> None:
        if requester.subject != target_user_id:
            logger.warning(f"User {requester.subject} denied access to favorites of another user")
            raise ForbiddenError()

    async def toggle_favorite(
        self,
        requester: Identity,
        target_user_id: str,
        recipe_id: str,
        add: bool,
    ) -> UserFavorites:
        """
        Add or remove a recipe from the target user's favorites.

        Both directions are idempotent.

        Raises:
            ForbiddenError: requester is not the target user
            RecipeNotFoundError: adding a recipe that does not exist
            FavoritesStorageError: a store call failed
        """
        self._authorize(requester, target_user_id)

        try:
            if add and await self._recipes.find_by_id(recipe_id) is None:
                raise RecipeNotFoundError(recipe_id)

            try:
                favorites = await self._favorites.get(target_user_id)
            except RecordNotFoundError:
                if not add:
                    logger.info(f"User {target_user_id} has no favorites, nothing to remove")
                    return UserFavorites(user_id=target_user_id)

                logger.info(f"Creating favorites for user {target_user_id}")
                favorites = UserFavorites(user_id=target_user_id, favorite_recipe_ids=[recipe_id])
                await self._favorites.create(favorites)
                return favorites

            recipe_ids = list(favorites.favorite_recipe_ids)
            if add:
                if recipe_id in recipe_ids:
                    return favorites
                recipe_ids.append(recipe_id)
            elif recipe_id in recipe_ids:
                recipe_ids.remove(recipe_id)

            updated = favorites.model_copy(update={"favorite_recipe_ids": recipe_ids})
            await self._favorites.upsert(updated)

        except StoreError as e:
            raise FavoritesStorageError(target_user_id, e) from e

        logger.info(
            f"{'Added' if add else 'Removed'} recipe {recipe_id} "
            f"{'to' if add else 'from'} favorites of user {target_user_id}"
        )
        return updated

    async def list_favorite_recipes(self, requester: Identity, target_user_id: str) -> List[Recipe]:
        """
        Return the target user's favorite recipes in favorite order.

        Ids without a matching recipe are skipped.

        Raises:
            ForbiddenError: requester is not the target user
            FavoritesStorageError: a store call failed
        """
        self._authorize(requester, target_user_id)

        try:
            try:
                favorites = await self._favorites.get(target_user_id)
            except RecordNotFoundError:
                return []

            recipe_ids = favorites.favorite_recipe_ids
            if not recipe_ids:
                return []
            recipes = await self._recipes.find_by_ids(recipe_ids)

        except StoreError as e:
            raise FavoritesStorageError(target_user_id, e) from e

        missing = len(set(recipe_ids)) - len(recipes)
        if missing > 0:
            logger.debug(f"Skipped {missing} stale favorite ids for user {target_user_id}")

        position = {recipe_id: index for index, recipe_id in enumerate(recipe_ids)}
        return sorted(recipes, key=lambda recipe: position.get(recipe.id, len(position)))
