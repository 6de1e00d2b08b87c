"""
Recipe and user favorites stores backed by Beanie documents.

The protocols describe what the services need; the Beanie implementations
map documents to plain models and bound every call by a timeout.
"""

import asyncio
import re
from typing import Awaitable, Iterable, List, Optional, Protocol, TypeVar

from loguru import logger
from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError, PyMongoError

from recipes_api.errors import (
    RecordAlreadyExistsError,
    RecordNotFoundError,
    StoreError,
    StoreTimeoutError,
)
from recipes_api.models import (
    Recipe,
    RecipeDocument,
    UserFavorites,
    UserFavoritesDocument,
)

T = TypeVar("T")


class RecipeStore(Protocol):
    async def find_all(self) -> List[Recipe]: ...

    async def find_by_id(self, recipe_id: str) -> Optional[Recipe]: ...

    async def find_by_ids(self, recipe_ids: Iterable[str]) -> List[Recipe]: ...

    async def find_by_author(self, author_id: str) -> List[Recipe]: ...

    async def search_by_title(self, term: str) -> List[Recipe]: ...

    async def insert(self, recipe: Recipe) -> Recipe: ...

    async def delete(self, recipe_id: str) -> int: ...


class UserFavoritesStore(Protocol):
    async def get(self, user_id: str) -> UserFavorites: ...

    async def upsert(self, favorites: UserFavorites) -> None: ...

    async def create(self, favorites: UserFavorites) -> None: ...


async def run_bounded(operation: str, awaitable: Awaitable[T], timeout: float) -> T:
    """
    Await a store call with a timeout, translating driver errors.

    Raises:
        StoreTimeoutError: the call did not finish within ``timeout`` seconds
        StoreError: the driver or document validation failed
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.error(f"Store operation '{operation}' timed out after {timeout}s")
        raise StoreTimeoutError(operation, timeout) from e
    except (PyMongoError, ValidationError) as e:
        logger.error(f"Store operation '{operation}' failed: {e}")
        raise StoreError(operation, str(e)) from e


class BeanieRecipeStore:
    """Recipe catalog in the ``recipes`` collection."""

    def __init__(self, timeout: float = 10.0):
        self._timeout = timeout

    async def find_all(self) -> List[Recipe]:
        documents = await run_bounded("find_all", RecipeDocument.find_all().to_list(), self._timeout)
        return [document.to_recipe() for document in documents]

    async def find_by_id(self, recipe_id: str) -> Optional[Recipe]:
        document = await run_bounded("find_by_id", RecipeDocument.get(recipe_id), self._timeout)
        return document.to_recipe() if document else None

    async def find_by_ids(self, recipe_ids: Iterable[str]) -> List[Recipe]:
        ids = list(dict.fromkeys(recipe_ids))
        if not ids:
            return []
        documents = await run_bounded(
            "find_by_ids",
            RecipeDocument.find({"_id": {"$in": ids}}).to_list(),
            self._timeout,
        )
        return [document.to_recipe() for document in documents]

    async def find_by_author(self, author_id: str) -> List[Recipe]:
        documents = await run_bounded(
            "find_by_author",
            RecipeDocument.find({"authorId": author_id}).to_list(),
            self._timeout,
        )
        return [document.to_recipe() for document in documents]

    async def search_by_title(self, term: str) -> List[Recipe]:
        # Term is matched literally, case-insensitive
        query = {"title": {"$regex": re.escape(term), "$options": "i"}}
        documents = await run_bounded(
            "search_by_title", RecipeDocument.find(query).to_list(), self._timeout
        )
        return [document.to_recipe() for document in documents]

    async def insert(self, recipe: Recipe) -> Recipe:
        document = RecipeDocument.from_recipe(recipe)

        async def _insert() -> None:
            try:
                await document.insert()
            except DuplicateKeyError as e:
                raise RecordAlreadyExistsError("insert", recipe.id) from e

        await run_bounded("insert", _insert(), self._timeout)
        return document.to_recipe()

    async def delete(self, recipe_id: str) -> int:
        async def _delete() -> int:
            result = await RecipeDocument.find({"_id": recipe_id}).delete()
            return result.deleted_count if result else 0

        return await run_bounded("delete", _delete(), self._timeout)


class BeanieUserFavoritesStore:
    """Favorite recipe ids per user in the ``users`` collection."""

    def __init__(self, timeout: float = 10.0):
        self._timeout = timeout

    async def get(self, user_id: str) -> UserFavorites:
        document = await run_bounded("get", UserFavoritesDocument.get(user_id), self._timeout)
        if document is None:
            raise RecordNotFoundError("get", user_id)
        return document.to_favorites()

    async def upsert(self, favorites: UserFavorites) -> None:
        # Full overwrite of the document; concurrent writers race (last write wins)
        document = UserFavoritesDocument.from_favorites(favorites)
        await run_bounded("upsert", document.save(), self._timeout)

    async def create(self, favorites: UserFavorites) -> None:
        document = UserFavoritesDocument.from_favorites(favorites)

        async def _insert() -> None:
            try:
                await document.insert()
            except DuplicateKeyError as e:
                raise RecordAlreadyExistsError("create", favorites.user_id) from e

        await run_bounded("create", _insert(), self._timeout)
