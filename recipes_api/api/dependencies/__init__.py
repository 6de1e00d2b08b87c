"""
API dependencies: collaborator lookup and bearer authentication.

Collaborators are built once in the application lifespan and stored on
``app.state``; tests replace them through ``app.dependency_overrides``.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from recipes_api.database.stores import RecipeStore, UserFavoritesStore
from recipes_api.errors import UnauthenticatedError
from recipes_api.models import Identity
from recipes_api.services import FavoritesService, IdentityResolver


# Security scheme for Swagger UI
security = HTTPBearer(auto_error=False)


def get_identity_resolver(request: Request) -> IdentityResolver:
    return request.app.state.identity_resolver


def get_recipe_store(request: Request) -> RecipeStore:
    return request.app.state.recipe_store


def get_favorites_store(request: Request) -> UserFavoritesStore:
    return request.app.state.favorites_store


def get_favorites_service(
    favorites_store: UserFavoritesStore = Depends(get_favorites_store),
    recipe_store: RecipeStore = Depends(get_recipe_store),
) -> FavoritesService:
    return FavoritesService(favorites_store=favorites_store, recipe_store=recipe_store)


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> Identity:
    """
    Resolve the caller's identity from the Authorization header.

    Usage in routes:
        @router.get("/protected")
        async def protected_route(identity: Identity = Depends(get_current_identity)):
            return {"sub": identity.subject}

    Raises:
        AuthError: credential missing, rejected or not verifiable
    """
    if credentials is None:
        raise UnauthenticatedError("Missing bearer credential")
    return await resolver.resolve(credentials.credentials)


__all__ = [
    "security",
    "get_identity_resolver",
    "get_recipe_store",
    "get_favorites_store",
    "get_favorites_service",
    "get_current_identity",
]
