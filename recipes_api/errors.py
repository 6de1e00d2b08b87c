"""
Exception hierarchy for identity resolution, persistence and favorites.

Every failure is scoped to a single request; the API layer maps these
exceptions to HTTP responses in ``recipes_api.main``.
"""

from typing import Optional


# Identity provider

class AuthError(Exception):
    """Bearer credential could not be turned into a verified identity."""


class IdentityTransportError(AuthError):
    """Identity provider could not be reached (network, DNS, TLS)."""

    def __init__(self, reason: str):
        super().__init__(f"Identity provider unreachable: {reason}")
        self.reason = reason


class IdentityProviderTimeout(IdentityTransportError):
    def __init__(self, timeout_seconds: float):
        super().__init__(f"no response after {timeout_seconds}s")
        self.timeout_seconds = timeout_seconds


class MalformedIdentityResponse(AuthError):
    """Identity provider body is not JSON or has no subject claim."""

    def __init__(self, reason: str = "Malformed identity response"):
        super().__init__(reason)
        self.reason = reason


class UnauthenticatedError(AuthError):
    """Credential missing or rejected by the identity provider."""

    def __init__(self, reason: str = "Unauthenticated", status_code: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


# Persistence

class StoreError(Exception):
    """Generic persistence failure."""

    def __init__(self, operation: str, reason: str):
        super().__init__(f"Store error during {operation}: {reason}")
        self.operation = operation
        self.reason = reason


class StoreTimeoutError(StoreError):
    def __init__(self, operation: str, timeout_seconds: float):
        super().__init__(operation, f"timed out after {timeout_seconds}s")
        self.timeout_seconds = timeout_seconds


class RecordNotFoundError(StoreError):
    def __init__(self, operation: str, key: str):
        super().__init__(operation, f"no record with id {key}")
        self.key = key


class RecordAlreadyExistsError(StoreError):
    def __init__(self, operation: str, key: str):
        super().__init__(operation, f"record with id {key} already exists")
        self.key = key


# Favorites

class FavoritesError(Exception):
    """Failure of a toggle or list favorites operation."""


class ForbiddenError(FavoritesError):
    """Requester may not read or change the target user's favorites."""

    def __init__(self):
        super().__init__("Forbidden")


class RecipeNotFoundError(FavoritesError):
    def __init__(self, recipe_id: str):
        super().__init__(f"Recipe not found: {recipe_id}")
        self.recipe_id = recipe_id


class FavoritesStorageError(FavoritesError):
    def __init__(self, user_id: str, cause: StoreError):
        super().__init__(f"Failed to access favorites of user {user_id}")
        self.user_id = user_id
        self.cause = cause
