"""
Services module exports.
"""

from .identity_resolver import IdentityResolver
from .favorites_service import FavoritesService

__all__ = ["IdentityResolver", "FavoritesService"]
