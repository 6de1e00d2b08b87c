"""
API routes exports.
"""

from . import health, recipes, favorites

__all__ = ["health", "recipes", "favorites"]
