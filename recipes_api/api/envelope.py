"""
Response envelope shared by all recipe and favorites endpoints.
"""

from typing import Any, Dict, Iterable
from pydantic import BaseModel, Field

from recipes_api.models import Recipe


class RecipeResponse(BaseModel):
    """Envelope: ``{status, message, data}``."""

    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Human readable outcome")
    data: Dict[str, Any] = Field(default_factory=dict, description="Payload under the 'data' key")


def recipes_payload(recipes: Iterable[Recipe]) -> Dict[str, Any]:
    """Serialize recipes with their wire field names."""
    return {"data": [recipe.model_dump(by_alias=True) for recipe in recipes]}
