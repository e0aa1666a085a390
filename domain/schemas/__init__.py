"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.recipe_schemas import (
    RecipeCreate,
    RecipeUpdate,
    RecipeDTO,
    RecipeCreatedResponse,
)
from domain.schemas.user_schemas import RegistrationRequest, RegistrationResponse

__all__ = [
    # Recipe schemas
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeDTO",
    "RecipeCreatedResponse",
    # Account schemas
    "RegistrationRequest",
    "RegistrationResponse",
]
