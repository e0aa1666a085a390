"""Pydantic schemas for recipe requests and responses."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional


MANDATORY_MESSAGES = {
    "name": "Recipe name is mandatory",
    "description": "Recipe description is mandatory",
    "category": "Recipe category is mandatory",
    "ingredients": "At least one ingredient is required",
    "directions": "At least one direction is required",
}


class _RecipeFieldRules(BaseModel):
    """Constraints shared by create and update payloads.

    ``None`` passes through so that update payloads can leave fields out.
    """

    @field_validator("name", "description", "category", check_fields=False)
    @classmethod
    def _text_not_blank(cls, value: Optional[str], info):
        if value is not None and not value.strip():
            raise ValueError(MANDATORY_MESSAGES[info.field_name])
        return value

    @field_validator("ingredients", "directions", check_fields=False)
    @classmethod
    def _list_not_empty(cls, value: Optional[List[str]], info):
        if value is not None and len(value) == 0:
            raise ValueError(MANDATORY_MESSAGES[info.field_name])
        return value


class RecipeCreate(_RecipeFieldRules):
    """Payload for POST /api/recipe/new. Unknown fields (recipeId, date) are ignored."""

    name: str = Field(..., description="Recipe name")
    description: str = Field(..., description="Short description")
    category: str = Field(..., description="Category, matched case-insensitively by search")
    ingredients: List[str] = Field(..., description="Ordered ingredient lines")
    directions: List[str] = Field(..., description="Ordered preparation steps")

    model_config = ConfigDict(extra="ignore")


class RecipeUpdate(_RecipeFieldRules):
    """Payload for PUT /api/recipe/{id}; omitted or null fields keep their value."""

    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    ingredients: Optional[List[str]] = None
    directions: Optional[List[str]] = None

    model_config = ConfigDict(extra="ignore")


class RecipeDTO(BaseModel):
    """Public representation of a recipe"""

    name: str
    description: str
    category: str
    date: Optional[str] = Field(None, description="Last modification time, ISO-8601")
    ingredients: List[str]
    directions: List[str]


class RecipeCreatedResponse(BaseModel):
    """Body returned after creating a recipe"""

    recipe_id: int = Field(..., alias="Recipe created for id")

    model_config = ConfigDict(populate_by_name=True)
