"""
Recipe domain mappers.
Handles transformation between the Recipe ORM model and its DTOs.
"""

from domain.models import Recipe
from domain.schemas.recipe_schemas import RecipeCreate, RecipeDTO, RecipeUpdate


class RecipeMapper:
    """Mapper for recipe transformations."""

    @staticmethod
    def to_dto(recipe: Recipe) -> RecipeDTO:
        """
        Convert a Recipe ORM model to the public RecipeDTO.

        The id and author are not part of the public representation.
        """
        return RecipeDTO(
            name=recipe.name,
            description=recipe.description,
            category=recipe.category,
            date=recipe.date.isoformat() if recipe.date else None,
            ingredients=list(recipe.ingredients or []),
            directions=list(recipe.directions or []),
        )

    @staticmethod
    def to_model(request: RecipeCreate, username: str) -> Recipe:
        """Build a new Recipe owned by ``username``."""
        return Recipe(
            name=request.name,
            description=request.description,
            category=request.category,
            ingredients=list(request.ingredients),
            directions=list(request.directions),
            username=username,
        )

    @staticmethod
    def update_from_request(request: RecipeUpdate, recipe: Recipe) -> Recipe:
        """Copy the non-null fields of ``request`` onto ``recipe``."""
        for field, value in request.model_dump(exclude_none=True).items():
            if isinstance(value, list):
                value = list(value)
            setattr(recipe, field, value)
        return recipe
