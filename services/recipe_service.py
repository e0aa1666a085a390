"""
Recipe business logic: lookup, search and author-only modification.
"""

import logging
from typing import Callable, List
from sqlalchemy.orm import Session

from app.exceptions import ForbiddenError, NotFoundError, UnauthorizedError
from domain.enums import SearchField
from domain.mappers import RecipeMapper
from domain.models import Recipe, utcnow
from domain.schemas.recipe_schemas import RecipeCreate, RecipeDTO, RecipeUpdate
from repositories import RecipeRepository, UserRepository

logger = logging.getLogger("recipes.recipes")


class RecipeService:
    """Business logic for recipes"""

    @staticmethod
    def get_recipe(db: Session, recipe_id: int) -> RecipeDTO:
        """Return a single recipe or raise NotFoundError"""
        logger.debug("Searching for recipe with ID: %s", recipe_id)
        recipe = RecipeService._get_or_raise(RecipeRepository(db), recipe_id)
        logger.info("Recipe found for ID: %s, now mapping to DTO and returning.", recipe_id)
        return RecipeMapper.to_dto(recipe)

    @staticmethod
    def search_by_category(db: Session, category: str) -> List[RecipeDTO]:
        """Recipes in ``category`` (case-insensitive), newest first"""
        repo = RecipeRepository(db)
        return RecipeService._search(
            SearchField.CATEGORY, category, lambda: repo.find_by_category(category)
        )

    @staticmethod
    def search_by_name(db: Session, name: str) -> List[RecipeDTO]:
        """Recipes whose name contains ``name`` (case-insensitive), newest first"""
        repo = RecipeRepository(db)
        return RecipeService._search(
            SearchField.NAME, name, lambda: repo.find_by_name_containing(name)
        )

    @staticmethod
    def save_recipe(db: Session, username: str, request: RecipeCreate) -> int:
        """
        Store a new recipe authored by ``username``.

        Returns:
            The generated recipe id

        Raises:
            UnauthorizedError: If the author account no longer exists
        """
        if not UserRepository(db).exists_by_username(username):
            logger.error("User not found for username: %s", username)
            raise UnauthorizedError("User not found")

        recipe = RecipeMapper.to_model(request, username)
        recipe.date = utcnow()
        recipe = RecipeRepository(db).create(recipe)
        logger.info("User %s created recipe %s", username, recipe.recipe_id)
        return recipe.recipe_id

    @staticmethod
    def update_recipe(
        db: Session, username: str, recipe_id: int, request: RecipeUpdate
    ) -> None:
        """
        Apply a partial update to a recipe owned by ``username``.

        Raises:
            NotFoundError: If the recipe does not exist
            ForbiddenError: If ``username`` is not the author
        """
        repo = RecipeRepository(db)
        recipe = RecipeService._get_owned_or_raise(repo, username, recipe_id)

        RecipeMapper.update_from_request(request, recipe)
        recipe.date = utcnow()
        repo.update(recipe)
        logger.info("Recipe with ID %s updated by %s.", recipe_id, username)

    @staticmethod
    def delete_recipe(db: Session, username: str, recipe_id: int) -> None:
        """
        Delete a recipe owned by ``username``.

        Raises:
            NotFoundError: If the recipe does not exist
            ForbiddenError: If ``username`` is not the author
        """
        repo = RecipeRepository(db)
        recipe = RecipeService._get_owned_or_raise(repo, username, recipe_id)

        repo.delete(recipe.recipe_id)
        logger.info("Recipe with ID %s deleted.", recipe_id)

    @staticmethod
    def _get_or_raise(repo: RecipeRepository, recipe_id: int) -> Recipe:
        recipe = repo.get_by_id(recipe_id)
        if recipe is None:
            logger.debug("Recipe not found for ID: %s", recipe_id)
            raise NotFoundError(f"Recipe not found for ID: {recipe_id}")
        return recipe

    @staticmethod
    def _get_owned_or_raise(
        repo: RecipeRepository, username: str, recipe_id: int
    ) -> Recipe:
        recipe = RecipeService._get_or_raise(repo, recipe_id)
        if recipe.username != username:
            logger.warning(
                "User %s attempted to modify recipe %s owned by %s",
                username,
                recipe_id,
                recipe.username,
            )
            raise ForbiddenError(
                f"User {username} is not the author of recipe {recipe_id}"
            )
        return recipe

    @staticmethod
    def _search(
        field: SearchField, term: str, finder: Callable[[], List[Recipe]]
    ) -> List[RecipeDTO]:
        logger.debug("Searching for recipes with %s: %s", field.value, term)
        recipes = finder()

        if not recipes:
            logger.debug("No recipes found for %s: %s", field.value, term)
            raise NotFoundError(
                f"No recipes found for {field.value}: {term}",
                details={field.value: term},
            )

        logger.info("%d recipes found for %s: %s", len(recipes), field.value, term)
        return [RecipeMapper.to_dto(r) for r in recipes]
