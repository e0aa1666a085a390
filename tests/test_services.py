"""
Tests for RecipeService business rules against a real session.

Covers lookup, search ordering and matching, author-only modification and the
mapping of results to RecipeDTO.
"""

import pytest
from sqlalchemy.orm import Session

from test_fixtures import author, db_session, make_recipe, make_user, recipes
from app.exceptions import ForbiddenError, NotFoundError, UnauthorizedError
from domain.models import Recipe
from domain.schemas.recipe_schemas import RecipeCreate, RecipeUpdate
from repositories import RecipeRepository
from services.recipe_service import RecipeService


def test_get_recipe_maps_to_dto(db_session: Session, recipes):
    dto = RecipeService.get_recipe(db_session, recipes[1].recipe_id)

    assert dto.name == "tesT"
    assert dto.category == "cat1"
    assert dto.ingredients == ["test2"]
    assert dto.date == recipes[1].date.isoformat()


def test_get_recipe_missing_raises_not_found(db_session: Session):
    with pytest.raises(NotFoundError, match="Recipe not found for ID: 12"):
        RecipeService.get_recipe(db_session, 12)


def test_search_by_category_orders_newest_first(db_session: Session, recipes):
    results = RecipeService.search_by_category(db_session, "cat2")

    assert [r.name for r in results] == ["test POST", "TEST"]


def test_search_by_name_empty_raises_not_found(db_session: Session, recipes):
    with pytest.raises(NotFoundError) as exc_info:
        RecipeService.search_by_name(db_session, "pancake")

    assert exc_info.value.message == "No recipes found for name: pancake"
    assert exc_info.value.details == {"name": "pancake"}


def test_save_recipe_returns_generated_id(db_session: Session, author):
    request = RecipeCreate(
        name="Shakshuka",
        description="Eggs poached in tomato sauce",
        category="Breakfast",
        ingredients=["4 eggs", "400g tomatoes"],
        directions=["Simmer the sauce", "Crack in the eggs"],
    )

    recipe_id = RecipeService.save_recipe(db_session, author.username, request)

    stored = db_session.get(Recipe, recipe_id)
    assert stored.username == author.username
    assert stored.author.username == author.username
    assert stored.ingredients == ["4 eggs", "400g tomatoes"]


def test_save_recipe_for_unknown_user_raises_unauthorized(db_session: Session):
    request = RecipeCreate(
        name="x", description="x", category="x", ingredients=["x"], directions=["x"]
    )

    with pytest.raises(UnauthorizedError):
        RecipeService.save_recipe(db_session, "ghost@example.com", request)


def test_update_recipe_refreshes_date(db_session: Session, author, recipes):
    original_date = recipes[0].date

    RecipeService.update_recipe(
        db_session, author.username, recipes[0].recipe_id, RecipeUpdate(name="renamed")
    )

    db_session.expire_all()
    updated = db_session.get(Recipe, recipes[0].recipe_id)
    assert updated.name == "renamed"
    assert updated.description == "test"
    assert updated.date >= original_date


def test_update_recipe_by_non_author_raises_forbidden(db_session: Session, recipes):
    other = make_user(db_session, email="other@example.com")

    with pytest.raises(ForbiddenError, match="is not the author of recipe"):
        RecipeService.update_recipe(
            db_session, other.username, recipes[0].recipe_id, RecipeUpdate(name="mine")
        )


def test_update_recipe_missing_raises_not_found(db_session: Session, author):
    with pytest.raises(NotFoundError):
        RecipeService.update_recipe(db_session, author.username, 404, RecipeUpdate())


def test_delete_recipe_removes_row(db_session: Session, author):
    recipe = make_recipe(db_session, author)

    RecipeService.delete_recipe(db_session, author.username, recipe.recipe_id)

    assert db_session.get(Recipe, recipe.recipe_id) is None


def test_delete_recipe_goes_through_repository(db_session: Session, author, monkeypatch):
    recipe = make_recipe(db_session, author)
    deleted = []
    original = RecipeRepository.delete

    def spy(self, entity_id):
        deleted.append(entity_id)
        return original(self, entity_id)

    monkeypatch.setattr(RecipeRepository, "delete", spy)

    RecipeService.delete_recipe(db_session, author.username, recipe.recipe_id)

    assert deleted == [recipe.recipe_id]


def test_delete_recipe_by_non_author_raises_forbidden(db_session: Session, author):
    recipe = make_recipe(db_session, author)
    other = make_user(db_session, email="other@example.com")

    with pytest.raises(ForbiddenError):
        RecipeService.delete_recipe(db_session, other.username, recipe.recipe_id)
