"""
Tests for the repository classes against the in-memory database.

- UserRepository: creation, lookup, duplicate usernames
- RecipeRepository: id lookup, category and name searches
"""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from test_fixtures import author, db_session, make_recipe, recipes, unique_email
from app.exceptions import ServiceValidationError
from domain.models import AppUser, Recipe
from repositories import RecipeRepository, UserRepository


# =============================================================================
# USER REPOSITORY TESTS
# =============================================================================


def test_user_repository_create_and_get(db_session: Session):
    repo = UserRepository(db_session)
    email = unique_email("sarah")

    user = repo.create_user(username=email, password_hash="$2b$04$hash")

    assert user.authority == "ROLE_USER"
    assert user.created_at is not None
    assert user.authorities == ["ROLE_USER"]
    assert repo.get_by_username(email).username == email
    assert repo.get_by_username("missing@example.com") is None


def test_user_repository_exists_by_username(db_session: Session, author: AppUser):
    repo = UserRepository(db_session)

    assert repo.exists_by_username(author.username) is True
    assert repo.exists_by_username("missing@example.com") is False


def test_user_repository_duplicate_username(db_session: Session):
    repo = UserRepository(db_session)
    email = unique_email("duplicate")
    repo.create_user(username=email, password_hash="$2b$04$one")
    # forget the persisted instance so the clash is detected by the database
    db_session.expunge_all()

    with pytest.raises(ServiceValidationError, match="User already exists"):
        repo.create_user(username=email, password_hash="$2b$04$two")

    # session is usable again after the rollback
    assert repo.exists_by_username(email) is True


# =============================================================================
# RECIPE REPOSITORY TESTS
# =============================================================================


def test_recipe_repository_get_by_id_loads_author(db_session: Session, recipes):
    repo = RecipeRepository(db_session)

    recipe = repo.get_by_id(recipes[2].recipe_id)

    assert recipe.name == "TEST"
    assert recipe.author.username == "test3@test.com"
    assert repo.get_by_id(999) is None


def test_recipe_repository_find_by_category_ignores_case(db_session: Session, recipes):
    repo = RecipeRepository(db_session)

    assert [r.recipe_id for r in repo.find_by_category("CaT1")] == [2, 1]
    assert repo.find_by_category("cat") == []


def test_recipe_repository_find_by_name_containing(db_session: Session, recipes):
    repo = RecipeRepository(db_session)

    assert [r.recipe_id for r in repo.find_by_name_containing("TeSt")] == [4, 3, 2, 1]
    assert [r.recipe_id for r in repo.find_by_name_containing(" post")] == [4]


def test_recipe_repository_name_search_escapes_like_wildcards(
    db_session: Session, author
):
    make_recipe(db_session, author, name="100% rye bread")
    make_recipe(db_session, author, name="rye_loaf")
    repo = RecipeRepository(db_session)

    assert [r.name for r in repo.find_by_name_containing("100%")] == ["100% rye bread"]
    assert [r.name for r in repo.find_by_name_containing("_")] == ["rye_loaf"]
    assert [r.name for r in repo.find_by_name_containing("%")] == ["100% rye bread"]


def test_recipe_repository_delete(db_session: Session, recipes):
    repo = RecipeRepository(db_session)

    assert repo.delete(1) is True
    assert repo.delete(1) is False
    assert repo.get_by_id(2) is not None


def test_recipe_without_author_is_rejected(db_session: Session):
    db_session.add(
        Recipe(
            name="Orphan",
            description="No author",
            category="cat1",
            ingredients=["a"],
            directions=["b"],
        )
    )

    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()
