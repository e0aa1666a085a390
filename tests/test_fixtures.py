"""
Shared test fixtures and utilities for the Recipes test suite.

Tests run against the in-memory SQLite database configured in conftest.py.
Every test that uses ``db_session`` starts from an empty schema.
"""

import uuid
from typing import Generator, List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.security import hash_password
from domain.models import AppUser, Base, Recipe, SessionLocal, engine, init_database
from repositories import UserRepository
from main import app

PASSWORD = "test1234"


def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4()}@example.com"


def basic(user: AppUser, password: str = PASSWORD) -> tuple:
    """httpx ``auth`` value for a user created with make_user()"""
    return (user.username, password)


def make_user(db: Session, email: str = None, password: str = PASSWORD) -> AppUser:
    """Persist a ROLE_USER account with a real bcrypt hash."""
    return UserRepository(db).create_user(
        username=email or unique_email("cook"),
        password_hash=hash_password(password),
    )


def make_recipe(
    db: Session,
    author: AppUser,
    name: str = "Recipe 1",
    category: str = "Category 1",
    description: str = "Description 1",
    ingredients: List[str] = None,
    directions: List[str] = None,
) -> Recipe:
    """Persist a recipe owned by ``author``."""
    recipe = Recipe(
        name=name,
        description=description,
        category=category,
        ingredients=ingredients or ["Ingredient 1", "Ingredient 2"],
        directions=directions or ["Direction 1", "Direction 2"],
        username=author.username,
    )
    db.add(recipe)
    db.commit()
    db.refresh(recipe)
    return recipe


def seed_recipes(db: Session, author: AppUser) -> List[Recipe]:
    """
    Four recipes in two categories, inserted oldest first:

    ========  ==========  ==========
    id        name        category
    ========  ==========  ==========
    1         test        cat1
    2         tesT        cat1
    3         TEST        cat2
    4         test POST   cat2
    ========  ==========  ==========
    """
    rows = [
        ("test", "test", "cat1", ["test"], ["test"]),
        ("tesT", "test2", "cat1", ["test2"], ["test2"]),
        ("TEST", "test2", "cat2", ["test2"], ["test2"]),
        ("test POST", "test2", "cat2", ["test2"], ["test2"]),
    ]
    return [
        make_recipe(
            db,
            author,
            name=name,
            description=description,
            category=category,
            ingredients=ingredients,
            directions=directions,
        )
        for name, description, category, ingredients, directions in rows
    ]


def valid_recipe_payload(**overrides) -> dict:
    payload = {
        "name": "TEST POST",
        "description": "test",
        "category": "test",
        "ingredients": ["test"],
        "directions": ["test"],
    }
    payload.update(overrides)
    return payload


# =============================================================================
# DATABASE SESSION AND CLIENT FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Database session on a freshly created schema.

    The tables are dropped again after the test so each test starts empty.
    """
    Base.metadata.drop_all(bind=engine)
    init_database()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """TestClient bound to the fresh schema; dependency overrides are reset afterwards."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def author(db_session: Session) -> AppUser:
    return make_user(db_session, email="test3@test.com")


@pytest.fixture(scope="function")
def recipes(db_session: Session, author: AppUser) -> List[Recipe]:
    return seed_recipes(db_session, author)
