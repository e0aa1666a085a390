"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
    utcnow,
)
from domain.models.recipe import Recipe
from domain.models.user import AppUser

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    "utcnow",
    # Models
    "AppUser",
    "Recipe",
]
