"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.recipe_repository import RecipeRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "RecipeRepository",
]
