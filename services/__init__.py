"""Services package - Business logic layer"""

from services.recipe_service import RecipeService
from services.user_service import UserService

__all__ = [
    "RecipeService",
    "UserService",
]
