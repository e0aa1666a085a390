"""
Recipe Repository - Data access layer for recipes
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Recipe


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipe data access"""

    def __init__(self, db: Session):
        super().__init__(db, Recipe)

    def get_by_id(self, recipe_id: int) -> Optional[Recipe]:
        """Get recipe by ID; the author is joined eagerly"""
        return self.db.query(Recipe).filter(Recipe.recipe_id == recipe_id).first()

    def _newest_first(self, query):
        return query.order_by(Recipe.date.desc(), Recipe.recipe_id.desc())

    def find_by_category(self, category: str) -> List[Recipe]:
        """Recipes whose category equals ``category`` ignoring case, newest first"""
        query = self.db.query(Recipe).filter(
            func.lower(Recipe.category) == func.lower(category)
        )
        return self._newest_first(query).all()

    def find_by_name_containing(self, name: str) -> List[Recipe]:
        """Recipes whose name contains ``name`` ignoring case, newest first"""
        query = self.db.query(Recipe).filter(
            Recipe.name.icontains(name, autoescape=True)
        )
        return self._newest_first(query).all()
