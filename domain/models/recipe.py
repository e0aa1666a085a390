"""
Recipe model - a recipe authored by a registered user.
"""

from sqlalchemy import Column, Integer, Text, String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship

from domain.models.database import Base, utcnow


class Recipe(Base):
    """
    A recipe with ordered ingredient and direction lists.

    ``date`` is the last-modified time; it is set on insert and refreshed
    on every update, and searches list the most recent recipes first.
    """

    __tablename__ = "recipe"

    recipe_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    date = Column(DateTime(), default=utcnow, onupdate=utcnow, nullable=False, index=True)
    ingredients = Column(JSON, nullable=False)
    directions = Column(JSON, nullable=False)
    username = Column(
        String(255),
        ForeignKey("app_user.username", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    author = relationship("AppUser", back_populates="recipes", lazy="joined")

    def __repr__(self):
        return f"<Recipe(id={self.recipe_id}, name='{self.name}', category='{self.category}')>"
