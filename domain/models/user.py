"""
User account model used for HTTP Basic authentication.
"""

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship

from domain.enums import Authority
from domain.models.database import Base, utcnow


class AppUser(Base):
    """Registered user. The username is the registration email."""

    __tablename__ = "app_user"

    username = Column(String(255), primary_key=True)
    password = Column(Text, nullable=False)  # bcrypt hash
    authority = Column(Text, nullable=False, default=Authority.USER.value)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    recipes = relationship("Recipe", back_populates="author", passive_deletes=True)

    @property
    def authorities(self) -> list[str]:
        return [self.authority]

    def __repr__(self):
        return f"<AppUser(username='{self.username}', authority='{self.authority}')>"
