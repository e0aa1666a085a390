"""
User Repository - Data access layer for user accounts
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.enums import Authority
from domain.models import AppUser
from app.exceptions import ServiceValidationError


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_username(self, username: str) -> Optional[AppUser]:
        """Get user by username (registration email)"""
        return self.db.query(AppUser).filter(AppUser.username == username).first()

    def exists_by_username(self, username: str) -> bool:
        """Check whether a username is already registered"""
        return (
            self.db.query(AppUser.username)
            .filter(AppUser.username == username)
            .first()
            is not None
        )

    def create_user(
        self, username: str, password_hash: str, authority: str = Authority.USER.value
    ) -> AppUser:
        """Create a new user account from an already hashed password"""
        user = AppUser(username=username, password=password_hash, authority=authority)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise ServiceValidationError(
                "User already exists", details={"username": username}
            )
