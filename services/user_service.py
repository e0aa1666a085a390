"""
Account registration and HTTP Basic credential checks.
"""

import logging
from sqlalchemy.orm import Session

from app.exceptions import ServiceValidationError, UnauthorizedError
from app.security import hash_password, verify_password
from domain.enums import Authority
from domain.models import AppUser
from domain.schemas.user_schemas import RegistrationRequest
from repositories import UserRepository

logger = logging.getLogger("recipes.users")


class UserService:
    """Business logic for user accounts"""

    @staticmethod
    def register(db: Session, request: RegistrationRequest) -> AppUser:
        """
        Register a new account with the ``ROLE_USER`` authority.

        Raises:
            ServiceValidationError: If the email is already registered
        """
        user_repo = UserRepository(db)
        if user_repo.exists_by_username(request.email):
            logger.error("User with email %s already exists", request.email)
            raise ServiceValidationError("User already exists")

        logger.info("Registering new user: %s", request.email)
        return user_repo.create_user(
            username=request.email,
            password_hash=hash_password(request.password),
            authority=Authority.USER.value,
        )

    @staticmethod
    def authenticate(db: Session, username: str, password: str) -> AppUser:
        """
        Resolve HTTP Basic credentials to a user.

        Raises:
            UnauthorizedError: If the user is unknown or the password does not match
        """
        logger.debug("Searching for user with username: %s", username)
        user = UserRepository(db).get_by_username(username.strip().lower())
        if user is None or not verify_password(password, user.password):
            logger.info("Authentication failed for username: %s", username)
            raise UnauthorizedError("Bad credentials")
        return user
