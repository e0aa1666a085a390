"""
API dependencies for dependency injection
"""

from base64 import b64decode
from typing import Generator
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param
from sqlalchemy.orm import Session

from domain.models import AppUser, get_db_session
from services.user_service import UserService


class UTF8HTTPBasic(HTTPBasic):
    """HTTP Basic scheme that decodes credentials as UTF-8.

    FastAPI's HTTPBasic only accepts ASCII, which would lock out accounts
    registered with non-ASCII passwords.
    """

    def _unauthorized(self, detail: str) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": f'Basic realm="{self.realm}"'},
        )

    async def __call__(self, request: Request) -> HTTPBasicCredentials:
        authorization = request.headers.get("Authorization")
        scheme, param = get_authorization_scheme_param(authorization)
        if not authorization or scheme.lower() != "basic":
            raise self._unauthorized("Not authenticated")
        try:
            # binascii.Error and UnicodeDecodeError are both ValueErrors
            data = b64decode(param).decode("utf-8")
        except ValueError:
            raise self._unauthorized("Invalid authentication credentials")
        username, separator, password = data.partition(":")
        if not separator:
            raise self._unauthorized("Invalid authentication credentials")
        return HTTPBasicCredentials(username=username, password=password)


basic_auth = UTF8HTTPBasic(realm="recipes")


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_current_user(
    credentials: HTTPBasicCredentials = Depends(basic_auth),
    db: Session = Depends(get_db),
) -> AppUser:
    """Authenticated user for the current request (HTTP Basic)"""
    return UserService.authenticate(db, credentials.username, credentials.password)
