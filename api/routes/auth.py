"""Account registration routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from api.responses import ErrorResponse
from domain.schemas.user_schemas import RegistrationRequest, RegistrationResponse
from services.user_service import UserService

router = APIRouter(prefix="/api", tags=["Accounts"])
logger = logging.getLogger("recipes.api.auth")


@router.post(
    "/register",
    response_model=RegistrationResponse,
    responses={400: {"model": ErrorResponse, "description": "User already exists"}},
)
def register(request: RegistrationRequest, db: Session = Depends(get_db)):
    """Register a new user with the provided email and password."""
    user = UserService.register(db, request)
    return RegistrationResponse(
        message="New user successfully registered", username=user.username
    )
