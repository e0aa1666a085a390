"""Pydantic schemas for account registration."""

import re

from pydantic import BaseModel, Field, field_validator

from app.security import BCRYPT_MAX_BYTES

EMAIL_PATTERN = re.compile(
    r"^(?=.{1,64}@)[A-Za-z0-9\+_-]+(\.[A-Za-z0-9\+_-]+)*@"
    r"[^-][A-Za-z0-9\+-]+(\.[A-Za-z0-9\+-]+)*(\.[A-Za-z]{2,})$"
)
PASSWORD_MIN_LENGTH = 8


class RegistrationRequest(BaseModel):
    """Schema for registering a new account"""

    email: str = Field(..., description="Email address, used as the login username")
    password: str = Field(..., description="Clear-text password, at least 8 characters")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Email must be a well-formed email address")
        return v.lower()

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Password is mandatory")
        if len(v) < PASSWORD_MIN_LENGTH:
            raise ValueError("Password must be at least 8 characters long")
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes long")
        return v


class RegistrationResponse(BaseModel):
    """Schema returned after a successful registration"""

    status: str = "ok"
    message: str
    username: str
