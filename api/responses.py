"""
Standardized API response models.
Documents the envelopes produced by the exception handlers and the health probe.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field
from datetime import datetime


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: Any = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(..., description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="UP or DOWN")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    database: str = Field(..., description="Database connectivity, UP or DOWN")


AUTH_ERRORS = {
    401: {"model": ErrorResponse, "description": "Missing or bad credentials"},
}

RECIPE_ERRORS = {
    **AUTH_ERRORS,
    404: {"model": ErrorResponse, "description": "Recipe not found"},
}

OWNER_ERRORS = {
    **RECIPE_ERRORS,
    403: {"model": ErrorResponse, "description": "Caller is not the recipe author"},
}
