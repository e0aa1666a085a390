"""Health check routes"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from api.responses import HealthResponse
from app.config import settings

router = APIRouter(prefix="/actuator", tags=["Health"])
logger = logging.getLogger("recipes.api.health")


@router.get("/health", response_model=HealthResponse, responses={503: {"model": HealthResponse}})
def health(db: Session = Depends(get_db)):
    """Report service and database status"""
    try:
        db.execute(text("SELECT 1"))
        database = "UP"
    except SQLAlchemyError:
        logger.exception("Database health check failed")
        database = "DOWN"

    body = HealthResponse(
        status=database,
        service=settings.app_name,
        version=settings.app_version,
        database=database,
    )
    if database != "UP":
        return JSONResponse(status_code=503, content=body.model_dump())
    return body
