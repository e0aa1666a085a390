"""Recipe routes: read, search, create, update and delete"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
import logging
from typing import List, Optional

from api.dependencies import get_db, get_current_user
from api.responses import AUTH_ERRORS, OWNER_ERRORS, RECIPE_ERRORS, ErrorResponse
from app.exceptions import ServiceValidationError
from domain.models import AppUser
from domain.schemas.recipe_schemas import (
    RecipeCreate,
    RecipeUpdate,
    RecipeDTO,
    RecipeCreatedResponse,
)
from services.recipe_service import RecipeService

router = APIRouter(prefix="/api/recipe", tags=["Recipes"])
logger = logging.getLogger("recipes.api.recipes")


@router.get(
    "/search",
    response_model=List[RecipeDTO],
    responses={
        **RECIPE_ERRORS,
        400: {"model": ErrorResponse, "description": "Both or neither filter given"},
    },
)
def search_recipe(
    category: Optional[str] = Query(None, description="Exact category, any case"),
    name: Optional[str] = Query(None, description="Substring of the name, any case"),
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Search recipes by category or by name, newest first.

    Exactly one of ``category`` and ``name`` must be supplied.
    """
    if category is not None and name is not None:
        logger.error("Both category and name parameters were provided.")
        raise ServiceValidationError("Provide either 'category' or 'name', not both")

    if category is not None:
        logger.debug("Searching for recipe with category: %s, from the controller.", category)
        return RecipeService.search_by_category(db, category)
    if name is not None:
        logger.debug("Searching for recipe with name: %s, from the controller.", name)
        return RecipeService.search_by_name(db, name)

    logger.error("Neither category nor name parameters were provided.")
    raise ServiceValidationError("Provide one of 'category' or 'name'")


@router.post(
    "/new",
    response_model=RecipeCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=AUTH_ERRORS,
)
def post_recipe(
    recipe: RecipeCreate,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a recipe authored by the authenticated user"""
    logger.info("User %s is creating a new recipe", user.username)
    recipe_id = RecipeService.save_recipe(db, user.username, recipe)
    return RecipeCreatedResponse(recipe_id=recipe_id)


@router.get("/{recipe_id}", response_model=RecipeDTO, responses=RECIPE_ERRORS)
def get_recipe(
    recipe_id: int,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Retrieve a recipe by its id"""
    return RecipeService.get_recipe(db, recipe_id)


@router.put(
    "/{recipe_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=OWNER_ERRORS,
)
def update_recipe(
    recipe_id: int,
    recipe: RecipeUpdate,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update the supplied fields of a recipe; only its author may do this"""
    RecipeService.update_recipe(db, user.username, recipe_id, recipe)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{recipe_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=OWNER_ERRORS,
)
def delete_recipe(
    recipe_id: int,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a recipe; only its author may do this"""
    RecipeService.delete_recipe(db, user.username, recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
