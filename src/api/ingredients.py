"""Ingredient catalog API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_admin_user, get_current_user, get_ingredient_service
from src.models.user import User
from src.schemas.ingredient import (
    IngredientAliasCreate,
    IngredientAliasResponse,
    IngredientCreate,
    IngredientResponse,
)
from src.services.ingredient_service import IngredientService

router = APIRouter(prefix="/api/v1/ingredients", tags=["ingredients"])


@router.get("", response_model=list[IngredientResponse])
def list_ingredients(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[IngredientService, Depends(get_ingredient_service)],
    search: str | None = None,
):
    """List catalog ingredients."""
    return service.list_ingredients(search)


@router.post("", response_model=IngredientResponse, status_code=status.HTTP_201_CREATED)
def create_ingredient(
    data: IngredientCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[IngredientService, Depends(get_ingredient_service)],
):
    """Add an ingredient to the shared catalog."""
    return service.create_ingredient(data.name, category=data.category, aliases=data.aliases)


@router.get("/{ingredient_id}", response_model=IngredientResponse)
def get_ingredient(
    ingredient_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[IngredientService, Depends(get_ingredient_service)],
):
    """Get a catalog ingredient with its aliases."""
    return service.get_ingredient(ingredient_id)


@router.post(
    "/{ingredient_id}/aliases",
    response_model=IngredientAliasResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_alias(
    ingredient_id: int,
    data: IngredientAliasCreate,
    admin: Annotated[User, Depends(get_admin_user)],
    service: Annotated[IngredientService, Depends(get_ingredient_service)],
):
    """Teach the matcher another name for an ingredient."""
    return service.add_alias(ingredient_id, data.alias)


@router.delete("/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ingredient(
    ingredient_id: int,
    admin: Annotated[User, Depends(get_admin_user)],
    service: Annotated[IngredientService, Depends(get_ingredient_service)],
):
    """Remove an ingredient and its aliases from the catalog."""
    service.delete_ingredient(ingredient_id)
