"""Pantry API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from src.api.dependencies import get_current_user, get_pantry_service
from src.api.recipes import to_recommendations
from src.config import get_settings
from src.models.user import User
from src.schemas.pantry import PantryEntryCreate, PantryEntryResponse, PantryEntryUpdate
from src.schemas.recipe import RecipeRecommendation
from src.services.pantry_service import PantryService

router = APIRouter(prefix="/api/v1/pantry", tags=["pantry"])


@router.get("", response_model=list[PantryEntryResponse])
def list_pantry_entries(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """List all pantry entries for the current user."""
    return service.list_entries(current_user)


@router.post("", response_model=PantryEntryResponse, status_code=status.HTTP_201_CREATED)
def add_pantry_entry(
    entry_data: PantryEntryCreate,
    response: Response,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Add an ingredient to the pantry.

    If the ingredient is already there (case-insensitive), its quantity is
    increased instead and 200 is returned.
    """
    entry, created = service.add_entry(
        current_user,
        name=entry_data.name,
        quantity=entry_data.quantity,
        unit=entry_data.unit,
        expires_at=entry_data.expires_at,
    )
    if not created:
        response.status_code = status.HTTP_200_OK
    return entry


# --- Static routes first (before /{entry_id}) ---


@router.get("/recommendations", response_model=list[RecipeRecommendation])
def get_recommendations(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PantryService, Depends(get_pantry_service)],
    limit: Annotated[int | None, Query(ge=1, le=1000)] = None,
):
    """Recipes you can make with what is in your pantry, best match first."""
    if limit is None:
        limit = get_settings().recommendation_limit
    return to_recommendations(service.recommend_recipes(current_user, limit=limit))


@router.get("/expiring", response_model=list[PantryEntryResponse])
def list_expiring_entries(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PantryService, Depends(get_pantry_service)],
    days: Annotated[int, Query(ge=0, le=365)] = 3,
):
    """Pantry entries expiring within the given number of days."""
    return service.list_expiring(current_user, days=days)


# --- Dynamic routes ---


@router.get("/{entry_id}", response_model=PantryEntryResponse)
def get_pantry_entry(
    entry_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Get a specific pantry entry."""
    return service.get_entry(entry_id, current_user)


@router.put("/{entry_id}", response_model=PantryEntryResponse)
def update_pantry_entry(
    entry_id: int,
    entry_data: PantryEntryUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Update a pantry entry."""
    return service.update_entry(
        entry_id, current_user, entry_data.model_dump(exclude_unset=True)
    )


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pantry_entry(
    entry_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Remove an ingredient from the pantry."""
    service.delete_entry(entry_id, current_user)
