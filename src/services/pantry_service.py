"""Pantry service for stock keeping and pantry-driven recommendations."""

import logging
from datetime import UTC, datetime, timedelta

from fastapi import HTTPException, status
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.mixins import utcnow
from src.models.pantry import PantryEntry
from src.models.recipe import Recipe
from src.models.user import User
from src.services.matcher import MatchResult, normalize_ingredient
from src.services.recipe_service import RecipeService

logger = logging.getLogger(__name__)


def to_utc(value: datetime | None) -> datetime | None:
    """Store timestamps as UTC; naive values are taken to be UTC already."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class PantryService:
    """Service for pantry-related operations."""

    def __init__(self, db: Session, recipe_service: RecipeService | None = None):
        self.db = db
        self.recipe_service = recipe_service or RecipeService(db)

    def list_entries(self, user: User) -> list[PantryEntry]:
        """List the user's pantry ordered by ingredient name."""
        return (
            self.db.query(PantryEntry)
            .filter(PantryEntry.user_id == user.id)
            .order_by(PantryEntry.normalized_name)
            .all()
        )

    def get_entry(self, entry_id: int, user: User) -> PantryEntry:
        """Get a pantry entry owned by the user."""
        entry = (
            self.db.query(PantryEntry)
            .filter(PantryEntry.id == entry_id, PantryEntry.user_id == user.id)
            .first()
        )
        if not entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Pantry entry not found"
            )
        return entry

    def add_entry(
        self,
        user: User,
        name: str,
        quantity: float,
        unit: str | None = None,
        expires_at: datetime | None = None,
    ) -> tuple[PantryEntry, bool]:
        """Add an ingredient, or restock it when the user already has it.

        Returns:
            (entry, created) where created is False for a restock.
        """
        normalized = normalize_ingredient(name)
        if not normalized:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Ingredient name is blank"
            )

        existing = (
            self.db.query(PantryEntry)
            .filter(PantryEntry.user_id == user.id, PantryEntry.normalized_name == normalized)
            .first()
        )

        if existing:
            existing.quantity = (existing.quantity or 0) + quantity
            if unit is not None:
                existing.unit = unit
            if expires_at is not None:
                existing.expires_at = to_utc(expires_at)
            self.db.commit()
            self.db.refresh(existing)
            logger.info(f"Restocked '{normalized}' for user {user.id}: now {existing.quantity}")
            return existing, False

        entry = PantryEntry(
            user_id=user.id,
            name=name.strip(),
            normalized_name=normalized,
            quantity=quantity,
            unit=unit,
            expires_at=to_utc(expires_at),
        )
        self.db.add(entry)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent add of the same ingredient
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="This ingredient is already in your pantry",
            ) from None
        self.db.refresh(entry)
        logger.info(f"Added '{normalized}' to pantry of user {user.id}")
        return entry, True

    def update_entry(self, entry_id: int, user: User, changes: dict) -> PantryEntry:
        """Apply explicitly provided fields to a pantry entry."""
        entry = self.get_entry(entry_id, user)

        if changes.get("name") is not None:
            normalized = normalize_ingredient(changes["name"])
            if not normalized:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST, detail="Ingredient name is blank"
                )
            entry.name = changes["name"].strip()
            entry.normalized_name = normalized
        if changes.get("quantity") is not None:
            entry.quantity = changes["quantity"]
        if "unit" in changes:
            entry.unit = changes["unit"] or None
        if "expires_at" in changes:
            entry.expires_at = to_utc(changes["expires_at"])

        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="This ingredient is already in your pantry",
            ) from None
        self.db.refresh(entry)
        return entry

    def delete_entry(self, entry_id: int, user: User) -> None:
        """Remove an ingredient from the pantry."""
        entry = self.get_entry(entry_id, user)
        self.db.delete(entry)
        self.db.commit()

    def list_expiring(self, user: User, days: int = 3) -> list[PantryEntry]:
        """Entries that expire within the next `days` days (already expired included)."""
        cutoff = utcnow() + timedelta(days=days)
        return (
            self.db.query(PantryEntry)
            .filter(
                PantryEntry.user_id == user.id,
                PantryEntry.expires_at.is_not(None),
                PantryEntry.expires_at <= cutoff,
            )
            .order_by(PantryEntry.expires_at, PantryEntry.normalized_name)
            .all()
        )

    def get_usable_ingredients(self, user: User) -> set[str]:
        """Normalized names of entries in stock and not yet expired."""
        rows = (
            self.db.query(PantryEntry.normalized_name)
            .filter(
                PantryEntry.user_id == user.id,
                PantryEntry.quantity > 0,
                or_(PantryEntry.expires_at.is_(None), PantryEntry.expires_at > utcnow()),
            )
            .all()
        )
        return {name for (name,) in rows}

    def recommend_recipes(
        self, user: User, limit: int | None = None
    ) -> list[tuple[Recipe, MatchResult]]:
        """Recipes the user can substantially make with what is on hand."""
        pantry = self.get_usable_ingredients(user)
        if not pantry:
            logger.info(f"No usable pantry entries for user {user.id}, skipping recommendations")
            return []
        return self.recipe_service.recommend(pantry, limit=limit)
