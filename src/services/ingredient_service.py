"""Ingredient catalog service: canonical names and alias resolution."""

import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from src.models.ingredient import Ingredient, IngredientAlias
from src.services.matcher import normalize_ingredient

logger = logging.getLogger(__name__)


class IngredientService:
    """Service for ingredient catalog operations."""

    def __init__(self, db: Session):
        self.db = db

    def list_ingredients(self, search: str | None = None) -> list[Ingredient]:
        """List catalog ingredients, optionally filtered by a name substring."""
        query = self.db.query(Ingredient)
        normalized = normalize_ingredient(search)
        if normalized:
            query = query.filter(Ingredient.normalized_name.contains(normalized))
        return query.order_by(Ingredient.normalized_name).all()

    def get_ingredient(self, ingredient_id: int) -> Ingredient:
        """Get a catalog ingredient or raise 404."""
        ingredient = self.db.query(Ingredient).filter(Ingredient.id == ingredient_id).first()
        if not ingredient:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Ingredient not found"
            )
        return ingredient

    def create_ingredient(
        self,
        name: str,
        category: str | None = None,
        aliases: list[str] | None = None,
    ) -> Ingredient:
        """Create a catalog ingredient with optional aliases."""
        normalized = normalize_ingredient(name)
        if not normalized:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Ingredient name is blank"
            )

        if self._is_name_taken(normalized):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Ingredient '{name.strip()}' already exists",
            )

        ingredient = Ingredient(name=name.strip(), normalized_name=normalized, category=category)
        for alias in aliases or []:
            alias_normalized = self._validate_new_alias(alias, normalized)
            if alias_normalized is not None and not any(
                a.alias == alias_normalized for a in ingredient.aliases
            ):
                ingredient.aliases.append(IngredientAlias(alias=alias_normalized))

        self.db.add(ingredient)
        self.db.commit()
        self.db.refresh(ingredient)
        logger.info(f"Created ingredient '{normalized}' with {len(ingredient.aliases)} aliases")
        return ingredient

    def add_alias(self, ingredient_id: int, alias: str) -> IngredientAlias:
        """Attach an alias to an existing ingredient."""
        ingredient = self.get_ingredient(ingredient_id)
        alias_normalized = self._validate_new_alias(alias, ingredient.normalized_name)
        if alias_normalized is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Alias must differ from the ingredient name",
            )

        record = IngredientAlias(ingredient_id=ingredient.id, alias=alias_normalized)
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        logger.info(f"Added alias '{alias_normalized}' -> '{ingredient.normalized_name}'")
        return record

    def delete_ingredient(self, ingredient_id: int) -> None:
        """Remove an ingredient and its aliases from the catalog."""
        ingredient = self.get_ingredient(ingredient_id)
        self.db.delete(ingredient)
        self.db.commit()

    def get_alias_map(self) -> dict[str, str]:
        """Map every normalized alias to its canonical normalized name."""
        rows = (
            self.db.query(IngredientAlias.alias, Ingredient.normalized_name)
            .join(Ingredient, IngredientAlias.ingredient_id == Ingredient.id)
            .all()
        )
        return {alias: canonical for alias, canonical in rows}

    def _is_name_taken(self, normalized: str) -> bool:
        """Check whether a normalized name is already an ingredient or an alias."""
        if self.db.query(Ingredient).filter(Ingredient.normalized_name == normalized).first():
            return True
        return (
            self.db.query(IngredientAlias).filter(IngredientAlias.alias == normalized).first()
            is not None
        )

    def _validate_new_alias(self, alias: str, canonical: str) -> str | None:
        """Normalize a new alias; None when it is blank or equals the canonical name."""
        normalized = normalize_ingredient(alias)
        if not normalized or normalized == canonical:
            return None
        if self._is_name_taken(normalized):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"'{alias.strip()}' is already used by another ingredient",
            )
        return normalized
