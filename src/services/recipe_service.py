"""Recipe service for catalog queries, moderation and ingredient search."""

import logging

from fastapi import HTTPException, status
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, selectinload

from src.config import get_settings
from src.models.enums import RecipeStatus
from src.models.recipe import Recipe, RecipeIngredient
from src.models.user import User
from src.services.ingredient_service import IngredientService
from src.services.matcher import (
    CatalogRecipe,
    IngredientRequirement,
    MatchResult,
    match,
    normalize_ingredient,
)

logger = logging.getLogger(__name__)


def require_ingredient_name(name: str) -> str:
    """Return the normalized name, rejecting names that are blank after trimming."""
    normalized = normalize_ingredient(name)
    if not normalized:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Ingredient name is blank"
        )
    return normalized


class RecipeService:
    """Service for recipe-related operations."""

    def __init__(self, db: Session):
        self.db = db
        self.settings = get_settings()

    # --- Queries ---

    def list_visible_recipes(
        self,
        user: User,
        search: str | None = None,
        cuisine: str | None = None,
        max_cooking_time: int | None = None,
    ) -> list[Recipe]:
        """List approved recipes plus the user's own, with optional filters."""
        query = self.db.query(Recipe).filter(
            Recipe.deleted_at.is_(None),
            or_(Recipe.status == RecipeStatus.APPROVED.value, Recipe.author_id == user.id),
        )

        if search and search.strip():
            pattern = f"%{search.strip().lower()}%"
            query = query.filter(
                or_(
                    func.lower(Recipe.title).like(pattern),
                    func.lower(func.coalesce(Recipe.description, "")).like(pattern),
                )
            )
        if cuisine and cuisine.strip():
            query = query.filter(func.lower(Recipe.cuisine) == cuisine.strip().lower())
        if max_cooking_time is not None:
            query = query.filter(Recipe.cooking_time <= max_cooking_time)

        return query.order_by(Recipe.created_at.desc(), Recipe.id.desc()).all()

    def get_visible_recipe(self, recipe_id: int, user: User) -> Recipe:
        """Get a recipe the user may see: approved, or authored by them."""
        recipe = (
            self.db.query(Recipe)
            .filter(Recipe.id == recipe_id, Recipe.deleted_at.is_(None))
            .first()
        )
        if not recipe or (not recipe.is_approved and recipe.author_id != user.id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
        return recipe

    def get_authored_recipe(self, recipe_id: int, user: User) -> Recipe:
        """Get a recipe the user is allowed to modify."""
        recipe = self.get_visible_recipe(recipe_id, user)
        if recipe.author_id != user.id:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Only the author can modify this recipe",
            )
        return recipe

    def get_authored_ingredient(self, ingredient_id: int, user: User) -> RecipeIngredient:
        """Get an ingredient that belongs to one of the user's recipes."""
        ingredient = (
            self.db.query(RecipeIngredient)
            .join(Recipe)
            .filter(
                RecipeIngredient.id == ingredient_id,
                Recipe.author_id == user.id,
                Recipe.deleted_at.is_(None),
            )
            .first()
        )
        if not ingredient:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Ingredient not found"
            )
        return ingredient

    # --- Mutations ---

    def create_recipe(self, user: User, data: dict) -> Recipe:
        """Create a recipe with its ingredients in declared order."""
        ingredients = data.pop("ingredients", [])
        initial_status = (
            RecipeStatus.APPROVED if self.settings.auto_approve_recipes else RecipeStatus.PENDING
        )
        recipe = Recipe(author_id=user.id, status=initial_status.value, **data)

        for position, ing_data in enumerate(ingredients):
            recipe.ingredients.append(
                RecipeIngredient(
                    name=ing_data["name"].strip(),
                    normalized_name=require_ingredient_name(ing_data["name"]),
                    quantity=ing_data.get("quantity"),
                    position=position,
                )
            )

        self.db.add(recipe)
        self.db.commit()
        self.db.refresh(recipe)
        logger.info(f"User {user.id} created recipe {recipe.id} ({recipe.status})")
        return recipe

    def add_ingredient(self, recipe: Recipe, name: str, quantity: str | None) -> RecipeIngredient:
        """Append an ingredient to the end of a recipe's list."""
        next_position = max((ing.position for ing in recipe.ingredients), default=-1) + 1
        ingredient = RecipeIngredient(
            recipe_id=recipe.id,
            name=name.strip(),
            normalized_name=require_ingredient_name(name),
            quantity=quantity,
            position=next_position,
        )
        self.db.add(ingredient)
        self.db.commit()
        self.db.refresh(ingredient)
        return ingredient

    def approve_recipe(self, recipe_id: int, user: User) -> Recipe:
        """Publish a pending recipe to the catalog (admins only)."""
        if not user.is_admin:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail="Admin privileges required"
            )

        recipe = (
            self.db.query(Recipe)
            .filter(Recipe.id == recipe_id, Recipe.deleted_at.is_(None))
            .first()
        )
        if not recipe:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")

        if not recipe.is_approved:
            recipe.status = RecipeStatus.APPROVED.value
            self.db.commit()
            self.db.refresh(recipe)
            logger.info(f"Recipe {recipe.id} approved by user {user.id}")
        return recipe

    # --- Matching ---

    def get_catalog(self) -> list[Recipe]:
        """Approved, non-deleted recipes in stable catalog order."""
        return (
            self.db.query(Recipe)
            .options(selectinload(Recipe.ingredients))
            .filter(
                Recipe.status == RecipeStatus.APPROVED.value,
                Recipe.deleted_at.is_(None),
            )
            .order_by(Recipe.id)
            .all()
        )

    @staticmethod
    def to_catalog_recipe(recipe: Recipe) -> CatalogRecipe:
        """Convert an ORM recipe into the matcher's record type."""
        return CatalogRecipe(
            recipe_id=recipe.id,
            requirements=tuple(
                IngredientRequirement(name=ing.name, quantity=ing.quantity)
                for ing in recipe.ingredients
            ),
        )

    def recommend(
        self,
        pantry_ingredients: list[str] | set[str],
        limit: int | None = None,
    ) -> list[tuple[Recipe, MatchResult]]:
        """Rank approved recipes against a set of ingredient names."""
        if not pantry_ingredients:
            return []

        recipes = self.get_catalog()
        by_id = {recipe.id: recipe for recipe in recipes}

        aliases = None
        if self.settings.resolve_ingredient_aliases:
            aliases = IngredientService(self.db).get_alias_map()

        results = match(
            pantry_ingredients,
            [self.to_catalog_recipe(recipe) for recipe in recipes],
            limit=limit,
            aliases=aliases,
        )
        logger.info(
            f"Recommended {len(results)} of {len(recipes)} catalog recipes "
            f"for {len(pantry_ingredients)} ingredients"
        )
        return [(by_id[result.recipe_id], result) for result in results]
