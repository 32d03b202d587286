"""SQLAlchemy models."""

from src.models.ingredient import Ingredient, IngredientAlias
from src.models.pantry import PantryEntry
from src.models.recipe import Recipe, RecipeIngredient
from src.models.user import User

__all__ = [
    "User",
    "Recipe",
    "RecipeIngredient",
    "PantryEntry",
    "Ingredient",
    "IngredientAlias",
]
