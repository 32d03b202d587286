"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from src.schemas.ingredient import IngredientCreate, IngredientResponse
from src.schemas.pantry import PantryEntryCreate, PantryEntryResponse, PantryEntryUpdate
from src.schemas.recipe import (
    RecipeCreate,
    RecipeRecommendation,
    RecipeResponse,
    RecipeUpdate,
    SearchByIngredientsRequest,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "AuthResponse",
    "UserResponse",
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeResponse",
    "RecipeRecommendation",
    "SearchByIngredientsRequest",
    "PantryEntryCreate",
    "PantryEntryUpdate",
    "PantryEntryResponse",
    "IngredientCreate",
    "IngredientResponse",
]
