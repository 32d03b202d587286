"""Recipe schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# --- Recipe Ingredient ---


class RecipeIngredientCreate(BaseModel):
    """Create a recipe ingredient."""

    name: str = Field(..., min_length=1, max_length=255)
    quantity: str | None = Field(None, max_length=100)


class RecipeIngredientUpdate(BaseModel):
    """Update a recipe ingredient."""

    name: str | None = Field(None, min_length=1, max_length=255)
    quantity: str | None = Field(None, max_length=100)


class RecipeIngredientResponse(BaseModel):
    """Recipe ingredient response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    recipe_id: int
    name: str
    normalized_name: str
    quantity: str | None


# --- Recipe ---


class RecipeCreate(BaseModel):
    """Create a new recipe."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    instructions: list[str] = []
    cooking_time: int | None = Field(None, ge=0)
    prep_time: int | None = Field(None, ge=0)
    servings: int | None = Field(None, ge=1)
    cuisine: str | None = Field(None, max_length=100)
    image_url: str | None = Field(None, max_length=500)
    dietary_restrictions: list[str] = []
    ingredients: list[RecipeIngredientCreate] = []


class RecipeUpdate(BaseModel):
    """Update recipe metadata (not ingredients)."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    instructions: list[str] | None = None
    cooking_time: int | None = Field(None, ge=0)
    prep_time: int | None = Field(None, ge=0)
    servings: int | None = Field(None, ge=1)
    cuisine: str | None = Field(None, max_length=100)
    image_url: str | None = Field(None, max_length=500)
    dietary_restrictions: list[str] | None = None


class RecipeResponse(BaseModel):
    """Recipe response with ingredients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    author_id: int
    title: str
    description: str | None
    instructions: list[str]
    cooking_time: int | None
    prep_time: int | None
    servings: int | None
    cuisine: str | None
    image_url: str | None
    dietary_restrictions: list[str]
    status: Literal["pending", "approved"]
    ingredients: list[RecipeIngredientResponse]
    created_at: datetime
    updated_at: datetime


class RecipeListResponse(BaseModel):
    """Recipe list item (without full ingredients)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    author_id: int
    title: str
    description: str | None
    cooking_time: int | None
    servings: int | None
    cuisine: str | None
    image_url: str | None
    status: Literal["pending", "approved"]
    ingredient_count: int
    created_at: datetime


# --- Search by ingredients ---


class SearchByIngredientsRequest(BaseModel):
    """Ingredients the user has on hand."""

    ingredients: list[str] = Field(..., max_length=500)
    limit: int | None = Field(None, ge=1, le=1000)


class RecipeRecommendation(BaseModel):
    """A recipe ranked by how much of it the given ingredients cover."""

    recipe: RecipeListResponse
    match_percentage: int = Field(..., ge=1, le=100)
    missing_ingredients: list[str]
