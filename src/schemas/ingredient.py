"""Ingredient catalog schemas."""

from pydantic import BaseModel, ConfigDict, Field


class IngredientCreate(BaseModel):
    """Create a catalog ingredient."""

    name: str = Field(..., min_length=1, max_length=255)
    category: str | None = Field(None, max_length=100)
    aliases: list[str] = []


class IngredientAliasCreate(BaseModel):
    """Attach an alternate name to an ingredient."""

    alias: str = Field(..., min_length=1, max_length=255)


class IngredientAliasResponse(BaseModel):
    """Ingredient alias response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    ingredient_id: int
    alias: str


class IngredientResponse(BaseModel):
    """Catalog ingredient with its aliases."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    normalized_name: str
    category: str | None
    aliases: list[IngredientAliasResponse]
