"""Recipe API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import get_current_user, get_recipe_service
from src.models.recipe import Recipe
from src.models.user import User
from src.schemas.recipe import (
    RecipeCreate,
    RecipeIngredientCreate,
    RecipeIngredientResponse,
    RecipeIngredientUpdate,
    RecipeListResponse,
    RecipeRecommendation,
    RecipeResponse,
    RecipeUpdate,
    SearchByIngredientsRequest,
)
from src.services.matcher import MatchResult
from src.services.recipe_service import RecipeService, require_ingredient_name

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


def to_list_response(recipe: Recipe) -> RecipeListResponse:
    """Build the summary view of a recipe."""
    return RecipeListResponse(
        id=recipe.id,
        author_id=recipe.author_id,
        title=recipe.title,
        description=recipe.description,
        cooking_time=recipe.cooking_time,
        servings=recipe.servings,
        cuisine=recipe.cuisine,
        image_url=recipe.image_url,
        status=recipe.status,
        ingredient_count=len(recipe.ingredients),
        created_at=recipe.created_at,
    )


def to_recommendations(pairs: list[tuple[Recipe, MatchResult]]) -> list[RecipeRecommendation]:
    """Pair each ranked recipe with its match details."""
    return [
        RecipeRecommendation(
            recipe=to_list_response(recipe),
            match_percentage=result.match_percentage,
            missing_ingredients=list(result.missing_ingredients),
        )
        for recipe, result in pairs
    ]


# --- Static routes first (before /{recipe_id}) ---


@router.get("", response_model=list[RecipeListResponse])
def list_recipes(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
    search: str | None = None,
    cuisine: str | None = None,
    max_cooking_time: Annotated[int | None, Query(ge=0)] = None,
):
    """List approved recipes plus the current user's own drafts."""
    recipes = service.list_visible_recipes(
        current_user, search=search, cuisine=cuisine, max_cooking_time=max_cooking_time
    )
    return [to_list_response(recipe) for recipe in recipes]


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(
    recipe_data: RecipeCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Create a new recipe with ingredients."""
    return service.create_recipe(current_user, recipe_data.model_dump())


@router.post("/search-by-ingredients", response_model=list[RecipeRecommendation])
def search_by_ingredients(
    request: SearchByIngredientsRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Rank approved recipes by how many of the given ingredients they use."""
    return to_recommendations(service.recommend(set(request.ingredients), limit=request.limit))


# --- Ingredient routes (before /{recipe_id}) ---


@router.put("/ingredients/{ingredient_id}", response_model=RecipeIngredientResponse)
def update_ingredient(
    ingredient_id: int,
    ingredient_data: RecipeIngredientUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Update an ingredient."""
    ingredient = service.get_authored_ingredient(ingredient_id, current_user)

    if ingredient_data.name is not None:
        ingredient.normalized_name = require_ingredient_name(ingredient_data.name)
        ingredient.name = ingredient_data.name.strip()
    if ingredient_data.quantity is not None:
        ingredient.quantity = ingredient_data.quantity

    service.db.commit()
    service.db.refresh(ingredient)
    return ingredient


@router.delete("/ingredients/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ingredient(
    ingredient_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Delete an ingredient from a recipe."""
    ingredient = service.get_authored_ingredient(ingredient_id, current_user)
    service.db.delete(ingredient)
    service.db.commit()


# --- Dynamic recipe routes (must be last) ---


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Get a specific recipe with all ingredients."""
    return service.get_visible_recipe(recipe_id, current_user)


@router.put("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(
    recipe_id: int,
    recipe_data: RecipeUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Update recipe metadata (not ingredients)."""
    recipe = service.get_authored_recipe(recipe_id, current_user)

    for field, value in recipe_data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(recipe, field, value)

    service.db.commit()
    service.db.refresh(recipe)
    return recipe


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Soft delete a recipe."""
    recipe = service.get_authored_recipe(recipe_id, current_user)
    recipe.soft_delete()
    service.db.commit()


@router.post("/{recipe_id}/approve", response_model=RecipeResponse)
def approve_recipe(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Publish a pending recipe to the shared catalog (admins only)."""
    return service.approve_recipe(recipe_id, current_user)


@router.post(
    "/{recipe_id}/ingredients",
    response_model=RecipeIngredientResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_ingredient(
    recipe_id: int,
    ingredient_data: RecipeIngredientCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Add an ingredient to a recipe."""
    recipe = service.get_authored_recipe(recipe_id, current_user)
    return service.add_ingredient(recipe, ingredient_data.name, ingredient_data.quantity)
