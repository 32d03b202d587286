"""Deterministic ingredient matching - no database, no LLM calls.

Scores each catalog recipe by the share of its required ingredients found in a
pantry and ranks the recipes a user can substantially make.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


def normalize_ingredient(name: str | None) -> str:
    """Normalize an ingredient name for comparison (trimmed, lowercase)."""
    if not name:
        return ""
    return name.strip().lower()


@dataclass(frozen=True)
class IngredientRequirement:
    """A single ingredient a recipe requires.

    Quantity and unit are informational only; matching is presence-based.
    """

    name: str
    quantity: str | None = None
    unit: str | None = None
    normalized: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "normalized", normalize_ingredient(self.name))


@dataclass(frozen=True)
class CatalogRecipe:
    """A recipe as seen by the matcher: an id plus its requirement list."""

    recipe_id: int
    requirements: tuple[IngredientRequirement, ...] = ()

    @classmethod
    def from_names(cls, recipe_id: int, names: Iterable[str]) -> "CatalogRecipe":
        """Build a catalog recipe from plain ingredient names."""
        return cls(recipe_id, tuple(IngredientRequirement(name) for name in names))


@dataclass(frozen=True)
class MatchResult:
    """How well a pantry covers one recipe."""

    recipe_id: int
    match_percentage: int
    missing_ingredients: tuple[str, ...]
    present_count: int
    total_count: int


def _canonical(normalized: str, aliases: Mapping[str, str] | None) -> str:
    if aliases and normalized in aliases:
        return aliases[normalized]
    return normalized


def _percentage(present: int, total: int) -> int:
    """Round half up to an integer percent; any overlap scores at least 1."""
    percent = (200 * present + total) // (2 * total)
    return max(percent, 1)


def score_recipe(
    pantry: frozenset[str],
    recipe: CatalogRecipe,
    aliases: Mapping[str, str] | None = None,
) -> MatchResult | None:
    """Score a single recipe against a normalized pantry set.

    Returns None when the recipe has no usable requirements or shares no
    ingredient with the pantry.
    """
    seen: set[str] = set()
    missing: list[str] = []
    present = 0

    for requirement in recipe.requirements:
        key = _canonical(requirement.normalized, aliases)
        if not key or key in seen:
            continue
        seen.add(key)
        if key in pantry:
            present += 1
        else:
            missing.append(requirement.name.strip())

    total = len(seen)
    if total == 0 or present == 0:
        return None

    return MatchResult(
        recipe_id=recipe.recipe_id,
        match_percentage=_percentage(present, total),
        missing_ingredients=tuple(missing),
        present_count=present,
        total_count=total,
    )


def normalize_pantry(
    pantry_ingredients: Iterable[str],
    aliases: Mapping[str, str] | None = None,
) -> frozenset[str]:
    """Normalize raw pantry names, dropping blanks."""
    normalized = (normalize_ingredient(name) for name in pantry_ingredients)
    return frozenset(_canonical(name, aliases) for name in normalized if name)


def match(
    pantry_ingredients: Iterable[str],
    recipes: Sequence[CatalogRecipe],
    limit: int | None = None,
    aliases: Mapping[str, str] | None = None,
) -> list[MatchResult]:
    """Rank recipes by how much of each one the pantry covers.

    Ordering: match percentage descending, then fewer missing ingredients,
    then catalog order. Recipes with zero overlap or no requirements are left
    out. An empty pantry yields an empty list.
    """
    pantry = normalize_pantry(pantry_ingredients, aliases)
    if not pantry:
        return []

    scored: list[tuple[int, MatchResult]] = []
    for position, recipe in enumerate(recipes):
        result = score_recipe(pantry, recipe, aliases)
        if result is not None:
            scored.append((position, result))

    scored.sort(
        key=lambda item: (
            -item[1].match_percentage,
            len(item[1].missing_ingredients),
            item[0],
        )
    )
    results = [result for _, result in scored]

    logger.debug(
        f"Matched {len(results)}/{len(recipes)} recipes against {len(pantry)} pantry ingredients"
    )

    if limit is not None:
        return results[: max(limit, 0)]
    return results
