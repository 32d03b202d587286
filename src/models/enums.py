"""Enums for model fields."""

from enum import Enum


class RecipeStatus(str, Enum):
    """Moderation status of a recipe."""

    PENDING = "pending"
    APPROVED = "approved"
