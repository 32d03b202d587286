"""Ingredient catalog and alias models."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Ingredient(Base, TimestampMixin):
    """Canonical ingredient in the shared catalog."""

    __tablename__ = "ingredients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    normalized_name = Column(String(255), unique=True, nullable=False, index=True)
    category = Column(String(100), nullable=True)  # "dairy", "produce", "spices", ...

    # Relationships
    aliases = relationship(
        "IngredientAlias", back_populates="ingredient", cascade="all, delete-orphan"
    )


class IngredientAlias(Base, TimestampMixin):
    """Alternate name that resolves to a canonical ingredient (e.g. "scallion")."""

    __tablename__ = "ingredient_aliases"

    id = Column(Integer, primary_key=True, index=True)
    ingredient_id = Column(Integer, ForeignKey("ingredients.id"), nullable=False, index=True)
    alias = Column(String(255), unique=True, nullable=False, index=True)  # Normalized

    # Relationships
    ingredient = relationship("Ingredient", back_populates="aliases")
