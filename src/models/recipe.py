"""Recipe and RecipeIngredient models."""

from sqlalchemy import JSON, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import RecipeStatus
from src.models.mixins import SoftDeleteMixin, TimestampMixin


class Recipe(Base, TimestampMixin, SoftDeleteMixin):
    """Recipe model for storing shared recipes."""

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, index=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    instructions = Column(JSON, nullable=False, default=list)  # Ordered list of steps
    cooking_time = Column(Integer, nullable=True)  # Minutes
    prep_time = Column(Integer, nullable=True)  # Minutes
    servings = Column(Integer, nullable=True)
    cuisine = Column(String(100), nullable=True)
    image_url = Column(String(500), nullable=True)
    dietary_restrictions = Column(JSON, nullable=False, default=list)
    status = Column(String(20), nullable=False, default=RecipeStatus.PENDING.value, index=True)

    # Relationships
    author = relationship("User", backref="recipes")
    ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.position",
    )

    @property
    def is_approved(self) -> bool:
        """Check if the recipe is visible in the public catalog."""
        return self.status == RecipeStatus.APPROVED.value


class RecipeIngredient(Base, TimestampMixin):
    """Ingredient required by a recipe."""

    __tablename__ = "recipe_ingredients"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)  # Display name
    normalized_name = Column(String(255), nullable=False, index=True)  # Lowercase, trimmed
    quantity = Column(String(100), nullable=True)  # Informational, e.g. "2 cups"
    position = Column(Integer, nullable=False, default=0)  # Declared order within the recipe

    # Relationships
    recipe = relationship("Recipe", back_populates="ingredients")
