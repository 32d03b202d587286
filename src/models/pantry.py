"""Pantry entry model for tracking ingredients a user has on hand."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class PantryEntry(Base, TimestampMixin):
    """One ingredient in a user's pantry."""

    __tablename__ = "pantry_entries"
    __table_args__ = (
        UniqueConstraint("user_id", "normalized_name", name="uq_pantry_user_normalized_name"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)  # Display name
    normalized_name = Column(String(255), nullable=False)  # Lowercase, trimmed for matching
    quantity = Column(Float, nullable=False, default=0)
    unit = Column(String(50), nullable=True)  # "g", "cups", "pcs", ...
    expires_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    user = relationship("User", backref="pantry_entries")
