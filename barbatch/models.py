"""SQLAlchemy ORM models for barbatch.

Tables:
- cocktails: Recipe cards with menu price and season
- cocktail_ingredients: Ordered ingredient lines for a cocktail
- liquor_prices: Bottle price table keyed by ingredient name
- saved_events: Event compositions (cocktail id + servings) stored as JSON
"""

from __future__ import annotations

from datetime import datetime, date
from typing import Optional

from sqlalchemy import (
    String,
    DateTime,
    Date,
    Text,
    Integer,
    Boolean,
    Float,
    ForeignKey,
    Index,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func
from sqlalchemy.types import JSON

from .db import Base


class Cocktail(Base):
    """A single-serving cocktail recipe."""
    __tablename__ = "cocktails"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    method: Mapped[str] = mapped_column(String(20), nullable=False, default="Shake")
    glass_type: Mapped[Optional[str]] = mapped_column(String(40), nullable=True)
    instructions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    garnish: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String(80), nullable=True)
    season: Mapped[Optional[str]] = mapped_column(String(40), nullable=True)
    image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    abv: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    menu_price: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), onupdate=func.now(), nullable=True
    )

    ingredients: Mapped[list["CocktailIngredient"]] = relationship(
        "CocktailIngredient",
        back_populates="cocktail",
        cascade="all, delete-orphan",
        order_by="CocktailIngredient.order_index",
    )


class CocktailIngredient(Base):
    """One ingredient line; `amount` stays free text and is parsed on demand."""
    __tablename__ = "cocktail_ingredients"
    __table_args__ = (
        Index("ix_cocktail_ingredients_cocktail_id", "cocktail_id"),
        Index("ix_cocktail_ingredients_name", "name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cocktail_id: Mapped[int] = mapped_column(
        ForeignKey("cocktails.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    amount: Mapped[str] = mapped_column(String(80), nullable=False, default="")
    unit: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    preferred_unit: Mapped[Optional[str]] = mapped_column(String(40), nullable=True)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    cocktail: Mapped["Cocktail"] = relationship("Cocktail", back_populates="ingredients")


class LiquorPrice(Base):
    """Bottle price for a liquor, matched against ingredient names."""
    __tablename__ = "liquor_prices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    bottle_price: Mapped[float] = mapped_column(Float, nullable=False)
    bottle_size_ml: Mapped[float] = mapped_column(Float, nullable=False, default=750)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class SavedEvent(Base):
    """An event's drink menu: [{cocktail_id, cocktail_name, servings}, ...]."""
    __tablename__ = "saved_events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    event_date: Mapped[date] = mapped_column(Date, nullable=False)
    recipes: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
