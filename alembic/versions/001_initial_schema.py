"""Initial schema with cocktails, cocktail_ingredients, liquor_prices, saved_events

Revision ID: 001_initial_schema
Revises: 
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Cocktails table
    op.create_table(
        "cocktails",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), unique=True, nullable=False),
        sa.Column("method", sa.String(20), nullable=False),
        sa.Column("glass_type", sa.String(40), nullable=True),
        sa.Column("instructions", sa.Text, nullable=True),
        sa.Column("garnish", sa.String(200), nullable=True),
        sa.Column("category", sa.String(80), nullable=True),
        sa.Column("season", sa.String(40), nullable=True),
        sa.Column("image", sa.String(500), nullable=True),
        sa.Column("featured", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("abv", sa.Float, nullable=True),
        sa.Column("menu_price", sa.Float, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )

    # Cocktail ingredients table
    op.create_table(
        "cocktail_ingredients",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("cocktail_id", sa.Integer, sa.ForeignKey("cocktails.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("amount", sa.String(80), nullable=False, server_default=""),
        sa.Column("unit", sa.String(20), nullable=True),
        sa.Column("preferred_unit", sa.String(40), nullable=True),
        sa.Column("order_index", sa.Integer, nullable=False, server_default="0"),
    )
    op.create_index("ix_cocktail_ingredients_cocktail_id", "cocktail_ingredients", ["cocktail_id"])
    op.create_index("ix_cocktail_ingredients_name", "cocktail_ingredients", ["name"])

    # Liquor prices table
    op.create_table(
        "liquor_prices",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), unique=True, nullable=False),
        sa.Column("bottle_price", sa.Float, nullable=False),
        sa.Column("bottle_size_ml", sa.Float, nullable=False, server_default="750"),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # Saved events table
    op.create_table(
        "saved_events",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("event_date", sa.Date, nullable=False),
        sa.Column("recipes", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("saved_events")
    op.drop_table("liquor_prices")
    op.drop_index("ix_cocktail_ingredients_name", table_name="cocktail_ingredients")
    op.drop_index("ix_cocktail_ingredients_cocktail_id", table_name="cocktail_ingredients")
    op.drop_table("cocktail_ingredients")
    op.drop_table("cocktails")
