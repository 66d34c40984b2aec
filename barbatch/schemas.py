"""Pydantic schemas for the barbatch API.

Request/response models for:
- Cocktails (with nested ingredients)
- Liquor prices
- Saved events
- Batch, grand-total, ABV and financial calculations
"""

from datetime import datetime, date
from typing import Optional, Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator

from .services.unit_conversion import ORDER_UNITS

CocktailMethod = Literal["Shake", "Build"]
GlassType = Literal["Rocks", "Coupe", "Martini", "Highball", "Flute", "Served Up"]


# --- Ingredient ---

class Ingredient(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    amount: str = ""
    unit: Optional[str] = None
    # Display/order unit for the shopping list, independent of `unit`
    preferred_unit: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("preferred_unit", "order_unit"),
    )

    @field_validator("preferred_unit")
    @classmethod
    def check_order_unit(cls, v):
        if v is None or not v.strip():
            return None
        unit = v.strip().lower()
        # "12oz cans" -> "12oz can"
        if unit not in ORDER_UNITS and unit.endswith("s") and unit[:-1] in ORDER_UNITS:
            unit = unit[:-1]
        if unit not in ORDER_UNITS:
            raise ValueError(f"order unit must be one of: {', '.join(ORDER_UNITS)}")
        return unit

    class Config:
        from_attributes = True
        populate_by_name = True


# --- Cocktail ---

class CocktailRecipe(BaseModel):
    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=200)
    method: CocktailMethod = "Shake"
    glass_type: Optional[GlassType] = None
    instructions: Optional[str] = None
    garnish: Optional[str] = None
    ingredients: list[Ingredient] = []
    featured: bool = False
    image: Optional[str] = None
    abv: Optional[float] = None
    menu_price: Optional[float] = Field(None, ge=0)
    season: Optional[str] = None
    category: Optional[str] = None

    class Config:
        from_attributes = True


class CocktailCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    method: CocktailMethod
    glass_type: Optional[GlassType] = None
    instructions: Optional[str] = None
    garnish: Optional[str] = None
    ingredients: list[Ingredient] = Field(..., min_length=1)
    featured: bool = False
    image: Optional[str] = None
    abv: Optional[float] = Field(None, ge=0, le=100)
    menu_price: Optional[float] = Field(None, ge=0)
    season: Optional[str] = None
    category: Optional[str] = None


class CocktailPatch(BaseModel):
    """Partial update; only fields that are set get written."""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    method: Optional[CocktailMethod] = None
    glass_type: Optional[GlassType] = None
    instructions: Optional[str] = None
    garnish: Optional[str] = None
    ingredients: Optional[list[Ingredient]] = Field(None, min_length=1)
    featured: Optional[bool] = None
    image: Optional[str] = None
    abv: Optional[float] = Field(None, ge=0, le=100)
    menu_price: Optional[float] = Field(None, ge=0)
    season: Optional[str] = None
    category: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name", "method", "featured", "is_active")
    @classmethod
    def not_null(cls, v, info):
        # Omit the field to leave it unchanged; these columns are NOT NULL
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class CocktailOut(CocktailRecipe):
    id: int
    is_active: bool = True
    created_at: Optional[datetime] = None


class CocktailListOut(BaseModel):
    cocktails: list[CocktailOut]
    total: int


class LiquorListOut(BaseModel):
    liquors: list[str]


class IngredientSuggestion(BaseModel):
    name: str
    order_unit: Optional[str] = None


class IngredientSuggestionList(BaseModel):
    ingredients: list[IngredientSuggestion]


class DeleteRequest(BaseModel):
    password: Optional[str] = None


# --- Liquor Prices ---

class LiquorPriceUpsert(BaseModel):
    price: float = Field(..., ge=0)
    bottle_size_ml: float = Field(750, gt=0)


class LiquorPriceOut(BaseModel):
    name: str
    price: float
    bottle_size_ml: float


# --- Saved Events ---

class EventRecipeLine(BaseModel):
    cocktail_id: int
    cocktail_name: Optional[str] = None
    servings: float = Field(..., ge=0)


class EventCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    event_date: date
    recipes: list[EventRecipeLine]


class EventOut(BaseModel):
    id: int
    name: str
    event_date: date
    recipes: list[EventRecipeLine]
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class EventListOut(BaseModel):
    events: list[EventOut]


# --- Calculations ---

class ScaleRequest(BaseModel):
    multiplier: float | str
    amount: str
    unit: Optional[str] = None


class BatchSheetRequest(BaseModel):
    cocktail_id: Optional[int] = None
    recipe: Optional[CocktailRecipe] = None
    servings: float = Field(0, ge=0)
    target_liters: Optional[float] = Field(None, ge=0)


class GrandTotalsBatch(BaseModel):
    cocktail_id: Optional[int] = None
    recipe: Optional[CocktailRecipe] = None
    servings: float = Field(0, ge=0)
    target_liters: Optional[float] = Field(None, ge=0)


class GrandTotalsRequest(BaseModel):
    batches: list[GrandTotalsBatch]
    include_prices: bool = True


class FinancialsLine(BaseModel):
    cocktail_id: Optional[int] = None
    recipe: Optional[CocktailRecipe] = None
    servings: float = Field(..., ge=0)


class FinancialsRequest(BaseModel):
    lines: list[FinancialsLine]
    misc_cost_percent: Optional[float] = Field(None, ge=0)


class AbvRequest(BaseModel):
    ingredients: list[Ingredient]


class AbvResponse(BaseModel):
    abv: float
