"""
Batch scaling for cocktail recipes.

Two modes:
- serving batches: every ingredient multiplied by a serving count
- fixed-volume batches: liquids rescaled so the batch fills a target volume
  while keeping the single-serving ratios intact
"""

import math
from typing import Annotated, Callable, Iterable, Literal, Optional, Union

from pydantic import BaseModel, Field

from ..parsing.amount_parser import ParsedAmount, combine_amount_and_unit, parse_amount
from .abv import estimate_abv
from .unit_conversion import BOTTLE_SIZE_ML, LITER_TO_ML, QUART_TO_ML, format_ml_value, ml_per_unit

# --- Types ---


class LiquidBatch(BaseModel):
    unit_type: Literal["liquid"] = "liquid"
    ml: float
    quart: float
    bottles: float
    original_unit: str


class CountBatch(BaseModel):
    unit_type: Literal["count"] = "count"
    count: float
    original_unit: str


class SpecialBatch(BaseModel):
    unit_type: Literal["special"] = "special"
    original_unit: str = "N/A"


BatchResult = Annotated[
    Union[LiquidBatch, CountBatch, SpecialBatch],
    Field(discriminator="unit_type"),
]


def liquid_batch(ml: float, unit: str) -> LiquidBatch:
    return LiquidBatch(
        ml=ml,
        quart=ml / QUART_TO_ML,
        bottles=ml / BOTTLE_SIZE_ML,
        original_unit=unit,
    )


def coerce_multiplier(multiplier) -> float:
    """Read a serving count / ratio; anything unusable becomes 0 ("no batch")."""
    if isinstance(multiplier, bool) or multiplier is None:
        return 0.0
    if isinstance(multiplier, str):
        try:
            multiplier = float(multiplier.strip() or 0)
        except ValueError:
            return 0.0
    try:
        value = float(multiplier)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value <= 0:
        return 0.0
    return value


def ingredient_ml(parsed: ParsedAmount) -> float:
    """Single-serving volume of a parsed liquid amount."""
    if parsed.kind != "liquid":
        return 0.0
    return parsed.base_amount * ml_per_unit(parsed.unit)


# --- Serving batches ---


def scale(multiplier, amount: str, unit: Optional[str] = None) -> Union[LiquidBatch, CountBatch, SpecialBatch]:
    """Scale one ingredient amount by a serving multiplier."""
    mult = coerce_multiplier(multiplier)
    if mult <= 0:
        return SpecialBatch(original_unit="N/A")

    parsed = parse_amount(amount, unit)

    if parsed.kind == "special" or parsed.base_amount == 0:
        return SpecialBatch(original_unit=parsed.unit)

    if parsed.kind == "count":
        return CountBatch(count=parsed.base_amount * mult, original_unit=parsed.unit)

    total_ml = parsed.base_amount * ml_per_unit(parsed.unit) * mult
    return liquid_batch(total_ml, parsed.unit)


# --- Volume calculator ---


def single_serving_volume_ml(
    ingredients: Iterable,
    exclude: Optional[Callable[[str], bool]] = None,
) -> float:
    """
    Total liquid volume (ml) of one serving.

    Count and special ingredients are ignored. `exclude` lets a caller drop
    liquids by name (e.g. carbonated mixers topped at service).
    """
    total = 0.0
    for ing in ingredients or []:
        if exclude is not None and exclude(ing.name):
            continue
        total += ingredient_ml(parse_amount(ing.amount, ing.unit))
    return total


# --- Fixed-volume batches ---


def scale_to_volume(ingredient, single_serving_ml: float, target_ml: float) -> Optional[LiquidBatch]:
    """
    Proportional share of `target_ml` for one ingredient.

    Returns None ("not applicable") for count/special ingredients and when
    the recipe has no liquid volume to take a proportion of.
    """
    if single_serving_ml <= 0 or target_ml <= 0:
        return None

    parsed = parse_amount(ingredient.amount, ingredient.unit)
    if parsed.kind != "liquid":
        return None

    proportion = ingredient_ml(parsed) / single_serving_ml
    return liquid_batch(target_ml * proportion, parsed.unit)


def scale_recipe_to_volume(ingredients: list, target_ml: float) -> list[Optional[LiquidBatch]]:
    """Fixed-volume batch for a whole ingredient list, aligned by index."""
    single_ml = single_serving_volume_ml(ingredients)
    return [scale_to_volume(ing, single_ml, target_ml) for ing in ingredients]


# --- Batch sheet ---


class BatchSheetLine(BaseModel):
    name: str
    single_amount: str
    parsed: ParsedAmount
    servings: BatchResult
    target: Optional[LiquidBatch] = None
    # Whole ml to measure out, rounded up
    servings_ml_display: Optional[str] = None
    target_ml_display: Optional[str] = None


class BatchSheet(BaseModel):
    recipe_name: str
    servings: float
    target_liters: float
    single_serving_ml: float
    servings_total_ml: float
    show_fixed_batch: bool
    abv: float
    lines: list[BatchSheetLine]


def build_batch_sheet(recipe, servings, target_liters: float) -> BatchSheet:
    """
    Everything needed to print one recipe's batch: the servings batch and the
    fixed-volume batch side by side.

    The fixed batch is flagged for display only once the servings batch is
    larger than the fixed container.
    """
    mult = coerce_multiplier(servings)
    target_ml = max(float(target_liters or 0), 0.0) * LITER_TO_ML
    single_ml = single_serving_volume_ml(recipe.ingredients)

    targets = scale_recipe_to_volume(recipe.ingredients, target_ml)

    lines = []
    servings_total_ml = 0.0
    for ing, target in zip(recipe.ingredients, targets):
        result = scale(mult, ing.amount, ing.unit)
        servings_display = None
        if isinstance(result, LiquidBatch):
            servings_total_ml += result.ml
            servings_display = format_ml_value(result.ml)
        lines.append(
            BatchSheetLine(
                name=ing.name,
                single_amount=combine_amount_and_unit(ing.amount, ing.unit),
                parsed=parse_amount(ing.amount, ing.unit),
                servings=result,
                target=target,
                servings_ml_display=servings_display,
                target_ml_display=format_ml_value(target.ml) if target is not None else None,
            )
        )

    return BatchSheet(
        recipe_name=recipe.name,
        servings=mult,
        target_liters=target_ml / LITER_TO_ML,
        single_serving_ml=single_ml,
        servings_total_ml=servings_total_ml,
        show_fixed_batch=servings_total_ml > target_ml and single_ml > 0,
        abv=estimate_abv(recipe.ingredients),
        lines=lines,
    )
