"""
Event-wide shopping totals.

Folds every (recipe, servings) batch of an event into one entry per distinct
ingredient name, then rounds into purchasable containers and prices liquor
against the price table.
"""

import math
from typing import Optional

from pydantic import BaseModel

from ..parsing.amount_parser import parse_amount
from ..schemas import CocktailRecipe
from .batch_scaler import LiquidBatch, coerce_multiplier, scale, scale_to_volume, single_serving_volume_ml
from .ingredient_classify import Category, classify, is_angostura_bitters
from .pricing import PriceMap, find_price
from .unit_conversion import (
    BOTTLE_SIZE_4OZ_ML,
    BOTTLE_SIZE_ML,
    CAN_SIZE_12OZ_ML,
    QUART_TO_ML,
    convert_ml_to_preferred_unit,
)


class BatchEntry(BaseModel):
    """One recipe of an event, batched by servings or to a fixed volume."""
    recipe: CocktailRecipe
    servings: float = 0
    target_volume_ml: Optional[float] = None


class GrandTotalEntry(BaseModel):
    name: str
    category: Category
    ml: float
    bottles: float
    quart: float
    each_count: Optional[float] = None
    cans_12oz: Optional[int] = None
    bottles_4oz: Optional[int] = None
    preferred_unit: Optional[str] = None
    preferred_unit_value: Optional[float] = None
    bottle_price: Optional[float] = None
    bottle_size_ml: Optional[float] = None
    bottles_to_buy: Optional[int] = None
    estimated_cost: Optional[float] = None


class GrandTotals(BaseModel):
    liquor: list[GrandTotalEntry] = []
    carbonated_mixer: list[GrandTotalEntry] = []
    other: list[GrandTotalEntry] = []
    total_liquor_cost: float = 0.0


def _wants_each(ing) -> bool:
    return (ing.preferred_unit or "").strip().lower() == "each"


def _accumulate(totals: dict, name: str, ml: float, each_count: Optional[float], preferred_unit: Optional[str]):
    key = name.strip()
    if key not in totals:
        totals[key] = {
            "ml": 0.0,
            "bottles": 0.0,
            "quart": 0.0,
            "each_count": None,
            "preferred_unit": None,
        }

    agg = totals[key]
    agg["ml"] += ml
    agg["bottles"] += ml / BOTTLE_SIZE_ML
    agg["quart"] += ml / QUART_TO_ML

    if each_count is not None:
        agg["each_count"] = (agg["each_count"] or 0) + each_count

    # First recipe to name a display unit wins
    if not agg["preferred_unit"] and preferred_unit and preferred_unit.strip():
        agg["preferred_unit"] = preferred_unit.strip()


def _add_serving_batch(totals: dict, recipe, servings: float):
    for ing in recipe.ingredients:
        result = scale(servings, ing.amount, ing.unit)
        wants_each = _wants_each(ing)
        if not isinstance(result, LiquidBatch) and not wants_each:
            continue

        each_count = None
        if wants_each:
            each_count = parse_amount(ing.amount, ing.unit).base_amount * servings

        ml = result.ml if isinstance(result, LiquidBatch) else 0.0
        _accumulate(totals, ing.name, ml, each_count, ing.preferred_unit)


def _add_fixed_volume_batch(totals: dict, recipe, target_ml: float):
    single_ml = single_serving_volume_ml(recipe.ingredients)
    if single_ml <= 0:
        return
    ratio = target_ml / single_ml

    for ing in recipe.ingredients:
        result = scale_to_volume(ing, single_ml, target_ml)
        wants_each = _wants_each(ing)
        if result is None and not wants_each:
            continue

        each_count = None
        if wants_each:
            each_count = parse_amount(ing.amount, ing.unit).base_amount * ratio

        ml = result.ml if result is not None else 0.0
        _accumulate(totals, ing.name, ml, each_count, ing.preferred_unit)


def _finalize(name: str, agg: dict, price_map: Optional[PriceMap]) -> GrandTotalEntry:
    ml = agg["ml"]
    category = classify(name)
    preferred_unit = agg["preferred_unit"]

    entry = GrandTotalEntry(
        name=name,
        category=category,
        ml=ml,
        bottles=agg["bottles"],
        quart=agg["quart"],
        each_count=agg["each_count"],
    )

    if is_angostura_bitters(name):
        entry.bottles_4oz = math.ceil(ml / BOTTLE_SIZE_4OZ_ML)
        preferred_unit = preferred_unit or "4oz bottle"

    if category == "carbonated_mixer":
        entry.cans_12oz = math.ceil(ml / CAN_SIZE_12OZ_ML)
        preferred_unit = preferred_unit or "12oz can"

    if preferred_unit:
        entry.preferred_unit = preferred_unit
        entry.preferred_unit_value = convert_ml_to_preferred_unit(
            ml,
            preferred_unit,
            cans_12oz=entry.cans_12oz,
            bottles_4oz=entry.bottles_4oz,
            each_count=entry.each_count,
        )

    if category == "liquor" and price_map:
        price = find_price(name, price_map)
        if price is not None:
            entry.bottle_price = price.price
            entry.bottle_size_ml = price.bottle_size_ml
            entry.bottles_to_buy = math.ceil(ml / price.bottle_size_ml)
            entry.estimated_cost = entry.bottles_to_buy * price.price

    return entry


def calculate_grand_totals(batches: list[BatchEntry], price_map: Optional[PriceMap] = None) -> GrandTotals:
    """
    Aggregate an event's batches into per-ingredient grand totals.

    Batches are processed in the given order; that order decides which
    recipe's display unit an ingredient keeps.
    """
    totals: dict = {}

    for batch in batches:
        servings = coerce_multiplier(batch.servings)
        if servings > 0:
            _add_serving_batch(totals, batch.recipe, servings)
        elif batch.target_volume_ml and batch.target_volume_ml > 0:
            _add_fixed_volume_batch(totals, batch.recipe, batch.target_volume_ml)

    entries = [_finalize(name, agg, price_map) for name, agg in totals.items()]
    entries.sort(key=lambda e: e.ml, reverse=True)

    result = GrandTotals()
    for entry in entries:
        if entry.category == "carbonated_mixer":
            result.carbonated_mixer.append(entry)
        elif entry.category == "liquor":
            result.liquor.append(entry)
        else:
            result.other.append(entry)

    result.total_liquor_cost = sum(e.estimated_cost for e in result.liquor if e.estimated_cost is not None)
    return result
