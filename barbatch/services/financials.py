"""
Financial projections for events.

Revenue comes from menu prices; cost comes from the priced liquor in each
recipe plus a flat surcharge for everything the price table doesn't cover.
The dashboard costs saved events by their shopping list instead.
"""

from collections import defaultdict
from datetime import date, datetime
from typing import Optional, Union

from pydantic import BaseModel

from ..parsing.amount_parser import parse_amount
from ..schemas import CocktailRecipe, EventRecipeLine
from .batch_scaler import coerce_multiplier, ingredient_ml
from .grand_totals import BatchEntry, calculate_grand_totals
from .ingredient_classify import classify
from .pricing import PriceMap, find_price
from .unit_conversion import LITER_TO_ML

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


class RecipeFinancials(BaseModel):
    recipe_id: Optional[int] = None
    name: str
    servings: float
    menu_price: float
    per_serving_cost: float
    revenue: float
    cost: float
    profit: float
    margin: float


class FinancialSummary(BaseModel):
    recipes: list[RecipeFinancials]
    misc_cost_percent: float
    revenue: float
    cost: float
    profit: float
    margin: float
    total_servings: float


def margin_percent(revenue: float, profit: float) -> float:
    return profit / revenue * 100 if revenue > 0 else 0.0


def per_serving_cost(recipe, price_map: Optional[PriceMap]) -> float:
    """Cost of the priced liquor in one serving (fractional bottles)."""
    if not price_map:
        return 0.0

    cost = 0.0
    for ing in recipe.ingredients:
        if classify(ing.name) != "liquor":
            continue
        price = find_price(ing.name, price_map)
        if price is None:
            continue
        ml = ingredient_ml(parse_amount(ing.amount, ing.unit))
        cost += ml / price.bottle_size_ml * price.price
    return cost


def project_recipe(recipe, servings, price_map: Optional[PriceMap], misc_cost_percent: float) -> RecipeFinancials:
    servings_num = coerce_multiplier(servings)
    menu_price = recipe.menu_price or 0.0
    unit_cost = per_serving_cost(recipe, price_map)

    revenue = menu_price * servings_num
    cost = unit_cost * servings_num * (1 + misc_cost_percent / 100)
    profit = revenue - cost

    return RecipeFinancials(
        recipe_id=recipe.id,
        name=recipe.name,
        servings=servings_num,
        menu_price=menu_price,
        per_serving_cost=unit_cost,
        revenue=revenue,
        cost=cost,
        profit=profit,
        margin=margin_percent(revenue, profit),
    )


def project_financials(
    lines: list[tuple[CocktailRecipe, float]],
    price_map: Optional[PriceMap],
    misc_cost_percent: float = 15.0,
) -> FinancialSummary:
    """
    Per-recipe and event-level revenue, cost, profit and margin.

    The event margin is recomputed from the summed totals rather than
    averaged across recipes.
    """
    recipes = [project_recipe(recipe, servings, price_map, misc_cost_percent) for recipe, servings in lines]

    revenue = sum(r.revenue for r in recipes)
    cost = sum(r.cost for r in recipes)
    profit = revenue - cost

    return FinancialSummary(
        recipes=recipes,
        misc_cost_percent=misc_cost_percent,
        revenue=revenue,
        cost=cost,
        profit=profit,
        margin=margin_percent(revenue, profit),
        total_servings=sum(r.servings for r in recipes),
    )


# --- Dashboard ---


class EventRecord(BaseModel):
    id: int
    name: str
    event_date: Union[date, datetime]
    recipes: list[EventRecipeLine]


class EventFinancials(BaseModel):
    id: int
    name: str
    event_date: Union[date, datetime]
    total_servings: float
    revenue: float
    ingredient_cost: float
    profit: float
    margin: float
    recipe_count: int
    recipe_ids: list[int]


class CocktailStats(BaseModel):
    name: str
    total_servings: float
    revenue: float
    event_count: int


class MonthlyTrendPoint(BaseModel):
    month: str
    revenue: float
    cost: float
    profit: float


class DashboardTotals(BaseModel):
    revenue: float
    cost: float
    profit: float
    margin: float
    event_count: int
    total_servings: float


class DashboardData(BaseModel):
    events: list[EventFinancials]
    totals: DashboardTotals
    top_cocktails: list[CocktailStats]
    monthly_trend: list[MonthlyTrendPoint]


def _month_label(year: int, month: int) -> str:
    return f"{MONTH_NAMES[month - 1]} {year}"


def compute_dashboard(
    events: list[EventRecord],
    cocktails: list[CocktailRecipe],
    price_map: Optional[PriceMap],
    fixed_batch_liters: float = 20.0,
) -> DashboardData:
    """
    Roll saved events up into per-event figures, top cocktails and a monthly trend.

    An event's ingredient cost is what its shopping list costs: whole liquor
    bottles from the grand totals, with no misc surcharge.
    """
    cocktail_map = {c.id: c for c in cocktails if c.id is not None}

    stats: dict[int, dict] = {}
    event_rows = []

    for event in events:
        lines = []
        for line in event.recipes:
            cocktail = cocktail_map.get(line.cocktail_id)
            if cocktail is None:
                continue
            lines.append((cocktail, line.servings))

        summary = project_financials(lines, None, 0)
        shopping = calculate_grand_totals(
            [
                BatchEntry(recipe=cocktail, servings=servings, target_volume_ml=fixed_batch_liters * LITER_TO_ML)
                for cocktail, servings in lines
            ],
            price_map,
        )
        cost = shopping.total_liquor_cost
        profit = summary.revenue - cost

        for fin in summary.recipes:
            s = stats.setdefault(
                fin.recipe_id,
                {"name": fin.name, "total_servings": 0.0, "revenue": 0.0, "event_count": 0},
            )
            s["total_servings"] += fin.servings
            s["revenue"] += fin.revenue
            s["event_count"] += 1

        event_rows.append(
            EventFinancials(
                id=event.id,
                name=event.name,
                event_date=event.event_date,
                total_servings=summary.total_servings,
                revenue=summary.revenue,
                ingredient_cost=cost,
                profit=profit,
                margin=margin_percent(summary.revenue, profit),
                recipe_count=len(event.recipes),
                recipe_ids=[r.cocktail_id for r in event.recipes],
            )
        )

    revenue = sum(e.revenue for e in event_rows)
    cost = sum(e.ingredient_cost for e in event_rows)
    profit = revenue - cost

    top_cocktails = sorted(
        (CocktailStats(**s) for s in stats.values()),
        key=lambda c: c.revenue,
        reverse=True,
    )

    monthly = defaultdict(lambda: {"revenue": 0.0, "cost": 0.0, "profit": 0.0})
    for e in event_rows:
        bucket = monthly[(e.event_date.year, e.event_date.month)]
        bucket["revenue"] += e.revenue
        bucket["cost"] += e.ingredient_cost
        bucket["profit"] += e.profit

    monthly_trend = [
        MonthlyTrendPoint(month=_month_label(year, month), **values)
        for (year, month), values in sorted(monthly.items())
    ]

    return DashboardData(
        events=event_rows,
        totals=DashboardTotals(
            revenue=revenue,
            cost=cost,
            profit=profit,
            margin=margin_percent(revenue, profit),
            event_count=len(events),
            total_servings=sum(e.total_servings for e in event_rows),
        ),
        top_cocktails=top_cocktails,
        monthly_trend=monthly_trend,
    )
