from datetime import date

import pytest

from barbatch.schemas import CocktailRecipe, EventRecipeLine, Ingredient
from barbatch.services.financials import (
    EventRecord,
    compute_dashboard,
    margin_percent,
    per_serving_cost,
    project_financials,
)
from barbatch.services.pricing import PriceEntry

PRICES = {"vodka": PriceEntry(price=22, bottle_size_ml=750)}

VODKA_ML = 2 * 29.5735
UNIT_COST = VODKA_ML / 750 * 22


def _vodka_soda(**kwargs):
    return CocktailRecipe(
        name="Vodka Soda",
        menu_price=12,
        ingredients=[
            Ingredient(name="Vodka", amount="2 oz"),
            Ingredient(name="Soda Water", amount="4 oz"),
            Ingredient(name="Lime Wedge", amount="1 each"),
        ],
        **kwargs,
    )


def test_per_serving_cost_counts_priced_liquor_only():
    assert per_serving_cost(_vodka_soda(), PRICES) == pytest.approx(UNIT_COST)
    assert per_serving_cost(_vodka_soda(), None) == 0


def test_project_financials():
    summary = project_financials([(_vodka_soda(), 100)], PRICES, misc_cost_percent=15)

    line = summary.recipes[0]
    assert line.revenue == 1200
    assert line.cost == pytest.approx(UNIT_COST * 100 * 1.15)
    assert line.profit == pytest.approx(1200 - UNIT_COST * 100 * 1.15)

    assert summary.total_servings == 100
    assert summary.revenue == 1200
    assert summary.margin == pytest.approx(summary.profit / 1200 * 100)


def test_misc_cost_percent_is_a_parameter():
    without = project_financials([(_vodka_soda(), 100)], PRICES, misc_cost_percent=0)
    assert without.cost == pytest.approx(UNIT_COST * 100)
    assert without.misc_cost_percent == 0


def test_event_margin_comes_from_totals():
    cheap = _vodka_soda()
    free = CocktailRecipe(name="Water", menu_price=0, ingredients=[Ingredient(name="Water", amount="8 oz")])
    summary = project_financials([(cheap, 10), (free, 10)], PRICES)

    assert summary.total_servings == 20
    assert summary.revenue == 120
    assert summary.margin == pytest.approx((120 - summary.cost) / 120 * 100)


def test_zero_revenue_margin_is_zero():
    recipe = _vodka_soda()
    recipe.menu_price = None
    summary = project_financials([(recipe, 10)], PRICES)

    assert summary.revenue == 0
    assert summary.margin == 0
    assert summary.profit < 0
    assert margin_percent(0, -5) == 0


def test_invalid_servings_count_as_zero():
    summary = project_financials([(_vodka_soda(), -4)], PRICES)
    assert summary.total_servings == 0
    assert summary.cost == 0


def test_dashboard_rollup():
    cocktail = _vodka_soda(id=1)
    events = [
        EventRecord(
            id=1, name="Launch", event_date=date(2025, 1, 10),
            recipes=[EventRecipeLine(cocktail_id=1, servings=100)],
        ),
        EventRecord(
            id=2, name="Gala", event_date=date(2025, 2, 3),
            recipes=[
                EventRecipeLine(cocktail_id=1, servings=50),
                EventRecipeLine(cocktail_id=99, servings=10),
            ],
        ),
    ]

    data = compute_dashboard(events, [cocktail], PRICES)

    launch, gala = data.events
    assert launch.revenue == 1200
    assert gala.revenue == 600
    # Unknown cocktails are skipped in the money but still listed
    assert gala.recipe_count == 2
    assert gala.recipe_ids == [1, 99]
    assert gala.total_servings == 50

    assert data.totals.event_count == 2
    assert data.totals.revenue == 1800
    assert data.totals.total_servings == 150
    # Whole bottles per event: 5914.7 ml -> 8 bottles, 2957.35 ml -> 4 bottles
    assert launch.ingredient_cost == 176
    assert gala.ingredient_cost == 88
    assert gala.profit == 600 - 88
    assert data.totals.cost == 264
    assert data.totals.margin == pytest.approx((1800 - 264) / 1800 * 100)

    top = data.top_cocktails[0]
    assert top.name == "Vodka Soda"
    assert top.total_servings == 150
    assert top.event_count == 2

    assert [p.month for p in data.monthly_trend] == ["Jan 2025", "Feb 2025"]
    assert data.monthly_trend[0].revenue == 1200


def test_dashboard_empty():
    data = compute_dashboard([], [], None)
    assert data.events == []
    assert data.totals.margin == 0
    assert data.monthly_trend == []


def test_dashboard_zero_servings_line_uses_fixed_batch():
    cocktail = _vodka_soda(id=1)
    events = [
        EventRecord(
            id=1, name="Prep Day", event_date=date(2025, 3, 1),
            recipes=[EventRecipeLine(cocktail_id=1, servings=0)],
        ),
    ]

    data = compute_dashboard(events, [cocktail], PRICES, fixed_batch_liters=20)

    # Vodka is a third of the 20 L batch: 6666.7 ml -> 9 bottles
    event = data.events[0]
    assert event.revenue == 0
    assert event.ingredient_cost == 9 * 22
    assert event.margin == 0
