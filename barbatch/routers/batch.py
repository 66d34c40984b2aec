"""
Router for batch calculations.

Recipes can be referenced by id (loaded from the database) or passed inline,
so edited-but-unsaved recipes can be batched too.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from ..db import get_db
from ..deps import get_price_map
from ..models import Cocktail, SavedEvent
from ..parsing.amount_parser import ParsedAmount, parse_amount
from ..schemas import (
    AbvRequest, AbvResponse, BatchSheetRequest, CocktailRecipe,
    FinancialsRequest, GrandTotalsRequest, ScaleRequest,
)
from ..services.abv import estimate_abv
from ..services.batch_scaler import BatchResult, BatchSheet, build_batch_sheet, scale
from ..services.financials import DashboardData, EventRecord, FinancialSummary, compute_dashboard, project_financials
from ..services.grand_totals import BatchEntry, GrandTotals, calculate_grand_totals
from ..services.unit_conversion import LITER_TO_ML
from ..settings import settings

router = APIRouter()


class ScaleResponse(BaseModel):
    parsed: ParsedAmount
    result: BatchResult


def _resolve_recipe(db: Session, cocktail_id: Optional[int], recipe: Optional[CocktailRecipe]) -> CocktailRecipe:
    if recipe is not None:
        return recipe
    if cocktail_id is None:
        raise HTTPException(status_code=400, detail="Either cocktail_id or recipe is required")

    cocktail = db.execute(
        select(Cocktail)
        .options(selectinload(Cocktail.ingredients))
        .where(Cocktail.id == cocktail_id)
    ).scalar_one_or_none()
    if not cocktail:
        raise HTTPException(status_code=404, detail=f"Cocktail {cocktail_id} not found")
    return CocktailRecipe.model_validate(cocktail)


@router.post("/batch/scale", response_model=ScaleResponse)
def scale_amount(req: ScaleRequest):
    return ScaleResponse(
        parsed=parse_amount(req.amount, req.unit),
        result=scale(req.multiplier, req.amount, req.unit),
    )


@router.post("/batch/sheet", response_model=BatchSheet)
def batch_sheet(req: BatchSheetRequest, db: Session = Depends(get_db)):
    recipe = _resolve_recipe(db, req.cocktail_id, req.recipe)
    target_liters = req.target_liters if req.target_liters is not None else settings.fixed_batch_liters
    return build_batch_sheet(recipe, req.servings, target_liters)


@router.post("/batch/grand-totals", response_model=GrandTotals)
def grand_totals(
    req: GrandTotalsRequest,
    db: Session = Depends(get_db),
    price_map: dict = Depends(get_price_map),
):
    batches = []
    for b in req.batches:
        target_ml = b.target_liters * LITER_TO_ML if b.target_liters else None
        batches.append(
            BatchEntry(
                recipe=_resolve_recipe(db, b.cocktail_id, b.recipe),
                servings=b.servings,
                target_volume_ml=target_ml,
            )
        )
    return calculate_grand_totals(batches, price_map if req.include_prices else None)


@router.post("/batch/financials", response_model=FinancialSummary)
def financials(
    req: FinancialsRequest,
    db: Session = Depends(get_db),
    price_map: dict = Depends(get_price_map),
):
    lines = [(_resolve_recipe(db, line.cocktail_id, line.recipe), line.servings) for line in req.lines]
    misc = req.misc_cost_percent if req.misc_cost_percent is not None else settings.misc_cost_percent
    return project_financials(lines, price_map, misc)


@router.post("/abv/estimate", response_model=AbvResponse)
def abv_estimate(req: AbvRequest):
    return AbvResponse(abv=estimate_abv(req.ingredients))


@router.get("/dashboard", response_model=DashboardData)
def dashboard(
    db: Session = Depends(get_db),
    price_map: dict = Depends(get_price_map),
):
    events = db.execute(select(SavedEvent).order_by(SavedEvent.event_date)).scalars().all()
    cocktails = db.execute(
        select(Cocktail).options(selectinload(Cocktail.ingredients))
    ).scalars().all()

    return compute_dashboard(
        [EventRecord.model_validate(e, from_attributes=True) for e in events],
        [CocktailRecipe.model_validate(c) for c in cocktails],
        price_map,
        settings.fixed_batch_liters,
    )
