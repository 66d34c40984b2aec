"""Cocktails CRUD API router.

Endpoints:
- GET /api/cocktails - List active cocktails (filters: search, category, featured, liquor, season)
- POST /api/cocktails - Create cocktail with ingredients
- GET /api/cocktails/search - Name / ingredient search
- GET /api/cocktails/liquors - Distinct liquor ingredient names
- GET /api/cocktails/{id} - Get cocktail
- PATCH /api/cocktails/{id} - Update cocktail
- DELETE /api/cocktails/{id} - Delete cocktail (password-gated)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from ..db import get_db
from ..deps import check_delete_password
from ..models import Cocktail, CocktailIngredient
from ..schemas import (
    CocktailCreate, CocktailListOut, CocktailOut, CocktailPatch,
    DeleteRequest, Ingredient, LiquorListOut,
)
from ..services.abv import estimate_abv
from ..services.ingredient_classify import classify

router = APIRouter()
logger = logging.getLogger("barbatch.cocktails")


def ingredient_rows(ingredients: list[Ingredient]) -> list[CocktailIngredient]:
    return [
        CocktailIngredient(
            name=ing.name.strip(),
            amount=ing.amount.strip(),
            unit=ing.unit or None,
            preferred_unit=ing.preferred_unit or None,
            order_index=i,
        )
        for i, ing in enumerate(ingredients)
    ]


def get_cocktail_or_404(db: Session, cocktail_id: int) -> Cocktail:
    cocktail = db.execute(
        select(Cocktail)
        .options(selectinload(Cocktail.ingredients))
        .where(Cocktail.id == cocktail_id)
    ).scalar_one_or_none()
    if not cocktail:
        raise HTTPException(status_code=404, detail="Cocktail not found")
    return cocktail


@router.get("/cocktails", response_model=CocktailListOut)
def list_cocktails(
    search: Optional[str] = None,
    category: Optional[str] = None,
    featured: Optional[bool] = None,
    liquor: Optional[str] = None,
    season: Optional[str] = None,
    active: bool = True,
    db: Session = Depends(get_db),
):
    stmt = select(Cocktail).options(selectinload(Cocktail.ingredients)).where(Cocktail.is_active == active)

    if search:
        stmt = stmt.where(Cocktail.name.ilike(f"%{search}%"))
    if category:
        stmt = stmt.where(Cocktail.category == category)
    if featured is not None:
        stmt = stmt.where(Cocktail.featured == featured)
    if season:
        stmt = stmt.where(Cocktail.season == season)
    if liquor:
        stmt = stmt.where(
            Cocktail.ingredients.any(CocktailIngredient.name.ilike(f"%{liquor}%"))
        )

    cocktails = db.execute(stmt.order_by(Cocktail.name)).scalars().all()
    return CocktailListOut(
        cocktails=[CocktailOut.model_validate(c) for c in cocktails],
        total=len(cocktails),
    )


@router.get("/cocktails/search", response_model=CocktailListOut)
def search_cocktails(q: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    """Match cocktail names or any ingredient name."""
    pattern = f"%{q.strip()}%"
    stmt = (
        select(Cocktail)
        .options(selectinload(Cocktail.ingredients))
        .where(
            Cocktail.is_active.is_(True),
            or_(
                Cocktail.name.ilike(pattern),
                Cocktail.ingredients.any(CocktailIngredient.name.ilike(pattern)),
            ),
        )
        .order_by(Cocktail.name)
    )
    cocktails = db.execute(stmt).scalars().all()
    return CocktailListOut(
        cocktails=[CocktailOut.model_validate(c) for c in cocktails],
        total=len(cocktails),
    )


@router.get("/cocktails/liquors", response_model=LiquorListOut)
def list_liquors(db: Session = Depends(get_db)):
    names = db.execute(select(CocktailIngredient.name).distinct()).scalars().all()
    liquors = sorted({n.strip() for n in names if classify(n) == "liquor"})
    return LiquorListOut(liquors=liquors)


@router.post("/cocktails", response_model=CocktailOut, status_code=201)
def create_cocktail(body: CocktailCreate, db: Session = Depends(get_db)):
    data = body.model_dump(exclude={"ingredients"})
    if data.get("abv") is None:
        data["abv"] = estimate_abv(body.ingredients)

    cocktail = Cocktail(**data)
    cocktail.ingredients = ingredient_rows(body.ingredients)
    db.add(cocktail)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail=f"Cocktail '{body.name}' already exists")

    db.refresh(cocktail)
    logger.info(f"Created cocktail {cocktail.id} ('{cocktail.name}')")
    return CocktailOut.model_validate(cocktail)


@router.get("/cocktails/{cocktail_id}", response_model=CocktailOut)
def get_cocktail(cocktail_id: int, db: Session = Depends(get_db)):
    return CocktailOut.model_validate(get_cocktail_or_404(db, cocktail_id))


@router.patch("/cocktails/{cocktail_id}", response_model=CocktailOut)
def update_cocktail(cocktail_id: int, body: CocktailPatch, db: Session = Depends(get_db)):
    cocktail = get_cocktail_or_404(db, cocktail_id)
    changes = body.model_dump(exclude_unset=True, exclude={"ingredients"})

    for field, value in changes.items():
        setattr(cocktail, field, value)

    if body.ingredients is not None:
        cocktail.ingredients = ingredient_rows(body.ingredients)
        # Re-estimate unless the caller set ABV explicitly
        if "abv" not in changes:
            cocktail.abv = estimate_abv(body.ingredients)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Cocktail name already in use")

    db.refresh(cocktail)
    return CocktailOut.model_validate(cocktail)


@router.delete("/cocktails/{cocktail_id}")
def delete_cocktail(
    cocktail_id: int,
    body: Optional[DeleteRequest] = None,
    db: Session = Depends(get_db),
):
    check_delete_password(body.password if body else None)

    cocktail = db.get(Cocktail, cocktail_id)
    if not cocktail:
        raise HTTPException(status_code=404, detail="Cocktail not found")

    db.delete(cocktail)
    db.commit()
    logger.info(f"Deleted cocktail {cocktail_id}")
    return {"success": True}
