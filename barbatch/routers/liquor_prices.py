"""
Router for the liquor price table.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import LiquorPrice
from ..schemas import LiquorPriceOut, LiquorPriceUpsert
from ..services.price_table import invalidate_price_cache

router = APIRouter()
logger = logging.getLogger("barbatch.prices")


@router.get("/liquor-prices", response_model=dict[str, LiquorPriceOut])
def get_liquor_prices(db: Session = Depends(get_db)):
    """Price table keyed by lowercase ingredient name."""
    rows = db.execute(select(LiquorPrice).order_by(LiquorPrice.id)).scalars().all()
    return {
        row.name.lower(): LiquorPriceOut(name=row.name, price=row.bottle_price, bottle_size_ml=row.bottle_size_ml)
        for row in rows
    }


@router.put("/liquor-prices/{name}", response_model=LiquorPriceOut)
def upsert_liquor_price(name: str, body: LiquorPriceUpsert, db: Session = Depends(get_db)):
    name = name.strip()
    # Names are matched case-insensitively, same as the price map keys
    row = db.execute(
        select(LiquorPrice).where(func.lower(LiquorPrice.name) == name.lower())
    ).scalar_one_or_none()
    if row is None:
        row = LiquorPrice(name=name, bottle_price=body.price, bottle_size_ml=body.bottle_size_ml)
        db.add(row)
    else:
        row.bottle_price = body.price
        row.bottle_size_ml = body.bottle_size_ml

    db.commit()
    invalidate_price_cache()
    logger.info(f"Upserted price for {name}: {body.price:.2f} ({body.bottle_size_ml:g}ml)")

    return LiquorPriceOut(name=row.name, price=row.bottle_price, bottle_size_ml=row.bottle_size_ml)
