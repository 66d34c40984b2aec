import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Cocktail, LiquorPrice
from ..schemas import Ingredient
from ..seed_data import LIQUOR_PRICES, SAMPLE_COCKTAILS
from ..services.abv import estimate_abv
from ..services.price_table import invalidate_price_cache
from .cocktails import ingredient_rows

router = APIRouter()
logger = logging.getLogger("barbatch.dev")


class SeedResponse(BaseModel):
    cocktails_created: list[str]
    prices_upserted: int


@router.post("/dev/seed", response_model=SeedResponse)
def seed(db: Session = Depends(get_db)):
    """Load the sample menu and price table. Existing cocktails are left alone."""
    created = []
    for item in SAMPLE_COCKTAILS:
        exists = db.execute(select(Cocktail.id).where(Cocktail.name == item["name"])).first()
        if exists:
            continue

        ingredients = [Ingredient(**ing) for ing in item["ingredients"]]
        data = {k: v for k, v in item.items() if k != "ingredients"}
        cocktail = Cocktail(**data, abv=estimate_abv(ingredients))
        cocktail.ingredients = ingredient_rows(ingredients)
        db.add(cocktail)
        created.append(item["name"])

    for item in LIQUOR_PRICES:
        row = db.execute(select(LiquorPrice).where(func.lower(LiquorPrice.name) == item["name"].lower())).scalar_one_or_none()
        if row is None:
            db.add(LiquorPrice(name=item["name"], bottle_price=item["price"], bottle_size_ml=item["bottle_size_ml"]))
        else:
            row.bottle_price = item["price"]
            row.bottle_size_ml = item["bottle_size_ml"]

    db.commit()
    invalidate_price_cache()
    logger.info(f"Seeded {len(created)} cocktails and {len(LIQUOR_PRICES)} prices")

    return SeedResponse(cocktails_created=created, prices_upserted=len(LIQUOR_PRICES))
