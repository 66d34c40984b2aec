from collections import Counter, defaultdict

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import CocktailIngredient
from ..schemas import IngredientSuggestion, IngredientSuggestionList

router = APIRouter()


@router.get("/ingredients", response_model=IngredientSuggestionList)
def list_ingredient_names(db: Session = Depends(get_db)):
    """Distinct ingredient names, each with its most commonly used order unit."""
    rows = db.execute(
        select(CocktailIngredient.name, CocktailIngredient.preferred_unit)
    ).all()

    units_by_name: dict[str, Counter] = defaultdict(Counter)
    for name, unit in rows:
        units_by_name[name.strip()][unit] += 1

    suggestions = []
    for name in sorted(units_by_name, key=str.lower):
        counts = units_by_name[name]
        # Prefer a real unit over "unset" when the counts tie
        unit, _ = max(counts.items(), key=lambda kv: (kv[1], kv[0] is not None))
        suggestions.append(IngredientSuggestion(name=name, order_unit=unit))

    return IngredientSuggestionList(ingredients=suggestions)
