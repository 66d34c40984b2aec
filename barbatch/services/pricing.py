"""Liquor price table lookups."""

import logging
from typing import Mapping, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger("barbatch.prices")


class PriceEntry(BaseModel):
    price: float = Field(..., ge=0)  # per bottle
    bottle_size_ml: float = Field(750, gt=0)


PriceMap = Mapping[str, PriceEntry]


def find_price(name: str, price_map: Optional[PriceMap]) -> Optional[PriceEntry]:
    """
    Match a free-text ingredient name against the price table.

    Case-insensitive exact match first, then a substring match in either
    direction ("Bourbon" <-> "Bourbon or Rye") over keys in table order.
    Substring matching can over-match; it is preferred to silently leaving
    an ingredient unpriced.
    """
    if not price_map or not name:
        return None

    key = name.strip().lower()
    if not key:
        return None

    lowered = {k.lower(): v for k, v in price_map.items()}
    if key in lowered:
        return lowered[key]

    for price_key, entry in lowered.items():
        if price_key and (price_key in key or key in price_key):
            logger.debug(f"Price for '{name}' matched by substring on '{price_key}'")
            return entry

    return None
