"""Loads the liquor price table from the database, cached in Redis."""

import logging

from redis.exceptions import RedisError
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..infra.redis_cache import delete_key, get_or_set_json_sync
from ..models import LiquorPrice
from ..settings import settings
from .pricing import PriceEntry

logger = logging.getLogger("barbatch.prices")

PRICE_CACHE_KEY = "barbatch:liquor_prices:v1"


def _query_price_rows(db: Session) -> dict:
    rows = db.execute(select(LiquorPrice).order_by(LiquorPrice.id)).scalars().all()
    return {
        row.name.lower(): {"price": float(row.bottle_price), "bottle_size_ml": float(row.bottle_size_ml)}
        for row in rows
    }


def load_price_map(db: Session) -> dict[str, PriceEntry]:
    """Lowercase ingredient name -> PriceEntry."""
    try:
        raw, hit = get_or_set_json_sync(
            PRICE_CACHE_KEY,
            settings.price_cache_ttl_sec,
            lambda: _query_price_rows(db),
        )
        if hit:
            logger.debug("Price table served from cache")
    except RedisError as e:
        logger.warning(f"Price cache unavailable, reading from database: {e}")
        raw = _query_price_rows(db)

    return {name: PriceEntry(**entry) for name, entry in raw.items()}


def invalidate_price_cache():
    try:
        delete_key(PRICE_CACHE_KEY)
    except RedisError as e:
        logger.warning(f"Failed to invalidate price cache: {e}")
