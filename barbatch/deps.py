"""FastAPI dependencies for the barbatch API.

Provides:
- Database session dependency
- Liquor price table (cached)
- Password check for destructive endpoints
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from .db import get_db
from .services.price_table import load_price_map
from .services.pricing import PriceEntry
from .settings import settings

logger = logging.getLogger("barbatch")


def get_price_map(db: Session = Depends(get_db)) -> dict[str, PriceEntry]:
    return load_price_map(db)


def check_delete_password(password: Optional[str]) -> None:
    """Plain equality gate for DELETE endpoints.

    Raises:
        HTTPException 500 if no password is configured
        HTTPException 401 if the password is missing or wrong
    """
    required = settings.delete_recipe_password
    if not required:
        logger.error("DELETE_RECIPE_PASSWORD is not set")
        raise HTTPException(status_code=500, detail="Server configuration error")

    if not password or password != required:
        raise HTTPException(status_code=401, detail="Incorrect password")
