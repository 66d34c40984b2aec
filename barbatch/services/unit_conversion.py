"""
Unit conversion table for bar batching.

US customary liquid volume plus discrete counts. Everything is expressed in
milliliters; container sizes are used for shopping-list rounding and display.
"""

import math
from typing import Optional

# --- Data Tables ---

# Milliliters per recipe unit
CONVERSION_FACTORS = {
    "oz": 29.5735,
    "tsp": 4.9289,
    "dash": 0.9,
    "count": 1,
    "top": 0,
}

LITER_TO_ML = 1000
QUART_TO_ML = 946.353
GALLON_TO_ML = 3785.41
BOTTLE_SIZE_ML = 750
CAN_SIZE_12OZ_ML = 354.882  # 12 fl oz
BOTTLE_SIZE_4OZ_ML = 118.294  # 4 fl oz

# Display units an ingredient may be ordered in
ORDER_UNITS = ("liters", "quarts", "gallons", "each", "12oz can", "4oz bottle")


# --- Core Functions ---

def ml_per_unit(unit: str) -> float:
    """Milliliters per one recipe unit; 0 for anything outside the table."""
    if not unit:
        return 0
    return CONVERSION_FACTORS.get(unit.lower(), 0)


def convert_ml_to_preferred_unit(
    ml: float,
    preferred_unit: Optional[str],
    cans_12oz: Optional[int] = None,
    bottles_4oz: Optional[int] = None,
    each_count: Optional[float] = None,
) -> Optional[float]:
    """
    Express an aggregated volume in the ingredient's order unit.

    "each" reports the accumulated discrete count rather than a volume.
    Can / small-bottle units reuse the already rounded container counts
    when the caller has them. Returns None when nothing sensible applies.
    """
    if not preferred_unit:
        return None

    unit = preferred_unit.lower().strip()

    if unit == "each":
        return each_count

    if ml <= 0:
        return None

    if unit == "liters":
        return ml / LITER_TO_ML
    if unit == "quarts":
        return ml / QUART_TO_ML
    if unit == "gallons":
        return ml / GALLON_TO_ML
    if unit in ("12oz can", "12oz cans"):
        return cans_12oz if cans_12oz is not None else math.ceil(ml / CAN_SIZE_12OZ_ML)
    if unit in ("4oz bottle", "4oz bottles"):
        return bottles_4oz if bottles_4oz is not None else math.ceil(ml / BOTTLE_SIZE_4OZ_ML)

    return None


# --- Display helpers ---

def format_number(num: float, decimals: int = 2) -> str:
    """Fixed decimals with trailing zeros trimmed ("5.50" -> "5.5", "3.00" -> "3")."""
    if not isinstance(num, (int, float)) or not math.isfinite(num):
        return "N/A"
    text = f"{num:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_ml_value(num: float) -> str:
    """Whole milliliters, always rounded up."""
    if not isinstance(num, (int, float)) or not math.isfinite(num) or num <= 0:
        return "0"
    return str(math.ceil(num))
