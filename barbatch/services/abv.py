"""
ABV estimation for cocktail recipes.

Recipes carry no structured "base spirit" field, so each ingredient's ABV is
looked up by keyword and the recipe ABV is the volume-weighted average.
"""

import re

from ..parsing.amount_parser import parse_amount
from .unit_conversion import ml_per_unit

# Percent ABV by ingredient keyword
INGREDIENT_ABV = {
    # Spirits
    "vodka": 40,
    "gin": 40,
    "rum": 40,
    "white rum": 40,
    "dark rum": 40,
    "spiced rum": 35,
    "aged rum": 40,
    "tequila": 40,
    "blanco tequila": 40,
    "reposado tequila": 40,
    "anejo tequila": 40,
    "mezcal": 40,
    "whiskey": 40,
    "whisky": 40,
    "bourbon": 40,
    "rye": 40,
    "scotch": 40,
    "irish whiskey": 40,
    "brandy": 40,
    "cognac": 40,
    "pisco": 40,
    "cachaca": 40,
    "absinthe": 60,

    # Liqueurs & cordials
    "cointreau": 40,
    "triple sec": 30,
    "grand marnier": 40,
    "blue curacao": 25,
    "curacao": 25,
    "maraschino liqueur": 32,
    "maraschino": 32,
    "amaretto": 28,
    "kahlua": 20,
    "coffee liqueur": 20,
    "baileys": 17,
    "irish cream": 17,
    "campari": 25,
    "aperol": 11,
    "st-germain": 20,
    "elderflower liqueur": 20,
    "green chartreuse": 55,
    "yellow chartreuse": 40,
    "luxardo": 32,
    "benedictine": 40,
    "drambuie": 40,
    "frangelico": 20,
    "chambord": 16,
    "midori": 20,
    "malibu": 21,
    "sloe gin": 26,
    "creme de cacao": 25,
    "creme de menthe": 25,
    "creme de cassis": 15,
    "creme de violette": 22,
    "fernet": 39,
    "fernet branca": 39,
    "amaro": 30,
    "cynar": 16.5,
    "nonino": 35,
    "montenegro": 23,
    "jagermeister": 35,
    "liquor 43": 31,
    "licor 43": 31,
    "galliano": 42,
    "sambuca": 42,
    "limoncello": 30,
    "pear liqueur": 20,
    "cherry heering": 24,

    # Wines & vermouths
    "vermouth": 16,
    "sweet vermouth": 16,
    "dry vermouth": 18,
    "blanc vermouth": 16,
    "red vermouth": 16,
    "lillet": 17,
    "lillet blanc": 17,
    "cocchi americano": 16,
    "sherry": 18,
    "port": 20,
    "madeira": 19,
    "marsala": 17,
    "wine": 12,
    "red wine": 13,
    "white wine": 12,
    "rose wine": 12,
    "champagne": 12,
    "prosecco": 11,
    "cava": 11,
    "sparkling wine": 12,
    "sake": 15,

    # Bitters (high ABV, tiny volume)
    "angostura bitters": 44.7,
    "orange bitters": 39,
    "peychaud's bitters": 35,
    "bitters": 40,

    # Non-alcoholic; explicit zeros keep "ginger" from matching "gin"
    "ginger": 0,
    "ginger beer": 0,
    "ginger ale": 0,
    "ginger syrup": 0,
    "syrup": 0,
    "simple syrup": 0,
    "juice": 0,
    "lemon juice": 0,
    "lime juice": 0,
    "orange juice": 0,
    "grapefruit juice": 0,
    "pineapple juice": 0,
    "cranberry juice": 0,
    "puree": 0,
    "nectar": 0,
    "tea": 0,
    "coffee": 0,
    "water": 0,
    "soda": 0,
    "soda water": 0,
    "tonic": 0,
    "club soda": 0,
    "seltzer": 0,
    "milk": 0,
    "cream": 0,
    "egg": 0,
    "egg white": 0,
    "mint": 0,
    "basil": 0,
    "rosemary": 0,
    "fruit": 0,
    "garnish": 0,
    "ice": 0,
}

GENERIC_LIQUEUR_ABV = 20

# Word-boundary fallbacks for the common spirit families
SPIRIT_FAMILY_PATTERNS = [
    re.compile(r"\bvodka\b"),
    re.compile(r"\bgin\b"),
    re.compile(r"\brum\b"),
    re.compile(r"\b(?:whiskey|bourbon|rye)\b"),
    re.compile(r"\b(?:tequila|mezcal)\b"),
    re.compile(r"\b(?:brandy|cognac)\b"),
]
SPIRIT_FAMILY_ABV = 40


def normalize_name(name: str) -> str:
    return re.sub(r"[^a-z0-9\s]", "", (name or "").lower().strip())


_NORMALIZED_ABV = {normalize_name(k): v for k, v in INGREDIENT_ABV.items()}
# Longest first so "white rum" wins over "rum"
_KEYS_BY_LENGTH = sorted(_NORMALIZED_ABV, key=len, reverse=True)


def ingredient_abv(name: str) -> float:
    """ABV percentage of a single ingredient, guessed from its name."""
    n_name = normalize_name(name)

    if n_name in _NORMALIZED_ABV:
        return _NORMALIZED_ABV[n_name]

    for key in _KEYS_BY_LENGTH:
        if key in n_name:
            return _NORMALIZED_ABV[key]

    for pattern in SPIRIT_FAMILY_PATTERNS:
        if pattern.search(n_name):
            return SPIRIT_FAMILY_ABV

    if "liqueur" in n_name:
        return GENERIC_LIQUEUR_ABV

    return 0


def estimate_abv(ingredients) -> float:
    """Volume-weighted ABV of a recipe, rounded to one decimal."""
    total_volume_ml = 0.0
    total_alcohol_ml = 0.0

    for ing in ingredients or []:
        parsed = parse_amount(ing.amount, ing.unit)

        # "Top" placeholders have no fixed volume to weigh
        if parsed.kind == "liquid" or (parsed.kind == "special" and parsed.unit != "Top"):
            factor = ml_per_unit(parsed.unit)
            if factor > 0:
                volume = parsed.base_amount * factor
                total_volume_ml += volume
                total_alcohol_ml += volume * (ingredient_abv(ing.name) / 100)

    if total_volume_ml == 0:
        return 0.0

    return round(total_alcohol_ml / total_volume_ml * 100, 1)
