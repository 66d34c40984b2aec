"""
Shopping-list categories for free-text ingredient names.

Keyword tables are ordered; the carbonated-mixer table is checked before the
liquor table because liquor keywords collide with mixer names
("ginger beer" contains "gin").
"""

from typing import Literal

Category = Literal["carbonated_mixer", "liquor", "other"]

CARBONATED_MIXER_KEYWORDS = (
    "ginger beer", "ginger ale", "soda water", "club soda", "tonic water", "tonic",
    "seltzer", "sparkling water", "carbonated water", "cola", "sprite", "7up",
    "fresca", "fanta", "root beer", "dr pepper", "mountain dew", "pepsi", "coca cola",
)

LIQUOR_KEYWORDS = (
    "vodka", "gin", "rum", "whiskey", "whisky", "bourbon", "tequila", "pisco",
    "brandy", "cognac", "liqueur", "liquor", "prosecco", "champagne", "wine",
    "sparkling wine", "sake", "mezcal", "rye", "scotch", "vermouth", "curacao",
    "kahlua", "maraschino", "armagnac", "port", "sherry", "aperol",
    "campari", "chartreuse", "benedictine", "drambuie", "frangelico", "baileys",
    "amaretto", "cointreau", "triple sec", "grand marnier", "chambord", "st germain",
    "angostura bitters",
)


def _matches(name: str, keywords) -> bool:
    lower = name.lower()
    return any(keyword in lower for keyword in keywords)


def is_carbonated_mixer(name: str) -> bool:
    return _matches(name, CARBONATED_MIXER_KEYWORDS)


def is_liquor(name: str) -> bool:
    return _matches(name, LIQUOR_KEYWORDS)


def is_angostura_bitters(name: str) -> bool:
    return "angostura bitters" in name.lower()


def classify(name: str) -> Category:
    """Exactly one category per name: carbonated mixer > liquor > other."""
    if is_carbonated_mixer(name):
        return "carbonated_mixer"
    if is_liquor(name):
        return "liquor"
    return "other"
