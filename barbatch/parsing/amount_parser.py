"""
Amount parser for bartending ingredient lines.

Turns hand-written amount strings ("1.5", "3 Dashes", "2-3 leaves", "Top")
into a normalized (base_amount, unit, kind) triple. The parser is total:
any input yields a ParsedAmount, never an exception.

Known limitation: mixed numbers ("1 1/2 oz") are not part of the grammar.
They fail the number parse and take the defaults of whichever branch they
land in.
"""

import math
import re
from typing import Literal, Optional

from pydantic import BaseModel

Kind = Literal["liquid", "count", "special"]


class ParsedAmount(BaseModel):
    base_amount: float
    unit: str
    kind: Kind


# --- Vocabulary ---

# Non-liquid items that would otherwise mis-parse as a unit ("2 leaves" is not 2 L)
COUNT_KEYWORDS = ("egg white", "leaves", "slices", "beans")

# Prefix -> canonical liquid unit
LIQUID_UNIT_PREFIXES = ("oz", "dash", "tsp")

SPECIAL_MARKERS = ("top", "n/a")

# A run of digits, separators and spaces holding at least one digit
NUMBER_TOKEN_RE = re.compile(r"[0-9.,/\-\s]*[0-9][0-9.,/\-\s]*")
UNIT_WORD_RE = re.compile(r"\s*([a-z]+)")
FLOAT_PREFIX_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
MIXED_NUMBER_RE = re.compile(r"[0-9]\s+[0-9]")


def _float_prefix(s: str) -> float:
    m = FLOAT_PREFIX_RE.match(s.strip())
    return float(m.group(0)) if m else math.nan


def parse_number(token: str) -> float:
    """
    Parse the numeric mini-grammar: "1.5", "1/2", "2-3" (averaged), "1,5".
    Returns NaN when the token can't be read as a finite number.
    """
    if MIXED_NUMBER_RE.search(token):
        return math.nan

    s = re.sub(r"\s+", "", token).replace(",", ".")

    if "/" in s:
        num, _, den = s.partition("/")
        denominator = _float_prefix(den)
        if denominator == 0:
            return math.nan
        value = _float_prefix(num) / denominator
    elif "-" in s:
        lo, _, hi = s.partition("-")
        value = (_float_prefix(lo) + _float_prefix(hi)) / 2
    else:
        value = _float_prefix(s)

    return value if math.isfinite(value) else math.nan


def combine_amount_and_unit(amount: Optional[str], unit: Optional[str] = None) -> str:
    """Join a separate amount and unit field into one parseable string."""
    amount = (amount or "").strip()
    unit = (unit or "").strip()
    if not amount or not unit:
        return amount
    if amount.lower().endswith(unit.lower()):
        return amount
    return f"{amount} {unit}"


def _parse_count_item(text: str) -> ParsedAmount:
    base_amount = 1.0
    label = text

    match = NUMBER_TOKEN_RE.search(text)
    if match:
        token = match.group(0).strip()
        value = parse_number(token)
        if not math.isnan(value) and value > 0:
            base_amount = value
            label = text.replace(token, "", 1).strip() or "count"

    label = re.sub(r"\s+", " ", label).strip() or "count"
    return ParsedAmount(base_amount=base_amount, unit=label, kind="count")


def parse_amount(amount: Optional[str], unit: Optional[str] = None) -> ParsedAmount:
    """
    Parse an amount string (optionally with a separate unit field).

    Branch order:
    1. empty -> special "N/A"
    2. "top" / "n/a" -> special "Top"
    3. count keywords -> count with the remaining text as label
    4. number + optional unit word -> liquid (oz/dash/tsp) or count
    5. no number at all -> count of 1, labelled with the text itself
    """
    text = combine_amount_and_unit(amount, unit) if unit else (amount or "")
    lower = text.lower().strip()

    if not lower:
        return ParsedAmount(base_amount=0, unit="N/A", kind="special")

    if any(marker in lower for marker in SPECIAL_MARKERS):
        return ParsedAmount(base_amount=0, unit="Top", kind="special")

    if any(keyword in lower for keyword in COUNT_KEYWORDS):
        return _parse_count_item(lower)

    match = NUMBER_TOKEN_RE.search(lower)
    if not match:
        return ParsedAmount(base_amount=1, unit=lower or "count", kind="count")

    value = parse_number(match.group(0))
    parsed_ok = not math.isnan(value)

    word_match = UNIT_WORD_RE.match(lower, match.end())
    raw_word = word_match.group(1) if word_match else ""
    stem = raw_word[:-1] if raw_word.endswith("s") else raw_word

    for prefix in LIQUID_UNIT_PREFIXES:
        if stem.startswith(prefix):
            if parsed_ok and value > 0:
                return ParsedAmount(base_amount=value, unit=prefix, kind="liquid")
            # A liquid unit without a usable quantity has nothing to scale
            return ParsedAmount(base_amount=0, unit=prefix, kind="special")

    if raw_word:
        return ParsedAmount(base_amount=value if parsed_ok else 0, unit=raw_word, kind="count")

    return ParsedAmount(base_amount=value if parsed_ok else 1, unit="count", kind="count")
