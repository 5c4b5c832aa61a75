# Docstring for pack_audit/core/normalizers module
"""
normalizers.py

Shared normalization helpers for raw spreadsheet cells and headers.

Every downstream weight and ratio computation depends on these helpers never
propagating "not-a-number" and never raising on messy input.

Design goals
------------
- Single source of truth for numeric coercion, header canonicalization, cell
  text conversion and report rounding.
- Total functions: every helper returns a usable value for any input.

Public API
----------
- safe_float(value) -> float
- normalize_header(header) -> str
- cell_to_text(value) -> str
- round_half_up(value, places) -> float
"""

from __future__ import annotations       # Tells Python to store type hints as strings internally.

import math
import re                                # Python's built-in regular expression module
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from numbers import Real                 # Real -> real_valued numbers (floats, ints, numpy numerics)
from typing import Any                   # Type hint meaning "this can be anything"

import pandas as pd


# Leading decimal number, optionally signed, with optional exponent.
# "1.5kg" -> "1.5", ".5" -> ".5", "abc" -> no match
_LEADING_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# '\s' covers space, tab, CR, LF and U+3000 (ideographic space) in Python 3 str patterns
_HEADER_WHITESPACE_RE = re.compile(r"\s+")

_FULLWIDTH_PARENS = str.maketrans({"（": "(", "）": ")"})


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):      # list-like values make pd.isna return an array
        return False


def safe_float(value: Any) -> float:
    """Convert an arbitrary cell value to a finite float; invalid input -> 0.0.

    Numbers pass through unchanged. Strings lose thousands separators and
    surrounding whitespace and are parsed by their leading number, so
    "1,234.5" -> 1234.5 and "0.35 kg" -> 0.35. Blanks and anything that does
    not start with a number resolve to 0.0.
    """
    if isinstance(value, bool):          # bool is an Integral, but "TRUE" is not a weight
        return 0.0

    if isinstance(value, Real):
        number = float(value)
        return number if math.isfinite(number) else 0.0

    if _is_missing(value):
        return 0.0

    value_str = str(value).replace(",", "").strip()
    if not value_str:
        return 0.0

    match = _LEADING_NUMBER_RE.match(value_str)
    if match is None:
        return 0.0

    try:
        number = float(match.group(0))
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def normalize_header(header: Any) -> str:
    """Canonicalize a column label for comparison only.

    Removes every whitespace character (including full-width U+3000, tabs and
    line breaks) and turns full-width parentheses into ASCII ones.
    """
    if _is_missing(header):
        return ""
    header_str = str(header)
    if not header_str:
        return ""
    return _HEADER_WHITESPACE_RE.sub("", header_str).translate(_FULLWIDTH_PARENS)


def cell_to_text(value: Any) -> str:
    """Render a raw cell as display text.

    Missing cells become "". Integer-valued floats lose their ".0" (Excel stores
    SKU 1001 as 1001.0), and dates keep only the calendar part when no time of
    day is set.
    """
    if _is_missing(value):
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        if (value.hour, value.minute, value.second, value.microsecond) == (0, 0, 0, 0):
            return value.strftime("%Y-%m-%d")
        return value.isoformat(sep=" ")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def round_half_up(value: float, places: int) -> float:
    """Round to `places` decimals, halves away from zero (1.00005 -> 1.0001)."""
    if not math.isfinite(value):
        return 0.0
    quantum = Decimal(1).scaleb(-places)     # places=4 -> Decimal("0.0001")
    try:
        # repr() gives the shortest string that round-trips, so 2.675 stays 2.675
        rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return 0.0
    return float(rounded)
