"""
classification.py

Weight-bracket classification policy.

Maps the total product weight of a sales line to its regulatory bracket and
the maximum packaging/product ratio allowed for it. Bracket bounds are
inclusive on the upper side: exactly 1 kg is still "≤1KG" and exactly 3 kg is
still "1KG–3KG". The bracket constants live in `config.WEIGHT_BRACKETS`.
"""

from __future__ import annotations

from ..config import WEIGHT_BRACKETS, WeightBracket
from .models import WeightClassification


def classify_weight(
    total_product_weight_kg: float,
    brackets: tuple[WeightBracket, ...] = WEIGHT_BRACKETS,
) -> WeightClassification:
    """Return the bracket label and limit ratio for a total product weight."""
    for bracket in brackets:
        if bracket.max_weight_kg is None or total_product_weight_kg <= bracket.max_weight_kg:
            return WeightClassification(bracket=bracket.label, limit_ratio=bracket.limit_ratio)

    # Bracket tables always end with an open-ended bracket; fall back to the last one.
    last = brackets[-1]
    return WeightClassification(bracket=last.label, limit_ratio=last.limit_ratio)
