import pytest

from pack_audit.config import WEIGHT_BRACKETS, WeightBracket
from pack_audit.core.classification import classify_weight


@pytest.mark.parametrize(
    ("weight", "bracket", "limit"),
    [
        (0.0, "≤1KG", 40),
        (0.5, "≤1KG", 40),
        (1.0, "≤1KG", 40),
        (1.0001, "1KG–3KG", 30),
        (3.0, "1KG–3KG", 30),
        (3.0001, ">3KG", 15),
        (250.0, ">3KG", 15),
    ],
)
def test_classify_weight_bracket_boundaries(weight: float, bracket: str, limit: int) -> None:
    result = classify_weight(weight)

    assert result.bracket == bracket
    assert result.limit_ratio == limit


def test_weight_brackets_are_ordered_and_open_ended() -> None:
    bounds = [b.max_weight_kg for b in WEIGHT_BRACKETS]

    assert bounds[-1] is None
    assert bounds[:-1] == sorted(bounds[:-1])


def test_classify_weight_accepts_custom_brackets() -> None:
    brackets = (
        WeightBracket(label="light", max_weight_kg=2.0, limit_ratio=50),
        WeightBracket(label="heavy", max_weight_kg=None, limit_ratio=10),
    )

    assert classify_weight(2.0, brackets).bracket == "light"
    assert classify_weight(2.5, brackets).limit_ratio == 10
