from datetime import date, datetime

import numpy as np
import pandas as pd
import pytest

from pack_audit.core.normalizers import (
    cell_to_text,
    normalize_header,
    round_half_up,
    safe_float,
)


def test_safe_float_passes_numbers_through() -> None:
    assert safe_float(3) == 3.0
    assert safe_float(0.125) == 0.125
    assert safe_float(np.int64(4)) == 4.0
    assert safe_float(np.float64(1.5)) == 1.5
    assert safe_float(-2) == -2.0


def test_safe_float_parses_grouped_and_padded_strings() -> None:
    assert safe_float("1,234.5") == 1234.5
    assert safe_float("  2.5  ") == 2.5
    assert safe_float("-1.5") == -1.5
    assert safe_float("1e3") == 1000.0
    assert safe_float(".5") == 0.5


def test_safe_float_uses_leading_number_of_annotated_cells() -> None:
    assert safe_float("0.35kg") == 0.35
    assert safe_float("12 pcs") == 12.0


def test_safe_float_defaults_invalid_input_to_zero() -> None:
    assert safe_float(None) == 0.0
    assert safe_float("") == 0.0
    assert safe_float("   ") == 0.0
    assert safe_float("abc") == 0.0
    assert safe_float("N/A") == 0.0
    assert safe_float(float("nan")) == 0.0
    assert safe_float(float("inf")) == 0.0
    assert safe_float(pd.NA) == 0.0
    assert safe_float(True) == 0.0


def test_normalize_header_strips_whitespace_and_fullwidth_parens() -> None:
    assert normalize_header(" 回收箱 (kg) ") == "回收箱(kg)"
    assert normalize_header("回收箱（KG）\na1") == "回收箱(KG)a1"
    assert normalize_header("銷貨　數量\t\r\n") == "銷貨數量"


def test_normalize_header_handles_missing_labels() -> None:
    assert normalize_header(None) == ""
    assert normalize_header("") == ""
    assert normalize_header(float("nan")) == ""
    assert normalize_header(2024) == "2024"


def test_cell_to_text_renders_display_values() -> None:
    assert cell_to_text(None) == ""
    assert cell_to_text(float("nan")) == ""
    assert cell_to_text(1001.0) == "1001"
    assert cell_to_text(1001) == "1001"
    assert cell_to_text(2.5) == "2.5"
    assert cell_to_text(" P1 ") == " P1 "
    assert cell_to_text(datetime(2025, 1, 2)) == "2025-01-02"
    assert cell_to_text(pd.Timestamp("2025-01-02 13:30")) == "2025-01-02 13:30:00"
    assert cell_to_text(date(2025, 3, 4)) == "2025-03-04"


@pytest.mark.parametrize(
    ("value", "places", "expected"),
    [
        (1.00005, 4, 1.0001),
        (2.675, 2, 2.68),
        (0.125, 2, 0.13),
        (0.6000000000000001, 4, 0.6),
        (10.000000000000002, 2, 10.0),
        (0.0, 4, 0.0),
    ],
)
def test_round_half_up(value: float, places: int, expected: float) -> None:
    assert round_half_up(value, places) == expected
