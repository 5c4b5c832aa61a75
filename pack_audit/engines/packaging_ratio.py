# Docstring for pack_audit/packaging_ratio module
"""
packaging_ratio.py

Reconciliation and metric engine: joins sales lines to packaging specs and
classifies each line against the packaging reduction limits.

For every sales row this engine:
1) Resolves product id, quantity, date, order id and product name with the
   fuzzy column resolver (missing text -> "", missing quantity -> 0).
2) Looks up the packaging spec by trimmed product id. Unmatched lines keep all
   weights at zero and carry the NO_SPEC_LABEL materials description, so audits
   see "uncovered" lines instead of losing them.
3) Computes quantity-scaled totals:
     packaging = (recycle box + paper box + breakage bag + tape + buffer) * qty
     product   = product weight * qty
     scale     = product + packaging
4) Computes ratio = packaging / product * 100 when product > 0, else 0.
   A zero product total is treated exactly like "no spec": the ratio is 0 even
   if packaging is positive.
5) Classifies the product total into a weight bracket and flags the line as
   compliant when ratio <= limit ratio.
6) Rounds weights to 4 decimals and the ratio to 2 decimals (half-up).

Guarantees
----------
- One ResultRecord per sales row, in input order.
- Never raises on malformed or missing cells; anomalies degrade to 0 / "".
- Deterministic: the same inputs always produce the same records.

Public API
----------
- reconcile_sales(sales_rows, template_index) -> list[ResultRecord]
- results_to_dataframe(results) -> pd.DataFrame
- run_packaging_ratio_analysis(sales_rows, template_rows) -> pd.DataFrame
"""


from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import pandas as pd

from ..config import (
    ITEM_COUNT_PER_ROW,
    NO_SPEC_LABEL,
    RESULT_COLUMNS,
    ROUNDING_CONFIG,
    SALES_FIELD_VARIANTS,
    SalesField,
)
from ..core.classification import classify_weight
from ..core.columns import resolve_fields
from ..core.models import PackagingSpec, ResultRecord
from ..core.normalizers import cell_to_text, round_half_up, safe_float
from .template_index import build_template_index


logger = logging.getLogger(__name__)

_NO_COMPONENTS = (0.0, 0.0, 0.0, 0.0, 0.0)


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def _build_result(row_index: int, row: Mapping[Any, Any], index: Mapping[str, PackagingSpec]) -> ResultRecord:
    fields = resolve_fields(row, SALES_FIELD_VARIANTS)

    product_id = cell_to_text(fields[SalesField.PRODUCT_ID]).strip()
    quantity = safe_float(fields[SalesField.QUANTITY])
    sales_date = cell_to_text(fields[SalesField.SALES_DATE])
    order_id = cell_to_text(fields[SalesField.ORDER_ID])
    product_name = cell_to_text(fields[SalesField.PRODUCT_NAME])

    spec = index.get(product_id)
    if spec is None:
        components = _NO_COMPONENTS
        unit_product_kg = 0.0
        material_name = NO_SPEC_LABEL
    else:
        components = spec.component_weights
        unit_product_kg = spec.product_weight_kg
        material_name = spec.pack_name or NO_SPEC_LABEL

    recycle_box, paper_box, break_bag, tape, buffer = components

    unit_packaging_kg = recycle_box + paper_box + break_bag + tape + buffer
    # Overflowing totals (inf / nan) count as 0 so the flag matches the report
    total_packaging_kg = _finite_or_zero(unit_packaging_kg * quantity)
    total_product_kg = _finite_or_zero(unit_product_kg * quantity)
    scale_weight_kg = _finite_or_zero(total_product_kg + total_packaging_kg)

    actual_ratio = 0.0
    if total_product_kg > 0:
        actual_ratio = _finite_or_zero(total_packaging_kg / total_product_kg * 100)

    classification = classify_weight(total_product_kg)
    is_compliant = actual_ratio <= classification.limit_ratio

    w = ROUNDING_CONFIG.weight_places
    return ResultRecord(
        record_id=f"{order_id}-{product_id}-{row_index}",
        sales_date=sales_date,
        order_id=order_id,
        product_id=product_id,
        product_name=product_name,
        quantity=quantity,
        scale_weight_kg=round_half_up(scale_weight_kg, w),
        packaging_weight_kg=round_half_up(total_packaging_kg, w),
        recycle_box_kg=round_half_up(recycle_box * quantity, w),
        paper_box_kg=round_half_up(paper_box * quantity, w),
        break_bag_kg=round_half_up(break_bag * quantity, w),
        tape_kg=round_half_up(tape * quantity, w),
        buffer_kg=round_half_up(buffer * quantity, w),
        product_weight_kg=round_half_up(total_product_kg, w),
        actual_ratio=round_half_up(actual_ratio, ROUNDING_CONFIG.ratio_places),
        bracket=classification.bracket,
        limit_ratio=classification.limit_ratio,
        is_compliant=is_compliant,
        material_name=material_name,
        item_count=ITEM_COUNT_PER_ROW,
    )


def reconcile_sales(
    sales_rows: Iterable[Mapping[Any, Any]],
    template_index: Mapping[str, PackagingSpec],
) -> list[ResultRecord]:
    """
    Reconcile sales rows against a template index.

    Args:
        sales_rows:
            Raw sales records (column label -> cell value), in file order.
        template_index:
            Output of `build_template_index()` for the same run.

    Returns:
        One ResultRecord per sales row, same order as the input.
    """

    results = [
        _build_result(row_index, row, template_index)
        for row_index, row in enumerate(sales_rows)
    ]

    unmatched = sum(1 for record in results if record.product_id not in template_index)
    non_compliant = sum(1 for record in results if not record.is_compliant)
    logger.info(
        "Reconciled %d sales lines (%d without packaging spec, %d non-compliant)",
        len(results),
        unmatched,
        non_compliant,
    )
    return results


def results_to_dataframe(results: Sequence[ResultRecord]) -> pd.DataFrame:
    """Project result records onto a DataFrame with RESULT_COLUMNS, preserving order."""
    if not results:
        return pd.DataFrame(columns=RESULT_COLUMNS)
    return pd.DataFrame([record.to_dict() for record in results], columns=RESULT_COLUMNS)


def run_packaging_ratio_analysis(
    sales_rows: Iterable[Mapping[Any, Any]],
    template_rows: Iterable[Mapping[Any, Any]],
) -> pd.DataFrame:
    """
    Build the template index and reconcile the sales rows in one call.

    Both row sets must be fully materialized (e.g. by `load_data.load_input_pair`).
    Returns a DataFrame with one row per sales line and RESULT_COLUMNS.
    """

    template_index = build_template_index(template_rows)
    results = reconcile_sales(sales_rows, template_index)
    return results_to_dataframe(results)
