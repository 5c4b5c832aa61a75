# Docstring for pack_audit/template_index module
"""
template_index.py

Builds the product identifier -> packaging specification index from the raw
packaging template rows.

Each template row is resolved with the fuzzy column resolver, so headers such as
"回收箱(KG)a1", "回收箱 (KG)" or "回收箱" all feed the same field. Numeric cells go
through `safe_float`, so blanks and junk become 0.0 instead of errors.

Rules
-----
- Rows whose product identifier is blank after trimming are skipped (they
  cannot be joined to a sales line).
- Any other non-empty identifier is accepted as-is.
- Later rows overwrite earlier rows with the same identifier (last row wins).
- A missing materials description falls back to `NO_SPEC_LABEL`.

The index is rebuilt on every run and owned by that run only.

Public API
----------
- build_template_index(template_rows) -> dict[str, PackagingSpec]
- build_packaging_spec(row) -> PackagingSpec | None
"""


from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..config import NO_SPEC_LABEL, TEMPLATE_FIELD_VARIANTS, TemplateField
from ..core.columns import resolve_fields
from ..core.models import PackagingSpec
from ..core.normalizers import cell_to_text, safe_float


logger = logging.getLogger(__name__)


def build_packaging_spec(row: Mapping[Any, Any]) -> PackagingSpec | None:
    """Resolve one template row into a PackagingSpec; None when it has no identifier."""

    fields = resolve_fields(row, TEMPLATE_FIELD_VARIANTS)

    product_id = cell_to_text(fields[TemplateField.PRODUCT_ID]).strip()
    if not product_id:
        return None

    pack_name = cell_to_text(fields[TemplateField.PACK_NAME]).strip()

    return PackagingSpec(
        product_id=product_id,
        product_name=cell_to_text(fields[TemplateField.PRODUCT_NAME]),
        recycle_box_kg=safe_float(fields[TemplateField.RECYCLE_BOX]),
        paper_box_kg=safe_float(fields[TemplateField.PAPER_BOX]),
        break_bag_kg=safe_float(fields[TemplateField.BREAK_BAG]),
        tape_kg=safe_float(fields[TemplateField.TAPE]),
        buffer_kg=safe_float(fields[TemplateField.BUFFER]),
        product_weight_kg=safe_float(fields[TemplateField.PRODUCT_WEIGHT]),
        pack_name=pack_name or NO_SPEC_LABEL,
    )


def build_template_index(template_rows: Iterable[Mapping[Any, Any]]) -> dict[str, PackagingSpec]:
    """
    Build the product identifier -> PackagingSpec index for one run.

    Args:
        template_rows:
            Raw template records (column label -> cell value), in file order.

    Returns:
        dict keyed by trimmed product identifier. On identifier collisions the
        last row wins.
    """

    index: dict[str, PackagingSpec] = {}
    skipped = 0
    overwritten = 0

    for row_number, row in enumerate(template_rows):
        spec = build_packaging_spec(row)
        if spec is None:
            skipped += 1
            continue

        if spec.product_id in index:
            overwritten += 1
            logger.debug(
                "Template row %d overwrites earlier spec for product %r",
                row_number,
                spec.product_id,
            )
        index[spec.product_id] = spec

    logger.info(
        "Template index built: %d products (%d rows without identifier skipped, %d duplicates overwritten)",
        len(index),
        skipped,
        overwritten,
    )
    return index
