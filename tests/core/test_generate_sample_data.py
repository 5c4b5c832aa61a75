from __future__ import annotations

from pathlib import Path

from pack_audit.config import NO_SPEC_LABEL
from pack_audit.core.generate_sample_data import UNMATCHED_PRODUCT_ID, generate_sample_data
from pack_audit.engines.packaging_ratio import reconcile_sales
from pack_audit.engines.template_index import build_template_index
from pack_audit.load_data import load_input_pair


def test_generate_sample_data_round_trips_through_pipeline(tmp_path: Path) -> None:
    outputs = generate_sample_data(output_dir=tmp_path, seed=7, product_count=12, sales_lines=40)

    assert outputs["sales"].exists() is True
    assert outputs["template"].exists() is True

    sales_rows, template_rows = load_input_pair(outputs["sales"], outputs["template"])
    index = build_template_index(template_rows)
    results = reconcile_sales(sales_rows, index)

    assert len(index) == 12
    assert index["SKU-0001"].pack_name == "更新版包材"
    assert len(results) == 40
    assert all(r.quantity > 0 for r in results)
    assert all(
        r.material_name == NO_SPEC_LABEL
        for r in results
        if r.product_id == UNMATCHED_PRODUCT_ID
    )


def test_generate_sample_data_is_deterministic(tmp_path: Path) -> None:
    first = generate_sample_data(output_dir=tmp_path / "a", seed=11, sales_lines=10)
    second = generate_sample_data(output_dir=tmp_path / "b", seed=11, sales_lines=10)

    rows_a = load_input_pair(first["sales"], first["template"])
    rows_b = load_input_pair(second["sales"], second["template"])

    assert rows_a == rows_b
