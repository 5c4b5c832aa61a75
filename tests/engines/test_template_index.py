import pytest

from pack_audit.config import NO_SPEC_LABEL
from pack_audit.engines.template_index import build_packaging_spec, build_template_index


def _template_row(product_id, weight, **overrides):
    row = {
        "品號": product_id,
        "品名": f"name-{product_id}",
        "回收箱(KG)a1": 0.1,
        "紙箱(KG)": 0.05,
        "破壞袋(KG)": 0.0,
        "膠帶(KG)": 0.01,
        "回收緩衝材(KG)": 0.02,
        "商品總重量(KG)B": weight,
        "使用包材名稱/規格": "紙箱+膠帶",
    }
    row.update(overrides)
    return row


def test_build_packaging_spec_resolves_all_fields() -> None:
    spec = build_packaging_spec(_template_row("P1", 2.0))

    assert spec is not None
    assert spec.product_id == "P1"
    assert spec.product_name == "name-P1"
    assert spec.component_weights == (0.1, 0.05, 0.0, 0.01, 0.02)
    assert spec.unit_packaging_kg == pytest.approx(0.18)
    assert spec.product_weight_kg == 2.0
    assert spec.pack_name == "紙箱+膠帶"


def test_build_packaging_spec_reads_messy_headers() -> None:
    row = {
        " 品號 ": " P2 ",
        "回收箱（KG）\na1": "0.1",
        "紙箱 (KG)": "1,200",
        "回收緩衝材\n(KG)D": "",
        "商品總重量 (KG) B": "3.5 kg",
    }

    spec = build_packaging_spec(row)

    assert spec is not None
    assert spec.product_id == "P2"
    assert spec.recycle_box_kg == 0.1
    assert spec.paper_box_kg == 1200.0
    assert spec.buffer_kg == 0.0
    assert spec.break_bag_kg == 0.0
    assert spec.product_weight_kg == 3.5
    assert spec.product_name == ""
    assert spec.pack_name == NO_SPEC_LABEL


def test_build_packaging_spec_skips_blank_identifier() -> None:
    assert build_packaging_spec(_template_row("", 1.0)) is None
    assert build_packaging_spec(_template_row("   ", 1.0)) is None
    assert build_packaging_spec(_template_row(None, 1.0)) is None
    assert build_packaging_spec({"紙箱(KG)": 0.2}) is None


def test_build_template_index_keys_by_trimmed_identifier() -> None:
    index = build_template_index(
        [
            _template_row(" P1 ", 1.0),
            _template_row("", 9.0),
            _template_row(1001.0, 0.5),
        ]
    )

    assert set(index) == {"P1", "1001"}
    assert index["1001"].product_weight_kg == 0.5


def test_build_template_index_last_row_wins() -> None:
    index = build_template_index(
        [
            _template_row("P9", 1.0, **{"使用包材名稱/規格": "old"}),
            _template_row("P8", 4.0),
            _template_row("P9", 2.5, **{"使用包材名稱/規格": "new"}),
        ]
    )

    assert len(index) == 2
    assert index["P9"].product_weight_kg == 2.5
    assert index["P9"].pack_name == "new"


def test_build_template_index_empty_input() -> None:
    assert build_template_index([]) == {}
