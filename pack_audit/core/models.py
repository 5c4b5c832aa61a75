"""
models.py

Value types shared by the template index builder and the reconciliation engine.

All models are frozen dataclasses: a PackagingSpec is built once per run and
never mutated, and a ResultRecord is the final, auditable output of one sales
line.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

__all__ = [
    "PackagingSpec",
    "WeightClassification",
    "ResultRecord",
]


@dataclass(frozen=True)
class PackagingSpec:
    """Unit packaging specification of one product (all weights in kg)."""

    product_id: str
    product_name: str
    recycle_box_kg: float
    paper_box_kg: float
    break_bag_kg: float
    tape_kg: float
    buffer_kg: float
    product_weight_kg: float  # bare product, packaging excluded
    pack_name: str

    @property
    def component_weights(self) -> tuple[float, float, float, float, float]:
        """Unit component weights in report order."""
        return (
            self.recycle_box_kg,
            self.paper_box_kg,
            self.break_bag_kg,
            self.tape_kg,
            self.buffer_kg,
        )

    @property
    def unit_packaging_kg(self) -> float:
        return sum(self.component_weights)


@dataclass(frozen=True)
class WeightClassification:
    bracket: str
    limit_ratio: int


@dataclass(frozen=True)
class ResultRecord:
    """Computed compliance line for one sales row.

    Weight aggregates are quantity-scaled totals rounded to 4 decimals and
    actual_ratio is a percentage rounded to 2 decimals.
    """

    record_id: str  # "<order_id>-<product_id>-<row_index>"
    sales_date: str
    order_id: str
    product_id: str
    product_name: str
    quantity: float
    scale_weight_kg: float  # product total + packaging total
    packaging_weight_kg: float
    recycle_box_kg: float
    paper_box_kg: float
    break_bag_kg: float
    tape_kg: float
    buffer_kg: float
    product_weight_kg: float
    actual_ratio: float
    bracket: str
    limit_ratio: int
    is_compliant: bool
    material_name: str
    item_count: int

    def to_dict(self) -> dict[str, object]:
        return asdict(self)
