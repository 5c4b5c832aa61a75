#Docstring for pack_audit/config module
"""
config.py

Central configuration for the packaging reduction ratio audit.

This module defines the logical field enumerations, the header variants used to
locate each field in messy spreadsheet exports, the regulatory weight brackets,
rounding rules and the export layout used across the project.

It is intentionally the single source of truth for:
- Header resolution (logical field -> ordered list of raw header variants)
- Weight-bracket limits (regulatory constants)
- Result schema (canonical snake_case columns) and export labels
- Report paths and default filenames

Design goals
------------
- Consistency: all modules rely on the same field names and thresholds.
- Maintainability: a regulatory change to a bracket is a one-line edit here.
- Clarity: header variants live next to the field they resolve, most specific first.

Contents
--------
1) Paths and project defaults
2) Logical fields and header variants
   - TemplateField / TEMPLATE_FIELD_VARIANTS: packaging template headers
   - SalesField / SALES_FIELD_VARIANTS: sales ledger headers
3) Business rules
   - WEIGHT_BRACKETS (≤1KG / 1KG–3KG / >3KG limits)
   - ROUNDING_CONFIG
   - NO_SPEC_LABEL sentinel for sales lines without a template row
4) Result and export layout
   - RESULT_COLUMNS: canonical result columns
   - EXPORT_COLUMNS: display labels in report order

Usage
-----
All other modules import configuration from here. Example:

    from pack_audit.config import WEIGHT_BRACKETS, TEMPLATE_FIELD_VARIANTS
"""


from dataclasses import dataclass #create simple classes for configuration
from enum import Enum
from pathlib import Path #object-oriented filesystem paths instead of strings



# --- Base paths ----------------------------------------------------------------

# pack_audit/ -> project root
BASE_DIR = Path(__file__).resolve().parents[1]

DATA_DIR = BASE_DIR / "data"
SAMPLE_DIR = DATA_DIR / "sample"

REPORTS_DIR = BASE_DIR / "reports"
REPORTS_OUTPUTS_DIR = REPORTS_DIR / "outputs"
REPORTS_FIGURES_DIR = REPORTS_DIR / "figures"

# Input formats the loader understands
SUPPORTED_EXTENSIONS = (".csv", ".xls", ".xlsx")

# Report defaults
EXPORT_FILENAME_PREFIX = "網購包裝減量報表"
EXPORT_SHEET_NAME = "減量計算報表"
PREVIEW_ROW_LIMIT = 100



# --- Logical fields ------------------------------------------------------------

class TemplateField(str, Enum):
    """Logical fields of one packaging template row."""

    PRODUCT_ID = "product_id"
    PRODUCT_NAME = "product_name"
    RECYCLE_BOX = "recycle_box_kg"
    PAPER_BOX = "paper_box_kg"
    BREAK_BAG = "break_bag_kg"
    TAPE = "tape_kg"
    BUFFER = "buffer_kg"
    PRODUCT_WEIGHT = "product_weight_kg"
    PACK_NAME = "pack_name"


class SalesField(str, Enum):
    """Logical fields of one sales ledger row."""

    PRODUCT_ID = "product_id"
    QUANTITY = "quantity"
    SALES_DATE = "sales_date"
    ORDER_ID = "order_id"
    PRODUCT_NAME = "product_name"



# --- Header variants (logical field -> raw header candidates) -------------------

# IMPORTANT:
# Variants are tried IN ORDER and the first one found in a row wins, even if a
# later variant would match a "better" header. Keep the most specific label first.
#
# Matching is substring containment after header normalization (whitespace and
# full-width parentheses removed), so "回收箱" also finds "回收箱 (KG) a1".
#
# Simplified-Chinese spellings are appended after the original labels so they
# never pre-empt them.

TEMPLATE_FIELD_VARIANTS = {
    # Logical field               # Raw header variants (most specific first)
    TemplateField.PRODUCT_ID:     ("品號", "品号", "productid"),
    TemplateField.PRODUCT_NAME:   ("品名", "productname"),
    TemplateField.RECYCLE_BOX:    ("回收箱(KG)a1", "回收箱(KG)", "回收箱"),
    TemplateField.PAPER_BOX:      ("紙箱(KG)", "紙箱", "纸箱"),
    TemplateField.BREAK_BAG:      ("破壞袋(KG)", "破壞袋", "破坏袋"),
    TemplateField.TAPE:           ("膠帶(KG)", "膠帶", "胶带"),
    TemplateField.BUFFER:         ("回收緩衝材(KG)", "緩衝材", "泡泡紙", "包材D", "缓冲材"),
    TemplateField.PRODUCT_WEIGHT: ("商品總重量(KG)B", "商品總重量(KG)", "商品總重量", "商品总重量"),
    TemplateField.PACK_NAME:      ("使用包材名稱", "包材規格", "使用包材名稱/規格", "使用包材名称"),
}

SALES_FIELD_VARIANTS = {
    SalesField.PRODUCT_ID:   ("品號", "品号"),
    SalesField.QUANTITY:     ("銷貨數量", "數量", "qty", "售出數量", "销货数量", "数量"),
    SalesField.SALES_DATE:   ("銷貨日期", "日期", "销货日期"),
    SalesField.ORDER_ID:     ("銷貨單號", "單號", "销货单号", "单号"),
    SalesField.PRODUCT_NAME: ("品名", "產品名稱", "产品名称"),
}

# Packaging component fields, in report order (recycle box, paper box,
# breakage bag, tape, buffer material).
PACKAGING_COMPONENT_FIELDS = (
    TemplateField.RECYCLE_BOX,
    TemplateField.PAPER_BOX,
    TemplateField.BREAK_BAG,
    TemplateField.TAPE,
    TemplateField.BUFFER,
)



# --- Business rules (weight brackets) ---------------------------------------------

@dataclass(frozen=True) #Decorator to create data class
class WeightBracket:

    """

    One regulatory weight bracket.

    label:
        Display label of the bracket.
    max_weight_kg:
        Inclusive upper bound of the total product weight (kg). None means no
        upper bound (last bracket).
    limit_ratio:
        Maximum allowed packaging/product weight ratio, in integer percent.

    """

    label: str
    max_weight_kg: float | None
    limit_ratio: int


BRACKET_UP_TO_1KG = WeightBracket(label="≤1KG", max_weight_kg=1.0, limit_ratio=40)
BRACKET_1KG_TO_3KG = WeightBracket(label="1KG–3KG", max_weight_kg=3.0, limit_ratio=30)
BRACKET_OVER_3KG = WeightBracket(label=">3KG", max_weight_kg=None, limit_ratio=15)

# Checked in order; the first bracket whose max_weight_kg is >= the weight wins.
WEIGHT_BRACKETS = (
    BRACKET_UP_TO_1KG,
    BRACKET_1KG_TO_3KG,
    BRACKET_OVER_3KG,
)


@dataclass(frozen=True)
class RoundingConfig:

    """

    Decimal places used when reporting computed values (half-up rounding).

    """

    weight_places: int = 4  # all kg aggregates
    ratio_places: int = 2   # packaging / product ratio, percent


ROUNDING_CONFIG = RoundingConfig()

# Materials description used when a sales line has no template row
NO_SPEC_LABEL = "未建立樣板"

# Each result row conceptually represents one parcel, independent of quantity
ITEM_COUNT_PER_ROW = 1



# --- Result and export layout ---------------------------------------------------

# Canonical result columns (ResultRecord field order)
RESULT_COLUMNS = [
    "record_id",
    "sales_date",
    "order_id",
    "product_id",
    "product_name",
    "quantity",
    "scale_weight_kg",
    "packaging_weight_kg",
    "recycle_box_kg",
    "paper_box_kg",
    "break_bag_kg",
    "tape_kg",
    "buffer_kg",
    "product_weight_kg",
    "actual_ratio",
    "bracket",
    "limit_ratio",
    "is_compliant",
    "material_name",
    "item_count",
]

# Canonical column -> display label, in report order.
# The accountants' report template expects exactly these labels.
EXPORT_COLUMN_MAP = {
    # Canonical name          # Display label
    "sales_date":             "銷貨日期",
    "order_id":               "銷貨單號",
    "product_id":             "品號",
    "product_name":           "品名",
    "quantity":               "銷貨數量",
    "scale_weight_kg":        "秤總重（總包裏重 A）",
    "packaging_weight_kg":    "網購包材重量合計(KG)",
    "recycle_box_kg":         "回收箱(KG)a1",
    "paper_box_kg":           "紙箱(KG)",
    "break_bag_kg":           "破壞袋(KG)",
    "tape_kg":                "膠帶(KG)",
    "buffer_kg":              "回收緩衝材(KG)",
    "product_weight_kg":      "商品總重量(KG)B",
    "actual_ratio":           "實際比值(%)",
    "bracket":                "商品總重量比值分類",
    "limit_ratio":            "規定比值(%)",
    "is_compliant":           "是否符合",
    "material_name":          "使用包材名稱/規格",
    "item_count":             "件數",
}

EXPORT_COLUMNS = list(EXPORT_COLUMN_MAP.values())

COMPLIANT_LABEL = "是"
NON_COMPLIANT_LABEL = "否"
