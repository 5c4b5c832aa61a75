"""
generate_sample_data.py

Seeded generator for synthetic sales and packaging template sample inputs.

This script writes two Excel files into data/sample/. Their headers are
deliberately messy (full-width parentheses, stray spaces, line breaks, unit
suffixes) so the fuzzy column resolver is exercised the way real exports
exercise it. The outputs are deterministic given a seed and include:
- a product whose template row appears twice (the later row wins),
- sales lines for a product missing from the template,
- light, medium and heavy products so every weight bracket is populated.
"""

from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from pathlib import Path

import pandas as pd
from faker import Faker

from ..config import SAMPLE_DIR


DEFAULT_SEED = 20250214
DEFAULT_PRODUCT_COUNT = 12
DEFAULT_SALES_LINES = 60

# Raw headers as they show up in real exports (noise on purpose)
TEMPLATE_HEADERS = {
    "product_id": "品號",
    "product_name": "品名",
    "recycle_box_kg": "回收箱（KG）a1",
    "paper_box_kg": "紙箱 (KG)",
    "break_bag_kg": "破壞袋(KG)B",
    "tape_kg": "膠帶(KG)C",
    "buffer_kg": "回收緩衝材\n(KG)D",
    "product_weight_kg": "商品總重量(KG)B",
    "pack_name": "使用包材名稱/規格",
}

SALES_HEADERS = {
    "sales_date": "銷貨日期",
    "order_id": " 銷貨單號 ",
    "product_id": "品號",
    "product_name": "品名",
    "quantity": "銷貨數量　",
}

PACK_NAMES = [
    "回收紙箱+氣泡袋",
    "紙箱+膠帶",
    "破壞袋",
    "回收箱+緩衝材",
]

UNMATCHED_PRODUCT_ID = "SKU-NOSPEC"


def _weight(rng: random.Random, low: float, high: float, places: int = 3) -> float:
    return round(rng.uniform(low, high), places)


def _build_template(rng: random.Random, faker: Faker, product_count: int) -> pd.DataFrame:
    rows: list[dict[str, object]] = []
    for number in range(1, product_count + 1):
        # Spread bare product weights across the three brackets
        tier = number % 3
        if tier == 0:
            product_weight = _weight(rng, 0.1, 0.3)
        elif tier == 1:
            product_weight = _weight(rng, 0.4, 1.2)
        else:
            product_weight = _weight(rng, 1.5, 4.0)

        rows.append(
            {
                "product_id": f"SKU-{number:04d}",
                "product_name": faker.catch_phrase(),
                "recycle_box_kg": _weight(rng, 0.0, 0.2) if rng.random() < 0.5 else "",
                "paper_box_kg": f"{_weight(rng, 0.05, 0.3):,}",
                "break_bag_kg": _weight(rng, 0.0, 0.02),
                "tape_kg": _weight(rng, 0.0, 0.01, places=4),
                "buffer_kg": _weight(rng, 0.0, 0.05) if rng.random() < 0.7 else "",
                "product_weight_kg": product_weight,
                "pack_name": rng.choice(PACK_NAMES),
            }
        )

    # Duplicate identifier: a corrected row appended at the end wins
    duplicate = dict(rows[0])
    duplicate["product_weight_kg"] = round(float(rows[0]["product_weight_kg"]) + 0.5, 3)
    duplicate["pack_name"] = "更新版包材"
    rows.append(duplicate)

    # Row without identifier: skipped by the index builder
    rows.append({key: "" for key in TEMPLATE_HEADERS})

    return pd.DataFrame(rows).rename(columns=TEMPLATE_HEADERS)


def _build_sales(
    rng: random.Random,
    faker: Faker,
    template_df: pd.DataFrame,
    sales_lines: int,
) -> pd.DataFrame:
    id_col = TEMPLATE_HEADERS["product_id"]
    name_col = TEMPLATE_HEADERS["product_name"]
    catalog = (
        template_df[template_df[id_col] != ""]
        .drop_duplicates(subset=[id_col], keep="last")[[id_col, name_col]]
        .values.tolist()
    )
    catalog.append([UNMATCHED_PRODUCT_ID, faker.catch_phrase()])

    start = date(2025, 1, 1)
    rows: list[dict[str, object]] = []
    for line in range(sales_lines):
        product_id, product_name = rng.choice(catalog)
        quantity = rng.choice([1, 1, 1, 2, 3, 5])
        rows.append(
            {
                "sales_date": (start + timedelta(days=rng.randint(0, 89))).isoformat(),
                "order_id": f"SO{20250000 + line // 2:08d}",
                "product_id": product_id,
                "product_name": product_name,
                # Large orders come through with thousands separators as text
                "quantity": f"{quantity:,}" if rng.random() < 0.2 else quantity,
            }
        )

    return pd.DataFrame(rows).rename(columns=SALES_HEADERS)


def generate_sample_data(
    output_dir: Path = SAMPLE_DIR,
    seed: int = DEFAULT_SEED,
    product_count: int = DEFAULT_PRODUCT_COUNT,
    sales_lines: int = DEFAULT_SALES_LINES,
) -> dict[str, Path]:
    rng = random.Random(seed)
    faker = Faker()
    faker.seed_instance(seed)
    output_dir.mkdir(parents=True, exist_ok=True)

    template_df = _build_template(rng, faker, product_count)
    sales_df = _build_sales(rng, faker, template_df, sales_lines)

    outputs = {
        "sales": output_dir / "sales_sample.xlsx",
        "template": output_dir / "template_sample.xlsx",
    }

    sales_df.to_excel(outputs["sales"], index=False)
    template_df.to_excel(outputs["template"], index=False)

    return outputs


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate seeded synthetic sales/template sample data."
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Deterministic RNG seed")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=SAMPLE_DIR,
        help="Destination directory for sample Excel files",
    )
    parser.add_argument("--products", type=int, default=DEFAULT_PRODUCT_COUNT, help="Number of template products")
    parser.add_argument("--lines", type=int, default=DEFAULT_SALES_LINES, help="Number of sales lines")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    outputs = generate_sample_data(
        output_dir=args.output_dir,
        seed=args.seed,
        product_count=args.products,
        sales_lines=args.lines,
    )
    for label, path in outputs.items():
        print(f"Wrote {label} sample to: {path}")


if __name__ == "__main__":
    main()
