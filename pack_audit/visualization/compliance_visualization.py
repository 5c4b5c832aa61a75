"""
compliance_visualization.py

Helpers for summarizing and visualizing packaging ratio results per weight
bracket, plus the list of sales lines that had no packaging spec.
"""

from __future__ import annotations

from typing import Tuple

import pandas as pd
import matplotlib.pyplot as plt

from ..config import NO_SPEC_LABEL, WEIGHT_BRACKETS


BRACKET_ORDER = [bracket.label for bracket in WEIGHT_BRACKETS]


def _validate_required_columns(df: pd.DataFrame, required_cols: list[str]) -> None:
    missing = [col for col in required_cols if col not in df.columns]
    if missing:
        missing_list = ", ".join(missing)
        raise ValueError(f"Missing required columns: {missing_list}")


def build_compliance_kpi_summary(df: pd.DataFrame) -> pd.DataFrame:
    """
    Count compliant and non-compliant lines per weight bracket.

    Required columns:
      - bracket
      - is_compliant

    Every bracket appears in the output (in regulatory order), even with zero lines.
    """

    _validate_required_columns(df, ["bracket", "is_compliant"])

    columns = [
        "bracket",
        "line_count",
        "compliant_count",
        "non_compliant_count",
        "compliance_rate",
    ]
    if df.empty:
        return pd.DataFrame(columns=columns)

    rows = []
    for bracket in BRACKET_ORDER:
        in_bracket = df[df["bracket"] == bracket]
        line_count = int(in_bracket.shape[0])
        compliant_count = int(in_bracket["is_compliant"].astype(bool).sum())
        rows.append(
            {
                "bracket": bracket,
                "line_count": line_count,
                "compliant_count": compliant_count,
                "non_compliant_count": line_count - compliant_count,
                "compliance_rate": compliant_count / line_count if line_count else 0.0,
            }
        )

    return pd.DataFrame(rows, columns=columns)


def build_uncovered_summary(df: pd.DataFrame) -> pd.DataFrame:
    """
    List product ids whose sales lines had no packaging spec, with line counts.

    Required columns:
      - product_id
      - material_name
    """

    _validate_required_columns(df, ["product_id", "material_name"])

    columns = ["product_id", "line_count"]
    uncovered = df[df["material_name"] == NO_SPEC_LABEL]
    if uncovered.empty:
        return pd.DataFrame(columns=columns)

    summary = (
        uncovered.groupby("product_id", sort=False)
        .size()
        .reset_index(name="line_count")
        .sort_values(["line_count", "product_id"], ascending=[False, True])
        .reset_index(drop=True)
    )
    return summary[columns]


def plot_compliance_by_bracket(
    summary_df: pd.DataFrame,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Plot compliant vs non-compliant line counts per bracket as stacked bars.
    """

    _validate_required_columns(
        summary_df, ["bracket", "compliant_count", "non_compliant_count"]
    )

    fig, ax = plt.subplots(figsize=(8, 4))
    if summary_df.empty:
        ax.text(0.5, 0.5, "No data available", ha="center", va="center")
        ax.set_axis_off()
        return fig, ax

    data = summary_df.set_index("bracket").reindex(BRACKET_ORDER).fillna(0)
    compliant = data["compliant_count"].astype(int)
    non_compliant = data["non_compliant_count"].astype(int)

    ax.barh(BRACKET_ORDER, compliant, color="#54A24B", label="Compliant")
    ax.barh(BRACKET_ORDER, non_compliant, left=compliant, color="#E45756", label="Non-compliant")
    ax.set_xlabel("Sales Lines")
    ax.set_title("Packaging Ratio Compliance by Weight Bracket")
    ax.legend()

    totals = compliant + non_compliant
    max_total = float(totals.max() if len(totals) else 0)
    ax.set_xlim(0, max(5.0, max_total * 1.15))

    for idx, (ok, total) in enumerate(zip(compliant, totals)):
        ax.text(total + 0.1, idx, f"{ok}/{total}", va="center")

    return fig, ax
