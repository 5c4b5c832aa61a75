import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from pack_audit.config import NO_SPEC_LABEL
from pack_audit.visualization.compliance_visualization import (
    build_compliance_kpi_summary,
    build_uncovered_summary,
    plot_compliance_by_bracket,
)


def _results() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "product_id": ["P1", "P2", "P3", "X1", "X2", "X1"],
            "bracket": ["≤1KG", "≤1KG", ">3KG", "≤1KG", "≤1KG", "≤1KG"],
            "is_compliant": [True, False, True, True, True, True],
            "material_name": ["紙箱", "紙箱", "破壞袋", NO_SPEC_LABEL, NO_SPEC_LABEL, NO_SPEC_LABEL],
        }
    )


def test_build_compliance_kpi_summary_counts() -> None:
    summary = build_compliance_kpi_summary(_results()).set_index("bracket")

    assert summary.index.tolist() == ["≤1KG", "1KG–3KG", ">3KG"]
    assert summary.loc["≤1KG", "line_count"] == 5
    assert summary.loc["≤1KG", "compliant_count"] == 4
    assert summary.loc["≤1KG", "non_compliant_count"] == 1
    assert summary.loc["≤1KG", "compliance_rate"] == pytest.approx(4 / 5)
    assert summary.loc["1KG–3KG", "line_count"] == 0
    assert summary.loc["1KG–3KG", "compliance_rate"] == 0.0
    assert summary.loc[">3KG", "compliance_rate"] == pytest.approx(1.0)


def test_build_compliance_kpi_summary_empty() -> None:
    summary = build_compliance_kpi_summary(pd.DataFrame(columns=["bracket", "is_compliant"]))

    assert summary.empty is True
    assert list(summary.columns) == [
        "bracket",
        "line_count",
        "compliant_count",
        "non_compliant_count",
        "compliance_rate",
    ]


def test_build_compliance_kpi_summary_missing_columns() -> None:
    with pytest.raises(ValueError, match="Missing required columns"):
        build_compliance_kpi_summary(pd.DataFrame({"bracket": ["≤1KG"]}))


def test_build_uncovered_summary_counts_lines_per_product() -> None:
    uncovered = build_uncovered_summary(_results())

    assert uncovered["product_id"].tolist() == ["X1", "X2"]
    assert uncovered["line_count"].tolist() == [2, 1]


def test_build_uncovered_summary_none_uncovered() -> None:
    df = _results()
    df = df[df["material_name"] != NO_SPEC_LABEL]

    uncovered = build_uncovered_summary(df)

    assert uncovered.empty is True
    assert list(uncovered.columns) == ["product_id", "line_count"]


def test_plot_compliance_by_bracket_returns_axes() -> None:
    summary = build_compliance_kpi_summary(_results())

    fig, ax = plot_compliance_by_bracket(summary)

    assert ax.get_title() == "Packaging Ratio Compliance by Weight Bracket"
    assert len(ax.patches) == 6
    plt.close(fig)


def test_plot_compliance_by_bracket_empty() -> None:
    empty = build_compliance_kpi_summary(pd.DataFrame(columns=["bracket", "is_compliant"]))

    fig, ax = plot_compliance_by_bracket(empty)

    assert ax.axison is False
    plt.close(fig)
