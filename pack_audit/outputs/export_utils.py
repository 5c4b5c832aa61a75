# Docstring for pack_audit/export_utils module
"""
export_utils.py

Utilities for turning reconciliation results into the accountants' report and
writing it to CSV or Excel.

Design goals
------------
- Fixed layout: the report always uses EXPORT_COLUMNS, in order, as a one-to-one
  projection of the result columns.
- Safe output: ensure parent directories exist before writing files.
- Consistent engine: always use the openpyxl engine for .xlsx output.
- Spreadsheet friendly: CSV is written with a UTF-8 BOM so Excel shows the
  Chinese headers correctly.

Public API
----------
- build_export_dataframe(results_df) -> pd.DataFrame
- preview_results(results_df, limit=PREVIEW_ROW_LIMIT) -> pd.DataFrame
- write_report_csv(results_df, output_path=None, *, out_dir=REPORTS_OUTPUTS_DIR) -> Path
- write_report_excel(results_df, output_path=None, *, out_dir=REPORTS_OUTPUTS_DIR) -> Path
- write_df_excel(df, output_path, *, sheet_name="data", index=False, column_widths=None) -> Path
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl.utils import get_column_letter

from ..config import (
    COMPLIANT_LABEL,
    EXPORT_COLUMN_MAP,
    EXPORT_COLUMNS,
    EXPORT_FILENAME_PREFIX,
    EXPORT_SHEET_NAME,
    NON_COMPLIANT_LABEL,
    PREVIEW_ROW_LIMIT,
    REPORTS_OUTPUTS_DIR,
)


EXCEL_SHEETNAME_LIMIT = 31
MIN_COLUMN_WIDTH = 12


def _validate_required_columns(df: pd.DataFrame, required_cols: list[str]) -> None:
    missing = [col for col in required_cols if col not in df.columns]
    if missing:
        missing_list = ", ".join(missing)
        raise ValueError(f"Missing required columns: {missing_list}")


def _ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _dated_filename(prefix: str, suffix: str) -> str:
    stamp = datetime.now().strftime("%Y-%m-%d")
    return f"{prefix}_{stamp}{suffix}"


def _resolve_output_path(output_path: Path | str | None, out_dir: Path | str, suffix: str) -> Path:
    if output_path is None:
        output_path = Path(out_dir) / _dated_filename(EXPORT_FILENAME_PREFIX, suffix)
    path = Path(output_path)
    _ensure_parent_dir(path)
    return path


def _truncate_sheet_name(name: str) -> str:
    return name[:EXCEL_SHEETNAME_LIMIT] if len(name) > EXCEL_SHEETNAME_LIMIT else name


def _display_quantity(quantity: Any) -> int | float:
    number = float(quantity)
    return int(number) if number.is_integer() else number


def build_export_dataframe(results_df: pd.DataFrame) -> pd.DataFrame:
    """
    Project engine results onto the report layout.

    Canonical columns are renamed to their display labels (EXPORT_COLUMNS order),
    whole quantities drop their ".0", the limit ratio is shown as "40%" and
    compliance as 是 / 否.
    """

    _validate_required_columns(results_df, list(EXPORT_COLUMN_MAP.keys()))

    df = results_df[list(EXPORT_COLUMN_MAP.keys())].copy()
    # object dtype keeps 3 and 2.5 side by side without upcasting to 3.0
    df["quantity"] = pd.Series(
        [_display_quantity(q) for q in df["quantity"]], index=df.index, dtype=object
    )
    df["limit_ratio"] = df["limit_ratio"].map(lambda limit: f"{int(limit)}%")
    df["is_compliant"] = df["is_compliant"].map(
        lambda ok: COMPLIANT_LABEL if bool(ok) else NON_COMPLIANT_LABEL
    )
    df = df.rename(columns=EXPORT_COLUMN_MAP)
    return df[EXPORT_COLUMNS].reset_index(drop=True)


def preview_results(results_df: pd.DataFrame, limit: int = PREVIEW_ROW_LIMIT) -> pd.DataFrame:
    """Return the first `limit` report rows (display layout) for on-screen review."""
    if limit < 0:
        raise ValueError(f"Preview limit must be >= 0, got {limit}")
    return build_export_dataframe(results_df.head(limit))


def write_report_csv(
    results_df: pd.DataFrame,
    output_path: Path | str | None = None,
    *,
    out_dir: Path | str = REPORTS_OUTPUTS_DIR,
) -> Path:
    """
    Write the full report as CSV (UTF-8 with BOM) and return the output path.

    If output_path is None, a dated file named after EXPORT_FILENAME_PREFIX is
    created under out_dir.
    """
    path = _resolve_output_path(output_path, out_dir, ".csv")
    build_export_dataframe(results_df).to_csv(path, index=False, encoding="utf-8-sig")
    return path


def write_report_excel(
    results_df: pd.DataFrame,
    output_path: Path | str | None = None,
    *,
    out_dir: Path | str = REPORTS_OUTPUTS_DIR,
) -> Path:
    """
    Write the full report as a single-sheet workbook and return the output path.

    Column widths follow the header length (twice the character count, at least
    MIN_COLUMN_WIDTH) so the Chinese labels stay readable.
    """
    path = _resolve_output_path(output_path, out_dir, ".xlsx")
    widths = [max(len(header) * 2, MIN_COLUMN_WIDTH) for header in EXPORT_COLUMNS]
    return write_df_excel(
        build_export_dataframe(results_df),
        path,
        sheet_name=EXPORT_SHEET_NAME,
        column_widths=widths,
    )


def write_df_excel(
    df: pd.DataFrame,
    output_path: Path | str,
    *,
    sheet_name: str = "data",
    index: bool = False,
    column_widths: list[int] | None = None,
) -> Path:
    """
    Write a DataFrame to a single-sheet Excel file and return the output path.
    """
    path = Path(output_path)
    _ensure_parent_dir(path)
    sheet_name = _truncate_sheet_name(sheet_name)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=index)
        if column_widths:
            worksheet = writer.sheets[sheet_name]
            offset = 1 if index else 0
            for position, width in enumerate(column_widths, start=1 + offset):
                worksheet.column_dimensions[get_column_letter(position)].width = width
    return path
