# Docstring for pack_audit/load_data module
"""
load_data.py

Input loader utilities for the sales ledger and packaging template exports.

This module provides thin, predictable I/O functions that read CSV or Excel
files into row sets of raw records (column label -> cell value), with minimal
transformation. Header resolution and numeric coercion are NOT done here; the
engines do that with the fuzzy column resolver.

Design goals
------------
- Separation of concerns: keep file I/O distinct from reconciliation logic.
- Format agnostic output: CSV and workbook inputs produce the same row shape.
- Loud structural failures: a file that cannot be read as a table raises
  ValueError, the only error the caller must surface to the user.

Inputs
------
- .csv  (UTF-8, optional BOM; every cell kept as text)
- .xls / .xlsx  (first sheet by default; header on the first row)

Core behavior
-------------
- Empty cells become "" (never NaN).
- Columns with a blank header (pandas "Unnamed: N") are dropped.
- Fully blank rows are dropped.
- CSV rows with more fields than the header keep their leading cells; the
  surplus is dropped.

Public API
----------
- load_rows(path, sheet_name=0) -> list[dict[str, Any]]
- load_input_pair(sales_path, template_path) -> tuple[list[dict], list[dict]]
"""


from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any
from zipfile import BadZipFile

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException
from xlrd import XLRDError
from xlrd.compdoc import CompDocError

from .config import SUPPORTED_EXTENSIONS


logger = logging.getLogger(__name__)


def _is_blank_header(label: Any) -> bool:
    if label is None:
        return True
    label_str = str(label).strip()
    return not label_str or label_str.startswith("Unnamed:")


def _read_frame(path: Path, sheet_name: str | int) -> pd.DataFrame:
    if path.suffix.lower() == ".csv":
        # python engine + index_col=False: rows with extra trailing fields are
        # kept and the surplus cells dropped (pandas emits a ParserWarning)
        return pd.read_csv(
            path,
            dtype=str,                 # keep SKUs like "0012" intact
            keep_default_na=False,     # "NA" is a valid cell, empty stays ""
            skip_blank_lines=True,
            encoding="utf-8-sig",
            engine="python",
            index_col=False,
        )

    # No explicit engine: pandas sniffs the content, so a legacy .xls saved
    # under an .xlsx name still goes to xlrd
    return pd.read_excel(path, sheet_name=sheet_name, dtype=object)


def load_rows(path: Path | str, sheet_name: str | int = 0) -> list[dict[str, Any]]:

    """

    Load one CSV / Excel export into a list of raw records.

    Args:
        path:
            Path to the .csv, .xls or .xlsx file.
        sheet_name:
            Sheet name or index for workbooks (defaults to the first sheet).
            Ignored for CSV.

    Returns:
        list of dicts, one per non-blank data row, keyed by the raw header text.

    Raises:
        FileNotFoundError: if the file does not exist.
        ValueError: if the extension is unsupported or the file cannot be
            parsed as a table.

    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found at: {path}")

    if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise ValueError(
            f"Unsupported file format: {path.name}. "
            f"Expected one of: {', '.join(SUPPORTED_EXTENSIONS)}"
        )

    try:
        df = _read_frame(path, sheet_name)
    except pd.errors.EmptyDataError:
        logger.warning("Input file %s has no rows", path.name)
        return []
    except (
        ValueError,
        KeyError,
        OSError,
        UnicodeDecodeError,
        BadZipFile,
        InvalidFileException,
        XLRDError,
        CompDocError,
    ) as exc:
        raise ValueError(f"Could not parse {path.name} as a table: {exc}") from exc

    keep = [col for col in df.columns if not _is_blank_header(col)]
    df = df[keep]

    # Drop rows where every cell is missing or whitespace-only
    blank = df.isna() | df.astype(str).apply(lambda col: col.str.strip().eq(""))
    df = df[~blank.all(axis=1)]

    df = df.astype(object).where(df.notna(), "")
    df.columns = [str(col) for col in df.columns]

    rows = df.to_dict(orient="records")
    logger.info("Loaded %d rows from %s", len(rows), path.name)
    return rows


def load_input_pair(
    sales_path: Path | str,
    template_path: Path | str,
) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:

    """

    Load the sales ledger and the packaging template in parallel.

    Returns only after BOTH files are fully materialized; any failure in either
    file is re-raised here.

    Returns:
        (sales_rows, template_rows)

    """

    with ThreadPoolExecutor(max_workers=2) as pool:
        sales_future = pool.submit(load_rows, sales_path)
        template_future = pool.submit(load_rows, template_path)
        sales_rows = sales_future.result()
        template_rows = template_future.result()
    return sales_rows, template_rows
