"""
run_report.py

Command-line entrypoint: reconcile a sales export against a packaging template
and write the packaging reduction report.

    python -m pack_audit.run_report --sales sales.xlsx --template template.xlsx

Exit codes: 0 on success, 1 when an input file cannot be read as a table.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import PREVIEW_ROW_LIMIT, REPORTS_OUTPUTS_DIR
from .engines.packaging_ratio import run_packaging_ratio_analysis
from .load_data import load_input_pair
from .logging_config import setup_logging
from .outputs.export_utils import preview_results, write_report_csv, write_report_excel
from .visualization.compliance_visualization import (
    build_compliance_kpi_summary,
    build_uncovered_summary,
)


logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reconcile sales lines with packaging specs and write the compliance report."
    )
    parser.add_argument("--sales", type=Path, required=True, help="Sales export (.csv/.xls/.xlsx)")
    parser.add_argument("--template", type=Path, required=True, help="Packaging template (.csv/.xls/.xlsx)")
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=REPORTS_OUTPUTS_DIR,
        help="Destination directory for the report files",
    )
    parser.add_argument(
        "--format",
        choices=("csv", "xlsx", "both"),
        default="both",
        help="Report file format(s) to write",
    )
    parser.add_argument(
        "--preview",
        type=int,
        default=0,
        help=f"Print the first N report rows (at most {PREVIEW_ROW_LIMIT})",
    )
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON lines")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format_as_json=args.log_json,
    )

    try:
        sales_rows, template_rows = load_input_pair(args.sales, args.template)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Could not load input files: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    results = run_packaging_ratio_analysis(sales_rows, template_rows)

    written = []
    if args.format in ("csv", "both"):
        written.append(write_report_csv(results, out_dir=args.out_dir))
    if args.format in ("xlsx", "both"):
        written.append(write_report_excel(results, out_dir=args.out_dir))
    for path in written:
        print(f"Wrote report to: {path}")

    summary = build_compliance_kpi_summary(results)
    if not summary.empty:
        print(summary.to_string(index=False))

    uncovered = build_uncovered_summary(results)
    if not uncovered.empty:
        print(f"{len(uncovered)} product(s) without packaging spec:")
        print(uncovered.to_string(index=False))

    if args.preview > 0:
        print(preview_results(results, limit=min(args.preview, PREVIEW_ROW_LIMIT)).to_string(index=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
