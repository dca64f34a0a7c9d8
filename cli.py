"""
Contradiction Filter CLI.

Commands:
    qca-contra filter DATASET TRUTH_TABLE   Contradictory cases of a truth table
    qca-contra dcc DATASET TRUTH_TABLE      Truth table with deviant cases per row
    qca-contra demo                         Run the filter on the illustrative data

Exit codes: 0 on success (an empty result included), 1 when the input
cannot be read or breaks the filter's checks, 2 on usage errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

import pandas as pd

from core.config import CASES_COLUMN, DCC_COLUMN, DEFAULT_OUTCOME, EXPORT_DIR, LOG_LEVEL
from core.contradictions import deviant_cases, filter_contradictions, summarize_contradictions
from core.errors import ContradictionError
from core.exporters import FORMATS, export_contradictions
from core.loaders import load_dataset, load_truth_table
from core.sample_data import OUTCOME, illustrative_dataset, illustrative_truth_table
from core.truth_table import RowClass, row_class_from_value

logger = logging.getLogger("qca_contra")


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def _join(labels) -> str:
    return ",".join(sorted(labels)) if isinstance(labels, frozenset) else ",".join(labels)


def format_contradictions(contra: pd.DataFrame, row_class: RowClass) -> str:
    """Render a contradiction table for the terminal."""
    lines = [f"Contradictory cases ({row_class.value} rows)", "=" * 50]
    if contra.empty:
        lines.append("No contradictions found.")
        return "\n".join(lines)

    lines.append(contra.to_string())
    lines.append("")
    summary = summarize_contradictions(contra)
    counts = ", ".join(f"{k}: {v}" for k, v in summary.items() if k != "total")
    lines.append(f"Total: {summary['total']} ({counts})")
    return "\n".join(lines)


def format_truth_table(tt: pd.DataFrame) -> str:
    """Render a truth table with set-valued columns joined by commas."""
    shown = tt.copy()
    for col in (CASES_COLUMN, DCC_COLUMN):
        if col in shown.columns:
            shown[col] = [_join(v) for v in shown[col]]
    return shown.to_string()


# =============================================================================
# CLI COMMANDS
# =============================================================================

def _load_inputs(args: argparse.Namespace):
    dataset = load_dataset(args.dataset, case_column=args.case_column, sep=args.sep)
    truth_table = load_truth_table(args.truth_table, sep=args.tt_sep)
    return dataset, truth_table


def _report(contra: pd.DataFrame, row_class: RowClass, args: argparse.Namespace, outcome: str) -> None:
    print(format_contradictions(contra, row_class))
    if getattr(args, "export", None):
        path = export_contradictions(
            contra, fmt=args.format, output_path=args.export, outcome=outcome,
            name=f"contradictions_{row_class.value}",
        )
        print()
        print(f"Exported to: {path}")


def cmd_filter(args: argparse.Namespace) -> int:
    """Filter contradictory cases from a dataset and a truth table file."""
    try:
        row_class = row_class_from_value(args.rows)
        dataset, truth_table = _load_inputs(args)
        contra = filter_contradictions(dataset, truth_table, row_class, outcome=args.outcome)
        _report(contra, row_class, args, args.outcome)
        return 0
    except (ContradictionError, ValueError, OSError) as e:
        logger.debug("filter failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


def cmd_dcc(args: argparse.Namespace) -> int:
    """Show every truth table row with its deviant cases."""
    try:
        dataset, truth_table = _load_inputs(args)
        tt = deviant_cases(dataset, truth_table, outcome=args.outcome)
    except (ContradictionError, ValueError, OSError) as e:
        logger.debug("dcc failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print("Truth table with deviant cases for consistency in kind")
    print("=" * 50)
    print(format_truth_table(tt))
    return 0


def cmd_demo(args: argparse.Namespace) -> int:
    """Run the filter on the illustrative dataset."""
    dataset = illustrative_dataset()
    truth_table = illustrative_truth_table()

    print("Illustrative truth table")
    print("=" * 50)
    print(format_truth_table(truth_table))
    print()

    row_classes = (
        [RowClass.CONSISTENT, RowClass.INCONSISTENT]
        if args.rows is None
        else [row_class_from_value(args.rows)]
    )
    try:
        for row_class in row_classes:
            contra = filter_contradictions(dataset, truth_table, row_class, outcome=OUTCOME)
            _report(contra, row_class, args, OUTCOME)
            print()
    except (ContradictionError, ValueError, OSError) as e:
        logger.debug("demo failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("dataset", help="Dataset file (CSV, TXT or Excel)")
    parser.add_argument("truth_table", help="Truth table file (CSV or JSON) with OUT and cases columns")
    parser.add_argument("--outcome", default=DEFAULT_OUTCOME, help=f"Outcome column (default: {DEFAULT_OUTCOME})")
    parser.add_argument("--case-column", default=None, help="Column holding case labels (default: first text column)")
    parser.add_argument("--sep", default=None, help="Dataset delimiter (default: auto-detect)")
    parser.add_argument("--tt-sep", default=None, help="Truth table delimiter (default: auto-detect)")


def _add_export_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--export", nargs="?", const=EXPORT_DIR, default=None, metavar="DIR",
        help=f"Write the result to DIR (default when flag is given: {EXPORT_DIR})",
    )
    parser.add_argument("--format", choices=FORMATS, default="csv", help="Export format")


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="qca-contra",
        description="Filter contradictory cases of QCA truth tables from the underlying data",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    row_choices = ["consistent", "inconsistent", "both", "1", "0", "all"]

    filter_parser = subparsers.add_parser("filter", help="Show contradictory cases")
    _add_input_arguments(filter_parser)
    filter_parser.add_argument(
        "--rows", choices=row_choices, default="consistent",
        help="Truth table rows to inspect (default: consistent)",
    )
    _add_export_arguments(filter_parser)
    filter_parser.set_defaults(func=cmd_filter)

    dcc_parser = subparsers.add_parser("dcc", help="Show deviant cases per truth table row")
    _add_input_arguments(dcc_parser)
    dcc_parser.set_defaults(func=cmd_dcc)

    demo_parser = subparsers.add_parser("demo", help="Run on the illustrative data")
    demo_parser.add_argument(
        "--rows", choices=row_choices, default=None,
        help="Truth table rows to inspect (default: consistent and inconsistent)",
    )
    _add_export_arguments(demo_parser)
    demo_parser.set_defaults(func=cmd_demo)

    return parser


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
