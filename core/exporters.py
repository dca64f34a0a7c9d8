# core/exporters.py
"""
Export Utilities for Contradiction Tables
-----------------------------------------
Writes the cases returned by the contradiction filter to disk.

Exports supported:
• CSV  (case label kept as first column)
• JSON (records: case, conditions, outcome, type)
• Excel Workbook (.xlsx), one sheet per table
"""

import json
import logging
import os
from datetime import datetime

import pandas as pd

from .config import DEFAULT_OUTCOME, EXPORT_DIR
from .contradictions import contradiction_records

logger = logging.getLogger(__name__)

FORMATS = ("csv", "json", "xlsx")


# ======================================================
# INTERNAL UTILS
# ======================================================

def _timestamp():
    """Returns timestamp for file naming."""
    return datetime.now().strftime("%Y-%m-%d_%H-%M-%S")


def _ensure_dir(path):
    """Ensures an output directory exists."""
    os.makedirs(path, exist_ok=True)


def _filename(output_path, name, ext, stamp):
    suffix = f"_{_timestamp()}" if stamp else ""
    return os.path.join(output_path, f"{name}{suffix}.{ext}")


# ======================================================
# CSV EXPORT
# ======================================================

def export_csv(df, output_path=EXPORT_DIR, name="contradictions", stamp=True):
    """
    Saves a contradiction table to CSV, case labels included.
    """
    _ensure_dir(output_path)
    filename = _filename(output_path, name, "csv", stamp)
    df.to_csv(filename, index=True)
    logger.info("Exported %d rows to %s", len(df), filename)
    return filename


# ======================================================
# JSON EXPORT
# ======================================================

def export_json(df, output_path=EXPORT_DIR, name="contradictions", outcome=DEFAULT_OUTCOME, stamp=True):
    """
    Saves a contradiction table as a list of records:
    {case, conditions, outcome, type}.
    """
    _ensure_dir(output_path)
    filename = _filename(output_path, name, "json", stamp)

    payload = {
        "outcome": outcome,
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "contradictions": contradiction_records(df, outcome=outcome),
    }
    with open(filename, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=4)

    logger.info("Exported %d records to %s", len(df), filename)
    return filename


# ======================================================
# EXCEL EXPORT
# ======================================================

def export_excel(sheets_dict, output_path=EXPORT_DIR, name="contradictions", stamp=True):
    """
    Exports several tables into one Excel workbook.

    Parameters
    ----------
    sheets_dict : dict
        { "SheetName": DataFrame }
    """
    _ensure_dir(output_path)
    filename = _filename(output_path, name, "xlsx", stamp)

    with pd.ExcelWriter(filename, engine="xlsxwriter") as writer:
        for sheet_name, df in sheets_dict.items():
            df.to_excel(writer, sheet_name=sheet_name[:31], index=True)

    logger.info("Exported %d sheets to %s", len(sheets_dict), filename)
    return filename


def export_contradictions(df, fmt="csv", output_path=EXPORT_DIR, outcome=DEFAULT_OUTCOME, name="contradictions"):
    """Dispatches to the exporter for fmt (csv, json or xlsx)."""
    if fmt == "csv":
        return export_csv(df, output_path, name)
    if fmt == "json":
        return export_json(df, output_path, name, outcome=outcome)
    if fmt == "xlsx":
        return export_excel({"Contradictions": df}, output_path, name)
    raise ValueError(f"Unsupported export format '{fmt}'. Use one of: {', '.join(FORMATS)}")
