# core/loaders.py
"""
File loaders for datasets and truth tables.

CSV/TXT files are decoded with a few common encodings and, when no
delimiter is given, the delimiter is sniffed by pandas. Excel files are
read directly.
"""

import io
import json
import logging
import os

import pandas as pd

from .errors import MissingColumn
from .truth_table import normalize_truth_table

logger = logging.getLogger(__name__)

ENCODINGS = ("utf-8", "latin-1", "cp1252")


# ======================================================
# RAW READERS
# ======================================================

def _decode(content_bytes):
    for encoding in ENCODINGS:
        try:
            return content_bytes.decode(encoding)
        except UnicodeDecodeError:
            continue
    return content_bytes.decode("utf-8", errors="ignore")


def read_table(source, name=None, sep=None):
    """
    Reads a CSV/TXT/Excel table from a path or a file-like object.

    Parameters
    ----------
    source : str or file-like
    name : str, optional
        File name used to pick the reader when source is a buffer.
    sep : str, optional
        Delimiter. None → auto-detected.
    """
    name = name or (source if isinstance(source, str) else getattr(source, "name", ""))
    ext = os.path.splitext(str(name))[1].lower().lstrip(".")

    if ext == "xls":
        raise ValueError("Legacy .xls workbooks are not supported; save the file as .xlsx or CSV.")
    if ext == "xlsx":
        return pd.read_excel(source)

    if isinstance(source, str):
        with open(source, "rb") as f:
            content_bytes = f.read()
    else:
        content_bytes = source.getvalue() if hasattr(source, "getvalue") else source.read()
        if isinstance(content_bytes, str):
            content_bytes = content_bytes.encode("utf-8")

    if ext == "json":
        return pd.DataFrame(json.loads(_decode(content_bytes)))

    text = io.StringIO(_decode(content_bytes))
    if sep is None:
        df = pd.read_csv(text, sep=None, engine="python")
    else:
        df = pd.read_csv(text, sep=sep, engine="python")
    logger.debug("Read %s: %d rows x %d columns", name, df.shape[0], df.shape[1])
    return df


# ======================================================
# DATASET
# ======================================================

def set_case_labels(df, case_column=None):
    """
    Uses a column as the case label index.

    Without case_column, the first column becomes the index when it is not
    numeric (the usual "row names" column of exported QCA data); otherwise
    the frame keeps its index.
    """
    if case_column is not None:
        if case_column not in df.columns:
            raise MissingColumn(case_column)
        out = df.set_index(case_column)
    elif len(df.columns) > 0 and not pd.api.types.is_numeric_dtype(df[df.columns[0]]):
        out = df.set_index(df.columns[0])
    else:
        out = df.copy()
    out.index = out.index.astype(str).str.strip()
    out.index.name = "case"
    return out


def load_dataset(source, case_column=None, sep=None, name=None):
    """Reads a dataset and indexes it by case label."""
    return set_case_labels(read_table(source, name=name, sep=sep), case_column)


# ======================================================
# TRUTH TABLE
# ======================================================

def load_truth_table(source, sep=None, name=None):
    """Reads a truth table (CSV or JSON records) and normalizes it."""
    df = read_table(source, name=name, sep=sep)
    # R exports keep the configuration id as an unnamed first column
    unnamed = [c for c in df.columns if str(c).startswith("Unnamed:")]
    if unnamed:
        df = df.set_index(unnamed[0])
        df.index.name = None
    return normalize_truth_table(df)
