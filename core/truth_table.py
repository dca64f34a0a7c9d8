# core/truth_table.py
"""
Truth Table Adapter
-------------------
Truth tables are produced elsewhere (the R QCA package, another tool, or
an earlier step of the analysis). This module only reads them: it turns
whatever shape they arrive in into the normalized frame the contradiction
filter expects.

Normalized shape
----------------
• one row per configuration
• OUT   → nullable int: 1 (consistent), 0 (inconsistent), <NA> (undetermined)
• cases → frozenset of case labels (possibly empty)
• any other column (conditions, n, incl, PRI, ...) is kept as-is
"""

import logging
from enum import Enum

import numpy as np
import pandas as pd

from .config import CASES_COLUMN, OUT_COLUMN
from .errors import InvalidTruthTable, MissingColumn

logger = logging.getLogger(__name__)


# ======================================================
# ROW CLASSES
# ======================================================

class RowClass(Enum):
    """Which truth table rows to look at for contradictions."""

    CONSISTENT = "consistent"
    INCONSISTENT = "inconsistent"
    BOTH = "both"

    @property
    def outcomes(self):
        """OUT values selected by this class."""
        if self is RowClass.CONSISTENT:
            return (1,)
        if self is RowClass.INCONSISTENT:
            return (0,)
        return (1, 0)


# Tag written next to each contradictory case
ROW_TAGS = {1: "consistent row", 0: "inconsistent row"}

_ROW_CLASS_ALIASES = {
    "consistent": RowClass.CONSISTENT,
    "1": RowClass.CONSISTENT,
    "inconsistent": RowClass.INCONSISTENT,
    "0": RowClass.INCONSISTENT,
    "both": RowClass.BOTH,
    "all": RowClass.BOTH,
}


def row_class_from_value(value):
    """
    Parses user input into a RowClass.

    Accepts RowClass members, 'consistent' / 'inconsistent' / 'both'
    (case-insensitive), and the QCA shorthand 1 / 0 / 'all'.
    """
    if isinstance(value, RowClass):
        return value
    key = str(value).strip().lower()
    if key not in _ROW_CLASS_ALIASES:
        raise ValueError(
            f"Unknown row class '{value}'. Use consistent, inconsistent or both."
        )
    return _ROW_CLASS_ALIASES[key]


# ======================================================
# NORMALIZATION
# ======================================================

def parse_case_labels(value):
    """
    Case labels of one truth table row as a frozenset.

    Accepts an iterable of labels or a comma-joined string such as
    "J,M,T" (how QCA prints the cases column). Missing values and blank
    strings give an empty set.
    """
    if value is None:
        return frozenset()
    if isinstance(value, str):
        parts = value.split(",")
    elif isinstance(value, (set, frozenset, list, tuple, np.ndarray)):
        parts = value
    elif pd.isna(value):
        return frozenset()
    else:
        parts = [value]
    return frozenset(str(p).strip() for p in parts if str(p).strip())


def parse_outcome(value):
    """
    OUT value of one row: 1, 0, or pd.NA when undetermined ('?', 'C', blank).
    """
    if value is None or value is pd.NA:
        return pd.NA
    if isinstance(value, (bool, np.bool_)):
        return int(value)
    if isinstance(value, (int, float, np.integer, np.floating)):
        if pd.isna(value):
            return pd.NA
        if value in (0, 1):
            return int(value)
        raise InvalidTruthTable(f"Unexpected OUT value: {value!r}")
    text = str(value).strip()
    if text in ("1", "1.0"):
        return 1
    if text in ("0", "0.0"):
        return 0
    if text in ("", "?", "C", "-"):
        return pd.NA
    raise InvalidTruthTable(f"Unexpected OUT value: {value!r}")


def normalize_truth_table(frame):
    """
    Returns a normalized copy of a truth table.

    Raises
    ------
    MissingColumn
        OUT or cases column is missing.
    InvalidTruthTable
        An OUT value cannot be read, or a case label is listed under
        more than one configuration (configurations partition the cases).
    """
    for col in (OUT_COLUMN, CASES_COLUMN):
        if col not in frame.columns:
            raise MissingColumn(col, where="truth table")

    tt = frame.copy()
    tt[OUT_COLUMN] = pd.array([parse_outcome(v) for v in tt[OUT_COLUMN]], dtype="Int64")
    tt[CASES_COLUMN] = pd.Series(
        [parse_case_labels(v) for v in tt[CASES_COLUMN]], index=tt.index, dtype=object
    )

    seen = {}
    for row_id, cases in zip(tt.index, tt[CASES_COLUMN]):
        for label in cases:
            if label in seen:
                raise InvalidTruthTable(
                    f"Case '{label}' is assigned to rows {seen[label]} and {row_id}."
                )
            seen[label] = row_id

    logger.debug(
        "Normalized truth table: %d rows, %d cases assigned", len(tt), len(seen)
    )
    return tt


def build_truth_table(rows):
    """
    Builds a normalized truth table from a list of dicts, e.g.

        [{"A": 1, "B": 0, "OUT": 1, "cases": {"B", "Q"}}, ...]
    """
    return normalize_truth_table(pd.DataFrame(list(rows)))


def assigned_cases(truth_table):
    """All case labels referenced by the truth table."""
    labels = set()
    for cases in truth_table[CASES_COLUMN]:
        labels.update(cases)
    return labels
