# core/contradictions.py
"""
Contradiction Filter
--------------------
Looks up the contradictory cases of a truth table in the underlying
dataset.

A case is a contradiction when it sits in a truth table row classified
as consistent (OUT = 1) or inconsistent (OUT = 0) while its own outcome
membership is below the 0.5 crossover. Instead of reading case labels off
the truth table and subsetting the data by hand, filter_contradictions()
returns those cases with their condition and outcome memberships.

Inputs
 - dataset: DataFrame indexed by case label (memberships in [0, 1])
 - truth_table: normalized truth table (see core.truth_table)

Unknown case labels in the truth table are always an error: a truth table
built from the same dataset cannot reference cases the dataset lacks.
"""

import logging
from typing import Any, Dict, List

import pandas as pd

from .config import CASES_COLUMN, DCC_COLUMN, DEFAULT_OUTCOME, OUT_COLUMN, TYPE_COLUMN
from .errors import InvalidTruthTable, MissingColumn, UnknownCaseLabel
from .membership import membership_columns, non_members, validate_membership
from .truth_table import (
    ROW_TAGS,
    RowClass,
    assigned_cases,
    normalize_truth_table,
    row_class_from_value,
)

logger = logging.getLogger(__name__)


# -------------------------
# Input checks
# -------------------------
def _check_inputs(dataset: pd.DataFrame, truth_table: pd.DataFrame, outcome: str) -> pd.DataFrame:
    """Validates both inputs; returns the truth table in normalized form."""
    if outcome not in dataset.columns:
        raise MissingColumn(outcome)
    truth_table = normalize_truth_table(truth_table)

    if not dataset.index.is_unique:
        dupes = sorted(set(str(l) for l in dataset.index[dataset.index.duplicated()]))
        raise InvalidTruthTable(f"Duplicate case labels in dataset: {', '.join(dupes)}")

    validate_membership(dataset, [outcome] + membership_columns(dataset, exclude=[outcome]))

    known = set(str(l) for l in dataset.index)
    unknown = assigned_cases(truth_table) - known
    if unknown:
        raise UnknownCaseLabel(unknown)
    return truth_table


def _case_tags(truth_table: pd.DataFrame, row_class: RowClass) -> Dict[str, str]:
    """Maps every case label of the selected rows to its row tag."""
    tags: Dict[str, str] = {}
    for out, cases in zip(truth_table[OUT_COLUMN], truth_table[CASES_COLUMN]):
        if pd.isna(out) or int(out) not in row_class.outcomes:
            continue
        for label in cases:
            tags[label] = ROW_TAGS[int(out)]
    return tags


# =========================================================
# Public API
# =========================================================
def filter_contradictions(
    dataset: pd.DataFrame,
    truth_table: pd.DataFrame,
    row_class=RowClass.CONSISTENT,
    outcome: str = DEFAULT_OUTCOME,
) -> pd.DataFrame:
    """
    Contradictory cases of the selected truth table rows.

    Parameters
    ----------
    dataset : pd.DataFrame
        Cases as rows, indexed by case label.
    truth_table : pd.DataFrame
        Normalized truth table with OUT and cases columns.
    row_class : RowClass or str
        CONSISTENT (OUT = 1), INCONSISTENT (OUT = 0) or BOTH.
    outcome : str
        Outcome column in the dataset.

    Returns
    -------
    pd.DataFrame
        Dataset rows (same columns, same order) of the member cases whose
        outcome membership is < 0.5, plus a 'type' column naming the kind
        of row each case came from. Empty when there are no contradictions.
    """
    row_class = row_class_from_value(row_class)
    truth_table = _check_inputs(dataset, truth_table, outcome)
    if TYPE_COLUMN in dataset.columns:
        raise InvalidTruthTable(
            f"Dataset already has a '{TYPE_COLUMN}' column; rename it before filtering "
            "so it is not overwritten by the row tag."
        )

    tags = _case_tags(truth_table, row_class)
    labels = dataset.index.astype(str)

    members = dataset[labels.isin(list(tags))]
    contra = members[non_members(members[outcome])].copy()
    contra[TYPE_COLUMN] = [tags[str(l)] for l in contra.index]

    logger.info(
        "%d contradictory cases in %s rows (%d member cases checked)",
        len(contra), row_class.value, len(members),
    )
    return contra


def contradiction_records(contradictions: pd.DataFrame, outcome: str = DEFAULT_OUTCOME) -> List[Dict[str, Any]]:
    """
    Plain-dict view of a contradiction table:
    {case, conditions: {name: score}, outcome, type}
    """
    if outcome not in contradictions.columns:
        raise MissingColumn(outcome, where="contradiction table")

    condition_cols = membership_columns(contradictions, exclude=[outcome, TYPE_COLUMN])
    records = []
    for label, row in contradictions.iterrows():
        records.append({
            "case": str(label),
            "conditions": {c: float(row[c]) for c in condition_cols},
            "outcome": float(row[outcome]),
            "type": row[TYPE_COLUMN],
        })
    return records


def deviant_cases(
    dataset: pd.DataFrame,
    truth_table: pd.DataFrame,
    outcome: str = DEFAULT_OUTCOME,
) -> pd.DataFrame:
    """
    Truth table copy with a 'dcc' column: for each row, the member cases
    that are non-members of the outcome (deviant cases for consistency
    in kind), in dataset order.
    """
    truth_table = _check_inputs(dataset, truth_table, outcome)

    labels = dataset.index.astype(str)
    deviant = set(labels[non_members(dataset[outcome]).to_numpy()])

    tt = truth_table.copy()
    tt[DCC_COLUMN] = pd.Series(
        [tuple(l for l in labels if l in cases and l in deviant) for cases in tt[CASES_COLUMN]],
        index=tt.index,
        dtype=object,
    )
    return tt


def summarize_contradictions(contradictions: pd.DataFrame) -> Dict[str, int]:
    """Counts of contradictory cases per row type."""
    summary = {tag: 0 for tag in ROW_TAGS.values()}
    if TYPE_COLUMN in contradictions.columns:
        for tag, count in contradictions[TYPE_COLUMN].value_counts().items():
            summary[tag] = int(count)
    summary["total"] = int(len(contradictions))
    return summary


__all__ = [
    "RowClass",
    "filter_contradictions",
    "contradiction_records",
    "deviant_cases",
    "summarize_contradictions",
]
