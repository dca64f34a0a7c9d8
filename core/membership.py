# core/membership.py
"""
Membership Utilities for QCA
----------------------------
Small helpers around fuzzy/crisp membership scores:

• Range checks for membership data ([0, 1], no clamping)
• Crisp binarization at the 0.5 crossover
• Non-membership masks used to spot contradictions
"""

import logging

import numpy as np
import pandas as pd

from .config import CROSSOVER
from .errors import InvalidMembership, MissingColumn

logger = logging.getLogger(__name__)


# ======================================================
# RANGE CHECKS
# ======================================================

def is_fuzzy(values):
    """
    True when every value is a finite number within [0, 1].
    Crisp sets (only 0 and 1) qualify as well.
    """
    arr = pd.to_numeric(pd.Series(values), errors="coerce").to_numpy(dtype=float)
    if arr.size == 0:
        return True
    return bool(np.isfinite(arr).all() and (arr >= 0).all() and (arr <= 1).all())


def invalid_memberships(series):
    """
    Returns the index labels of entries that are not valid membership
    scores (non-numeric, NaN, infinite, or outside [0, 1]).
    """
    numeric = pd.to_numeric(series, errors="coerce").astype(float)
    bad = ~np.isfinite(numeric) | (numeric < 0) | (numeric > 1)
    return list(series.index[bad.to_numpy()])


def validate_membership(df, columns):
    """
    Checks that every listed column exists and holds membership scores.

    Raises
    ------
    MissingColumn
        A column is not in the frame.
    InvalidMembership
        A column has a score outside [0, 1]. Scores are never clipped:
        an out-of-range score means calibration went wrong upstream.
    """
    for col in columns:
        if col not in df.columns:
            raise MissingColumn(col)
        bad = invalid_memberships(df[col])
        if bad:
            logger.debug("Invalid memberships in %s: %s", col, bad)
            raise InvalidMembership(col, bad)


def membership_columns(df, exclude=()):
    """Numeric columns of a dataset, i.e. the condition/outcome memberships."""
    return [
        c for c in df.select_dtypes(include=["number", "bool"]).columns
        if c not in set(exclude)
    ]


# ======================================================
# CRISP VIEWS
# ======================================================

def binarize(series, threshold=CROSSOVER):
    """
    Crisp membership: 1 if >= threshold, else 0.
    """
    return (series.astype(float) >= threshold).astype(int)


def non_members(series, threshold=CROSSOVER):
    """
    Boolean mask of cases that are not members of the set
    (membership strictly below the crossover).
    """
    return series.astype(float) < threshold
