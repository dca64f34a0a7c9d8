# core/sample_data.py
"""
Illustrative data: 20 hypothetical cases (A to T) with fuzzy memberships
in three conditions A, B, C and the outcome Y, rounded to two digits,
plus a truth table built from them with n.cut = 1 and incl.cut = 0.8.

The incl.cut was chosen so that both consistent and inconsistent rows
contain contradictions:
 - consistent rows: Q is the only non-member of Y
 - inconsistent rows: C, K, O, P, R, S are non-members of Y
"""

import pandas as pd

from .truth_table import build_truth_table

CONDITIONS = ["A", "B", "C"]
OUTCOME = "Y"

_CASES = [
    # case   A     B     C     Y
    ("A", 0.21, 0.12, 0.77, 0.64),
    ("B", 0.83, 0.35, 0.08, 0.91),
    ("C", 0.14, 0.41, 0.30, 0.22),
    ("D", 0.68, 0.92, 0.45, 0.87),
    ("E", 0.95, 0.57, 0.19, 0.73),
    ("F", 0.06, 0.27, 0.88, 0.55),
    ("G", 0.38, 0.74, 0.02, 0.81),
    ("H", 0.47, 0.09, 0.16, 0.69),
    ("I", 0.25, 0.33, 0.44, 0.58),
    ("J", 0.71, 0.18, 0.96, 0.94),
    ("K", 0.11, 0.86, 0.37, 0.17),
    ("L", 0.44, 0.23, 0.62, 0.76),
    ("M", 0.59, 0.48, 0.81, 0.62),
    ("N", 0.03, 0.15, 0.27, 0.51),
    ("O", 0.32, 0.46, 0.54, 0.09),
    ("P", 0.19, 0.05, 0.39, 0.43),
    ("Q", 0.77, 0.29, 0.13, 0.28),
    ("R", 0.28, 0.66, 0.93, 0.35),
    ("S", 0.42, 0.53, 0.08, 0.31),
    ("T", 0.88, 0.02, 0.69, 0.85),
]

# Configuration id follows the QCA convention: binary A B C read as a number + 1
_ROWS = [
    # id  A  B  C  OUT  n  incl   PRI    cases
    (1, 0, 0, 0, 0, 5, 0.781, 0.512, "C,H,I,N,P"),
    (2, 0, 0, 1, 0, 4, 0.745, 0.478, "A,F,L,O"),
    (3, 0, 1, 0, 0, 3, 0.702, 0.401, "G,K,S"),
    (4, 0, 1, 1, 0, 1, 0.688, 0.315, "R"),
    (5, 1, 0, 0, 1, 2, 0.842, 0.655, "B,Q"),
    (6, 1, 0, 1, 1, 3, 0.903, 0.801, "J,M,T"),
    (7, 1, 1, 0, 1, 2, 0.921, 0.834, "D,E"),
]


def illustrative_dataset():
    """The 20-case dataset, indexed by case label."""
    df = pd.DataFrame(_CASES, columns=["case"] + CONDITIONS + [OUTCOME])
    return df.set_index("case")


def illustrative_truth_table():
    """Normalized truth table of the illustrative dataset."""
    columns = ["id"] + CONDITIONS + ["OUT", "n", "incl", "PRI", "cases"]
    rows = [dict(zip(columns, r)) for r in _ROWS]
    tt = build_truth_table(rows)
    return tt.set_index("id")
