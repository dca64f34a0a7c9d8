# core/errors.py
"""
Error taxonomy for the contradiction filter.

Each error also subclasses the builtin the rest of the platform raises
for the same problem (KeyError for missing columns, ValueError for bad
values), so callers that catch builtins keep working.
"""


class ContradictionError(Exception):
    """Base class for every error raised while filtering contradictions."""


class MissingColumn(ContradictionError, KeyError):
    """A required column is absent from the dataset or the truth table."""

    def __init__(self, column, where="dataset"):
        self.column = column
        self.where = where
        super().__init__(f"Column '{column}' not found in {where}.")

    def __str__(self):
        # KeyError quotes its argument; keep the message readable
        return self.args[0]


class UnknownCaseLabel(ContradictionError, KeyError):
    """The truth table references case labels that the dataset does not contain."""

    def __init__(self, labels):
        self.labels = sorted(str(l) for l in labels)
        super().__init__(
            "Truth table references case labels not present in the dataset: "
            + ", ".join(self.labels)
        )

    def __str__(self):
        return self.args[0]


class InvalidMembership(ContradictionError, ValueError):
    """A membership score is non-numeric, missing, or outside [0, 1]."""

    def __init__(self, column, labels):
        self.column = column
        self.labels = [str(l) for l in labels]
        super().__init__(
            f"Column '{column}' holds membership scores outside [0, 1] "
            f"for cases: {', '.join(self.labels)}"
        )


class InvalidTruthTable(ContradictionError, ValueError):
    """The truth table or dataset breaks a structural invariant."""
