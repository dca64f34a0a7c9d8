"""Tests for membership helpers."""

import numpy as np
import pandas as pd
import pytest

from core.errors import InvalidMembership, MissingColumn
from core.membership import (
    binarize,
    invalid_memberships,
    is_fuzzy,
    membership_columns,
    non_members,
    validate_membership,
)


class TestRangeChecks:

    def test_is_fuzzy(self):
        assert is_fuzzy([0, 0.25, 1])
        assert is_fuzzy([])
        assert not is_fuzzy([0.2, 1.01])
        assert not is_fuzzy([0.2, np.nan])

    def test_invalid_memberships_lists_labels(self):
        s = pd.Series([0.1, 1.5, -0.2, np.inf, 0.9], index=list("abcde"))

        assert invalid_memberships(s) == ["b", "c", "d"]

    def test_validate_passes_on_crisp_and_fuzzy(self):
        df = pd.DataFrame({"X": [0, 1], "Y": [0.3, 0.8]})

        validate_membership(df, ["X", "Y"])

    def test_validate_never_clips(self):
        df = pd.DataFrame({"Y": [0.3, 1.2]})

        with pytest.raises(InvalidMembership):
            validate_membership(df, ["Y"])

        assert df["Y"].iloc[1] == 1.2

    def test_validate_missing_column(self):
        with pytest.raises(MissingColumn):
            validate_membership(pd.DataFrame({"Y": [0.3]}), ["Z"])

    def test_membership_columns_skip_text(self):
        df = pd.DataFrame({"name": ["x"], "A": [0.2], "Y": [0.9]})

        assert membership_columns(df, exclude=["Y"]) == ["A"]


class TestCrispViews:

    def test_binarize_at_crossover(self):
        s = pd.Series([0.49, 0.5, 0.51])

        assert list(binarize(s)) == [0, 1, 1]

    def test_non_members_strictly_below(self):
        s = pd.Series([0.49, 0.5, 0.51])

        assert list(non_members(s)) == [True, False, False]
