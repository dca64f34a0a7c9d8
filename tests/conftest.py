"""Shared fixtures: the illustrative dataset and truth table."""

import pytest

from core.sample_data import illustrative_dataset, illustrative_truth_table


@pytest.fixture
def dataset():
    return illustrative_dataset()


@pytest.fixture
def truth_table():
    return illustrative_truth_table()
