"""Shared fixtures for the Suko test suite."""

import numpy as np
import pytest

from suko.core.constraints import CircleConstraint, ConstraintModel, GroupConstraint
from suko.dataset import CandidateDataset


# Circle values of the published example puzzle
EXAMPLE_CIRCLES = (28, 16, 24, 12)

# Its color clues as (sum, squares numbered 1-9)
EXAMPLE_GROUPS = [(13, [2, 3, 6, 9]), (21, [1, 4, 5]), (11, [7, 8])]

EXAMPLE_SOLUTION = "873942651"

# Every permutation matching the example circles, in lexicographic order
EXAMPLE_CIRCLE_MATCHES = [
    "783941652",
    "854961723",
    "873942651",
    "954861732",
    "963852741",
]


@pytest.fixture
def example_model():
    groups = tuple(GroupConstraint.from_one_indexed(t, c) for t, c in EXAMPLE_GROUPS)
    return ConstraintModel(CircleConstraint(*EXAMPLE_CIRCLES), groups)


@pytest.fixture
def small_dataset():
    """A handful of candidates: the circle matches mixed with non-matching grids."""
    rows = [
        "123456789",
        "783941652",
        "192837465",
        "854961723",
        "873942651",
        "987654321",
        "954861732",
        "963852741",
    ]
    table = np.array([[int(c) for c in row] for row in rows], dtype=np.int8)
    return CandidateDataset(table, source="small")
