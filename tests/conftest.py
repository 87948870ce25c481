"""Shared pytest fixtures for set-solver tests."""

import pytest

from set_solver.solver import Board

CANONICAL_LAYOUT = [
    ["3TPS", "2OGD", "2SPD"],
    ["2TGS", "3TRS", "3TGD"],
    ["1TRS", "2SRO", "1OPS"],
    ["3TGO", "1ORS", "1SPO"],
]

# Worked out by hand from every pair's completion; the four Sets happen to
# partition the board.
CANONICAL_SETS = {
    ("1TRS", "2TGS", "3TPS"),
    ("1SPO", "2OGD", "3TRS"),
    ("1ORS", "2SPD", "3TGO"),
    ("1OPS", "2SRO", "3TGD"),
}

# Single outlined green oval cards on a 3x3 quantity/shape grid: the 12 Sets
# are the lines of a 3x3 affine plane, and disjoint lines are parallel.
PLANE_CODES = [q + "OG" + s for q in "123" for s in "OSD"]


@pytest.fixture
def canonical_board():
    return Board.from_layout(CANONICAL_LAYOUT)


@pytest.fixture
def plane_board():
    return Board.from_codes(PLANE_CODES)


@pytest.fixture
def canonical_sets():
    return set(CANONICAL_SETS)
