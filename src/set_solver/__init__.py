"""Find every Set on a board and the largest group of card-disjoint Sets."""

__version__ = "0.1.0"
