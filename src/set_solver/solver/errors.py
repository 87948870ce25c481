"""Exceptions raised by the solver."""


class SolverError(Exception):
    """Base error for the Set solver."""


class InvalidLiteral(SolverError, ValueError):
    """Raised when a card or feature code does not match the code vocabulary."""

    def __init__(self, literal, reason: str = "invalid literal"):
        self.literal = literal
        super().__init__(f"{reason}: {literal!r}")


class OverlappingSetError(SolverError, ValueError):
    """Raised when a SetGroup is asked to hold two sets sharing a card."""


class SearchLimitExceeded(SolverError, RuntimeError):
    """Raised when the grouping search frontier grows past its cap."""

    def __init__(self, frontier_size: int, limit: int):
        self.frontier_size = frontier_size
        self.limit = limit
        super().__init__(
            f"search frontier reached {frontier_size} groups (limit {limit})"
        )
