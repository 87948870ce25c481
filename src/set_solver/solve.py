"""
End-to-end Set solver pipeline.

Board codes -> Cards -> Find Sets -> Largest disjoint group -> Print
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from set_solver.solver import (
    Board,
    CardSet,
    InvalidLiteral,
    SearchLimitExceeded,
    cards_in_sets,
    find_all_sets,
    largest_set_group,
)

logger = logging.getLogger(__name__)

# The 3x4 board the solver runs on when no rows are given
DEFAULT_BOARD = [
    ["3TPS", "2OGD", "2SPD"],
    ["2TGS", "3TRS", "3TGD"],
    ["1TRS", "2SRO", "1OPS"],
    ["3TGO", "1ORS", "1SPO"],
]

# No cap on the grouping search unless asked for
DEFAULT_MAX_FRONTIER: Optional[int] = None

EXIT_OK = 0
EXIT_INVALID_BOARD = 1
EXIT_SEARCH_LIMIT = 3

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _sorted_codes(sets: Iterable[CardSet]) -> List[List[str]]:
    return sorted(card_set.codes() for card_set in sets)


def solve(board: Board, max_frontier: Optional[int] = DEFAULT_MAX_FRONTIER) -> dict:
    """
    Solve a board.

    Args:
        board: Parsed board
        max_frontier: Optional cap on the number of groups the search may hold

    Returns:
        Dict with all Sets found and the largest group of disjoint Sets,
        each Set given as its sorted card codes
    """
    sets = find_all_sets(board)
    best = largest_set_group(sets, max_frontier=max_frontier)
    return {
        "num_cards": len(board),
        "num_sets": len(sets),
        "sets": _sorted_codes(sets),
        "cards_in_sets": sorted(card.code for card in cards_in_sets(sets)),
        "group_size": len(best),
        "group": _sorted_codes(best),
    }


def parse_rows(rows: Optional[List[str]]) -> Board:
    """Build a board from comma-separated rows, or the default board."""
    if not rows:
        return Board.from_layout(DEFAULT_BOARD)
    return Board.from_layout(
        [code.strip() for code in row.split(",") if code.strip()] for row in rows
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find all Sets on a board and the largest group of disjoint Sets"
    )
    parser.add_argument(
        "rows", nargs="*", metavar="ROW",
        help="Comma-separated card codes for one row, e.g. 3TPS,2OGD,2SPD "
             "(default: built-in 3x4 board)",
    )
    parser.add_argument("--all", action="store_true", help="Also print every Set found")
    parser.add_argument(
        "--max-frontier", type=int, default=DEFAULT_MAX_FRONTIER,
        help="Give up if the search holds more than this many groups",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        board = parse_rows(args.rows)
    except InvalidLiteral as exc:
        print(f"Invalid board: {exc}", file=sys.stderr)
        return EXIT_INVALID_BOARD

    sets = find_all_sets(board)
    try:
        best = largest_set_group(sets, max_frontier=args.max_frontier)
    except SearchLimitExceeded as exc:
        print(f"Search aborted: {exc}", file=sys.stderr)
        return EXIT_SEARCH_LIMIT

    if args.all:
        print(f"Found {len(sets)} valid Set(s) among {len(board)} cards:")
        for card_set in sorted(sets, key=lambda s: s.key):
            print(f"  {card_set}")
        print(f"\nLargest group of disjoint Sets ({len(best)}):")

    for card_set in best.sorted_sets():
        print(card_set)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
