"""
Deal random boards.

Draws cards without replacement from the 81-card deck and lays them out as
rows of card codes, the same shape the solver takes as input. Run as a script
to solve a batch of deals and report how large the disjoint groups get.
"""

import argparse
import logging
from collections import Counter
from typing import List

import numpy as np
from tqdm import tqdm

from set_solver.solver import Board, find_all_sets, find_first_set, index_to_card, largest_set_group

logger = logging.getLogger(__name__)

# === Config ===

DECK_SIZE = 81
DEFAULT_BOARD_SIZE = 12
DEFAULT_COLUMNS = 3
MAX_DEAL_ATTEMPTS = 200


def deal_codes(size: int, rng: np.random.Generator) -> List[str]:
    """Draw ``size`` distinct cards and return their codes."""
    if not 0 <= size <= DECK_SIZE:
        raise ValueError(f"board size must be between 0 and {DECK_SIZE}, got {size}")
    indices = rng.choice(DECK_SIZE, size=size, replace=False)
    return [index_to_card(int(idx)).code for idx in indices]


def to_layout(codes: List[str], columns: int = DEFAULT_COLUMNS) -> List[List[str]]:
    """Split codes into rows of ``columns`` cards; the last row may be short."""
    if columns < 1:
        raise ValueError(f"columns must be positive, got {columns}")
    full = len(codes) - len(codes) % columns
    rows = np.array(codes[:full], dtype=object).reshape(-1, columns).tolist()
    if full < len(codes):
        rows.append(codes[full:])
    return rows


def deal_board(
    size: int = DEFAULT_BOARD_SIZE,
    columns: int = DEFAULT_COLUMNS,
    seed=None,
    require_set: bool = True,
) -> List[List[str]]:
    """
    Deal a random board layout.

    Args:
        size: Number of cards
        columns: Cards per row
        seed: RNG seed (int or numpy SeedSequence), same seed gives the same board
        require_set: Redeal (up to MAX_DEAL_ATTEMPTS times) until the board holds a Set

    Returns:
        Rows of card codes
    """
    rng = np.random.default_rng(seed)
    for attempt in range(1, MAX_DEAL_ATTEMPTS + 1):
        codes = deal_codes(size, rng)
        if not require_set or find_first_set(Board.from_codes(codes)) is not None:
            break
        logger.debug(f"Deal {attempt} has no Set, redealing")
    else:
        logger.warning(f"No board with a Set after {MAX_DEAL_ATTEMPTS} deals")
    return to_layout(codes, columns)


def main():
    parser = argparse.ArgumentParser(description="Deal random boards and solve them")
    parser.add_argument("--boards", type=int, default=100, help="Number of boards to deal")
    parser.add_argument("--size", type=int, default=DEFAULT_BOARD_SIZE, help="Cards per board")
    parser.add_argument("--columns", type=int, default=DEFAULT_COLUMNS, help="Cards per row")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--show", action="store_true", help="Print each board")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # One seed sequence for the batch so --seed reproduces the whole run
    seeds = np.random.SeedSequence(args.seed).spawn(args.boards)

    group_sizes = Counter()
    set_counts = Counter()
    for seq in tqdm(seeds, desc="Solving boards"):
        layout = deal_board(args.size, args.columns, seed=seq, require_set=False)
        sets = find_all_sets(Board.from_layout(layout))
        best = largest_set_group(sets)
        set_counts[len(sets)] += 1
        group_sizes[len(best)] += 1
        if args.show:
            tqdm.write("\n".join(" ".join(row) for row in layout))
            tqdm.write(f"  {len(sets)} Set(s), largest group {len(best)}\n")

    print(f"\nSets per board ({args.boards} boards of {args.size} cards):")
    for count in sorted(set_counts):
        print(f"  {count:3d}: {set_counts[count]}")
    print("\nLargest disjoint group:")
    for size in sorted(group_sizes):
        print(f"  {size:3d}: {group_sizes[size]}")


if __name__ == "__main__":
    main()
