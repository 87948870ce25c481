"""
Search for the largest collection of card-disjoint Sets.

The search expands a frontier of SetGroups one Set at a time until a round
leaves the frontier unchanged. Every group in the final frontier is maximal
(no further disjoint Set fits), and the largest of them is the answer.

The number of candidate groups grows exponentially with the number of Sets,
which is fine for table-sized boards (12-21 cards) but not much beyond.
"""

import logging
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple

from .errors import OverlappingSetError, SearchLimitExceeded
from .set_finder import Card, CardSet

logger = logging.getLogger(__name__)


class SetGroup:
    """Pairwise card-disjoint Sets, with the union of their cards cached."""

    def __init__(self, sets: Iterable[CardSet] = ()):
        self._sets: Set[CardSet] = set()
        self._cards: Set[Card] = set()
        for card_set in sets:
            self.add(card_set)

    @property
    def sets(self) -> FrozenSet[CardSet]:
        return frozenset(self._sets)

    @property
    def cards(self) -> FrozenSet[Card]:
        return frozenset(self._cards)

    @property
    def key(self) -> Tuple[Tuple[str, ...], ...]:
        return tuple(sorted(card_set.key for card_set in self._sets))

    def is_disjoint(self, card_set: CardSet) -> bool:
        return card_set.isdisjoint(self._cards)

    def add(self, card_set: CardSet) -> None:
        """Add a Set sharing no card with the group."""
        if not self.is_disjoint(card_set):
            raise OverlappingSetError(f"{card_set!r} shares cards with the group")
        self._sets.add(card_set)
        self._cards.update(card_set.card_set)

    def extended(self, card_set: CardSet) -> "SetGroup":
        """A copy of this group with one more Set; this group is left as is."""
        group = SetGroup()
        group._sets = set(self._sets)
        group._cards = set(self._cards)
        group.add(card_set)
        return group

    def sorted_sets(self) -> List[CardSet]:
        return sorted(self._sets, key=lambda card_set: card_set.key)

    def __len__(self):
        return len(self._sets)

    def __iter__(self):
        return iter(self._sets)

    def __contains__(self, card_set):
        return card_set in self._sets

    # Groups are hashed by content; don't add() to a group once it is in a set.
    def __eq__(self, other):
        if not isinstance(other, SetGroup):
            return NotImplemented
        return self._sets == other._sets

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return f"SetGroup({self.sorted_sets()!r})"


def possible_set_groups(
    sets: Iterable[CardSet],
    max_frontier: Optional[int] = None,
) -> Set[SetGroup]:
    """
    Expand groups of disjoint Sets until no group can grow.

    Args:
        sets: Candidate Sets, normally the output of ``find_all_sets``.
        max_frontier: Raise SearchLimitExceeded if a round produces more groups.

    Returns:
        The final frontier, every group of which is maximal.
    """
    candidates = list(sets)
    frontier = {SetGroup([card_set]) for card_set in candidates}
    rounds = 0
    while True:
        rounds += 1
        next_frontier: Set[SetGroup] = set()
        for group in frontier:
            grew = False
            for card_set in candidates:
                if group.is_disjoint(card_set):
                    next_frontier.add(group.extended(card_set))
                    grew = True
            if not grew:
                next_frontier.add(group)
        logger.debug(f"Round {rounds}: {len(frontier)} -> {len(next_frontier)} groups")
        if max_frontier is not None and len(next_frontier) > max_frontier:
            raise SearchLimitExceeded(len(next_frontier), max_frontier)
        if next_frontier == frontier:
            return frontier
        frontier = next_frontier


def largest_set_group(
    sets: Iterable[CardSet],
    max_frontier: Optional[int] = None,
) -> SetGroup:
    """A group with the most disjoint Sets; ties are broken arbitrarily."""
    groups = possible_set_groups(sets, max_frontier=max_frontier)
    best = max(groups, key=len, default=SetGroup())
    logger.info(f"Largest group has {len(best)} sets ({len(groups)} maximal groups)")
    return best
